"""Binary search tree of file records keyed by name or by access date."""