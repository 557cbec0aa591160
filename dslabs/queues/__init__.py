"""Array and list queues with a two-queue service simulation."""