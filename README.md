# dslabs

Four small console workbenches for exploring classic data structures.
Each one reads from standard input and writes to standard output; the
menus and messages are in Russian. The package has no dependencies
beyond the standard library.

Install:

    pip install .

## Queues: `dslabs-queues`

`dslabs.queues.structures` holds two FIFO queues of floats:

- `ArrayQueue(capacity=2000)`: a ring buffer. `push` raises
  `QueueOverflowError` when full.
- `ListQueue(track_freed=False)`: a linked list with no size limit. With
  `track_freed=True`, `freed_addresses()` lists the nodes removed by
  `pop`.

Both raise `QueueEmptyError` from `pop` on an empty queue, support
`len()`, and list their contents with `entries()`.

`dslabs.queues.simulation.run_simulation(params, queue_1, queue_2, ...)`
models one service unit fed by two queues with uniformly distributed
arrival and service times (bounds in `Params`, defaults T1 = 1..5,
T2 = 0..3, T3 = 0..4, T4 = 0..1). It runs until 1000 first-type requests
are served and returns a `SimulationResult`; `calc_total_time` gives the
theoretical duration. `dslabs.queues.analysis.run_analysis` compares the
two queue kinds on time and memory (500 runs after 20 warm-up runs by
default, so it takes a while).

The `dslabs-queues` menu lets you create either queue, push, pop and print
values, list freed node addresses (list queue only), change T1–T4, run the
simulation on either queue kind, and run the comparison. The program
exits with status 1 if input ends or a simulation overflows a queue.

## File tree: `dslabs-filetree`

`dslabs.filetree.tree.FileTree` is a binary search tree of `FileRecord`s
(name, `Date`, hidden and system flags). It is keyed by name;
`change_sort()` rebuilds it keyed by date and back (raising
`DuplicateRecordError` and leaving the tree unchanged if two records
share the new key). It supports `insert`, `find`, `delete`, `pre_order`,
`in_order`, `post_order` and `delete_older_than(date)`. `export_to_dot`
describes a tree in Graphviz DOT.

A data file holds the record count (1 to 10000) on its first line, then
six lines per record:

    name
    day      (1..31)
    month    (1..12)
    year     (1..2100)
    1 or 2   (2 = hidden)
    1 or 2   (2 = system)

`dslabs.filetree.reader.load_tree(path)` reads such a file into a
name-keyed tree.

`dslabs-filetree-gen` writes a random data file:

    dslabs-filetree-gen > big.txt
    dslabs-filetree-gen --count 500 --seed 1 -o big.txt

It writes 1000 records by default; a date that repeats an earlier one is
moved to the year 2040.

The `dslabs-filetree` menu reads a tree from a file, rebuilds it, draws
it, prints it in each order, adds, deletes and finds records, deletes
records accessed before a given date, and runs a timing comparison of
deleting old records in the name-keyed tree against rebuilding the tree
by date and deleting there. The comparison reads `big.txt` from the
current directory.

## Word index: `dslabs-wordindex`

Reserved words with help text (`WordInfo`; a word must be shorter than
16 bytes) held in one of four structures: `BstTree`, `AvlTree`,
`OpenHashTable` (chaining) or `ClosedHashTable` (linear probing, removed
entries kept as tombstones). Every `insert`, `find` and `remove` returns
the number of comparisons it made; a repeated word raises
`DuplicateWordError`. The hash tables start at 17 slots; in the menu,
when an operation needs more comparisons than the limit (3 by default,
changeable for hash tables only) the table grows to the next prime at
least one and a half times its size.

A word file holds the word count on its first line, then a word line and
a help line for each word. `dslabs.wordindex.loader.read_words(index,
stream)` loads one, raising `WordFileError` on bad data.

The `dslabs-wordindex` menu creates a structure, reads a word file into
it, inserts, finds and removes words, shows the structure (trees are
drawn with Graphviz into `bst_tree.png` or `avl_tree.png`, hash tables
are printed as text), changes the comparison limit, and runs a timing
comparison of all four structures that reads `big.txt` from the current
directory.

## Graphs: `dslabs-graph`

`dslabs.graphs.graph.Graph` is an undirected graph on vertices numbered
from 0, with `add_edge`, `neighbours`, `is_tree(vertex_to_del)` and
`delete_vertex`.

`dslabs-graph` asks for the name of a graph file, draws the graph into
`graph_before.png`, and looks for a vertex whose removal leaves a tree;
if it finds one it removes it and draws the result into
`graph_after.png`. The file holds the vertex count (at least 2) and the
edge count on their own lines; each edge then follows as an empty line
and two lines with the vertex numbers:

    4
    3

    0
    1

    1
    2

    2
    3

Loops and repeated edges are rejected. The program exits with status 5
if the graph is already a tree, 1 if the file name or file cannot be
read, and 0 otherwise.

## Drawing

Tree and graph pictures are written as a Graphviz `graph.gv` file in the
current directory (the working directory of the session for the menu
programs), rendered to PNG with the `dot` command and then opened with
the `open` command. Both must be on your `PATH` for a picture to appear;
the package does not render or display images itself.

## Tests

    pip install .[test]
    pytest