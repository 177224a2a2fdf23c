# edkit

A compact toolkit of classic introductory programming exercises and data
structures. You can use it as a library, and a small `edkit` command runs a
few demonstrations.

## Contents

- `edkit.arith`
  - `greeting()` returns `"Hello World!"`.
  - `int_div` and `int_rem` do integer division truncated toward zero, with a
    remainder whose sign follows the dividend. `real_div` gives the real-valued
    quotient. All three raise `ZeroDivisionError` when the divisor is zero.
  - `operations(a, b)` returns an `Operations` record with the fields `sum`,
    `difference`, `product`, `quotient`, `real_quotient` and `remainder`.
  - `comparisons(a, b)` lists the relational operators that hold, in the order
    `==`, `!=`, `<`, `>`, `<=`, `>=`.
  - `count_below(numbers, limit=5)` counts the values below a limit.
  - `even_series_sum(start=2, stop=20)` sums every second number up to and
    including `stop`.
  - `average_until_zero(numbers)` averages the values that come before the
    first zero.
  - `mean_and_variance(numbers)` returns the mean and the population variance.
  - `swap(a, b)` returns `(b, a)`.
- `edkit.vectors`
  - `sparse_vector(size, initial, assignments)` builds a zero-filled vector
    from leading values and index assignments.
  - `doubled_indices(size)` builds the vector `[0, 2, 4, ...]`.
  - `double_in_place(values)` doubles each element of a list in place.
  - `format_vector(values, name="c")` renders lines such as `c[0] = 14`.
- `edkit.clock`: `Time(hour=0, minute=0, second=0)` is a dataclass.
  `next_second()` advances the time and wraps around at midnight.
  `str(Time(...))` renders `H:M:S` without zero padding.
- `edkit.stacks`
  - `ArrayStack(capacity=100)` holds a fixed number of items.
  - `LinkedStack` has no fixed limit.
  - Both provide `push`, `pop`, `is_empty`, `is_full`, `len()` and iteration.
  - Errors are `StackFullError` and `StackEmptyError`.
- `edkit.queues`
  - `ArrayQueue(capacity=100)` is a circular buffer.
  - `LinkedQueue` has no fixed limit.
  - Both provide `enqueue`, `dequeue`, `is_empty`, `is_full`, `len()` and
    iteration.
  - Errors are `QueueFullError` and `QueueEmptyError`.
- `edkit.textchecks`: these functions work on the first line of a text.
  - `reverse_text` reverses it through a 100-item stack and raises
    `StackFullError` if the line is longer.
  - `queue_echo` passes it through a 100-item queue and stops once the queue
    is full.
  - `is_balanced` checks that `()`, `[]` and `{}` are matched.
  - `is_palindrome` checks whether the line reads the same both ways.
- `edkit.avl`
  - `AVLTree` stores `Student(ra, name)` records keyed by `ra` and supports
    `insert`, `delete(ra)`, `retrieve(ra)`, `is_empty` and `is_full`.
  - `delete` and `retrieve` raise `KeyError` for unknown keys.
  - `pre_order()`, `in_order()` and `post_order()` yield
    `(student, balance)` entries.
  - `format_order(order)` renders a traversal as `name[balance] ...`. The order
    is one of `"pre"`, `"in"` or `"post"`, or the matching `Order` member.
- `edkit.graph`
  - `Graph(max_vertices=50, null_edge=0)` is an undirected, weighted graph of
    `Vertex(name)` objects stored as an adjacency matrix.
  - It provides `add_vertex`, `add_edge`, `weight`, `adjacents` (which returns
    a `LinkedQueue`), `clear_marks`, `mark`, `is_marked` and `matrix_text`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library usage

```python
from edkit.clock import Time
from edkit.stacks import ArrayStack
from edkit.textchecks import is_balanced, is_palindrome
from edkit.graph import Graph, Vertex

t = Time(23, 59, 59)
t.next_second()
print(t)                      # 0:0:0

stack = ArrayStack()
for ch in "abc":
    stack.push(ch)
print(stack.pop())            # c

print(is_balanced("{[()]}"))  # True
print(is_palindrome("arara")) # True

graph = Graph()
a, b = Vertex("A"), Vertex("B")
graph.add_vertex(a)
graph.add_vertex(b)
graph.add_edge(a, b, 2)
print(graph.weight(b, a))     # 2, edges are undirected
print(graph.matrix_text())    # "0,2,\n2,0,\n"
```

## Command line

The `edkit` command runs one of four demonstrations:

```
edkit time                 # set a clock and roll it over midnight
edkit avl                  # build the student AVL tree, print traversals, delete some
edkit reverse "some text"  # reverse a line
edkit palindrome arara     # check a line for being a palindrome
```

If you leave out the text, `reverse` and `palindrome` read one line from
standard input.

## What it does not do

- The graph has no traversal or shortest-path routines. Marks are stored, but
  nothing in the package uses them.
- The command line has no subcommands for the arithmetic, vector, queue,
  bracket-checking or graph helpers. Use those from Python.