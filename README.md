# stlabs

Small, self-contained exercises on sequences, text and containers.
Each module can be imported as a library and also run as a command.
The package has no dependencies beyond the standard library.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Modules and commands

| Module | Command | What it does |
| --- | --- | --- |
| `stlabs.sorting` | `stlabs-vector [-t] [-p PATH]` | Provides three in-place insertion sorts: `insort_brackets`, `insort_at` and `insort_iter`. With `-t/--tests` it times each sort once on 10 000 random integers. It prints the text file given by `-p/--path` (default `data.txt`) and exits with status 1 if the file cannot be opened. It then reads integers from standard input until a `0` or a token that is not an integer. If the last number is 1, it drops the even numbers. If the last number is 2, it puts three 1s after every multiple of 3. Finally it sorts random float lists of size 5, 10, 25, 50 and 100. |
| `stlabs.text` | `stlabs-text FILE` | Removes tabs and newlines, collapses runs of whitespace and spaces punctuation. Replaces words longer than 10 characters with `Vau!!!`, keeping a trailing punctuation mark. Packs the words into lines of at most 40 characters (`format_text`). |
| `stlabs.zigzag` | `stlabs-zigzag` | `zigzag()` yields items in first, last, second, second-to-last … order. The command prints random lists of sizes 0, 1, 2, 3, 4, 5, 7 and 14. |
| `stlabs.priority_queue` | `stlabs-priority-queue` | `PriorityQueue` holds FIFO queues at the levels `Priority.HIGH`, `NORMAL` and `LOW`. `get()` serves the highest non-empty level and raises `IndexError` when the queue is empty. `accelerate()` moves the low level to the end of the high level. |
| `stlabs.factorial` | `stlabs-factorial` | `FactorialContainer` yields 1! through 10!, computing each value on access. It supports forward and `reversed()` iteration. Its `begin()`/`end()` methods return `FactorialCursor` objects, which have `advance()`, `retreat()` and `value()`. |
| `stlabs.records` | `stlabs-records` | `DataStruct` records. `sort_records()` orders them by `key1`, then `key2`, then string length. The command prints a fixed data set plus five random records, before and after sorting. |
| `stlabs.geometry` | `stlabs-geometry` | Polygons made of `Point` vertices. The module totals vertices and counts shapes by `ShapeType`. `RECTANGLE` counts every four-vertex shape, while squares are recognised by equal sides. It also removes shapes, takes the first vertex of each shape, and orders triangles, squares, rectangles and pentagons stably. |
| `stlabs.words` | `stlabs-words FILE` | Prints the distinct lower-cased words of a file in order of first appearance, followed by their count. Any character that is not an ASCII letter separates words. |
| `stlabs.seqstats` | `stlabs-seqstats` | `Statistics` is a callable that accumulates maximum, minimum, mean, the counts of positive and negative values, the sums of odd and even values, and whether the first and last values match. `report()` renders these statistics. The command runs it over 30 random integers in [-500, 500]. |
| `stlabs.pi` | `stlabs-pi` | `MultiplyByPi` and `multiply_all()` multiply numbers by π. |
| `stlabs.shapes` | `stlabs-shapes` | The classes `Circle`, `Triangle` and `Square` each have a centre, a `draw()` method that prints and returns a line, and the methods `is_more_left()` and `is_upper()`. The command draws ten random shapes unsorted, then sorted left-to-right, right-to-left, top-to-bottom and bottom-to-top. |

Command output, apart from `stlabs-vector`, `stlabs-text` and `stlabs-factorial`, is in Russian.

## Library use

```python
import operator
from stlabs.sorting import insort_iter
from stlabs.text import format_text
from stlabs.priority_queue import PriorityQueue, Element, Priority
from stlabs.factorial import FactorialContainer
from stlabs.seqstats import Statistics

data = [3, 1, 2]
insort_iter(data, operator.lt)          # data is now [1, 2, 3]

lines = format_text("Hello ,world !\tThis is extraordinarily long text.")

queue = PriorityQueue([Element("a")], [], [Element("z")])
queue.put(Element("b"), Priority.NORMAL)
queue.accelerate()
queue.get()                             # Element(name='a')

list(FactorialContainer())              # [1, 2, 6, ..., 3628800]

stats = Statistics()
for value in (4, -3, 7):
    stats(value)
print(stats.report())
```

Functions that produce random data take an optional `random.Random`
instance, so their results can be reproduced.

## Limitations

The `--tests` timing of `stlabs-vector` is a single `time.perf_counter`
measurement per sort. It does no warm-up, repetition or statistical analysis,
so treat its figures as a rough comparison only.