# dsabasics

Compact, readable implementations of the data structures and algorithms that
introductory courses cover: array traversal, linear and binary search, bubble
and insertion sort, recursive factorial, a singly linked list, a binary tree
with inorder traversal, and fixed-capacity stacks and queues.

Each topic lives in its own module. It can be imported as a library or run as
a small demonstration command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                  | What it offers                                                        |
|-------------------------|-----------------------------------------------------------------------|
| `dsabasics.arrays`      | `format_elements` – `"Array elements: "` followed by the values       |
| `dsabasics.searching`   | `linear_search`, `binary_search`, `describe_result`                   |
| `dsabasics.sorting`     | `bubble_sort`, `insertion_sort`                                       |
| `dsabasics.recursion`   | `factorial`                                                           |
| `dsabasics.linked_list` | `LinkedList` – singly linked list with insertion at the head          |
| `dsabasics.binary_tree` | `Node` dataclass and the `inorder` generator                          |
| `dsabasics.stack`       | `ArrayStack`, `StackOverflowError`, `StackUnderflowError`             |
| `dsabasics.array_queue` | `ArrayQueue`, `QueueOverflowError`, `QueueUnderflowError`             |

## Library use

```python
from dsabasics.arrays import format_elements
from dsabasics.searching import binary_search, linear_search, describe_result
from dsabasics.sorting import bubble_sort, insertion_sort
from dsabasics.recursion import factorial
from dsabasics.linked_list import LinkedList
from dsabasics.binary_tree import Node, inorder
from dsabasics.stack import ArrayStack
from dsabasics.array_queue import ArrayQueue

format_elements([10, 20, 30])
# 'Array elements: 10 20 30'

binary_search([10, 20, 30, 40, 50], 30)
# 2
linear_search([10, 20, 30], 99)
# None
describe_result(2)
# 'Element found at index 2'
describe_result(None)
# 'Element not found'

bubble_sort([64, 34, 25, 12, 22, 11, 5])
# [5, 11, 12, 22, 25, 34, 64]
insertion_sort([12, 11, 13, 5, 6])
# [5, 6, 11, 12, 13]

factorial(5)
# 120

numbers = LinkedList()
for value in (10, 20, 30):
    numbers.insert(value)
list(numbers), len(numbers), str(numbers)
# ([30, 20, 10], 3, 'Linked List: 30 -> 20 -> 10 -> NULL')

tree = Node(1, Node(2, Node(4), Node(5)), Node(3))
list(inorder(tree))
# [4, 2, 5, 1, 3]

stack = ArrayStack(5)
stack.push(10)
stack.push(20)
stack.pop()
# 20

queue = ArrayQueue(5)
queue.enqueue(10)
queue.enqueue(20)
queue.dequeue()
# 10
```

Notes on behaviour:

- `binary_search` expects its input in ascending order; both searches return
  an index or `None`.
- The sorting functions accept any iterable and return a new list; the input
  is left untouched.
- `factorial` raises `ValueError` for negative numbers.
- `ArrayStack` and `ArrayQueue` take a capacity (default 5); a capacity below
  1 raises `ValueError`. Pushing onto a full stack raises
  `StackOverflowError`, popping an empty one raises `StackUnderflowError`;
  the queue raises `QueueOverflowError` and `QueueUnderflowError` likewise.
- `ArrayQueue` is a linear array queue: its slots are not reused, so once
  `capacity` values have been enqueued it reports overflow even if some have
  been dequeued since.
- Both containers support `len()`, iteration (a stack from top to bottom, a
  queue from front to rear) and `str()`, which gives `"Stack elements: ..."` /
  `"Queue elements: ..."`, or `"Stack is empty"` / `"Queue is empty"`.

## Commands

```
dsa-traverse [VALUES ...]
    Print the given integers, or 10 20 30 40 50, after "Array elements:".

dsa-search [KEY] [--method {binary,linear}] [--values V [V ...]]
    Look KEY up (prompting for it when omitted) in the given values, or in
    10 20 30 40 50. Binary search is the default.

dsa-sort [VALUES ...] [--method {bubble,insertion}]
    Sort the given integers, or a sample array, and print "Sorted array: ...".

dsa-factorial [NUMBER]
    Print the factorial of NUMBER, prompting for it when omitted.

dsa-linked-list [VALUES ...]
    Insert the given integers, or 10 20 30, at the head and print the list.

dsa-tree
    Print the inorder traversal of a small sample tree: 4 2 5 1 3.

dsa-stack [VALUES ...] [--capacity N]
    Push the values (default 10 20 30), show the stack, pop once, show it again.

dsa-queue [VALUES ...] [--capacity N]
    Enqueue the values (default 10 20 30), show the queue, dequeue once,
    show it again.
```

Overflow and underflow in `dsa-stack` and `dsa-queue` are reported as
messages rather than ending the command.

## What it does not do

The containers hold values in memory only; nothing is saved between runs.
The binary tree module offers node construction and inorder traversal, with
no insertion, deletion or other traversal orders.