# datastructs

This package provides integer stacks, a growable array, and singly and doubly linked lists. It also includes the classic exercises that are solved with these structures.

It is a library only. It has no command-line interface.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `datastructs.stack`

The module has four stack classes. Where a stack is empty, `pop`, `top` and `peek` raise `IndexError`.

- **`ArrayStack(values=())`** is an array-backed stack.
  - It starts with a capacity of 10 and doubles the capacity when it fills. `capacity` reports the current capacity.
  - Basic methods are `push`, `pop`, `top`, `is_full` and `is_empty`.
  - `insert_at_bottom(value)` puts a value beneath everything else on the stack.
  - There are two ways to reverse the stack:
    - `reverse()` pops every element and re-inserts each one at the bottom.
    - `reverse_in_place()` reverses the storage directly.
  - `to_list()` returns the elements from bottom to top.
  - Iteration and `len()` are supported.
- **`BackFilledStack()`** works the same way, but fills its storage from the last slot towards the first. It has `push`, `pop`, `top`, `is_full`, `is_empty` and `to_list`.
- **`TwinStack()`** holds two stacks in one array:
  - Stack `1` grows from the front and stack `2` grows from the back.
  - Every method takes the stack id: `push(stack_id, value)`, `pop(stack_id)`, `top(stack_id)`, `is_empty(stack_id)` and `to_list(stack_id)`.
  - `is_full()` applies to the shared array.
  - An id other than 1 or 2 raises `ValueError`.
- **`LinkedStack()`** is a stack built on linked nodes, with `push`, `pop`, `peek` and `is_empty`. Iteration goes from top to bottom.

The module also provides these functions:

| Function | What it does |
| --- | --- |
| `reverse_num(num)` | Reverses the decimal digits and keeps the sign. |
| `reverse_words(text)` | Reverses the letters of each space-separated word. Word order is kept. |
| `is_valid(text)` | Checks that `()`, `[]` and `{}` are balanced and properly nested. |
| `remove_duplicates(text)` | Repeatedly removes pairs of equal adjacent characters. |
| `remaining_asteroids(asteroids)` | Returns the asteroids that survive collisions. Positive values move right and negative values move left. The smaller asteroid explodes, and if the sizes are equal both explode. |
| `parentheses_score(text)` | Scores balanced parentheses: `()` is 1, `(X)` is 2·X, and `XY` is X + Y. |
| `next_greater(values)` | For each element, returns the nearest strictly greater element to its right, or -1. |
| `factorial_stack(n)` | Computes `n!` with an explicit stack. A negative `n` raises `ValueError`. |
| `postfix(expression)` | Converts an infix expression of single digits to postfix. |

```python
from datastructs.stack import ArrayStack, postfix, next_greater

s = ArrayStack([1, 2, 3])
s.reverse()
s.to_list()                 # [3, 2, 1]

postfix("(2+3)*4")          # "23+4*"
next_greater([2, 1, 3])     # [3, 3, -1]
```

## `datastructs.vector`

`Vector(size=0)` is a zero-initialised integer array. Its capacity starts at `size + 10` and doubles as the array fills.

Its methods are:

- `get(index)` and `set(index, value)`
- `find(value)`, which returns the first index, or -1
- `front()` and `back()`
- `push_back(value)` and `insert(index, value)`
- `pop(index)`
- `right_rotate(times=1)`, which moves the last `times` elements to the front
- `left_rotate()`, which moves the first element to the back
- `find_transposition(value)`, which moves a found value one place towards the front and returns its new index, or -1

An out-of-range index raises `IndexError`.

## `datastructs.doubly_linked_list`

`DoublyLinkedList(values=())` offers:

- **Inserting:** `insert_front`, `insert_end` and `insert_sorted`.
- **Deleting:**
  - `delete_front` and `delete_end`. Neither does anything on an empty list.
  - `delete_key`, which removes the first match.
  - `delete_all_with_key`.
  - `delete_even_positions` and `delete_odd_positions`. Positions are 1-based.
- **Inspecting:**
  - `is_palindrome`.
  - `find_in_middle`, which returns the second middle for an even length. It raises `IndexError` when the list is empty.
  - `reversed_values`, which returns the values from tail to head.
- **Rearranging:**
  - `reverse`.
  - `swap_forward_backward(k)`, which swaps the k-th values from the front and from the back. It does nothing if `k` exceeds half the length, and raises `ValueError` if `k < 1`.
  - `merge(other)`, which merges a sorted list into this sorted list. `other` is left unchanged.
- **Checking:** `verify_integrity`, which checks head, tail, length and links in both directions. It raises `AssertionError` on the first inconsistency.

## `datastructs.linked_list`

`LinkedList(values=())` is a singly linked list that keeps its head, tail and length. Lists compare equal with `==` when they hold the same values in the same order.

- **Inserting:** `insert_front`, `insert_end` and `insert_sorted`.
- **Looking up:**
  - `get_nth(n)` and `get_nth_from_back(n)`. Positions are 1-based, and an out-of-range position raises `IndexError`.
  - `index(value)`, which returns a 0-based position, or -1.
  - `index_shift_left(value)`, which moves a found value one place towards the head.
  - `is_same(other)`.
  - `max()`, which raises `ValueError` when the list is empty.
- **Deleting:**
  - `delete_front`, `delete_last` and `delete_nth(n)`. Each returns the removed value and raises `IndexError` when there is nothing to remove.
  - `delete_key` and `delete_last_occurrence`. Each raises `ValueError` if the value is absent.
  - `delete_even_positions` and `delete_duplicates`. `delete_duplicates` keeps first occurrences.
  - `remove_repeated`, which drops every value occurring more than once in a sorted list.
- **Rearranging:**
  - `move_to_end(value)`, `swap_pairs`, `swap_head_tail` and `reverse`.
  - `reverse_chains(k)`, which reverses each full block of `k` nodes.
  - `left_rotate(k)`.
  - `arrange_odd_even`, which puts odd positions first, then even positions.
  - `insert_alternating(other)`, which interleaves the nodes of `other` and empties it.
- **Arithmetic:** `add_num(other)` adds two numbers stored as decimal digits, least significant digit first.
- **Checking:** `verify_integrity` raises `AssertionError` on an inconsistent head, tail or length.