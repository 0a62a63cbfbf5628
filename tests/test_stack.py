import math

import pytest

from datastructs.stack import (
    ArrayStack,
    BackFilledStack,
    LinkedStack,
    TwinStack,
    factorial_stack,
    is_valid,
    next_greater,
    parentheses_score,
    postfix,
    remaining_asteroids,
    remove_duplicates,
    reverse_num,
    reverse_words,
)


def test_array_stack_is_lifo():
    stack = ArrayStack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.top() == 3
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty()


def test_array_stack_empty_raises():
    stack = ArrayStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_array_stack_grows_when_full():
    stack = ArrayStack()
    initial = stack.capacity
    for value in range(initial):
        stack.push(value)
    assert stack.is_full()
    stack.push(initial)
    assert stack.capacity == 2 * initial
    assert not stack.is_full()
    assert stack.to_list() == list(range(initial + 1))


def test_array_stack_insert_at_bottom():
    stack = ArrayStack([1, 2, 3])
    stack.insert_at_bottom(9)
    assert stack.to_list() == [9, 1, 2, 3]
    assert stack.top() == 3


@pytest.mark.parametrize("method", ["reverse", "reverse_in_place"])
@pytest.mark.parametrize("values", [[], [7], [1, 2], [4, 8, 15, 16, 23, 42], list(range(25))])
def test_array_stack_reversal(method, values):
    stack = ArrayStack(values)
    getattr(stack, method)()
    assert stack.to_list() == values[::-1]
    getattr(stack, method)()
    assert stack.to_list() == values


def test_back_filled_stack_order_survives_growth():
    stack = BackFilledStack()
    values = list(range(25))
    for value in values:
        stack.push(value)
        assert stack.top() == value
    assert stack.capacity >= len(values)
    assert stack.to_list() == values
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_back_filled_stack_full_and_empty():
    stack = BackFilledStack()
    for value in range(stack.capacity):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(IndexError):
        BackFilledStack().pop()
    with pytest.raises(IndexError):
        BackFilledStack().top()


def test_twin_stack_keeps_stacks_apart():
    stacks = TwinStack()
    for value in range(12):
        stacks.push(1, value)
        stacks.push(2, -value)
    assert stacks.to_list(1) == list(range(12))
    assert stacks.to_list(2) == [-v for v in range(12)]
    assert stacks.top(1) == 11
    assert stacks.top(2) == -11
    assert stacks.pop(1) == 11
    assert stacks.pop(2) == -11
    assert len(stacks) == 22


def test_twin_stack_full_then_grows():
    stacks = TwinStack()
    initial = stacks.capacity
    for value in range(initial):
        stacks.push(1 if value % 2 else 2, value)
    assert stacks.is_full()
    stacks.push(2, 99)
    assert stacks.capacity == 2 * initial
    assert stacks.top(2) == 99


def test_twin_stack_errors():
    stacks = TwinStack()
    assert stacks.is_empty(1) and stacks.is_empty(2)
    with pytest.raises(IndexError):
        stacks.pop(1)
    with pytest.raises(IndexError):
        stacks.top(2)
    with pytest.raises(ValueError):
        stacks.push(3, 1)


def test_linked_stack():
    stack = LinkedStack()
    for value in (5, 6, 7):
        stack.push(value)
    assert len(stack) == 3
    assert list(stack) == [7, 6, 5]
    assert stack.peek() == 7
    assert stack.pop() == 7
    assert stack.pop() == 6
    assert stack.pop() == 5
    assert stack.is_empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_reverse_num_round_trip_and_sign():
    assert reverse_num(reverse_num(12345)) == 12345
    assert reverse_num(-123) == -reverse_num(123)
    assert reverse_num(0) == 0
    assert reverse_num(7) == 7


def test_reverse_words():
    text = "abc de fg"
    result = reverse_words(text)
    assert result == "cba ed gf"
    assert reverse_words(result) == text
    assert [len(w) for w in result.split(" ")] == [len(w) for w in text.split(" ")]


@pytest.mark.parametrize("text", ["", "()", "([]{})", "{[()()]}"])
def test_is_valid_balanced(text):
    assert is_valid(text)


@pytest.mark.parametrize("text", ["(", "(]", "([)]", "a", "())"])
def test_is_valid_unbalanced(text):
    assert not is_valid(text)


def test_remove_duplicates():
    assert remove_duplicates("abc") == "abc"
    assert not remove_duplicates("abba")
    result = remove_duplicates("abbaca")
    assert all(a != b for a, b in zip(result, result[1:]))
    assert remove_duplicates(result) == result


@pytest.mark.parametrize(
    "asteroids, expected",
    [
        ([5, 10, -5], [5, 10]),
        ([8, -8], []),
        ([10, 2, -5], [10]),
        ([-2, -1, 1, 2], [-2, -1, 1, 2]),
        ([1, -2], [-2]),
    ],
)
def test_remaining_asteroids(asteroids, expected):
    assert remaining_asteroids(asteroids) == expected


def test_parentheses_score():
    assert parentheses_score("()") == 1
    assert parentheses_score("(())") == 2
    assert parentheses_score("()()") == parentheses_score("(())")
    assert parentheses_score("(()())") == 2 * parentheses_score("()()")


def test_next_greater():
    assert next_greater([1, 2, 3]) == [2, 3, -1]
    assert next_greater([3, 2, 1]) == [-1, -1, -1]
    assert next_greater([2, 1, 3]) == [3, 3, -1]
    assert next_greater([]) == []


@pytest.mark.parametrize("n", [0, 1, 2, 3, 5, 10])
def test_factorial_stack(n):
    assert factorial_stack(n) == math.factorial(n)


def test_factorial_stack_negative():
    with pytest.raises(ValueError):
        factorial_stack(-1)


def test_postfix():
    assert postfix("(2+3)*4") == "23+4*"
    assert postfix("7") == "7"