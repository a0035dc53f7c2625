import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import (
    ArrayStack,
    StackEmptyError,
    StackFullError,
    TwoStack,
    delete_middle,
    insert_at_bottom,
    is_valid_parentheses,
    reverse_stack,
    reverse_with_stack,
    sort_stack,
)

_ints = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=20)


def test_array_stack_sample_session():
    stack = ArrayStack(10)
    stack.push(20)
    stack.push(300)
    assert stack.top() == 300
    assert stack.pop() == 300
    assert stack.top() == 20
    stack.pop()
    assert stack.is_empty() is True


def test_array_stack_full_raises():
    stack = ArrayStack(1)
    stack.push(5)
    with pytest.raises(StackFullError):
        stack.push(6)
    assert len(stack) == 1


def test_array_stack_empty_raises():
    stack = ArrayStack(3)
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.top()


@given(_ints)
def test_array_stack_is_lifo(values):
    stack = ArrayStack(len(values))
    for value in values:
        stack.push(value)
    popped = [stack.pop() for _ in values]
    assert popped == values[::-1]


def test_two_stack_independent_ends():
    stacks = TwoStack(4)
    stacks.push1(1)
    stacks.push2(9)
    stacks.push1(2)
    stacks.push2(8)
    with pytest.raises(StackFullError):
        stacks.push1(3)
    assert [stacks.pop1(), stacks.pop1()] == [2, 1]
    assert [stacks.pop2(), stacks.pop2()] == [8, 9]


def test_two_stack_empty_pops_raise():
    stacks = TwoStack(2)
    with pytest.raises(StackEmptyError):
        stacks.pop1()
    with pytest.raises(StackEmptyError):
        stacks.pop2()


def test_two_stack_one_side_can_fill_everything():
    stacks = TwoStack(3)
    for value in (4, 5, 6):
        stacks.push2(value)
    with pytest.raises(StackFullError):
        stacks.push1(7)
    assert stacks.pop2() == 6


@pytest.mark.parametrize(
    "text, expected",
    [
        ("()[]{}", True),
        ("{[()]}", True),
        ("", True),
        ("(]", False),
        (")(", False),
        ("(", False),
        ("(a)", False),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_delete_middle_sample():
    assert delete_middle([0, 1, 2, 3, 4]) == [0, 1, 3, 4]


def test_delete_middle_even_length():
    assert delete_middle([1, 2, 3, 4]) == [1, 3, 4]


def test_delete_middle_empty_raises():
    with pytest.raises(StackEmptyError):
        delete_middle([])


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_delete_middle_removes_one_and_keeps_order(values):
    result = delete_middle(values)
    assert len(result) == len(values) - 1
    assert sorted(result + [values[len(values) - 1 - len(values) // 2]]) == sorted(values)


def test_insert_at_bottom():
    assert insert_at_bottom([1, 2], 9) == [9, 1, 2]


@given(_ints, st.integers())
def test_insert_at_bottom_keeps_top(values, value):
    result = insert_at_bottom(values, value)
    assert result[0] == value
    assert result[1:] == values


@given(_ints)
def test_reverse_stack_twice_is_identity(values):
    assert reverse_stack(reverse_stack(values)) == values


def test_sort_stack_sample():
    assert sort_stack([2, 1, 7, 3, 2]) == [1, 2, 2, 3, 7]


@given(_ints)
def test_sort_stack_is_ordered_permutation(values):
    result = sort_stack(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert sorted(values) == result


def test_reverse_with_stack_sample():
    assert reverse_with_stack("string") == "gnirts"


@given(st.text())
def test_reverse_with_stack_round_trip(text):
    assert reverse_with_stack(reverse_with_stack(text)) == text