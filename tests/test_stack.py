import pytest

from dsabasics.stack import ArrayStack, StackOverflowError, StackUnderflowError, main


def test_push_pop_is_lifo():
    stack = ArrayStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [30, 20, 10]
    assert len(stack) == 0


def test_iteration_from_top_to_bottom():
    stack = ArrayStack()
    for value in (10, 20, 30):
        stack.push(value)
    assert list(stack) == [30, 20, 10]


def test_default_capacity_is_five():
    stack = ArrayStack()
    for value in range(5):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(99)
    assert len(stack) == 5


def test_overflow_leaves_stack_unchanged():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError, match="Stack Overflow"):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError, match="Stack Underflow"):
        ArrayStack().pop()


def test_push_after_pop_reuses_space():
    stack = ArrayStack(1)
    stack.push("a")
    assert stack.pop() == "a"
    stack.push("b")
    assert list(stack) == ["b"]


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayStack(capacity)


def test_str():
    stack = ArrayStack()
    assert str(stack) == "Stack is empty"
    stack.push(10)
    stack.push(20)
    assert str(stack) == "Stack elements: 20 10"


def test_main_default(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Stack elements: 30 20 10",
        "Popped: 30",
        "Stack elements: 20 10",
    ]


def test_main_reports_overflow(capsys):
    assert main(["1", "2", "3", "--capacity", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Stack Overflow"
    assert lines[2] == "Popped: 2"