import pytest

from dsabasics.array_queue import ArrayQueue, QueueOverflowError, QueueUnderflowError, main


def test_fifo_order():
    queue = ArrayQueue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [10, 20, 30]
    assert len(queue) == 0


def test_iteration_front_to_rear():
    queue = ArrayQueue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    queue.dequeue()
    assert list(queue) == [20, 30]
    assert len(queue) == 2


def test_default_capacity_is_five():
    queue = ArrayQueue()
    for value in range(5):
        queue.enqueue(value)
    with pytest.raises(QueueOverflowError, match="Queue Overflow"):
        queue.enqueue(5)
    assert list(queue) == [0, 1, 2, 3, 4]


def test_slots_are_not_reused_after_dequeue():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1
    with pytest.raises(QueueOverflowError):
        queue.enqueue(3)
    assert list(queue) == [2]


def test_dequeue_empty_raises():
    with pytest.raises(QueueUnderflowError, match="Queue Underflow"):
        ArrayQueue().dequeue()


def test_dequeue_past_end_raises():
    queue = ArrayQueue()
    queue.enqueue(7)
    assert queue.dequeue() == 7
    with pytest.raises(QueueUnderflowError):
        queue.dequeue()


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayQueue(capacity)


def test_str():
    queue = ArrayQueue()
    assert str(queue) == "Queue is empty"
    queue.enqueue(10)
    queue.enqueue(20)
    assert str(queue) == "Queue elements: 10 20"
    queue.dequeue()
    queue.dequeue()
    assert str(queue) == "Queue is empty"


def test_main_default(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Queue elements: 10 20 30",
        "Dequeued: 10",
        "Queue elements: 20 30",
    ]


def test_main_reports_overflow(capsys):
    assert main(["4", "5", "6", "--capacity", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Queue Overflow"
    assert lines[2] == "Dequeued: 4"