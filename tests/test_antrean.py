import pytest

from ourtrain.antrean import AntreanQueue


def test_fifo_order():
    queue = AntreanQueue()
    for nomor in (3, 7, 9):
        queue.enqueue(nomor)
    assert [queue.dequeue() for _ in range(3)] == [3, 7, 9]
    assert len(queue) == 0


def test_front_and_rear():
    queue = AntreanQueue()
    queue.enqueue(4)
    queue.enqueue(8)
    assert queue.front() == 4
    assert queue.rear() == 8
    assert len(queue) == 2


def test_iteration_does_not_consume():
    queue = AntreanQueue()
    queue.enqueue(1)
    queue.enqueue(2)
    assert list(queue) == [1, 2]
    assert len(queue) == 2


def test_empty_errors():
    queue = AntreanQueue()
    with pytest.raises(IndexError):
        queue.dequeue()
    with pytest.raises(IndexError):
        queue.front()
    with pytest.raises(IndexError):
        queue.rear()


def test_single_element_empties():
    queue = AntreanQueue()
    queue.enqueue(5)
    assert queue.dequeue() == 5
    with pytest.raises(IndexError):
        queue.front()


def test_format():
    queue = AntreanQueue()
    assert queue.format() == "Antrian kosong\n"
    queue.enqueue(3)
    queue.enqueue(7)
    assert queue.format() == "Isi antrian: 3 -> 7 -> NULL\n"