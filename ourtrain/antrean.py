"""A first-in, first-out queue of offline ticket-counter numbers."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class AntreanQueue:
    """Queue numbers served in the order they arrive."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def enqueue(self, nomor_antrean: int) -> None:
        self._items.append(nomor_antrean)

    def dequeue(self) -> int:
        if not self._items:
            raise IndexError("Antrian kosong")
        return self._items.popleft()

    def front(self) -> int:
        if not self._items:
            raise IndexError("Antrian kosong")
        return self._items[0]

    def rear(self) -> int:
        if not self._items:
            raise IndexError("Antrian kosong")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def format(self) -> str:
        if not self._items:
            return "Antrian kosong\n"
        body = " -> ".join(str(nomor) for nomor in self._items)
        return f"Isi antrian: {body} -> NULL\n"