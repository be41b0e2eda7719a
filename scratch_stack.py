from typing import Any, Iterator

from errors import CapacityExceeded, StackUnderflow


class ScratchStack:
    """
    Fixed-capacity LIFO of records of a single type, used as scratch space
    by hull computations. Storage is allocated once; every operation is
    bounds-checked before it touches that storage.
    """

    def __init__(self, capacity: int, record_type: type):
        if capacity <= 0:
            raise ValueError(f'Stack capacity must be positive, got {capacity}')
        self.capacity: int = capacity
        self.record_type: type = record_type
        self._data: list[Any] = [None] * capacity
        self._top: int = -1

    def clear(self):
        self._data[:self._top + 1] = [None] * (self._top + 1)
        self._top = -1

    def push(self, record):
        """
        Put a record on top of the stack.
        Raises CapacityExceeded, without writing, if the stack is already full.
        """
        if not isinstance(record, self.record_type):
            raise TypeError(
                f'Expected {self.record_type.__name__}, got {type(record).__name__}'
            )
        if self.is_full():
            raise CapacityExceeded(f'Scratch stack is full ({self.capacity} records)')
        self._top += 1
        self._data[self._top] = record

    def pop(self):
        """
        Remove and return the top record.
        """
        if self._top < 0:
            raise StackUnderflow('Pop from an empty scratch stack')
        record = self._data[self._top]
        self._data[self._top] = None
        self._top -= 1
        return record

    def peek(self, offset: int = 0):
        """
        Return the record `offset` levels below the top (0 is the top itself).
        """
        if offset < 0 or offset > self._top:
            raise StackUnderflow(
                f'Cannot peek {offset} below the top of a stack holding {self.count()} records'
            )
        return self._data[self._top - offset]

    def count(self) -> int:
        return self._top + 1

    def is_full(self) -> bool:
        return self._top + 1 >= self.capacity

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator:
        """Records from bottom to top."""
        return iter(self._data[:self._top + 1])
