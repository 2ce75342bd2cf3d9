"""
Fixed-capacity object pools
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Protocol, TypeVar


class Slot(Protocol):  # pylint: disable=too-few-public-methods
    """Anything with an ``active`` flag can live in a pool."""

    active: bool


T = TypeVar("T", bound=Slot)


class ObjectPool(Generic[T]):
    """
    Arena of reusable slots.

    Every slot is built once, up front. Spawning flips a free slot to active,
    despawning flips it back; nothing is allocated after construction.
    """

    def __init__(self, factory: Callable[[], T], capacity: int):
        """
        :param factory: Builds one inactive slot
        :type factory: Callable[[], T]

        :param capacity: Number of slots
        :type capacity: int

        :raise ValueError: If capacity is not positive
        """
        if capacity <= 0:
            raise ValueError(f"Pool capacity must be positive, got {capacity}")

        self._slots: List[T] = [factory() for _ in range(capacity)]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> T:
        return self._slots[index]

    @property
    def capacity(self) -> int:
        """
        Number of slots, fixed at construction

        :return: int
        :rtype: int
        """
        return len(self._slots)

    def acquire(self) -> Optional[T]:
        """
        Return the first inactive slot without activating it.

        :return: A free slot, or None when the pool is exhausted
        :rtype: Optional[T]
        """
        for slot in self._slots:
            if not slot.active:
                return slot
        return None

    def active(self) -> Iterator[T]:
        """Iterate the active slots in pool order."""
        return (slot for slot in self._slots if slot.active)

    def active_count(self) -> int:
        """
        Count the slots currently in use

        :return: int
        :rtype: int
        """
        return sum(1 for slot in self._slots if slot.active)

    def release_all(self) -> None:
        """
        Return every slot to the free list
        """
        for slot in self._slots:
            slot.active = False
