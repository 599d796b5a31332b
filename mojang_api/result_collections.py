"""
Ordered, append-only containers for multi-item API results.

Items can only be added, never removed; the sort methods reorder the
items in place and return the collection so calls can be chained.
"""

from typing import Generic, Iterable, Iterator, List, Optional, Type, TypeVar

from mojang_api.models import NameHistoryEntry, ServiceStatus

T = TypeVar("T")

STATUS_PRIORITY = {
    "green": 0,
    "yellow": 1,
    "red": 2,
}


class ResultCollection(Generic[T]):
    item_type: Type = object

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: List[T] = []
        for item in items or ():
            self.add(item)

    def add(self, item: T) -> None:
        if not isinstance(item, self.item_type):
            raise TypeError(
                f"{type(self).__name__} only accepts {self.item_type.__name__}, "
                f"got {type(item).__name__}"
            )
        self._items.append(item)

    def count(self) -> int:
        return len(self._items)

    def to_list(self) -> List[T]:
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class ServiceStatusCollection(ResultCollection[ServiceStatus]):
    item_type = ServiceStatus

    def sort_by_name(self, descending: bool = False) -> "ServiceStatusCollection":
        """Sort by service name, comparing code points (byte-wise for UTF-8)."""
        self._items.sort(key=lambda item: item.name, reverse=descending)
        return self

    def sort_by_status(self, descending: bool = False) -> "ServiceStatusCollection":
        """
        Sort by status with the fixed order green < yellow < red.

        Statuses are compared case-insensitively. Entries with any other
        status keep their position; the known ones are reordered among
        the remaining slots. `descending` reverses the ascending result.
        """
        slots = [
            index
            for index, item in enumerate(self._items)
            if item.status.lower() in STATUS_PRIORITY
        ]
        ranked = sorted(
            (self._items[index] for index in slots),
            key=lambda item: STATUS_PRIORITY[item.status.lower()],
        )
        for index, item in zip(slots, ranked):
            self._items[index] = item

        if descending:
            self._items.reverse()

        return self


class NameHistoryCollection(ResultCollection[NameHistoryEntry]):
    item_type = NameHistoryEntry

    def sort_by_changed_to_at(self, descending: bool = True) -> "NameHistoryCollection":
        """
        Sort by change time, most recent first by default.

        The original name (no change time) counts as the oldest entry.
        Entries with equal times keep their relative order since
        list.sort is stable in both directions.
        """
        self._items.sort(
            key=lambda item: (item.changed_to_at is not None, item.changed_to_at or 0),
            reverse=descending,
        )
        return self

    def current(self) -> Optional[NameHistoryEntry]:
        """Most recently adopted name, or None for an empty history."""
        if not self._items:
            return None
        return max(
            self._items,
            key=lambda item: (item.changed_to_at is not None, item.changed_to_at or 0),
        )
