from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List


INVENTORY_CAPACITY = 10


@dataclass(frozen=True)
class Item:
    id: int
    name: str


class Inventory:
    """Ordered, bounded item box with unique ids.

    Duplicate adds and adds past capacity are silent no-ops; callers only
    learn about them through the ``False`` return value.
    """

    def __init__(
        self,
        name_for: Callable[[int], str],
        capacity: int = INVENTORY_CAPACITY,
        initial: Iterable[int] = (),
    ) -> None:
        self._name_for = name_for
        self.capacity = max(0, int(capacity))
        self._items: List[Item] = []
        for item_id in initial:
            self.add(item_id)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def contains(self, item_id: int) -> bool:
        return any(item.id == int(item_id) for item in self._items)

    def can_add(self, item_id: int) -> bool:
        return not self.is_full and not self.contains(item_id)

    def add(self, item_id: int) -> bool:
        if not self.can_add(item_id):
            return False
        self._items.append(Item(id=int(item_id), name=self._name_for(int(item_id))))
        return True

    def exchange(self, old_id: int, new_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.id == int(old_id):
                self._items[index] = Item(id=int(new_id), name=self._name_for(int(new_id)))
                return True
        return False

    def list(self) -> tuple[Item, ...]:
        return tuple(self._items)
