"""
In-memory shopping list the recognized items are appended to.

Rows carry name, quantity, unit and a free-text brand/notes field, plus a
checked flag used for bulk deletion.
"""

import uuid
from dataclasses import asdict, dataclass, field, replace
from typing import Iterable, Iterator, List, Union

from .pipeline import CorrectedItem, RecognitionResult

DEFAULT_UNIT = "un"


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ShoppingItem:
    """One row of the shopping list."""
    id: str = field(default_factory=_new_id)
    name: str = ""
    quantity: str = "1"
    unit: str = DEFAULT_UNIT
    brand: str = ""
    is_checked: bool = False


class ShoppingList:
    """Ordered list of ShoppingItems with the bulk operations the list screen needs."""

    def __init__(self, items: Iterable[ShoppingItem] = ()):
        self._items: List[ShoppingItem] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ShoppingItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> ShoppingItem:
        return self._items[index]

    @property
    def items(self) -> List[ShoppingItem]:
        return list(self._items)

    def add_blank(self) -> ShoppingItem:
        """Append an empty row for manual entry."""
        item = ShoppingItem()
        self._items.append(item)
        return item

    def add_recognized(self, recognized: Union[RecognitionResult, Iterable[CorrectedItem]]) -> int:
        """
        Append recognized items in order.

        Returns:
            Number of rows added
        """
        items = recognized.items if isinstance(recognized, RecognitionResult) else recognized
        added = 0
        for item in items:
            self._items.append(ShoppingItem(name=item.name, quantity=item.quantity))
            added += 1
        return added

    def update(self, index: int, item: ShoppingItem) -> None:
        """Replace the row at index (raises IndexError when out of range)."""
        self._items[index] = item

    def set_checked(self, index: int, checked: bool) -> None:
        self._items[index] = replace(self._items[index], is_checked=checked)

    def set_all_checked(self, checked: bool) -> None:
        self._items = [replace(item, is_checked=checked) for item in self._items]

    @property
    def all_checked(self) -> bool:
        # An empty list is never "all checked"
        return bool(self._items) and all(item.is_checked for item in self._items)

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self._items if item.is_checked)

    def remove_checked(self) -> int:
        """
        Delete checked rows, keeping the order of the rest.

        Returns:
            Number of rows removed
        """
        kept = [item for item in self._items if not item.is_checked]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def to_dicts(self) -> List[dict]:
        return [asdict(item) for item in self._items]
