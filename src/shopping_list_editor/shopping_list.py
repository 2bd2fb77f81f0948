from __future__ import annotations
import logging
from typing import Iterable, Iterator
from shopping_list_editor.models import Entry

logger = logging.getLogger(__name__)


class ShoppingListError(Exception):
    pass


class InvalidEntry(ShoppingListError, ValueError):
    pass


class IndexOutOfRange(ShoppingListError, IndexError):
    pass


def _check_entry(entry: Entry) -> None:
    if not isinstance(entry, Entry):
        raise InvalidEntry(f"Expected an Entry, got {type(entry).__name__}.")
    if not entry.name:
        raise InvalidEntry("Item name must not be empty.")
    if entry.quantity <= 0:
        raise InvalidEntry(f"Quantity for '{entry.name}' must be greater than 0, got {entry.quantity}.")


class ShoppingList:
    """Ordered, mutable list of entries. Position is the only identity an entry has."""

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: list[Entry] = []
        self.load(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> Entry:
        self._check_index(index)
        return self._entries[index]

    def __repr__(self) -> str:
        return f"ShoppingList({self._entries!r})"

    def _check_index(self, index: int) -> None:
        # Negative indices are not wrapped: selection is always a real row.
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._entries):
            raise IndexOutOfRange(
                f"No entry at index {index}; the list has {len(self._entries)} entries."
            )

    def add(self, entry: Entry) -> None:
        try:
            _check_entry(entry)
        except InvalidEntry as e:
            logger.warning("Rejected add: %s", e)
            raise
        self._entries.append(entry)
        logger.debug("Added %s at index %d", entry, len(self._entries) - 1)

    def remove_at(self, index: int) -> Entry:
        self._check_index(index)
        removed = self._entries.pop(index)
        logger.debug("Removed %s from index %d", removed, index)
        return removed

    def replace_at(self, index: int, entry: Entry) -> Entry:
        self._check_index(index)
        try:
            _check_entry(entry)
        except InvalidEntry as e:
            logger.warning("Rejected replace at index %d: %s", index, e)
            raise
        previous = self._entries[index]
        self._entries[index] = entry
        logger.debug("Replaced %s with %s at index %d", previous, entry, index)
        return previous

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def load(self, entries: Iterable[Entry]) -> None:
        """Replace the contents wholesale, e.g. with freshly decoded entries.

        Unlike add(), a stored quantity of 0 is accepted; negative quantities are not,
        since they could not be written back out.
        """
        entries = list(entries)
        for entry in entries:
            if not isinstance(entry, Entry):
                raise InvalidEntry(f"Expected an Entry, got {type(entry).__name__}.")
            if entry.quantity < 0:
                raise InvalidEntry(f"Quantity for '{entry.name}' must not be negative, got {entry.quantity}.")
        self._entries = entries
        logger.debug("Loaded %d entries", len(entries))
