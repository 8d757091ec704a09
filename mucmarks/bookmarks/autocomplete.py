"""Prefix completion over a set of strings.

Used to complete bookmarked room JIDs as the user types. Repeated calls
with the same search text cycle through every match, forwards or
backwards, wrapping at either end.
"""

from typing import List, Optional


def _sort_key(value: str) -> tuple:
    return (value.casefold(), value)


class Autocomplete:
    """Sorted, duplicate-free completion list with a cycling cursor."""

    def __init__(self):
        self._items: List[str] = []
        self._search: Optional[str] = None  # Text that started the session
        self._last_found: Optional[str] = None

    def add(self, item: str) -> None:
        """Add an item, keeping the list sorted and unique."""
        if item in self._items:
            return
        self._items.append(item)
        self._items.sort(key=_sort_key)

    def remove(self, item: str) -> None:
        """Remove an item; resets the session if it was under the cursor."""
        if item not in self._items:
            return
        self._items.remove(item)
        if item == self._last_found:
            self.reset()

    def reset(self) -> None:
        """Forget the current completion session, keeping the items."""
        self._search = None
        self._last_found = None

    def clear(self) -> None:
        """Remove every item and reset the session."""
        self._items = []
        self.reset()

    def items(self) -> List[str]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def complete(self, prefix: Optional[str], previous: bool = False) -> Optional[str]:
        """Return the next (or previous) item starting with ``prefix``.

        Matching ignores case, and an empty prefix matches every item.
        A new session starts when ``prefix`` is neither the text that
        started the current session nor the item returned last.

        Args:
            prefix: Text typed so far
            previous: Cycle backwards instead of forwards

        Returns:
            The matching item, or None if nothing matches
        """
        prefix = prefix or ""

        if self._search is not None and prefix in (self._search, self._last_found):
            return self._cycle(previous)

        matches = self._matches(prefix)
        if not matches:
            return None

        self._search = prefix
        self._last_found = matches[-1] if previous else matches[0]
        return self._last_found

    def _matches(self, prefix: str) -> List[str]:
        folded = prefix.casefold()
        return [item for item in self._items if item.casefold().startswith(folded)]

    def _cycle(self, previous: bool) -> Optional[str]:
        matches = self._matches(self._search or "")
        if not matches:
            self.reset()
            return None

        if self._last_found in matches:
            index = matches.index(self._last_found)
            index = index - 1 if previous else index + 1
            self._last_found = matches[index % len(matches)]
        else:
            # Cursor item was removed; restart from the matching end.
            self._last_found = matches[-1] if previous else matches[0]
        return self._last_found
