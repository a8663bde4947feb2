"""An ordered, case-sensitive collection of header fields."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

DEFAULT_CAPACITY = 2000


class Headers:
    """Header fields kept in insertion order.

    Setting a key that is already present adds another entry; lookups
    return the value of the first entry with that key.
    """

    def __init__(
        self,
        items: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        *,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._capacity = capacity
        self._entries: list[tuple[str, str]] = []
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.set(key, value)

    def set(self, key: str, value: str) -> None:
        """Add a field; raise OverflowError once the capacity is reached."""
        if len(self._entries) >= self._capacity:
            raise OverflowError(f"headers are full ({self._capacity} entries)")
        self._entries.append((key, value))

    def get(self, key: str) -> str | None:
        """Return the first value stored under ``key``, or None."""
        return next((v for k, v in self._entries if k == key), None)

    def keys(self) -> list[str]:
        """Return every key in insertion order, repeats included."""
        return [k for k, _ in self._entries]

    def items(self) -> list[tuple[str, str]]:
        """Return every (key, value) entry in insertion order."""
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"Headers({self._entries!r})"