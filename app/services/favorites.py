"""Favorites store - ordered, duplicate-free collection of jokes."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from app.schemas import JokeRecord


class FavoritesStore:
    """Keeps favorite jokes in the order they were added."""

    def __init__(self, records: Iterable[JokeRecord] = ()):
        self._favorites: List[JokeRecord] = []
        self.replace_all(records)

    def contains(self, record: JokeRecord) -> bool:
        """Check if a joke is already a favorite."""
        return record in self._favorites

    def add(self, record: JokeRecord) -> bool:
        """Append a joke unless it is already present.

        Returns True only when the joke was inserted.
        """
        if self.contains(record):
            return False
        self._favorites.append(record)
        return True

    def remove(self, record: JokeRecord) -> bool:
        """Remove a joke from favorites."""
        if not self.contains(record):
            return False
        self._favorites.remove(record)
        return True

    def all(self) -> Tuple[JokeRecord, ...]:
        """Get all favorites in insertion order."""
        return tuple(self._favorites)

    def replace_all(self, records: Iterable[JokeRecord]) -> None:
        """Replace every favorite, dropping repeated records."""
        self._favorites = []
        for record in records:
            self.add(record)

    def __contains__(self, record: object) -> bool:
        return record in self._favorites

    def __iter__(self) -> Iterator[JokeRecord]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._favorites)
