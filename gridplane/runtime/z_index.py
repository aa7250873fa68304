"""Draw-order index mapping z-levels to insertion-ordered id buckets."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator

from gridplane.api.errors import NotFoundError


class ZIndex:
    """Ordered `(level, ids)` buckets plus a reverse id -> level map.

    Buckets are kept sorted by level and are never empty. Within a bucket
    ids keep insertion order, which breaks draw-order ties.
    """

    def __init__(self) -> None:
        self._levels: list[int] = []
        self._buckets: dict[int, dict[int, None]] = {}
        self._level_of: dict[int, int] = {}

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._level_of

    def __len__(self) -> int:
        return len(self._level_of)

    def __iter__(self) -> Iterator[int]:
        """Yield ids in draw order: ascending level, then insertion order."""
        for level in self._levels:
            yield from self._buckets[level]

    @property
    def levels(self) -> tuple[int, ...]:
        return tuple(self._levels)

    def level_of(self, object_id: int) -> int:
        try:
            return self._level_of[object_id]
        except KeyError:
            raise NotFoundError(f"No object found with ID {object_id!r}") from None

    def bucket(self, level: int) -> tuple[int, ...]:
        return tuple(self._buckets.get(level, ()))

    def set(self, object_id: int, level: int) -> None:
        """Place `object_id` at the end of the bucket for `level`."""
        if object_id in self._level_of:
            self.unset(object_id)
        bucket = self._buckets.get(level)
        if bucket is None:
            bucket = {}
            self._buckets[level] = bucket
            self._levels.insert(bisect_left(self._levels, level), level)
        bucket[object_id] = None
        self._level_of[object_id] = level

    def unset(self, object_id: int) -> None:
        """Remove `object_id`, dropping its bucket when it empties."""
        level = self.level_of(object_id)
        bucket = self._buckets[level]
        del bucket[object_id]
        if not bucket:
            del self._buckets[level]
            self._levels.pop(bisect_left(self._levels, level))
        del self._level_of[object_id]


__all__ = ["ZIndex"]
