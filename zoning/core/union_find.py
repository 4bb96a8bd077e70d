"""Union find keyed by rect value.

Groups are flat labels: every member of a zone stores the same integer id.
Union relabels one whole group, and isolate moves a single member to a fresh
id, which leaves the labels of the remaining members untouched.
"""

from __future__ import annotations

from collections.abc import Iterator

from zoning.core.errors import DuplicateKeyError, NotFoundError
from zoning.core.geometry import Rect


class RectUnionFind:
    """Rect -> group id partition with union and isolate."""

    def __init__(self) -> None:
        self._ids: dict[Rect, int] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, rect: object) -> bool:
        return rect in self._ids

    def __iter__(self) -> Iterator[Rect]:
        return iter(tuple(self._ids))

    def add(self, rect: Rect) -> int:
        """Insert a rect standing by itself and return its group id."""
        if rect in self._ids:
            raise DuplicateKeyError(f"rect already present: {rect}")
        group_id = self._take_id()
        self._ids[rect] = group_id
        return group_id

    def remove(self, rect: Rect) -> None:
        """Remove a rect from the partition."""
        try:
            del self._ids[rect]
        except KeyError:
            raise NotFoundError(f"rect not present: {rect}") from None

    def root(self, rect: Rect) -> int:
        """Return the group id of a rect."""
        try:
            return self._ids[rect]
        except KeyError:
            raise NotFoundError(f"rect not present: {rect}") from None

    def connected(self, a: Rect, b: Rect) -> bool:
        return self.root(a) == self.root(b)

    def union(self, a: Rect, b: Rect) -> None:
        """Move every member of ``a``'s group into ``b``'s group."""
        source = self.root(a)
        target = self.root(b)
        if source == target:
            return
        for rect, group_id in self._ids.items():
            if group_id == source:
                self._ids[rect] = target

    def isolate(self, rect: Rect) -> int:
        """Give ``rect`` a fresh group id without touching other members."""
        if rect not in self._ids:
            raise NotFoundError(f"rect not present: {rect}")
        group_id = self._take_id()
        self._ids[rect] = group_id
        return group_id

    def all_keys(self) -> list[Rect]:
        return list(self._ids)

    def members_of_group(self, group_id: int) -> list[Rect]:
        return [rect for rect, value in self._ids.items() if value == group_id]

    def members_of_zone(self, rect: Rect) -> list[Rect]:
        """Return every rect sharing ``rect``'s group."""
        return self.members_of_group(self.root(rect))

    def distinct_group_ids(self) -> list[int]:
        """Return group ids in first-observed order."""
        return list(dict.fromkeys(self._ids.values()))

    def group_count(self) -> int:
        return len(set(self._ids.values()))

    def grouped_by_zone(self) -> list[list[Rect]]:
        """Partition all keys by group id, groups in first-observed order."""
        groups: dict[int, list[Rect]] = {}
        for rect, group_id in self._ids.items():
            groups.setdefault(group_id, []).append(rect)
        return list(groups.values())

    def _take_id(self) -> int:
        group_id = self._next_id
        self._next_id += 1
        return group_id
