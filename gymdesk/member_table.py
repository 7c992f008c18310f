"""Hash table of gym members keyed by member ID."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .members import SEPARATOR, Member

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
DEFAULT_SIZE = 30


def fnv1a_32(key: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 bytes of ``key``."""
    value = FNV_OFFSET_BASIS
    for byte in key.encode("utf-8"):
        value ^= byte
        value = (value * FNV_PRIME) & 0xFFFFFFFF
    return value


class MemberTable:
    """Separate-chaining hash table; new members go to the front of their bucket."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("the table size must be positive")
        self._buckets: list[list[Member]] = [[] for _ in range(size)]

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _bucket(self, key: str) -> list[Member]:
        return self._buckets[fnv1a_32(key) % len(self._buckets)]

    def insert(self, member: Member) -> None:
        """Add ``member``; raise ValueError if its ID is already present."""
        bucket = self._bucket(member.member_id)
        if any(existing.member_id == member.member_id for existing in bucket):
            raise ValueError(f"member {member.member_id} already present")
        bucket.insert(0, member)

    def remove(self, key: str) -> Member:
        """Remove and return the member with ID ``key``; raise KeyError if absent."""
        bucket = self._bucket(key)
        for index, member in enumerate(bucket):
            if member.member_id == key:
                return bucket.pop(index)
        raise KeyError(key)

    def find(self, key: str) -> Member | None:
        """Return the member with ID ``key``, or None."""
        return next((m for m in self._bucket(key) if m.member_id == key), None)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key) is not None

    def _search_heads(self, matches) -> list[Member]:
        # Only the most recently inserted member of each bucket is examined.
        return [bucket[0] for bucket in self._buckets if bucket and matches(bucket[0])]

    def search_by_first_name(self, name: str) -> list[Member]:
        """Members at the front of their bucket whose first name is ``name``."""
        return self._search_heads(lambda m: m.first_name == name)

    def search_by_last_name(self, name: str) -> list[Member]:
        """Members at the front of their bucket whose last name is ``name``."""
        return self._search_heads(lambda m: m.last_name == name)

    def search_by_months(self, months: int) -> list[Member]:
        """All members whose subscription lasts ``months`` months."""
        return [m for m in self if m.months == months]

    def __iter__(self) -> Iterator[Member]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def describe(self) -> str:
        """Full descriptions of every member, followed by a blank line."""
        return "".join(m.describe() for m in self) + "\n"

    def summary(self) -> str:
        """A table of ID, last name and first name for every member."""
        lines = [SEPARATOR, f"{'ID':<8} {'Cognome':<15} {'Nome':<15}"]
        lines.extend(m.summary_row() for m in self)
        return "\n".join(lines) + "\n\n"

    def save(self, path: str | Path) -> None:
        """Write every member, one record per line, to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            for member in self:
                handle.write(member.to_record() + "\n")