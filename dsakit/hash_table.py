"""Hash tables of book records: direct addressing and separate chaining."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Record:
    """A book record keyed by an integer."""

    key: int
    title: str = ""
    placement_info: str = ""


class DirectHashTable:
    """A table with one slot per hash value; a new record replaces the slot's occupant."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Optional[Record]] = [None] * size
        self._count = 0

    def _index(self, key: int) -> int:
        return key % self.size

    def __len__(self) -> int:
        return self._count

    def insert(self, record: Record) -> None:
        """Store ``record`` in its slot; raise OverflowError if the table is full."""
        if self._count == self.size:
            raise OverflowError("Hash table is full, cannot insert key value pair.")
        index = self._index(record.key)
        if self._slots[index] is None:
            self._count += 1
        self._slots[index] = record

    def search(self, key: int) -> Record:
        """Return the record with ``key``; raise KeyError if it is absent."""
        record = self._slots[self._index(key)]
        if record is None or record.key != key:
            raise KeyError(key)
        return record

    def delete(self, key: int) -> None:
        """Remove the record with ``key``; raise KeyError if it is absent."""
        index = self._index(key)
        record = self._slots[index]
        if record is None or record.key != key:
            raise KeyError(key)
        self._slots[index] = None
        self._count -= 1


class ChainedHashTable:
    """A hash table resolving collisions by separate chaining."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._buckets: list[list[Record]] = [[] for _ in range(size)]

    def _bucket(self, key: int) -> list[Record]:
        return self._buckets[key % self.size]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[Record]:
        for bucket in self._buckets:
            yield from bucket

    def insert(self, record: Record) -> bool:
        """Add ``record``; return False if its key is already present."""
        bucket = self._bucket(record.key)
        if any(existing.key == record.key for existing in bucket):
            return False
        bucket.append(record)
        return True

    def search(self, key: int) -> Record:
        """Return the record with ``key``; raise KeyError if it is absent."""
        for record in self._bucket(key):
            if record.key == key:
                return record
        raise KeyError(key)

    def delete(self, key: int) -> None:
        """Remove the record with ``key``; raise KeyError if it is absent."""
        bucket = self._bucket(key)
        for position, record in enumerate(bucket):
            if record.key == key:
                del bucket[position]
                return
        raise KeyError(key)

    def show(self) -> str:
        """Return a text listing of every bucket and its chain."""
        lines = ["Index\tValue (Key, Title, PlacementInfo)"]
        for index, bucket in enumerate(self._buckets):
            if not bucket:
                lines.append(f"{index}\t[EMPTY BUCKET]")
            else:
                chain = "".join(
                    f"--> ({r.key}, {r.title}, {r.placement_info})" for r in bucket
                )
                lines.append(f"{index}\t{chain}")
        return "\n".join(lines) + "\n"