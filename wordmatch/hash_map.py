"""
Separate-chaining hash map from words to integers.

This is the dictionary store behind the spell checker. Every bucket is a
chain of links; new links go to the front of their chain, so walking a
bucket visits its keys newest first.

Architecture:
    bucket index = ((hash(key) % capacity) + capacity) % capacity

    put() is the only operation that grows the table: once
    size / capacity exceeds the maximum load (0.75) the table doubles and
    every link is rehashed into the new bucket list.

Usage:
    table = HashMap(1000, hash_function=hash_function_2)
    table.put("hello", UNSCORED)

    if table.contains_key("hello"):
        print(table.get("hello"))
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

from .errors import ConfigError, InvariantViolation

logger = logging.getLogger(__name__)

TABLE_MAX_LOAD = 0.75

# Value stored for dictionary words that have not been scored yet
UNSCORED = -1

HashFunction = Callable[[str], int]


def _wrap_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range (two's complement)."""
    return ((value + 2**31) % 2**32) - 2**31


def hash_function_1(key: str) -> int:
    """
    Sum of the character codes of ``key``.

    Examples:
        >>> hash_function_1("ab")
        195
    """
    r = 0
    for c in key:
        r += ord(c)
    return _wrap_int32(r)


def hash_function_2(key: str) -> int:
    """
    Position-weighted sum: character code times its 1-based position.

    Anagrams collide under hash_function_1 but usually not here.

    Examples:
        >>> hash_function_2("ab")
        293
    """
    r = 0
    for i, c in enumerate(key):
        r += (i + 1) * ord(c)
    return _wrap_int32(r)


HASH_FUNCTIONS: Dict[str, HashFunction] = {
    "1": hash_function_1,
    "2": hash_function_2,
    "sum": hash_function_1,
    "weighted": hash_function_2,
}


def resolve_hash_function(name: str) -> HashFunction:
    """
    Look up a hash function by its configuration name.

    Args:
        name: "1"/"sum" or "2"/"weighted" (case-insensitive)

    Returns:
        The hash function

    Raises:
        ConfigError: if the name is unknown
    """
    try:
        return HASH_FUNCTIONS[str(name).strip().lower()]
    except KeyError:
        choices = ", ".join(sorted(HASH_FUNCTIONS))
        raise ConfigError(f"Unknown hash function {name!r} (expected one of: {choices})") from None


@dataclass
class HashLink:
    """One key/value pair stored in a bucket chain."""
    key: str
    value: int


class HashMap:
    """Hash map with chained buckets and doubling growth."""

    def __init__(
        self,
        capacity: int,
        hash_function: HashFunction = hash_function_1,
        max_load: float = TABLE_MAX_LOAD,
    ):
        """
        Initialize an empty table.

        Args:
            capacity: Initial number of buckets (must be positive)
            hash_function: Function mapping a key to an integer
            max_load: Load factor above which put() doubles the capacity
        """
        if capacity is None or capacity <= 0:
            raise InvariantViolation(f"capacity must be positive, got {capacity!r}")
        self.hash_function = hash_function
        self.max_load = max_load
        self._capacity = capacity
        self._size = 0
        self._table: List[List[HashLink]] = [[] for _ in range(capacity)]

    # -------- index / lookup helpers --------
    def _bucket_index(self, key: str, capacity: Optional[int] = None) -> int:
        if key is None:
            raise InvariantViolation("key must not be None")
        if capacity is None:
            capacity = self._capacity
        # hash values may be negative after 32-bit wraparound
        return ((self.hash_function(key) % capacity) + capacity) % capacity

    def get_link(self, key: str) -> Optional[HashLink]:
        """
        Find the link holding ``key``.

        The returned link is live: assigning to its ``value`` updates the
        table in place.

        Args:
            key: Word to look up

        Returns:
            The link, or None if the key is absent
        """
        for link in self._table[self._bucket_index(key)]:
            if link.key == key:
                return link
        return None

    def get(self, key: str) -> Optional[int]:
        """Return the value stored for ``key``, or None if absent."""
        link = self.get_link(key)
        return link.value if link is not None else None

    def contains_key(self, key: str) -> bool:
        """Return True if ``key`` is in the table."""
        return self.get_link(key) is not None

    # -------- mutation --------
    def put(self, key: str, value: int) -> None:
        """
        Insert ``key`` or overwrite its value.

        An existing key keeps its place in the chain and the size does not
        change. A new key is prepended to its bucket; if the load then exceeds
        ``max_load`` the table doubles before this call returns.

        Args:
            key: Word to store
            value: Integer value (UNSCORED for fresh dictionary words)
        """
        index = self._bucket_index(key)
        bucket = self._table[index]
        for link in bucket:
            if link.key == key:
                link.value = value
                return

        bucket.insert(0, HashLink(key, value))
        self._size += 1

        if self.table_load() > self.max_load:
            self.resize(self._capacity * 2)

    def remove(self, key: str) -> None:
        """Remove ``key`` if present. Capacity never shrinks."""
        bucket = self._table[self._bucket_index(key)]
        for i, link in enumerate(bucket):
            if link.key == key:
                del bucket[i]
                self._size -= 1
                return

    def resize(self, capacity: int) -> None:
        """
        Rehash every link into a new bucket list of ``capacity`` buckets.

        Links are visited in bucket order, then chain order, and prepended
        to their new buckets. Keys and values are carried over unchanged.

        Args:
            capacity: New bucket count, strictly larger than the current one
        """
        if capacity is None or capacity <= self._capacity:
            raise InvariantViolation(
                f"resize must grow the table: {capacity!r} <= {self._capacity}"
            )

        new_table: List[List[HashLink]] = [[] for _ in range(capacity)]
        for bucket in self._table:
            for link in bucket:
                new_table[self._bucket_index(link.key, capacity)].insert(0, link)

        logger.debug("Resized table from %d to %d buckets (%d links)",
                     self._capacity, capacity, self._size)
        self._table = new_table
        self._capacity = capacity

    def clear(self) -> None:
        """Drop every link. The capacity is kept."""
        for bucket in self._table:
            bucket.clear()
        self._size = 0

    # -------- introspection --------
    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    def empty_buckets(self) -> int:
        """Number of buckets without any links."""
        return sum(1 for bucket in self._table if not bucket)

    def table_load(self) -> float:
        """Ratio of links to buckets as a float."""
        return self._size / self._capacity

    def entries(self) -> Iterator[HashLink]:
        """Yield every link in bucket order, then chain order."""
        for bucket in self._table:
            yield from bucket

    def dump(self) -> str:
        """
        Render the non-empty buckets, one per line.

        Examples:
            >>> t = HashMap(4)
            >>> t.put("a", 1)
            >>> print(t.dump())
            Bucket 1 -> (a, 1) ->
        """
        lines = []
        for i, bucket in enumerate(self._table):
            if bucket:
                chain = " -> ".join(f"({link.key}, {link.value})" for link in bucket)
                lines.append(f"Bucket {i} -> {chain} ->")
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: str) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        for link in self.entries():
            yield link.key

    def __repr__(self) -> str:
        return f"HashMap(size={self._size}, capacity={self._capacity})"
