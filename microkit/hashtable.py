"""Hash table skeleton: prime-sized bucket array with chained items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

TABLE_SIZE = 256
MIN_LOAD_FACTOR = 0.0
MAX_LOAD_FACTOR = 0.8
HTAB_MULTIPLIER = 2
HTAB_DIVISER = 2


@dataclass
class HashItem:
    """A key/value pair chained to the next item in the same bucket."""

    key: str
    value: Any
    next: Optional["HashItem"] = None


@dataclass
class HashTable:
    """A table of ``size`` buckets holding ``count`` items."""

    size: int
    count: int = 0
    items: list[Optional[HashItem]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("hash table size must be at least 1")
        self.items = [None] * self.size

    def load_factor(self) -> float:
        """Return the ratio of stored items to buckets."""
        return self.count / self.size


def is_prime(num: int) -> bool:
    """Return True when ``num`` has exactly two divisors."""
    if num < 2:
        return False
    divisor = 2
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime(num: int) -> int:
    """Return the smallest prime strictly greater than ``num`` if it is prime,
    otherwise the smallest prime greater than ``num``."""
    if is_prime(num):
        num += 1
    while not is_prime(num):
        num += 1
    return num


def create_hashtable(table_size: int) -> HashTable:
    """Create an empty table whose size is the next prime after ``table_size``."""
    if table_size < 1:
        raise ValueError("table size must be at least 1")
    return HashTable(next_prime(table_size))


def hashtable_init() -> HashTable:
    """Create an empty table sized from the default TABLE_SIZE."""
    return create_hashtable(TABLE_SIZE)