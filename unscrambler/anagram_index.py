"""
unscrambler/anagram_index.py

Fixed-bucket hash table of dictionary words, keyed by their normalized
(letter-sorted) form.

Layout:
    buckets[i] = [word, word, ...]    # insertion order, duplicates kept

A word lives in bucket bucket_id(normalize(word), table_size), so a word and
all of its anagrams share one bucket and a lookup only scans that chain.

The table never resizes: table_size is fixed when the index is constructed.
"""

from typing import Iterator, List, Optional

from unscrambler.hasher import bucket_id
from unscrambler.normalizer import normalize
from unscrambler.paths import TABLE_SIZE


class AnagramIndex:
    """
    In-memory anagram lookup table.

    Typical usage:
        idx = AnagramIndex(table_size=101)
        idx.insert("listen")
        idx.insert("silent")

        idx.lookup(normalize("enlist"))   # -> "listen" (first inserted wins)
        idx.lookup("xyz")                 # -> None
        list(idx.iterate())               # -> every word, bucket by bucket

    Build the index first (insert), then query it (lookup / iterate).
    After teardown() the index must not be used again; construct a new one.
    """

    def __init__(self, table_size: int = TABLE_SIZE):
        if isinstance(table_size, bool) or not isinstance(table_size, int):
            raise TypeError(f"table_size must be int, got {type(table_size)}")
        if table_size <= 0:
            raise ValueError(f"table_size must be positive, got {table_size}")
        self.table_size = table_size
        self.buckets: List[List[str]] = [[] for _ in range(table_size)]
        self.count = 0

    def insert(self, word: str):
        """Append `word` (unmodified) to the end of its bucket."""
        self.buckets[bucket_id(normalize(word), self.table_size)].append(word)
        self.count += 1

    def build(self, words) -> int:
        """Insert every word from an iterable. Returns how many were inserted."""
        n = 0
        for w in words:
            self.insert(w)
            n += 1
        return n

    def lookup(self, query: str) -> Optional[str]:
        """
        Return the first inserted word whose normalized form equals `query`,
        or None when nothing matches.

        Callers pass an already normalized query; normalizing again is a no-op.
        """
        key = normalize(query)
        for word in self.buckets[bucket_id(key, self.table_size)]:
            if normalize(word) == key:
                return word
        return None

    def iterate(self) -> Iterator[str]:
        """Yield every stored word: buckets 0..N-1, each in insertion order."""
        for chain in self.buckets:
            for word in chain:
                yield word

    def bucket(self, i: int) -> List[str]:
        """Copy of bucket i."""
        return list(self.buckets[i])

    def stats(self) -> dict:
        used = sum(1 for chain in self.buckets if chain)
        return {
            "table_size": self.table_size,
            "entries": self.count,
            "used_buckets": used,
            "longest_chain": max((len(chain) for chain in self.buckets), default=0),
            "load_factor": self.count / self.table_size,
        }

    def teardown(self):
        """Drop every chain and the table itself. The index is unusable afterwards."""
        for chain in self.buckets:
            chain.clear()
        self.buckets = []
        self.count = 0

    def __len__(self):
        return self.count

    def __iter__(self):
        return self.iterate()
