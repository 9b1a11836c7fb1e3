from __future__ import annotations
import bisect
import logging
import random
from array import array
from functools import cmp_to_key
from typing import Iterator, Optional

from ..config import SORT_CHUNK
from ..errors import EmptyCorpusError

log = logging.getLogger(__name__)


def _compare_suffixes(text: str, a: int, b: int) -> int:
    """
    Order text[a:] against text[b:] without materialising either suffix.
    Code point order of str matches UTF-8 byte order, so this is the byte-wise
    order of the encoded suffixes.
    """
    if a == b:
        return 0
    width = SORT_CHUNK
    while True:
        x = text[a:a + width]
        y = text[b:b + width]
        if x != y:
            return -1 if x < y else 1
        # equal chunks are full chunks: distinct suffixes differ in length
        a += width
        b += width
        width *= 2


class SuffixArray:
    """
    Word-aligned suffix array over a single corpus string.

    Build-time: offsets in corpus order (one per word start).
    Sorted form: offsets ordered by the text of their suffixes, so suffixes
    sharing a leading phrase sit in one contiguous run. Queries need the
    sorted form.

    Offsets are the only per-suffix state kept; a suffix is the view
    text[offset:], materialised only by suffix().
    """
    def __init__(self, text: str, offsets: array, *, sorted_: bool = False) -> None:
        self.text = text
        self.offsets = offsets
        self._sorted = sorted_

    # -------- Build --------
    @classmethod
    def build(cls, text: str) -> "SuffixArray":
        if not text.strip():
            raise EmptyCorpusError("corpus holds no words; nothing to build a suffix array from")
        offsets = array("q", [0])
        i = text.find(" ")
        while i != -1:
            offsets.append(i + 1)
            i = text.find(" ", i + 1)
        log.info("Built suffix array: suffixes=%d chars=%d", len(offsets), len(text))
        return cls(text, offsets)

    def sort(self) -> "SuffixArray":
        """Sort in place (idempotent) and return self."""
        if self._sorted:
            return self
        text = self.text
        ordered = sorted(self.offsets, key=cmp_to_key(lambda a, b: _compare_suffixes(text, a, b)))
        self.offsets = array("q", ordered)
        self._sorted = True
        return self

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    # -------- Access --------
    def __len__(self) -> int:
        return len(self.offsets)

    def suffix(self, i: int) -> str:
        return self.text[self.offsets[i]:]

    def iter_suffixes(self) -> Iterator[str]:
        for off in self.offsets:
            yield self.text[off:]

    # -------- Query --------
    def locate(self, phrase: str) -> Optional[int]:
        """
        Lower bound of `phrase + " "`: the first index whose suffix is not less
        than the key. The trailing space forces a word-boundary match, so
        "the cat" never matches "theatre cats".
        Returns None when no suffix starts with the key.
        """
        self._require_sorted()
        key = phrase + " "
        text, offsets = self.text, self.offsets
        width = len(key)
        # compare only the first len(key) chars of each suffix
        lo = bisect.bisect_left(offsets, key, key=lambda o: text[o:o + width])
        if lo == len(offsets) or not text.startswith(key, offsets[lo]):
            return None
        return lo

    def sample(self, lower: int, phrase: str, rng: random.Random) -> Optional[int]:
        """
        Pick one suffix uniformly among the run starting at `lower` whose
        suffixes start with `phrase + " "`. Single pass reservoir sampling:
        the j-th candidate replaces the held one with probability 1/(j+1).
        Returns the chosen suffix's corpus offset, or None for an empty run.
        """
        self._require_sorted()
        key = phrase + " "
        text, offsets = self.text, self.offsets
        chosen: Optional[int] = None
        j = 0
        i = lower
        while i < len(offsets) and text.startswith(key, offsets[i]):
            if rng.randrange(j + 1) == 0:
                chosen = offsets[i]
            j += 1
            i += 1
        return chosen

    def run_length(self, phrase: str) -> int:
        """Number of suffixes starting with `phrase + " "`."""
        lower = self.locate(phrase)
        if lower is None:
            return 0
        key = phrase + " "
        i = lower
        while i < len(self.offsets) and self.text.startswith(key, self.offsets[i]):
            i += 1
        return i - lower

    # ------------- internals -------------
    def _require_sorted(self) -> None:
        if not self._sorted:
            raise RuntimeError("SuffixArray is not sorted; call sort() first")
