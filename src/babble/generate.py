from __future__ import annotations
import logging
import random
from typing import Optional

from .config import FRESH_START_ATTEMPTS
from .index import SuffixArray
from .models import GeneratedText
from .words import count_words, slice_words

log = logging.getLogger(__name__)


def random_phrase(sa: SuffixArray, k: int, rng: random.Random) -> str:
    """
    Fresh start: the first k words of a uniformly random suffix.

    Picks with fewer than k words (the corpus tail, or the empty suffix left by
    a trailing space) are redrawn a bounded number of times; after that any
    non-empty pick is taken, and the corpus head is the last resort.
    """
    best = ""
    for _ in range(FRESH_START_ATTEMPTS):
        off = sa.offsets[rng.randrange(len(sa))]
        phrase = slice_words(sa.text, 0, k, start=off)
        if count_words(phrase) >= k:
            return phrase
        if len(phrase) > len(best):
            best = phrase
    if best:
        return best
    return slice_words(sa.text, 0, k)


def extend(sa: SuffixArray, phrase: str, k: int, rng: random.Random) -> Optional[str]:
    """
    Continuation: locate `phrase`, sample one suffix from its run and return
    words [k, 2k) of it. The result can hold fewer than k words when the
    sampled suffix reaches the corpus end. None when the phrase has no
    continuation.
    """
    if not phrase:
        return None
    lower = sa.locate(phrase)
    if lower is None:
        return None
    off = sa.sample(lower, phrase, rng)
    if off is None:
        return None
    return slice_words(sa.text, k, k, start=off)


def _next_phrase(sa: SuffixArray, phrase: str, k: int, rng: random.Random,
                 out: GeneratedText) -> str:
    nxt = extend(sa, phrase, k, rng)
    if nxt is None:
        log.debug("Phrase %r not found. Picking at random...", phrase)
    elif count_words(nxt) < k:
        log.debug("Continuation %r of %r is shorter than %d words. Picking at random...",
                  nxt, phrase, k)
        nxt = None
    if nxt is None:
        out.fallbacks += 1
        nxt = random_phrase(sa, k, rng)
        log.debug("Chose %r", nxt)
    return nxt


def run(sa: SuffixArray, length: int, k: int, rng: Optional[random.Random] = None) -> GeneratedText:
    """
    Generate `length` phrases of (up to) k words each.

    The first phrase is a fresh start; each later phrase continues the one
    before it, falling back to a fresh start when there is no continuation or
    only a short one.
    """
    if length <= 0:
        raise ValueError(f"length must be > 0, got {length}")
    if k <= 0:
        raise ValueError(f"k must be > 0, got {k}")
    rng = rng or random.Random()

    out = GeneratedText()
    phrase = ""
    for _ in range(length):
        if not phrase:
            phrase = random_phrase(sa, k, rng)
        else:
            phrase = _next_phrase(sa, phrase, k, rng, out)
        out.phrases.append(phrase)
    return out
