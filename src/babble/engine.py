# babble/engine.py
from __future__ import annotations

import logging
import random
import time
from datetime import tzinfo
from typing import Iterable, Optional

from . import config as CFG
from . import generate as gen
from .index import SuffixArray
from .irssi import read_log
from .loader import assemble_corpus, read_corpus
from .models import GeneratedText, LogEntry

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus loading (plain-text corpus file, Irssi log, or a string),
      - the word-aligned suffix array (build, then sort),
      - the generation loop (babble.generate).

    Public API (used by CLI/Flask):
      * load(path):            read a corpus file -> build -> sort
      * load_log(path, ...):   parse an Irssi log -> assemble -> build -> sort
      * build(text):           build + sort from an in-memory corpus
      * generate(length, k):   return a GeneratedText
      * extend(phrase, k):     one continuation step (None when not found)
      * shutdown():            release the corpus and array

    Randomness comes from one random.Random owned by the engine; pass `seed`
    or `rng` for reproducible output.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.index: Optional[SuffixArray] = None

    # /* ~~~ Build from a pre-extracted corpus file ~~~ */
    def load(self, path: str, *, verbose: bool = False) -> None:
        _setup_logging(verbose)
        log.info("Reading file %s", path)
        t0 = time.perf_counter()
        text = read_corpus(path)
        log.info("Read %d chars in %.2fs", len(text), time.perf_counter() - t0)
        self.build(text)

    # /* ~~~ Build straight from an Irssi log ~~~ */
    def load_log(
        self,
        path: str,
        *,
        line_limit: int = CFG.LINE_LIMIT,
        tz: Optional[tzinfo] = None,
        verbose: bool = False,
    ) -> None:
        _setup_logging(verbose)
        self.build_from_entries(read_log(path, line_limit=line_limit, tz=tz))

    def build_from_entries(self, entries: Iterable[LogEntry]) -> None:
        self.build(assemble_corpus(entries))

    def build(self, text: str) -> None:
        log.info("Generating suffix array...")
        t0 = time.perf_counter()
        sa = SuffixArray.build(text)
        log.info("Suffix array built in %.2fs", time.perf_counter() - t0)

        log.info("Sorting suffix array...")
        t1 = time.perf_counter()
        sa.sort()
        log.info("Suffix array sorted in %.2fs", time.perf_counter() - t1)

        self.index = sa
        log.info("Engine build() complete: suffixes=%d", len(sa))

    # ------------- queries -------------

    def generate(self, length: int = CFG.DEFAULT_SENTENCE_LENGTH, k: int = CFG.DEFAULT_K,
                 rng: Optional[random.Random] = None) -> GeneratedText:
        sa = self._require_index()
        log.info("Generating text (length=%d, k=%d)...", length, k)
        t0 = time.perf_counter()
        out = gen.run(sa, length, k, rng or self.rng)
        log.info("Generated %d phrases (%d fallbacks) in %.2fs",
                 len(out.phrases), out.fallbacks, time.perf_counter() - t0)
        return out

    def extend(self, phrase: str, k: int = CFG.DEFAULT_K) -> Optional[str]:
        return gen.extend(self._require_index(), phrase, k, self.rng)

    def random_phrase(self, k: int = CFG.DEFAULT_K) -> str:
        return gen.random_phrase(self._require_index(), k, self.rng)

    def suffix_count(self) -> int:
        return len(self.index) if self.index is not None else 0

    def shutdown(self) -> None:
        self.index = None

    # ------------- internals -------------

    def _require_index(self) -> SuffixArray:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call load(...) or build(...) first.")
        return self.index


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO)
        CFG.VERBOSE = True
