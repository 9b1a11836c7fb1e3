"""Public module-level API for the babble generator."""
from __future__ import annotations
import time
from typing import Optional
from babble.config import DEFAULT_K, DEFAULT_SENTENCE_LENGTH
from babble.engine import Engine
from babble.models import GeneratedText

_engine: Engine | None = None

def initialize(path: str,
               seed: Optional[int] = None,
               verbose: bool = False) -> None:
    """
    Read a corpus file and get the suffix array ready for generation.
    Calling it again replaces the previous corpus.
    """
    global _engine
    t0 = time.perf_counter()
    eng = Engine(seed=seed)
    eng.load(path, verbose=verbose)
    _engine = eng
    if verbose:
        print(f"[ready] init complete in {time.perf_counter() - t0:.2f}s "
              f"(suffixes={eng.suffix_count():,})")

def generate(length: int = DEFAULT_SENTENCE_LENGTH, k: int = DEFAULT_K) -> GeneratedText:
    """Generate one sentence of `length` phrases from the loaded corpus."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.generate(length, k)
