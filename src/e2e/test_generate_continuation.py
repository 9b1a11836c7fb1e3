import random
from collections import Counter

import pytest
from babble import generate as gen
from babble.engine import Engine
from babble.index import SuffixArray
from babble.words import count_words

CORPUS = "the cat sat on the mat the cat ran"


@pytest.fixture
def sa() -> SuffixArray:
    return SuffixArray.build(CORPUS).sort()


def test_continuation_of_the_cat(sa):
    rng = random.Random(42)
    trials = 2000
    counts = Counter(gen.extend(sa, "the cat", 2, rng) for _ in range(trials))
    assert set(counts) == {"sat on", "ran"}
    assert abs(counts["sat on"] / trials - 0.5) < 0.05


def test_engine_extend_matches_module(sa):
    eng = Engine(seed=3)
    eng.build(CORPUS)
    assert eng.extend("the cat", 2) in {"sat on", "ran"}
    assert eng.extend("no such", 2) is None
    eng.shutdown()


def test_engine_random_phrase():
    eng = Engine(seed=12)
    eng.build(CORPUS)
    for _ in range(50):
        phrase = eng.random_phrase(2)
        assert count_words(phrase) == 2
        assert phrase in CORPUS
    eng.shutdown()
    with pytest.raises(RuntimeError):
        eng.random_phrase(2)


def test_not_found_and_empty_phrase(sa):
    rng = random.Random(0)
    assert gen.extend(sa, "cat ran", 2, rng) is None
    assert gen.extend(sa, "", 2, rng) is None


def test_fresh_start_has_k_words(sa):
    rng = random.Random(7)
    for _ in range(200):
        phrase = gen.random_phrase(sa, 2, rng)
        assert count_words(phrase) == 2
        assert phrase in CORPUS


def test_fresh_start_on_tiny_corpus_is_never_empty():
    sa = SuffixArray.build("hi ").sort()
    rng = random.Random(1)
    for _ in range(50):
        assert gen.random_phrase(sa, 3, rng) == "hi"
