"""
Babble: chat-log driven text generation.

Parses Irssi channel logs into typed entries, assembles the human-written
message text into one corpus, and generates new text that imitates it by
sampling a word-aligned suffix array keyed on the previous k words.

Example Usage:
    from babble import Engine

    eng = Engine(seed=7)
    eng.load("corpus.txt")
    print(eng.generate(length=12, k=2).text)
"""

# src/babble/__init__.py
from .engine import Engine
from .errors import BabbleError, CorpusFileError, EmptyCorpusError, LogParseError
from .index import SuffixArray
from .models import EntryKind, GeneratedText, LogEntry

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "SuffixArray",
    "EntryKind",
    "LogEntry",
    "GeneratedText",
    "BabbleError",
    "CorpusFileError",
    "EmptyCorpusError",
    "LogParseError",
]
