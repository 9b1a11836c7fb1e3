"""
Corpus Assembly and Corpus File I/O

This module turns parsed log entries into the single string the generator
samples from, and moves that string to and from disk.

The corpus is one line of text: the words of every human-written channel
message, in log order, joined by single spaces. Extracting it once and
generating from the extracted file afterwards keeps repeated generation runs
from re-parsing the whole log.

Key Functions:
    assemble_corpus(entries): Join qualifying message text into one string
    read_corpus(path): Load a corpus file
    write_corpus(path, text): Atomically write a corpus file
    extract(log_path, out_path, ...): Log file -> corpus file
"""

# src/babble/loader.py
from __future__ import annotations
import logging
import os
from datetime import tzinfo
from typing import Iterable, Optional

from .config import ENCODING, LINE_LIMIT
from .errors import CorpusFileError
from .irssi import read_log
from .models import EntryKind, LogEntry

log = logging.getLogger(__name__)


def _is_corpus_message(entry: LogEntry) -> bool:
    """
    Messages count toward the corpus unless their text starts with a space,
    which is how the channel's bots write.
    """
    return entry.kind is EntryKind.MESSAGE and not entry.text.startswith(" ")


def assemble_corpus(entries: Iterable[LogEntry]) -> str:
    """
    Join the text of all qualifying messages into one string.

    Each message is split on single spaces; pieces that are blank after
    trimming are dropped and the rest are joined by single spaces, so the
    result has no leading, trailing or doubled spaces.

    Example:
        >>> assemble_corpus([LogEntry("", EntryKind.MESSAGE, text="hi  there"),
        ...                  LogEntry("", EntryKind.MESSAGE, text=" bot says"),
        ...                  LogEntry("", EntryKind.JOIN, text="ignored")])
        'hi there'
    """
    words = []
    for entry in entries:
        if not _is_corpus_message(entry):
            continue
        for word in entry.text.split(" "):
            if word.strip():
                words.append(word)
    return " ".join(words)


def read_corpus(path: str) -> str:
    """
    Read a corpus file into memory, trimming surrounding whitespace (such as a
    final newline added by an editor).
    """
    try:
        with open(path, "r", encoding=ENCODING) as f:
            text = f.read()
    except OSError as e:
        raise CorpusFileError(f"Unable to open file ({e.strerror})", path=path) from e
    except UnicodeDecodeError as e:
        raise CorpusFileError(f"Read error ({e.reason})", path=path) from e
    return text.strip()


def write_corpus(path: str, text: str) -> None:
    """Write via a temporary file and os.replace so readers never see a partial corpus."""
    tmp = f"{path}.tmp"
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(tmp, "w", encoding=ENCODING) as f:
            f.write(text)
        os.replace(tmp, path)
    except OSError as e:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise CorpusFileError(f"Unable to write output file ({e.strerror})", path=path) from e


def extract(log_path: str, out_path: str, *, line_limit: int = LINE_LIMIT,
            tz: Optional[tzinfo] = None) -> str:
    """Parse an Irssi log, assemble its corpus and write it to out_path."""
    log.info("Parsing log %s", log_path)
    entries = read_log(log_path, line_limit=line_limit, tz=tz)
    text = assemble_corpus(entries)
    log.info("Writing corpus to %s (%d chars)", out_path, len(text))
    write_corpus(out_path, text)
    return text
