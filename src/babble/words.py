from __future__ import annotations

from typing import Iterator, Tuple


def iter_words(text: str, start: int = 0) -> Iterator[Tuple[int, str]]:
    """
    Yield (offset, word) for every non-empty word of text[start:].
    Words are delimited by single spaces; runs of spaces produce empty words,
    which are dropped. The text is never copied beyond the words themselves.
    """
    n = len(text)
    pos = start
    while pos < n:
        end = text.find(" ", pos)
        if end == -1:
            end = n
        if end > pos:
            yield pos, text[pos:end]
        pos = end + 1


def slice_words(text: str, skip: int, count: int, start: int = 0) -> str:
    """
    Return `count` words of text[start:] after discarding the first `skip`,
    joined by single spaces. Fewer words are returned, unpadded, when the
    text runs out first.

        >>> slice_words("a b c d e", skip=2, count=2)
        'c d'
        >>> slice_words("a b", skip=0, count=3)
        'a b'
    """
    if count <= 0:
        return ""
    out: list[str] = []
    skipped = 0
    for _, word in iter_words(text, start):
        if skipped < skip:
            skipped += 1
            continue
        out.append(word)
        if len(out) >= count:
            break
    return " ".join(out)


def count_words(phrase: str) -> int:
    """Number of non-empty space-delimited words in phrase."""
    return sum(1 for _ in iter_words(phrase))
