from __future__ import annotations


class BabbleError(Exception):
    """Base class for errors raised by the babble engine."""


class EmptyCorpusError(BabbleError, ValueError):
    """The corpus holds no words, so there is nothing to sample from."""


class LogParseError(BabbleError, ValueError):
    def __init__(self, message: str, *, line_no: int = 0, line: str = "") -> None:
        super().__init__(message)
        self.line_no = line_no
        self.line = line


class CorpusFileError(BabbleError):
    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path
