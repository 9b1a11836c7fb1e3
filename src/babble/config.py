import os

# generation defaults (CLI flags override)
DEFAULT_SENTENCE_LENGTH: int = 12   # phrase units per sentence
DEFAULT_K: int = 2                  # context width in words

# log parsing
DEFAULT_LOCATION: str = "America/Vancouver"
ENCODING: str = "utf-8"
LINE_LIMIT: int = 0                 # 0 reads the entire log

# /* ~~~ fresh-start redraws before a short phrase is accepted ~~~ */
FRESH_START_ATTEMPTS: int = 32

# /* ~~~ first chunk width when comparing two suffixes; doubles per round ~~~ */
SORT_CHUNK: int = 64

# Progress logging (set BABBLE_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("BABBLE_VERBOSE") == "1"
PROGRESS_EVERY_LINES: int = 100_000
