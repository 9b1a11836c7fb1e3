"""
Irssi Channel Log Parser

Turns the lines of an Irssi channel log into typed LogEntry values.

Each line is tried against an ordered table of named matchers; the first one
whose pattern matches builds the entry. Order matters: the message pattern has
to win over the notice and emote patterns, and the keepnick plugin line has to
be caught before the generic server notice.

Timestamps:
    "--- Log opened" / "--- Log closed" lines carry a full date and time.
    "--- Day changed" lines carry a date.
    Every other line only carries HH:MM, which is placed on the date of the
    most recent "Log opened" / "Day changed" line.

Key Functions:
    parse_line(line, tz, current_date): Parse one line
    parse_log(lines, line_limit, tz): Parse an iterable of lines in order
    read_log(path, line_limit, tz): Open a log file and parse it
"""

# src/babble/irssi.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Iterable, List, Optional
from zoneinfo import ZoneInfo

from . import config as CFG
from .config import DEFAULT_LOCATION, ENCODING, LINE_LIMIT, PROGRESS_EVERY_LINES
from .errors import CorpusFileError, LogParseError
from .models import EntryKind, LogEntry

log = logging.getLogger(__name__)

LOG_OPEN_TIME_FORMAT = "%a %b %d %H:%M:%S %Y"
DAY_CHANGE_TIME_FORMAT = "%a %b %d %Y"

_CLOCK = r"^(\d{2}):(\d{2}) "


@dataclass(frozen=True)
class Matcher:
    """One named pattern plus the function building an entry from its match."""
    name: str
    pattern: re.Pattern
    build: Callable[[str, "re.Match[str]", tzinfo, Optional[datetime]], LogEntry]

    def match(self, line: str, tz: tzinfo, current_date: Optional[datetime]) -> Optional[LogEntry]:
        m = self.pattern.match(line)
        if m is None:
            return None
        return self.build(line, m, tz, current_date)


# ---------- timestamp helpers ----------

def _parse_stamp(value: str, fmt: str, tz: tzinfo) -> datetime:
    try:
        return datetime.strptime(value, fmt).replace(tzinfo=tz)
    except ValueError as e:
        raise LogParseError(f"Unable to parse timestamp: {value}: {e}") from e


def _clock_to_time(m: "re.Match[str]", current_date: Optional[datetime], tz: tzinfo) -> datetime:
    """Place the HH:MM of a clock-prefixed line on the current date."""
    hour, minute = int(m.group(1)), int(m.group(2))
    if current_date is None:
        current_date = datetime(1, 1, 1, tzinfo=tz)
    try:
        return datetime(current_date.year, current_date.month, current_date.day,
                        hour, minute, tzinfo=tz)
    except ValueError as e:
        raise LogParseError(f"Unable to parse clock: {m.group(1)}:{m.group(2)}: {e}") from e


def _clocked(kind: EntryKind, **groups: int):
    """
    Build function for a clock-prefixed line; `groups` maps LogEntry fields to
    match group numbers.
    """
    def build(line, m, tz, current_date) -> LogEntry:
        fields = {name: m.group(g) for name, g in groups.items()}
        return LogEntry(line=line, kind=kind, time=_clock_to_time(m, current_date, tz), **fields)
    return build


def _stamped(kind: EntryKind, fmt: str):
    def build(line, m, tz, current_date) -> LogEntry:
        return LogEntry(line=line, kind=kind, time=_parse_stamp(m.group(1), fmt, tz))
    return build


def _ignore(line, m, tz, current_date) -> LogEntry:
    return LogEntry(line="", kind=EntryKind.IGNORE)


# ---------- dispatch table (order is significant) ----------

MATCHERS: List[Matcher] = [
    Matcher("log_open", re.compile(r"^--- Log opened (.+)$"),
            _stamped(EntryKind.LOG_OPEN, LOG_OPEN_TIME_FORMAT)),
    Matcher("join", re.compile(_CLOCK + r"-!- (\S+) \[(\S+?)\] has joined (\S+)$"),
            _clocked(EntryKind.JOIN, nick=3, user_host=4, channel=5)),
    Matcher("channel_summary",
            re.compile(_CLOCK + r"-!- Irssi: (\S+): Total of \d+ nicks "
                                r"\[\d+ ops, \d+ halfops, \d+ voices, \d+ normal\]$"),
            _clocked(EntryKind.CHANNEL_SUMMARY, channel=3)),
    Matcher("mode", re.compile(_CLOCK + r"-!- mode/(\S+) \[.+\] by (\S+)$"),
            _clocked(EntryKind.MODE, channel=3, nick=4)),
    Matcher("join_sync", re.compile(_CLOCK + r"-!- Irssi: Join to (\S+) was synced in \d+ secs$"),
            _clocked(EntryKind.JOIN_SYNC, channel=3)),
    # text can be blank; group 3 is the nick mode prefix (" ", "@", "+")
    Matcher("message", re.compile(_CLOCK + r"<(.)(\S+)> (.*)$"),
            _clocked(EntryKind.MESSAGE, nick=4, text=5)),
    Matcher("quit", re.compile(_CLOCK + r"-!- (\S+) \[(\S+)\] has quit \[(.*)\]$"),
            _clocked(EntryKind.QUIT, nick=3, user_host=4, text=5)),
    Matcher("nick_change", re.compile(_CLOCK + r"-!- (\S+) is now known as (\S+)$"),
            _clocked(EntryKind.NICK_CHANGE, nick=3, text=4)),
    Matcher("day_change", re.compile(r"^--- Day changed (.+)$"),
            _stamped(EntryKind.DAY_CHANGE, DAY_CHANGE_TIME_FORMAT)),
    Matcher("log_closed", re.compile(r"^--- Log closed (.+)$"),
            _stamped(EntryKind.LOG_CLOSED, LOG_OPEN_TIME_FORMAT)),
    Matcher("now_talking", re.compile(_CLOCK + r"-!- Irssi: You are now talking in (\S+)$"),
            _clocked(EntryKind.NOW_TALKING, channel=3)),
    Matcher("emote", re.compile(_CLOCK + r" \* (\S+) (.*)$"),
            _clocked(EntryKind.EMOTE, nick=3, text=4)),
    Matcher("topic", re.compile(_CLOCK + r"-!- (\S+) changed the topic of (\S+) to: (.*)$"),
            _clocked(EntryKind.TOPIC, nick=3, channel=4, text=5)),
    # group 5 is the kicker; only the kicked nick is kept
    Matcher("kick", re.compile(_CLOCK + r"-!- (\S+) was kicked from (\S+) by (\S+) \[(.*)\]$"),
            _clocked(EntryKind.KICK, nick=3, channel=4, text=6)),
    Matcher("part", re.compile(_CLOCK + r"-!- (\S+) \[(\S+)\] has left (\S+) \[(.*)\]$"),
            _clocked(EntryKind.PART, nick=3, user_host=4, channel=5, text=6)),
    Matcher("your_nick_change", re.compile(_CLOCK + r"-!- You're now known as (\S+)$"),
            _clocked(EntryKind.YOUR_NICK_CHANGE, nick=3)),
    Matcher("server_mode", re.compile(_CLOCK + r"-!- ServerMode/(\S+) \[(.+)\] by (\S+)$"),
            _clocked(EntryKind.SERVER_MODE, channel=3, text=4, nick=5)),
    Matcher("channel_notice", re.compile(_CLOCK + r"-(\S+):[+@]?(\S+)- (.*)$"),
            _clocked(EntryKind.CHANNEL_NOTICE, nick=3, channel=4, text=5)),
    Matcher("keepnick", re.compile(_CLOCK + r"-!- Keepnick:"), _ignore),
    Matcher("server_notice", re.compile(_CLOCK + r"!(\S+) (.*)$"),
            _clocked(EntryKind.SERVER_NOTICE, nick=3, text=4)),
    Matcher("bans_none", re.compile(_CLOCK + r"-!- Irssi: No bans in channel (\S+)$"),
            _clocked(EntryKind.BANS_NONE, channel=3)),
]


def parse_line(line: str, tz: tzinfo, current_date: Optional[datetime] = None) -> LogEntry:
    """
    Parse one log line (without trailing EOL).

    Raises LogParseError when no matcher recognises the line or a timestamp
    does not parse.
    """
    for matcher in MATCHERS:
        entry = matcher.match(line, tz, current_date)
        if entry is not None:
            return entry
    raise LogParseError(f"Unrecognized line: {line}", line=line)


def parse_log(lines: Iterable[str], line_limit: int = LINE_LIMIT, tz: Optional[tzinfo] = None) -> List[LogEntry]:
    """
    Parse lines in order into entries.

    line_limit > 0 stops after that many lines. LogParseError raised for a
    line carries its 1-based line number.
    """
    if tz is None:
        tz = load_location()
    entries: List[LogEntry] = []
    current_date: Optional[datetime] = None

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            entry = parse_line(line, tz, current_date)
        except LogParseError as e:
            raise LogParseError(f"Unable to parse line {line_no}: {e}", line_no=line_no, line=line) from e
        entries.append(entry)

        if entry.kind in (EntryKind.LOG_OPEN, EntryKind.DAY_CHANGE):
            t = entry.time
            current_date = datetime(t.year, t.month, t.day, tzinfo=tz)

        if CFG.VERBOSE and line_no % PROGRESS_EVERY_LINES == 0:
            log.info("[parsed] lines=%s", f"{line_no:,}")
        if line_limit > 0 and line_no >= line_limit:
            break

    return entries


def read_log(path: str, line_limit: int = LINE_LIMIT, tz: Optional[tzinfo] = None) -> List[LogEntry]:
    """Open an Irssi log file and parse it."""
    try:
        f = open(path, "r", encoding=ENCODING, errors="replace")
    except OSError as e:
        raise CorpusFileError(f"Unable to open file ({e.strerror})", path=path) from e
    with f:
        entries = parse_log(f, line_limit=line_limit, tz=tz)
    log.info("Parsed %d entries from %s", len(entries), path)
    return entries


def load_location(name: Optional[str] = None) -> tzinfo:
    """Resolve an IANA time zone name (default: config.DEFAULT_LOCATION)."""
    return ZoneInfo(name or DEFAULT_LOCATION)
