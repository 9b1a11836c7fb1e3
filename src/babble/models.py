# src/babble/models.py
"""
Data models for the babble engine.

This module defines the small, focused data containers shared by the log
parser, the corpus assembler and the text generator:

- EntryKind: the type tag of one parsed log line.
- LogEntry: one typed log line (raw text plus the fields its pattern carries).
- GeneratedText: the phrases produced by one generation run.

These classes do not contain business logic; they only structure the data so
that parsing, indexing and generation remain simple and predictable.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class EntryKind(Enum):
    LOG_OPEN = "log_open"
    JOIN = "join"
    CHANNEL_SUMMARY = "channel_summary"
    MODE = "mode"
    JOIN_SYNC = "join_sync"
    MESSAGE = "message"
    QUIT = "quit"
    NICK_CHANGE = "nick_change"
    DAY_CHANGE = "day_change"
    LOG_CLOSED = "log_closed"
    NOW_TALKING = "now_talking"
    EMOTE = "emote"
    TOPIC = "topic"
    KICK = "kick"
    PART = "part"
    YOUR_NICK_CHANGE = "your_nick_change"
    SERVER_MODE = "server_mode"
    CHANNEL_NOTICE = "channel_notice"
    IGNORE = "ignore"
    SERVER_NOTICE = "server_notice"
    BANS_NONE = "bans_none"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """
    Represents one line of an Irssi channel log.

    Attributes
    ----------
    line : str
        The raw line as read from the log (without trailing EOL). Empty for
        IGNORE entries.
    kind : EntryKind
        Which pattern matched the line.
    time : Optional[datetime]
        Timezone-aware timestamp. Clock-only lines (HH:MM) are placed on the
        date of the most recent "Log opened" / "Day changed" line.
    channel, nick, user_host : str
        Filled in when the pattern carries them, empty otherwise.
    text : str
        Message text, quit/part reason, new nick, topic, and so on. A message
        whose text starts with a space was written by a bot.
    """
    line: str
    kind: EntryKind
    time: Optional[datetime] = None
    channel: str = ""
    nick: str = ""
    user_host: str = ""
    text: str = ""


@dataclass(slots=True)
class GeneratedText:
    """
    The result of one generation run.

    Attributes
    ----------
    phrases : List[str]
        One entry per loop iteration, in order.
    fallbacks : int
        How many iterations fell back to a fresh random phrase because the
        previous phrase had no usable continuation.
    """
    phrases: List[str] = field(default_factory=list)
    fallbacks: int = 0

    @property
    def text(self) -> str:
        return " ".join(self.phrases)
