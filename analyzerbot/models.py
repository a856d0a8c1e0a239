"""Data models for report link processing."""

from __future__ import annotations

import enum
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class ServerScope:
    """Where a server message was posted."""

    server_id: int
    server_name: str
    channel_name: str

    @property
    def label(self) -> str:
        """Return a log label, e.g. 'My Guild (#logs)'."""
        return f"{self.server_name} (#{self.channel_name})"


@dataclass(frozen=True)
class InboundMessage:
    """
    The parts of a chat message the pipeline consumes.

    Attributes:
        content: Message body text.
        embed_urls: URLs attached to the message embeds, in order.
        author_name: Display name of the author, for logging.
        scope: The server the message was posted in, or None for a DM.
        can_send: Whether the bot may post into the message's channel.
        send: Posts text into the message's channel.
    """

    content: str
    embed_urls: tuple[str, ...]
    author_name: str
    scope: ServerScope | None
    can_send: Callable[[], bool]
    send: Callable[[str], Awaitable[Any]]

    @property
    def is_private(self) -> bool:
        return self.scope is None

    @property
    def channel_label(self) -> str:
        return self.scope.label if self.scope else "PM"


@dataclass(frozen=True)
class ParsedReportLink:
    """A link to a single Warcraft Logs report."""

    url: str
    report_code: str
    fight_id: str | None = None
    player_id: str | None = None
    filters: Mapping[str, str] = field(default_factory=dict)

    @property
    def has_advanced_filters(self) -> bool:
        """True when the link narrows the report beyond fight and player."""
        return any(self.filters.values())


@dataclass(frozen=True)
class ReportFetched:
    report_code: str
    report: dict[str, Any]


@dataclass(frozen=True)
class ReportNotFound:
    """The report does not exist or is private."""

    report_code: str
    status: int


@dataclass(frozen=True)
class ReportFetchFailed:
    report_code: str
    error: BaseException


FetchResult = Union[ReportFetched, ReportNotFound, ReportFetchFailed]


class Outcome(enum.Enum):
    """How the handling of one message ended."""

    RESPONDED = "responded"
    DROPPED_NO_SINGLE_LINK = "no_single_link"
    DROPPED_NOT_A_REPORT = "not_a_report"
    DROPPED_ON_COOLDOWN = "on_cooldown"
    DROPPED_ADVANCED_FILTERS = "advanced_filters"
    DROPPED_NOT_FOUND = "not_found"
    DROPPED_FETCH_FAILED = "fetch_failed"
    DROPPED_BUILD_FAILED = "build_failed"
    DROPPED_NO_PERMISSION = "no_permission"
    DROPPED_SEND_FAILED = "send_failed"
