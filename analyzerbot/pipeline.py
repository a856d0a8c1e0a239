"""Per-message handling of Warcraft Logs report links."""

from __future__ import annotations

import logging
from typing import Protocol

from .alerts import AlertSink
from .config import DEFAULT_ANALYZER_URL
from .cooldown import CooldownStore
from .formatters import make_analyzer_url
from .models import (
    FetchResult,
    InboundMessage,
    Outcome,
    ReportFetched,
    ReportFetchFailed,
    ReportNotFound,
)
from .parsers import extract_message_urls, parse_report_link

logger = logging.getLogger(__name__)


class ReportFetcher(Protocol):
    async def fetch_fights(self, report_code: str) -> FetchResult: ...


class ReportLinkPipeline:
    """
    Answers report links with WoWAnalyzer links.

    One ``handle_message`` call runs per inbound message; calls for
    different messages may interleave while waiting on the fetch or the
    reply. The cooldown store is the only state they share, and nothing
    is awaited between its check and its update.

    Args:
        cooldowns: Tracks recently answered reports per server.
        fetcher: Loads report metadata from Warcraft Logs.
        alerts: Receives unexpected failures.
        analyzer_url: Base URL of the analyzer site.
    """

    def __init__(
        self,
        cooldowns: CooldownStore,
        fetcher: ReportFetcher,
        alerts: AlertSink,
        analyzer_url: str = DEFAULT_ANALYZER_URL,
    ) -> None:
        self.cooldowns = cooldowns
        self.fetcher = fetcher
        self.alerts = alerts
        self.analyzer_url = analyzer_url

    async def handle_message(self, message: InboundMessage) -> Outcome:
        """
        Run one message through the pipeline.

        Every failure ends handling of this message only; nothing raised
        while fetching, building or sending escapes this method.

        Returns:
            How handling ended.
        """
        channel = message.channel_label
        logger.debug(
            f"[message] {channel} {message.author_name}: {message.content!r} "
            f"({len(message.embed_urls)} embeds)"
        )

        # Messages with several links are most likely not requests for analysis.
        urls = extract_message_urls(message.content, message.embed_urls)
        if len(urls) != 1:
            return Outcome.DROPPED_NO_SINGLE_LINK

        link = parse_report_link(urls[0])
        if link is None:
            return Outcome.DROPPED_NOT_A_REPORT

        scope = message.scope
        if scope is not None:
            if self.cooldowns.is_on_cooldown(scope.server_id, link.report_code):
                logger.debug(
                    f"Ignoring {link.url} in {channel}: already seen report recently."
                )
                return Outcome.DROPPED_ON_COOLDOWN
            self.cooldowns.purge_expired()
            self.cooldowns.put(scope.server_id, link.report_code)

            if link.has_advanced_filters:
                logger.debug(f"Ignoring {link.url} in {channel}: it has advanced filters.")
                return Outcome.DROPPED_ADVANCED_FILTERS

        try:
            result = await self.fetcher.fetch_fights(link.report_code)
        except Exception as e:
            result = ReportFetchFailed(link.report_code, e)

        if isinstance(result, ReportFetched):
            report = result.report
        elif isinstance(result, ReportNotFound):
            logger.info(
                f"{result.status} response: report {result.report_code} "
                "does not exist or is private."
            )
            return Outcome.DROPPED_NOT_FOUND
        elif isinstance(result, ReportFetchFailed):
            logger.error(
                f"Failed to fetch report {result.report_code}: {result.error!r}"
            )
            self.alerts.capture_exception(
                result.error, report_code=result.report_code, channel=channel
            )
            return Outcome.DROPPED_FETCH_FAILED
        else:
            error = TypeError(f"Unexpected fetch result: {result!r}")
            logger.error(f"Failed to fetch report {link.report_code}: {error}")
            self.alerts.capture_exception(error, report_code=link.report_code, channel=channel)
            return Outcome.DROPPED_FETCH_FAILED

        try:
            response_url = make_analyzer_url(
                report,
                link.report_code,
                link.fight_id,
                link.player_id,
                base_url=self.analyzer_url,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Malformed report data for {link.report_code}: {e!r}")
            self.alerts.capture_exception(e, report_code=link.report_code, channel=channel)
            return Outcome.DROPPED_BUILD_FAILED

        if scope is not None and not message.can_send():
            logger.warning(f"No permission to write to {channel}.")
            return Outcome.DROPPED_NO_PERMISSION

        logger.debug(f"Responding to {link.url} in {channel}")
        try:
            await message.send(response_url)
        except Exception as e:
            logger.error(f"Failed to send reply in {channel}: {e!r}")
            self.alerts.capture_exception(e, report_code=link.report_code, channel=channel)
            return Outcome.DROPPED_SEND_FAILED
        return Outcome.RESPONDED
