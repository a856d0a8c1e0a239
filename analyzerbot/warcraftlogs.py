"""Warcraft Logs API client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import aiohttp

from .config import DEFAULT_WCL_API_URL
from .models import FetchResult, ReportFetched, ReportFetchFailed, ReportNotFound

logger = logging.getLogger(__name__)

USER_AGENT = "AnalyzerLinkBot/1.0"

# Warcraft Logs answers 400 for reports that do not exist or are private.
NOT_FOUND_STATUSES = frozenset({400})


class ReportServiceError(Exception):
    """Warcraft Logs answered with an unexpected HTTP status."""

    def __init__(self, report_code: str, status: int) -> None:
        super().__init__(f"Warcraft Logs API HTTP {status} for report {report_code}")
        self.report_code = report_code
        self.status = status


class WarcraftLogsClient:
    """
    Fetches report metadata from the Warcraft Logs v1 API.

    A new ``aiohttp.ClientSession`` is opened for every request.

    Args:
        api_key: Warcraft Logs public API key.
        api_url: Base URL of the v1 API.
        session_factory: Callable returning a new client session.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_WCL_API_URL,
        session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self._session_factory = session_factory

    async def fetch_fights(self, report_code: str) -> FetchResult:
        """
        Fetch the fights and friendly players of a report.

        Args:
            report_code: The 16 character report code.

        Returns:
            ReportFetched with the JSON document, ReportNotFound when the
            report does not exist or is private, or ReportFetchFailed for
            anything else. Never raises.
        """
        api_url = f"{self.api_url}/report/fights/{report_code}"
        params = {"api_key": self.api_key, "translate": "true"}

        try:
            async with self._session_factory() as session:
                async with session.get(
                    api_url,
                    params=params,
                    headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
                ) as resp:
                    if resp.status in NOT_FOUND_STATUSES:
                        return ReportNotFound(report_code, resp.status)
                    if resp.status != 200:
                        return ReportFetchFailed(
                            report_code, ReportServiceError(report_code, resp.status)
                        )
                    payload = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.debug(f"Network error calling Warcraft Logs API: {e!r}")
            return ReportFetchFailed(report_code, e)
        except ValueError as e:
            logger.debug(f"JSON parsing error from Warcraft Logs API: {e!r}")
            return ReportFetchFailed(report_code, e)

        if not isinstance(payload, dict):
            return ReportFetchFailed(
                report_code,
                ValueError(f"Unexpected Warcraft Logs payload for report {report_code}"),
            )
        return ReportFetched(report_code, payload)
