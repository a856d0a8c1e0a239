"""Error tracking for unexpected failures."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import sentry_sdk

logger = logging.getLogger(__name__)


class AlertSink(Protocol):
    """Receives unexpected exceptions for later inspection."""

    def capture_exception(self, error: BaseException, **context: Any) -> None: ...


class SentryAlertSink:
    """Sends exceptions to Sentry, with the context attached as tags."""

    def __init__(self, dsn: str) -> None:
        sentry_sdk.init(dsn=dsn)

    def capture_exception(self, error: BaseException, **context: Any) -> None:
        event_id = sentry_sdk.capture_exception(
            error, tags={key: str(value) for key, value in context.items()}
        )
        logger.debug(f"Sent {type(error).__name__} to Sentry (event {event_id})")


class LoggingAlertSink:
    """
    Keeps the traceback of captured exceptions in the debug log.

    Used when no error tracker is configured. The pipeline already logs
    the failure itself at error level.
    """

    def capture_exception(self, error: BaseException, **context: Any) -> None:
        details = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        logger.debug(
            f"Captured {type(error).__name__}: {error} {details}".rstrip(),
            exc_info=(type(error), error, error.__traceback__),
        )


def create_alert_sink(sentry_dsn: str) -> AlertSink:
    """Return a Sentry sink when a DSN is configured, otherwise a logging sink."""
    if sentry_dsn:
        return SentryAlertSink(sentry_dsn)
    logger.info("SENTRY_DSN is not set, unexpected errors are only logged.")
    return LoggingAlertSink()
