"""URL extraction and report link parsing utilities."""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import parse_qsl, urlsplit

from .config import (
    ADVANCED_FILTER_KEYS,
    REPORT_PATH_RE,
    WARCRAFTLOGS_DOMAIN,
)
from .models import ParsedReportLink

# Stops at whitespace, angle brackets (Discord's <url> embed suppression) and quotes.
URL_RE = re.compile(r"https?://[^\s<>\"']+", re.IGNORECASE)
TRAILING_PUNCTUATION = ".,;:!?)]}"


def extract_urls(text: str | None) -> list[str]:
    """
    Find every URL-shaped substring in free text.

    Args:
        text: The text to scan.

    Returns:
        The URLs in order of appearance, trailing punctuation removed.
    """
    if not text:
        return []
    urls = []
    for match in URL_RE.finditer(text):
        url = match.group(0).rstrip(TRAILING_PUNCTUATION)
        if "://" in url and not url.endswith("://"):
            urls.append(url)
    return urls


def extract_message_urls(content: str | None, embed_urls: Iterable[str]) -> list[str]:
    """
    Collect candidate URLs from a message body and its embeds.

    Embed URLs are run through the extractor too, so anything that is not
    URL-shaped is dropped. No deduplication is done.

    Args:
        content: The message body.
        embed_urls: URLs attached to the message embeds.

    Returns:
        Body URLs followed by embed URLs.
    """
    urls = extract_urls(content)
    for embed_url in embed_urls:
        urls.extend(extract_urls(embed_url))
    return urls


def parse_hash(fragment: str | None) -> dict[str, str]:
    """
    Decode a URL fragment like '#fight=3&source=7' into a dict.

    Args:
        fragment: The fragment, with or without the leading '#'.

    Returns:
        Decoded key/value pairs; the last value wins for repeated keys.
    """
    if not fragment:
        return {}
    return dict(parse_qsl(fragment.lstrip("#"), keep_blank_values=True))


def parse_report_link(url: str) -> ParsedReportLink | None:
    """
    Parse a URL as a link to a single Warcraft Logs report.

    Args:
        url: The candidate URL.

    Returns:
        The parsed link, or None if the URL is not a single-report link.
    """
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return None

    if parts.scheme.lower() not in ("http", "https") or not host:
        return None
    if not host.endswith(WARCRAFTLOGS_DOMAIN):
        return None

    path_match = REPORT_PATH_RE.match(parts.path)
    if not path_match:
        return None

    params = parse_hash(parts.fragment)
    return ParsedReportLink(
        url=url,
        report_code=path_match.group(1),
        fight_id=params.get("fight"),
        player_id=params.get("source"),
        filters={key: params[key] for key in ADVANCED_FILTER_KEYS if key in params},
    )
