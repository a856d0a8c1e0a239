"""Formatting utilities for WoWAnalyzer links."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, quote_plus

from .config import DEFAULT_ANALYZER_URL

DIFFICULTY_NAMES: dict[int, str] = {
    1: "LFR",
    2: "Flex",
    3: "Normal",
    4: "Heroic",
    5: "Mythic",
    10: "Mythic+",
}


def format_duration(milliseconds: float) -> str:
    """
    Format a duration as minutes and seconds.

    Args:
        milliseconds: The duration in milliseconds.

    Returns:
        Formatted string like '8:05', or '0:00' for invalid input.
    """
    try:
        total_seconds = max(0, int(float(milliseconds) // 1000))
    except (TypeError, ValueError):
        return "0:00"
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def _wipe_number(fights: list[dict[str, Any]], fight: dict[str, Any]) -> int:
    """Count the wipes on the same boss up to and including this pull."""
    return sum(
        1
        for other in fights
        if other.get("boss") == fight.get("boss")
        and not other.get("kill")
        and other.get("id", 0) <= fight.get("id", 0)
    )


def get_fight_title(report: dict[str, Any], fight: dict[str, Any]) -> str:
    """
    Build a human-readable fight title.

    Boss pulls read like 'Mythic Argus the Unmaker - Wipe 3 (4:21)', trash
    fights (boss 0) are just their name.
    """
    name = fight.get("name", "Unknown")
    if not fight.get("boss"):
        return name

    difficulty = DIFFICULTY_NAMES.get(fight.get("difficulty"))
    title = f"{difficulty} {name}" if difficulty else name

    if fight.get("kill"):
        result = "Kill"
    else:
        result = f"Wipe {_wipe_number(report['fights'], fight)}"

    duration = format_duration(fight.get("end_time", 0) - fight.get("start_time", 0))
    return f"{title} - {result} ({duration})"


def _find_by_id(items: list[dict[str, Any]], raw_id: str) -> dict[str, Any] | None:
    """Find the item whose numeric id matches, ignoring non-numeric ids."""
    try:
        wanted = int(raw_id)
    except (TypeError, ValueError):
        return None
    return next((item for item in items if item.get("id") == wanted), None)


def find_fight(report: dict[str, Any], fight_id: str) -> dict[str, Any] | None:
    """Find a fight by id, where 'last' selects the final fight of the report."""
    fights = report["fights"]
    if fight_id == "last":
        return fights[-1] if fights else None
    return _find_by_id(fights, fight_id)


def make_analyzer_url(
    report: dict[str, Any],
    report_code: str,
    fight_id: str | None = None,
    player_id: str | None = None,
    base_url: str = DEFAULT_ANALYZER_URL,
) -> str:
    """
    Build the WoWAnalyzer link for a report.

    Fight and player segments are only added when they can be found in
    the report; unknown ids fall back to the shorter link.

    Args:
        report: The Warcraft Logs fights document.
        report_code: The 16 character report code.
        fight_id: The 'fight' fragment parameter of the report link.
        player_id: The 'source' fragment parameter of the report link.
        base_url: The WoWAnalyzer site.

    Returns:
        The analyzer URL.

    Raises:
        KeyError: If the report lacks the fights or friendlies lists.
        TypeError: If the report is not a JSON object.
    """
    url = f"{base_url.rstrip('/')}/report/{report_code}"
    if not fight_id:
        return url

    fight = find_fight(report, fight_id)
    if fight is None:
        return url
    url += f"/{fight['id']}-{quote_plus(get_fight_title(report, fight), safe='()')}"

    if not player_id:
        return url

    player = _find_by_id(report["friendlies"], player_id)
    if player is None:
        return url
    return url + f"/{player['id']}-{quote(str(player.get('name', '')), safe='')}"
