"""Shared fixtures for analyzerbot tests."""

from __future__ import annotations

import pytest

REPORT_CODE = "AbCdEf1234567890"


class FakeClock:
    """Manually advanced clock for cooldown tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def report():
    """A Warcraft Logs fights document with trash, a wipe and a kill."""
    return {
        "title": "Antorus",
        "fights": [
            {"id": 1, "boss": 0, "name": "Trash", "start_time": 0, "end_time": 30000},
            {
                "id": 2,
                "boss": 2031,
                "name": "Argus the Unmaker",
                "difficulty": 5,
                "kill": False,
                "start_time": 100000,
                "end_time": 361000,
            },
            {
                "id": 3,
                "boss": 2031,
                "name": "Argus the Unmaker",
                "difficulty": 5,
                "kill": True,
                "start_time": 400000,
                "end_time": 892000,
            },
        ],
        "friendlies": [
            {"id": 7, "name": "Zerotorescue", "type": "Priest"},
            {"id": 8, "name": "Märy Jane", "type": "Monk"},
        ],
    }
