"""Analyzer Link Bot - answers Warcraft Logs report links with WoWAnalyzer links."""

from .bot import create_bot, create_pipeline, run
from .config import Config
from .cooldown import CooldownStore
from .models import InboundMessage, Outcome, ParsedReportLink, ServerScope
from .pipeline import ReportLinkPipeline

__all__ = [
    "Config",
    "CooldownStore",
    "InboundMessage",
    "Outcome",
    "ParsedReportLink",
    "ReportLinkPipeline",
    "ServerScope",
    "create_bot",
    "create_pipeline",
    "run",
]

__version__ = "1.0.0"
