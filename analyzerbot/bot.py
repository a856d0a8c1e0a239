"""Discord bot setup and event handlers."""

from __future__ import annotations

import logging

import discord
from discord.ext import commands

from .alerts import create_alert_sink
from .config import Config
from .cooldown import CooldownStore
from .models import InboundMessage, ServerScope
from .pipeline import ReportLinkPipeline
from .warcraftlogs import WarcraftLogsClient

logger = logging.getLogger(__name__)


def to_inbound_message(message: discord.Message) -> InboundMessage:
    """Translate a Discord message into the pipeline's message view."""
    guild = message.guild
    scope = None
    if guild is not None:
        scope = ServerScope(
            server_id=guild.id,
            server_name=guild.name,
            channel_name=getattr(message.channel, "name", "unknown"),
        )

    def can_send() -> bool:
        if guild is None:
            return True
        permissions = message.channel.permissions_for(guild.me)
        if isinstance(message.channel, discord.Thread):
            return permissions.send_messages_in_threads
        return permissions.send_messages

    return InboundMessage(
        content=message.content or "",
        embed_urls=tuple(embed.url for embed in message.embeds if embed.url),
        author_name=message.author.display_name,
        scope=scope,
        can_send=can_send,
        send=message.channel.send,
    )


def create_bot(pipeline: ReportLinkPipeline) -> commands.Bot:
    """Create the Discord bot and register its event handlers."""
    intents = discord.Intents.default()
    intents.message_content = True
    bot = commands.Bot(command_prefix="!", intents=intents)

    @bot.command()
    async def ping(ctx: commands.Context) -> None:
        """Simple ping command for testing."""
        await ctx.send("pong")

    @bot.event
    async def on_ready() -> None:
        """Log when the bot is ready."""
        if bot.user:
            logger.info(f"Logged in as {bot.user} (id: {bot.user.id})")
        logger.info(f"Connected to {len(bot.guilds)} servers")

    @bot.event
    async def on_message(message: discord.Message) -> None:
        """Handle incoming messages, looking for Warcraft Logs links."""
        # Webhooks and other bots may post report links, only skip our own messages.
        if bot.user is not None and message.author.id == bot.user.id:
            return

        await pipeline.handle_message(to_inbound_message(message))
        await bot.process_commands(message)

    return bot


def create_pipeline(config: Config) -> ReportLinkPipeline:
    """Wire up the report link pipeline from configuration."""
    return ReportLinkPipeline(
        cooldowns=CooldownStore(config.cooldown_seconds),
        fetcher=WarcraftLogsClient(config.wcl_api_key, config.wcl_api_url),
        alerts=create_alert_sink(config.sentry_dsn),
        analyzer_url=config.analyzer_url,
    )


def run(config: Config) -> None:
    """Run the bot with the given configuration."""
    bot = create_bot(create_pipeline(config))
    bot.run(config.bot_token, log_handler=None)
