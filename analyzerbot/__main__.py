"""Entry point for running the bot with `python -m analyzerbot`."""

import logging
import sys

from .config import Config

logger = logging.getLogger("analyzerbot")


def main() -> None:
    """Main entry point for the analyzer bot."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    config = Config.from_env()

    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if not config.bot_token:
        print(
            "Error: DISCORD_BOT_TOKEN environment variable is required.\n"
            "Set it in your .env file or environment.",
            file=sys.stderr,
        )
        sys.exit(1)

    if not config.wcl_api_key:
        logger.warning("WCL_API_KEY is not set, Warcraft Logs requests will fail.")

    # Import here to avoid circular imports and allow logging setup first
    from .bot import run

    run(config)


if __name__ == "__main__":
    main()
