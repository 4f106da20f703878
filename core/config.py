"""
Configuration loading for the order bot.

Secrets come from the environment (optionally a .env file), behaviour
tweaks from an optional bot config JSON file.
"""

import os
import sys
import json
import logging
from pathlib import Path
from dotenv import load_dotenv

from .models import BotConfig

logger = logging.getLogger(__name__)

BOT_DIR = Path(__file__).parent.parent

REQUIRED_VARS = {
    "SLACK_BOT_TOKEN": "bot_token",
    "SLACK_APP_TOKEN": "app_token",
    "SLACK_VERIFICATION_TOKEN": "verification_token",
    "SLACK_BOT_ID": "bot_id",
    "SLACK_CHANNEL_ID": "channel_id",
}


def load_bot_config(config_path: Path) -> dict:
    """Read a bot config JSON file."""
    with open(config_path) as f:
        config = json.load(f)
    logger.info(f"Loaded bot config: {config.get('name', config_path.name)}")
    return config


def load_environment(env_file: str | None = None, base_dir: Path = BOT_DIR) -> None:
    """Load and validate environment variables."""
    env_path = base_dir / (env_file or ".env")
    load_dotenv(env_path)

    missing = [var for var in REQUIRED_VARS if not os.getenv(var)]

    if missing:
        logger.error(
            f"Missing required environment variables: {', '.join(missing)}"
        )
        sys.exit(1)


def load_config(config_file: str | None = None, base_dir: Path = BOT_DIR) -> BotConfig:
    """
    Assemble the runtime configuration.

    Args:
        config_file: Bot config JSON path, relative to base_dir
        base_dir: Directory the config and .env paths are resolved against

    Returns:
        BotConfig with secrets from the environment and overrides from
        the bot config file
    """
    bot_config = load_bot_config(base_dir / config_file) if config_file else {}

    load_environment(bot_config.get("env_file"), base_dir)

    config = BotConfig(
        **{field: os.environ[var] for var, field in REQUIRED_VARS.items()},
        port=int(os.getenv("PORT", "3000")),
        interaction_path=os.getenv("INTERACTION_PATH", "/interaction"),
    )

    if "name" in bot_config:
        config.name = bot_config["name"]
    if "trigger_word" in bot_config:
        config.trigger_word = bot_config["trigger_word"]
    if "prompt" in bot_config:
        config.prompt = bot_config["prompt"]
    if "menu" in bot_config:
        config.menu = [str(item) for item in bot_config["menu"]]

    return config
