"""
Order Bot - Main Entry Point

Runs both halves of the bot:
- Socket Mode connection answering mentions in the order channel and
  the button, menu and dialog callbacks Slack sends down the socket
- HTTP endpoint receiving the same callbacks when Slack posts them to a
  Request URL
"""

import argparse
import logging

from slack_bolt import App
from slack_bolt.adapter.socket_mode import SocketModeHandler

from core.config import load_config
from core.dispatcher import InteractionDispatcher
from core.listener import SlackListener
from core.server import create_server

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Order Bot")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to bot config JSON file (e.g., bots/order_bot.json)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Start the bot."""
    args = parse_args(argv)
    config = load_config(args.config)

    logger.info(f"Starting {config.name}...")

    app = App(token=config.bot_token)

    # Listening slack events and response
    listener = SlackListener(config)
    listener.register(app)

    # Interactive message responses from slack (kicked by user action)
    # arrive over the socket or, for Request URL delivery, over HTTP
    dispatcher = InteractionDispatcher(app.client, config.verification_token)
    dispatcher.register(app)

    handler = SocketModeHandler(app, config.app_token)
    handler.connect()
    logger.info(f"Listening for mentions in channel {config.channel_id}")

    server = create_server(dispatcher, config.interaction_path)

    logger.info(f"Server listening on :{config.port}")
    try:
        server.run(host="0.0.0.0", port=config.port)
    finally:
        handler.close()


if __name__ == "__main__":
    main()
