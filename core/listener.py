"""
Slack event listener.

Watches the configured channel for mentions of the bot and answers the
trigger word with the order menu, posted as an ephemeral message.
"""

import logging

from slack_bolt import App

from .messages import build_menu_attachment
from .models import BotConfig, InvalidMessageError

logger = logging.getLogger(__name__)


class SlackListener:
    """Listens for channel messages and replies with the order menu."""

    def __init__(self, config: BotConfig):
        self.bot_id = config.bot_id
        self.channel_id = config.channel_id
        self.trigger_word = config.trigger_word
        self.menu = config.menu
        self.prompt = config.prompt

    @property
    def mention_prefix(self) -> str:
        return f"<@{self.bot_id}> "

    def register(self, app: App) -> None:
        """Bind the message handler to a Bolt app."""

        @app.event("message")
        def handle_message(event, client):
            try:
                self.handle_message_event(event, client)
            except InvalidMessageError as e:
                logger.error(f"Failed to handle message: {e}")
            except Exception:
                logger.exception("Failed to handle message")

    def handle_message_event(self, event: dict, client) -> bool:
        """
        Handle a single message event.

        Args:
            event: Slack message event
            client: Slack WebClient used to post the menu

        Returns:
            True if the menu was posted, False if the message was ignored

        Raises:
            InvalidMessageError: mention without the trigger word
            SlackApiError: posting the menu failed
        """
        # Ignore messages from bots (including ourselves) and edits/joins
        if event.get("bot_id") or event.get("subtype"):
            return False

        channel = event.get("channel", "")
        text = event.get("text", "")

        # Only respond in the configured channel
        if channel != self.channel_id:
            logger.debug(f"Ignoring message in {channel}: {text}")
            return False

        # Only respond to mentions of the bot
        if not text.startswith(self.mention_prefix):
            return False

        words = text.strip().split(" ")[1:]
        if not words or words[0] != self.trigger_word:
            raise InvalidMessageError("invalid message")

        user_id = event.get("user", "")
        logger.info(f"User {user_id} asked for the order menu")

        self.post_ephemeral(
            client,
            channel,
            user_id,
            "",
            [build_menu_attachment(self.menu, self.prompt)],
        )
        return True

    def post_ephemeral(self, client, channel: str, user: str, text: str, attachments: list[dict]) -> str:
        """Post a message visible only to one user. Returns its timestamp."""
        response = client.chat_postEphemeral(
            channel=channel,
            user=user,
            text=text,
            attachments=attachments,
        )
        return response.get("message_ts", "")
