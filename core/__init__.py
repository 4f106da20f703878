"""
Core module for the order bot.

Contains the channel listener, the interaction dispatcher, the HTTP
callback endpoint and the shared message builders.
"""

from .models import BotConfig, InteractionCallback, InteractionResponse, InvalidMessageError, PayloadError
from .config import load_config
from .listener import SlackListener
from .dispatcher import InteractionDispatcher
from .server import create_server

__all__ = [
    'BotConfig',
    'InteractionCallback',
    'InteractionResponse',
    'InvalidMessageError',
    'PayloadError',
    'load_config',
    'SlackListener',
    'InteractionDispatcher',
    'create_server',
]
