"""Async HTTP client for a mirai-api-http gateway."""

from .bot import Bot
from .config import CLIENT_CONFIG, ConfigError, load_config
from .core import ClientSession, NetworkClient, SessionError
from .features import (
    AuthManager,
    ContactManager,
    GatewayConfigManager,
    GroupManager,
    ImageManager,
    ImageType,
    MessagingManager,
)

__all__ = [
    "Bot",
    "CLIENT_CONFIG",
    "ConfigError",
    "load_config",
    "ClientSession",
    "NetworkClient",
    "SessionError",
    "AuthManager",
    "ContactManager",
    "GatewayConfigManager",
    "GroupManager",
    "ImageManager",
    "ImageType",
    "MessagingManager",
]
