from __future__ import annotations

from enum import StrEnum
from typing import Dict, Iterable, Union


class Endpoint(StrEnum):
    """
    Gateway HTTP paths.
    Attribute names follow the gateway area they belong to (SESSION_*, MESSAGE_*, ...).
    """

    # Session domain
    ABOUT = "/about"
    AUTH = "/auth"
    VERIFY = "/verify"
    RELEASE = "/release"

    # Messaging domain
    SEND_FRIEND_MESSAGE = "/sendFriendMessage"
    SEND_GROUP_MESSAGE = "/sendGroupMessage"
    SEND_TEMP_MESSAGE = "/sendTempMessage"
    FETCH_MESSAGE = "/fetchMessage"
    FETCH_LATEST_MESSAGE = "/fetchLatestMessage"
    PEEK_MESSAGE = "/peekMessage"
    PEEK_LATEST_MESSAGE = "/peekLatestMessage"
    RECALL = "/recall"

    # Group administration domain
    MUTE = "/mute"
    UNMUTE = "/unmute"
    MUTE_ALL = "/muteAll"
    UNMUTE_ALL = "/unmuteAll"
    KICK = "/kick"

    # Contact domain
    FRIEND_LIST = "/friendList"
    GROUP_LIST = "/groupList"
    MEMBER_LIST = "/memberList"

    # Gateway config domain
    CONFIG = "/config"

    # Image domain
    UPLOAD_IMAGE = "/uploadImage"

    # Console command domain
    COMMAND_SEND = "/command/send"


ENDPOINT_GROUPS: Dict[str, str] = {
    Endpoint.ABOUT.value: "session",
    Endpoint.AUTH.value: "session",
    Endpoint.VERIFY.value: "session",
    Endpoint.RELEASE.value: "session",
    Endpoint.SEND_FRIEND_MESSAGE.value: "message",
    Endpoint.SEND_GROUP_MESSAGE.value: "message",
    Endpoint.SEND_TEMP_MESSAGE.value: "message",
    Endpoint.FETCH_MESSAGE.value: "message",
    Endpoint.FETCH_LATEST_MESSAGE.value: "message",
    Endpoint.PEEK_MESSAGE.value: "message",
    Endpoint.PEEK_LATEST_MESSAGE.value: "message",
    Endpoint.RECALL.value: "message",
    Endpoint.MUTE.value: "group",
    Endpoint.UNMUTE.value: "group",
    Endpoint.MUTE_ALL.value: "group",
    Endpoint.UNMUTE_ALL.value: "group",
    Endpoint.KICK.value: "group",
    Endpoint.FRIEND_LIST.value: "contact",
    Endpoint.GROUP_LIST.value: "contact",
    Endpoint.MEMBER_LIST.value: "contact",
    Endpoint.CONFIG.value: "config",
    Endpoint.UPLOAD_IMAGE.value: "image",
    Endpoint.COMMAND_SEND.value: "command",
}


def normalize_endpoint(endpoint: Union[str, Endpoint]) -> str:
    """Convert enum/string into the canonical path text."""
    return endpoint.value if isinstance(endpoint, Endpoint) else str(endpoint)


def is_endpoint(value: str) -> bool:
    """Check if `value` is a known gateway path."""
    try:
        Endpoint(value)
        return True
    except ValueError:
        return False


def endpoints_in_group(group: str) -> Iterable[str]:
    """Yield paths belonging to the specified gateway area."""
    for endpoint, grp in ENDPOINT_GROUPS.items():
        if grp == group:
            yield endpoint


__all__ = [
    "Endpoint",
    "ENDPOINT_GROUPS",
    "normalize_endpoint",
    "is_endpoint",
    "endpoints_in_group",
]
