from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union


class StatusCode(IntEnum):
    """Status codes returned by the gateway in the `code` field."""

    SUCCESS = 0
    WRONG_AUTH_KEY = 1
    NO_SUCH_BOT = 2
    WRONG_SESSION = 3
    UNAUTHORIZED = 4
    NO_SUCH_TARGET = 5
    NO_SUCH_FILE = 6
    PERMISSION_DENIED = 10
    MUTED = 20
    MESSAGE_TOO_LONG = 30
    BAD_REQUEST = 400

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    StatusCode.SUCCESS: "Success",
    StatusCode.WRONG_AUTH_KEY: "Wrong auth key",
    StatusCode.NO_SUCH_BOT: "No such bot",
    StatusCode.WRONG_SESSION: "Wrong session",
    StatusCode.UNAUTHORIZED: "Session wasn't authorized",
    StatusCode.NO_SUCH_TARGET: "No such target",
    StatusCode.NO_SUCH_FILE: "No such file",
    StatusCode.PERMISSION_DENIED: "Bot permission denied",
    StatusCode.MUTED: "Bot was muted",
    StatusCode.MESSAGE_TOO_LONG: "Message is too long",
    StatusCode.BAD_REQUEST: "Bad request",
}


def describe_code(code: Union[int, StatusCode]) -> str:
    try:
        return StatusCode(code).description
    except ValueError:
        return "Unknown code"


def coerce_status(code: Union[int, StatusCode]) -> Union[int, StatusCode]:
    """Return the StatusCode member for `code`, or the raw int if unknown."""
    try:
        return StatusCode(code)
    except ValueError:
        return int(code)


class MiraiError(Exception):
    """Base class of every error raised by this library."""


class ProtocolError(MiraiError):
    """Server-side failure: a non-zero status code or an undecodable response."""

    def __init__(self, status: Union[int, StatusCode], message: str = "", action: Optional[str] = None) -> None:
        self.status = coerce_status(status)
        self.action = action
        self.message = message or describe_code(self.status)
        name = self.status.name if isinstance(self.status, StatusCode) else "UNKNOWN"
        super().__init__(f"{name} ({int(self.status)}): {self.message}")

    def to_payload(self) -> dict:
        """Map error into the gateway's response shape."""
        return {"code": int(self.status), "msg": self.message}


class NetworkError(MiraiError):
    """Transport level failure (connection refused, timeout, HTTP error status)."""


class ClientError(MiraiError):
    """Client-side misuse detected before anything is sent."""


class MessageBuildingError(ClientError):
    """Raised when a Message cannot be built from the given elements."""


class ChannelUnwrapError(ClientError):
    """Raised when a MessageChannel is unwrapped as the wrong kind."""

    def __init__(self, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(
            f"Error occurred when unwrapping a MessageChannel: expected {expected} but got {got}."
        )


def check_code(code: Union[int, StatusCode], action: str) -> None:
    """Raise ProtocolError unless `code` is SUCCESS."""
    if int(code) == StatusCode.SUCCESS:
        return
    raise ProtocolError(code, message=f"[{action}] {describe_code(code)}", action=action)


__all__ = [
    "StatusCode",
    "MiraiError",
    "ProtocolError",
    "NetworkError",
    "ClientError",
    "MessageBuildingError",
    "ChannelUnwrapError",
    "check_code",
    "coerce_status",
    "describe_code",
]
