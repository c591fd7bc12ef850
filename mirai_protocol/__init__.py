"""
Protocol package that centralizes the gateway's wire shapes: message chain
elements, messages, events, request/response bodies, status codes, endpoint
paths and JSON-schema validation of outbound bodies.
"""

from .channel import ChannelKind, FriendChannel, GroupChannel, MessageChannel, TempChannel
from .codec import decode_body, encode_body
from .constants import DEFAULT_BASE_URL, DEFAULT_FETCH_COUNT, ENCODING, MAX_MUTE_SECONDS
from .contacts import FriendMember, Group, GroupMember, Permission
from .endpoints import Endpoint, endpoints_in_group, is_endpoint, normalize_endpoint
from .errors import (
    ChannelUnwrapError,
    ClientError,
    MessageBuildingError,
    MiraiError,
    NetworkError,
    ProtocolError,
    StatusCode,
    check_code,
)
from .events import (
    EventBase,
    EventPacket,
    FriendMessage,
    GroupMessage,
    TempMessage,
    UnsupportedEvent,
    is_friend_message,
    is_group_message,
    is_message_event,
    parse_event,
    parse_events,
)
from .message import Message, MessageBuilder
from .payloads import GatewayConfig, UploadedImage
from .single import (
    App,
    At,
    AtAll,
    Face,
    FlashImage,
    Image,
    Json,
    Plain,
    Poke,
    Quote,
    SingleMessage,
    Source,
    Unsupported,
    Xml,
    dump_chain,
    dump_single,
    parse_chain,
    parse_single,
)
from .validator import load_schema, validate_request

__all__ = [
    "ChannelKind",
    "MessageChannel",
    "FriendChannel",
    "GroupChannel",
    "TempChannel",
    "encode_body",
    "decode_body",
    "DEFAULT_BASE_URL",
    "DEFAULT_FETCH_COUNT",
    "ENCODING",
    "MAX_MUTE_SECONDS",
    "Permission",
    "Group",
    "GroupMember",
    "FriendMember",
    "Endpoint",
    "normalize_endpoint",
    "is_endpoint",
    "endpoints_in_group",
    "MiraiError",
    "ProtocolError",
    "NetworkError",
    "ClientError",
    "MessageBuildingError",
    "ChannelUnwrapError",
    "StatusCode",
    "check_code",
    "EventBase",
    "EventPacket",
    "GroupMessage",
    "FriendMessage",
    "TempMessage",
    "UnsupportedEvent",
    "parse_event",
    "parse_events",
    "is_message_event",
    "is_group_message",
    "is_friend_message",
    "Message",
    "MessageBuilder",
    "GatewayConfig",
    "UploadedImage",
    "SingleMessage",
    "Source",
    "Quote",
    "Plain",
    "At",
    "AtAll",
    "Face",
    "Image",
    "FlashImage",
    "Xml",
    "Json",
    "App",
    "Poke",
    "Unsupported",
    "parse_single",
    "parse_chain",
    "dump_single",
    "dump_chain",
    "load_schema",
    "validate_request",
]
