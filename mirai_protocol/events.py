"""
Events returned by the fetch/peek endpoints.

Every event is a JSON object tagged by ``type``. Message events carry a message
chain and a sender; the rest describe things that happened to the bot or to
its groups. Tags this library does not model decode to `UnsupportedEvent`.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter, ValidationError

from .channel import FriendChannel, GroupChannel, MessageChannel
from .contacts import FriendMember, Group, GroupMember, Permission
from .errors import ProtocolError, StatusCode
from .message import Message
from .single import SingleMessage

logger = logging.getLogger(__name__)


class EventBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class MessageEventBase(EventBase):
    message_chain: Tuple[SingleMessage, ...] = Field(alias="messageChain")

    @property
    def message(self) -> Message:
        return Message.from_chain(self.message_chain)


class GroupMessage(MessageEventBase):
    type: Literal["GroupMessage"] = "GroupMessage"
    sender: GroupMember

    @property
    def channel(self) -> MessageChannel:
        return GroupChannel(group=self.sender.group.id)


class FriendMessage(MessageEventBase):
    type: Literal["FriendMessage"] = "FriendMessage"
    sender: FriendMember

    @property
    def channel(self) -> MessageChannel:
        return FriendChannel(qq=self.sender.id)


class TempMessage(MessageEventBase):
    type: Literal["TempMessage"] = "TempMessage"
    sender: GroupMember

    @property
    def channel(self) -> MessageChannel:
        return self.sender.as_temp_channel()


class GroupRecallEvent(EventBase):
    """A group message was recalled; `operator` is None when the bot did it."""

    type: Literal["GroupRecallEvent"] = "GroupRecallEvent"
    author_id: int = Field(alias="authorId")
    message_id: int = Field(alias="messageId")
    time: int
    group: Group
    operator: Optional[GroupMember] = None


class FriendRecallEvent(EventBase):
    type: Literal["FriendRecallEvent"] = "FriendRecallEvent"
    author_id: int = Field(alias="authorId")
    message_id: int = Field(alias="messageId")
    time: int
    operator: int


class BotLoginEventBase(EventBase):
    qq: int


class BotOnlineEvent(BotLoginEventBase):
    type: Literal["BotOnlineEvent"] = "BotOnlineEvent"


class BotOfflineEventActive(BotLoginEventBase):
    type: Literal["BotOfflineEventActive"] = "BotOfflineEventActive"


class BotOfflineEventForce(BotLoginEventBase):
    type: Literal["BotOfflineEventForce"] = "BotOfflineEventForce"


class BotOfflineEventDropped(BotLoginEventBase):
    type: Literal["BotOfflineEventDropped"] = "BotOfflineEventDropped"


class BotReloginEvent(BotLoginEventBase):
    type: Literal["BotReloginEvent"] = "BotReloginEvent"


class BotGroupPermissionChangeEvent(EventBase):
    type: Literal["BotGroupPermissionChangeEvent"] = "BotGroupPermissionChangeEvent"
    origin: Permission
    current: Permission
    group: Group


class BotMuteEvent(EventBase):
    type: Literal["BotMuteEvent"] = "BotMuteEvent"
    duration_seconds: int = Field(alias="durationSeconds")
    operator: GroupMember


class BotUnmuteEvent(EventBase):
    type: Literal["BotUnmuteEvent"] = "BotUnmuteEvent"
    operator: GroupMember


class BotGroupEventBase(EventBase):
    group: Group


class BotJoinGroupEvent(BotGroupEventBase):
    type: Literal["BotJoinGroupEvent"] = "BotJoinGroupEvent"


class BotLeaveEventActive(BotGroupEventBase):
    type: Literal["BotLeaveEventActive"] = "BotLeaveEventActive"


class BotLeaveEventKick(BotGroupEventBase):
    type: Literal["BotLeaveEventKick"] = "BotLeaveEventKick"


class GroupTextChangeBase(EventBase):
    origin: str
    current: str
    group: Group
    operator: Optional[GroupMember] = None


class GroupNameChangeEvent(GroupTextChangeBase):
    type: Literal["GroupNameChangeEvent"] = "GroupNameChangeEvent"


class GroupEntranceAnnouncementChangeEvent(GroupTextChangeBase):
    type: Literal["GroupEntranceAnnouncementChangeEvent"] = "GroupEntranceAnnouncementChangeEvent"


class GroupSwitchChangeBase(EventBase):
    origin: bool
    current: bool
    group: Group
    operator: Optional[GroupMember] = None


class GroupMuteAllEvent(GroupSwitchChangeBase):
    type: Literal["GroupMuteAllEvent"] = "GroupMuteAllEvent"


class GroupAllowAnonymousChatEvent(GroupSwitchChangeBase):
    type: Literal["GroupAllowAnonymousChatEvent"] = "GroupAllowAnonymousChatEvent"


class GroupAllowMemberInviteEvent(GroupSwitchChangeBase):
    type: Literal["GroupAllowMemberInviteEvent"] = "GroupAllowMemberInviteEvent"


class UnsupportedEvent(EventBase):
    """Event with a tag this library does not model; the payload is kept verbatim."""

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str = "Unsupported"


EVENT_TYPES: Dict[str, type] = {
    cls.__name__: cls
    for cls in (
        GroupMessage,
        FriendMessage,
        TempMessage,
        GroupRecallEvent,
        FriendRecallEvent,
        BotOnlineEvent,
        BotOfflineEventActive,
        BotOfflineEventForce,
        BotOfflineEventDropped,
        BotReloginEvent,
        BotGroupPermissionChangeEvent,
        BotMuteEvent,
        BotUnmuteEvent,
        BotJoinGroupEvent,
        BotLeaveEventActive,
        BotLeaveEventKick,
        GroupNameChangeEvent,
        GroupEntranceAnnouncementChangeEvent,
        GroupMuteAllEvent,
        GroupAllowAnonymousChatEvent,
        GroupAllowMemberInviteEvent,
    )
}

MESSAGE_EVENT_TYPES = (GroupMessage, FriendMessage, TempMessage)


def _event_tag(value: Any) -> str:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if isinstance(value, UnsupportedEvent) or not isinstance(tag, str) or tag not in EVENT_TYPES:
        return "Unsupported"
    return tag


EventPacket = Annotated[
    Union[
        tuple(Annotated[cls, Tag(name)] for name, cls in EVENT_TYPES.items())
        + (Annotated[UnsupportedEvent, Tag("Unsupported")],)
    ],
    Discriminator(_event_tag),
]

_EVENT_ADAPTER: TypeAdapter = TypeAdapter(EventPacket)


def parse_event(data: Dict[str, Any]) -> EventBase:
    """Decode one event; unknown tags become UnsupportedEvent."""
    if not isinstance(data, dict):
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Event must be an object, got {type(data).__name__}")
    try:
        event = _EVENT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Event validation failed: {exc}") from exc
    if isinstance(event, UnsupportedEvent):
        logger.debug("Unsupported event type %s", event.type)
    return event


def parse_events(items: Iterable[Dict[str, Any]]) -> List[EventBase]:
    return [parse_event(item) for item in items]


def is_message_event(event: EventBase) -> bool:
    return isinstance(event, MESSAGE_EVENT_TYPES)


def is_group_message(event: EventBase) -> bool:
    return isinstance(event, GroupMessage)


def is_friend_message(event: EventBase) -> bool:
    return isinstance(event, FriendMessage)


__all__ = [
    "EventBase",
    "EventPacket",
    "EVENT_TYPES",
    "MessageEventBase",
    "GroupMessage",
    "FriendMessage",
    "TempMessage",
    "GroupRecallEvent",
    "FriendRecallEvent",
    "BotOnlineEvent",
    "BotOfflineEventActive",
    "BotOfflineEventForce",
    "BotOfflineEventDropped",
    "BotReloginEvent",
    "BotGroupPermissionChangeEvent",
    "BotMuteEvent",
    "BotUnmuteEvent",
    "BotJoinGroupEvent",
    "BotLeaveEventActive",
    "BotLeaveEventKick",
    "GroupNameChangeEvent",
    "GroupEntranceAnnouncementChangeEvent",
    "GroupMuteAllEvent",
    "GroupAllowAnonymousChatEvent",
    "GroupAllowMemberInviteEvent",
    "UnsupportedEvent",
    "parse_event",
    "parse_events",
    "is_message_event",
    "is_group_message",
    "is_friend_message",
]
