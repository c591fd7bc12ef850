"""
Where a message is sent: a friend, a group, or a group member in a temporary session.

    GroupChannel(group=123).group()           # -> 123
    TempChannel(qq=456, group=123).temp()     # -> (456, 123)
    FriendChannel(qq=456).group()             # raises ChannelUnwrapError
"""

from __future__ import annotations

from abc import abstractmethod
from enum import StrEnum
from typing import Any, ClassVar, Dict, Tuple

from pydantic import BaseModel, ConfigDict

from .endpoints import Endpoint
from .errors import ChannelUnwrapError


class ChannelKind(StrEnum):
    FRIEND = "Friend"
    GROUP = "Group"
    TEMP = "Temp"


class MessageChannel(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ChannelKind]
    endpoint: ClassVar[Endpoint]

    def friend(self) -> int:
        raise ChannelUnwrapError(ChannelKind.FRIEND.value, self.kind.value)

    def group(self) -> int:
        raise ChannelUnwrapError(ChannelKind.GROUP.value, self.kind.value)

    def temp(self) -> Tuple[int, int]:
        raise ChannelUnwrapError(ChannelKind.TEMP.value, self.kind.value)

    @abstractmethod
    def target_fields(self) -> Dict[str, Any]:
        """Body fields that address this channel in a send request."""


class FriendChannel(MessageChannel):
    kind: ClassVar[ChannelKind] = ChannelKind.FRIEND
    endpoint: ClassVar[Endpoint] = Endpoint.SEND_FRIEND_MESSAGE

    qq: int

    def friend(self) -> int:
        return self.qq

    def target_fields(self) -> Dict[str, Any]:
        return {"qq": self.qq}


class GroupChannel(MessageChannel):
    kind: ClassVar[ChannelKind] = ChannelKind.GROUP
    endpoint: ClassVar[Endpoint] = Endpoint.SEND_GROUP_MESSAGE

    group_id: int

    def __init__(self, group: int, **data: Any) -> None:
        super().__init__(group_id=group, **data)

    def group(self) -> int:
        return self.group_id

    def target_fields(self) -> Dict[str, Any]:
        return {"group": self.group_id}


class TempChannel(MessageChannel):
    kind: ClassVar[ChannelKind] = ChannelKind.TEMP
    endpoint: ClassVar[Endpoint] = Endpoint.SEND_TEMP_MESSAGE

    qq: int
    group_id: int

    def __init__(self, qq: int, group: int, **data: Any) -> None:
        super().__init__(qq=qq, group_id=group, **data)

    def temp(self) -> Tuple[int, int]:
        return self.qq, self.group_id

    def target_fields(self) -> Dict[str, Any]:
        return {"qq": self.qq, "group": self.group_id}


__all__ = ["ChannelKind", "MessageChannel", "FriendChannel", "GroupChannel", "TempChannel"]
