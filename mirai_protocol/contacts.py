from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .channel import FriendChannel, GroupChannel, TempChannel


class Permission(StrEnum):
    OWNER = "OWNER"
    ADMINISTRATOR = "ADMINISTRATOR"
    MEMBER = "MEMBER"


class ContactBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Group(ContactBase):
    """A group the bot is in, with the bot's permission there."""

    id: int
    name: str
    permission: Permission

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Group) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("group", self.id))

    def as_group_channel(self) -> "GroupChannel":
        from .channel import GroupChannel

        return GroupChannel(group=self.id)


class GroupMember(ContactBase):
    """A member of a group; equal when both the member and the group match."""

    id: int
    member_name: str = Field(alias="memberName")
    permission: Permission
    group: Group

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GroupMember) and self.id == other.id and self.group.id == other.group.id

    def __hash__(self) -> int:
        return hash(("member", self.id, self.group.id))

    def as_friend_channel(self) -> "FriendChannel":
        from .channel import FriendChannel

        return FriendChannel(qq=self.id)

    def as_temp_channel(self) -> "TempChannel":
        from .channel import TempChannel

        return TempChannel(qq=self.id, group=self.group.id)


class FriendMember(ContactBase):
    id: int
    nickname: str
    remark: str = ""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FriendMember) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("friend", self.id))

    def as_friend_channel(self) -> "FriendChannel":
        from .channel import FriendChannel

        return FriendChannel(qq=self.id)


__all__ = ["Permission", "Group", "GroupMember", "FriendMember"]
