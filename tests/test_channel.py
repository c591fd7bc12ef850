from __future__ import annotations

import pytest

from mirai_protocol.channel import ChannelKind, FriendChannel, GroupChannel, MessageChannel, TempChannel
from mirai_protocol.contacts import FriendMember, Group, GroupMember, Permission
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import ChannelUnwrapError


def _group(group_id=555, name="club"):
    return Group(id=group_id, name=name, permission=Permission.MEMBER)


def test_unwrap_matching_kind():
    assert FriendChannel(qq=1).friend() == 1
    assert GroupChannel(group=2).group() == 2
    assert TempChannel(qq=3, group=4).temp() == (3, 4)


def test_unwrap_wrong_kind():
    with pytest.raises(ChannelUnwrapError) as excinfo:
        FriendChannel(qq=1).group()
    assert excinfo.value.expected == "Group"
    assert excinfo.value.got == "Friend"
    assert "expected Group but got Friend" in str(excinfo.value)

    with pytest.raises(ChannelUnwrapError):
        GroupChannel(group=2).temp()
    with pytest.raises(ChannelUnwrapError):
        TempChannel(qq=3, group=4).friend()


def test_channel_endpoints_and_fields():
    assert FriendChannel(qq=1).endpoint == Endpoint.SEND_FRIEND_MESSAGE
    assert GroupChannel(group=2).endpoint == Endpoint.SEND_GROUP_MESSAGE
    assert TempChannel(qq=3, group=4).endpoint == Endpoint.SEND_TEMP_MESSAGE
    assert TempChannel(qq=3, group=4).kind == ChannelKind.TEMP
    assert GroupChannel(group=2).target_fields() == {"group": 2}
    assert TempChannel(qq=3, group=4).target_fields() == {"qq": 3, "group": 4}


def test_contact_equality_by_identity():
    assert _group(1, "a") == _group(1, "renamed")
    assert hash(_group(1, "a")) == hash(_group(1, "renamed"))
    assert FriendMember(id=7, nickname="x") == FriendMember(id=7, nickname="y", remark="r")

    member = GroupMember(id=7, member_name="x", permission=Permission.OWNER, group=_group(1))
    same = GroupMember(id=7, member_name="y", permission=Permission.MEMBER, group=_group(1))
    other_group = GroupMember(id=7, member_name="x", permission=Permission.OWNER, group=_group(2))
    assert member == same
    assert member != other_group
    assert len({member, same, other_group}) == 2


def test_member_decodes_camel_case():
    member = GroupMember.model_validate(
        {"id": 7, "memberName": "eve", "permission": "ADMINISTRATOR", "group": {"id": 1, "name": "g", "permission": "OWNER"}}
    )
    assert member.member_name == "eve"
    assert member.permission is Permission.ADMINISTRATOR


def test_contacts_convert_to_channels():
    group = _group(9)
    member = GroupMember(id=7, member_name="x", permission=Permission.MEMBER, group=group)

    assert group.as_group_channel() == GroupChannel(group=9)
    assert member.as_temp_channel().temp() == (7, 9)
    assert member.as_friend_channel().friend() == 7
    assert FriendMember(id=8, nickname="n").as_friend_channel() == FriendChannel(qq=8)


def test_base_channel_cannot_be_built():
    with pytest.raises(TypeError):
        MessageChannel()
