from __future__ import annotations

import pytest

from mirai_protocol import events
from mirai_protocol.channel import FriendChannel, GroupChannel, TempChannel
from mirai_protocol.contacts import Permission
from mirai_protocol.errors import ProtocolError
from mirai_protocol.single import Plain

GROUP = {"id": 555, "name": "club", "permission": "MEMBER"}
MEMBER = {"id": 777, "memberName": "carol", "permission": "ADMINISTRATOR", "group": GROUP}


def _chain(text):
    return [{"type": "Source", "id": 31, "time": 1600000000}, {"type": "Plain", "text": text}]


def test_group_message():
    event = events.parse_event({"type": "GroupMessage", "messageChain": _chain("hi"), "sender": MEMBER})

    assert isinstance(event, events.GroupMessage)
    assert events.is_message_event(event)
    assert events.is_group_message(event)
    assert not events.is_friend_message(event)
    assert event.sender.member_name == "carol"
    assert event.sender.permission is Permission.ADMINISTRATOR
    assert event.channel == GroupChannel(group=555)
    assert event.message.message_id == 31
    assert event.message.message_chain == (Plain(text="hi"),)


def test_friend_and_temp_messages():
    friend = events.parse_event(
        {"type": "FriendMessage", "messageChain": _chain("yo"), "sender": {"id": 8, "nickname": "dan", "remark": ""}}
    )
    temp = events.parse_event({"type": "TempMessage", "messageChain": _chain("psst"), "sender": MEMBER})

    assert events.is_friend_message(friend)
    assert friend.channel == FriendChannel(qq=8)
    assert isinstance(temp, events.TempMessage)
    assert temp.channel == TempChannel(qq=777, group=555)
    assert str(temp.message) == "psst"


def test_recall_events():
    group_recall = events.parse_event(
        {
            "type": "GroupRecallEvent",
            "authorId": 777,
            "messageId": 31,
            "time": 1600000000,
            "group": GROUP,
            "operator": None,
        }
    )
    friend_recall = events.parse_event(
        {"type": "FriendRecallEvent", "authorId": 8, "messageId": 32, "time": 1600000001, "operator": 8}
    )

    assert group_recall.operator is None
    assert group_recall.message_id == 31
    assert group_recall.group.name == "club"
    assert friend_recall.operator == 8


def test_bot_events():
    online = events.parse_event({"type": "BotOnlineEvent", "qq": 10001})
    muted = events.parse_event({"type": "BotMuteEvent", "durationSeconds": 600, "operator": MEMBER})
    perm = events.parse_event(
        {"type": "BotGroupPermissionChangeEvent", "origin": "MEMBER", "current": "ADMINISTRATOR", "group": GROUP}
    )
    kicked = events.parse_event({"type": "BotLeaveEventKick", "group": GROUP})

    assert isinstance(online, events.BotOnlineEvent)
    assert online.qq == 10001
    assert muted.duration_seconds == 600
    assert perm.current is Permission.ADMINISTRATOR
    assert isinstance(kicked, events.BotLeaveEventKick)
    assert not events.is_message_event(online)


def test_group_setting_events():
    renamed = events.parse_event(
        {"type": "GroupNameChangeEvent", "origin": "old", "current": "new", "group": GROUP, "operator": MEMBER}
    )
    mute_all = events.parse_event({"type": "GroupMuteAllEvent", "origin": False, "current": True, "group": GROUP})

    assert renamed.current == "new"
    assert renamed.operator.id == 777
    assert mute_all.current is True
    assert mute_all.operator is None


def test_unknown_event_keeps_payload():
    raw = {"type": "MemberJoinEvent", "member": MEMBER}
    event = events.parse_event(raw)

    assert isinstance(event, events.UnsupportedEvent)
    assert event.type == "MemberJoinEvent"
    assert event.to_dict() == raw


def test_invalid_known_event_raises():
    with pytest.raises(ProtocolError):
        events.parse_event({"type": "BotOnlineEvent"})
    with pytest.raises(ProtocolError):
        events.parse_event("BotOnlineEvent")


def test_parse_events_keeps_order():
    parsed = events.parse_events(
        [
            {"type": "BotOnlineEvent", "qq": 1},
            {"type": "Whatever"},
            {"type": "FriendMessage", "messageChain": _chain("x"), "sender": {"id": 2, "nickname": "n"}},
        ]
    )
    assert [type(event).__name__ for event in parsed] == ["BotOnlineEvent", "UnsupportedEvent", "FriendMessage"]


def test_event_type_table_matches_tags():
    for tag, cls in events.EVENT_TYPES.items():
        assert cls.model_fields["type"].default == tag


def test_unhashable_event_tag_raises():
    with pytest.raises(ProtocolError):
        events.parse_event({"type": {"a": 1}})
    with pytest.raises(ProtocolError):
        events.parse_events([{"type": ["GroupMessage"]}])


def test_message_events_are_hashable():
    raw = {"type": "GroupMessage", "messageChain": _chain("hi"), "sender": MEMBER}
    first = events.parse_event(raw)
    second = events.parse_event(raw)

    assert first.message_chain[1] == Plain(text="hi")
    assert first == second
    assert len({first, second}) == 1
    assert first.to_dict()["messageChain"] == _chain("hi")
