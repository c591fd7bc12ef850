from __future__ import annotations

import pytest

from mirai_client.features import ContactManager, GatewayConfigManager, GroupManager, ImageManager, ImageType
from mirai_protocol.contacts import Permission
from mirai_protocol.errors import ClientError, ProtocolError, StatusCode
from mirai_protocol.payloads import GatewayConfig
from mirai_protocol.single import Image

GROUP = {"id": 555, "name": "club", "permission": "ADMINISTRATOR"}


@pytest.mark.asyncio
async def test_mute_and_unmute(network, recorder, session):
    recorder.on("/mute", {"code": 0, "msg": "success"})
    recorder.on("/unmute", {"code": 0, "msg": "success"})
    groups = GroupManager(network, session)

    await groups.mute(555, 777, 600)
    assert recorder.last_json() == {"sessionKey": "SESSION-KEY", "target": 555, "memberId": 777, "time": 600}
    await groups.unmute(555, 777)
    assert recorder.last_json() == {"sessionKey": "SESSION-KEY", "target": 555, "memberId": 777}


@pytest.mark.asyncio
@pytest.mark.parametrize("seconds", [0, -5, 30 * 24 * 60 * 60 + 1])
async def test_mute_duration_bounds(network, recorder, session, seconds):
    with pytest.raises(ClientError):
        await GroupManager(network, session).mute(555, 777, seconds)
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_mute_all_and_unmute_all(network, recorder, session):
    recorder.on("/muteAll", {"code": 0, "msg": "success"})
    recorder.on("/unmuteAll", {"code": 0, "msg": "success"})
    groups = GroupManager(network, session)

    await groups.mute_all(555)
    await groups.unmute_all(555)
    assert recorder.paths() == ["/muteAll", "/unmuteAll"]
    assert recorder.last_json() == {"sessionKey": "SESSION-KEY", "target": 555}


@pytest.mark.asyncio
async def test_kick_without_permission(network, recorder, session):
    recorder.on("/kick", {"code": 10, "msg": "no permission"})
    with pytest.raises(ProtocolError) as excinfo:
        await GroupManager(network, session).kick(555, 777, "bye")
    assert excinfo.value.status is StatusCode.PERMISSION_DENIED
    assert recorder.last_json()["msg"] == "bye"


@pytest.mark.asyncio
async def test_contact_lists(network, recorder, session):
    recorder.on("/friendList", [{"id": 8, "nickname": "dan", "remark": "D"}])
    recorder.on("/groupList", [GROUP])
    recorder.on("/memberList", [{"id": 777, "memberName": "carol", "permission": "OWNER", "group": GROUP}])
    contacts = ContactManager(network, session)

    friends = await contacts.friend_list()
    groups = await contacts.group_list()
    members = await contacts.member_list(555)

    assert friends[0].remark == "D"
    assert groups[0].permission is Permission.ADMINISTRATOR
    assert members[0].group.id == 555
    assert recorder.last().url.params["target"] == "555"
    assert recorder.last().url.params["sessionKey"] == "SESSION-KEY"


@pytest.mark.asyncio
async def test_contact_list_error_reply(network, recorder, session):
    recorder.on("/memberList", {"code": 5, "msg": "no such group"})
    with pytest.raises(ProtocolError) as excinfo:
        await ContactManager(network, session).member_list(1)
    assert excinfo.value.status is StatusCode.NO_SUCH_TARGET


@pytest.mark.asyncio
async def test_get_and_modify_config(network, recorder, session):
    recorder.on("/config", {"cacheSize": 4096, "enableWebsocket": False})
    manager = GatewayConfigManager(network, session)

    current = await manager.get_config()
    assert current.cache_size == 4096
    assert current.enable_websocket is False

    recorder.on("/config", {"code": 0, "msg": "success"})
    await manager.modify_config(GatewayConfig(cache_size=8192, enable_websocket=True))
    assert recorder.last().method == "POST"
    assert recorder.last_json() == {"sessionKey": "SESSION-KEY", "cacheSize": 8192, "enableWebsocket": True}


@pytest.mark.asyncio
async def test_modify_config_rejects_bad_cache_size(network, recorder, session):
    with pytest.raises(ProtocolError):
        await GatewayConfigManager(network, session).modify_config(GatewayConfig(cache_size=0, enable_websocket=False))
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_upload_image_bytes(network, recorder, session):
    recorder.on("/uploadImage", {"imageId": "{ABC}.png", "url": "http://img/abc.png", "path": ""})
    uploaded = await ImageManager(network, session).upload_image(ImageType.GROUP, b"\x89PNG", "cat.png")

    assert uploaded.image_id == "{ABC}.png"
    assert uploaded.to_image() == Image(image_id="{ABC}.png", url="http://img/abc.png")
    body = recorder.last().content
    assert recorder.last().headers["content-type"].startswith("multipart/form-data")
    assert b'name="sessionKey"' in body
    assert b'name="type"' in body
    assert b'name="img"; filename="cat.png"' in body
    assert b"\x89PNG" in body


@pytest.mark.asyncio
async def test_upload_image_from_path(network, recorder, session, tmp_path):
    recorder.on("/uploadImage", {"imageId": "{DEF}.jpg"})
    image_file = tmp_path / "dog.jpg"
    image_file.write_bytes(b"jpeg-bytes")

    uploaded = await ImageManager(network, session).upload_image("friend", image_file)

    assert uploaded.to_flash_image().image_id == "{DEF}.jpg"
    assert b'filename="dog.jpg"' in recorder.last().content


@pytest.mark.asyncio
async def test_upload_image_from_str_path(network, recorder, session, tmp_path):
    recorder.on("/uploadImage", {"imageId": "{GHI}.png"})
    image_file = tmp_path / "bird.png"
    image_file.write_bytes(b"png-bytes")

    uploaded = await ImageManager(network, session).upload_image(ImageType.GROUP, str(image_file))

    assert uploaded.image_id == "{GHI}.png"
    assert b'filename="bird.png"' in recorder.last().content
    assert b"png-bytes" in recorder.last().content


@pytest.mark.asyncio
async def test_upload_image_missing_file(network, recorder, session, tmp_path):
    with pytest.raises(FileNotFoundError):
        await ImageManager(network, session).upload_image(ImageType.GROUP, str(tmp_path / "absent.png"))
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_upload_image_error_reply(network, recorder, session):
    recorder.on("/uploadImage", {"code": 3, "msg": "wrong session"})
    with pytest.raises(ProtocolError) as excinfo:
        await ImageManager(network, session).upload_image(ImageType.TEMP, b"x")
    assert excinfo.value.status is StatusCode.WRONG_SESSION


@pytest.mark.asyncio
async def test_upload_image_rejects_unknown_type(network, session):
    with pytest.raises(ClientError):
        await ImageManager(network, session).upload_image("channel", b"x")
