"""Friend, group and member lists of the bound bot."""
from __future__ import annotations

from typing import Any, Dict, List

from mirai_client.core.network import NetworkClient
from mirai_client.core.session import ClientSession
from mirai_protocol.contacts import FriendMember, Group, GroupMember
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import check_code
from mirai_protocol.payloads import FriendListResponse, GroupListResponse, MemberListResponse


class ContactManager:
    def __init__(self, network: NetworkClient, session: ClientSession) -> None:
        self.network = network
        self.session = session

    async def friend_list(self) -> List[FriendMember]:
        data = await self._get_list(Endpoint.FRIEND_LIST, "FriendList", {})
        return FriendListResponse.from_dict({"items": data}).items

    async def group_list(self) -> List[Group]:
        data = await self._get_list(Endpoint.GROUP_LIST, "GroupList", {})
        return GroupListResponse.from_dict({"items": data}).items

    async def member_list(self, group: int) -> List[GroupMember]:
        data = await self._get_list(Endpoint.MEMBER_LIST, "MemberList", {"target": group})
        return MemberListResponse.from_dict({"items": data}).items

    async def _get_list(self, endpoint: Endpoint, action: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        params = {"sessionKey": self.session.require_key(), **params}
        data = await self.network.get(endpoint, params=params)
        # Lists come back bare; errors come back as {"code": ..., "msg": ...}
        if isinstance(data, dict):
            check_code(int(data.get("code", 0)), action)
            data = data.get("data", [])
        return data


__all__ = ["ContactManager"]
