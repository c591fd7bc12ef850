from __future__ import annotations

import logging
from typing import Any, Dict

from mirai_client.core.network import NetworkClient
from mirai_client.core.session import ClientSession
from mirai_protocol import validator
from mirai_protocol.constants import MAX_MUTE_SECONDS
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import ClientError, check_code
from mirai_protocol.payloads import CommonResponse, GroupTargetRequest, KickRequest, MuteRequest, UnmuteRequest

logger = logging.getLogger(__name__)


class GroupManager:
    """Group administration: muting members or the whole group, kicking members."""

    def __init__(self, network: NetworkClient, session: ClientSession) -> None:
        self.network = network
        self.session = session

    async def mute_all(self, group: int) -> None:
        await self._request(Endpoint.MUTE_ALL, "MuteAll", GroupTargetRequest(session_key=self.session.require_key(), target=group).to_dict())

    async def unmute_all(self, group: int) -> None:
        await self._request(Endpoint.UNMUTE_ALL, "UnmuteAll", GroupTargetRequest(session_key=self.session.require_key(), target=group).to_dict())

    async def mute(self, group: int, member: int, seconds: int) -> None:
        if not 0 < seconds <= MAX_MUTE_SECONDS:
            raise ClientError(f"Mute duration must be between 1 and {MAX_MUTE_SECONDS} seconds, got {seconds}")
        body = MuteRequest(session_key=self.session.require_key(), target=group, member_id=member, time=seconds).to_dict()
        await self._request(Endpoint.MUTE, "Mute", body)

    async def unmute(self, group: int, member: int) -> None:
        body = UnmuteRequest(session_key=self.session.require_key(), target=group, member_id=member).to_dict()
        await self._request(Endpoint.UNMUTE, "Unmute", body)

    async def kick(self, group: int, member: int, msg: str = "") -> None:
        """Remove `member` from `group`; `msg` is shown to the kicked member."""
        body = KickRequest(session_key=self.session.require_key(), target=group, member_id=member, msg=msg).to_dict()
        await self._request(Endpoint.KICK, "Kick", body)

    async def _request(self, endpoint: Endpoint, action: str, body: Dict[str, Any]) -> CommonResponse:
        response = CommonResponse.from_dict(
            await self.network.post(endpoint, body, validator.load_schema(endpoint))
        )
        check_code(response.code, action)
        logger.debug("%s succeeded on group %s", action, body.get("target"))
        return response


__all__ = ["GroupManager"]
