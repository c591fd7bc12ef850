from __future__ import annotations

import logging
from typing import Optional, Sequence

from mirai_client.core.network import NetworkClient
from mirai_client.core.session import ClientSession
from mirai_protocol import validator
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import check_code
from mirai_protocol.payloads import AboutResponse, AuthRequest, CommandRequest, CommonResponse, SessionRequest

logger = logging.getLogger(__name__)


class AuthManager:
    """Handle auth/verify/release flows against the gateway."""

    def __init__(self, network: NetworkClient, session: ClientSession) -> None:
        self.network = network
        self.session = session

    async def about(self) -> AboutResponse:
        """Gateway status; needs no session."""
        response = AboutResponse.from_dict(await self.network.get(Endpoint.ABOUT))
        check_code(response.code, "About")
        return response

    async def auth(self, auth_key: str) -> str:
        """Exchange the auth key printed by the gateway console for a session key."""
        body = AuthRequest(auth_key=auth_key).to_dict()
        response = await self.network.post(Endpoint.AUTH, body, validator.load_schema(Endpoint.AUTH))
        self.session.set_authenticated(response)
        return self.session.require_key()

    async def verify(self, qq: int) -> None:
        """Bind the session to a bot account logged in on the gateway. One bot per session."""
        body = SessionRequest(session_key=self.session.require_key(), qq=qq).to_dict()
        response = CommonResponse.from_dict(
            await self.network.post(Endpoint.VERIFY, body, validator.load_schema(Endpoint.VERIFY))
        )
        check_code(response.code, "Verify")
        self.session.bind(qq)

    async def release(self, qq: Optional[int] = None) -> None:
        """
        Release the bound bot (or `qq`). Until released the gateway keeps queueing
        events for the session.
        """
        target = qq if qq is not None else self.session.bound_qq
        if target is None:
            logger.debug("Release skipped, no bot bound")
            return
        body = SessionRequest(session_key=self.session.require_key(), qq=target).to_dict()
        response = CommonResponse.from_dict(
            await self.network.post(Endpoint.RELEASE, body, validator.load_schema(Endpoint.RELEASE))
        )
        check_code(response.code, "Release")
        if target == self.session.bound_qq:
            self.session.unbind()

    async def send_command(self, auth_key: str, name: str, args: Sequence[str] = ()) -> str:
        """Run a console command on the gateway host. Legacy endpoint; returns the raw reply text."""
        body = CommandRequest(auth_key=auth_key, name=name, args=list(args)).to_dict()
        text = await self.network.post_text(Endpoint.COMMAND_SEND, body, validator.load_schema(Endpoint.COMMAND_SEND))
        logger.debug("Command %s executed", name)
        return text


__all__ = ["AuthManager"]
