from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from mirai_client.config import CLIENT_CONFIG
from mirai_client.core import ClientSession, NetworkClient
from mirai_client.features import (
    AuthManager,
    ContactManager,
    GatewayConfigManager,
    GroupManager,
    ImageManager,
    MessagingManager,
)
from mirai_protocol.errors import MiraiError

logger = logging.getLogger(__name__)


class Bot:
    """
    One bot account driven through one gateway session.

    Entering the async context authenticates with the configured auth key and
    binds the configured qq; leaving it releases the bot and closes the HTTP
    client. Feature managers are exposed as attributes and can also be used
    outside the context once `login` has been awaited.
    """

    def __init__(
        self,
        qq: Optional[int] = None,
        auth_key: Optional[str] = None,
        config: Optional[Dict[str, Any]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or CLIENT_CONFIG
        self.qq = int(qq if qq is not None else self.config["qq"])
        self.auth_key = auth_key if auth_key is not None else str(self.config["auth_key"])
        self.network = NetworkClient(self.config, http_client=http_client)
        self.session = ClientSession()
        self.auth = AuthManager(self.network, self.session)
        self.messaging = MessagingManager(self.network, self.session, int(self.config["fetch_count"]))
        self.groups = GroupManager(self.network, self.session)
        self.contacts = ContactManager(self.network, self.session)
        self.gateway_config = GatewayConfigManager(self.network, self.session)
        self.images = ImageManager(self.network, self.session)

    async def login(self) -> None:
        await self.auth.auth(self.auth_key)
        await self.auth.verify(self.qq)

    async def logout(self) -> None:
        try:
            if self.session.is_bound():
                await self.auth.release()
        except MiraiError as exc:
            logger.warning("Release of bot %s failed: %s", self.qq, exc)
        finally:
            self.session.clear()
            await self.network.close()

    async def __aenter__(self) -> "Bot":
        try:
            await self.login()
        except BaseException:
            await self.network.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.logout()

    def __repr__(self) -> str:
        return f"<Bot qq={self.qq} {self.session!r}>"


__all__ = ["Bot"]
