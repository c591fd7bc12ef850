from __future__ import annotations

import logging

from mirai_client.core.network import NetworkClient
from mirai_client.core.session import ClientSession
from mirai_protocol import validator
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import check_code
from mirai_protocol.payloads import CommonResponse, ConfigUpdateRequest, GatewayConfig

logger = logging.getLogger(__name__)


class GatewayConfigManager:
    """Read and modify the settings of the session on the gateway."""

    def __init__(self, network: NetworkClient, session: ClientSession) -> None:
        self.network = network
        self.session = session

    async def get_config(self) -> GatewayConfig:
        data = await self.network.get(Endpoint.CONFIG, params={"sessionKey": self.session.require_key()})
        # An error reply carries a code instead of the settings
        if isinstance(data, dict) and "code" in data and "cacheSize" not in data:
            check_code(int(data["code"]), "GetConfig")
        return GatewayConfig.from_dict(data)

    async def modify_config(self, config: GatewayConfig) -> None:
        request = ConfigUpdateRequest(
            session_key=self.session.require_key(),
            cache_size=config.cache_size,
            enable_websocket=config.enable_websocket,
        )
        response = CommonResponse.from_dict(
            await self.network.post(Endpoint.CONFIG, request.to_dict(), validator.load_schema(Endpoint.CONFIG))
        )
        check_code(response.code, "ModifyConfig")
        logger.info("Gateway config updated: cacheSize=%d enableWebsocket=%s", config.cache_size, config.enable_websocket)


__all__ = ["GatewayConfigManager"]
