from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import httpx

from mirai_client.config import CLIENT_CONFIG
from mirai_protocol import codec, validator
from mirai_protocol.constants import ENCODING, JSON_CONTENT_TYPE
from mirai_protocol.endpoints import Endpoint, normalize_endpoint
from mirai_protocol.errors import NetworkError

logger = logging.getLogger(__name__)


class NetworkClient:
    """HTTP client bound to one gateway: JSON bodies in and out, transport errors wrapped."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.config = config or CLIENT_CONFIG
        self.base_url: str = str(self.config["base_url"]).rstrip("/")
        self.timeout: float = float(self.config["request_timeout"])
        self.user_agent: str = str(self.config.get("user_agent") or "")
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client: bool = http_client is None

    @property
    def http(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"User-Agent": self.user_agent} if self.user_agent else None
            self._client = httpx.AsyncClient(timeout=self.timeout, headers=headers)
        return self._client

    def url(self, endpoint: Union[str, Endpoint]) -> str:
        """Join the base URL and an endpoint path (which must start with '/')."""
        return self.base_url + normalize_endpoint(endpoint)

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
        logger.debug("Network client closed")

    async def get(self, endpoint: Union[str, Endpoint], params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._request("GET", endpoint, params=params)
        return codec.decode_body(response.content)

    async def post(
        self,
        endpoint: Union[str, Endpoint],
        body: Dict[str, Any],
        schema: Optional[dict] = None,
    ) -> Any:
        response = await self._post(endpoint, body, schema)
        return codec.decode_body(response.content)

    async def post_text(
        self,
        endpoint: Union[str, Endpoint],
        body: Dict[str, Any],
        schema: Optional[dict] = None,
    ) -> str:
        """POST a JSON body and return the raw response text."""
        response = await self._post(endpoint, body, schema)
        return response.content.decode(ENCODING, errors="replace")

    async def post_multipart(
        self,
        endpoint: Union[str, Endpoint],
        data: Dict[str, Any],
        files: Dict[str, Any],
    ) -> Any:
        response = await self._request("POST", endpoint, data=data, files=files)
        return codec.decode_body(response.content)

    async def _post(self, endpoint: Union[str, Endpoint], body: Dict[str, Any], schema: Optional[dict]) -> httpx.Response:
        validator.validate_request(body, schema)
        content = codec.encode_body(body)
        return await self._request(
            "POST",
            endpoint,
            content=content,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    async def _request(self, method: str, endpoint: Union[str, Endpoint], **kwargs: Any) -> httpx.Response:
        path = normalize_endpoint(endpoint)
        try:
            response = await self.http.request(method, self.url(path), **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out", method, path)
            raise NetworkError(f"{method} {path} timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(f"{method} {path} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, path, response.status_code)
        if response.status_code >= 400:
            raise NetworkError(f"{method} {path} returned HTTP {response.status_code}")
        return response


__all__ = ["NetworkClient", "NetworkError"]
