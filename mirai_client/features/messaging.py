from __future__ import annotations

import logging
from typing import List, Optional, Union

from mirai_client.core.network import NetworkClient
from mirai_client.core.session import ClientSession
from mirai_protocol import validator
from mirai_protocol.constants import DEFAULT_FETCH_COUNT
from mirai_protocol.channel import FriendChannel, GroupChannel, MessageChannel, TempChannel
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import ClientError, ProtocolError, StatusCode, check_code
from mirai_protocol.events import EventBase, parse_events
from mirai_protocol.message import ChainItem, Message
from mirai_protocol.payloads import CommonResponse, FetchResponse, RecallRequest, SendMessageRequest, SendMessageResponse

logger = logging.getLogger(__name__)

Sendable = Union[Message, ChainItem]


def _as_message(message: Sendable) -> Message:
    return message if isinstance(message, Message) else Message.of(message)


class MessagingManager:
    """Messaging feature facade: sending, fetching/peeking events, recalling."""

    def __init__(self, network: NetworkClient, session: ClientSession, fetch_count: int = DEFAULT_FETCH_COUNT) -> None:
        self.network = network
        self.session = session
        self.fetch_count = fetch_count

    async def send_message(self, channel: MessageChannel, message: Sendable) -> int:
        """Send `message` on `channel` and return the id the gateway assigned to it."""
        message = _as_message(message)
        request = SendMessageRequest(
            session_key=self.session.require_key(),
            quote=message.quote,
            message_chain=message.content_chain(),
            **channel.target_fields(),
        )
        body = request.to_dict()
        endpoint = channel.endpoint
        response = SendMessageResponse.from_dict(
            await self.network.post(endpoint, body, validator.load_schema(endpoint))
        )
        check_code(response.code, "Sending")
        if response.message_id is None:
            raise ProtocolError(StatusCode.BAD_REQUEST, message="[Sending] messageId is missing", action="Sending")
        logger.debug("Sent message %s to %s", response.message_id, channel.kind.value)
        return response.message_id

    async def send_friend_message(self, qq: int, message: Sendable) -> int:
        return await self.send_message(FriendChannel(qq=qq), message)

    async def send_group_message(self, group: int, message: Sendable) -> int:
        return await self.send_message(GroupChannel(group=group), message)

    async def send_temp_message(self, qq: int, group: int, message: Sendable) -> int:
        return await self.send_message(TempChannel(qq=qq, group=group), message)

    async def fetch_message(self, count: Optional[int] = None) -> List[EventBase]:
        """Take the oldest queued events off the gateway queue."""
        return await self._get_events(Endpoint.FETCH_MESSAGE, "Fetching", count)

    async def fetch_latest_message(self, count: Optional[int] = None) -> List[EventBase]:
        """Take the newest queued events off the gateway queue."""
        return await self._get_events(Endpoint.FETCH_LATEST_MESSAGE, "Fetching", count)

    async def peek_message(self, count: Optional[int] = None) -> List[EventBase]:
        """Read the oldest queued events without removing them."""
        return await self._get_events(Endpoint.PEEK_MESSAGE, "Peeking", count)

    async def peek_latest_message(self, count: Optional[int] = None) -> List[EventBase]:
        """Read the newest queued events without removing them."""
        return await self._get_events(Endpoint.PEEK_LATEST_MESSAGE, "Peeking", count)

    async def recall(self, message_id: int) -> None:
        body = RecallRequest(session_key=self.session.require_key(), target=message_id).to_dict()
        response = CommonResponse.from_dict(
            await self.network.post(Endpoint.RECALL, body, validator.load_schema(Endpoint.RECALL))
        )
        check_code(response.code, "Recall")

    async def _get_events(self, endpoint: Endpoint, action: str, count: Optional[int]) -> List[EventBase]:
        count = self.fetch_count if count is None else count
        if count <= 0:
            raise ClientError("count must be positive")
        params = {"sessionKey": self.session.require_key(), "count": count}
        response = FetchResponse.from_dict(await self.network.get(endpoint, params=params))
        check_code(response.code, action)
        events = parse_events(response.data)
        logger.debug("%s returned %d events", endpoint.value, len(events))
        return events


__all__ = ["MessagingManager", "Sendable"]
