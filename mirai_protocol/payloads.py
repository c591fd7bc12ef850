from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .contacts import FriendMember, Group, GroupMember
from .errors import ProtocolError, StatusCode
from .single import FlashImage, Image


class Payload(BaseModel):
    """Base of every HTTP body exchanged with the gateway."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Payload":
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ProtocolError(StatusCode.BAD_REQUEST, message=f"{cls.__name__} validation failed: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class CommonResponse(Payload):
    """The most general response: a status code and a message string."""

    code: int
    msg: str = ""


class AboutData(Payload):
    version: str


class AboutResponse(Payload):
    code: int
    data: AboutData


class AuthRequest(Payload):
    auth_key: str = Field(alias="authKey")


class AuthResponse(Payload):
    code: int
    session: Optional[str] = None


class SessionRequest(Payload):
    """Body of /verify and /release."""

    session_key: str = Field(alias="sessionKey")
    qq: int


class SendMessageRequest(Payload):
    session_key: str = Field(alias="sessionKey")
    qq: Optional[int] = None
    group: Optional[int] = None
    quote: Optional[int] = None
    message_chain: List[Dict[str, Any]] = Field(alias="messageChain")


class SendMessageResponse(Payload):
    code: int
    msg: str = ""
    message_id: Optional[int] = Field(None, alias="messageId")


class FetchResponse(Payload):
    code: int
    data: List[Dict[str, Any]] = Field(default_factory=list)


class RecallRequest(Payload):
    session_key: str = Field(alias="sessionKey")
    target: int


class GroupTargetRequest(Payload):
    """Body of /muteAll and /unmuteAll."""

    session_key: str = Field(alias="sessionKey")
    target: int


class MuteRequest(Payload):
    session_key: str = Field(alias="sessionKey")
    target: int
    member_id: int = Field(alias="memberId")
    time: int


class UnmuteRequest(Payload):
    session_key: str = Field(alias="sessionKey")
    target: int
    member_id: int = Field(alias="memberId")


class KickRequest(Payload):
    session_key: str = Field(alias="sessionKey")
    target: int
    member_id: int = Field(alias="memberId")
    msg: str = ""


class GatewayConfig(Payload):
    """
    Gateway settings.

    cache_size: how many messages the gateway keeps; too small a cache breaks
    quoting and recalling older messages.
    enable_websocket: whether the websocket adapter is on.
    """

    cache_size: int = Field(alias="cacheSize")
    enable_websocket: bool = Field(alias="enableWebsocket")


class ConfigUpdateRequest(GatewayConfig):
    session_key: str = Field(alias="sessionKey")


class UploadedImage(Payload):
    image_id: str = Field(alias="imageId")
    url: str = ""
    path: str = ""

    def to_image(self) -> Image:
        return Image(image_id=self.image_id, url=self.url or None, path=self.path or None)

    def to_flash_image(self) -> FlashImage:
        return FlashImage(image_id=self.image_id, url=self.url or None, path=self.path or None)


class CommandRequest(Payload):
    auth_key: str = Field(alias="authKey")
    name: str
    args: List[str] = Field(default_factory=list)


class FriendListResponse(Payload):
    items: List[FriendMember]


class GroupListResponse(Payload):
    items: List[Group]


class MemberListResponse(Payload):
    items: List[GroupMember]


__all__ = [
    "Payload",
    "CommonResponse",
    "AboutData",
    "AboutResponse",
    "AuthRequest",
    "AuthResponse",
    "SessionRequest",
    "SendMessageRequest",
    "SendMessageResponse",
    "FetchResponse",
    "RecallRequest",
    "GroupTargetRequest",
    "MuteRequest",
    "UnmuteRequest",
    "KickRequest",
    "GatewayConfig",
    "ConfigUpdateRequest",
    "UploadedImage",
    "CommandRequest",
    "FriendListResponse",
    "GroupListResponse",
    "MemberListResponse",
]
