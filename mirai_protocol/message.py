"""
Messages and their builder.

A `Message` is what gets sent or received: a non-empty chain of content
elements, optionally quoting (replying to) another message. Received messages
also carry their `Source` (id and time) and the full `Quote` element.

    message = (
        MessageBuilder()
        .at(123456, "@alice")
        .text(" hello")
        .quote(42)
        .build()
    )
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from .errors import MessageBuildingError
from .single import (
    At,
    AtAll,
    Face,
    FlashImage,
    Image,
    Plain,
    Quote,
    SingleBase,
    SingleMessage,
    Source,
    dump_chain,
    is_meta,
    parse_chain,
    to_single,
)

ChainItem = Union[str, Dict[str, Any], SingleBase]


class Message(BaseModel):
    """Immutable message: content chain plus optional quote and source metadata."""

    model_config = ConfigDict(frozen=True)

    message_chain: Tuple[SingleMessage, ...]
    quote: Optional[int] = None
    source: Optional[Source] = None
    quoted: Optional[Quote] = None

    @model_validator(mode="before")
    @classmethod
    def check_chain(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        chain = data.get("message_chain") or ()
        if isinstance(chain, (str, dict, SingleBase)):
            chain = (chain,)
        items = [to_single(item) for item in chain]
        if not items:
            raise MessageBuildingError("Message chain must not be empty")
        meta = [item for item in items if is_meta(item)]
        if meta:
            raise MessageBuildingError(f"{meta[0].type} cannot be part of the content chain")
        data = {**data, "message_chain": tuple(items)}
        quoted = data.get("quoted")
        if quoted is not None and data.get("quote") is None:
            data["quote"] = quoted["id"] if isinstance(quoted, dict) else quoted.id
        return data

    @classmethod
    def of(cls, *items: ChainItem, quote: Optional[int] = None) -> "Message":
        return cls(message_chain=items, quote=quote)

    @classmethod
    def from_chain(cls, items: Iterable[Union[Dict[str, Any], SingleBase]]) -> "Message":
        """Build a Message from a received wire chain (Source/Quote first, then content)."""
        source: Optional[Source] = None
        quoted: Optional[Quote] = None
        content: List[SingleBase] = []
        for single in parse_chain(items):
            if isinstance(single, Source):
                source = single
            elif isinstance(single, Quote):
                quoted = single
            else:
                content.append(single)
        return cls(message_chain=content, source=source, quoted=quoted)

    def content_chain(self) -> List[Dict[str, Any]]:
        """Content elements as sent in a send request's messageChain."""
        return dump_chain(self.message_chain)

    def to_chain(self) -> List[Dict[str, Any]]:
        """Full wire chain, metadata first."""
        chain: List[Dict[str, Any]] = []
        if self.source is not None:
            chain.append(self.source.to_dict())
        if self.quoted is not None:
            chain.append(self.quoted.to_dict())
        elif self.quote is not None:
            chain.append({"type": "Quote", "id": self.quote})
        chain.extend(self.content_chain())
        return chain

    @property
    def message_id(self) -> Optional[int]:
        return self.source.id if self.source is not None else None

    def __str__(self) -> str:
        return "".join(str(single) for single in self.message_chain)


class MessageBuilder:
    """
    Accumulates chain elements, then validates and freezes them into a Message.

    `build` raises MessageBuildingError when nothing was appended.
    """

    def __init__(self) -> None:
        self._quote: Optional[int] = None
        self._chain: List[SingleBase] = []

    def append(self, item: ChainItem) -> "MessageBuilder":
        self._chain.append(to_single(item))
        return self

    def extend(self, items: Iterable[ChainItem]) -> "MessageBuilder":
        for item in items:
            self.append(item)
        return self

    def text(self, text: str) -> "MessageBuilder":
        return self.append(Plain(text=text))

    def at(self, target: int, display: str = "") -> "MessageBuilder":
        return self.append(At(target=target, display=display))

    def at_all(self) -> "MessageBuilder":
        return self.append(AtAll())

    def face(self, face_id: Optional[int] = None, name: Optional[str] = None) -> "MessageBuilder":
        if face_id is None and name is None:
            raise MessageBuildingError("Face needs a face id or a name")
        return self.append(Face(face_id=face_id, name=name))

    def image(
        self,
        image_id: Optional[str] = None,
        url: Optional[str] = None,
        path: Optional[str] = None,
        flash: bool = False,
    ) -> "MessageBuilder":
        if image_id is None and url is None and path is None:
            raise MessageBuildingError("Image needs one of image_id, url or path")
        cls = FlashImage if flash else Image
        return self.append(cls(image_id=image_id, url=url, path=path))

    def quote(self, message_id: int) -> "MessageBuilder":
        self._quote = message_id
        return self

    def is_empty(self) -> bool:
        return not self._chain

    def build(self) -> Message:
        return Message(message_chain=tuple(self._chain), quote=self._quote)


__all__ = ["ChainItem", "Message", "MessageBuilder"]
