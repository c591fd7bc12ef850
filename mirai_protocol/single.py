"""
Message chain elements.

A message chain is a JSON array of objects tagged by their ``type`` field. Each
tag selects one model below; tags this library does not know decode to
`Unsupported`, which keeps every received field so it can be sent back as-is.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Iterable, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter, ValidationError, model_validator

from .errors import MessageBuildingError, ProtocolError, StatusCode


class SingleBase(BaseModel):
    """Common configuration: immutable, camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class Source(SingleBase):
    """Id and timestamp of a received message. Only ever sent by the server."""

    type: Literal["Source"] = "Source"
    id: int
    time: int

    def __str__(self) -> str:
        return f"[source:{self.id}]"


class Quote(SingleBase):
    """Reference to the message a received message replies to."""

    type: Literal["Quote"] = "Quote"
    id: int
    group_id: int = Field(0, alias="groupId")
    sender_id: int = Field(0, alias="senderId")
    target_id: int = Field(0, alias="targetId")
    origin: Tuple["SingleMessage", ...] = ()

    def __str__(self) -> str:
        return f"[quote:{self.id}]"


class Plain(SingleBase):
    type: Literal["Plain"] = "Plain"
    text: str

    def __str__(self) -> str:
        return self.text


class At(SingleBase):
    type: Literal["At"] = "At"
    target: int
    display: str = ""

    def __str__(self) -> str:
        return f"[at:{self.target}@{self.display}]"


class AtAll(SingleBase):
    type: Literal["AtAll"] = "AtAll"

    def __str__(self) -> str:
        return "[atall]"


class Face(SingleBase):
    """A built-in expression, identified by id or by name (at least one)."""

    type: Literal["Face"] = "Face"
    face_id: Optional[int] = Field(None, alias="faceId")
    name: Optional[str] = None

    @model_validator(mode="after")
    def require_reference(self) -> "Face":
        if self.face_id is None and self.name is None:
            raise ValueError("Face needs a faceId or a name")
        return self

    @classmethod
    def from_id(cls, face_id: int) -> "Face":
        return cls(face_id=face_id)

    @classmethod
    def from_name(cls, name: str) -> "Face":
        return cls(name=name)

    def __str__(self) -> str:
        return f"[ce:{self.face_id if self.face_id is not None else self.name}]"


class _ImageBase(SingleBase):
    """
    Shared shape of Image and FlashImage.

    ``image_id`` names an image already stored by the chat service, ``url`` points
    to a downloadable image and ``path`` to a file on the gateway host. When more
    than one is set the gateway uses the first of image_id, url, path.
    """

    image_id: Optional[str] = Field(None, alias="imageId")
    url: Optional[str] = None
    path: Optional[str] = None

    @model_validator(mode="after")
    def require_reference(self):
        if self.image_id is None and self.url is None and self.path is None:
            raise ValueError(f"{self.type} needs one of imageId, url or path")
        return self

    @classmethod
    def from_id(cls, image_id: str):
        return cls(image_id=image_id)

    @classmethod
    def from_url(cls, url: str):
        return cls(url=url)

    @classmethod
    def from_path(cls, path: str):
        return cls(path=path)

    def preferred_reference(self) -> Tuple[str, str]:
        """Return the (wire field, value) pair the gateway will use."""
        for field_name, value in (("imageId", self.image_id), ("url", self.url), ("path", self.path)):
            if value is not None:
                return field_name, value
        raise MessageBuildingError(f"{self.type} has no image reference")


class Image(_ImageBase):
    type: Literal["Image"] = "Image"

    def __str__(self) -> str:
        return "[image]"


class FlashImage(_ImageBase):
    type: Literal["FlashImage"] = "FlashImage"

    def __str__(self) -> str:
        return "[flash_image]"


class Xml(SingleBase):
    type: Literal["Xml"] = "Xml"
    xml: str

    def __str__(self) -> str:
        return f"[xml:{self.xml}]"


class Json(SingleBase):
    type: Literal["Json"] = "Json"
    json_: str = Field(alias="json")

    def __str__(self) -> str:
        return f"[json:{self.json_}]"


class App(SingleBase):
    type: Literal["App"] = "App"
    content: str

    def __str__(self) -> str:
        return f"[app:{self.content}]"


class Poke(SingleBase):
    type: Literal["Poke"] = "Poke"
    name: str

    def __str__(self) -> str:
        return f"[poke:{self.name}]"


class Unsupported(SingleBase):
    """Element with a tag this library does not model; extra fields are kept verbatim."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    type: str = "Unsupported"

    def __str__(self) -> str:
        return f"[unsupported:{self.type}]"


SINGLE_MESSAGE_TYPES: Dict[str, type] = {
    "Source": Source,
    "Quote": Quote,
    "Plain": Plain,
    "At": At,
    "AtAll": AtAll,
    "Face": Face,
    "Image": Image,
    "FlashImage": FlashImage,
    "Xml": Xml,
    "Json": Json,
    "App": App,
    "Poke": Poke,
}


def _single_tag(value: Any) -> str:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if isinstance(value, Unsupported) or not isinstance(tag, str) or tag not in SINGLE_MESSAGE_TYPES:
        return "Unsupported"
    return tag


SingleMessage = Annotated[
    Union[
        Annotated[Source, Tag("Source")],
        Annotated[Quote, Tag("Quote")],
        Annotated[Plain, Tag("Plain")],
        Annotated[At, Tag("At")],
        Annotated[AtAll, Tag("AtAll")],
        Annotated[Face, Tag("Face")],
        Annotated[Image, Tag("Image")],
        Annotated[FlashImage, Tag("FlashImage")],
        Annotated[Xml, Tag("Xml")],
        Annotated[Json, Tag("Json")],
        Annotated[App, Tag("App")],
        Annotated[Poke, Tag("Poke")],
        Annotated[Unsupported, Tag("Unsupported")],
    ],
    Discriminator(_single_tag),
]

Quote.model_rebuild()

_SINGLE_ADAPTER: TypeAdapter = TypeAdapter(SingleMessage)
_CHAIN_ADAPTER: TypeAdapter = TypeAdapter(List[SingleMessage])


def parse_single(data: Dict[str, Any]) -> SingleBase:
    """Decode one chain element; unknown tags become Unsupported."""
    if not isinstance(data, dict):
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Message element must be an object, got {type(data).__name__}")
    try:
        return _SINGLE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Message element validation failed: {exc}") from exc


def parse_chain(items: Iterable[Dict[str, Any]]) -> List[SingleBase]:
    """Decode a JSON message chain."""
    if not isinstance(items, list):
        items = list(items)
    try:
        return _CHAIN_ADAPTER.validate_python(items)
    except ValidationError as exc:
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Message chain validation failed: {exc}") from exc


def dump_single(single: SingleBase) -> Dict[str, Any]:
    return single.to_dict()


def dump_chain(chain: Iterable[SingleBase]) -> List[Dict[str, Any]]:
    return [single.to_dict() for single in chain]


def is_meta(single: SingleBase) -> bool:
    """Source and Quote describe a message rather than being part of its content."""
    return isinstance(single, (Source, Quote))


def to_single(value: Union[str, Dict[str, Any], SingleBase]) -> SingleBase:
    """Coerce builder input: str -> Plain, dict -> decoded element, element -> itself."""
    if isinstance(value, SingleBase):
        return value
    if isinstance(value, str):
        return Plain(text=value)
    if isinstance(value, dict):
        try:
            return parse_single(value)
        except ProtocolError as exc:
            raise MessageBuildingError(exc.message) from exc
    raise MessageBuildingError(f"Cannot build a message element from {type(value).__name__}")


__all__ = [
    "SingleBase",
    "SingleMessage",
    "SINGLE_MESSAGE_TYPES",
    "Source",
    "Quote",
    "Plain",
    "At",
    "AtAll",
    "Face",
    "Image",
    "FlashImage",
    "Xml",
    "Json",
    "App",
    "Poke",
    "Unsupported",
    "parse_single",
    "parse_chain",
    "dump_single",
    "dump_chain",
    "is_meta",
    "to_single",
]
