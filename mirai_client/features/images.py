from __future__ import annotations

import logging
import os
from enum import StrEnum
from pathlib import Path
from typing import Optional, Union

from mirai_client.core.network import NetworkClient
from mirai_client.core.session import ClientSession
from mirai_protocol.endpoints import Endpoint
from mirai_protocol.errors import ClientError, ProtocolError, StatusCode, check_code
from mirai_protocol.payloads import UploadedImage

logger = logging.getLogger(__name__)


class ImageType(StrEnum):
    """Which kind of chat the uploaded image is meant for."""

    FRIEND = "friend"
    GROUP = "group"
    TEMP = "temp"


class ImageManager:
    """Uploads images so they can be referenced by id in later messages."""

    def __init__(self, network: NetworkClient, session: ClientSession) -> None:
        self.network = network
        self.session = session

    async def upload_image(
        self,
        image_type: Union[ImageType, str],
        data: Union[bytes, bytearray, memoryview, str, os.PathLike],
        file_name: Optional[str] = None,
    ) -> UploadedImage:
        try:
            image_type = ImageType(image_type)
        except ValueError as exc:
            raise ClientError(f"Unknown image type {image_type!r}") from exc
        if isinstance(data, (bytes, bytearray, memoryview)):
            content = bytes(data)
        else:
            file_path = Path(data)
            if not file_path.exists():
                raise FileNotFoundError(file_path)
            file_name = file_name or file_path.name
            content = file_path.read_bytes()
        file_name = file_name or "image.png"

        fields = {"sessionKey": self.session.require_key(), "type": image_type.value}
        files = {"img": (file_name, content, "application/octet-stream")}
        reply = await self.network.post_multipart(Endpoint.UPLOAD_IMAGE, fields, files)
        if isinstance(reply, dict) and "imageId" not in reply:
            check_code(int(reply.get("code", StatusCode.BAD_REQUEST)), "UploadImage")
            raise ProtocolError(StatusCode.BAD_REQUEST, message="[UploadImage] imageId is missing", action="UploadImage")
        uploaded = UploadedImage.from_dict(reply)
        logger.info("Uploaded %s (%d bytes) as %s", file_name, len(content), uploaded.image_id)
        return uploaded


__all__ = ["ImageManager", "ImageType"]
