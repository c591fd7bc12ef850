from __future__ import annotations

import json
from typing import Any

from .constants import ENCODING, MAX_PAYLOAD_SIZE
from .errors import ProtocolError, StatusCode


def encode_body(body: Any) -> bytes:
    """Encode a request body into compact UTF-8 JSON."""
    try:
        json_str = json.dumps(body, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Encode failed: {exc}") from exc

    data = json_str.encode(ENCODING)
    if len(data) > MAX_PAYLOAD_SIZE:
        raise ProtocolError(StatusCode.BAD_REQUEST, message="Request body too large")
    return data


def decode_body(data: bytes) -> Any:
    """Decode a response body produced by the gateway."""
    try:
        return json.loads(data.decode(ENCODING))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Decode failed: {exc}") from exc


__all__ = ["encode_body", "decode_body"]
