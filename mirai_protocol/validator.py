from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema

from .endpoints import Endpoint, normalize_endpoint
from .errors import ProtocolError, StatusCode

SCHEMA_DIR = Path(__file__).parent / "schemas"

# Mapping endpoint path -> schema filename (relative to SCHEMA_DIR)
SCHEMA_REGISTRY: Dict[str, str] = {
    Endpoint.AUTH.value: "auth.json",
    Endpoint.VERIFY.value: "session.json",
    Endpoint.RELEASE.value: "session.json",
    Endpoint.SEND_FRIEND_MESSAGE.value: "send_friend_message.json",
    Endpoint.SEND_GROUP_MESSAGE.value: "send_group_message.json",
    Endpoint.SEND_TEMP_MESSAGE.value: "send_temp_message.json",
    Endpoint.RECALL.value: "recall.json",
    Endpoint.MUTE.value: "mute.json",
    Endpoint.UNMUTE.value: "unmute.json",
    Endpoint.MUTE_ALL.value: "group_target.json",
    Endpoint.UNMUTE_ALL.value: "group_target.json",
    Endpoint.KICK.value: "kick.json",
    Endpoint.CONFIG.value: "config.json",
    Endpoint.COMMAND_SEND.value: "command.json",
}


def _schema_path(endpoint: str) -> Optional[Path]:
    filename = SCHEMA_REGISTRY.get(endpoint)
    if not filename:
        return None
    path = SCHEMA_DIR / filename
    return path if path.exists() else None


@lru_cache(maxsize=32)
def load_schema(endpoint: Union[str, Endpoint]) -> Optional[dict]:
    """Load the JSON schema of an endpoint's request body, if one is bundled."""
    path = _schema_path(normalize_endpoint(endpoint))
    if not path:
        return None
    with path.open("r", encoding="utf-8") as fp:
        return json.load(fp)


def validate_request(body: Dict[str, Any], schema: Optional[dict] = None) -> None:
    """Check an outbound body against its schema; bodies without a schema pass."""
    if not schema:
        return
    try:
        jsonschema.validate(instance=body, schema=schema)
    except jsonschema.ValidationError as exc:
        raise ProtocolError(StatusCode.BAD_REQUEST, message=f"Schema validation failed: {exc.message}") from exc


__all__ = ["SCHEMA_REGISTRY", "load_schema", "validate_request"]
