"""Protocol-wide constants shared by the models and the client."""

DEFAULT_BASE_URL = "http://127.0.0.1:8080"
ENCODING = "utf-8"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
DEFAULT_FETCH_COUNT = 10
MAX_PAYLOAD_SIZE = 1024 * 1024  # 1 MB upper bound for JSON request bodies
MAX_MUTE_SECONDS = 30 * 24 * 60 * 60  # gateway refuses mutes longer than 30 days

__all__ = [
    "DEFAULT_BASE_URL",
    "ENCODING",
    "JSON_CONTENT_TYPE",
    "DEFAULT_FETCH_COUNT",
    "MAX_PAYLOAD_SIZE",
    "MAX_MUTE_SECONDS",
]
