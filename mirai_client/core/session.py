from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from mirai_protocol.errors import ProtocolError, StatusCode, check_code
from mirai_protocol.payloads import AuthResponse

logger = logging.getLogger(__name__)


class SessionError(ProtocolError):
    pass


class ClientSession:
    """Holds the session key handed out by /auth and the bot bound with /verify."""

    def __init__(self) -> None:
        self.session_key: Optional[str] = None
        self.bound_qq: Optional[int] = None

    def build_body(self, extra: Optional[Dict[str, Any]] = None, require_auth: bool = True) -> Dict[str, Any]:
        """Request body carrying the session key plus `extra` fields."""
        body: Dict[str, Any] = {}
        if require_auth:
            body["sessionKey"] = self.require_key()
        if extra:
            body.update(extra)
        return body

    def require_key(self) -> str:
        if not self.session_key:
            raise SessionError(StatusCode.UNAUTHORIZED, message="Session is not authenticated, call auth first")
        return self.session_key

    def set_authenticated(self, response: Dict[str, Any]) -> None:
        auth = AuthResponse.from_dict(response)
        check_code(auth.code, "Auth")
        if not auth.session:
            raise SessionError(StatusCode.WRONG_SESSION, message="[Auth] Gateway returned no session key")
        self.session_key = auth.session
        self.bound_qq = None
        logger.info("Session authenticated")

    def bind(self, qq: int) -> None:
        self.bound_qq = qq
        logger.info("Session bound to bot %s", qq)

    def unbind(self) -> None:
        if self.bound_qq is not None:
            logger.info("Session released bot %s", self.bound_qq)
        self.bound_qq = None

    def is_authenticated(self) -> bool:
        return bool(self.session_key)

    def is_bound(self) -> bool:
        return self.is_authenticated() and self.bound_qq is not None

    def clear(self) -> None:
        self.session_key = None
        self.bound_qq = None

    def __repr__(self) -> str:
        # the session key is a secret
        state = "authenticated" if self.is_authenticated() else "anonymous"
        return f"<ClientSession {state} bound={self.bound_qq}>"
