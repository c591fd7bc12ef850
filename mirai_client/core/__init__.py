from .network import NetworkClient, NetworkError
from .session import ClientSession, SessionError

__all__ = ["NetworkClient", "NetworkError", "ClientSession", "SessionError"]
