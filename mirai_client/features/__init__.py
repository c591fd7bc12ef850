from .auth import AuthManager
from .contacts import ContactManager
from .gateway_config import GatewayConfigManager
from .groups import GroupManager
from .images import ImageManager, ImageType
from .messaging import MessagingManager

__all__ = ["AuthManager", "ContactManager", "GatewayConfigManager", "GroupManager", "ImageManager", "ImageType", "MessagingManager"]
