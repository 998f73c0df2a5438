"""
Ports (интерфейсы) внешних систем.
"""

from .registry_provider import IRegistryProvider
from .messaging_gateway import IMessagingGateway

__all__ = ["IRegistryProvider", "IMessagingGateway"]
