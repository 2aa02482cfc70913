"""Typed client for the WoodWing Assets (Elvis) REST API."""

from typing import Optional

from .clients.assets import AssetsClient
from .clients.gateway import HttpGateway
from .clients.http import RequestsHttpGateway
from .config.app import ClientConfig
from .services.assets import AssetsService

__version__ = "0.1.0"


def create_client(config: Optional[ClientConfig] = None) -> AssetsService:
    """Wire configuration, gateway, client and service.

    Args:
        config: Client configuration; read from the environment if omitted

    Returns:
        Service whose ``client`` attribute exposes the plain operations
    """
    config = config or ClientConfig.from_env()
    gateway = RequestsHttpGateway(config)
    return AssetsService(AssetsClient(gateway, profile=config.profile))


__all__ = [
    "AssetsClient",
    "AssetsService",
    "ClientConfig",
    "HttpGateway",
    "RequestsHttpGateway",
    "create_client",
]
