"""
failover-menu - Python клиент для iiko Cloud API (авторизация и организации).
"""

__version__ = "0.1.0"

from .api_client import OpenApiClient
from .config import Credentials, Settings, get_settings, load_credentials
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConfigError,
    DeserializationError,
    FailoverMenuError,
    RetryableAuthError,
    TransportError,
)

__all__ = [
    "OpenApiClient",
    "Credentials",
    "Settings",
    "get_settings",
    "load_credentials",
    "ApiError",
    "AuthenticationError",
    "ConfigError",
    "DeserializationError",
    "FailoverMenuError",
    "RetryableAuthError",
    "TransportError",
]
