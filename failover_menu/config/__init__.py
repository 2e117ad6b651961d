from .credentials import Credentials, load_credentials, parse_credentials
from .settings import Settings, get_settings, reset_settings

__all__ = [
    "Credentials",
    "load_credentials",
    "parse_credentials",
    "Settings",
    "get_settings",
    "reset_settings",
]
