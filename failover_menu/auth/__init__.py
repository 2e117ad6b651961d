from .auth_manager import AuthManager, build_url
from .token_cache import ReadWriteLock, SessionTokenCache

__all__ = ["AuthManager", "ReadWriteLock", "SessionTokenCache", "build_url"]
