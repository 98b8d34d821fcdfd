"""
FastAPI Dependency Providers for the User Registry API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with substitute
implementations.

Architecture:
- Settings are cached per-process (lru_cache in backend.settings)
- The user registry is cached per-process: it is the only copy of the data

Usage in routers:
    from api.deps import get_user_registry
    from application.ports import UserRegistry

    @router.get("/api/users/{user_id}")
    def get_user(
        user_id: int,
        registry: UserRegistry = Depends(get_user_registry),
    ):
        return registry.read(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_user_registry] = lambda: InMemoryUserRegistry()
"""

from functools import lru_cache

from application.ports import UserRegistry
from infrastructure import InMemoryUserRegistry
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Registry Provider
# =============================================================================


@lru_cache
def get_user_registry() -> UserRegistry:
    """
    Get the process-wide UserRegistry.

    Cached so every request shares the same store and id counter.
    Clear with get_user_registry.cache_clear() to start from an empty store.

    Returns:
        UserRegistry: In-memory registry instance
    """
    return InMemoryUserRegistry()
