"""
API package for the User Registry API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_user_registry,
)

__all__ = [
    # Settings
    "get_settings",
    # Registry
    "get_user_registry",
]
