"""
Repository Interfaces (Ports) for the User Registry API.

This package defines abstract interfaces that decouple application logic
from infrastructure. Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import UserRegistry

    def create_user(registry: UserRegistry, dto):
        result = registry.create(dto)
        if not result.success:
            ...
"""

from application.ports.user_registry import (
    RegistryErrorCode,
    RegistryResult,
    UserRegistry,
)

__all__ = [
    "UserRegistry",
    "RegistryResult",
    "RegistryErrorCode",
]
