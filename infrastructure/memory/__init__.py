"""
In-memory adapters.
"""

from infrastructure.memory.user_registry import InMemoryUserRegistry

__all__ = [
    "InMemoryUserRegistry",
]
