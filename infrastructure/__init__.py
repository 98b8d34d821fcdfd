"""
Infrastructure Layer for the User Registry API.

This package contains concrete implementations of the application ports:
- memory/: process-local, in-memory implementations
"""

from infrastructure.memory import InMemoryUserRegistry

__all__ = [
    "InMemoryUserRegistry",
]
