"""
Models Layer - Data models and Pydantic schemas.

This layer contains the records serialized into the key-value store.
"""

from .schemas import User, demo_user

__all__ = [
    "User",
    "demo_user",
]
