"""Data access layer: one independently locked store per resource type."""

from .base import Repository, InMemoryRepository
from .locking import ReadWriteLock
from .user_repository import UserRepository
from .product_repository import ProductRepository

__all__ = [
    "Repository",
    "InMemoryRepository",
    "ReadWriteLock",
    "UserRepository",
    "ProductRepository",
]
