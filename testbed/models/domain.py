"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """User domain entity."""
    id: int
    name: str
    email: str
    created_at: datetime


@dataclass
class Product:
    """Product domain entity."""
    id: int
    name: str
    price: float
    stock: int = 0
