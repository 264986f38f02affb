"""Fixed records loaded into fresh stores before the first request."""

from datetime import datetime, timezone

from testbed.models.domain import Product, User
from testbed.repositories.product_repository import ProductRepository
from testbed.repositories.user_repository import UserRepository

SEED_USERS = [
    ("Mario Rossi", "mario@example.com"),
    ("Laura Bianchi", "laura@example.com"),
]

SEED_PRODUCTS = [
    ("Laptop", 999.99, 10),
    ("Mouse", 29.99, 50),
    ("Keyboard", 79.99, 30),
]


def seed_users(repo: UserRepository) -> None:
    """Insert the seed users through the normal ID counter (IDs 1 and 2)."""
    for name, email in SEED_USERS:
        repo.create(
            lambda user_id, name=name, email=email: User(
                id=user_id,
                name=name,
                email=email,
                created_at=datetime.now(timezone.utc),
            )
        )


def seed_products(repo: ProductRepository) -> None:
    """Insert the seed products (IDs 1 to 3)."""
    for name, price, stock in SEED_PRODUCTS:
        repo.create(
            lambda product_id, name=name, price=price, stock=stock: Product(
                id=product_id, name=name, price=price, stock=stock
            )
        )
