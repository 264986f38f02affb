"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from testbed.repositories.product_repository import ProductRepository
from testbed.repositories.user_repository import UserRepository
from testbed.seed import seed_products, seed_users
from testbed.server import create_app
from testbed.services.config_service import Settings


@pytest.fixture
def settings():
    """Settings with a short slow-endpoint delay."""
    return Settings(slow_delay=0.05)


@pytest.fixture
def app(settings):
    """A freshly seeded application with its own stores."""
    return create_app(settings=settings)


@pytest.fixture
def client(app):
    """Test client bound to the per-test application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_repo():
    """Seeded user repository."""
    repo = UserRepository()
    seed_users(repo)
    return repo


@pytest.fixture
def product_repo():
    """Seeded product repository."""
    repo = ProductRepository()
    seed_products(repo)
    return repo
