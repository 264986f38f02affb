"""Unit tests for repositories."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from testbed.models.domain import Product, User
from testbed.repositories.product_repository import ProductRepository
from testbed.repositories.user_repository import UserRepository


def make_user(name="Test User", email="test@example.com"):
    return lambda user_id: User(
        id=user_id,
        name=name,
        email=email,
        created_at=datetime.now(timezone.utc),
    )


def make_product(name="Widget", price=1.5, stock=0):
    return lambda product_id: Product(id=product_id, name=name, price=price, stock=stock)


class TestUserRepository:
    """Test UserRepository in-memory operations."""

    def test_seeded_ids(self, user_repo):
        """Seed users get IDs 1 and 2, the next one gets 3."""
        users = {u.id: u for u in user_repo.list()}
        assert users[1].name == "Mario Rossi"
        assert users[1].email == "mario@example.com"
        assert users[2].name == "Laura Bianchi"
        assert users[2].email == "laura@example.com"

        created = user_repo.create(make_user())
        assert created.id == 3

    def test_create_and_get(self):
        """Created user is readable with the same field values."""
        repo = UserRepository()

        created = repo.create(make_user("Anna", "anna@example.com"))
        retrieved = repo.get(created.id)

        assert retrieved == created
        assert retrieved.name == "Anna"

    def test_ids_never_reused(self):
        """Deleting the newest user does not free its ID."""
        repo = UserRepository()
        first = repo.create(make_user())
        second = repo.create(make_user())

        assert repo.delete(second.id) is True
        third = repo.create(make_user())

        assert first.id < second.id < third.id

    def test_get_returns_copy(self):
        """Mutating a returned entity does not touch stored state."""
        repo = UserRepository()
        created = repo.create(make_user("Original"))

        fetched = repo.get(created.id)
        fetched.name = "Changed"

        assert repo.get(created.id).name == "Original"

    def test_list_is_snapshot(self, user_repo):
        """A listing taken before a create is not changed by it."""
        snapshot = user_repo.list()
        user_repo.create(make_user())

        assert len(snapshot) == 2
        assert len(user_repo.list()) == 3

    def test_update_merges_non_empty_fields(self, user_repo):
        """Only non-empty fields overwrite stored values."""
        before = user_repo.get(1)

        updated = user_repo.update(1, name="Mario Verdi", email="")

        assert updated.name == "Mario Verdi"
        assert updated.email == before.email
        assert updated.created_at == before.created_at
        assert user_repo.get(1) == updated

    def test_update_nonexistent_user(self, user_repo):
        """Updating an unknown ID returns None."""
        assert user_repo.update(999, name="Nobody") is None

    def test_delete_user(self, user_repo):
        """Deleted user is gone; a second delete reports not found."""
        assert user_repo.delete(1) is True
        assert user_repo.get(1) is None
        assert user_repo.delete(1) is False

    def test_delete_nonexistent_user(self):
        """Deleting a never-created ID returns False."""
        assert UserRepository().delete(42) is False


class TestProductRepository:
    """Test ProductRepository in-memory operations."""

    def test_seeded_products(self, product_repo):
        """Seed products get IDs 1 to 3, the next one gets 4."""
        products = {p.id: p for p in product_repo.list()}
        assert products[1].name == "Laptop"
        assert products[2].price == 29.99
        assert products[3].stock == 30

        assert product_repo.create(make_product()).id == 4

    def test_update_stock_only(self, product_repo):
        """Supplying only stock leaves name and price alone."""
        updated = product_repo.update(1, stock=5)

        assert updated.stock == 5
        assert updated.name == "Laptop"
        assert updated.price == 999.99

    def test_update_stock_to_zero(self, product_repo):
        """Zero is a valid stock value and is applied."""
        assert product_repo.update(2, stock=0).stock == 0

    def test_update_ignores_out_of_range_values(self, product_repo):
        """Empty name, non-positive price and negative stock are ignored."""
        updated = product_repo.update(3, name="", price=0, stock=-1)

        assert updated.name == "Keyboard"
        assert updated.price == 79.99
        assert updated.stock == 30

    def test_update_all_fields(self, product_repo):
        updated = product_repo.update(2, name="Trackball", price=45.0, stock=7)

        assert (updated.name, updated.price, updated.stock) == ("Trackball", 45.0, 7)

    def test_update_nonexistent_product(self, product_repo):
        assert product_repo.update(999, stock=1) is None


class TestConcurrentAccess:
    """Concurrent creates and reads against one repository."""

    def test_concurrent_creates_assign_unique_ids(self):
        """Every concurrent create gets a distinct, gap-free ID."""
        repo = UserRepository()

        with ThreadPoolExecutor(max_workers=16) as pool:
            created = list(pool.map(lambda i: repo.create(make_user(f"user{i}")), range(200)))

        ids = sorted(u.id for u in created)
        assert ids == list(range(1, 201))
        assert len(repo) == 200

    def test_list_during_creates(self):
        """Listing while others create never fails and sees whole entities."""
        repo = ProductRepository()

        def create(_):
            repo.create(lambda pid: Product(id=pid, name=f"p{pid}", price=float(pid), stock=pid))

        def snapshot(_):
            return repo.list()

        with ThreadPoolExecutor(max_workers=16) as pool:
            creates = [pool.submit(create, i) for i in range(100)]
            listings = [pool.submit(snapshot, i) for i in range(100)]
            for future in creates:
                future.result()
            results = [future.result() for future in listings]

        for listing in results:
            for product in listing:
                assert product.name == f"p{product.id}"
                assert product.stock == product.id
        assert len(repo.list()) == 100

    def test_concurrent_updates_are_serialized(self, product_repo):
        """Merges on the same product never interleave."""
        def bump(i):
            product_repo.update(1, name=f"name{i}", stock=i)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(bump, range(50)))

        final = product_repo.get(1)
        assert final.name == f"name{final.stock}"
