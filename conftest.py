import pytest
from fastapi.testclient import TestClient

from navportal import auth, storage
from navportal.app import create_app
from navportal.models import Role
from navportal.settings import Settings

TEST_SECRET = "test-secret"
ADMINS = [("admin", "admin-pass"), ("root", "root-pass")]
GUESTS = [("guest", "guest-pass")]


@pytest.fixture(autouse=True)
def clean_test_data():
    """Fresh in-memory store and known credentials before every test."""
    storage.init_storage(store=storage.MemoryStore())
    auth.init_auth(TEST_SECRET, ADMINS, GUESTS)
    yield


@pytest.fixture
def admin_token() -> str:
    return auth.issue_token("admin", Role.ADMIN)


@pytest.fixture
def guest_token() -> str:
    return auth.issue_token("guest", Role.GUEST)


@pytest.fixture
def client(tmp_path) -> TestClient:
    settings = Settings(data_dir=tmp_path, secret_key=TEST_SECRET, admins=ADMINS, guests=GUESTS)
    return TestClient(create_app(settings, store=storage.MemoryStore()))
