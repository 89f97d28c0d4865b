import sys, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest

from bikerental import create_app
from bikerental.config import Settings
from bikerental.models.store import Store
from bikerental.services import build_services
from bikerental.utils.providers import SequentialIdProvider


class FakeClock:
    """Monotonic fake clock: every call advances by one nanosecond."""

    def __init__(self, start=1_700_000_000_000_000_000):
        self.now = start

    def __call__(self):
        self.now += 1
        return self.now


@pytest.fixture
def store():
    """A clean, memory-only store per test."""
    return Store()


@pytest.fixture
def ids():
    return SequentialIdProvider("id")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def svc(store, ids, clock):
    return build_services(store, ids=ids, clock=clock)


@pytest.fixture
def alice(svc):
    return svc.users.create_user(
        {"userName": "Alice", "userAddress": "1 Main St", "userAge": "30"}
    ).unwrap()


@pytest.fixture
def bob(svc):
    return svc.users.create_user(
        {"userName": "Bob", "userAddress": "2 High St", "userAge": "41"}
    ).unwrap()


@pytest.fixture
def road_bike(svc):
    return svc.fleet.add_bicycle({"type": "road", "isAvailable": True, "renterId": ""}).unwrap()


@pytest.fixture
def app(store, ids, clock):
    app = create_app(Settings(data_path=None, log_level="WARNING"), store=store, ids=ids, clock=clock)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
