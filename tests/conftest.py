"""Root conftest — shared test configuration and request/response fakes."""

import os

# Ensure tests never reach a real database or pay production hash cost
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest

from userapi.core.symbolic_error import SymbolicError


class FakeRequest:
    """RequestLike with a fixed params mapping and optional db session."""

    def __init__(self, params: dict, db=None):
        self.params = params
        self.db = db

    def params_all(self) -> dict:
        return self.params


class FakeSink:
    """ResponseSink recording every json() write."""

    def __init__(self):
        self.writes: list[tuple[object, int]] = []

    def json(self, payload, status_code: int = 200) -> None:
        self.writes.append((payload, status_code))


@pytest.fixture(autouse=True)
def reset_symbolic_debug():
    """Debug flag is process state: every test starts and ends with it off."""
    SymbolicError.set_debug(False)
    yield
    SymbolicError.set_debug(False)


@pytest.fixture
def make_request():
    return FakeRequest


@pytest.fixture
def sink():
    return FakeSink()
