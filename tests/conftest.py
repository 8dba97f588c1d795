"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from trolly.adapters.database import SQLiteDatabaseAdapter
from trolly.api.main import app
from trolly.core.events import clear
from trolly.services import shopping_list
from trolly.services.shopping_list import ShoppingListProvider

FIXED_NOW = 1_700_000_000_000
UNTITLED = "<Untitled>"


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, now: int = FIXED_NOW):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


class RecordingNotifier:
    """Notifier that remembers every identifier it was called with."""

    def __init__(self):
        self.uris: list[str] = []

    async def __call__(self, uri: str) -> None:
        self.uris.append(uri)


@pytest.fixture(autouse=True)
def _clean_handlers():
    """Clear all event handlers before and after each test."""
    clear()
    yield
    clear()


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """URL of a fresh SQLite file for the test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'trolly.db'}"


@pytest_asyncio.fixture
async def adapter(database_url: str) -> AsyncGenerator[SQLiteDatabaseAdapter, None]:
    """Initialized database adapter."""
    adapter = SQLiteDatabaseAdapter(database_url)
    await adapter.initialize()
    yield adapter
    await adapter.close()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def provider(
    adapter: SQLiteDatabaseAdapter,
    notifier: RecordingNotifier,
    clock: FakeClock,
) -> ShoppingListProvider:
    """Provider with a fixed clock and a recording notifier."""
    return ShoppingListProvider(
        adapter,
        notifier=notifier,
        clock=clock,
        untitled_label=UNTITLED,
    )


@pytest_asyncio.fixture
async def client(
    provider: ShoppingListProvider,
    monkeypatch: pytest.MonkeyPatch,
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client backed by the test provider."""
    monkeypatch.setattr(shopping_list, "_provider", provider)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
