"""Shared fixtures: a temporary SQLite ledger, stub model backends, and a test client."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("GROQ_API_KEY", "test-key")
os.environ.setdefault("LOG_FILE", "")

from lifeos.api.dependencies import get_chat_agent, get_oracle  # noqa: E402
from lifeos.core.db import get_engine, init_db, make_session_factory  # noqa: E402
from lifeos.core.errors import OracleUnavailableError  # noqa: E402
from lifeos.core.settings import Settings  # noqa: E402
from lifeos.ledger import Ledger  # noqa: E402
from main import create_app  # noqa: E402
from tests.helpers import StubChatAgent, StubOracle  # noqa: E402


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        groq_api_key="test-key",
        database_url=f"sqlite:///{tmp_path / 'ledger.db'}",
        log_file=None,
    )


@pytest.fixture
def session_factory(settings: Settings):
    engine = get_engine(settings.database_url)
    init_db(engine)
    yield make_session_factory(engine)
    engine.dispose()


@pytest.fixture
def ledger(session_factory) -> Ledger:
    return Ledger(session_factory)


@pytest.fixture
def oracle() -> StubOracle:
    return StubOracle()


@pytest.fixture
def failing_oracle() -> StubOracle:
    return StubOracle(error=OracleUnavailableError("Groq API call failed: connection refused"))


@pytest.fixture
def chat_agent() -> StubChatAgent:
    return StubChatAgent()


@pytest.fixture
def client(settings: Settings, oracle: StubOracle, chat_agent: StubChatAgent) -> Iterator[TestClient]:
    app = create_app(settings)
    app.dependency_overrides[get_oracle] = lambda: oracle
    app.dependency_overrides[get_chat_agent] = lambda: chat_agent
    with TestClient(app) as test_client:
        yield test_client
