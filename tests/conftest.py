import pytest
from fastapi.testclient import TestClient

from api.main import create_fastapi_app
from core.settings import (
    AppSettings,
    AuthSettings,
    ExchangeRateSettings,
    PgDbSettings,
    Settings,
)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite database and no rate API key."""
    return Settings(
        APP=AppSettings(ENVIRONMENT="test", LOG_LEVEL="WARNING", JSON_LOGS=False),
        DATABASE=PgDbSettings(
            DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
            AUTO_CREATE_SCHEMA=True,
        ),
        EXCHANGE_RATE=ExchangeRateSettings(EXCHANGE_RATE_API_KEY=""),
        # Cheaper scrypt cost keeps the API tests fast
        AUTH=AuthSettings(SCRYPT_N=1024),
    )


@pytest.fixture
def app(settings):
    _app = create_fastapi_app(settings)
    yield _app
    _app.container.unwire()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def run_db(app, client):
    """Run ``fn(session)`` on the app's event loop with a fresh session."""

    def _run(fn):
        async def _call():
            db = app.container.infrastructure.database()
            async with db.get_session() as session:
                return await fn(session)

        return client.portal.call(_call)

    return _run
