import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from telemed.api.deps import get_storage
from telemed.config import Settings
from telemed.database import init_db, new_engine
from telemed.main import create_app
from telemed.store import Storage, new_storage


@pytest.fixture(name="settings")
def settings_fixture(tmp_path) -> Settings:
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'telemed.db'}")


@pytest_asyncio.fixture(name="engine")
async def engine_fixture(settings: Settings):
    engine = new_engine(settings)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(name="storage")
async def storage_fixture(engine) -> Storage:
    return new_storage(engine)


@pytest_asyncio.fixture(name="client")
async def client_fixture(settings: Settings, storage: Storage):
    app = create_app(settings)
    app.dependency_overrides[get_storage] = lambda: storage
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
    app.dependency_overrides.clear()
