import logging
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from telemed.config import Settings

logger = logging.getLogger(__name__)


def pool_options(settings: Settings) -> dict[str, Any]:
    """Translate the connection limits from settings into pool arguments."""
    if settings.db_max_idle_conns <= 0:
        # QueuePool treats pool_size=0 as unbounded; no idle connections means no pooling
        return {"poolclass": NullPool}
    pool_size = min(settings.db_max_idle_conns, settings.db_max_open_conns)
    return {
        "pool_size": pool_size,
        "max_overflow": settings.db_max_open_conns - pool_size,
        "pool_recycle": int(settings.db_max_idle_time.total_seconds()),
        "pool_pre_ping": True,
    }


def new_engine(settings: Settings) -> AsyncEngine:
    url = make_url(settings.database_url)
    kwargs: dict[str, Any] = {"echo": settings.db_echo}
    # SQLite picks its own pool class, which rejects sizing arguments
    if url.get_backend_name() != "sqlite":
        kwargs.update(pool_options(settings))
    return create_async_engine(url, **kwargs)


async def init_db(engine: AsyncEngine) -> None:
    import telemed.models  # noqa: F401 register all models with SQLModel metadata

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")
