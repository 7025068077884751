import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from telemed.api.users import router as users_router
from telemed.config import Settings
from telemed.database import init_db, new_engine
from telemed.store import new_storage

logger = logging.getLogger(__name__)


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = new_engine(settings)
        await init_db(engine)
        logger.info("Database connected")
        app.state.storage = new_storage(engine)
        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Database connection pool closed")

    app = FastAPI(title="SAPA Telemed", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router, prefix="/api")

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


def run() -> None:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
