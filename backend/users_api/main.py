"""User Records API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UsersApiError → {"status", "message"} JSON
    - CORS configured from settings (not hardcoded)
    - MongoDB reached on startup via lifespan; failure aborts startup,
      no request-path error ever terminates the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Connection manager kept on app.state and injected through
      get_user_repository (no module-level store handle)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import users
from users_api.config import get_settings
from users_api.infrastructure.database import init_db
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(
        settings.mongodb_url,
        settings.mongodb_database,
        settings.mongodb_collection,
        connect_timeout_seconds=settings.mongodb_connect_timeout_seconds,
    )
    try:
        await db_manager.connect()
    except Exception:
        await db_manager.close()
        raise
    app.state.db_manager = db_manager
    logger.info("User Records API started")
    yield
    logger.info("User Records API shutting down")
    await db_manager.close()


app = FastAPI(
    title="User Records API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "users_api.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    run()
