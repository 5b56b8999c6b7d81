"""Main entrypoint and application factory for the LIFE OS ledger API.

This module configures logging, builds the FastAPI application, creates the ledger tables and the
process-wide clients (database engine, Groq) in the lifespan handler, and exposes the Scalar API reference
endpoint for interactive OpenAPI documentation. It also includes the main entrypoint for running the app
with Uvicorn.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from groq import Groq
from scalar_fastapi import get_scalar_api_reference
from sqlalchemy.exc import SQLAlchemyError

from lifeos.agents.chat_agent import ChatAgent
from lifeos.agents.plan_agent import GroqPlanOracle
from lifeos.api.routes import router
from lifeos.core.db import get_engine, init_db, make_session_factory
from lifeos.core.settings import Settings, get_settings
from lifeos.core.utils import ensure_dir, get_logger
from lifeos.ledger import Ledger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# --- Logging Setup ---
def setup_logging(log_file: str | None) -> logging.Logger:
    """Configure the colorized console logger and, when a path is set, a plain file log."""
    logger = get_logger("lifeos")
    logger.setLevel(logging.INFO)
    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        ensure_dir(Path(log_file).parent)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    logger.propagate = False
    return logger


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings (read from the environment by default)."""
    settings = settings or get_settings()
    logger = setup_logging(settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Create the ledger tables and the shared clients for the lifetime of the process."""
        engine = get_engine(settings.database_url)
        try:
            init_db(engine)
        except SQLAlchemyError:
            logger.exception("Failed to create ledger tables")
            raise
        llm_client = Groq(api_key=settings.groq_api_key)
        app.state.settings = settings
        app.state.ledger = Ledger(make_session_factory(engine))
        app.state.oracle = GroqPlanOracle(llm_client, settings)
        app.state.chat_agent = ChatAgent(llm_client, settings)
        logger.info(f"LIFE OS ledger ready (database={engine.url.render_as_string(hide_password=True)})")
        yield
        engine.dispose()

    app = FastAPI(
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        title="LIFE OS Ledger API",
        description="""
    The LIFE OS Ledger API turns transaction SMS messages and free-form day plans into per-user timelines.

    **Endpoints:**
    - `POST /expenses`: Parse a transaction SMS and record it.
    - `GET /expenses`: List recorded transactions, newest first.
    - `POST /plans`: Turn planning text into a schedule with the language model and record it.
    - `GET /plans`: List recorded plans, newest first.
    - `POST /chat`: Chat with the assistant.
    - `GET /health`: Health check endpoint.
    - `GET /scalar`: Interactive Scalar OpenAPI documentation.

    All ledger endpoints require the `X-User-Id` header.
    """,
        version="1.0.0",
    )
    app.include_router(router)

    @app.get("/scalar", include_in_schema=False)
    async def scalar_docs() -> JSONResponse:
        """Return Scalar API reference."""
        return get_scalar_api_reference(openapi_url=app.openapi_url, title=app.title)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.server_host, port=settings.server_port, reload=True)
