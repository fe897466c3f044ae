"""
FastAPI entry point: local development server.

This module is the Composition Root for HTTP runs: it loads .env, configures
logging, wires all infrastructure adapters once at startup and mounts them on
the app built by create_app().

Run locally:
    uvicorn marketlens.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv

load_dotenv()

from marketlens.infrastructure.entrypoints.api import create_app  # noqa: E402
from marketlens.infrastructure.entrypoints.container import (  # noqa: E402
    build_container,
    configure_logging,
)

configure_logging()

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_container = build_container()


@asynccontextmanager
async def _lifespan(app):
    yield
    _container.close()


app = create_app(_container.use_case, lifespan=_lifespan)
