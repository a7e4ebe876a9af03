import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from socio import __version__
from socio.api.deps import get_settings
from socio.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        load_rules(settings.rules_path)
        logger.info("Rules loaded from %s", settings.rules_path)
    except (FileNotFoundError, ValueError):
        logger.critical("Rules load failed", exc_info=True)
        raise

    yield


app = FastAPI(
    title="Socio Fragments",
    version=__version__,
    lifespan=lifespan,
)

# --- Routers ---
from socio.api.routes import fragments  # noqa: E402

app.include_router(fragments.router, prefix="/fragments", tags=["Fragments"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    return {"status": "ok", "version": __version__}
