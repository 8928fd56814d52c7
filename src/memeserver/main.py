import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from .config import load_settings
from .context import AppContext, build_http_client
from .errors import ConfigError
from .routers import meme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(levelname)s %(message)s"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # `run()` stores validated settings before starting uvicorn; fall back to
    # the environment when the app is served some other way.
    settings = getattr(app.state, "settings", None) or load_settings()
    http = build_http_client()
    app.state.context = AppContext(http=http, credentials=settings.credentials)
    try:
        yield
    finally:
        await http.aclose()


app = FastAPI(
    title="Meme Server",
    description="Serves a wholesome meme fetched from Reddit on every request",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.include_router(meme.router)


def run() -> None:
    """Console entry point: validate config, then serve until terminated."""
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)

    app.state.settings = settings
    logger.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
