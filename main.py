"""
Course catalog API server.

Usage:
    python main.py               # serve on port 8000
    python main.py --dev         # auto-reload on code changes
    python main.py --port 8100
"""

import argparse
import logging
from contextlib import asynccontextmanager

import sentry_sdk
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI

load_dotenv()
load_dotenv(".env.local", override=True)

from core.config import get_environment, get_log_level, get_sentry_dsn
from core.content import CatalogStore, load_course_tree
from web_api.routes import content, courses, topics

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Apply LOG_LEVEL to the root logger.

    basicConfig is a no-op when the root logger already has handlers, so
    the level is set explicitly as well.
    """
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger().setLevel(get_log_level())


def init_sentry() -> None:
    dsn = get_sentry_dsn()
    if dsn:
        sentry_sdk.init(dsn=dsn, environment=get_environment())
        logger.info("Sentry initialized")


# Runs on every import so `uvicorn main:app` and the --dev reload worker
# get the same setup as `python main.py`
configure_logging()
init_sentry()


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """Build the FastAPI app around a catalog store.

    The catalog is built at startup unless the store already holds one.
    """
    store = store or CatalogStore(load_course_tree)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not store.loaded:
            store.refresh()
        yield

    app = FastAPI(title="Course Catalog", lifespan=lifespan)
    app.state.catalog_store = store

    app.include_router(courses.router)
    app.include_router(topics.router)
    app.include_router(content.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "topics": len(store.get()) if store.loaded else 0}

    return app


app = create_app()


def main():
    parser = argparse.ArgumentParser(description="Course catalog API server")
    parser.add_argument("--dev", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.dev)


if __name__ == "__main__":
    main()
