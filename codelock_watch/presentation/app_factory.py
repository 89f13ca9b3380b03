from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from codelock_watch import container
from codelock_watch.config import settings
from codelock_watch.infrastructure.logging_setup import init_logging
from codelock_watch.infrastructure.metrics.metrics import setup_metrics
from codelock_watch.presentation.api.routes import router as api_router
from codelock_watch.presentation.api.settings_routes import router as settings_router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    log = logging.getLogger(__name__)
    log.info("application startup")
    container.register_permissions()()
    # creates or migrates the stored plugin config
    cfg = container.get_plugin_config()()
    if not (cfg.discord_webhook_url or settings.discord_webhook_url):
        log.info("no webhook url configured, remote alerts disabled")
    yield
    log.info("application shutdown")


def create_app() -> FastAPI:
    # Initialize logging before app construction to capture startup logs
    init_logging()
    app = FastAPI(title=settings.app_name, lifespan=_lifespan)

    app.include_router(api_router)
    app.include_router(settings_router)

    # Prometheus metrics (/metrics)
    setup_metrics(app)
    return app
