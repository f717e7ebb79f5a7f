"""
OAuth relay — application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as relay_router
from config.settings import Settings, config
from connectors.base import BaseConnector
from connectors.oauth2 import OAuth2Connector
from connectors.token_store import TokenStore
from utils.validators import validate_oauth_settings

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    connector: Optional[BaseConnector] = None,
    store: Optional[TokenStore] = None,
) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="OAuth Relay",
        version="1.0.0",
        description="OAuth2 authorization-code relay with in-memory token storage.",
    )

    # Built once, shared by every request
    app.state.connector = connector or OAuth2Connector.from_settings(settings)
    app.state.token_store = store if store is not None else TokenStore()

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(relay_router)

    return app


app = create_app()

if __name__ == "__main__":
    validate_oauth_settings(config)
    logger.info("Listening on %s:%d", config.host, config.http_port)
    uvicorn.run(
        app,
        host=config.host,
        port=config.http_port,
        log_level="debug" if config.debug else "info",
    )
