"""
FastAPI dependencies (shared across routes).

The connector and token store are built once in ``create_app`` and live on
``app.state``; handlers receive them through these dependencies.
"""

from __future__ import annotations

from fastapi import Request

from connectors.base import BaseConnector
from connectors.token_store import TokenStore


def get_connector(request: Request) -> BaseConnector:
    return request.app.state.connector


def get_token_store(request: Request) -> TokenStore:
    return request.app.state.token_store
