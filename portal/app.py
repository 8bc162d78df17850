"""
FastAPI application entry point for the portal backend.
"""

from __future__ import annotations

from fastapi import FastAPI

from portal.auth import NoSessionVerifier, SessionVerifier
from portal.config import get_settings
from portal.dependencies import get_db_client, get_storage_client
from portal.errors import install_error_handlers
from portal.pages import router as pages_router
from portal.routes import admin_router, router


def create_app(session_verifier: SessionVerifier | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Hotel Portal Backend (FastAPI)", version="0.1.0")
    app.state.db = get_db_client()
    app.state.storage = get_storage_client()
    app.state.session_verifier = session_verifier or NoSessionVerifier()
    install_error_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)
    app.include_router(admin_router)
    app.include_router(pages_router)
    return app


app = create_app()
