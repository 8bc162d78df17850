"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from fastapi import Request

from portal.auth import NoSessionVerifier, SessionVerifier
from portal.config import get_settings
from portal.db import DbClient, InMemoryDbClient, SqlDbClient
from portal.storage import InMemoryStorageClient, S3StorageClient, StorageClient

logger = logging.getLogger(__name__)

_db_client: DbClient | None = None
_storage_client: StorageClient | None = None


def get_db_client() -> DbClient:
    """
    Return the process-wide DB client, building it on first use.

    Reloaded app instances pick up the existing client instead of opening
    a second connection pool.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory database backend")
        _db_client = InMemoryDbClient()
    else:
        _db_client = SqlDbClient(
            settings.database_url, production=settings.is_production
        )
    return _db_client


def get_storage_client() -> StorageClient:
    global _storage_client
    if _storage_client:
        return _storage_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.bucket_name:
        _storage_client = InMemoryStorageClient(region=settings.bucket_region)
    else:
        _storage_client = S3StorageClient(
            bucket=settings.bucket_name,
            region=settings.bucket_region,
            access_key_id=settings.aws_access_key or "",
            secret_access_key=settings.aws_secret_access or "",
        )
    return _storage_client


def get_db(request: Request) -> DbClient:
    return request.app.state.db


def get_storage(request: Request) -> StorageClient:
    return request.app.state.storage


def get_session_verifier(request: Request) -> SessionVerifier:
    return getattr(request.app.state, "session_verifier", None) or NoSessionVerifier()
