"""
Hotel tenant resolution and guest token validation.

Each hotel is served from its own subdomain (``movenpick.example.com``);
the subdomain picks the tenant and the ``/c/<token>`` path picks the guest.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from portal.db import DbClient, GuestTokenRecord, HotelRecord
from shared.tokens import is_token_expired
from shared.types import TokenStatus

logger = logging.getLogger(__name__)

SUBDOMAIN_HEADER = "x-hotel-subdomain"
GUEST_TOKEN_HEADER = "x-guest-token"
SESSION_TOKEN_HEADER = "x-session-token"
SESSION_COOKIE = "guest_session"

_TOKEN_PATH = re.compile(r"^/c/([A-Za-z0-9]+)")


@dataclass(frozen=True)
class HotelContext:
    subdomain: str
    token: Optional[str] = None
    session_token: Optional[str] = None


def get_subdomain(hostname: str) -> Optional[str]:
    """
    movenpick.example.com -> "movenpick"
    example.com / www.example.com -> None
    movenpick.localhost:8000 -> "movenpick", localhost:8000 -> None
    """
    host = hostname.split(":", 1)[0]
    parts = host.split(".")
    if host == "127.0.0.1":
        return None
    if "localhost" in host:
        if len(parts) > 1 and parts[0] != "localhost":
            return parts[0]
        return None
    if len(parts) == 2 or (len(parts) == 3 and parts[0] == "www"):
        return None
    if len(parts) >= 3:
        return parts[0]
    return None


def extract_token_from_path(path: str) -> Optional[str]:
    match = _TOKEN_PATH.match(path)
    return match.group(1) if match else None


def get_hotel_context(request: Request) -> Optional[HotelContext]:
    subdomain = request.headers.get(SUBDOMAIN_HEADER) or get_subdomain(
        request.headers.get("host", "")
    )
    if not subdomain or subdomain in ("www", "admin"):
        return None
    return HotelContext(
        subdomain=subdomain,
        token=request.headers.get(GUEST_TOKEN_HEADER)
        or extract_token_from_path(request.url.path),
        session_token=request.headers.get(SESSION_TOKEN_HEADER)
        or request.cookies.get(SESSION_COOKIE),
    )


def validate_hotel(db: DbClient, subdomain: str) -> Optional[HotelRecord]:
    hotel = db.get_active_hotel(subdomain)
    if hotel is None:
        logger.info("No active hotel for subdomain=%s", subdomain)
    return hotel


def validate_token(
    db: DbClient, token: str, hotel_id: str
) -> Optional[GuestTokenRecord]:
    """Return the hotel's active token record, expiring it if its time has passed."""
    record = db.find_active_token(token, hotel_id)
    if record is None:
        return None
    if is_token_expired(record.expires_at):
        logger.info("Token %s expired at %s", record.id, record.expires_at)
        db.update_token_status(record.id, TokenStatus.EXPIRED)
        return None
    return record
