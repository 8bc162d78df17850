"""
Smoke-test the database connection.

Prefers DIRECT_URL (bypassing the Supabase pooler) over DATABASE_URL,
forces sslmode=require, and prints a few hotel lookups.
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dotenv import load_dotenv

from portal.db import SqlDbClient

logger = logging.getLogger(__name__)

_PASSWORD = re.compile(r"://([^:/@]+):([^@]+)@")


def ensure_ssl(url: str) -> str:
    if not url:
        return url
    parts = urlsplit(url)
    query = dict(parse_qsl(parts.query))
    if "sslmode" in query:
        return url
    query["sslmode"] = "require"
    return urlunsplit(parts._replace(query=urlencode(query)))


def mask_url(url: str) -> str:
    if not url:
        return "(empty)"
    return _PASSWORD.sub(r"://\1:*****@", url)


def resolve_url() -> str | None:
    direct = os.environ.get("DIRECT_URL")
    if direct:
        logger.info("Using DIRECT_URL for this check (bypasses the pooler)")
        return ensure_ssl(direct)
    pooled = os.environ.get("DATABASE_URL")
    if pooled:
        logger.info("Using DATABASE_URL (pooler) for this check")
        return ensure_ssl(pooled)
    return None


def main() -> int:
    parser = argparse.ArgumentParser(description="Database connection check")
    parser.add_argument(
        "--env-file",
        type=str,
        default=".env.local",
        help="dotenv file to load before reading DIRECT_URL / DATABASE_URL",
    )
    parser.add_argument(
        "--subdomain",
        type=str,
        default=None,
        help="Also look up this hotel subdomain",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")
    load_dotenv(args.env_file)

    url = resolve_url()
    if not url:
        logger.warning("No DIRECT_URL or DATABASE_URL set; nothing to check")
        return 1
    logger.info("DB connection (masked): %s", mask_url(url))

    db = SqlDbClient(url)
    logger.info("Found %d hotels", db.count_hotels())
    active = db.list_active_hotels()
    logger.info("Active hotels: %d", len(active))
    for hotel in active:
        logger.info("  - %s: %s", hotel.subdomain, hotel.name)
    if args.subdomain:
        hotel = db.get_active_hotel(args.subdomain)
        logger.info("Hotel %s: %s", args.subdomain, hotel)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
