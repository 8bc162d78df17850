"""
Insert a throwaway guest row through the Supabase anon client.

Useful for checking that row-level security lets the public key write to
the guests table. Delete the row from the Supabase table editor afterwards.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from postgrest.exceptions import APIError

from portal.baas import create_anon_client
from portal.config import get_settings
from shared.types import GuestStatus

logger = logging.getLogger(__name__)

SYNTHETIC_GUEST = {
    "first_name": "Test",
    "last_name": "Connection",
    "room_number": "999",
    "email": "test@example.com",
    "phone": "00000000",
    "status": GuestStatus.CHECKED_IN.value,
}


def insert_test_guest(client) -> dict:
    """Return ``{"data": ..., "error": ...}`` exactly as the API reported it."""
    try:
        response = client.table("guests").insert(SYNTHETIC_GUEST).execute()
    except APIError as exc:
        return {"data": None, "error": exc.json()}
    data = response.data[0] if response.data else None
    return {"data": data, "error": None}


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")
    client = create_anon_client(get_settings())
    result = insert_test_guest(client)
    print(json.dumps(result, indent=2, default=str))
    if result["error"]:
        logger.error("Insert failed")
        return 1
    logger.info("Insert succeeded; check the guests table for the new row")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
