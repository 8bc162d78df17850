"""
Print which Supabase project this environment points at.

Only a prefix of the anon key is logged.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portal.config import Settings, get_settings

logger = logging.getLogger(__name__)

KEY_PREFIX_LENGTH = 10


def mask_key(key: str | None) -> str:
    if not key:
        return "(missing)"
    return key[:KEY_PREFIX_LENGTH] + "..."


def report(settings: Settings) -> dict[str, str]:
    return {
        "supabase_url": settings.supabase_url or "(missing)",
        "supabase_anon_key": mask_key(settings.supabase_anon_key),
        "bucket_region": settings.bucket_region,
    }


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")
    for name, value in report(get_settings()).items():
        logger.info("%s: %s", name, value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
