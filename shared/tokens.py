"""
Guest check-in token helpers.

Tokens are short, case-sensitive and avoid look-alike characters
(0/O, 1/I/l) so they can be typed from a printed card.
"""

import re
import secrets
from datetime import datetime, time, timedelta, timezone
from typing import Callable

CHARSET = "ABCDEFGHJKLMNPQRSTUVWXYZabcdefghjkmnpqrstuvwxyz23456789"
TOKEN_LENGTH = 9
MIN_TOKEN_LENGTH = 8
MAX_TOKEN_LENGTH = 10
DEFAULT_MAX_ATTEMPTS = 10

_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class TokenGenerationError(RuntimeError):
    """Raised when no unused token was found within the attempt budget."""


def generate_guest_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(CHARSET) for _ in range(length))


def is_valid_token_format(token: str) -> bool:
    if not token or not isinstance(token, str):
        return False
    if not MIN_TOKEN_LENGTH <= len(token) <= MAX_TOKEN_LENGTH:
        return False
    return bool(_TOKEN_PATTERN.match(token))


def generate_unique_token(
    exists: Callable[[str], bool], max_attempts: int = DEFAULT_MAX_ATTEMPTS
) -> str:
    """Generate tokens until ``exists`` reports one as unused."""
    for _ in range(max_attempts):
        token = generate_guest_token()
        if not exists(token):
            return token
    raise TokenGenerationError(
        f"Failed to generate unique token after {max_attempts} attempts"
    )


def generate_session_token() -> str:
    return secrets.token_hex(32)


def calculate_token_expiration(check_out: datetime) -> datetime:
    """End of the day after check-out, to allow for late departures."""
    next_day = (check_out + timedelta(days=1)).date()
    return datetime.combine(next_day, time.max, tzinfo=check_out.tzinfo)


def is_token_expired(expires_at: datetime, now: datetime | None = None) -> bool:
    now = now or datetime.now(timezone.utc)
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at < now
