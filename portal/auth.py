"""
Admin session verification seam.

Admin login lives outside this service. The admin root page asks a
``SessionVerifier`` whether the incoming request carries a valid admin
session; until a real verifier is installed on ``app.state`` every request
is treated as anonymous.
"""

from __future__ import annotations

from typing import Protocol

from fastapi import Request


class SessionVerifier(Protocol):
    def is_authenticated(self, request: Request) -> bool:
        ...


class NoSessionVerifier:
    """Treats every request as unauthenticated."""

    def is_authenticated(self, request: Request) -> bool:
        return False
