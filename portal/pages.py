"""
Page-level redirects for the admin panel and guest check-in links.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from portal.auth import SessionVerifier
from portal.dependencies import get_session_verifier

router = APIRouter(include_in_schema=False)

ADMIN_LOGIN_PATH = "/admin/login"
ADMIN_DASHBOARD_PATH = "/admin/dashboard"


@router.get("/admin")
def admin_root(
    request: Request, verifier: SessionVerifier = Depends(get_session_verifier)
):
    if verifier.is_authenticated(request):
        return RedirectResponse(ADMIN_DASHBOARD_PATH)
    return RedirectResponse(ADMIN_LOGIN_PATH)


@router.get("/c/{token}")
def guest_root(token: str):
    return RedirectResponse(f"/c/{token}/welcome")
