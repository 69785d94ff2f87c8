from __future__ import annotations

from fastapi import HTTPException, Request

from .users import user_exists


def require_user(request: Request) -> dict:
    """Raise 401 if no user is logged in, or the session's user is gone."""
    user = request.session.get("user")
    if not user or not user_exists(user.get("username", "")):
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user
