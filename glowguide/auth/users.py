from __future__ import annotations

import logging
import time
from typing import Any

import bcrypt

logger = logging.getLogger(__name__)

_users: dict[str, dict[str, Any]] = {}


class UserExistsError(Exception):
    pass


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def _normalize(username: str) -> str:
    return username.strip().lower()


def register(username: str, password: str) -> dict[str, Any]:
    """Create a user. Raises ``UserExistsError`` if the name is taken."""
    key = _normalize(username)
    if key in _users:
        raise UserExistsError(key)
    _users[key] = {"password_hash": _hash_password(password), "created_at": time.time()}
    logger.info("Registered user %s", key)
    return {"username": key}


def authenticate(username: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{username}`` or ``None``."""
    key = _normalize(username)
    record = _users.get(key)
    if record and _verify_password(password, record["password_hash"]):
        return {"username": key}
    return None


def user_exists(username: str) -> bool:
    return _normalize(username) in _users


def clear_users() -> None:
    _users.clear()
