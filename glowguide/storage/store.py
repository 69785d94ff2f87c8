from __future__ import annotations

import logging
import time
import uuid
from typing import Any

logger = logging.getLogger(__name__)

_analyses: list[dict[str, Any]] = []
_files: dict[str, dict[str, Any]] = {}


def save_analysis(username: str, record: dict[str, Any]) -> dict[str, Any]:
    """Persist one analysis for ``username`` and return the stored row."""
    row = {
        "id": uuid.uuid4().hex,
        "username": username,
        "created_at": time.time(),
        **record,
    }
    _analyses.append(row)
    logger.info("Saved analysis %s for %s", row["id"], username)
    return row


def list_analyses(username: str) -> list[dict[str, Any]]:
    """Return ``username``'s analyses, newest first."""
    rows = [a for a in _analyses if a["username"] == username]
    rows.reverse()
    return rows


def put_file(username: str, data: bytes, mime_type: str) -> str:
    file_id = uuid.uuid4().hex
    _files[file_id] = {
        "owner": username,
        "data": data,
        "mime_type": mime_type,
        "created_at": time.time(),
    }
    logger.info("Stored %d-byte %s upload %s for %s", len(data), mime_type, file_id, username)
    return file_id


def get_file(file_id: str) -> dict[str, Any] | None:
    return _files.get(file_id)


def clear_storage() -> None:
    _analyses.clear()
    _files.clear()
