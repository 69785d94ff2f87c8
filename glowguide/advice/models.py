from __future__ import annotations

from enum import Enum

from pydantic import Base64Bytes, BaseModel, Field


class AdviceError(Exception):
    """A provider call failed or returned nothing usable."""


class AdviceSource(str, Enum):
    gemini = "gemini"
    groq = "groq"
    local = "local"


class ImagePayload(BaseModel):
    data: Base64Bytes
    mime_type: str = Field(default="image/jpeg", pattern=r"^image/[\w.+-]+$")


class AdviceResult(BaseModel):
    text: str
    source: AdviceSource
    error: str | None = None
