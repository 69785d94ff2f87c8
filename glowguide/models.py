from __future__ import annotations

from pydantic import BaseModel, Field

from .advice.models import AdviceResult, ImagePayload
from .engine.models import Profile, RecommendationBundle


class SignupRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1, max_length=72)


class AnalyzeRequest(BaseModel):
    profile: Profile
    image: ImagePayload | None = None


class AnalyzeResponse(BaseModel):
    recommendations: RecommendationBundle
    advice: AdviceResult


class UserSettings(BaseModel):
    gemini_api_key: str | None = Field(default=None, max_length=256)
    adsense_client: str = Field(default="", max_length=64)
    amazon_tag: str = Field(default="", max_length=64)
    flipkart_tag: str = Field(default="", max_length=64)


class SettingsOut(BaseModel):
    has_api_key: bool
    adsense_client: str
    amazon_tag: str
    flipkart_tag: str


class SaveAnalysisRequest(BaseModel):
    profile: Profile
    advice_text: str = Field(default="", max_length=20000)
    photo_url: str | None = None


class AnalysisRecord(BaseModel):
    id: str
    created_at: float
    profile: Profile
    recommendations: RecommendationBundle
    advice_text: str
    photo_url: str | None = None


class UploadRequest(BaseModel):
    # kept encoded so the size cap is checked before decoding
    data: str = Field(..., min_length=1)
    mime_type: str = Field(..., min_length=1)


class UploadResponse(BaseModel):
    file_id: str
    url: str
