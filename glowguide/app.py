from __future__ import annotations

import base64
import binascii

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from starlette.middleware.sessions import SessionMiddleware

from .ads.slot import AdSlot, ad_slot
from .advice.service import get_advice
from .auth.dependencies import require_user
from .auth.users import UserExistsError, authenticate, register
from .config import DEFAULT_APP_CONFIG
from .engine.derive import derive_recommendations
from .engine.models import Gender, HairType, Platform, Profile, RecommendationBundle, SkinType
from .models import (
    AnalysisRecord,
    AnalyzeRequest,
    AnalyzeResponse,
    LoginRequest,
    SaveAnalysisRequest,
    SettingsOut,
    SignupRequest,
    UploadRequest,
    UploadResponse,
    UserSettings,
)
from .storage.store import get_file, list_analyses, put_file, save_analysis

config = DEFAULT_APP_CONFIG

app = FastAPI(title="GlowGuide Skin & Hair Care API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=config.session_secret)


def _session_settings(request: Request) -> dict:
    return request.session.get("settings") or {}


def _partner_tags(request: Request) -> dict[str, str]:
    """Per-session affiliate ids, falling back to the configured ones."""
    settings = _session_settings(request)
    return {
        Platform.amazon.value: settings.get("amazon_tag") or config.amazon_tag,
        Platform.flipkart.value: settings.get("flipkart_tag") or config.flipkart_tag,
    }


def _encoded_limit(max_bytes: int) -> int:
    # base64 turns every 3 bytes into 4 characters
    return 4 * ((max_bytes + 2) // 3)


def _decode_upload(data: str) -> bytes:
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error:
        raise HTTPException(status_code=422, detail="Upload is not valid base64")


def _settings_out(settings: dict) -> SettingsOut:
    return SettingsOut(
        has_api_key=bool(settings.get("gemini_api_key")),
        adsense_client=settings.get("adsense_client", ""),
        amazon_tag=settings.get("amazon_tag", ""),
        flipkart_tag=settings.get("flipkart_tag", ""),
    )


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata() -> dict:
    return {
        "skin_types": [s.value for s in SkinType],
        "hair_types": [h.value for h in HairType],
        "genders": [g.value for g in Gender],
        "platforms": [p.value for p in Platform],
    }


@app.post("/recommendations", response_model=RecommendationBundle)
def recommendations(profile: Profile, request: Request) -> RecommendationBundle:
    return derive_recommendations(profile, _partner_tags(request))


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze(body: AnalyzeRequest, request: Request) -> AnalyzeResponse:
    bundle = derive_recommendations(body.profile, _partner_tags(request))
    advice = get_advice(
        body.profile,
        bundle.bmi,
        bundle.precautions,
        image=body.image,
        api_key=_session_settings(request).get("gemini_api_key"),
    )
    return AnalyzeResponse(recommendations=bundle, advice=advice)


# ── Settings ─────────────────────────────────────────────────────────────


@app.get("/settings", response_model=SettingsOut)
def read_settings(request: Request) -> SettingsOut:
    return _settings_out(_session_settings(request))


@app.put("/settings", response_model=SettingsOut)
def write_settings(body: UserSettings, request: Request) -> SettingsOut:
    current = dict(_session_settings(request))
    # None keeps the stored key; an empty string clears it
    if body.gemini_api_key is not None:
        current["gemini_api_key"] = body.gemini_api_key
    current["adsense_client"] = body.adsense_client
    current["amazon_tag"] = body.amazon_tag
    current["flipkart_tag"] = body.flipkart_tag
    request.session["settings"] = current
    return _settings_out(current)


@app.get("/ads/slot", response_model=AdSlot | None)
def ads_slot(request: Request) -> AdSlot | None:
    client = _session_settings(request).get("adsense_client") or config.adsense_client
    return ad_slot(client)


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/signup")
def signup(body: SignupRequest, request: Request) -> dict:
    try:
        user = register(body.username, body.password)
    except UserExistsError:
        raise HTTPException(status_code=409, detail="Username already taken")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.pop("user", None)
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── Saved analyses ───────────────────────────────────────────────────────


@app.post("/analyses", response_model=AnalysisRecord)
def create_analysis(
    body: SaveAnalysisRequest,
    request: Request,
    user: dict = Depends(require_user),
) -> AnalysisRecord:
    bundle = derive_recommendations(body.profile, _partner_tags(request))
    row = save_analysis(user["username"], {
        "profile": body.profile.model_dump(mode="json"),
        "recommendations": bundle.model_dump(mode="json"),
        "advice_text": body.advice_text,
        "photo_url": body.photo_url,
    })
    return AnalysisRecord(**row)


@app.get("/analyses", response_model=list[AnalysisRecord])
def analyses(user: dict = Depends(require_user)) -> list[AnalysisRecord]:
    return [AnalysisRecord(**row) for row in list_analyses(user["username"])]


# ── Files ────────────────────────────────────────────────────────────────


@app.post("/uploads", response_model=UploadResponse)
def upload(
    body: UploadRequest,
    request: Request,
    user: dict = Depends(require_user),
) -> UploadResponse:
    if not body.mime_type.startswith("image/"):
        raise HTTPException(status_code=415, detail="Only image uploads are supported")
    if len(body.data) > _encoded_limit(config.max_upload_bytes):
        raise HTTPException(status_code=413, detail="Upload too large")
    data = _decode_upload(body.data)
    if len(data) > config.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Upload too large")
    if not data:
        raise HTTPException(status_code=422, detail="Empty upload")

    file_id = put_file(user["username"], data, body.mime_type)
    url = str(request.url_for("download_file", file_id=file_id))
    return UploadResponse(file_id=file_id, url=url)


@app.get("/files/{file_id}", name="download_file")
def download_file(file_id: str) -> Response:
    stored = get_file(file_id)
    if stored is None:
        raise HTTPException(status_code=404, detail="File not found")
    return Response(content=stored["data"], media_type=stored["mime_type"])
