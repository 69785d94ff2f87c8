from __future__ import annotations

from google import genai
from google.genai import types

from .config import DEFAULT_ADVICE_CONFIG, AdviceConfig
from .models import AdviceError, ImagePayload


def _build_client(key: str, config: AdviceConfig) -> genai.Client:
    # One client per call: the key must never be shared between users.
    return genai.Client(
        api_key=key,
        http_options=types.HttpOptions(timeout=int(config.timeout * 1000)),
    )


def generate_advice(
    prompt: str,
    image: ImagePayload | None = None,
    api_key: str | None = None,
    config: AdviceConfig = DEFAULT_ADVICE_CONFIG,
) -> str:
    """
    Send ``prompt`` (and the photo, when given) to Gemini.

    ``api_key`` overrides the configured key. Raises ``AdviceError`` on
    transport errors, blocked responses and empty output.
    """
    key = api_key or config.gemini_api_key
    if not key:
        raise AdviceError("Gemini API key is not configured")

    contents: list = [prompt]
    if image is not None and image.data:
        contents.append(types.Part.from_bytes(data=image.data, mime_type=image.mime_type))

    try:
        client = _build_client(key, config)
        response = client.models.generate_content(
            model=config.gemini_model,
            contents=contents,
            config=types.GenerateContentConfig(
                max_output_tokens=config.max_tokens,
                temperature=0.4,
            ),
        )
        text = response.text or ""
    except Exception as exc:
        raise AdviceError(f"Gemini API error: {exc}") from exc

    text = text.strip()
    if not text:
        raise AdviceError("Gemini returned an empty response")
    return text
