from __future__ import annotations

import logging

from ..engine.models import Profile
from . import gemini_client, groq_client
from .config import DEFAULT_ADVICE_CONFIG, AdviceConfig
from .models import AdviceError, AdviceResult, AdviceSource, ImagePayload
from .prompt import build_advice_prompt, local_advice_text

logger = logging.getLogger(__name__)


def _pick_source(api_key: str | None, config: AdviceConfig) -> AdviceSource:
    if not config.enabled:
        return AdviceSource.local
    if api_key or config.gemini_api_key:
        return AdviceSource.gemini
    if config.groq_api_key:
        return AdviceSource.groq
    return AdviceSource.local


def get_advice(
    profile: Profile,
    bmi: float | None,
    precautions: list[str],
    image: ImagePayload | None = None,
    api_key: str | None = None,
    config: AdviceConfig = DEFAULT_ADVICE_CONFIG,
) -> AdviceResult:
    """
    Produce free-text advice for ``profile``.

    Uses Gemini when a key is available, Groq otherwise, and the local
    precaution text when neither is. A failed provider call is not retried:
    the local text is returned with ``error`` set.
    """
    source = _pick_source(api_key, config)
    fallback = local_advice_text(precautions)

    if source is AdviceSource.local:
        return AdviceResult(text=fallback, source=AdviceSource.local)

    prompt = build_advice_prompt(profile, bmi)
    try:
        if source is AdviceSource.gemini:
            text = gemini_client.generate_advice(prompt, image, api_key=api_key, config=config)
        else:
            text = groq_client.generate_advice(prompt, config=config)
    except AdviceError as exc:
        logger.warning("%s advice call failed, falling back to local advice", source.value, exc_info=True)
        return AdviceResult(text=fallback, source=AdviceSource.local, error=str(exc))

    return AdviceResult(text=text, source=source)
