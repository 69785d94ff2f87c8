from __future__ import annotations

from groq import Groq

from .config import DEFAULT_ADVICE_CONFIG, AdviceConfig
from .models import AdviceError

SYSTEM_PROMPT = (
    "You are a careful skin and hair care assistant. "
    "You do not diagnose. Answer in short bullet points under the "
    "section headings the user asks for."
)


def generate_advice(
    prompt: str,
    config: AdviceConfig = DEFAULT_ADVICE_CONFIG,
) -> str:
    """
    Ask Groq for text-only advice.

    Raises ``AdviceError`` when the key is missing, the call fails or the
    reply is empty.
    """
    if not config.groq_api_key:
        raise AdviceError("Groq API key is not configured")

    try:
        client = Groq(api_key=config.groq_api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.groq_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=config.max_tokens,
            temperature=0.3,
        )
        content = response.choices[0].message.content or ""
    except Exception as exc:
        raise AdviceError(f"Groq API error: {exc}") from exc

    content = content.strip()
    if not content:
        raise AdviceError("Groq returned an empty response")
    return content
