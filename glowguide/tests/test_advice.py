import base64
from unittest.mock import MagicMock, patch

import pytest

from glowguide.advice import gemini_client, groq_client
from glowguide.advice.config import AdviceConfig
from glowguide.advice.models import AdviceError, AdviceSource, ImagePayload
from glowguide.advice.prompt import build_advice_prompt, local_advice_text
from glowguide.advice.service import get_advice
from glowguide.engine.models import Profile

GEMINI_CONFIG = AdviceConfig(gemini_api_key="gemini-key", groq_api_key="")
GROQ_CONFIG = AdviceConfig(gemini_api_key="", groq_api_key="groq-key")
NO_KEYS_CONFIG = AdviceConfig(gemini_api_key="", groq_api_key="")
DISABLED_CONFIG = AdviceConfig(gemini_api_key="gemini-key", groq_api_key="groq-key", enabled=False)

PROFILE = Profile(
    skin_type="oily",
    hair_interested=True,
    hair_type="dandruff",
    age=28,
    weight_kg=60,
    height_cm=165,
    blood_group="B+",
)
TIPS = ["Tip one.", "Tip two."]


def _mock_groq_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


# ── Prompt ───────────────────────────────────────────────────────────────


def test_prompt_lists_profile_and_concerns():
    prompt = build_advice_prompt(PROFILE, 22.0)
    assert "- Skin type: oily" in prompt
    assert "- BMI: 22.0" in prompt
    assert "- Blood group: B+" in prompt
    assert "- Hair interest: yes, type: dandruff" in prompt
    assert "Potential concerns to check: acne, blackheads, dandruff." in prompt
    assert prompt.endswith("4) When to seek care.")


def test_prompt_marks_missing_values():
    prompt = build_advice_prompt(Profile(skin_type="sensitive"), None)
    assert "- Age: n/a" in prompt
    assert "- BMI: n/a" in prompt
    assert "- Hair interest: no" in prompt
    assert "general skin health" in prompt


def test_local_text_has_four_sections():
    lines = local_advice_text(TIPS).split("\n")
    assert len(lines) == 4
    assert lines[0].startswith("Likely causes:")
    assert lines[1] == "Precautions: Tip one. Tip two."
    assert lines[2] == "Lifestyle: 2–3L water daily, 7–8h sleep, stress management, sunscreen every morning."
    assert lines[3].startswith("When to seek care:")


# ── Gemini client ────────────────────────────────────────────────────────


@patch("glowguide.advice.gemini_client.genai")
def test_gemini_returns_text_and_sends_image(mock_genai):
    models = mock_genai.Client.return_value.models
    models.generate_content.return_value.text = "  Use sunscreen.  "
    image = ImagePayload(data=base64.b64encode(b"fake-png").decode(), mime_type="image/png")

    text = gemini_client.generate_advice("prompt", image, config=GEMINI_CONFIG)

    assert text == "Use sunscreen."
    assert mock_genai.Client.call_args.kwargs["api_key"] == "gemini-key"
    kwargs = models.generate_content.call_args.kwargs
    assert kwargs["model"] == GEMINI_CONFIG.gemini_model
    prompt, part = kwargs["contents"]
    assert prompt == "prompt"
    assert part.inline_data.data == b"fake-png"
    assert part.inline_data.mime_type == "image/png"


@patch("glowguide.advice.gemini_client.genai")
def test_gemini_user_key_overrides_config(mock_genai):
    mock_genai.Client.return_value.models.generate_content.return_value.text = "ok"
    gemini_client.generate_advice("prompt", api_key="user-key", config=GEMINI_CONFIG)
    assert mock_genai.Client.call_args.kwargs["api_key"] == "user-key"


@patch("glowguide.advice.gemini_client.genai")
def test_gemini_concurrent_calls_keep_their_own_key(mock_genai):
    keys_used = []

    def make_client(api_key, **kwargs):
        client = MagicMock()

        def generate(**call):
            if api_key == "user-a":
                # another user's request lands while this one is in flight
                gemini_client.generate_advice("other", api_key="user-b", config=GEMINI_CONFIG)
            keys_used.append(api_key)
            return MagicMock(text=f"advice for {api_key}")

        client.models.generate_content.side_effect = generate
        return client

    mock_genai.Client.side_effect = make_client

    text = gemini_client.generate_advice("prompt", api_key="user-a", config=GEMINI_CONFIG)

    assert text == "advice for user-a"
    assert keys_used == ["user-b", "user-a"]


@patch("glowguide.advice.gemini_client.genai")
def test_gemini_api_error_raises(mock_genai):
    mock_genai.Client.return_value.models.generate_content.side_effect = Exception("HTTP 500")
    with pytest.raises(AdviceError, match="HTTP 500"):
        gemini_client.generate_advice("prompt", config=GEMINI_CONFIG)


@patch("glowguide.advice.gemini_client.genai")
def test_gemini_empty_response_raises(mock_genai):
    mock_genai.Client.return_value.models.generate_content.return_value.text = ""
    with pytest.raises(AdviceError):
        gemini_client.generate_advice("prompt", config=GEMINI_CONFIG)


def test_gemini_without_key_raises():
    with pytest.raises(AdviceError):
        gemini_client.generate_advice("prompt", config=NO_KEYS_CONFIG)


# ── Groq client ──────────────────────────────────────────────────────────


@patch("glowguide.advice.groq_client.Groq")
def test_groq_returns_text(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("Drink water.")
    assert groq_client.generate_advice("prompt", config=GROQ_CONFIG) == "Drink water."


@patch("glowguide.advice.groq_client.Groq")
def test_groq_api_error_raises(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")
    with pytest.raises(AdviceError, match="API timeout"):
        groq_client.generate_advice("prompt", config=GROQ_CONFIG)


# ── Service: provider choice and fallback ───────────────────────────────


def test_service_local_when_no_keys():
    result = get_advice(PROFILE, 22.0, TIPS, config=NO_KEYS_CONFIG)
    assert result.source == AdviceSource.local
    assert result.error is None
    assert "Tip one. Tip two." in result.text


@patch("glowguide.advice.service.gemini_client.generate_advice", return_value="AI advice")
def test_service_prefers_gemini(mock_generate):
    result = get_advice(PROFILE, 22.0, TIPS, config=GEMINI_CONFIG)
    assert result.source == AdviceSource.gemini
    assert result.text == "AI advice"
    prompt = mock_generate.call_args.args[0]
    assert "- BMI: 22.0" in prompt


@patch("glowguide.advice.service.gemini_client.generate_advice", return_value="AI advice")
def test_service_uses_session_key(mock_generate):
    result = get_advice(PROFILE, None, TIPS, api_key="user-key", config=NO_KEYS_CONFIG)
    assert result.source == AdviceSource.gemini
    assert mock_generate.call_args.kwargs["api_key"] == "user-key"


@patch("glowguide.advice.service.groq_client.generate_advice", return_value="Groq advice")
def test_service_uses_groq_without_gemini_key(mock_generate):
    result = get_advice(PROFILE, None, TIPS, config=GROQ_CONFIG)
    assert result.source == AdviceSource.groq
    assert result.text == "Groq advice"


@patch(
    "glowguide.advice.service.gemini_client.generate_advice",
    side_effect=AdviceError("Gemini API error: 403"),
)
def test_service_falls_back_on_failure(mock_generate):
    result = get_advice(PROFILE, None, TIPS, config=GEMINI_CONFIG)
    assert mock_generate.call_count == 1
    assert result.source == AdviceSource.local
    assert result.error == "Gemini API error: 403"
    assert result.text == local_advice_text(TIPS)


@patch("glowguide.advice.service.gemini_client.generate_advice")
def test_service_disabled_never_calls_provider(mock_generate):
    result = get_advice(PROFILE, None, TIPS, api_key="user-key", config=DISABLED_CONFIG)
    assert result.source == AdviceSource.local
    mock_generate.assert_not_called()
