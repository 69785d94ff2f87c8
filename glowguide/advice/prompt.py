from __future__ import annotations

from ..engine.models import Profile, category_value

_NA = "n/a"

LOCAL_LIFESTYLE = "Lifestyle: 2–3L water daily, 7–8h sleep, stress management, sunscreen every morning."
LOCAL_SEEK_CARE = (
    "When to seek care: sudden painful swelling, bleeding lesions, severe infections, "
    "or anything rapidly worsening."
)
LOCAL_CAUSES = "Likely causes: based on inputs, barrier imbalance and common issues for your profile."


def _or_na(value) -> str:
    if value is None or value == "":
        return _NA
    return str(value)


def concern_hints(profile: Profile) -> list[str]:
    hints: list[str] = []
    skin = category_value(profile.skin_type)
    if skin == "oily":
        hints.append("acne, blackheads")
    if skin == "dry":
        hints.append("dryness, flakiness")
    hair = category_value(profile.effective_hair_type)
    if hair == "dandruff":
        hints.append("dandruff")
    if hair == "hairfall":
        hints.append("hairfall")
    return hints


def build_advice_prompt(profile: Profile, bmi: float | None) -> str:
    hair = category_value(profile.effective_hair_type)
    hair_line = "yes" if profile.hair_interested else "no"
    if profile.hair_interested:
        hair_line += f", type: {_or_na(hair)}"

    lines = [
        "You are a dermatologist assistant. Analyze the provided details and image if present "
        "and respond in concise bullet points suitable for a layperson in India.",
        "User details:",
        f"- Skin type: {category_value(profile.skin_type)}",
        f"- Age: {_or_na(profile.age)}",
        f"- Gender: {category_value(profile.gender)}",
        f"- Weight(kg): {_or_na(profile.weight_kg)}",
        f"- Height(cm): {_or_na(profile.height_cm)}",
        f"- BMI: {_or_na(bmi)}",
        f"- Blood group: {_or_na(profile.blood_group)}",
        f"- Hair interest: {hair_line}",
        f"Potential concerns to check: {', '.join(concern_hints(profile)) or 'general skin health'}.",
        "If the image shows warning signs (bleeding moles, rapid spreading rashes, severe infections), "
        "clearly advise to see a dermatologist.",
        "Return sections: 1) Likely causes 2) Precautions 3) Lifestyle 4) When to seek care.",
    ]
    return "\n".join(lines)


def local_advice_text(precautions: list[str]) -> str:
    return "\n".join([
        LOCAL_CAUSES,
        f"Precautions: {' '.join(precautions)}".rstrip(),
        LOCAL_LIFESTYLE,
        LOCAL_SEEK_CARE,
    ])
