from __future__ import annotations

from typing import Callable, NamedTuple

from .models import HairType, SkinType, category_value

SKIN_TIPS: dict[str, str] = {
    "oily": "Prefer gel cleansers, 2% BHA once daily, oil-free moisturizer, SPF 50 PA++++.",
    "dry": "Use creamy cleanser, layer hyaluronic acid and ceramide moisturizer, avoid hot water, SPF 50.",
    "combination": "Spot-treat T-zone with BHA/niacinamide, hydrate cheeks, non-comedogenic SPF.",
    "sensitive": "Keep routine fragrance-free, patch test actives (AHA/BHA/retinol), prefer mineral sunscreen.",
}

HAIR_TIPS: dict[str, str] = {
    "dry": "Use sulfate-free shampoo, weekly oiling (coconut/argan), deep-condition with shea/ceramide masks.",
    "oily": "Clarify 1–2x/week, lightweight conditioner on lengths only, avoid heavy oils on scalp.",
    "dandruff": "Use anti-dandruff shampoos (ketoconazole 2%, zinc pyrithione) 2–3x/week, leave on 5 minutes.",
    "hairfall": "Check ferritin, B12, D3; use gentle detangling and scalp massages; avoid tight hairstyles.",
}

RETINOL_TIP = "Introduce nightly retinol gradually (2–3x/week) and daily antioxidant serum."
LOW_BMI_TIP = "Ensure adequate calories and protein to support skin and hair barrier."
HIGH_BMI_TIP = "Focus on balanced diet and hydration; manage sugar spikes that may aggravate acne."

RETINOL_MIN_AGE = 25
LOW_BMI = 18.5
HIGH_BMI = 25.0


class _Inputs(NamedTuple):
    skin_type: str | None
    hair_type: str | None
    age: int | None
    bmi: float | None


class PrecautionRule(NamedTuple):
    name: str
    advise: Callable[[_Inputs], str | None]


def _lookup(table: dict[str, str], key: str | None) -> str | None:
    value = category_value(key)
    if value is None:
        return None
    return table.get(value)


# Evaluation order is the output order.
RULES: tuple[PrecautionRule, ...] = (
    PrecautionRule("skin_type", lambda i: _lookup(SKIN_TIPS, i.skin_type)),
    PrecautionRule(
        "retinol_age",
        lambda i: RETINOL_TIP if i.age is not None and i.age >= RETINOL_MIN_AGE else None,
    ),
    PrecautionRule(
        "low_bmi",
        lambda i: LOW_BMI_TIP if i.bmi is not None and i.bmi < LOW_BMI else None,
    ),
    PrecautionRule(
        "high_bmi",
        lambda i: HIGH_BMI_TIP if i.bmi is not None and i.bmi >= HIGH_BMI else None,
    ),
    PrecautionRule("hair_type", lambda i: _lookup(HAIR_TIPS, i.hair_type)),
)


def derive_precautions(
    skin_type: SkinType | str | None,
    hair_type: HairType | str | None,
    age: int | None,
    bmi: float | None,
) -> list[str]:
    """Evaluate every rule in table order and collect the tips that fire."""
    inputs = _Inputs(skin_type, hair_type, age, bmi)
    tips: list[str] = []
    for rule in RULES:
        tip = rule.advise(inputs)
        if tip:
            tips.append(tip)
    return tips
