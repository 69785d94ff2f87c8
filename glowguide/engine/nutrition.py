from __future__ import annotations

from typing import Iterable

from .models import HairType, NutritionRow, SkinType, category_value

# Concern -> nutrients and Indian foods that supply them.
NUTRITION_TABLE: dict[str, dict[str, list[str]]] = {
    "acne": {
        "nutrients": ["Zinc", "Vitamin A", "Omega-3"],
        "foods": ["chana, rajma", "carrot, spinach", "flaxseed, walnut"],
    },
    "dullness": {
        "nutrients": ["Vitamin C", "Vitamin E"],
        "foods": ["amla, orange", "almond, sunflower seeds"],
    },
    "dryness": {
        "nutrients": ["Essential fats", "Ceramide precursors"],
        "foods": ["ghee in moderation", "soy, dairy, millets"],
    },
    "pigmentation": {
        "nutrients": ["Vitamin C", "Antioxidants"],
        "foods": ["guava, amla", "green tea, berries"],
    },
    "hairfall": {
        "nutrients": ["Protein", "Iron", "Biotin"],
        "foods": ["paneer, dal, eggs", "spinach, jaggery", "peanuts, til"],
    },
    "dandruff": {
        "nutrients": ["Zinc", "B-vitamins"],
        "foods": ["pumpkin seeds", "whole grains, curd"],
    },
}

DEFAULT_CONCERNS: tuple[str, ...] = ("dullness", "dryness")

_SKIN_CONCERNS = {"oily": "acne", "dry": "dryness"}
_HAIR_CONCERNS = ("hairfall", "dandruff")


def _dedupe(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def infer_concerns(
    skin_type: SkinType | str | None,
    hair_interested: bool,
    hair_type: HairType | str | None,
    known_cause: str | None,
) -> list[str]:
    """
    Map the profile onto concern tags.

    Returns an ordered, duplicate-free list. Order is: skin concern, hair
    concern, then pigmentation when the known cause mentions "pigment".
    """
    concerns: list[str] = []

    skin_concern = _SKIN_CONCERNS.get(category_value(skin_type) or "")
    if skin_concern:
        concerns.append(skin_concern)

    hair = category_value(hair_type)
    if hair_interested and hair in _HAIR_CONCERNS:
        concerns.append(hair)

    if known_cause and "pigment" in known_cause.lower():
        concerns.append("pigmentation")

    return _dedupe(concerns)


def map_nutrition(concerns: Iterable[str]) -> list[NutritionRow]:
    """
    Look up nutrition rows for each concern, keeping input order.

    Falls back to ``DEFAULT_CONCERNS`` when ``concerns`` is empty. Unknown
    tags produce no row.
    """
    keys = _dedupe(concerns) or list(DEFAULT_CONCERNS)
    rows: list[NutritionRow] = []
    for key in keys:
        entry = NUTRITION_TABLE.get(key)
        if entry is None:
            continue
        rows.append(NutritionRow(
            concern=key,
            nutrients=list(entry["nutrients"]),
            foods=list(entry["foods"]),
        ))
    return rows
