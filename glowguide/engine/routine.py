from __future__ import annotations

from .models import HairType, Routine, SkinType, category_value

MORNING: dict[str, list[str]] = {
    "dry": [
        "Hydrating cleanser",
        "Hyaluronic acid serum on damp skin",
        "Ceramide moisturizer",
        "SPF 50 PA++++ sunscreen",
    ],
    "oily": [
        "Gel cleanser",
        "Niacinamide 5%",
        "Lightweight moisturizer",
        "SPF 50 PA++++ sunscreen",
    ],
    "combination": [
        "Gentle cleanser",
        "Niacinamide 5% or BHA on T-zone",
        "Non-comedogenic moisturizer",
        "SPF 50 PA++++ sunscreen",
    ],
    "sensitive": [
        "Mild, fragrance-free cleanser",
        "Soothing serum (panthenol/centella)",
        "Ceramide moisturizer",
        "Mineral sunscreen SPF 50",
    ],
}

NIGHT: dict[str, list[str]] = {
    "dry": [
        "Creamy cleanser",
        "Layer hydrating toner/essence",
        "Rich ceramide moisturizer or sleeping mask",
    ],
    "oily": [
        "Gentle cleanser",
        "2% BHA (start 3x/week)",
        "Non-comedogenic moisturizer",
    ],
    "combination": [
        "Cleanser",
        "Targeted treatment on T-zone",
        "Hydrating cream on cheeks",
    ],
    "sensitive": [
        "Fragrance-free cleanser",
        "Barrier serum or squalane",
        "Ceramide cream",
    ],
}

HAIR: dict[str, list[str]] = {
    "oily": [
        "Shampoo 2–3x/week; focus on scalp",
        "Light conditioner on lengths only",
    ],
    "dry": [
        "Sulfate-free shampoo",
        "Weekly oiling and deep-conditioning",
    ],
    "dandruff": [
        "Ketoconazole 2% shampoo 2–3x/week (leave on 5 minutes)",
        "Alternate with gentle shampoo",
    ],
    "hairfall": [
        "Check ferritin, B12, D3 with your doctor",
        "Gentle detangling; avoid tight hairstyles",
    ],
}

NIGHT_RETINOL_STEP = "Introduce retinol gradually (2–3x/week)."
NIGHT_RETINOL_MIN_AGE = 25


def build_routine(
    skin_type: SkinType | str | None,
    hair_type: HairType | str | None,
    age: int | None,
) -> Routine:
    skin = category_value(skin_type) or ""
    hair = category_value(hair_type) or ""

    night = list(NIGHT.get(skin, []))
    if age is not None and age >= NIGHT_RETINOL_MIN_AGE:
        night.append(NIGHT_RETINOL_STEP)

    return Routine(
        morning=list(MORNING.get(skin, [])),
        night=night,
        hair=list(HAIR.get(hair, [])),
    )
