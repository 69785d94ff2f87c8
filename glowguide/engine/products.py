from __future__ import annotations

from .models import HairType, ProductQuery, SkinType, Tier, category_value

BUDGET_MAX = 600
MID_MAX = 1500


def budget_tier(budget: float | None) -> Tier:
    """Bucket a budget amount; missing or invalid budgets count as 0."""
    try:
        value = float(budget or 0)
    except (TypeError, ValueError):
        value = 0.0
    if value != value:  # NaN
        value = 0.0

    if value <= BUDGET_MAX:
        return Tier.budget
    if value <= MID_MAX:
        return Tier.mid
    return Tier.premium


def build_product_queries(
    skin_type: SkinType | str | None,
    hair_type: HairType | str | None,
    budget: float | None,
) -> list[ProductQuery]:
    """Build the ordered product search list: skin items first, then hair."""
    tier = budget_tier(budget)
    skin = category_value(skin_type)
    hair = category_value(hair_type)
    items: list[ProductQuery] = []

    if skin:
        items.append(ProductQuery(
            label="Gentle cleanser (fragrance-free)",
            search_query="gentle cleanser fragrance free pH balanced",
        ))
        if skin in ("oily", "combination"):
            items.append(ProductQuery(
                label="2% BHA exfoliant",
                search_query="BHA 2% salicylic acid leave on",
            ))
        if skin == "dry":
            items.append(ProductQuery(
                label="Ceramide moisturizer",
                search_query="ceramide moisturizer dry skin",
            ))
        items.append(ProductQuery(
            label="Niacinamide 5% serum",
            search_query="niacinamide 5% serum",
        ))
        items.append(ProductQuery(
            label="Sunscreen SPF 50 PA++++",
            search_query="sunscreen SPF 50 PA++++ broad spectrum",
        ))
        if tier != Tier.budget:
            items.append(ProductQuery(
                label="Vitamin C 10% serum",
                search_query="vitamin C 10% l-ascorbic",
            ))

    if hair:
        items.append(ProductQuery(
            label="Sulfate-free shampoo",
            search_query="sulfate free shampoo",
        ))
        if hair == "dandruff":
            items.append(ProductQuery(
                label="Ketoconazole 2% shampoo",
                search_query="ketoconazole 2% shampoo",
            ))
        items.append(ProductQuery(
            label="Lightweight conditioner",
            search_query="lightweight conditioner silicone free",
        ))
        if tier != Tier.budget:
            items.append(ProductQuery(
                label="Hair mask weekly",
                search_query="repair hair mask ceramide protein",
            ))

    return items
