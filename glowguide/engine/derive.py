from __future__ import annotations

from .affiliate import build_product_picks
from .bmi import compute_bmi
from .models import Profile, RecommendationBundle
from .nutrition import infer_concerns, map_nutrition
from .precautions import derive_precautions
from .products import budget_tier, build_product_queries
from .routine import build_routine


def derive_recommendations(
    profile: Profile,
    partner_tags: dict[str, str] | None = None,
) -> RecommendationBundle:
    """
    Run the whole engine for one profile.

    ``partner_tags`` maps platform name to referral id. Product picks are
    only built when the profile asks for them.
    """
    hair_type = profile.effective_hair_type
    bmi = compute_bmi(profile.weight_kg, profile.height_cm)

    concerns = infer_concerns(
        profile.skin_type, profile.hair_interested, profile.hair_type, profile.known_cause,
    )

    products = []
    if profile.want_products:
        queries = build_product_queries(profile.skin_type, hair_type, profile.budget)
        products = build_product_picks(queries, partner_tags)

    return RecommendationBundle(
        bmi=bmi,
        precautions=derive_precautions(profile.skin_type, hair_type, profile.age, bmi),
        concerns=concerns,
        nutrition=map_nutrition(concerns),
        routine=build_routine(profile.skin_type, hair_type, profile.age),
        tier=budget_tier(profile.budget),
        products=products,
    )
