from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SkinType(str, Enum):
    oily = "oily"
    dry = "dry"
    combination = "combination"
    sensitive = "sensitive"


class HairType(str, Enum):
    oily = "oily"
    dry = "dry"
    dandruff = "dandruff"
    hairfall = "hairfall"


class Gender(str, Enum):
    female = "female"
    male = "male"
    other = "other"
    prefer_not = "prefer_not"


class Tier(str, Enum):
    budget = "budget"
    mid = "mid"
    premium = "premium"


class Platform(str, Enum):
    amazon = "amazon"
    flipkart = "flipkart"


class Profile(BaseModel):
    """User-supplied attributes; frozen once handed to the engine."""

    model_config = ConfigDict(frozen=True)

    skin_type: SkinType = SkinType.oily
    hair_interested: bool = False
    hair_type: HairType | None = None
    age: int | None = Field(default=None, ge=0, le=120)
    gender: Gender = Gender.female
    weight_kg: float | None = Field(default=None, gt=0, le=500)
    height_cm: float | None = Field(default=None, gt=0, le=300)
    blood_group: str = Field(default="", max_length=8)
    known_cause: str = Field(default="", max_length=500)
    want_products: bool = True
    budget: float = Field(default=800, ge=0)

    @property
    def effective_hair_type(self) -> HairType | None:
        """Hair type only counts when the user asked for hair advice."""
        return self.hair_type if self.hair_interested else None


class NutritionRow(BaseModel):
    concern: str
    nutrients: list[str]
    foods: list[str]


class ProductQuery(BaseModel):
    label: str
    search_query: str


class ProductPick(BaseModel):
    label: str
    search_query: str
    links: dict[str, str] = Field(default_factory=dict)


class Routine(BaseModel):
    morning: list[str] = Field(default_factory=list)
    night: list[str] = Field(default_factory=list)
    hair: list[str] = Field(default_factory=list)


class RecommendationBundle(BaseModel):
    bmi: float | None
    precautions: list[str]
    concerns: list[str]
    nutrition: list[NutritionRow]
    routine: Routine
    tier: Tier
    products: list[ProductPick] = Field(default_factory=list)


def category_value(value: Enum | str | None) -> str | None:
    """Plain string value of an enum member, or the string itself."""
    if isinstance(value, Enum):
        return value.value
    return value
