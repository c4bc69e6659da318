"""Dietary restriction domain models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..shared.errors import ValidationError


class DietaryRestriction(str, Enum):
    """Dietary restriction or preference a product is checked against."""

    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    HALAL = "halal"
    KOSHER = "kosher"
    GLUTEN_FREE = "glutenFree"
    DAIRY_FREE = "dairyFree"
    NUT_FREE = "nutFree"
    SOY_FREE = "soyFree"
    EGG_FREE = "eggFree"
    SHELLFISH_FREE = "shellfishFree"
    LOW_SODIUM = "lowSodium"
    LOW_SUGAR = "lowSugar"

    @classmethod
    def parse(cls, raw: Any) -> DietaryRestriction:
        """Resolve a restriction from its value or member name.

        Raises:
            ValidationError: Unknown restriction
        """
        if isinstance(raw, DietaryRestriction):
            return raw
        text = str(raw).strip()
        for restriction in cls:
            if text == restriction.value or text.upper() == restriction.name:
                return restriction
        raise ValidationError(f"Unknown dietary restriction: {raw!r}")

    def display_name(self) -> str:
        """Name shown to users."""
        names = {
            DietaryRestriction.VEGAN: "Vegan",
            DietaryRestriction.VEGETARIAN: "Vegetarian",
            DietaryRestriction.HALAL: "Halal",
            DietaryRestriction.KOSHER: "Kosher",
            DietaryRestriction.GLUTEN_FREE: "Gluten-Free",
            DietaryRestriction.DAIRY_FREE: "Dairy-Free",
            DietaryRestriction.NUT_FREE: "Nut-Free",
            DietaryRestriction.SOY_FREE: "Soy-Free",
            DietaryRestriction.EGG_FREE: "Egg-Free",
            DietaryRestriction.SHELLFISH_FREE: "Shellfish-Free",
            DietaryRestriction.LOW_SODIUM: "Low Sodium",
            DietaryRestriction.LOW_SUGAR: "Low Sugar",
        }
        return names[self]

    def category(self) -> str:
        """Settings group the restriction belongs to."""
        if self in (
            DietaryRestriction.VEGAN,
            DietaryRestriction.VEGETARIAN,
            DietaryRestriction.HALAL,
            DietaryRestriction.KOSHER,
        ):
            return "Diet Type"
        if self in (DietaryRestriction.LOW_SODIUM, DietaryRestriction.LOW_SUGAR):
            return "Health Goals"
        return "Allergies & Intolerances"


class DietaryCheckResult(BaseModel):
    """Restrictions a product satisfies and those it violates.

    Restrictions that could not be evaluated (no nutrient data for a
    nutrient-based goal) appear in neither list.
    """

    model_config = ConfigDict(frozen=True)

    matches: list[DietaryRestriction] = Field(default_factory=list)
    violations: list[DietaryRestriction] = Field(default_factory=list)

    @property
    def is_compatible(self) -> bool:
        """No restriction is violated."""
        return not self.violations

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/serialization."""
        return self.model_dump(mode="json")
