"""DietaryRestrictionChecker - product compatibility with dietary restrictions."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from ..scoring import nutrients as keys
from ..scoring.nutrients import NutrientSnapshot
from .models import DietaryCheckResult, DietaryRestriction

# EU nutrition claim limits (per 100g)
LOW_SODIUM_MAX_G = 0.12
LOW_SUGAR_MAX_G = 5.0

LABEL_WORDS = {
    DietaryRestriction.VEGAN: "vegan",
    DietaryRestriction.VEGETARIAN: "vegetarian",
    DietaryRestriction.HALAL: "halal",
    DietaryRestriction.KOSHER: "kosher",
}

# restriction -> (allergen markers, ingredient markers)
KEYWORD_RULES: dict[DietaryRestriction, tuple[tuple[str, ...], tuple[str, ...]]] = {
    DietaryRestriction.GLUTEN_FREE: (("gluten", "wheat"), ("wheat", "gluten")),
    DietaryRestriction.DAIRY_FREE: (("milk", "dairy"), ("milk", "dairy", "lactose")),
    DietaryRestriction.NUT_FREE: (("nut", "peanut"), ("nut", "almond", "peanut")),
    DietaryRestriction.SOY_FREE: (("soy",), ("soy",)),
    DietaryRestriction.EGG_FREE: (("egg",), ("egg",)),
    DietaryRestriction.SHELLFISH_FREE: (
        ("shellfish", "crustacean"),
        ("shrimp", "crab", "lobster"),
    ),
}


class DietaryRestrictionChecker:
    """Check a product against a set of dietary restrictions.

    Diet types (vegan, vegetarian, halal, kosher) require a matching
    product label. Allergen restrictions are violated by a matching
    allergen tag or ingredient word. Low sodium and low sugar use the
    nutrient values when they are available.
    """

    def check_product(
        self,
        restrictions: Iterable[Any],
        labels: Sequence[str] = (),
        allergens: Optional[Sequence[str]] = None,
        ingredients: Optional[str] = None,
        nutrients: Optional[Mapping[str, Any]] = None,
    ) -> DietaryCheckResult:
        """Split restrictions into matches and violations.

        Args:
            restrictions: DietaryRestriction members or their names
            labels: Product labels/certifications
            allergens: Declared allergens
            ingredients: Raw ingredients text
            nutrients: Per-100g nutrient mapping

        Returns:
            DietaryCheckResult, in restriction declaration order

        Raises:
            ValidationError: Unknown restriction name

        Example:
            >>> checker = DietaryRestrictionChecker()
            >>> result = checker.check_product(
            ...     ["vegan", "nutFree"],
            ...     labels=["Vegan", "Organic"],
            ...     ingredients="oats, almonds",
            ... )
            >>> [r.value for r in result.matches]
            ['vegan']
            >>> [r.value for r in result.violations]
            ['nutFree']
        """
        selected = {DietaryRestriction.parse(r) for r in restrictions or ()}
        labels_lower = [label.lower() for label in labels or ()]
        allergens_lower = [a.lower() for a in allergens or ()]
        ingredients_lower = (ingredients or "").lower()
        snapshot = NutrientSnapshot.from_mapping(nutrients) if nutrients else None

        matches: list[DietaryRestriction] = []
        violations: list[DietaryRestriction] = []

        for restriction in DietaryRestriction:
            if restriction not in selected:
                continue

            if restriction in LABEL_WORDS:
                word = LABEL_WORDS[restriction]
                violated: Optional[bool] = not any(word in label for label in labels_lower)
            elif restriction in KEYWORD_RULES:
                allergen_markers, ingredient_markers = KEYWORD_RULES[restriction]
                violated = any(
                    marker in allergen for allergen in allergens_lower for marker in allergen_markers
                ) or any(marker in ingredients_lower for marker in ingredient_markers)
            else:
                violated = self._nutrient_violation(restriction, snapshot)

            if violated is None:
                continue
            if violated:
                violations.append(restriction)
            else:
                matches.append(restriction)

        return DietaryCheckResult(matches=matches, violations=violations)

    @staticmethod
    def _nutrient_violation(
        restriction: DietaryRestriction,
        snapshot: Optional[NutrientSnapshot],
    ) -> Optional[bool]:
        if snapshot is None:
            return None

        if restriction is DietaryRestriction.LOW_SODIUM:
            if not snapshot.has_salt:
                return None
            return snapshot.sodium_mg / 1000 > LOW_SODIUM_MAX_G

        if restriction is DietaryRestriction.LOW_SUGAR:
            if not snapshot.has(keys.SUGARS):
                return None
            return snapshot.sugars > LOW_SUGAR_MAX_G

        return None
