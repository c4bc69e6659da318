"""
Unit tests for DietaryRestrictionChecker.
"""

import pytest

from vitasnap.domain.dietary.checker import DietaryRestrictionChecker
from vitasnap.domain.dietary.models import DietaryRestriction
from vitasnap.domain.shared.errors import ValidationError


class TestDietTypes:
    """Test label-based diet types."""

    def test_vegan_label_matches(self, checker: DietaryRestrictionChecker) -> None:
        """Should match when the product carries the label."""
        result = checker.check_product(["vegan"], labels=["Organic", "Vegan"])

        assert result.matches == [DietaryRestriction.VEGAN]
        assert result.is_compatible is True

    def test_missing_label_violates(self, checker: DietaryRestrictionChecker) -> None:
        """Should violate when the label is absent."""
        result = checker.check_product(["halal", "kosher"], labels=["kosher"])

        assert result.matches == [DietaryRestriction.KOSHER]
        assert result.violations == [DietaryRestriction.HALAL]


class TestAllergens:
    """Test allergen restrictions."""

    def test_allergen_tag_violates(self, checker: DietaryRestrictionChecker) -> None:
        """Should violate on a matching allergen."""
        result = checker.check_product(["glutenFree"], allergens=["Gluten"])

        assert result.violations == [DietaryRestriction.GLUTEN_FREE]

    def test_ingredient_word_violates(self, checker: DietaryRestrictionChecker) -> None:
        """Should violate on a matching ingredient."""
        result = checker.check_product(
            [DietaryRestriction.SHELLFISH_FREE, DietaryRestriction.EGG_FREE],
            ingredients="Rice, shrimp, garlic",
        )

        assert result.violations == [DietaryRestriction.SHELLFISH_FREE]
        assert result.matches == [DietaryRestriction.EGG_FREE]

    def test_clean_product_matches(self, checker: DietaryRestrictionChecker) -> None:
        """Should match when nothing is declared."""
        result = checker.check_product(
            ["dairyFree", "soyFree"], allergens=[], ingredients="Apples, water"
        )

        assert result.matches == [DietaryRestriction.DAIRY_FREE, DietaryRestriction.SOY_FREE]


class TestNutrientGoals:
    """Test low sodium and low sugar."""

    def test_low_sodium(self, checker: DietaryRestrictionChecker) -> None:
        """Should compare sodium with 0.12g per 100g."""
        low = checker.check_product(["lowSodium"], nutrients={"salt_100g": 0.2})
        high = checker.check_product(["lowSodium"], nutrients={"sodium_100g": 0.5})

        assert low.matches == [DietaryRestriction.LOW_SODIUM]
        assert high.violations == [DietaryRestriction.LOW_SODIUM]

    def test_low_sugar(self, checker: DietaryRestrictionChecker) -> None:
        """Should compare sugars with 5g per 100g."""
        result = checker.check_product(["lowSugar"], nutrients={"sugars_100g": "12"})

        assert result.violations == [DietaryRestriction.LOW_SUGAR]

    def test_without_data_skipped(self, checker: DietaryRestrictionChecker) -> None:
        """Should leave nutrient goals unevaluated without data."""
        result = checker.check_product(
            ["lowSugar", "lowSodium"], nutrients={"fiber_100g": 3}
        )

        assert result.matches == []
        assert result.violations == []


class TestCheckProduct:
    """Test result shape and validation."""

    def test_declaration_order(self, checker: DietaryRestrictionChecker) -> None:
        """Should report restrictions in declaration order."""
        result = checker.check_product(
            ["nutFree", "vegan", "vegetarian"],
            labels=["vegetarian"],
            ingredients="oats, almonds",
        )

        assert result.violations == [DietaryRestriction.VEGAN, DietaryRestriction.NUT_FREE]
        assert result.matches == [DietaryRestriction.VEGETARIAN]

    def test_unknown_restriction(self, checker: DietaryRestrictionChecker) -> None:
        """Should reject unknown restriction names."""
        with pytest.raises(ValidationError):
            checker.check_product(["paleo"])

    def test_to_dict(self, checker: DietaryRestrictionChecker) -> None:
        """Should serialize enum values."""
        result = checker.check_product(["vegan"], labels=[])

        assert result.to_dict() == {"matches": [], "violations": ["vegan"]}

    @pytest.mark.parametrize(
        "restriction,category",
        [(DietaryRestriction.VEGAN, "Diet Type"),
         (DietaryRestriction.LOW_SUGAR, "Health Goals"),
         (DietaryRestriction.NUT_FREE, "Allergies & Intolerances")],
    )
    def test_category(self, restriction: DietaryRestriction, category: str) -> None:
        """Should group restrictions for settings screens."""
        assert restriction.category() == category
