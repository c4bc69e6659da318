"""
Unit tests for nutrient parsing.
"""

import pytest

from vitasnap.domain.scoring.nutrients import (
    NutrientSnapshot,
    parse_optional_float,
    sodium_mg_for_display,
    to_float,
)


class TestParsing:
    """Test defensive value parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [(12, 12.0), (12.5, 12.5), ("12.5", 12.5), (" 3 ", 3.0), ("1,5", 1.5)],
    )
    def test_numeric_values(self, raw: object, expected: float) -> None:
        """Should parse numbers and numeric strings."""
        assert to_float(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "n/a", True, float("nan"), float("inf"), [1], {"a": 1}, 10**400],
    )
    def test_unusable_values(self, raw: object) -> None:
        """Should read unusable values as zero without raising."""
        assert to_float(raw) == 0.0
        assert parse_optional_float(raw) is None


class TestNutrientSnapshot:
    """Test NutrientSnapshot construction."""

    def test_from_mapping(self) -> None:
        """Should read per-100g values and record presence."""
        snapshot = NutrientSnapshot.from_mapping(
            {"sugars_100g": "12", "fiber_100g": 3, "proteins_100g": None}
        )

        assert snapshot.sugars == 12.0
        assert snapshot.fiber == 3.0
        assert snapshot.has("sugars_100g")
        assert not snapshot.has("proteins_100g")
        assert snapshot.has_tracked_data()

    def test_sodium_fallback(self) -> None:
        """Should derive salt from sodium when salt is absent."""
        snapshot = NutrientSnapshot.from_mapping({"sodium_100g": 0.4})

        assert snapshot.salt == pytest.approx(1.0)
        assert snapshot.has_salt
        assert snapshot.sodium_mg == pytest.approx(400.0)

    def test_salt_preferred(self) -> None:
        """Should ignore sodium when salt is given."""
        snapshot = NutrientSnapshot.from_mapping({"salt_100g": 0.5, "sodium_100g": 2})

        assert snapshot.salt == 0.5

    @pytest.mark.parametrize("raw", [None, {}, "sugar", 42])
    def test_empty_input(self, raw: object) -> None:
        """Should build an empty snapshot for missing or invalid input."""
        snapshot = NutrientSnapshot.from_mapping(raw)  # type: ignore[arg-type]

        assert snapshot.is_empty()
        assert not snapshot.has_tracked_data()

    def test_untracked_nutrients_only(self) -> None:
        """Should not count carbohydrates or cholesterol as scorable."""
        snapshot = NutrientSnapshot.from_mapping({"carbohydrates_100g": 50})

        assert not snapshot.is_empty()
        assert not snapshot.has_tracked_data()


class TestSodiumDisplay:
    """Test sodium display conversion."""

    def test_from_sodium(self) -> None:
        """Should convert sodium grams to mg."""
        assert sodium_mg_for_display({"sodium_100g": 0.25}) == pytest.approx(250.0)

    def test_from_salt(self) -> None:
        """Should derive sodium from salt."""
        assert sodium_mg_for_display({"salt_100g": 1.0}) == pytest.approx(400.0)

    def test_missing(self) -> None:
        """Should return zero without data."""
        assert sodium_mg_for_display({}) == 0.0
