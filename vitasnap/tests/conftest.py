"""
Shared fixtures for VitaSnap tests.
"""

from typing import Any

import pytest

from vitasnap.application.scoring.service import ProductScoringService
from vitasnap.domain.dietary.checker import DietaryRestrictionChecker
from vitasnap.domain.health.analyzer import HealthConditionAnalyzer
from vitasnap.domain.scoring.engine import HealthScoreEngine


# ═══════════════════════════════════════════════════════════
# NUTRIENT FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def whole_food_nutrients() -> dict[str, Any]:
    """High fiber/protein product with no negative nutrients."""
    return {
        "sugars_100g": 0,
        "saturated-fat_100g": 0,
        "salt_100g": 0,
        "energy-kcal_100g": 0,
        "fiber_100g": 10,
        "proteins_100g": 10,
    }


@pytest.fixture
def junk_food_nutrients() -> dict[str, Any]:
    """Every negative nutrient above its top threshold."""
    return {
        "sugars_100g": 50,
        "saturated-fat_100g": 12,
        "salt_100g": 3,
        "energy-kcal_100g": 900,
    }


@pytest.fixture
def neutral_nutrients() -> dict[str, Any]:
    """All tracked nutrients present and zero."""
    return {
        "sugars_100g": 0,
        "saturated-fat_100g": 0,
        "salt_100g": 0,
        "energy-kcal_100g": 0,
        "fiber_100g": 0,
        "proteins_100g": 0,
    }


# ═══════════════════════════════════════════════════════════
# PRODUCT FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def nutella_response() -> dict[str, Any]:
    """OpenFoodFacts API response for Nutella."""
    return {
        "status": 1,
        "product": {
            "code": "3017620422003",
            "product_name": "Nutella",
            "brands": "Ferrero",
            "nutriments": {
                "energy-kcal_100g": 539.0,
                "proteins_100g": 6.3,
                "carbohydrates_100g": 57.5,
                "fat_100g": 30.9,
                "saturated-fat_100g": 10.6,
                "sugars_100g": 56.3,
                "sodium_100g": 0.0428,
                "salt_100g": 0.107,
            },
            "nutriscore_grade": "e",
            "nova_group": 4,
            "labels_tags": ["en:vegetarian"],
            "allergens_tags": ["en:milk", "en:nuts", "en:soybeans"],
            "ingredients_text": "Sugar, palm oil, hazelnuts 13%, skimmed milk powder 8.7%",
        },
    }


@pytest.fixture
def unbranded_oats() -> dict[str, Any]:
    """Product record without an official grade."""
    return {
        "code": "5000000000001",
        "product_name": "Rolled Oats",
        "nutriments": {
            "energy-kcal_100g": 375,
            "sugars_100g": 1.0,
            "saturated-fat_100g": 1.2,
            "salt_100g": 0.01,
            "fiber_100g": 10.0,
            "proteins_100g": 13.0,
        },
        "nova_group": "1",
        "labels_tags": ["en:vegan", "en:vegetarian"],
        "ingredients_text": "Whole grain oats",
    }


# ═══════════════════════════════════════════════════════════
# SERVICE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def engine() -> HealthScoreEngine:
    """Health score engine."""
    return HealthScoreEngine()


@pytest.fixture
def analyzer() -> HealthConditionAnalyzer:
    """Health-condition analyzer."""
    return HealthConditionAnalyzer()


@pytest.fixture
def checker() -> DietaryRestrictionChecker:
    """Dietary restriction checker."""
    return DietaryRestrictionChecker()


@pytest.fixture
def scoring_service(monkeypatch: pytest.MonkeyPatch) -> ProductScoringService:
    """Scoring service with strict validation unset in the environment."""
    monkeypatch.delenv("VITASNAP_STRICT_VALIDATION", raising=False)
    return ProductScoringService()
