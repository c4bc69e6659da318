"""
Product domain models.

Scoring-relevant view of a product record from an external food
database (OpenFoodFacts, USDA) or an AI estimate.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..shared.grades import NovaGroup, NutriscoreGrade


class ProductPayload(BaseModel):
    """Product data consumed by scoring.

    Example:
        >>> product = ProductPayload(
        ...     code="3017620422003",
        ...     product_name="Nutella",
        ...     nutriments={"sugars_100g": 56.3},
        ...     nutriscore_grade=NutriscoreGrade.E,
        ... )
        >>> product.official_grade
        'e'
        >>> product.nova is None
        True
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field("", description="Product barcode")
    product_name: Optional[str] = Field(None, description="Product name")
    brands: Optional[str] = Field(None, description="Brand names")
    nutriments: dict[str, Any] = Field(default_factory=dict, description="Per-100g nutrients")
    nutriscore_grade: Optional[NutriscoreGrade] = Field(None, description="Nutriscore grade (a-e)")
    nova_group: Optional[NovaGroup] = Field(None, description="NOVA processing group (1-4)")
    labels: list[str] = Field(default_factory=list, description="Labels/certifications")
    allergens: list[str] = Field(default_factory=list, description="Declared allergens")
    ingredients_text: Optional[str] = Field(None, description="Ingredients list")

    @property
    def official_grade(self) -> Optional[str]:
        """Grade letter usable as an official grade, if any."""
        if self.nutriscore_grade is None or not self.nutriscore_grade.is_official():
            return None
        return self.nutriscore_grade.value

    @property
    def nova(self) -> Optional[int]:
        """NOVA group number, if known."""
        if self.nova_group is None:
            return None
        return self.nova_group.as_int()
