"""
Product payload mapper.

Transforms OpenFoodFacts-style product records to domain models.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..shared.errors import ValidationError
from ..shared.grades import NovaGroup, NutriscoreGrade
from .models import ProductPayload


class ProductPayloadMapper:
    """Maps raw product records to ProductPayload."""

    @staticmethod
    def from_payload(data: Mapping[str, Any]) -> ProductPayload:
        """Parse a product record.

        Accepts either the bare product object or an API response
        wrapping it under ``product``.

        Args:
            data: Raw product JSON

        Returns:
            Parsed ProductPayload

        Raises:
            ValidationError: If ``data`` is not a mapping

        Example:
            >>> product = ProductPayloadMapper.from_payload({
            ...     "code": "3017620422003",
            ...     "product_name": "Nutella",
            ...     "nutriments": {"sugars_100g": 56.3},
            ...     "nutriscore_grade": "E",
            ...     "nova_group": 4,
            ...     "labels_tags": ["en:no-gluten"],
            ... })
            >>> product.nutriscore_grade
            <NutriscoreGrade.E: 'e'>
            >>> product.labels
            ['no-gluten']
        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Product payload must be a mapping, got {type(data).__name__}"
            )

        product = data.get("product")
        if isinstance(product, Mapping):
            data = product

        nutriments = data.get("nutriments")
        if not isinstance(nutriments, Mapping):
            nutriments = {}

        return ProductPayload(
            code=str(data.get("code") or ""),
            product_name=ProductPayloadMapper._text(data.get("product_name")),
            brands=ProductPayloadMapper._text(data.get("brands")),
            nutriments=dict(nutriments),
            nutriscore_grade=NutriscoreGrade.parse(data.get("nutriscore_grade")),
            nova_group=NovaGroup.parse(data.get("nova_group")),
            labels=ProductPayloadMapper._tags(data, "labels"),
            allergens=ProductPayloadMapper._tags(data, "allergens"),
            ingredients_text=ProductPayloadMapper._text(data.get("ingredients_text")),
        )

    @staticmethod
    def _tags(data: Mapping[str, Any], field: str) -> list[str]:
        """Read ``<field>_tags`` or ``<field>`` as a clean list.

        Example:
            >>> ProductPayloadMapper._tags(
            ...     {"allergens": "en:milk, en:soybeans"}, "allergens"
            ... )
            ['milk', 'soybeans']
        """
        raw = data.get(f"{field}_tags")
        if not raw:
            raw = data.get(field)
        if not raw:
            return []

        if isinstance(raw, str):
            items = raw.split(",")
        elif isinstance(raw, (list, tuple, set)):
            items = list(raw)
        else:
            items = [raw]

        tags: list[str] = []
        for item in items:
            text = str(item).strip()
            if ":" in text:
                text = text.split(":", 1)[1]
            if text and text not in tags:
                tags.append(text)
        return tags

    @staticmethod
    def _text(value: Any) -> Optional[str]:
        """Optional text field; blanks read as None, scalars as their str()."""
        if value is None:
            return None
        text = str(value).strip()
        return text or None
