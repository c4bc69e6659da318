"""
Nutrient snapshot parsing.

Turns a raw per-100g nutrient mapping (as found in OpenFoodFacts
``nutriments`` or AI estimates) into typed values. Parsing never raises:
anything that is not a finite number reads as 0.0.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

# Nutrient keys (per 100g)
SUGARS = "sugars_100g"
SATURATED_FAT = "saturated-fat_100g"
SALT = "salt_100g"
SODIUM = "sodium_100g"
ENERGY_KCAL = "energy-kcal_100g"
FIBER = "fiber_100g"
PROTEINS = "proteins_100g"
CARBOHYDRATES = "carbohydrates_100g"
CHOLESTEROL = "cholesterol_100g"

RECOGNIZED_KEYS = (
    SUGARS,
    SATURATED_FAT,
    SALT,
    SODIUM,
    ENERGY_KCAL,
    FIBER,
    PROTEINS,
    CARBOHYDRATES,
    CHOLESTEROL,
)

# Fields the score depends on; salt counts as present when sodium is given
TRACKED_KEYS = (SUGARS, SATURATED_FAT, SALT, ENERGY_KCAL, FIBER, PROTEINS)

# salt (g) = sodium (g) * 2.5
SALT_PER_SODIUM = 2.5


def to_float(value: Any) -> float:
    """Parse a nutrient value defensively.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        Parsed float, 0.0 when the value is missing or not a finite number

    Example:
        >>> to_float("12.5")
        12.5
        >>> to_float("n/a")
        0.0
        >>> to_float(None)
        0.0
    """
    parsed = parse_optional_float(value)
    return parsed if parsed is not None else 0.0


def parse_optional_float(value: Any) -> Optional[float]:
    """Parse a nutrient value, keeping "no usable value" as None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            number = float(str(value).strip().replace(",", "."))
    except (ValueError, OverflowError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def salt_from_sodium(sodium_g: float) -> float:
    """Salt grams for a sodium amount in grams."""
    return sodium_g * SALT_PER_SODIUM


def sodium_mg_from_salt(salt_g: float) -> float:
    """Sodium milligrams for a salt amount in grams (display only)."""
    return salt_g / SALT_PER_SODIUM * 1000


def sodium_mg_for_display(nutrients: Mapping[str, Any]) -> float:
    """Sodium in mg per 100g for display.

    Uses ``sodium_100g`` when present, otherwise derives it from
    ``salt_100g``.

    Example:
        >>> sodium_mg_for_display({"salt_100g": 1.0})
        400.0
        >>> sodium_mg_for_display({"sodium_100g": 0.25})
        250.0
    """
    if nutrients.get(SODIUM) is not None:
        return to_float(nutrients.get(SODIUM)) * 1000
    return sodium_mg_from_salt(to_float(nutrients.get(SALT)))


@dataclass(frozen=True)
class NutrientSnapshot:
    """Per-100g nutrient values with presence tracking.

    A key mapped to ``None`` (or not mapped at all) is absent. A key whose
    value cannot be parsed is present but reads as 0.0.

    Salt is taken from ``salt_100g`` when present; otherwise it is derived
    from ``sodium_100g`` so the two are never counted twice.

    Example:
        >>> snapshot = NutrientSnapshot.from_mapping({"sodium_100g": 0.4})
        >>> snapshot.salt
        1.0
        >>> snapshot.has_salt
        True
    """

    sugars: float = 0.0
    saturated_fat: float = 0.0
    salt: float = 0.0
    energy_kcal: float = 0.0
    fiber: float = 0.0
    proteins: float = 0.0
    carbohydrates: float = 0.0
    cholesterol: float = 0.0
    present: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_mapping(cls, nutrients: Optional[Mapping[str, Any]]) -> NutrientSnapshot:
        """Build a snapshot from a raw nutrient mapping.

        Args:
            nutrients: Raw mapping; None or a non-mapping reads as empty
        """
        if not isinstance(nutrients, Mapping):
            return cls()

        present = frozenset(
            key for key in RECOGNIZED_KEYS if nutrients.get(key) is not None
        )

        if SALT in present:
            salt = to_float(nutrients[SALT])
        elif SODIUM in present:
            salt = salt_from_sodium(to_float(nutrients[SODIUM]))
        else:
            salt = 0.0

        return cls(
            sugars=to_float(nutrients.get(SUGARS)),
            saturated_fat=to_float(nutrients.get(SATURATED_FAT)),
            salt=salt,
            energy_kcal=to_float(nutrients.get(ENERGY_KCAL)),
            fiber=to_float(nutrients.get(FIBER)),
            proteins=to_float(nutrients.get(PROTEINS)),
            carbohydrates=to_float(nutrients.get(CARBOHYDRATES)),
            cholesterol=to_float(nutrients.get(CHOLESTEROL)),
            present=present,
        )

    def has(self, key: str) -> bool:
        """Whether the raw mapping supplied ``key``."""
        return key in self.present

    @property
    def has_salt(self) -> bool:
        """Salt is known from either salt or sodium."""
        return SALT in self.present or SODIUM in self.present

    @property
    def sodium_mg(self) -> float:
        """Sodium in mg derived from the effective salt value."""
        return sodium_mg_from_salt(self.salt)

    def has_tracked_data(self) -> bool:
        """At least one scored nutrient was supplied."""
        return self.has_salt or any(key in self.present for key in TRACKED_KEYS)

    def is_empty(self) -> bool:
        """No recognized nutrient was supplied."""
        return not self.present
