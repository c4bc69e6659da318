"""
Scoring tables.

Threshold tiers per nutrient, piecewise-linear point interpolation and
the raw-score to 0-100 banding that mirrors the A-E letter grades.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from . import nutrients as keys


class Polarity(str, Enum):
    """Direction a nutrient pushes the score."""

    NEGATIVE = "negative"  # Counts against the product
    POSITIVE = "positive"  # Counts in favour of the product


@dataclass(frozen=True)
class NutrientRule:
    """Threshold tiers for one scored nutrient.

    Attributes:
        key: Nutrient key in the raw mapping
        label: Display name used in factor names
        unit: Display unit used in factor descriptions
        thresholds: Ascending tier upper bounds
        polarity: Negative (penalty) or positive (credit)
        confidence_weight: Confidence lost when the field is missing
    """

    key: str
    label: str
    unit: str
    thresholds: tuple[float, ...]
    polarity: Polarity
    confidence_weight: int

    @property
    def max_points(self) -> int:
        """Points awarded at or above the last threshold."""
        return len(self.thresholds)

    def points(self, value: float) -> float:
        """Interpolated points for ``value``."""
        return interpolate_points(value, self.thresholds)


SUGAR_RULE = NutrientRule(
    key=keys.SUGARS,
    label="Sugar",
    unit="g",
    thresholds=(4.5, 9, 13.5, 18, 22.5, 27, 31, 36, 40, 45),
    polarity=Polarity.NEGATIVE,
    confidence_weight=10,
)

SATURATED_FAT_RULE = NutrientRule(
    key=keys.SATURATED_FAT,
    label="Saturated Fat",
    unit="g",
    thresholds=(1, 2, 3, 4, 5, 6, 7, 8, 9, 10),
    polarity=Polarity.NEGATIVE,
    confidence_weight=10,
)

SALT_RULE = NutrientRule(
    key=keys.SALT,
    label="Salt",
    unit="g",
    thresholds=(0.225, 0.45, 0.675, 0.9, 1.125, 1.35, 1.575, 1.8, 2.025, 2.25),
    polarity=Polarity.NEGATIVE,
    confidence_weight=10,
)

ENERGY_RULE = NutrientRule(
    key=keys.ENERGY_KCAL,
    label="Calories",
    unit="kcal",
    thresholds=(80, 160, 240, 320, 400, 480, 560, 640, 720, 800),
    polarity=Polarity.NEGATIVE,
    confidence_weight=10,
)

FIBER_RULE = NutrientRule(
    key=keys.FIBER,
    label="Fiber",
    unit="g",
    thresholds=(0.9, 1.9, 2.8, 3.7, 4.7),
    polarity=Polarity.POSITIVE,
    confidence_weight=5,
)

PROTEIN_RULE = NutrientRule(
    key=keys.PROTEINS,
    label="Protein",
    unit="g",
    thresholds=(1.6, 3.2, 4.8, 6.4, 8.0),
    polarity=Polarity.POSITIVE,
    confidence_weight=5,
)

NEGATIVE_RULES = (SUGAR_RULE, SATURATED_FAT_RULE, SALT_RULE, ENERGY_RULE)
POSITIVE_RULES = (FIBER_RULE, PROTEIN_RULE)
ALL_RULES = NEGATIVE_RULES + POSITIVE_RULES

# Whole-food heuristic (proxy for fruit/vegetable/nut content)
WHOLE_FOOD_BONUS = 3.0
WHOLE_FOOD_MIN_FIBER = 3.0
WHOLE_FOOD_MAX_ENERGY = 200.0
WHOLE_FOOD_MAX_SATURATED_FAT = 2.0
WHOLE_FOOD_MAX_SUGAR = 10.0

# NOVA adjustments
NOVA_ULTRA_PROCESSED_PENALTY = 5.0
NOVA_UNPROCESSED_BONUS = 2.0

# Confidence
CONFIDENCE_FLOOR_FOR_PULL = 50
NEUTRAL_SCORE = 50


def interpolate_points(value: float, thresholds: Sequence[float]) -> float:
    """Piecewise-linear points between ascending thresholds.

    Args:
        value: Nutrient amount
        thresholds: Ascending tier bounds

    Returns:
        0 for non-positive values, ``len(thresholds)`` at or above the last
        bound, otherwise tier index plus the fraction of the way through
        the tier

    Example:
        >>> interpolate_points(6.75, (4.5, 9, 13.5))
        1.5
        >>> interpolate_points(100, (4.5, 9, 13.5))
        3
    """
    if value <= 0:
        return 0
    if value >= thresholds[-1]:
        return len(thresholds)

    for i, upper in enumerate(thresholds):
        if value <= upper:
            previous = thresholds[i - 1] if i > 0 else 0
            return i + (value - previous) / (upper - previous)

    return len(thresholds)


def round_half_away(value: float) -> int:
    """Round to nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound ``value`` to [lo, hi]."""
    return max(lo, min(hi, value))


def pull_toward_neutral(score: int, confidence: int) -> int:
    """Shrink a score toward 50 when confidence is below 50.

    The pull is ``(50 - confidence)%`` of the distance to 50.

    Example:
        >>> pull_toward_neutral(90, 30)
        82
        >>> pull_toward_neutral(90, 80)
        90
    """
    if confidence >= CONFIDENCE_FLOOR_FOR_PULL:
        return score
    pull = (CONFIDENCE_FLOOR_FOR_PULL - confidence) / 100 * (score - NEUTRAL_SCORE)
    return int(clamp(score - round_half_away(pull), 0, 100))


@dataclass(frozen=True)
class ScoreBand:
    """Linear mapping of a raw-score interval onto a UI-score interval.

    Attributes:
        grade: Letter grade for the band
        raw_upper: Inclusive raw-score upper bound (None for the last band)
        raw_from: Raw score mapped to ``ui_high``
        raw_to: Raw score mapped to ``ui_low``
        ui_high: Best UI score inside the band
        ui_low: Worst UI score inside the band
    """

    grade: str
    raw_upper: Optional[float]
    raw_from: float
    raw_to: float
    ui_high: int
    ui_low: int

    def contains(self, raw_score: float) -> bool:
        """Whether ``raw_score`` falls at or below this band's upper bound."""
        return self.raw_upper is None or raw_score <= self.raw_upper

    def to_ui_score(self, raw_score: float) -> int:
        """Interpolate and clamp to the band's UI range."""
        fraction = (raw_score - self.raw_from) / (self.raw_to - self.raw_from)
        ui = self.ui_high - fraction * (self.ui_high - self.ui_low)
        return int(clamp(round_half_away(ui), self.ui_low, self.ui_high))


# Hand-tuned band constants; asymmetric widths are intentional.
SCORE_BANDS = (
    ScoreBand("A", raw_upper=-1, raw_from=-15, raw_to=-1, ui_high=100, ui_low=90),
    ScoreBand("B", raw_upper=2, raw_from=-1, raw_to=2, ui_high=89, ui_low=70),
    ScoreBand("C", raw_upper=10, raw_from=2, raw_to=10, ui_high=69, ui_low=45),
    ScoreBand("D", raw_upper=18, raw_from=10, raw_to=18, ui_high=44, ui_low=20),
    ScoreBand("E", raw_upper=None, raw_from=19, raw_to=40, ui_high=19, ui_low=0),
)


def band_for_raw_score(raw_score: float) -> ScoreBand:
    """Band that a raw (Nutri-Score polarity) total falls into."""
    for band in SCORE_BANDS:
        if band.contains(raw_score):
            return band
    return SCORE_BANDS[-1]


def grade_for_score(score: int) -> str:
    """Letter for a 0-100 UI score.

    Example:
        >>> grade_for_score(92)
        'A'
        >>> grade_for_score(44)
        'D'
    """
    for band in SCORE_BANDS:
        if score >= band.ui_low:
            return band.grade
    return SCORE_BANDS[-1].grade
