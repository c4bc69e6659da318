"""HealthScoreEngine - Nutri-Score-like product health scoring."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import structlog

from ..shared.grades import NovaGroup, NutriscoreGrade
from . import nutrients as keys
from .models import DataConfidence, HealthScoreResult, ScoreFactor
from .nutrients import NutrientSnapshot
from .thresholds import (
    ALL_RULES,
    NEGATIVE_RULES,
    NEUTRAL_SCORE,
    NOVA_ULTRA_PROCESSED_PENALTY,
    NOVA_UNPROCESSED_BONUS,
    POSITIVE_RULES,
    SALT_RULE,
    WHOLE_FOOD_BONUS,
    WHOLE_FOOD_MAX_ENERGY,
    WHOLE_FOOD_MAX_SATURATED_FAT,
    WHOLE_FOOD_MAX_SUGAR,
    WHOLE_FOOD_MIN_FIBER,
    NutrientRule,
    Polarity,
    band_for_raw_score,
    clamp,
    pull_toward_neutral,
)

logger = structlog.get_logger(__name__)

RAW_SCORE_MIN = -15.0
RAW_SCORE_MAX = 45.0

LIMITED_DATA_FACTOR = ScoreFactor(
    name="Limited Data",
    description="Not enough nutrition data to compute a reliable score",
    is_positive=False,
    impact=0.0,
)


@dataclass
class PointTally:
    """Nutri-Score-style point totals for one snapshot."""

    negative_points: float = 0.0
    positive_points: float = 0.0
    factors: list[ScoreFactor] = field(default_factory=list)

    @property
    def raw_score(self) -> float:
        """Negative minus positive points, bounded (lower is better)."""
        return clamp(
            self.negative_points - self.positive_points,
            RAW_SCORE_MIN,
            RAW_SCORE_MAX,
        )


class HealthScoreEngine:
    """Convert per-100g nutrients into an explainable 0-100 health score.

    An official Nutri-Score letter takes precedence and maps to a fixed
    score (A=100, B=75, C=50, D=25, E=0). Without one, a fallback runs:

    1. Interpolated points for sugar, saturated fat, salt and energy
       (negative, 0-40) and for fiber and protein (positive, 0-10)
    2. Whole-food bonus (+3 positive) for high-fiber, low-energy,
       low-fat, low-sugar products
    3. NOVA adjustment: group 4 adds 5 negative points, group 1 adds
       2 positive points
    4. Raw score (negative - positive) mapped onto 0-100 through five
       bands mirroring grades A-E
    5. Scores backed by little data are pulled toward 50

    The engine is stateless; one instance can be shared freely.
    """

    def score(
        self,
        nutrients: Optional[Mapping[str, Any]],
        official_grade: Any = None,
        nova_group: Any = None,
    ) -> int:
        """Score a product.

        Args:
            nutrients: Per-100g nutrient mapping (values may be strings)
            official_grade: Optional Nutri-Score letter A-E (any case)
            nova_group: Optional NOVA group 1-4

        Returns:
            Score 0-100

        Example:
            >>> engine = HealthScoreEngine()
            >>> engine.score({}, official_grade="b")
            75
            >>> engine.score({})
            50
        """
        grade = self._official_grade(official_grade)
        if grade is not None:
            return grade.score()
        return self.score_with_breakdown(nutrients, None, nova_group).score

    def score_with_breakdown(
        self,
        nutrients: Optional[Mapping[str, Any]],
        official_grade: Any = None,
        nova_group: Any = None,
    ) -> HealthScoreResult:
        """Score a product and explain the result.

        Args:
            nutrients: Per-100g nutrient mapping (values may be strings)
            official_grade: Optional Nutri-Score letter A-E (any case)
            nova_group: Optional NOVA group 1-4

        Returns:
            HealthScoreResult with score, grade, factors and, for computed
            scores, data confidence
        """
        snapshot = NutrientSnapshot.from_mapping(nutrients)
        nova = NovaGroup.parse(nova_group)
        grade = self._official_grade(official_grade)

        if grade is not None:
            return self._official_result(snapshot, grade, nova)
        return self._computed_result(snapshot, nova)

    # ───────────────────────────────────────────────────────
    # Official path
    # ───────────────────────────────────────────────────────

    def _official_grade(self, raw: Any) -> Optional[NutriscoreGrade]:
        grade = NutriscoreGrade.parse(raw)
        if grade is None:
            return None
        if not grade.is_official():
            logger.debug("Ignoring unrecognized official grade", raw_grade=str(raw))
            return None
        return grade

    def _official_result(
        self,
        snapshot: NutrientSnapshot,
        grade: NutriscoreGrade,
        nova: Optional[NovaGroup],
    ) -> HealthScoreResult:
        factors: list[ScoreFactor] = []
        if snapshot.has_tracked_data():
            factors = self._tally(snapshot, nova).factors

        if not factors:
            factors = [
                ScoreFactor(
                    name=f"Grade {grade.letter}",
                    description=f"Official Nutri-Score grade {grade.letter}",
                    is_positive=grade in (NutriscoreGrade.A, NutriscoreGrade.B),
                    impact=0.0,
                )
            ]

        return HealthScoreResult(
            score=grade.score(),
            grade=grade.letter,
            factors=factors,
            data_confidence=None,
            is_official=True,
        )

    # ───────────────────────────────────────────────────────
    # Fallback path
    # ───────────────────────────────────────────────────────

    def _computed_result(
        self,
        snapshot: NutrientSnapshot,
        nova: Optional[NovaGroup],
    ) -> HealthScoreResult:
        if not snapshot.has_tracked_data():
            return HealthScoreResult(
                score=NEUTRAL_SCORE,
                grade=None,
                factors=[LIMITED_DATA_FACTOR],
                data_confidence=DataConfidence.from_confidence(
                    0, [rule.key for rule in ALL_RULES]
                ),
                is_official=False,
            )

        tally = self._tally(snapshot, nova)
        raw_score = tally.raw_score
        band = band_for_raw_score(raw_score)
        score = band.to_ui_score(raw_score)

        confidence, missing = self._assess_confidence(snapshot)
        score = pull_toward_neutral(score, confidence)

        logger.debug(
            "Computed fallback score",
            negative_points=round(tally.negative_points, 2),
            positive_points=round(tally.positive_points, 2),
            raw_score=round(raw_score, 2),
            score=score,
            grade=band.grade,
            confidence=confidence,
        )

        factors = tally.factors or [
            ScoreFactor(
                name=f"Grade {band.grade}",
                description=f"No standout nutrients; estimated grade {band.grade}",
                is_positive=True,
                impact=0.0,
            )
        ]

        return HealthScoreResult(
            score=score,
            grade=band.grade,
            factors=factors,
            data_confidence=DataConfidence.from_confidence(confidence, missing),
            is_official=False,
        )

    def _tally(self, snapshot: NutrientSnapshot, nova: Optional[NovaGroup]) -> PointTally:
        tally = PointTally()

        for rule in NEGATIVE_RULES:
            value = self._value(snapshot, rule)
            points = rule.points(value)
            tally.negative_points += points
            if points > 0:
                tally.factors.append(self._nutrient_factor(rule, value, points, snapshot))

        if nova is NovaGroup.GROUP_4:
            tally.negative_points += NOVA_ULTRA_PROCESSED_PENALTY
            tally.factors.append(
                ScoreFactor(
                    name="Ultra-Processed",
                    description="NOVA group 4: ultra-processed food",
                    is_positive=False,
                    impact=-NOVA_ULTRA_PROCESSED_PENALTY,
                )
            )

        for rule in POSITIVE_RULES:
            value = self._value(snapshot, rule)
            points = rule.points(value)
            tally.positive_points += points
            if points > 0:
                tally.factors.append(self._nutrient_factor(rule, value, points, snapshot))

        if self._is_whole_food(snapshot):
            tally.positive_points += WHOLE_FOOD_BONUS
            tally.factors.append(
                ScoreFactor(
                    name="Whole Food",
                    description="High fiber, low calories, fat and sugar",
                    is_positive=True,
                    impact=WHOLE_FOOD_BONUS,
                )
            )

        if nova is NovaGroup.GROUP_1:
            tally.positive_points += NOVA_UNPROCESSED_BONUS
            tally.factors.append(
                ScoreFactor(
                    name="Minimally Processed",
                    description="NOVA group 1: unprocessed or minimally processed food",
                    is_positive=True,
                    impact=NOVA_UNPROCESSED_BONUS,
                )
            )

        tally.factors.sort(key=lambda f: f.is_positive)
        return tally

    def _is_whole_food(self, snapshot: NutrientSnapshot) -> bool:
        return (
            snapshot.fiber > WHOLE_FOOD_MIN_FIBER
            and snapshot.energy_kcal < WHOLE_FOOD_MAX_ENERGY
            and snapshot.saturated_fat < WHOLE_FOOD_MAX_SATURATED_FAT
            and snapshot.sugars < WHOLE_FOOD_MAX_SUGAR
        )

    def _assess_confidence(self, snapshot: NutrientSnapshot) -> tuple[int, list[str]]:
        confidence = 100
        missing: list[str] = []
        for rule in ALL_RULES:
            supplied = snapshot.has_salt if rule is SALT_RULE else snapshot.has(rule.key)
            if not supplied:
                confidence -= rule.confidence_weight
                missing.append(rule.key)
        return max(0, confidence), missing

    @staticmethod
    def _value(snapshot: NutrientSnapshot, rule: NutrientRule) -> float:
        values = {
            keys.SUGARS: snapshot.sugars,
            keys.SATURATED_FAT: snapshot.saturated_fat,
            keys.SALT: snapshot.salt,
            keys.ENERGY_KCAL: snapshot.energy_kcal,
            keys.FIBER: snapshot.fiber,
            keys.PROTEINS: snapshot.proteins,
        }
        return values[rule.key]

    @staticmethod
    def _nutrient_factor(
        rule: NutrientRule,
        value: float,
        points: float,
        snapshot: NutrientSnapshot,
    ) -> ScoreFactor:
        ratio = points / rule.max_points
        if ratio >= 0.7:
            severity = "High"
        elif ratio >= 0.4:
            severity = "Moderate"
        else:
            severity = "Some"

        if rule.unit == "kcal":
            description = f"{value:.0f} kcal per 100g"
        elif rule is SALT_RULE:
            description = (
                f"{value:.2f}g salt ({snapshot.sodium_mg:.0f}mg sodium) per 100g"
            )
        else:
            description = f"{value:.1f}{rule.unit} {rule.label.lower()} per 100g"

        is_positive = rule.polarity is Polarity.POSITIVE
        impact = round(points, 1) if is_positive else -round(points, 1)

        return ScoreFactor(
            name=f"{severity} {rule.label}",
            description=description,
            is_positive=is_positive,
            impact=impact,
        )
