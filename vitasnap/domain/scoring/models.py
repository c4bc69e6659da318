"""
Health score domain models.

Immutable results of a scoring run. Field aliases are the camelCase
names used when a result is stored or sent to a client.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConfidenceLabel(str, Enum):
    """Coarse trust level for a computed (non-official) score."""

    HIGH = "high"  # >= 80
    MEDIUM = "medium"  # >= 50
    LOW = "low"

    @classmethod
    def for_confidence(cls, confidence: int) -> ConfidenceLabel:
        """Label for a 0-100 confidence value.

        Example:
            >>> ConfidenceLabel.for_confidence(85)
            <ConfidenceLabel.HIGH: 'high'>
            >>> ConfidenceLabel.for_confidence(0)
            <ConfidenceLabel.LOW: 'low'>
        """
        if confidence >= 80:
            return cls.HIGH
        if confidence >= 50:
            return cls.MEDIUM
        return cls.LOW


class ScoreFactor(BaseModel):
    """
    Single contributor to a health score.

    Attributes:
        name: Short label (e.g. "High Sugar")
        description: Nutrient value in words (e.g. "32.0g sugar per 100g")
        is_positive: True when the factor raises the score
        impact: Signed point contribution (+ raises, - lowers)

    Example:
        >>> factor = ScoreFactor(
        ...     name="High Fiber",
        ...     description="6.2g fiber per 100g",
        ...     is_positive=True,
        ...     impact=5.0,
        ... )
        >>> factor.to_dict()["isPositive"]
        True
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Factor label")
    description: str = Field(..., description="Human-readable nutrient value")
    is_positive: bool = Field(..., alias="isPositive", description="Raises the score")
    impact: float = Field(..., description="Signed point contribution")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/serialization."""
        return self.model_dump(by_alias=True)


class DataConfidence(BaseModel):
    """
    How much of the expected nutrient data was supplied.

    Only attached to computed (non-official) scores.

    Attributes:
        confidence: 0-100, starting at 100 minus penalties per missing field
        missing_fields: Nutrient keys that were absent
        label: high / medium / low
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    confidence: int = Field(..., ge=0, le=100, description="Data completeness (0-100)")
    missing_fields: list[str] = Field(
        default_factory=list,
        alias="missingFields",
        description="Absent nutrient keys",
    )
    label: ConfidenceLabel = Field(..., description="Confidence label")

    @classmethod
    def from_confidence(cls, confidence: int, missing_fields: list[str]) -> DataConfidence:
        """Build with the label derived from ``confidence``."""
        return cls(
            confidence=confidence,
            missing_fields=missing_fields,
            label=ConfidenceLabel.for_confidence(confidence),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/serialization."""
        return self.model_dump(by_alias=True)


class HealthScoreResult(BaseModel):
    """
    Health score with its explanation.

    Attributes:
        score: Normalized score 0-100 (higher is better)
        grade: Letter A-E, None when there was no data to grade
        factors: Explanatory factors, never empty
        data_confidence: Completeness estimate, None for official grades
        is_official: True when an official Nutri-Score grade was used

    Example:
        >>> result = HealthScoreResult(
        ...     score=75,
        ...     grade="B",
        ...     factors=[
        ...         ScoreFactor(
        ...             name="Grade B",
        ...             description="Official Nutri-Score grade B",
        ...             is_positive=True,
        ...             impact=0.0,
        ...         )
        ...     ],
        ...     is_official=True,
        ... )
        >>> sorted(result.to_dict())
        ['dataConfidence', 'factors', 'grade', 'isOfficial', 'score']
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(..., ge=0, le=100, description="Health score (0-100)")
    grade: Optional[str] = Field(None, pattern=r"^[A-E]$", description="Letter grade")
    factors: list[ScoreFactor] = Field(..., min_length=1, description="Score breakdown")
    data_confidence: Optional[DataConfidence] = Field(
        None,
        alias="dataConfidence",
        description="Data completeness (computed scores only)",
    )
    is_official: bool = Field(False, alias="isOfficial", description="Official grade used")

    @property
    def negative_factors(self) -> list[ScoreFactor]:
        """Factors lowering the score."""
        return [f for f in self.factors if not f.is_positive]

    @property
    def positive_factors(self) -> list[ScoreFactor]:
        """Factors raising the score."""
        return [f for f in self.factors if f.is_positive]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/serialization."""
        return self.model_dump(by_alias=True)
