"""
Health condition domain models.

Conditions a user can declare, warning severities and the result of
analyzing one product against the declared conditions.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..shared.errors import ValidationError


class HealthCondition(str, Enum):
    """Health condition driving product warnings."""

    DIABETES = "diabetes"
    HIGH_BLOOD_PRESSURE = "highBloodPressure"
    HEART_DISEASE = "heartDisease"
    HIGH_CHOLESTEROL = "highCholesterol"
    KIDNEY_DISEASE = "kidneyDisease"
    OBESITY = "obesity"
    GOUT = "gout"

    @classmethod
    def parse(cls, raw: Any) -> HealthCondition:
        """Resolve a condition from its value or member name.

        Raises:
            ValidationError: Unknown condition

        Example:
            >>> HealthCondition.parse("high_blood_pressure")
            <HealthCondition.HIGH_BLOOD_PRESSURE: 'highBloodPressure'>
        """
        if isinstance(raw, HealthCondition):
            return raw
        text = str(raw).strip()
        for condition in cls:
            if text == condition.value or text.upper() == condition.name:
                return condition
        raise ValidationError(f"Unknown health condition: {raw!r}")

    def display_name(self) -> str:
        """Name shown to users."""
        names = {
            HealthCondition.DIABETES: "Diabetes",
            HealthCondition.HIGH_BLOOD_PRESSURE: "High Blood Pressure",
            HealthCondition.HEART_DISEASE: "Heart Disease",
            HealthCondition.HIGH_CHOLESTEROL: "High Cholesterol",
            HealthCondition.KIDNEY_DISEASE: "Kidney Disease",
            HealthCondition.OBESITY: "Obesity / Weight Management",
            HealthCondition.GOUT: "Gout",
        }
        return names[self]

    def description(self) -> str:
        """What the analysis watches for this condition."""
        descriptions = {
            HealthCondition.DIABETES: "Monitors sugar, carbs, and glycemic impact",
            HealthCondition.HIGH_BLOOD_PRESSURE: "Monitors sodium and salt content",
            HealthCondition.HEART_DISEASE: "Monitors fats, sodium, and cholesterol",
            HealthCondition.HIGH_CHOLESTEROL: "Monitors saturated fats and cholesterol",
            HealthCondition.KIDNEY_DISEASE: "Monitors sodium, potassium, and phosphorus",
            HealthCondition.OBESITY: "Monitors calories, fats, and sugars",
            HealthCondition.GOUT: "Monitors purines and certain proteins",
        }
        return descriptions[self]


class WarningSeverity(str, Enum):
    """Severity of a health warning, ordered safe < caution < warning < danger."""

    SAFE = "safe"  # OK to consume
    CAUTION = "caution"  # Consume in moderation
    WARNING = "warning"  # Limit consumption
    DANGER = "danger"  # Avoid or strictly limit

    @property
    def rank(self) -> int:
        """Ordering index (higher is more severe)."""
        return list(WarningSeverity).index(self)

    def label(self) -> str:
        """Badge text."""
        labels = {
            WarningSeverity.SAFE: "Safe",
            WarningSeverity.CAUTION: "Caution",
            WarningSeverity.WARNING: "Warning",
            WarningSeverity.DANGER: "Avoid",
        }
        return labels[self]


class HealthWarning(BaseModel):
    """
    One warning about a product for one condition.

    Example:
        >>> warning = HealthWarning(
        ...     condition=HealthCondition.DIABETES,
        ...     severity=WarningSeverity.WARNING,
        ...     title="High Sugar Content",
        ...     explanation="May affect blood glucose.",
        ...     nutrient_value="15.0g sugar per 100g",
        ... )
        >>> warning.severity.rank
        2
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    condition: HealthCondition = Field(..., description="Condition concerned")
    severity: WarningSeverity = Field(..., description="Warning severity")
    title: str = Field(..., min_length=1, description="Short headline")
    explanation: str = Field(..., description="Why this matters for the condition")
    nutrient_value: Optional[str] = Field(
        None,
        alias="nutrientValue",
        description="Offending value, e.g. '15g sugar per 100g'",
    )


class HealthAnalysisResult(BaseModel):
    """Warnings for one product across all declared conditions."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    warnings: list[HealthWarning] = Field(default_factory=list)
    overall_severity: WarningSeverity = Field(
        WarningSeverity.SAFE,
        alias="overallSeverity",
    )
    summary: str = Field(..., description="One-sentence verdict")

    @property
    def has_warnings(self) -> bool:
        """Any warning at all."""
        return bool(self.warnings)

    @property
    def has_dangers(self) -> bool:
        """Any danger-level warning."""
        return any(w.severity is WarningSeverity.DANGER for w in self.warnings)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/serialization."""
        return self.model_dump(by_alias=True, mode="json")
