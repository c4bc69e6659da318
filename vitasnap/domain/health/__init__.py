"""Health-condition aware product warnings."""

from .analyzer import HealthConditionAnalyzer
from .models import (
    HealthAnalysisResult,
    HealthCondition,
    HealthWarning,
    WarningSeverity,
)

__all__ = [
    "HealthConditionAnalyzer",
    "HealthAnalysisResult",
    "HealthCondition",
    "HealthWarning",
    "WarningSeverity",
]
