"""Product health scoring."""

from .engine import HealthScoreEngine
from .models import ConfidenceLabel, DataConfidence, HealthScoreResult, ScoreFactor
from .nutrients import NutrientSnapshot, sodium_mg_for_display
from .thresholds import grade_for_score, interpolate_points

__all__ = [
    "HealthScoreEngine",
    "HealthScoreResult",
    "ScoreFactor",
    "DataConfidence",
    "ConfidenceLabel",
    "NutrientSnapshot",
    "sodium_mg_for_display",
    "grade_for_score",
    "interpolate_points",
]
