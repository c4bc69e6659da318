"""Shared domain primitives."""

from .errors import (
    DomainError,
    InsufficientNutrientDataError,
    ScoringError,
    ValidationError,
)
from .grades import NovaGroup, NutriscoreGrade

__all__ = [
    "DomainError",
    "ScoringError",
    "InsufficientNutrientDataError",
    "ValidationError",
    "NutriscoreGrade",
    "NovaGroup",
]
