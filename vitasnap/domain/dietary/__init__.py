"""Dietary restriction checks."""

from .checker import DietaryRestrictionChecker
from .models import DietaryCheckResult, DietaryRestriction

__all__ = [
    "DietaryRestrictionChecker",
    "DietaryCheckResult",
    "DietaryRestriction",
]
