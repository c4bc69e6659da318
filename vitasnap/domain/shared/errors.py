"""
Domain exceptions.

Typed exceptions for explicit error handling.

The scoring engine itself never raises for nutrient content: malformed
values degrade to a zero contribution. These exceptions cover invalid
programmatic arguments and caller policies layered on top of the engine.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# SCORING EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ScoringError(DomainError):
    """Base exception for product scoring."""

    pass


class InsufficientNutrientDataError(ScoringError):
    """
    Product has nothing to score.

    Raised by strict validation when:
    - No official Nutri-Score grade is available
    - None of the tracked nutrients is present

    Example:
        >>> raise InsufficientNutrientDataError(
        ...     "Product 3017620422003 has no grade and no nutrients"
        ... )
    """

    def __init__(self, message: str, product_code: str | None = None) -> None:
        super().__init__(message)
        self.product_code = product_code


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Input validation failed.

    Raised when:
    - Unknown health condition or dietary restriction name
    - Product payload is not a mapping

    Example:
        >>> raise ValidationError("Unknown health condition: 'scurvy'")
    """

    pass
