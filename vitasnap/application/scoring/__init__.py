"""Product scoring use cases."""

from .service import ProductAssessment, ProductScoringService

__all__ = [
    "ProductScoringService",
    "ProductAssessment",
]
