"""
Product scoring service.

Runs the health score engine, the health-condition analyzer and the
dietary checker against one product record.
"""

from typing import Any, Iterable, Mapping, Optional, Union

import structlog

from vitasnap.config import get_strict_validation
from vitasnap.domain.dietary.checker import DietaryRestrictionChecker
from vitasnap.domain.dietary.models import DietaryCheckResult
from vitasnap.domain.health.analyzer import HealthConditionAnalyzer
from vitasnap.domain.health.models import HealthAnalysisResult
from vitasnap.domain.product.mapper import ProductPayloadMapper
from vitasnap.domain.product.models import ProductPayload
from vitasnap.domain.scoring.engine import HealthScoreEngine
from vitasnap.domain.scoring.models import ConfidenceLabel, HealthScoreResult
from vitasnap.domain.scoring.nutrients import NutrientSnapshot
from vitasnap.domain.shared.errors import InsufficientNutrientDataError

logger = structlog.get_logger(__name__)

ProductInput = Union[ProductPayload, Mapping[str, Any]]


class ProductAssessment:
    """Score, health warnings and dietary check for one product."""

    def __init__(
        self,
        product: ProductPayload,
        score: HealthScoreResult,
        health: HealthAnalysisResult,
        dietary: DietaryCheckResult,
    ) -> None:
        """Initialize assessment.

        Args:
            product: Parsed product
            score: Health score with breakdown
            health: Health-condition analysis
            dietary: Dietary restriction check
        """
        self.product = product
        self.score = score
        self.health = health
        self.dietary = dietary

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation with camelCase score fields."""
        return {
            "code": self.product.code,
            "productName": self.product.product_name,
            "healthScore": self.score.to_dict(),
            "healthAnalysis": self.health.to_dict(),
            "dietary": self.dietary.to_dict(),
        }


class ProductScoringService:
    """Orchestrates product scoring.

    Flow:
    1. Parse the raw product record (if needed)
    2. Apply the strict-validation policy
    3. Score with the health score engine
    4. Analyze health conditions and dietary restrictions
    """

    def __init__(
        self,
        engine: Optional[HealthScoreEngine] = None,
        health_analyzer: Optional[HealthConditionAnalyzer] = None,
        dietary_checker: Optional[DietaryRestrictionChecker] = None,
        strict: Optional[bool] = None,
    ) -> None:
        """Initialize service.

        Args:
            engine: Score engine
            health_analyzer: Health-condition analyzer
            dietary_checker: Dietary restriction checker
            strict: Default strict mode; falls back to
                VITASNAP_STRICT_VALIDATION when None
        """
        self.engine = engine or HealthScoreEngine()
        self.health_analyzer = health_analyzer or HealthConditionAnalyzer()
        self.dietary_checker = dietary_checker or DietaryRestrictionChecker()
        self.strict = strict

    def score(self, product: ProductInput, strict: Optional[bool] = None) -> HealthScoreResult:
        """Score one product.

        Args:
            product: ProductPayload or raw product record
            strict: Override strict mode for this call

        Returns:
            Health score with breakdown

        Raises:
            InsufficientNutrientDataError: Strict mode and nothing to score
            ValidationError: Raw record is not a mapping

        Example:
            >>> service = ProductScoringService()
            >>> result = service.score({
            ...     "code": "3017620422003",
            ...     "nutriscore_grade": "e",
            ... })
            >>> result.score
            0
        """
        payload = self._to_payload(product)
        self._validate(payload, strict)

        result = self.engine.score_with_breakdown(
            payload.nutriments,
            official_grade=payload.official_grade,
            nova_group=payload.nova,
        )

        confidence = result.data_confidence
        logger.info(
            "Product scored",
            code=payload.code,
            score=result.score,
            grade=result.grade,
            is_official=result.is_official,
            confidence=confidence.confidence if confidence else None,
        )
        if confidence is not None and confidence.label == ConfidenceLabel.LOW:
            logger.warning(
                "Low confidence score",
                code=payload.code,
                missing_fields=confidence.missing_fields,
            )

        return result

    def assess(
        self,
        product: ProductInput,
        conditions: Iterable[Any] = (),
        restrictions: Iterable[Any] = (),
        strict: Optional[bool] = None,
    ) -> ProductAssessment:
        """Score a product and check it against the user's profile.

        Args:
            product: ProductPayload or raw product record
            conditions: Health conditions (members or names)
            restrictions: Dietary restrictions (members or names)
            strict: Override strict mode for this call

        Returns:
            ProductAssessment

        Raises:
            InsufficientNutrientDataError: Strict mode and nothing to score
            ValidationError: Unknown condition/restriction or bad record
        """
        payload = self._to_payload(product)
        score = self.score(payload, strict=strict)

        health = self.health_analyzer.analyze_product(
            payload.nutriments,
            conditions,
            ingredients=payload.ingredients_text,
        )
        dietary = self.dietary_checker.check_product(
            restrictions,
            labels=payload.labels,
            allergens=payload.allergens,
            ingredients=payload.ingredients_text,
            nutrients=payload.nutriments,
        )

        logger.info(
            "Product assessed",
            code=payload.code,
            score=score.score,
            health_severity=health.overall_severity.value,
            dietary_violations=[r.value for r in dietary.violations],
        )

        return ProductAssessment(
            product=payload,
            score=score,
            health=health,
            dietary=dietary,
        )

    @staticmethod
    def _to_payload(product: ProductInput) -> ProductPayload:
        if isinstance(product, ProductPayload):
            return product
        return ProductPayloadMapper.from_payload(product)

    def _validate(self, payload: ProductPayload, strict: Optional[bool]) -> None:
        if strict is None:
            strict = self.strict
        if strict is None:
            strict = get_strict_validation()
        if not strict or payload.official_grade is not None:
            return

        snapshot = NutrientSnapshot.from_mapping(payload.nutriments)
        if not snapshot.has_tracked_data():
            logger.warning("Rejected product without scorable data", code=payload.code)
            raise InsufficientNutrientDataError(
                f"Product {payload.code or '<unknown>'} has no official grade "
                "and no scorable nutrients",
                product_code=payload.code or None,
            )
