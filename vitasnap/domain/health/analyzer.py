"""HealthConditionAnalyzer - per-condition product warnings."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

import structlog

from ..scoring.nutrients import parse_optional_float
from .models import (
    HealthAnalysisResult,
    HealthCondition,
    HealthWarning,
    WarningSeverity,
)

logger = structlog.get_logger(__name__)

SUGAR_KEYS = ("sugars_100g", "sugars")
CARB_KEYS = ("carbohydrates_100g", "carbohydrates")
SODIUM_KEYS = ("sodium_100g", "sodium")
SALT_KEYS = ("salt_100g", "salt")
SATURATED_FAT_KEYS = ("saturated-fat_100g", "saturated_fat_100g", "saturated-fat")
CHOLESTEROL_KEYS = ("cholesterol_100g", "cholesterol")
POTASSIUM_KEYS = ("potassium_100g", "potassium")
PHOSPHORUS_KEYS = ("phosphorus_100g", "phosphorus")
ENERGY_KEYS = ("energy-kcal_100g", "energy_100g", "energy-kcal")
FAT_KEYS = ("fat_100g", "fat")
PROTEIN_KEYS = ("proteins_100g", "proteins", "protein_100g")

ADDED_SYRUPS = ("high fructose corn syrup", "glucose syrup", "corn syrup")
TRANS_FAT_MARKERS = ("hydrogenated", "trans fat")
HIGH_FRUCTOSE_MARKERS = ("high fructose", "fructose syrup")

HIGH_PURINE_INDICATORS = (
    "organ meat", "liver", "kidney", "heart", "brain",
    "anchovy", "anchovies", "sardine", "sardines", "herring",
    "mackerel", "scallop", "scallops", "mussel", "mussels",
    "game meat", "venison",
)

MODERATE_PURINE_INDICATORS = (
    "beef", "pork", "lamb", "duck",
    "shellfish", "crab", "lobster", "shrimp",
    "asparagus", "spinach", "mushroom",
)

SUMMARIES = {
    WarningSeverity.SAFE: "This product appears safe for your health conditions.",
    WarningSeverity.CAUTION: "This product is generally okay but has some points to consider.",
    WarningSeverity.WARNING: (
        "This product has some concerns for your health conditions. Consume with caution."
    ),
    WarningSeverity.DANGER: (
        "This product may significantly impact your health. Review the warnings below."
    ),
}

NO_CONDITIONS_SUMMARY = "No health conditions configured"


def numeric_value(nutrients: Mapping[str, Any], keys: Sequence[str]) -> Optional[float]:
    """First usable numeric value among ``keys``.

    Example:
        >>> numeric_value({"sugars": "12.5"}, SUGAR_KEYS)
        12.5
        >>> numeric_value({"sugars_100g": "n/a"}, SUGAR_KEYS) is None
        True
    """
    for key in keys:
        value = parse_optional_float(nutrients.get(key))
        if value is not None:
            return value
    return None


def sodium_mg(nutrients: Mapping[str, Any]) -> Optional[float]:
    """Sodium per 100g in mg.

    Values below 10 are taken as grams. Salt is used when sodium is
    missing (1g salt = 400mg sodium).
    """
    sodium = numeric_value(nutrients, SODIUM_KEYS)
    if sodium is not None:
        return sodium * 1000 if sodium < 10 else sodium
    salt = numeric_value(nutrients, SALT_KEYS)
    if salt is not None:
        return salt * 400
    return None


class HealthConditionAnalyzer:
    """Analyze a product's nutrients and ingredients against health conditions.

    Each condition has its own rule set over per-100g values and the
    ingredient text. Warnings are returned most severe first; the overall
    severity is the most severe warning found.
    """

    def __init__(self) -> None:
        self._rules: dict[
            HealthCondition,
            Callable[[Mapping[str, Any], str], list[HealthWarning]],
        ] = {
            HealthCondition.DIABETES: self._diabetes,
            HealthCondition.HIGH_BLOOD_PRESSURE: self._high_blood_pressure,
            HealthCondition.HEART_DISEASE: self._heart_disease,
            HealthCondition.HIGH_CHOLESTEROL: self._high_cholesterol,
            HealthCondition.KIDNEY_DISEASE: self._kidney_disease,
            HealthCondition.OBESITY: self._obesity,
            HealthCondition.GOUT: self._gout,
        }

    def analyze_product(
        self,
        nutrients: Optional[Mapping[str, Any]],
        conditions: Iterable[Any],
        ingredients: Optional[str] = None,
    ) -> HealthAnalysisResult:
        """Analyze one product for the given conditions.

        Args:
            nutrients: Per-100g nutrient mapping
            conditions: HealthCondition members or their names
            ingredients: Raw ingredients text

        Returns:
            HealthAnalysisResult with sorted warnings and a summary

        Raises:
            ValidationError: Unknown condition name

        Example:
            >>> analyzer = HealthConditionAnalyzer()
            >>> result = analyzer.analyze_product(
            ...     {"sugars_100g": 30}, [HealthCondition.DIABETES]
            ... )
            >>> result.overall_severity
            <WarningSeverity.DANGER: 'danger'>
        """
        selected = self._resolve(conditions)
        if not selected:
            return HealthAnalysisResult(
                warnings=[],
                overall_severity=WarningSeverity.SAFE,
                summary=NO_CONDITIONS_SUMMARY,
            )

        values: Mapping[str, Any] = nutrients if isinstance(nutrients, Mapping) else {}
        text = (ingredients or "").lower()

        warnings: list[HealthWarning] = []
        for condition in selected:
            warnings.extend(self._rules[condition](values, text))

        warnings.sort(key=lambda w: w.severity.rank, reverse=True)
        overall = warnings[0].severity if warnings else WarningSeverity.SAFE

        logger.debug(
            "Analyzed product for health conditions",
            conditions=[c.value for c in selected],
            warnings=len(warnings),
            overall_severity=overall.value,
        )

        return HealthAnalysisResult(
            warnings=warnings,
            overall_severity=overall,
            summary=SUMMARIES[overall],
        )

    @staticmethod
    def _resolve(conditions: Iterable[Any]) -> list[HealthCondition]:
        resolved: list[HealthCondition] = []
        for raw in conditions or ():
            condition = HealthCondition.parse(raw)
            if condition not in resolved:
                resolved.append(condition)
        return resolved

    # ───────────────────────────────────────────────────────
    # Condition rules
    # ───────────────────────────────────────────────────────

    def _diabetes(self, nutrients: Mapping[str, Any], ingredients: str) -> list[HealthWarning]:
        condition = HealthCondition.DIABETES
        warnings: list[HealthWarning] = []

        sugars = numeric_value(nutrients, SUGAR_KEYS)
        if sugars is not None:
            value = f"{sugars:.1f}g sugar per 100g"
            if sugars > 22.5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.DANGER,
                    title="Very High Sugar Content",
                    explanation=(
                        "This product is very high in sugar which can cause rapid blood "
                        "sugar spikes and make blood sugar control very difficult."
                    ),
                    nutrient_value=value,
                ))
            elif sugars > 12.5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.WARNING,
                    title="High Sugar Content",
                    explanation=(
                        "High sugar levels may affect your blood glucose. Monitor portions "
                        "and your total daily carb intake."
                    ),
                    nutrient_value=value,
                ))
            elif sugars > 5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.CAUTION,
                    title="Moderate Sugar Content",
                    explanation=(
                        "Contains moderate sugar. It may fit a balanced diabetic diet in "
                        "small portions; monitor your blood sugar response."
                    ),
                    nutrient_value=value,
                ))

        carbs = numeric_value(nutrients, CARB_KEYS)
        if carbs is not None and carbs > 50:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="High Carbohydrate Content",
                explanation=(
                    "High carbohydrate foods can significantly impact blood sugar. Pair "
                    "with protein or fiber to slow absorption."
                ),
                nutrient_value=f"{carbs:.1f}g carbs per 100g",
            ))

        if any(syrup in ingredients for syrup in ADDED_SYRUPS):
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="Contains Added Syrups",
                explanation=(
                    "Added syrups such as corn or glucose syrup are quickly absorbed "
                    "and can cause rapid blood sugar spikes."
                ),
            ))

        return warnings

    def _high_blood_pressure(
        self, nutrients: Mapping[str, Any], ingredients: str
    ) -> list[HealthWarning]:
        condition = HealthCondition.HIGH_BLOOD_PRESSURE
        sodium = sodium_mg(nutrients)
        if sodium is None:
            return []

        value = f"{sodium:.0f}mg sodium per 100g"
        if sodium > 1500:
            return [HealthWarning(
                condition=condition,
                severity=WarningSeverity.DANGER,
                title="Very High Sodium Content",
                explanation=(
                    "Extremely high in sodium, which can raise blood pressure significantly. "
                    "The daily limit for hypertension is 1500mg; this product alone could "
                    "exceed it."
                ),
                nutrient_value=value,
            )]
        if sodium > 600:
            return [HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="High Sodium Content",
                explanation=(
                    "High sodium intake is linked to increased blood pressure. Balance "
                    "with low-sodium foods throughout the day."
                ),
                nutrient_value=value,
            )]
        if sodium > 300:
            return [HealthWarning(
                condition=condition,
                severity=WarningSeverity.CAUTION,
                title="Moderate Sodium Content",
                explanation=(
                    "Moderate sodium. Keep track of your total daily intake (less than "
                    "1500mg/day for hypertension)."
                ),
                nutrient_value=value,
            )]
        return []

    def _heart_disease(self, nutrients: Mapping[str, Any], ingredients: str) -> list[HealthWarning]:
        condition = HealthCondition.HEART_DISEASE
        warnings: list[HealthWarning] = []

        sat_fat = numeric_value(nutrients, SATURATED_FAT_KEYS)
        if sat_fat is not None:
            value = f"{sat_fat:.1f}g saturated fat per 100g"
            if sat_fat > 5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.DANGER,
                    title="High Saturated Fat",
                    explanation=(
                        "Saturated fat raises LDL cholesterol, increasing the risk of heart "
                        "disease and stroke. Limit intake to less than 13g per day."
                    ),
                    nutrient_value=value,
                ))
            elif sat_fat > 1.5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.CAUTION,
                    title="Moderate Saturated Fat",
                    explanation=(
                        "Contains some saturated fat. Balance with unsaturated fats like "
                        "olive oil and nuts."
                    ),
                    nutrient_value=value,
                ))

        sodium = sodium_mg(nutrients)
        if sodium is not None and sodium > 600:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="High Sodium",
                explanation=(
                    "High sodium can strain the heart and contribute to high blood "
                    "pressure, a major risk factor for heart disease."
                ),
                nutrient_value=f"{sodium:.0f}mg sodium per 100g",
            ))

        if any(marker in ingredients for marker in TRANS_FAT_MARKERS):
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.DANGER,
                title="May Contain Trans Fats",
                explanation=(
                    "Trans fats, often from hydrogenated oils, raise bad cholesterol and "
                    "lower good cholesterol."
                ),
            ))

        return warnings

    def _high_cholesterol(
        self, nutrients: Mapping[str, Any], ingredients: str
    ) -> list[HealthWarning]:
        condition = HealthCondition.HIGH_CHOLESTEROL
        warnings: list[HealthWarning] = []

        sat_fat = numeric_value(nutrients, SATURATED_FAT_KEYS)
        if sat_fat is not None:
            value = f"{sat_fat:.1f}g saturated fat per 100g"
            if sat_fat > 5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.DANGER,
                    title="High Saturated Fat",
                    explanation=(
                        "Saturated fat is the primary dietary cause of high LDL cholesterol."
                    ),
                    nutrient_value=value,
                ))
            elif sat_fat > 1.5:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.CAUTION,
                    title="Moderate Saturated Fat",
                    explanation=(
                        "Contains saturated fat which can contribute to elevated cholesterol. "
                        "Keep your daily total under 13g."
                    ),
                    nutrient_value=value,
                ))

        cholesterol = numeric_value(nutrients, CHOLESTEROL_KEYS)
        if cholesterol is not None and cholesterol > 50:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="Contains Dietary Cholesterol",
                explanation=(
                    "Dietary cholesterol matters less than saturated fat, but limiting it "
                    "can still help."
                ),
                nutrient_value=f"{cholesterol:.0f}mg cholesterol per 100g",
            ))

        return warnings

    def _kidney_disease(
        self, nutrients: Mapping[str, Any], ingredients: str
    ) -> list[HealthWarning]:
        condition = HealthCondition.KIDNEY_DISEASE
        warnings: list[HealthWarning] = []

        sodium = sodium_mg(nutrients)
        if sodium is not None and sodium > 400:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.DANGER if sodium > 800 else WarningSeverity.WARNING,
                title="High Sodium Content",
                explanation=(
                    "Damaged kidneys cannot effectively remove excess sodium, leading to "
                    "fluid retention and higher blood pressure."
                ),
                nutrient_value=f"{sodium:.0f}mg sodium per 100g",
            ))

        potassium = numeric_value(nutrients, POTASSIUM_KEYS)
        if potassium is not None and potassium > 300:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.DANGER if potassium > 500 else WarningSeverity.WARNING,
                title="High Potassium Content",
                explanation=(
                    "Reduced kidney function may not clear excess potassium, which can "
                    "cause dangerous heart rhythm problems."
                ),
                nutrient_value=f"{potassium:.0f}mg potassium per 100g",
            ))

        phosphorus = numeric_value(nutrients, PHOSPHORUS_KEYS)
        if phosphorus is not None and phosphorus > 200:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="High Phosphorus Content",
                explanation=(
                    "Excess phosphorus can weaken bones and cause calcium deposits in "
                    "blood vessels."
                ),
                nutrient_value=f"{phosphorus:.0f}mg phosphorus per 100g",
            ))

        if "phosphate" in ingredients:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="Contains Phosphate Additives",
                explanation=(
                    "Phosphate additives are absorbed more readily than natural phosphorus."
                ),
            ))

        return warnings

    def _obesity(self, nutrients: Mapping[str, Any], ingredients: str) -> list[HealthWarning]:
        condition = HealthCondition.OBESITY
        warnings: list[HealthWarning] = []

        energy = numeric_value(nutrients, ENERGY_KEYS)
        if energy is not None:
            value = f"{energy:.0f} kcal per 100g"
            if energy > 400:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.WARNING,
                    title="Very High Calorie Content",
                    explanation=(
                        "Calorie-dense food. Be mindful of portion sizes and your daily "
                        "calorie goals."
                    ),
                    nutrient_value=value,
                ))
            elif energy > 250:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.CAUTION,
                    title="Moderate-High Calories",
                    explanation=(
                        "Moderate to high calories. Track portions and balance with "
                        "lower-calorie foods."
                    ),
                    nutrient_value=value,
                ))

        fat = numeric_value(nutrients, FAT_KEYS)
        if fat is not None and fat > 17.5:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="High Fat Content",
                explanation="Fat is calorie-dense (9 kcal per gram).",
                nutrient_value=f"{fat:.1f}g fat per 100g",
            ))

        sugars = numeric_value(nutrients, SUGAR_KEYS)
        if sugars is not None and sugars > 15:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="High Sugar Content",
                explanation=(
                    "Sugary foods provide calories without much nutritional value and can "
                    "trigger cravings."
                ),
                nutrient_value=f"{sugars:.1f}g sugar per 100g",
            ))

        return warnings

    def _gout(self, nutrients: Mapping[str, Any], ingredients: str) -> list[HealthWarning]:
        condition = HealthCondition.GOUT
        warnings: list[HealthWarning] = []

        high = next((i for i in HIGH_PURINE_INDICATORS if i in ingredients), None)
        if high is not None:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.DANGER,
                title="High Purine Content",
                explanation=(
                    "High-purine ingredients can significantly increase uric acid levels "
                    "and trigger gout attacks."
                ),
                nutrient_value=f"Contains: {high}",
            ))
        else:
            moderate = next((i for i in MODERATE_PURINE_INDICATORS if i in ingredients), None)
            if moderate is not None:
                warnings.append(HealthWarning(
                    condition=condition,
                    severity=WarningSeverity.CAUTION,
                    title="Moderate Purine Content",
                    explanation=(
                        "Ingredients with moderate purine levels. Consume in moderation and "
                        "monitor uric acid levels."
                    ),
                    nutrient_value=f"Contains: {moderate}",
                ))

        if any(marker in ingredients for marker in HIGH_FRUCTOSE_MARKERS):
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.WARNING,
                title="Contains High Fructose",
                explanation="Fructose can increase uric acid production.",
            ))

        protein = numeric_value(nutrients, PROTEIN_KEYS)
        if protein is not None and protein > 25:
            warnings.append(HealthWarning(
                condition=condition,
                severity=WarningSeverity.CAUTION,
                title="High Protein Content",
                explanation=(
                    "Very high protein intake may contribute to elevated uric acid levels."
                ),
                nutrient_value=f"{protein:.1f}g protein per 100g",
            ))

        return warnings
