from typing import List
from dataclasses import dataclass

from ..core.models import YieldCurvePoint

# Plausible band for percent rates
MIN_RATE = -5.0
MAX_RATE = 25.0
COMPOUNDING_FLOOR = -100.0


@dataclass
class ValidationResult:
    """Result of a validation check"""
    passed: bool
    message: str
    severity: str  # "error", "warning", "info"


class DataValidator:
    """Sanity checks for user supplied curve points"""

    def __init__(self):
        self.results: List[ValidationResult] = []

    def validate_points_present(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """
        Validate that a curve has at least one point

        Args:
            points: Curve points

        Returns:
            List of validation results
        """
        if not points:
            return [ValidationResult(
                passed=False,
                message="No curve points provided",
                severity="error"
            )]
        return []

    def validate_unique_maturities(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """
        Validate that no two points share a year fraction or tenor

        Args:
            points: Curve points

        Returns:
            List of validation results
        """
        results = []

        year_counts = {}
        for point in points:
            year_counts[point.years] = year_counts.get(point.years, 0) + 1
        duplicate_years = sorted(years for years, count in year_counts.items() if count > 1)
        if duplicate_years:
            results.append(ValidationResult(
                passed=False,
                message=f"Duplicate year fractions found: {', '.join(f'{y:g}' for y in duplicate_years)}",
                severity="error"
            ))

        tenor_counts = {}
        for point in points:
            tenor_counts[point.tenor] = tenor_counts.get(point.tenor, 0) + 1
        duplicate_tenors = [tenor for tenor, count in tenor_counts.items() if count > 1]
        if duplicate_tenors:
            results.append(ValidationResult(
                passed=False,
                message=f"Duplicate tenors found: {', '.join(duplicate_tenors)}",
                severity="warning"
            ))

        return results

    def validate_non_negative_maturities(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """
        Validate that year fractions are not negative

        Args:
            points: Curve points

        Returns:
            List of validation results
        """
        negative = [p.tenor for p in points if p.years < 0]
        if negative:
            return [ValidationResult(
                passed=False,
                message=f"Negative year fractions for tenors: {', '.join(negative)}",
                severity="error"
            )]
        return []

    def validate_rate_bounds(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """
        Validate that rates lie in a plausible percent range

        Args:
            points: Curve points

        Returns:
            List of validation results
        """
        results = []

        for point in points:
            if point.rate < MIN_RATE or point.rate > MAX_RATE:
                results.append(ValidationResult(
                    passed=False,
                    message=f"Rate {point.rate} for {point.tenor} is outside [{MIN_RATE}, {MAX_RATE}]",
                    severity="warning"
                ))

        return results

    def validate_compoundable_rates(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """Rates at or below -100% cannot be compounded"""
        results = []

        for point in points:
            if point.rate <= COMPOUNDING_FLOOR:
                results.append(ValidationResult(
                    passed=False,
                    message=f"Rate {point.rate} for {point.tenor} must be above {COMPOUNDING_FLOOR}",
                    severity="error"
                ))

        return results

    def validate_ordering(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """Flag curves that arrive out of maturity order (they get sorted)"""
        years = [p.years for p in points]
        if years != sorted(years):
            return [ValidationResult(
                passed=True,
                message="Points are not ordered by maturity and will be sorted",
                severity="info"
            )]
        return []

    def validate_all(self, points: List[YieldCurvePoint]) -> List[ValidationResult]:
        """
        Run all validation checks

        Args:
            points: Curve points

        Returns:
            List of all validation results
        """
        self.results = []

        self.results.extend(self.validate_points_present(points))
        self.results.extend(self.validate_unique_maturities(points))
        self.results.extend(self.validate_non_negative_maturities(points))
        self.results.extend(self.validate_rate_bounds(points))
        self.results.extend(self.validate_compoundable_rates(points))
        self.results.extend(self.validate_ordering(points))

        return self.results

    def has_errors(self, results: List[ValidationResult]) -> bool:
        """Check if any validation results are errors"""
        return any(not r.passed and r.severity == "error" for r in results)

    def get_error_messages(self, results: List[ValidationResult]) -> List[str]:
        """Get error messages from validation results"""
        return [r.message for r in results if not r.passed and r.severity == "error"]

    def get_warning_messages(self, results: List[ValidationResult]) -> List[str]:
        """Get warning messages from validation results"""
        return [r.message for r in results if not r.passed and r.severity == "warning"]
