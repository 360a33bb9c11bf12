"""Naive data-entry risk score."""

from typing import Iterable

from material_ai.models.analysis import ValidationResult

ERROR_WEIGHT = 30
WARNING_WEIGHT = 15
DUPLICATE_WEIGHT = 20
MAX_RISK = 100


def calculate_risk_score(error_count: int, warning_count: int, duplicate_count: int = 0) -> int:
    """min(100, 30*errors + 15*warnings + 20*duplicates)."""
    score = error_count * ERROR_WEIGHT + warning_count * WARNING_WEIGHT + duplicate_count * DUPLICATE_WEIGHT
    return min(MAX_RISK, max(0, score))


def risk_from_validations(validations: Iterable[ValidationResult], duplicate_count: int = 0) -> int:
    validations = list(validations)
    errors = sum(1 for v in validations if v.status == "error")
    warnings = sum(1 for v in validations if v.status == "warning")
    return calculate_risk_score(errors, warnings, duplicate_count)
