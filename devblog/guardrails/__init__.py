"""Guardrails for locale validation."""

from .locale_validator import (
    CoverageReport,
    LocaleCoverage,
    LocaleCoverageError,
    check_locale_coverage,
)

__all__ = [
    "CoverageReport",
    "LocaleCoverage",
    "LocaleCoverageError",
    "check_locale_coverage",
]
