"""Validation package - result types shared by every unit.

This package holds the data that flows out of a unit: individual
errors, the internal validate-stage result, and the public
``SanitizeResult`` returned by ``run``.
"""

from .base import (
    SanitizeResult,
    ValidationError,
    ValidationResult,
    nest_under_index,
    nest_under_key,
    validation_error,
    validation_success,
)

__all__ = [
    "SanitizeResult",
    "ValidationError",
    "ValidationResult",
    "nest_under_index",
    "nest_under_key",
    "validation_error",
    "validation_success",
]
