"""
modules/validation package — schedule checks surfaced as warnings.
"""
from modules.validation.schedule_validator import (
    ValidationResult,
    validate_day_schedule,
    validate_days,
)

__all__ = [
    "ValidationResult",
    "validate_day_schedule",
    "validate_days",
]
