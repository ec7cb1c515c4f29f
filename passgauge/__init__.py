"""PassGauge: rule-based password strength meter."""

from .analyzer import (
    COMMON_PASSWORDS,
    CRITERIA,
    MAX_SCORE,
    PasswordAnalyzer,
    StrengthLevel,
    StrengthReport,
    analyze,
    is_common_password,
    strength_for_score,
)

__version__ = "1.0.0"

__all__ = [
    "COMMON_PASSWORDS",
    "CRITERIA",
    "MAX_SCORE",
    "PasswordAnalyzer",
    "StrengthLevel",
    "StrengthReport",
    "analyze",
    "is_common_password",
    "strength_for_score",
]
