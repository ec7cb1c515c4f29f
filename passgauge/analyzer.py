"""
passgauge.analyzer

Rule-based password strength analyzer:
- seven independent criteria (length, character classes, common-password check)
- score = number of satisfied criteria (0-7)
- strength level from fixed score bands
- ordered, criterion-derived improvement suggestions

analyze(password) is pure: no I/O, no hidden state, same input -> equal report.
"""

import enum
import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

# Known-weak passwords. Matching is a loose bidirectional substring test, see
# is_common_password().
COMMON_PASSWORDS = frozenset({
    "password", "123456", "123456789", "qwerty", "abc123", "password123",
    "admin", "letmein", "welcome", "monkey", "1234567890", "password1",
    "123123", "qwerty123", "password1234", "admin123", "root", "toor",
    "pass", "test", "guest", "user", "login", "default",
})

UPPER = frozenset(string.ascii_uppercase)
LOWER = frozenset(string.ascii_lowercase)
DIGITS = frozenset(string.digits)
SPECIALS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

CRITERIA: Tuple[str, ...] = (
    "length8",
    "length12",
    "hasUpper",
    "hasLower",
    "hasDigit",
    "hasSpecial",
    "notCommon",
)
MAX_SCORE = len(CRITERIA)

SHORT_PASSWORD_WARNING = "Password is too short - very weak security"


class StrengthLevel(str, enum.Enum):
    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @property
    def rank(self) -> int:
        return list(StrengthLevel).index(self)

    def __lt__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, StrengthLevel):
            return NotImplemented
        return self.rank >= other.rank


@dataclass(frozen=True)
class StrengthReport:
    """Result of one analyze() call.

    Attributes:
        checks: read-only mapping criterion name -> bool, in CRITERIA order.
        score: number of satisfied criteria.
        strength: level derived from score.
        percentage: score / MAX_SCORE * 100, for bar widths.
        suggestions: improvement hints in fixed criterion order.
    """

    checks: Mapping[str, bool]
    score: int
    strength: StrengthLevel
    percentage: float
    suggestions: Tuple[str, ...]
    max_score: int = field(default=MAX_SCORE)

    def to_dict(self) -> Dict:
        return {
            "checks": dict(self.checks),
            "score": self.score,
            "maxScore": self.max_score,
            "strength": self.strength.value,
            "percentage": self.percentage,
            "suggestions": list(self.suggestions),
        }


def _contains_any(password: str, charset: frozenset) -> bool:
    return any(c in charset for c in password)


def is_common_password(password: str, common_passwords: Iterable[str] = COMMON_PASSWORDS) -> bool:
    """
    True if the lowercased password contains a listed entry, or a listed
    entry contains the lowercased password. The empty string is therefore
    always common.
    """
    lower = password.lower()
    return any(common in lower or lower in common for common in common_passwords)


def strength_for_score(score: int) -> StrengthLevel:
    if score <= 2:
        return StrengthLevel.WEAK
    elif score == 3:
        return StrengthLevel.FAIR
    elif score == 4:
        return StrengthLevel.GOOD
    elif score <= 6:
        return StrengthLevel.STRONG
    return StrengthLevel.VERY_STRONG


def _suggestions(password: str, checks: Mapping[str, bool]) -> Tuple[str, ...]:
    suggestions = []
    if not checks["length8"]:
        suggestions.append("Use at least 8 characters")
    if not checks["length12"] and checks["length8"]:
        suggestions.append("Consider using 12+ characters for better security")
    if not checks["hasUpper"]:
        suggestions.append("Add uppercase letters")
    if not checks["hasLower"]:
        suggestions.append("Add lowercase letters")
    if not checks["hasDigit"]:
        suggestions.append("Include numbers")
    if not checks["hasSpecial"]:
        suggestions.append("Add special characters (!@#$%^&*)")
    if not checks["notCommon"]:
        suggestions.append("Avoid common passwords")

    # blunt warning, always last
    if 0 < len(password) < 6:
        suggestions.append(SHORT_PASSWORD_WARNING)
    return tuple(suggestions)


class PasswordAnalyzer:
    """Scores passwords against a fixed common-password list.

    The list is frozen at construction; instances are safe to share.
    """

    def __init__(self, common_passwords: Optional[Iterable[str]] = None):
        if common_passwords is None:
            self.common_passwords = COMMON_PASSWORDS
        else:
            # blank entries would match every password
            self.common_passwords = frozenset(p.strip().lower() for p in common_passwords if p.strip())

    def check(self, password: str) -> Mapping[str, bool]:
        length = len(password)
        checks = {
            "length8": length >= 8,
            "length12": length >= 12,
            "hasUpper": _contains_any(password, UPPER),
            "hasLower": _contains_any(password, LOWER),
            "hasDigit": _contains_any(password, DIGITS),
            "hasSpecial": _contains_any(password, SPECIALS),
            "notCommon": not is_common_password(password, self.common_passwords),
        }
        return MappingProxyType(checks)

    def analyze(self, password: str) -> StrengthReport:
        checks = self.check(password)
        score = sum(1 for name in CRITERIA if checks[name])
        return StrengthReport(
            checks=checks,
            score=score,
            strength=strength_for_score(score),
            percentage=(score / MAX_SCORE) * 100,
            suggestions=_suggestions(password, checks),
        )


DEFAULT_ANALYZER = PasswordAnalyzer()


def analyze(password: str) -> StrengthReport:
    """Analyze password against the built-in common-password list."""
    return DEFAULT_ANALYZER.analyze(password)
