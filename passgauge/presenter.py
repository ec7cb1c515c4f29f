"""
passgauge.presenter

Translate a StrengthReport into view state for the front ends. Holds no
widget references; gui/cli/web each render a ViewState their own way.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .analyzer import CRITERIA, PasswordAnalyzer, StrengthLevel, StrengthReport, analyze

LABELS = {
    StrengthLevel.WEAK: "Weak",
    StrengthLevel.FAIR: "Fair",
    StrengthLevel.GOOD: "Good",
    StrengthLevel.STRONG: "Strong",
    StrengthLevel.VERY_STRONG: "Very Strong",
}

# (name, rich style, hex)
COLORS = {
    StrengthLevel.WEAK: ("red", "red", "#ef4444"),
    StrengthLevel.FAIR: ("amber", "dark_orange", "#f59e0b"),
    StrengthLevel.GOOD: ("yellow", "yellow", "#eab308"),
    StrengthLevel.STRONG: ("lime", "green_yellow", "#84cc16"),
    StrengthLevel.VERY_STRONG: ("green", "bold green", "#22c55e"),
}

CAPTIONS = {
    "length8": "At least 8 characters",
    "length12": "12+ characters (recommended)",
    "hasUpper": "Uppercase letter",
    "hasLower": "Lowercase letter",
    "hasDigit": "Number",
    "hasSpecial": "Special character",
    "notCommon": "Not a common password",
}


@dataclass(frozen=True)
class ChecklistItem:
    criterion: str
    caption: str
    satisfied: bool


@dataclass(frozen=True)
class ViewState:
    visible: bool
    label: str = ""
    color: str = ""
    rich_style: str = ""
    hex_color: str = ""
    bar_class: str = ""
    bar_width: float = 0.0
    score: int = 0
    checklist: Tuple[ChecklistItem, ...] = ()
    suggestions: Tuple[str, ...] = ()

    @property
    def show_feedback(self) -> bool:
        return bool(self.suggestions)


HIDDEN = ViewState(visible=False)


def present(report: StrengthReport) -> ViewState:
    color, rich_style, hex_color = COLORS[report.strength]
    checklist = tuple(
        ChecklistItem(name, CAPTIONS[name], report.checks[name]) for name in CRITERIA
    )
    return ViewState(
        visible=True,
        label=LABELS[report.strength],
        color=color,
        rich_style=rich_style,
        hex_color=hex_color,
        bar_class=f"strength-{report.strength.value}",
        bar_width=report.percentage,
        score=report.score,
        checklist=checklist,
        suggestions=report.suggestions,
    )


def view_for(password: str, analyzer: Optional[PasswordAnalyzer] = None) -> ViewState:
    """View state for the current input; empty input hides the strength section."""
    if password == "":
        return HIDDEN
    report = analyzer.analyze(password) if analyzer is not None else analyze(password)
    return present(report)
