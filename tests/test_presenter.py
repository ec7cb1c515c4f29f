from passgauge.analyzer import CRITERIA, PasswordAnalyzer, analyze
from passgauge.presenter import HIDDEN, LABELS, present, view_for


def test_empty_input_hides_section():
    v = view_for("")
    assert v is HIDDEN
    assert not v.visible
    assert not v.show_feedback


def test_very_strong_view():
    v = view_for("Tr0ub4dor&3XyZ")
    assert v.visible
    assert v.label == "Very Strong"
    assert v.color == "green"
    assert v.bar_class == "strength-very-strong"
    assert v.bar_width == 100.0
    assert not v.show_feedback
    assert [i.criterion for i in v.checklist] == list(CRITERIA)
    assert all(i.satisfied for i in v.checklist)


def test_weak_view_lists_suggestions():
    v = present(analyze("password"))
    assert v.label == "Weak"
    assert v.color == "red"
    assert v.score == 2
    assert v.show_feedback
    assert "Avoid common passwords" in v.suggestions
    satisfied = {i.criterion for i in v.checklist if i.satisfied}
    assert satisfied == {"length8", "hasLower"}


def test_every_level_has_label():
    assert set(LABELS.values()) == {"Weak", "Fair", "Good", "Strong", "Very Strong"}


def test_view_uses_given_analyzer():
    v = view_for("Zx!9qLm#4vBn", PasswordAnalyzer(["zx!9"]))
    assert not dict((i.criterion, i.satisfied) for i in v.checklist)["notCommon"]
