# passgauge/gui.py
# PassGauge GUI: live strength bar, label, checklist and suggestions

import sys
import logging
from functools import partial

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QWidget, QHBoxLayout, QVBoxLayout, QLabel,
    QLineEdit, QPushButton, QTextEdit, QGroupBox, QProgressBar
)

from passgauge.analyzer import CRITERIA
from passgauge.config import load_config, configure_logging
from passgauge.presenter import CAPTIONS, HIDDEN, view_for
from passgauge.wordlist import build_analyzer

logger = logging.getLogger(__name__)

CHECK_DONE = "✓"
CHECK_TODO = "○"

# ---------------- UI building helpers ----------------

def make_input_group(masked: bool):
    box = QGroupBox("Password")
    layout = QHBoxLayout()
    box.setLayout(layout)

    input_pw = PasswordLineEdit()
    input_pw.setPlaceholderText("Type or paste a password")
    input_pw.setEchoMode(QLineEdit.Password if masked else QLineEdit.Normal)

    btn_toggle = QPushButton("Show" if masked else "Hide")
    btn_toggle.setCheckable(True)
    btn_toggle.setChecked(not masked)

    layout.addWidget(input_pw, 1)
    layout.addWidget(btn_toggle)

    return {
        "widget": box,
        "input_pw": input_pw,
        "btn_toggle": btn_toggle,
    }


def make_strength_group():
    box = QGroupBox("Strength")
    layout = QVBoxLayout()
    box.setLayout(layout)

    bar = QProgressBar()
    bar.setRange(0, 100)
    bar.setTextVisible(False)
    lbl_strength = QLabel("")

    checklist = {}
    for name in CRITERIA:
        item = QLabel(f"{CHECK_TODO} {CAPTIONS[name]}")
        checklist[name] = item

    feedback = QGroupBox("Suggestions")
    feedback_layout = QVBoxLayout()
    feedback.setLayout(feedback_layout)
    txt_suggestions = QTextEdit()
    txt_suggestions.setReadOnly(True)
    txt_suggestions.setMaximumHeight(160)
    feedback_layout.addWidget(txt_suggestions)

    layout.addWidget(bar)
    layout.addWidget(lbl_strength)
    for item in checklist.values():
        layout.addWidget(item)
    layout.addWidget(feedback)

    return {
        "widget": box,
        "bar": bar,
        "lbl_strength": lbl_strength,
        "checklist": checklist,
        "feedback": feedback,
        "txt_suggestions": txt_suggestions,
    }


class PasswordLineEdit(QLineEdit):
    """Line edit that drops focus on Escape."""

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.clearFocus()
            return
        super().keyPressEvent(event)


class PassGaugeGUI(QWidget):
    def __init__(self, cfg=None, analyzer=None):
        super().__init__()
        self.setWindowTitle("PassGauge — Password Strength")
        self.setMinimumSize(420, 480)

        self.cfg = cfg if cfg is not None else load_config()
        self.analyzer = analyzer or build_analyzer(self.cfg.get("wordlist_path"))

        main = QVBoxLayout()
        self.setLayout(main)

        inp = make_input_group(bool(self.cfg.get("mask_input", True)))
        strength = make_strength_group()
        lbl_empty = QLabel("Start typing to see how strong your password is.")
        lbl_empty.setAlignment(Qt.AlignCenter)

        main.addWidget(inp["widget"])
        main.addWidget(lbl_empty)
        main.addWidget(strength["widget"], 1)

        # textChanged also fires on paste
        inp["input_pw"].textChanged.connect(partial(self.on_password_changed, strength))
        inp["btn_toggle"].toggled.connect(partial(self.on_toggle_visibility, inp))

        self.inp = inp
        self.strength = strength
        self.lbl_empty = lbl_empty
        self.render(HIDDEN)

    def on_toggle_visibility(self, inp, shown: bool):
        inp["input_pw"].setEchoMode(QLineEdit.Normal if shown else QLineEdit.Password)
        inp["btn_toggle"].setText("Hide" if shown else "Show")

    def on_password_changed(self, strength, text: str):
        view = view_for(text, self.analyzer)
        logger.debug("Evaluated input: visible=%s label=%s", view.visible, view.label)
        self.render(view)

    def render(self, view):
        s = self.strength
        s["widget"].setVisible(view.visible)
        self.lbl_empty.setVisible(not view.visible)
        if not view.visible:
            return

        s["bar"].setValue(int(round(view.bar_width)))
        s["bar"].setStyleSheet(f"QProgressBar::chunk {{ background-color: {view.hex_color}; }}")
        s["lbl_strength"].setText(view.label)
        s["lbl_strength"].setStyleSheet(f"font-weight: bold; color: {view.hex_color};")

        for item in view.checklist:
            w = s["checklist"][item.criterion]
            w.setText(f"{CHECK_DONE if item.satisfied else CHECK_TODO} {item.caption}")
            w.setStyleSheet("color: #16a34a;" if item.satisfied else "")

        s["feedback"].setVisible(view.show_feedback)
        s["txt_suggestions"].setPlainText("\n".join("• " + x for x in view.suggestions))


def main():
    cfg = load_config()
    configure_logging(cfg)
    app = QApplication(sys.argv)
    gui = PassGaugeGUI(cfg)
    gui.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
