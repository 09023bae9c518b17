from PyQt5.QtWidgets import (
    QDoubleSpinBox,
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from core.calligraph import Calligraph
from core.global_ctrl import GlobalController
from core.transition import DEFAULT_DRIFT, DEFAULT_STAGGER
from textviz.txt_view import TextLabelView


class TextController(QWidget):
    """
    Word list panel for the text label: cycles through the words and feeds
    each change to the view.
    """

    default_words = ["Calligraph", "Craft", "Creative", "Create"]

    def __init__(self, global_ctrl: GlobalController):
        super().__init__()
        self.global_ctrl = global_ctrl
        self.view = TextLabelView(global_ctrl)
        self.words = list(self.default_words)
        self.calligraph = Calligraph(
            self.words[0],
            variant="text",
            animation=global_ctrl.animation,
            on_complete=self._on_complete,
        )
        self.panel_index = -1

        self._build_inputs()
        self.panel = self._create_panel()

        self.view.completed.connect(self.calligraph.notify_complete)
        global_ctrl.animationChanged.connect(self._on_animation_changed)

        self.view.set_attributes(self.calligraph.attributes)
        self.view.apply(self.calligraph.render(), self.calligraph.transition)
        self.view.set_label(self.calligraph.label)
        self._refresh_status()

    # ---------- Panel UI ----------

    def _build_inputs(self):
        self.words_edit = QLineEdit(" | ".join(self.words))
        self.words_edit.setPlaceholderText("word | word | word")
        self.words_edit.editingFinished.connect(self._on_commit_words)

        self.drift_x_spin = self._spin(-200.0, 200.0, DEFAULT_DRIFT["x"], 1.0)
        self.drift_y_spin = self._spin(-200.0, 200.0, DEFAULT_DRIFT["y"], 1.0)
        self.stagger_spin = self._spin(0.0, 1.0, DEFAULT_STAGGER, 0.01)
        for spin in (self.drift_x_spin, self.drift_y_spin, self.stagger_spin):
            spin.valueChanged.connect(self._on_options_changed)

        self.status_label = QLabel()

    @staticmethod
    def _spin(low, high, value, step):
        spin = QDoubleSpinBox()
        spin.setRange(low, high)
        spin.setDecimals(2)
        spin.setSingleStep(step)
        spin.setValue(value)
        return spin

    def _create_panel(self):
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)

        cycle_btn = QPushButton("Next Word")
        cycle_btn.clicked.connect(self._on_cycle)
        words_group = QGroupBox("Words")
        words_layout = QVBoxLayout(words_group)
        words_layout.setContentsMargins(12, 8, 12, 12)
        words_layout.addWidget(self.words_edit)
        words_layout.addWidget(cycle_btn)
        words_layout.addWidget(self.status_label)
        layout.addWidget(words_group, 0, 0)

        options_group = QGroupBox("Motion")
        options_layout = QFormLayout()
        options_layout.setContentsMargins(12, 8, 12, 12)
        options_layout.addRow("Drift X:", self.drift_x_spin)
        options_layout.addRow("Drift Y:", self.drift_y_spin)
        options_layout.addRow("Stagger (s):", self.stagger_spin)
        options_group.setLayout(options_layout)
        layout.addWidget(options_group, 0, 1)

        self.cycle_btn = cycle_btn
        return container

    def build_panel(self):
        return self.panel

    # ---------- Controller lifecycle ----------

    def on_activate(self, graphics_view):
        self.view.bind_canvas(graphics_view)

    def on_deactivate(self):
        # hidden labels drop in-flight motion and come back at rest
        self.view.reset()
        self.view.apply(self.calligraph.render(), self.calligraph.transition)

    # ---------- UI handlers ----------

    def _on_cycle(self):
        idx = self.words.index(self.calligraph.text) if self.calligraph.text in self.words else -1
        self.show_text(self.words[(idx + 1) % len(self.words)])

    def show_text(self, text):
        descriptors = self.calligraph.set_content(text)
        if descriptors:
            self.view.apply(descriptors, self.calligraph.transition)
            self.view.set_label(self.calligraph.label)
        self._refresh_status()

    def _on_commit_words(self):
        words = self._parse_words(self.words_edit.text())
        if not words:
            self.words_edit.setText(" | ".join(self.words))
            return
        self.words = words
        self.words_edit.setText(" | ".join(words))
        self.show_text(words[0])

    def _on_options_changed(self, _value=None):
        self.calligraph.drift = {
            "x": self.drift_x_spin.value(),
            "y": self.drift_y_spin.value(),
        }
        self.calligraph.stagger = self.stagger_spin.value()

    def _on_animation_changed(self, name):
        self.calligraph.set_animation(name)

    def _on_complete(self):
        self.status_label.setText(f"{self._ratio_text()} · settled")

    # ---------- Helpers ----------

    def _ratio_text(self):
        return f"changed {self.calligraph.state.change_ratio:.0%}"

    def _refresh_status(self):
        self.status_label.setText(self._ratio_text())

    @staticmethod
    def _parse_words(text: str):
        return [part.strip() for part in (text or "").split("|") if part.strip()]
