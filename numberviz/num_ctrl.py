import re

from PyQt5.QtWidgets import (
    QDoubleSpinBox,
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from core.align import UP
from core.calligraph import Calligraph
from core.global_ctrl import GlobalController
from core.transition import DEFAULT_STAGGER
from numberviz.num_view import NumberLabelView

_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)")


class NumberController(QWidget):
    """
    Price list panel for the number label. Values are formatted as USD and
    rolled through the odometer view.
    """

    default_prices = ["35.99", "234.29", "123.45", "3.99", "4423.89"]

    def __init__(self, global_ctrl: GlobalController):
        super().__init__()
        self.global_ctrl = global_ctrl
        self.view = NumberLabelView(global_ctrl)
        self.prices = list(self.default_prices)
        self._current = 0
        self.calligraph = Calligraph(
            format_price(self.prices[0]),
            variant="number",
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
        self.prices_edit = QLineEdit(" | ".join(self.prices))
        self.prices_edit.setPlaceholderText("35.99 | 234.29")
        self.prices_edit.editingFinished.connect(self._on_commit_prices)

        self.step_spin = QSpinBox()
        self.step_spin.setRange(1, 1000)
        self.step_spin.setValue(1)

        self.stagger_spin = QDoubleSpinBox()
        self.stagger_spin.setRange(0.0, 1.0)
        self.stagger_spin.setDecimals(2)
        self.stagger_spin.setSingleStep(0.01)
        self.stagger_spin.setValue(DEFAULT_STAGGER)
        self.stagger_spin.valueChanged.connect(self._on_stagger_changed)

        self.status_label = QLabel()

    def _create_panel(self):
        container = QWidget()
        layout = QGridLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setHorizontalSpacing(12)
        layout.setVerticalSpacing(12)

        cycle_btn = QPushButton("Next Price")
        cycle_btn.clicked.connect(self._on_cycle)
        prices_group = QGroupBox("Prices")
        prices_layout = QVBoxLayout(prices_group)
        prices_layout.setContentsMargins(12, 8, 12, 12)
        prices_layout.addWidget(self.prices_edit)
        prices_layout.addWidget(cycle_btn)
        prices_layout.addWidget(self.status_label)
        layout.addWidget(prices_group, 0, 0)

        up_btn = QPushButton("Increment")
        up_btn.clicked.connect(lambda: self._on_step(1))
        down_btn = QPushButton("Decrement")
        down_btn.clicked.connect(lambda: self._on_step(-1))
        counter_group = QGroupBox("Counter")
        counter_layout = QFormLayout()
        counter_layout.setContentsMargins(12, 8, 12, 12)
        counter_layout.addRow("Step:", self.step_spin)
        counter_layout.addRow("Stagger (s):", self.stagger_spin)
        counter_layout.addRow(up_btn)
        counter_layout.addRow(down_btn)
        counter_group.setLayout(counter_layout)
        layout.addWidget(counter_group, 0, 1)

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
        self._current = (self._current + 1) % len(self.prices)
        self.show_value(self.prices[self._current])

    def _on_step(self, sign):
        value = _to_float(self.prices[self._current]) + sign * self.step_spin.value()
        self.prices[self._current] = f"{value:.2f}"
        self.show_value(value)

    def show_value(self, value):
        descriptors = self.calligraph.set_content(format_price(value))
        if descriptors:
            self.view.apply(descriptors, self.calligraph.transition)
            self.view.set_label(self.calligraph.label)
        self._refresh_status()

    def _on_commit_prices(self):
        prices = self._parse_prices(self.prices_edit.text())
        if not prices:
            self.prices_edit.setText(" | ".join(self.prices))
            return
        self.prices = prices
        self._current = 0
        self.prices_edit.setText(" | ".join(prices))
        self.show_value(prices[0])

    def _on_stagger_changed(self, value):
        self.calligraph.stagger = value

    def _on_animation_changed(self, name):
        self.calligraph.set_animation(name)

    def _on_complete(self):
        self.status_label.setText(f"{self._direction_text()} · settled")

    # ---------- Helpers ----------

    def _direction_text(self):
        return "rolling up" if self.calligraph.state.direction == UP else "rolling down"

    def _refresh_status(self):
        self.status_label.setText(self._direction_text())

    @staticmethod
    def _parse_prices(text: str):
        tokens = [part.strip() for part in (text or "").split("|")]
        return [token for token in tokens if token and _NUMBER.match(token)]


def _to_float(value) -> float:
    match = _NUMBER.match(str(value).strip())
    return float(match.group(0)) if match else 0.0


def format_price(value) -> str:
    """USD currency format: 4423.89 -> "$4,423.89", -3.5 -> "-$3.50"."""
    amount = _to_float(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"
