import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QSlider,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from core.global_ctrl import GlobalController
from numberviz.num_ctrl import NumberController
from textviz.txt_ctrl import TextController
from widgets.graphics_view import LabelCanvas

# combo label -> preset name (None keeps each variant's default)
ANIMATION_CHOICES = [
    ("Default", None),
    ("Smooth", "smooth"),
    ("Snappy", "snappy"),
    ("Bouncy", "bouncy"),
]


class MainWindow(QMainWindow):
    """Demo window: animated label on top, variant/preset switches and panels below."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Calligraph")
        self.resize(960, 560)

        self.global_ctrl = GlobalController()
        self._active_name = None
        self._controllers = {}
        self._controller_order = []

        self._build_ui()
        self._register_controllers()
        self._connect_signals()

        if self._controller_order:
            self.variant_combo.setCurrentIndex(0)
            self._activate_controller(self._controller_order[0])

    def _build_ui(self):
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(8, 8, 8, 8)
        root_layout.setSpacing(8)

        self.canvas = LabelCanvas()
        root_layout.addWidget(self.canvas, 1)

        switches = QHBoxLayout()
        switches.setSpacing(6)
        self.variant_combo = QComboBox()
        self.animation_combo = QComboBox()
        for label, _name in ANIMATION_CHOICES:
            self.animation_combo.addItem(label)
        switches.addWidget(QLabel("Variant:"))
        switches.addWidget(self.variant_combo, 1)
        switches.addWidget(QLabel("Animation:"))
        switches.addWidget(self.animation_combo, 1)
        root_layout.addLayout(switches)

        speed_layout = QHBoxLayout()
        self.speed_value_label = QLabel("1.0×")
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(50, 300)  # maps to 0.5x – 3x
        self.speed_slider.setValue(100)
        speed_layout.addWidget(QLabel("Animation Speed"))
        speed_layout.addWidget(self.speed_slider, 1)
        speed_layout.addWidget(self.speed_value_label)
        root_layout.addLayout(speed_layout)

        self.controls_stack = QStackedWidget()
        root_layout.addWidget(self.controls_stack, 0)

    def _register_controllers(self):
        self._add_controller("Text", TextController(self.global_ctrl))
        self._add_controller("Number", NumberController(self.global_ctrl))

    def _add_controller(self, name, controller):
        panel = controller.build_panel()
        idx = self.controls_stack.addWidget(panel)
        controller.panel_index = idx
        self._controllers[name] = controller
        self._controller_order.append(name)
        self.variant_combo.addItem(name)

    def _connect_signals(self):
        self.variant_combo.currentTextChanged.connect(self._activate_controller)
        self.animation_combo.currentIndexChanged.connect(self._on_animation_selected)
        self.speed_slider.valueChanged.connect(self._on_speed_slider_changed)

    def _on_speed_slider_changed(self, value):
        speed = value / 100.0
        self.speed_value_label.setText(f"{speed:.1f}×")
        self.global_ctrl.set_speed(speed)

    def _on_animation_selected(self, index):
        self.global_ctrl.set_animation(ANIMATION_CHOICES[index][1])

    def _activate_controller(self, name):
        if not name or name == self._active_name:
            return
        if name not in self._controllers:
            return

        if self._active_name:
            self._controllers[self._active_name].on_deactivate()

        controller = self._controllers[name]
        controller.on_activate(self.canvas)
        self.controls_stack.setCurrentIndex(controller.panel_index)
        self._active_name = name


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
