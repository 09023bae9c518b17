from PyQt5.QtCore import QObject, pyqtSignal

from core.transition import ANIMATIONS


class GlobalController(QObject):
    """
    Playback settings shared by every label: speed multiplier and the
    selected animation preset (None means each variant's own default).
    """

    speedChanged = pyqtSignal(float)
    animationChanged = pyqtSignal(object)

    def __init__(self):
        super().__init__()
        self._speed = 1.0
        self._animation = None

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def animation(self):
        return self._animation

    def set_speed(self, value: float):
        """Clamp and broadcast speed multiplier (0.5× – 3×)."""
        value = max(0.5, min(3.0, value))
        if abs(value - self._speed) > 1e-3:
            self._speed = value
            self.speedChanged.emit(self._speed)

    def set_animation(self, name):
        if name is not None and name not in ANIMATIONS:
            raise ValueError(f"Unknown animation preset: {name!r}")
        if name != self._animation:
            self._animation = name
            self.animationChanged.emit(name)

    def scale_duration(self, seconds: float) -> int:
        """Preset time in seconds -> playback milliseconds. Faster speed, shorter time."""
        base_ms = seconds * 1000.0
        if self._speed <= 0:
            return int(base_ms)
        return max(0, int(round(base_ms / self._speed)))
