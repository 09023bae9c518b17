from PyQt5.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QFont, QFontMetricsF
from PyQt5.QtWidgets import QGraphicsBlurEffect, QGraphicsObject, QGraphicsScene

from core.animation import AnimationToolkit


class BaseLabelView(QObject):
    """
    Base class for label views. Plays render descriptors on a
    QGraphicsScene:
    - persisted keys slide to their new slot
    - entering keys animate in from the descriptor's start style
    - exiting keys animate out and are removed once finished
    Exiting glyphs leave the flow immediately, so slots are laid out once
    from the present units only.
    """

    completed = pyqtSignal(int)

    def __init__(self, global_ctrl):
        super().__init__()
        self.scene = QGraphicsScene()
        self.scene.setSceneRect(-300, -80, 600, 160)
        self.anim = AnimationToolkit(global_ctrl)
        self.glyphs = {}
        self._exiting = {}
        self._running = []
        self._canvas = None
        self._label = ""
        self.base_origin = QPointF(0, 0)
        self.font = QFont()
        self.font.setPointSize(32)
        self.text_color = QColor("#1f1f24")

    def bind_canvas(self, view):
        self._canvas = view
        if view:
            view.setScene(self.scene)
            view.centerOn(self.base_origin)
            view.setAccessibleName(self._label)

    def set_label(self, text):
        """Whole-string accessible name; glyph items are not read one by one."""
        self._label = text
        if self._canvas:
            self._canvas.setAccessibleName(text)

    def set_attributes(self, attributes):
        """Pass-through presentation attributes: font_family, font_size, color."""
        if attributes.get("font_family"):
            self.font.setFamily(attributes["font_family"])
        if attributes.get("font_size"):
            self.font.setPointSizeF(float(attributes["font_size"]))
        if attributes.get("color"):
            self.text_color = QColor(attributes["color"])

    def reset(self):
        for item in list(self.glyphs.values()) + list(self._exiting.values()):
            self._stop(item)
        self.scene.clear()
        self.glyphs.clear()
        self._exiting.clear()
        self._running.clear()

    @property
    def exiting_keys(self):
        return set(self._exiting)

    # ---------- Descriptor playback ----------

    def apply(self, descriptors, transition):
        present = [d for d in descriptors if not d["is_exiting"]]
        for desc in descriptors:
            if desc["is_exiting"]:
                self._exit(desc, transition)

        for desc, slot in zip(present, self._layout(present)):
            item = self.glyphs.get(desc["key"])
            if item is None:
                item = self._create_glyph(desc)
                if desc["is_entering"]:
                    self._enter(item, desc, slot, transition)
                else:
                    item.setPos(slot)
            else:
                self._relayout(item, desc, slot, transition)

    def advance(self, char) -> float:
        return QFontMetricsF(self.font).horizontalAdvance(char)

    def _layout(self, present):
        widths = [self.advance(desc["content"]) for desc in present]
        height = QFontMetricsF(self.font).height()
        x = self.base_origin.x() - sum(widths) / 2
        y = self.base_origin.y() - height / 2
        slots = []
        for width in widths:
            slots.append(QPointF(x, y))
            x += width
        return slots

    def _create_glyph(self, desc):
        item = GlyphItem(desc["key"], desc["content"], self.font, self.text_color, self.advance(desc["content"]))
        self.scene.addItem(item)
        self.glyphs[desc["key"]] = item
        return item

    def _enter(self, item, desc, slot, transition):
        item.setPos(slot + QPointF(desc["offset_x"], desc["offset_y"]))
        item.setOpacity(0.0)
        item.setScale(desc["scale"])
        effect = item.blur_effect(desc["blur"])
        if effect:
            effect.setBlurRadius(desc["blur"])

        motion = self.anim.parallel(
            self.anim.move_item(item, slot, transition),
            self.anim.fade_item(item, 0.0, 1.0, transition),
            self.anim.scale_item(item, desc["scale"], 1.0, transition)
            if desc["scale"] != 1.0
            else None,
            self.anim.blur_item(effect, desc["blur"], 0.0, transition) if effect else None,
        )
        self._play(item, self.anim.delayed(motion, desc["delay"]), self._completion(desc))

    def _relayout(self, item, desc, slot, transition):
        self._stop(item)
        parts = [self.anim.move_item(item, slot, transition)]
        # an interrupted entrance finishes fading in from wherever it stopped
        if item.opacity() < 1.0:
            parts.append(self.anim.fade_item(item, item.opacity(), 1.0, transition))
        if item.scale() != 1.0:
            parts.append(self.anim.scale_item(item, item.scale(), 1.0, transition))
        if item.blur is not None and item.blur.blurRadius() > 0:
            parts.append(self.anim.blur_item(item.blur, item.blur.blurRadius(), 0.0, transition))
        self._play(item, self.anim.parallel(*parts), self._completion(desc))

    def _exit(self, desc, transition):
        item = self.glyphs.pop(desc["key"], None)
        if item is None:
            return
        self._stop(item)
        self._exiting[desc["key"]] = item
        target = item.pos() + QPointF(desc["offset_x"], desc["offset_y"])
        effect = item.blur_effect(desc["blur"])

        motion = self.anim.parallel(
            self.anim.move_item(item, target, transition),
            self.anim.fade_item(item, item.opacity(), 0.0, transition),
            self.anim.scale_item(item, item.scale(), desc["scale"], transition)
            if desc["scale"] != 1.0
            else None,
            self.anim.blur_item(effect, 0.0, desc["blur"], transition) if effect else None,
        )

        def _remove():
            self._exiting.pop(desc["key"], None)
            if item.scene():
                self.scene.removeItem(item)

        self._play(item, self.anim.delayed(motion, desc["delay"]), _remove)

    def _completion(self, desc):
        if not desc["is_last"]:
            return None
        key = desc["key"]
        return lambda: self.completed.emit(key)

    # ---------- Animation lifecycle ----------

    def _play(self, item, animation, finalizer=None):
        """
        Keeps references so that animations are not garbage collected and
        runs the finalizer when the animation completes (not when stopped).
        """
        self._stop(item)
        item.motion = animation
        self._running.append(animation)

        def _cleanup():
            if animation in self._running:
                self._running.remove(animation)
            if item.motion is animation:
                item.motion = None
            if finalizer:
                finalizer()

        animation.finished.connect(_cleanup)
        animation.start()

    def _stop(self, item):
        animation = item.motion
        if animation is None:
            return
        item.motion = None
        animation.stop()
        if animation in self._running:
            self._running.remove(animation)


class GlyphItem(QGraphicsObject):
    """One rendered character, identified by its key."""

    def __init__(self, key, char, font, color, width):
        super().__init__()
        self.key = key
        self.char = char
        self.motion = None
        self.blur = None
        self._font = QFont(font)
        self._color = QColor(color)
        self._size = QRectF(0, 0, width, QFontMetricsF(font).height())
        self.setTransformOriginPoint(self._size.center())

    def blur_effect(self, radius):
        if radius <= 0:
            return self.blur
        if self.blur is None:
            self.blur = QGraphicsBlurEffect()
            self.blur.setBlurRadius(0.0)
            self.setGraphicsEffect(self.blur)
        return self.blur

    def boundingRect(self):
        return QRectF(self._size)

    def paint(self, painter, option, widget=None):
        painter.setRenderHint(painter.Antialiasing)
        painter.setFont(self._font)
        painter.setPen(self._color)
        painter.drawText(self.boundingRect(), Qt.AlignCenter, self.char)
