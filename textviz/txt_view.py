from PyQt5.QtGui import QFont, QFontMetricsF

from core.base_view import BaseLabelView


class TextLabelView(BaseLabelView):
    """Proportional glyph flow; characters drift sideways in and out."""

    def __init__(self, global_ctrl):
        super().__init__(global_ctrl)
        self.font.setWeight(QFont.Medium)

    def advance(self, char) -> float:
        # glyphs are laid out one by one, so kerning pairs are lost; spaces
        # keep their full advance like white-space: pre
        metrics = QFontMetricsF(self.font)
        if char.isspace():
            return metrics.horizontalAdvance(" ")
        return metrics.horizontalAdvance(char)
