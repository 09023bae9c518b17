from PyQt5.QtGui import QFont, QFontMetricsF

from core.base_view import BaseLabelView

DIGITS = "0123456789"


class NumberLabelView(BaseLabelView):
    """
    Odometer-style label. Every digit occupies the width of the widest digit
    (tabular figures) so columns do not jitter while values roll.
    """

    def __init__(self, global_ctrl):
        super().__init__(global_ctrl)
        self.font.setWeight(QFont.DemiBold)

    def advance(self, char) -> float:
        metrics = QFontMetricsF(self.font)
        if char in DIGITS:
            return max(metrics.horizontalAdvance(d) for d in DIGITS)
        return metrics.horizontalAdvance(char)
