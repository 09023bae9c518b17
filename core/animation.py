from PyQt5.QtCore import (
    QEasingCurve,
    QParallelAnimationGroup,
    QPauseAnimation,
    QPointF,
    QPropertyAnimation,
    QSequentialAnimationGroup,
)

# spring bounce -> OutBack overshoot; bounce 0.3 overshoots ~10%
_OVERSHOOT_PER_BOUNCE = 6.0


class AnimationToolkit:
    """
    Builds Qt animations from a transition preset (see core.transition)
    with the global speed multiplier applied to every duration and delay.
    """

    def __init__(self, global_ctrl):
        self.global_ctrl = global_ctrl

    def _duration(self, seconds):
        return max(1, self.global_ctrl.scale_duration(seconds))

    @staticmethod
    def easing(transition) -> QEasingCurve:
        ease = transition.get("ease")
        if ease:
            x1, y1, x2, y2 = ease
            curve = QEasingCurve(QEasingCurve.BezierSpline)
            curve.addCubicBezierSegment(QPointF(x1, y1), QPointF(x2, y2), QPointF(1, 1))
            return curve

        bounce = transition.get("bounce", 0.0)
        if bounce <= 0:
            return QEasingCurve(QEasingCurve.OutCubic)
        curve = QEasingCurve(QEasingCurve.OutBack)
        curve.setOvershoot(bounce * _OVERSHOOT_PER_BOUNCE)
        return curve

    def _property(self, target, name, start, end, transition):
        anim = QPropertyAnimation(target, name)
        anim.setDuration(self._duration(transition["duration"]))
        if start is not None:
            anim.setStartValue(start)
        anim.setEndValue(end)
        anim.setEasingCurve(self.easing(transition))
        return anim

    def move_item(self, item, end_pos, transition):
        return self._property(item, b"pos", None, end_pos, transition)

    def fade_item(self, item, start, end, transition):
        return self._property(item, b"opacity", start, end, transition)

    def scale_item(self, item, start, end, transition):
        return self._property(item, b"scale", start, end, transition)

    def blur_item(self, effect, start, end, transition):
        """effect: the QGraphicsBlurEffect attached to the glyph."""
        return self._property(effect, b"blurRadius", start, end, transition)

    def pause(self, seconds):
        return QPauseAnimation(self.global_ctrl.scale_duration(seconds))

    def delayed(self, animation, seconds):
        if seconds <= 0:
            return animation
        return self.sequential(self.pause(seconds), animation)

    @staticmethod
    def parallel(*animations):
        group = QParallelAnimationGroup()
        for anim in animations:
            if anim:
                group.addAnimation(anim)
        return group

    @staticmethod
    def sequential(*animations):
        group = QSequentialAnimationGroup()
        for anim in animations:
            if anim:
                group.addAnimation(anim)
        return group
