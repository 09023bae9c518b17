"""
Per-unit transition parameters.

A render descriptor is a plain dict::

    {"key", "content", "index", "offset_x", "offset_y", "delay",
     "is_entering", "is_exiting", "is_last", "column", "scale", "blur"}

``offset_*``/``scale``/``blur`` describe the start style of an entering unit
and the end style of an exiting one. Persisted units only move to their new
slot.
"""

from typing import Dict, List, Optional, Tuple

from core.align import UP

ANIMATIONS: Dict[str, Dict] = {
    "default": {"duration": 0.38, "ease": (0.19, 1.0, 0.22, 1.0)},
    "smooth": {"type": "spring", "duration": 0.5, "bounce": 0.0},
    "snappy": {"type": "spring", "duration": 0.35, "bounce": 0.15},
    "bouncy": {"type": "spring", "duration": 0.5, "bounce": 0.3},
}

DEFAULT_ANIMATION = {"text": "default", "number": "snappy"}
DEFAULT_DRIFT = {"x": 15.0, "y": 0.0}
DEFAULT_STAGGER = 0.02

# vertical roll distance for digits (px)
DIGIT_DISTANCE = 8.0
NUMBER_ENTER_SCALE = 0.5
NUMBER_ENTER_BLUR = 2.0


def resolve_animation(name: Optional[str], variant: str) -> Dict:
    key = name or DEFAULT_ANIMATION[variant]
    if key not in ANIMATIONS:
        raise ValueError(f"Unknown animation preset: {key!r}")
    return dict(ANIMATIONS[key], name=key)


def resolve_drift(drift: Optional[Dict]) -> Tuple[float, float]:
    drift = drift or {}
    x = drift.get("x")
    y = drift.get("y")
    return (
        float(DEFAULT_DRIFT["x"] if x is None else x),
        float(DEFAULT_DRIFT["y"] if y is None else y),
    )


def text_progress(index: int, length: int) -> float:
    return 0.0 if length <= 1 else index / (length - 1)


def text_offsets(index, length, drift_x, drift_y, change_ratio):
    """Drift is centred on the label and scaled by how much of it changed."""
    spread = text_progress(index, length) - 0.5
    return spread * drift_x * change_ratio, spread * drift_y * change_ratio


def _descriptor(key, content, index, **fields):
    desc = {
        "key": key,
        "content": content,
        "index": index,
        "offset_x": 0.0,
        "offset_y": 0.0,
        "delay": 0.0,
        "is_entering": False,
        "is_exiting": False,
        "is_last": False,
        "column": None,
        "scale": 1.0,
        "blur": 0.0,
    }
    desc.update(fields)
    return desc


def build_text_descriptors(
    current,
    previous=None,
    drift=(DEFAULT_DRIFT["x"], DEFAULT_DRIFT["y"]),
    stagger: float = DEFAULT_STAGGER,
    entering_on_mount: bool = False,
) -> List[Dict]:
    """
    Descriptors for a text label.

    ``previous`` is the snapshot before the update, or None on first render.
    Present units come first in display order, followed by exiting units in
    their old order. Exiting units are placed by their old index and length
    but drift by the current change ratio.
    """
    drift_x, drift_y = drift
    ratio = current.change_ratio
    text = current.text
    length = len(text)
    old_keys = set(previous.keys) if previous is not None else None

    result = []
    for index, (key, char) in enumerate(zip(current.keys, text)):
        offset_x, offset_y = text_offsets(index, length, drift_x, drift_y, ratio)
        entering = entering_on_mount if old_keys is None else key not in old_keys
        result.append(
            _descriptor(
                key,
                char,
                index,
                offset_x=offset_x,
                offset_y=offset_y,
                delay=text_progress(index, length) * stagger,
                is_entering=entering,
                is_last=index == length - 1,
            )
        )

    if previous is None:
        return result

    live = set(current.keys)
    old_length = len(previous.text)
    for index, (key, char) in enumerate(zip(previous.keys, previous.text)):
        if key in live:
            continue
        offset_x, offset_y = text_offsets(index, old_length, drift_x, drift_y, ratio)
        result.append(
            _descriptor(
                key,
                char,
                index,
                offset_x=offset_x,
                offset_y=offset_y,
                delay=text_progress(index, old_length) * stagger,
                is_exiting=True,
            )
        )
    return result


def _roll(char: str, sign: int) -> float:
    # separators, currency signs and decimal points only fade
    if not ("0" <= char <= "9"):
        return 0.0
    return DIGIT_DISTANCE * sign


def build_number_descriptors(
    current,
    previous=None,
    stagger: float = DEFAULT_STAGGER,
    entering_on_mount: bool = False,
) -> List[Dict]:
    """
    Descriptors for a number label.

    Delay sweeps left to right by raw index. With direction UP new digits roll
    in from below and old digits leave upwards; DOWN mirrors both.
    """
    direction = current.direction if previous is not None else UP
    text = current.text
    length = len(text)
    old_keys = set(previous.keys) if previous is not None else None

    result = []
    for index, (key, char) in enumerate(zip(current.keys, text)):
        entering = entering_on_mount if old_keys is None else key not in old_keys
        result.append(
            _descriptor(
                key,
                char,
                index,
                offset_y=_roll(char, direction),
                delay=index * stagger,
                is_entering=entering,
                is_last=index == length - 1,
                column=length - 1 - index,
                scale=NUMBER_ENTER_SCALE,
                blur=NUMBER_ENTER_BLUR,
            )
        )

    if previous is None:
        return result

    live = set(current.keys)
    old_length = len(previous.text)
    for index, (key, char) in enumerate(zip(previous.keys, previous.text)):
        if key in live:
            continue
        result.append(
            _descriptor(
                key,
                char,
                index,
                offset_y=_roll(char, -direction),
                delay=index * stagger,
                is_exiting=True,
                column=old_length - 1 - index,
                scale=NUMBER_ENTER_SCALE,
                blur=NUMBER_ENTER_BLUR,
            )
        )
    return result
