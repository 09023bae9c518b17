import logging
from typing import NamedTuple, Tuple

from core.align import UP, align_columns, detect_direction
from core.keys import assign_keys, initial_keys

logger = logging.getLogger(__name__)


class NumberState(NamedTuple):
    """Snapshot owned by one number label."""

    text: str
    keys: Tuple[int, ...]
    next_id: int
    direction: int = UP


def initial_number_state(text: str) -> NumberState:
    return NumberState(text=text, keys=initial_keys(len(text)), next_id=len(text))


def diff_number(state: NumberState, text: str) -> NumberState:
    """
    Column-diff ``text`` against the committed snapshot.

    Columns are anchored on the right so "99" -> "100" leaves the ones column
    where it was. Direction is UP when the new magnitude is not smaller.

    Every padded column that does not carry a key consumes an id, including
    the leading pad columns dropped when the number gets shorter, so
    "100" -> "99" burns one id before committing two.
    """
    if text == state.text:
        return state

    direction = detect_direction(state.text, text)
    pairs = align_columns(state.text, text)
    dropped = max(0, len(state.text) - len(text))
    keys, next_id, fresh = assign_keys(
        state.keys, pairs, len(text), state.next_id + dropped
    )

    logger.debug(
        "number diff %r -> %r: direction %+d, %d new", state.text, text, direction, fresh
    )
    return NumberState(text=text, keys=tuple(keys), next_id=next_id, direction=direction)
