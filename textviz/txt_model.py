import logging
from typing import NamedTuple, Tuple

from core.align import compute_lcs
from core.keys import assign_keys, initial_keys

logger = logging.getLogger(__name__)


class TextState(NamedTuple):
    """Snapshot owned by one text label. Every change produces a new snapshot."""

    text: str
    keys: Tuple[int, ...]
    next_id: int
    change_ratio: float = 0.0


def initial_text_state(text: str) -> TextState:
    return TextState(text=text, keys=initial_keys(len(text)), next_id=len(text))


def diff_text(state: TextState, text: str) -> TextState:
    """
    LCS-diff ``text`` against the committed snapshot.

    Characters on the common subsequence keep their keys, the rest get fresh
    ones. ``change_ratio`` is the share of fresh keys (1.0 for empty text).
    Resubmitting the same text returns ``state`` itself.
    """
    if text == state.text:
        return state

    pairs = compute_lcs(state.text, text)
    keys, next_id, fresh = assign_keys(state.keys, pairs, len(text), state.next_id)
    change_ratio = fresh / len(text) if text else 1.0

    logger.debug(
        "text diff %r -> %r: %d kept, %d new", state.text, text, len(pairs), fresh
    )
    return TextState(
        text=text, keys=tuple(keys), next_id=next_id, change_ratio=change_ratio
    )
