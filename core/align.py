import logging
import re
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

UP = 1
DOWN = -1

# m*n above this is too slow for a per-keystroke diff; callers should keep
# labels short.
LCS_CELL_WARNING = 250_000

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def compute_lcs(old: Sequence, new: Sequence) -> List[Tuple[int, int]]:
    """
    Longest common subsequence between two unit sequences.

    Returns ``(old_index, new_index)`` pairs, increasing in both indices.
    Ties during backtracking drop a unit from ``old`` when the remaining old
    prefix is at least as long as the remaining new prefix, so for repeated
    characters the rightmost old instance is the one that survives
    (``"aa" -> "a"`` keeps old index 1).
    """
    m = len(old)
    n = len(new)
    if m * n > LCS_CELL_WARNING:
        logger.warning("LCS over %d x %d units, label is too long to diff cheaply", m, n)

    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row = dp[i]
        prev = dp[i - 1]
        for j in range(1, n + 1):
            if old[i - 1] == new[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    pairs = []
    i, j = m, n
    while i > 0 and j > 0:
        if old[i - 1] == new[j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1] or (dp[i - 1][j] == dp[i][j - 1] and i >= j):
            i -= 1
        else:
            j -= 1

    pairs.reverse()
    return pairs


def align_columns(old: Sequence, new: Sequence) -> List[Tuple[int, int]]:
    """
    Right-anchored positional alignment for numeric labels.

    Both sequences are padded on the left to the same width and compared
    column by column; a column pairs only when both sides hold a real unit and
    the units are equal. Digits that shift column are never re-matched.
    """
    old_len = len(old)
    new_len = len(new)
    max_len = max(old_len, new_len)
    old_pad = max_len - old_len
    new_pad = max_len - new_len

    pairs = []
    for col in range(max_len):
        old_index = col - old_pad
        new_index = col - new_pad
        if old_index < 0 or new_index < 0:
            continue
        if old[old_index] == new[new_index]:
            pairs.append((old_index, new_index))
    return pairs


def parse_magnitude(text: str) -> float:
    """Numeric value of a formatted label ("$1,234.50" -> 1234.5); 0 when unparsable."""
    cleaned = _NON_NUMERIC.sub("", text or "")
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    return float(match.group(0))


def detect_direction(old_text: str, new_text: str) -> int:
    return UP if parse_magnitude(new_text) >= parse_magnitude(old_text) else DOWN
