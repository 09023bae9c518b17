from typing import List, Sequence, Tuple


def initial_keys(length: int) -> Tuple[int, ...]:
    return tuple(range(length))


def assign_keys(
    old_keys: Sequence[int],
    pairs: Sequence[Tuple[int, int]],
    length: int,
    next_id: int,
) -> Tuple[List[int], int, int]:
    """
    Carry keys across an alignment and allocate ids for everything else.

    ``pairs`` come from either aligner. Each matched new position inherits the
    old unit's key; unmatched positions get fresh ids from ``next_id`` in
    left-to-right order. Identity follows the alignment, not the character,
    so an equal character landing in a new slot still gets a new key.

    Returns ``(keys, next_id, fresh_count)``.
    """
    keys: List = [None] * length
    for old_index, new_index in pairs:
        keys[new_index] = old_keys[old_index]

    fresh = 0
    for index, key in enumerate(keys):
        if key is None:
            keys[index] = next_id
            next_id += 1
            fresh += 1
    return keys, next_id, fresh
