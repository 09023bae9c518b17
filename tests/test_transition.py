"""Tests for render descriptor construction."""

import pytest

from core.transition import (
    DIGIT_DISTANCE,
    build_number_descriptors,
    build_text_descriptors,
    resolve_animation,
    resolve_drift,
    text_offsets,
    text_progress,
)
from numberviz.num_model import diff_number, initial_number_state
from textviz.txt_model import diff_text, initial_text_state


def _by_key(descriptors):
    return {d["key"]: d for d in descriptors}


def test_progress_endpoints():
    assert text_progress(0, 1) == 0.0
    assert text_progress(0, 0) == 0.0
    assert text_progress(0, 5) == 0.0
    assert text_progress(4, 5) == 1.0
    assert text_progress(2, 5) == 0.5


def test_offsets_are_symmetric_around_center():
    left = text_offsets(0, 5, 15.0, 4.0, 1.0)
    right = text_offsets(4, 5, 15.0, 4.0, 1.0)
    assert left == (-7.5, -2.0)
    assert right == (7.5, 2.0)
    assert text_offsets(2, 5, 15.0, 4.0, 1.0) == (0.0, 0.0)


def test_offsets_scale_with_change_ratio():
    assert text_offsets(0, 3, 15.0, 0.0, 0.0) == (0.0, 0.0)
    assert text_offsets(0, 3, 15.0, 0.0, 0.5) == (-3.75, 0.0)


def test_resolve_drift_fills_defaults():
    assert resolve_drift(None) == (15.0, 0.0)
    assert resolve_drift({"y": 4}) == (15.0, 4.0)
    assert resolve_drift({"x": 0}) == (0.0, 0.0)


def test_resolve_animation_defaults_per_variant():
    assert resolve_animation(None, "text")["name"] == "default"
    assert resolve_animation(None, "number")["name"] == "snappy"
    assert resolve_animation("bouncy", "text")["bounce"] == 0.3
    with pytest.raises(ValueError):
        resolve_animation("wobbly", "text")


def test_text_mount_descriptors():
    state = initial_text_state("abc")
    quiet = build_text_descriptors(state)
    assert [d["content"] for d in quiet] == ["a", "b", "c"]
    assert not any(d["is_entering"] or d["is_exiting"] for d in quiet)
    assert [d["is_last"] for d in quiet] == [False, False, True]

    loud = build_text_descriptors(state, entering_on_mount=True)
    assert all(d["is_entering"] for d in loud)


def test_text_cart_to_chart_descriptors():
    previous = initial_text_state("cart")
    current = diff_text(previous, "chart")
    descriptors = build_text_descriptors(current, previous, drift=(15.0, 0.0), stagger=0.02)

    assert len(descriptors) == 5
    entering = [d for d in descriptors if d["is_entering"]]
    assert [d["content"] for d in entering] == ["h"]
    h = entering[0]
    assert h["key"] == 4
    assert h["offset_x"] == pytest.approx(-0.25 * 15 * 0.2)
    assert h["offset_y"] == 0.0
    assert h["delay"] == pytest.approx(0.25 * 0.02)
    assert not any(d["is_exiting"] for d in descriptors)
    assert descriptors[-1]["content"] == "t" and descriptors[-1]["is_last"]


def test_text_exits_use_old_positions():
    previous = initial_text_state("abc")
    current = diff_text(previous, "xyz")
    descriptors = build_text_descriptors(current, previous, drift=(15.0, 0.0), stagger=0.1)

    exiting = [d for d in descriptors if d["is_exiting"]]
    assert [d["content"] for d in exiting] == ["a", "b", "c"]
    assert [d["offset_x"] for d in exiting] == [-7.5, 0.0, 7.5]
    assert [d["delay"] for d in exiting] == pytest.approx([0.0, 0.05, 0.1])
    assert not any(d["is_last"] for d in exiting)
    assert descriptors[: len("xyz")] == [d for d in descriptors if not d["is_exiting"]]


def test_number_99_to_100_rolls_up():
    previous = initial_number_state("99")
    current = diff_number(previous, "100")
    descriptors = build_number_descriptors(current, previous, stagger=0.02)
    present = [d for d in descriptors if not d["is_exiting"]]
    exiting = [d for d in descriptors if d["is_exiting"]]

    assert [d["content"] for d in present] == ["1", "0", "0"]
    assert all(d["is_entering"] for d in present)
    assert [d["offset_y"] for d in present] == [DIGIT_DISTANCE] * 3
    assert [d["delay"] for d in present] == pytest.approx([0.0, 0.02, 0.04])
    assert [d["column"] for d in present] == [2, 1, 0]

    assert [d["key"] for d in exiting] == [0, 1]
    assert [d["offset_y"] for d in exiting] == [-DIGIT_DISTANCE] * 2
    assert [d["column"] for d in exiting] == [1, 0]
    assert all(d["offset_x"] == 0.0 for d in descriptors)


def test_number_rolling_down_mirrors_offsets():
    previous = initial_number_state("100")
    current = diff_number(previous, "99")
    descriptors = build_number_descriptors(current, previous)
    for d in descriptors:
        if d["is_entering"]:
            assert d["offset_y"] == -DIGIT_DISTANCE
        if d["is_exiting"]:
            assert d["offset_y"] == DIGIT_DISTANCE


def test_number_separators_only_fade():
    previous = initial_number_state("$9")
    current = diff_number(previous, "$1,000")
    by_content = {}
    for d in build_number_descriptors(current, previous):
        by_content.setdefault(d["content"], []).append(d)
    assert all(d["offset_y"] == 0.0 for d in by_content["$"])
    assert all(d["offset_y"] == 0.0 for d in by_content[","])
    assert all(abs(d["offset_y"]) == DIGIT_DISTANCE for d in by_content["0"])


def test_number_persisted_columns_do_not_enter():
    previous = initial_number_state("1234")
    current = diff_number(previous, "1284")
    descriptors = _by_key(build_number_descriptors(current, previous))
    assert [k for k, d in descriptors.items() if d["is_entering"]] == [4]
    assert [k for k, d in descriptors.items() if d["is_exiting"]] == [2]
    assert descriptors[4]["delay"] == pytest.approx(2 * 0.02)
