"""Tests for the Calligraph entry point and the pure update function."""

import pytest

from core.align import UP
from core.calligraph import Calligraph, create_state, to_text, update


def test_to_text():
    assert to_text(None) == ""
    assert to_text(42) == "42"
    assert to_text(3.5) == "3.5"
    assert to_text("abc") == "abc"


@pytest.mark.parametrize(
    "value,expected",
    [
        (1e16, "10000000000000000"),
        (1e-05, "0.00001"),
        (3.0, "3"),
        (-0.0, "0"),
        (1234.5, "1234.5"),
        (-2.25e20, "-225000000000000000000"),
    ],
)
def test_to_text_keeps_floats_positional(value, expected):
    assert to_text(value) == expected


def test_large_float_rolls_up():
    label = Calligraph(5e15, variant="number")
    label.set_content(1e16)
    assert label.text == "10000000000000000"
    assert label.state.direction == UP


def test_create_state_rejects_unknown_variant():
    with pytest.raises(ValueError):
        create_state("abc", "marquee")


def test_update_is_pure():
    state = create_state("cart")
    new_state, descriptors = update(state, "chart")
    assert state.text == "cart"
    assert state.keys == (0, 1, 2, 3)
    assert new_state.keys == (0, 4, 1, 2, 3)
    assert len(descriptors) == 5


def test_update_unchanged_text_returns_same_state():
    state = create_state("5", "number")
    new_state, descriptors = update(state, 5)
    assert new_state is state
    assert descriptors == []


def test_update_rejects_foreign_state():
    with pytest.raises(TypeError):
        update(("abc", ()), "abd")


def test_calligraph_defaults():
    label = Calligraph("Craft")
    assert label.variant == "text"
    assert label.transition["name"] == "default"
    assert label.label == "Craft"
    assert label.keys == (0, 1, 2, 3, 4)

    number = Calligraph(99, variant="number")
    assert number.transition["name"] == "snappy"
    assert number.text == "99"


def test_calligraph_rejects_unknown_preset():
    with pytest.raises(ValueError):
        Calligraph("x", animation="wobbly")


def test_calligraph_initial_flag_only_affects_first_render():
    label = Calligraph("abc", initial=True)
    assert all(d["is_entering"] for d in label.render())
    assert not any(d["is_entering"] for d in label.render())

    quiet = Calligraph("abc")
    assert not any(d["is_entering"] for d in quiet.render())


def test_calligraph_set_content_sequence():
    label = Calligraph("", variant="text")
    descriptors = label.set_content("ab")
    assert [d["key"] for d in descriptors] == [0, 1]
    assert all(d["is_entering"] for d in descriptors)
    assert label.state.change_ratio == 1.0

    assert label.set_content("ab") == []
    assert label.keys == (0, 1)


def test_calligraph_number_scenario():
    label = Calligraph(99, variant="number")
    descriptors = label.set_content(100)
    assert label.state.direction == UP
    assert sum(1 for d in descriptors if d["is_entering"]) == 3
    assert sum(1 for d in descriptors if d["is_exiting"]) == 2


def test_calligraph_instances_do_not_share_counters():
    first = Calligraph("a")
    second = Calligraph("a")
    first.set_content("b")
    first.set_content("c")
    second.set_content("b")
    assert first.state.next_id == 3
    assert second.state.next_id == 2
    assert second.keys == (1,)


def test_calligraph_uses_drift_and_stagger():
    label = Calligraph("abc", drift={"x": 30}, stagger=0.5)
    descriptors = label.set_content("xyz")
    first = descriptors[0]
    assert first["offset_x"] == pytest.approx(-15.0)
    assert descriptors[2]["delay"] == pytest.approx(0.5)


def test_set_animation():
    label = Calligraph("abc")
    label.set_animation("smooth")
    assert label.transition["name"] == "smooth"
    label.set_animation(None)
    assert label.transition["name"] == "default"


def test_completion_tolerates_stale_and_repeated_notifications():
    calls = []
    label = Calligraph("abc", on_complete=lambda: calls.append(label.text))
    old_last = label.keys[-1]
    label.set_content("abd")
    new_last = label.keys[-1]

    label.notify_complete(new_last)
    label.notify_complete(old_last)
    label.notify_complete(new_last)
    assert calls == ["abd", "abd", "abd"]


def test_completion_without_callback():
    label = Calligraph("")
    label.notify_complete(0)


def test_pass_through_attributes():
    label = Calligraph("abc", font_size=48, color="#ff0000")
    assert label.attributes == {"font_size": 48, "color": "#ff0000"}
