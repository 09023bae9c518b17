import logging
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

from core.transition import (
    DEFAULT_STAGGER,
    build_number_descriptors,
    build_text_descriptors,
    resolve_animation,
    resolve_drift,
)
from numberviz.num_model import NumberState, diff_number, initial_number_state
from textviz.txt_model import TextState, diff_text, initial_text_state

logger = logging.getLogger(__name__)

VARIANTS = ("text", "number")


def to_text(content) -> str:
    """
    Label text for ``content``. Floats stay positional (1e16 ->
    "10000000000000000", 1e-05 -> "0.00001", 3.0 -> "3") so the digits
    roll column by column and never pick up an exponent.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, float):
        if content == 0:
            return "0"
        text = format(Decimal(repr(content)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(content)


def create_state(content, variant: str = "text"):
    if variant not in VARIANTS:
        raise ValueError(f"Unknown variant: {variant!r}")
    text = to_text(content)
    if variant == "number":
        return initial_number_state(text)
    return initial_text_state(text)


def describe(state, previous=None, drift=None, stagger=DEFAULT_STAGGER, entering_on_mount=False):
    if isinstance(state, NumberState):
        return build_number_descriptors(
            state, previous, stagger=stagger, entering_on_mount=entering_on_mount
        )
    return build_text_descriptors(
        state,
        previous,
        drift=resolve_drift(drift),
        stagger=stagger,
        entering_on_mount=entering_on_mount,
    )


def update(state, content, drift=None, stagger=DEFAULT_STAGGER) -> Tuple[object, List[Dict]]:
    """
    Diff ``content`` against ``state``.

    Returns the replacement state and the descriptors for this change. An
    unchanged text returns ``state`` itself and no descriptors.
    """
    text = to_text(content)
    if isinstance(state, NumberState):
        new_state = diff_number(state, text)
    elif isinstance(state, TextState):
        new_state = diff_text(state, text)
    else:
        raise TypeError(f"Unsupported state: {type(state).__name__}")

    if new_state is state:
        return state, []
    return new_state, describe(new_state, state, drift=drift, stagger=stagger)


class Calligraph:
    """
    One animated label.

    Owns its snapshot and id counter, so separate instances never share keys.
    ``render()`` gives the mount-time descriptors, ``set_content()`` the
    descriptors for each later change.
    """

    def __init__(
        self,
        content=None,
        variant: str = "text",
        animation: Optional[str] = None,
        drift: Optional[Dict] = None,
        stagger: float = DEFAULT_STAGGER,
        initial: bool = False,
        on_complete: Optional[Callable[[], None]] = None,
        **attributes,
    ):
        self._state = create_state(content, variant)
        self.variant = variant
        self.transition = resolve_animation(animation, variant)
        if drift and variant == "number":
            logger.debug("drift is ignored for number labels")
        self.drift = drift
        self.stagger = float(stagger)
        self.animate_initial = bool(initial)
        self.on_complete = on_complete
        self.attributes = attributes
        self._mounted = False

    @property
    def state(self):
        return self._state

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def label(self) -> str:
        """Accessible name: the whole string, since glyphs are rendered one by one."""
        return self._state.text

    @property
    def keys(self):
        return self._state.keys

    def set_animation(self, name: Optional[str]):
        self.transition = resolve_animation(name, self.variant)

    def render(self) -> List[Dict]:
        entering = self.animate_initial and not self._mounted
        self._mounted = True
        return describe(
            self._state,
            drift=self.drift,
            stagger=self.stagger,
            entering_on_mount=entering,
        )

    def set_content(self, content) -> List[Dict]:
        self._mounted = True
        self._state, descriptors = update(
            self._state, content, drift=self.drift, stagger=self.stagger
        )
        return descriptors

    def notify_complete(self, key: int):
        """
        Called by the view when the last unit finishes animating.

        Completions from earlier updates can arrive late or interleaved with
        newer ones; they still fire ``on_complete``.
        """
        keys = self._state.keys
        if not keys or keys[-1] != key:
            logger.debug("completion for stale key %s", key)
        if self.on_complete:
            self.on_complete()
