from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping


PressPhase = Literal["press_in", "press_out", "press", "long_press"]

_PRESS_PHASES = frozenset({"press_in", "press_out", "press", "long_press"})


@dataclass(frozen=True)
class PressEvent:
    """Minimal press event emitted by a native pressable surface."""

    phase: PressPhase
    target_id: str = ""


def parse_press_event(event_type: str, payload: object) -> PressEvent | None:
    """Parse a host `press` event into a typed control interaction event.

    Anything that is not a press, or carries an unknown phase, yields None.
    """

    if event_type != "press" or not isinstance(payload, Mapping):
        return None
    phase = payload.get("phase")
    if phase not in _PRESS_PHASES:
        return None
    return PressEvent(phase=phase, target_id=str(payload.get("target_id", "")))
