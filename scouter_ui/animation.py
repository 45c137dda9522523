from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class SpringSpec:
    """One damped-spring leg toward `target`; unset parameters use engine defaults."""

    target: float
    damping: float | None = None
    stiffness: float | None = None


class AnimationEngine(Protocol):
    """Backend-agnostic spring animation interface.

    Requests are fire-and-forget: the engine owns timing and writes interpolated
    values back through `TrackedValue.set_value`.
    """

    def spring(self, value: "TrackedValue", steps: tuple[SpringSpec, ...]) -> None:
        ...


class ImmediateAnimationEngine:
    """Engine that settles every request at its final target without interpolation."""

    def __init__(self, *, record: bool = False) -> None:
        self._record = record
        self.requests: list[tuple[TrackedValue, tuple[SpringSpec, ...]]] = []

    def spring(self, value: TrackedValue, steps: tuple[SpringSpec, ...]) -> None:
        if self._record:
            self.requests.append((value, steps))
        if steps:
            value.set_value(steps[-1].target)


class TrackedValue:
    """Numeric value driven by the animation engine and read for style binding."""

    def __init__(self, initial: float = 1.0, engine: AnimationEngine | None = None) -> None:
        self._value = float(initial)
        self._engine: AnimationEngine = engine or ImmediateAnimationEngine()

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        self._value = float(value)

    def spring_to(self, target: float, *, damping: float | None = None, stiffness: float | None = None) -> None:
        self._engine.spring(self, (SpringSpec(target=target, damping=damping, stiffness=stiffness),))

    def spring_sequence(self, *steps: SpringSpec) -> None:
        if not steps:
            raise ValueError("spring_sequence requires at least one step")
        self._engine.spring(self, tuple(steps))

    def scale_style(self) -> dict[str, Any]:
        return {"transform": [{"scale": self._value}]}
