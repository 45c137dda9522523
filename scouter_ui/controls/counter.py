from __future__ import annotations

from typing import Any, Callable

from ..layout.sequence import Axis, StyledElement
from ..state.deferred import DeferredState
from .button import Button
from .context import WidgetContext
from .stack import Stack


class Counter:
    """Increment/decrement control; `on_change` sees the committed value."""

    def __init__(
        self,
        ctx: WidgetContext,
        *,
        on_change: Callable[[int], None] | None = None,
        color: str | None = None,
        initial_value: int = 0,
        direction: Axis = "row",
        gap: str = "sm",
    ) -> None:
        self.ctx = ctx
        self.on_change = on_change
        self._value = DeferredState(initial_value, ctx.scheduler)
        button_color = color or "blue.500"
        self.decrement_button = Button(ctx, color=button_color, on_press=self.decrement)
        self.increment_button = Button(ctx, color=button_color, on_press=self.increment)
        self.stack = Stack(direction=direction, gap=gap)

    def get_value(self) -> int:
        return self._value.current

    def increment(self) -> None:
        self._value.set(lambda prev: prev + 1, self._notify)

    def decrement(self) -> None:
        self._value.set(lambda prev: prev - 1, self._notify)

    def unmount(self) -> None:
        self._value.unmount()

    def _notify(self, value: int) -> None:
        if self.on_change is not None:
            self.on_change(value)

    def icon_color(self) -> str:
        return self.ctx.resolve("white.50")

    def layout(self) -> list[StyledElement[Any]]:
        half = {"width": "40%"}
        return self.stack.layout(
            (
                StyledElement(self.decrement_button, (half,)),
                StyledElement(self.get_value()),
                StyledElement(self.increment_button, (half,)),
            )
        )
