from __future__ import annotations

from typing import Any, Callable

from ..animation import SpringSpec, TrackedValue
from ..state.deferred import DeferredState
from ..style.dictionary import size_px
from .context import WidgetContext

RING_BOUNCE = (SpringSpec(0.9, damping=5), SpringSpec(1.05, damping=5), SpringSpec(1.0))


class RadioButton:
    def __init__(
        self,
        ctx: WidgetContext,
        *,
        on_press: Callable[[bool], None] | None = None,
        is_checked: bool = False,
        disabled: bool = False,
        color: str = "blue.500",
        size: str = "lg",
        label: str = "radio-button-default",
    ) -> None:
        self.ctx = ctx
        self.on_press = on_press
        self.disabled = disabled
        self.color = color
        self.size_px = size_px(size)
        self.label = label
        self.outer_scale = TrackedValue(1.0, ctx.animation)
        self.inner_scale = TrackedValue(1.0, ctx.animation)
        self._checked = DeferredState(is_checked, ctx.scheduler)

    @property
    def checked(self) -> bool:
        return self._checked.current

    def press(self) -> None:
        if self.disabled:
            return
        self._checked.set(lambda prev: not prev, self._after_toggle)

    def unmount(self) -> None:
        self._checked.unmount()

    def _after_toggle(self, checked: bool) -> None:
        if self.on_press is not None:
            self.on_press(checked)
        self.outer_scale.spring_sequence(*RING_BOUNCE)
        self.inner_scale.spring_sequence(*RING_BOUNCE)

    def style(self) -> dict[str, Any]:
        color = self.ctx.resolve(self.color)
        return {
            "ring": {
                "borderColor": color,
                "borderRadius": "100%",
                "borderWidth": 2,
                "height": self.size_px,
                "width": self.size_px,
                **self.outer_scale.scale_style(),
            },
            "dot": {
                "visible": self.checked,
                "backgroundColor": color,
                "borderRadius": "100%",
                "height": "70%",
                "width": "70%",
                **self.inner_scale.scale_style(),
            },
            "aria_checked": self.checked,
        }
