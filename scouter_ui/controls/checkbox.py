from __future__ import annotations

from typing import Any, Callable, Literal

from ..animation import SpringSpec, TrackedValue
from ..state.deferred import DeferredState
from ..style.dictionary import size_px
from .context import WidgetContext
from .heading import Heading

CheckboxVariant = Literal["flat", "outline"]

ICON_POP = (SpringSpec(1.2, damping=5), SpringSpec(1.0))
BOX_BOUNCE = (SpringSpec(0.9, damping=5), SpringSpec(1.05, damping=5), SpringSpec(1.0))
LABEL_STYLE = {"marginLeft": 10}


class Checkbox:
    """Toggle whose `on_press` observes the committed checked value.

    With `use_built_in_state=False` the press is a no-op; the host drives
    `is_checked` itself.
    """

    def __init__(
        self,
        ctx: WidgetContext,
        *,
        on_press: Callable[[bool], None] | None = None,
        is_checked: bool = False,
        use_built_in_state: bool = True,
        disabled: bool = False,
        variant: CheckboxVariant = "flat",
        color: str = "blue.500",
        size: str = "xl",
        rounded: float = 5.0,
        label: str = "checkbox-default",
        checkbox_label: str | None = None,
        checkbox_label_color: str | None = None,
        checkbox_label_weight: str = "normal",
        checkbox_label_size: str = "md",
    ) -> None:
        if variant not in ("flat", "outline"):
            raise ValueError(f"Unknown checkbox variant: {variant}")
        self.ctx = ctx
        self.on_press = on_press
        self.use_built_in_state = use_built_in_state
        self.disabled = disabled
        self.variant = variant
        self.color = color
        self.size_px = size_px(size)
        self.rounded = rounded
        self.label = label
        self.label_heading = (
            Heading(
                ctx,
                checkbox_label,
                size=checkbox_label_size,
                weight=checkbox_label_weight,
                color=checkbox_label_color,
                style=LABEL_STYLE,
            )
            if checkbox_label
            else None
        )
        self.icon_scale = TrackedValue(1.0, ctx.animation)
        self.box_scale = TrackedValue(1.0, ctx.animation)
        self._checked = DeferredState(is_checked, ctx.scheduler)

    @property
    def checked(self) -> bool:
        return self._checked.current

    def press(self) -> None:
        if self.disabled or not self.use_built_in_state:
            return
        self._checked.set(lambda prev: not prev, self._after_toggle)

    def unmount(self) -> None:
        self._checked.unmount()

    def _after_toggle(self, checked: bool) -> None:
        if self.on_press is not None:
            self.on_press(checked)
        self.icon_scale.spring_sequence(*ICON_POP)
        self.box_scale.spring_sequence(*BOX_BOUNCE)

    def style(self) -> dict[str, Any]:
        color = self.ctx.resolve(self.color)
        checked = self.checked
        filled = self.variant == "flat" and checked
        return {
            "box": {
                "alignItems": "center",
                "backgroundColor": color if filled else "transparent",
                "borderColor": color,
                "borderRadius": self.rounded,
                "borderWidth": 2,
                "height": self.size_px,
                "justifyContent": "center",
                "width": self.size_px,
                **self.box_scale.scale_style(),
            },
            "icon": {
                "visible": checked,
                "color": "#fff" if self.variant == "flat" else color,
                "size": self.size_px / 2,
                **self.icon_scale.scale_style(),
            },
            "aria_checked": checked,
            "label": self.label_heading.text_style() if self.label_heading is not None else None,
        }
