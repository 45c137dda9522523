from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from ..animation import TrackedValue
from ..layout.sequence import Style
from .context import WidgetContext
from .interaction import PressEvent


ButtonState = Literal["idle", "pressed", "disabled"]
ButtonVariant = Literal["solid", "outline"]

PRESS_SCALE = 0.9
PRESS_STIFFNESS = 200.0


@dataclass(frozen=True)
class ButtonColors:
    background: str
    border: str
    label: str


@dataclass
class Button:
    """Pressable button model: variant colors plus a spring-scaled press state."""

    ctx: WidgetContext
    color: str = "blue.500"
    variant: ButtonVariant = "solid"
    disabled: bool = False
    label_color: str | None = None
    radius: float | None = None
    on_press: Callable[[], None] | None = None
    state: ButtonState = field(default="idle", init=False)
    scale: TrackedValue = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.variant not in ("solid", "outline"):
            raise ValueError(f"Unknown button variant: {self.variant}")
        self.scale = TrackedValue(1.0, self.ctx.animation)
        self._sync_state()

    def set_disabled(self, disabled: bool) -> ButtonState:
        self.disabled = disabled
        self._sync_state()
        return self.state

    def handle(self, press: PressEvent) -> ButtonState:
        if self.disabled:
            self.state = "disabled"
            return self.state
        if press.phase == "press_in":
            self.state = "pressed"
            self.scale.spring_to(PRESS_SCALE, stiffness=PRESS_STIFFNESS)
            return self.state
        if press.phase == "press_out":
            self.state = "idle"
            self.scale.spring_to(1.0, stiffness=PRESS_STIFFNESS)
            return self.state
        if press.phase == "press" and self.on_press is not None:
            self.on_press()
        return self.state

    def colors(self) -> ButtonColors:
        resolved = self.ctx.resolve(self.color)
        if self.variant == "solid":
            background = "#ccc" if self.disabled else resolved
            border = "transparent"
            label_token: str | None = "white.50"
        else:
            background = "transparent"
            border = "#aaa" if self.disabled else resolved
            label_token = "gray.200" if self.disabled else self.label_color
        return ButtonColors(background=background, border=border, label=self.ctx.resolve(label_token))

    def style(self) -> tuple[Style, ...]:
        colors = self.colors()
        base: dict[str, Any] = {
            "alignItems": "center",
            "backgroundColor": colors.background,
            "borderColor": colors.border,
            "borderWidth": 2,
            "justifyContent": "center",
            "paddingHorizontal": 16,
            "paddingVertical": 12,
            "width": "100%",
        }
        if self.radius is not None:
            base["borderRadius"] = self.radius
        return (base, self.scale.scale_style())

    def _sync_state(self) -> None:
        self.state = "disabled" if self.disabled else "idle"
