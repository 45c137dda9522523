from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from ..layout.sequence import Style, flatten_style
from ..state.deferred import DeferredState
from ..style.dictionary import size_px
from .context import WidgetContext
from .heading import Heading
from .stack import Stack

REQUIRED_MARK_STYLE: Style = {"color": "#e53e3e", "marginLeft": 2}
INPUT_SHADOW: Style = {
    "elevation": 2,
    "shadowColor": "#101e36",
    "shadowOffset": {"height": 1, "width": 0},
    "shadowOpacity": 0.08,
    "shadowRadius": 2,
}
ERROR_ICON = "dangerous"
ERROR_ICON_SIZE = 18


@dataclass(frozen=True)
class TextFieldColors:
    border: str
    active_border: str
    background: str
    text: str
    placeholder: str


@dataclass(frozen=True)
class ErrorRow:
    icon: str
    icon_size: int
    icon_color: str
    message: Heading


class TextField:
    """Labelled text input with helper and error rows.

    The value is owned by the host: `change_text` reports edits through
    `on_change_text` and records the last value. Focus and password visibility
    are local state, committed on the next scheduler flush.

    Border color precedence: focused uses the active border; otherwise an error
    wins over disabled, which wins over the configured border.
    """

    def __init__(
        self,
        ctx: WidgetContext,
        *,
        on_change_text: Callable[[str], None] | None = None,
        value: str = "",
        label: str | None = None,
        label_size: str = "md",
        required: bool = False,
        placeholder: str = "",
        helper: str | None = None,
        error: str | None = None,
        disabled: bool = False,
        is_password: bool = False,
        border_color: str | None = None,
        active_border_color: str | None = None,
        background_color: str | None = None,
        text_color: str | None = None,
        placeholder_color: str | None = None,
        helper_size: str = "lg",
        helper_color: str = "white.50",
        helper_weight: str = "medium",
        error_size: str = "sm",
        error_weight: str = "medium",
        password_toggle_color: str = "gray.500",
        password_toggle_size: int = 12,
    ) -> None:
        size_px(label_size)
        self.ctx = ctx
        self.on_change_text = on_change_text
        self.value = value
        self.label = label
        self.label_size = label_size
        self.required = required
        self.placeholder = placeholder
        self.helper = helper
        self.error = error
        self.disabled = disabled
        self.is_password = is_password
        self.border_color = border_color
        self.active_border_color = active_border_color
        self.background_color = background_color
        self.text_color = text_color
        self.placeholder_color = placeholder_color
        self.helper_size = helper_size
        self.helper_color = helper_color
        self.helper_weight = helper_weight
        self.error_size = error_size
        self.error_weight = error_weight
        self.password_toggle_color = password_toggle_color
        self.password_toggle_size = password_toggle_size
        self._focused = DeferredState(False, ctx.scheduler)
        self._secure_entry = DeferredState(is_password, ctx.scheduler)

    @property
    def has_error(self) -> bool:
        return bool(self.error)

    @property
    def editable(self) -> bool:
        return not self.disabled

    @property
    def focused(self) -> bool:
        return self._focused.current

    @property
    def secure_entry(self) -> bool:
        return self._secure_entry.current

    def focus(self) -> None:
        self._focused.set(True)

    def blur(self) -> None:
        self._focused.set(False)

    def change_text(self, text: str) -> bool:
        if not self.editable:
            return False
        self.value = text
        if self.on_change_text is not None:
            self.on_change_text(text)
        return True

    def toggle_password_visibility(self) -> None:
        if self.is_password:
            self._secure_entry.set(lambda prev: not prev)

    def unmount(self) -> None:
        self._focused.unmount()
        self._secure_entry.unmount()

    def colors(self) -> TextFieldColors:
        theme_color = self.ctx.resolve
        border = theme_color(self.border_color, theme_color("gray.300"))
        active = theme_color(self.active_border_color, theme_color("blue.500"))
        if self.has_error:
            inactive = theme_color("red.500")
        elif self.disabled:
            inactive = theme_color("gray.200")
        else:
            inactive = border
        background = theme_color(
            self.background_color,
            theme_color("gray.100" if self.disabled else "white.50"),
        )
        if self.disabled:
            text = theme_color("gray.400")
        else:
            text = theme_color(self.text_color, theme_color("gray.900"))
        return TextFieldColors(
            border=active if self.focused else inactive,
            active_border=active,
            background=background,
            text=text,
            placeholder=theme_color(self.placeholder_color, theme_color("gray.400")),
        )

    def input_style(self) -> dict[str, Any]:
        colors = self.colors()
        base = {
            "backgroundColor": colors.background,
            "borderColor": colors.border,
            "borderRadius": 10,
            "borderWidth": 2,
            "color": colors.text,
            "fontSize": 16,
            "marginBottom": 6,
            "marginTop": 6,
            "paddingHorizontal": 16,
            "paddingVertical": 12,
            "width": "100%",
        }
        return flatten_style((INPUT_SHADOW if not self.disabled else None, base))

    def label_heading(self) -> Heading | None:
        if not self.label:
            return None
        return Heading(
            self.ctx,
            self.label,
            size=self.label_size,
            color="red.600" if self.has_error else "gray.700",
        )

    @property
    def label_text(self) -> str:
        if not self.label:
            return ""
        return f"{self.label}*" if self.required else self.label

    def helper_heading(self) -> Heading | None:
        if not self.helper:
            return None
        return Heading(
            self.ctx,
            self.helper,
            size=self.helper_size,
            weight=self.helper_weight,
            color=self.helper_color,
        )

    def error_row(self) -> ErrorRow | None:
        if not self.error:
            return None
        return ErrorRow(
            icon=ERROR_ICON,
            icon_size=ERROR_ICON_SIZE,
            icon_color=self.ctx.resolve("red.500"),
            message=Heading(self.ctx, self.error, size=self.error_size, weight=self.error_weight, color="red.500"),
        )

    def password_toggle(self) -> dict[str, Any] | None:
        if not self.is_password:
            return None
        return {
            "icon": "eye" if self.secure_entry else "eye-off",
            "color": self.ctx.resolve(self.password_toggle_color),
            "size": self.password_toggle_size,
            "style": {"position": "absolute", "right": 10},
        }

    def rows(self) -> list[object]:
        """Present parts top to bottom: label, input row, helper, error."""

        input_row = Stack(direction="row", gap="none").layout([self, self.password_toggle()])
        parts = [self.label_heading(), input_row, self.helper_heading(), self.error_row()]
        return [part for part in parts if part is not None]

    @staticmethod
    def container_style() -> dict[str, Any]:
        return {"marginBottom": 18, "width": "100%"}
