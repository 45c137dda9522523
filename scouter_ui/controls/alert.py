from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Literal

from .context import WidgetContext

LOGGER = logging.getLogger(__name__)

AlertRole = Literal["info", "success", "warning", "danger"]

ROLE_ICONS: dict[str, str] = {
    "danger": "dangerous",
    "info": "info-outline",
    "success": "check",
    "warning": "warning-amber",
}

ROLE_FAMILIES: dict[str, str] = {
    "danger": "red",
    "info": "blue",
    "success": "green",
    "warning": "yellow",
}


@dataclass(frozen=True)
class AlertColors:
    background: str
    border: str
    text: str


class Alert:
    """Self-dismissing banner.

    The host calls `tick()` once per elapsed second. After the countdown reaches
    zero, the following tick calls `on_remove` exactly once.
    """

    def __init__(
        self,
        ctx: WidgetContext,
        *,
        on_remove: Callable[[], None],
        label: str = "This is alert",
        duration_s: int = 3,
        role: str = "info",
    ) -> None:
        if duration_s < 0:
            raise ValueError("duration_s must be >= 0")
        self.ctx = ctx
        self.on_remove = on_remove
        self.label = label
        self.role = role if role in ROLE_FAMILIES else "info"
        self.time_remaining = duration_s
        self.removed = False

    @property
    def icon(self) -> str:
        return ROLE_ICONS[self.role]

    def colors(self) -> AlertColors:
        family = ROLE_FAMILIES[self.role]
        return AlertColors(
            background=self.ctx.resolve(f"{family}.100"),
            border=self.ctx.resolve(f"{family}.500"),
            text=self.ctx.resolve(f"{family}.700"),
        )

    def tick(self) -> None:
        if self.removed:
            return
        if self.time_remaining > 0:
            self.time_remaining -= 1
            return
        self.removed = True
        LOGGER.debug("alert %r expired", self.label)
        self.on_remove()
