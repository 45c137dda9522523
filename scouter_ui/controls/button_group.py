from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ..layout.sequence import DEFAULT_GROUP_RADIUS, Axis, Style, StyledElement, apply_corner_rounding, merge_style
from .stack import Stack


@dataclass
class ButtonGroup:
    """Joins buttons into one rounded strip.

    Row groups round the outer corners of the first and last button. Column
    groups keep every child square unless `column_radius` is set; the container
    still clips to `container_radius` either way.
    """

    direction: Axis = "row"
    radius: float = DEFAULT_GROUP_RADIUS
    container_radius: float = DEFAULT_GROUP_RADIUS
    column_radius: float = 0.0
    style: Style | None = None

    def _stack(self) -> Stack:
        clip = {"overflow": "hidden", "borderRadius": self.container_radius}
        return Stack(direction=self.direction, gap="none", style=clip)

    def layout(self, children: Iterable[object | None]) -> list[StyledElement[Any]]:
        rounded = apply_corner_rounding(
            children,
            self.direction,
            radius=self.radius,
            column_radius=self.column_radius,
        )
        return self._stack().layout(rounded)

    def container_style(self) -> tuple[Style, ...]:
        styles = self._stack().container_style()
        if self.style is None:
            return styles
        return merge_style(styles, self.style)
