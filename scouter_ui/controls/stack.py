from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ..layout.sequence import Axis, Style, StyledElement, apply_spacing, merge_style
from ..style.dictionary import size_px


@dataclass
class Stack:
    """Lays children out along one axis with a uniform leading gap."""

    direction: Axis = "row"
    gap: str = "sm"
    style: Style | None = None

    def __post_init__(self) -> None:
        if self.direction not in ("row", "column"):
            raise ValueError(f"Stack direction must be `row` or `column`, got `{self.direction}`")
        size_px(self.gap)

    @property
    def gap_px(self) -> float:
        return size_px(self.gap)

    def layout(self, children: Iterable[object | None]) -> list[StyledElement[Any]]:
        return apply_spacing(children, self.direction, self.gap_px)

    def container_style(self) -> tuple[Style, ...]:
        base = {
            "alignItems": "center",
            "display": "flex",
            "flexDirection": self.direction,
            "justifyContent": "center",
        }
        if self.style is None:
            return (base,)
        return merge_style(base, self.style)
