from __future__ import annotations

from typing import Any

from ..layout.sequence import Style, flatten_style
from ..style.dictionary import font_weight, size_px
from .context import WidgetContext

DEFAULT_HEADING_COLOR = "black.50"


class Heading:
    """Text run sized and weighted from the style dictionary, colored by theme token."""

    def __init__(
        self,
        ctx: WidgetContext,
        text: str,
        *,
        size: str = "md",
        weight: str = "normal",
        color: str | None = None,
        style: Style | None = None,
    ) -> None:
        self.ctx = ctx
        self.text = text
        self.size = size
        self.weight = weight
        self.color = color or DEFAULT_HEADING_COLOR
        self.style = style
        self.font_size = size_px(size)
        self.font_weight = font_weight(weight)

    def text_style(self) -> dict[str, Any]:
        base = {
            "color": self.ctx.resolve(self.color),
            "fontSize": self.font_size,
            "fontWeight": self.font_weight,
        }
        return flatten_style((base, self.style))
