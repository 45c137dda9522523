from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Literal, Sequence, TypeVar

from ..layout.sequence import StyledElement, apply_spacing, merge_style
from ..style.dictionary import size_px

T = TypeVar("T")

DropdownState = Literal["closed", "open"]
IconPosition = Literal["left", "right"]

DEFAULT_PLACEHOLDER = "Select an option"
DROPDOWN_ICON = "▼"
SELECTED_ROW_STYLE = {"backgroundColor": "#e6f0ff"}


@dataclass(frozen=True)
class DropdownRow(Generic[T]):
    item: T
    index: int
    selected: bool


class Dropdown(Generic[T]):
    """Closed/open selection list over `data`.

    `selected_index` survives open/close cycles. Selecting closes the list and
    calls `on_select(item, index)` once; dismissing never touches the selection.
    While `disabled`, open requests are ignored.
    """

    def __init__(
        self,
        data: Sequence[T],
        on_select: Callable[[T, int], None],
        *,
        placeholder: str = DEFAULT_PLACEHOLDER,
        disabled: bool = False,
        icon_position: IconPosition = "right",
        row_gap: str = "none",
        format_item: Callable[[T], str] = str,
    ) -> None:
        if icon_position not in ("left", "right"):
            raise ValueError(f"icon_position must be `left` or `right`, got `{icon_position}`")
        self.data: tuple[T, ...] = tuple(data)
        self.on_select = on_select
        self.placeholder = placeholder
        self.disabled = disabled
        self.icon_position = icon_position
        self.row_gap_px = size_px(row_gap)
        self.format_item = format_item
        self.state: DropdownState = "closed"
        self.selected_index: int | None = None

    @property
    def is_open(self) -> bool:
        return self.state == "open"

    @property
    def selected_item(self) -> T | None:
        if self.selected_index is None:
            return None
        return self.data[self.selected_index]

    def request_open(self) -> bool:
        if self.disabled:
            return False
        self.state = "open"
        return True

    def dismiss(self) -> None:
        self.state = "closed"

    def select(self, item: T, index: int) -> bool:
        if self.state != "open":
            return False
        if not 0 <= index < len(self.data):
            raise IndexError(f"selection index {index} out of range for {len(self.data)} items")
        self.selected_index = index
        self.state = "closed"
        self.on_select(item, index)
        return True

    def trigger_label(self) -> str:
        if self.selected_index is None:
            return self.placeholder
        return self.format_item(self.data[self.selected_index])

    def trigger_parts(self) -> tuple[str, ...]:
        if self.icon_position == "left":
            return (DROPDOWN_ICON, self.trigger_label())
        return (self.trigger_label(), DROPDOWN_ICON)

    def trigger_style(self) -> dict[str, Any]:
        return {"opacity": 0.5} if self.disabled else {}

    def rows(self) -> list[StyledElement[DropdownRow[T]]]:
        spaced = apply_spacing(
            (
                DropdownRow(item=item, index=index, selected=index == self.selected_index)
                for index, item in enumerate(self.data)
            ),
            "column",
            self.row_gap_px,
        )
        return [
            StyledElement(row.element, merge_style(row.style, SELECTED_ROW_STYLE)) if row.element.selected else row
            for row in spaced
        ]
