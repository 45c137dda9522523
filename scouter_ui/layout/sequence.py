from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Literal, Mapping, Sequence, TypeVar

Axis = Literal["row", "column"]
Style = Mapping[str, Any]

E = TypeVar("E")

DEFAULT_GROUP_RADIUS = 15.0


@dataclass(frozen=True)
class StyledElement(Generic[E]):
    """An opaque rendered node paired with its ordered style list.

    Later entries in `style` take precedence when flattened.
    """

    element: E
    style: tuple[Style, ...] = ()


@dataclass(frozen=True)
class SequencePosition:
    index: int
    length: int

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError("sequence length must be >= 1")
        if not 0 <= self.index < self.length:
            raise ValueError(f"index {self.index} out of range for length {self.length}")

    @property
    def is_first(self) -> bool:
        return self.index == 0

    @property
    def is_last(self) -> bool:
        return self.index == self.length - 1

    @property
    def is_interior(self) -> bool:
        return not self.is_first and not self.is_last


@dataclass(frozen=True)
class CornerRadii:
    top_left: float = 0.0
    top_right: float = 0.0
    bottom_left: float = 0.0
    bottom_right: float = 0.0

    def as_style(self) -> dict[str, float]:
        return {
            "borderBottomLeftRadius": self.bottom_left,
            "borderBottomRightRadius": self.bottom_right,
            "borderTopLeftRadius": self.top_left,
            "borderTopRightRadius": self.top_right,
        }


def _require_axis(axis: str) -> None:
    if axis not in ("row", "column"):
        raise ValueError(f"axis must be `row` or `column`, got `{axis}`")


def spacing_override(index: int, length: int, axis: Axis, spacing_unit: float) -> dict[str, float]:
    """Leading-edge margin for one sibling; the first sibling gets none."""

    _require_axis(axis)
    if spacing_unit < 0:
        raise ValueError("spacing_unit must be >= 0")
    position = SequencePosition(index, length)
    if position.is_first:
        return {}
    key = "marginLeft" if axis == "row" else "marginTop"
    return {key: float(spacing_unit)}


def corner_radii(
    index: int,
    length: int,
    axis: Axis,
    *,
    radius: float = DEFAULT_GROUP_RADIUS,
    column_radius: float = 0.0,
) -> CornerRadii:
    """Edge-specific corner radii for one member of a grouped sequence.

    Row: the first member rounds its left corners, the last its right corners.
    Column: the first member rounds its top corners, the last its bottom corners,
    using `column_radius`, which defaults to 0 so column groups render square.
    A single member is both first and last and gets all four corners.
    """

    _require_axis(axis)
    position = SequencePosition(index, length)
    first = position.is_first
    last = position.is_last
    if axis == "row":
        return CornerRadii(
            top_left=radius if first else 0.0,
            bottom_left=radius if first else 0.0,
            top_right=radius if last else 0.0,
            bottom_right=radius if last else 0.0,
        )
    return CornerRadii(
        top_left=column_radius if first else 0.0,
        top_right=column_radius if first else 0.0,
        bottom_left=column_radius if last else 0.0,
        bottom_right=column_radius if last else 0.0,
    )


def merge_style(existing: Style | Sequence[Style] | None, override: Style) -> tuple[Style, ...]:
    """Append `override` after the caller's style without discarding it."""

    if existing is None:
        base: tuple[Style, ...] = ()
    elif isinstance(existing, Mapping):
        base = (existing,) if existing else ()
    else:
        base = tuple(s for s in existing if s)
    return base + (override,)


def flatten_style(styles: Iterable[Style | None]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for style in styles:
        if style:
            out.update(style)
    return out


def _coerce(child: object) -> StyledElement[Any]:
    if isinstance(child, StyledElement):
        return child
    return StyledElement(element=child)


def compose_sequence(
    children: Iterable[object | None],
    override_for: Callable[[int, int], Style],
) -> list[StyledElement[Any]]:
    """Filter out `None` children, then merge a per-position override into each.

    Plain objects are treated as elements with no style yet.
    """

    present = [_coerce(child) for child in children if child is not None]
    length = len(present)
    return [
        StyledElement(element=child.element, style=merge_style(child.style, override_for(index, length)))
        for index, child in enumerate(present)
    ]


def apply_spacing(
    children: Iterable[object | None],
    axis: Axis,
    spacing_unit: float,
) -> list[StyledElement[Any]]:
    return compose_sequence(
        children,
        lambda index, length: spacing_override(index, length, axis, spacing_unit),
    )


def apply_corner_rounding(
    children: Iterable[object | None],
    axis: Axis,
    *,
    radius: float = DEFAULT_GROUP_RADIUS,
    column_radius: float = 0.0,
) -> list[StyledElement[Any]]:
    return compose_sequence(
        children,
        lambda index, length: corner_radii(
            index, length, axis, radius=radius, column_radius=column_radius
        ).as_style(),
    )


@dataclass(frozen=True)
class SequenceLayout:
    """Reusable spacing and rounding policy for a sibling sequence.

    Either half is skipped when unset (`spacing_unit` or `radius` is None).
    """

    axis: Axis = "row"
    spacing_unit: float | None = None
    radius: float | None = None
    column_radius: float = 0.0

    def __post_init__(self) -> None:
        _require_axis(self.axis)
        if self.spacing_unit is not None and self.spacing_unit < 0:
            raise ValueError("spacing_unit must be >= 0")

    def override_for(self, index: int, length: int) -> dict[str, Any]:
        style: dict[str, Any] = {}
        if self.spacing_unit is not None:
            style.update(spacing_override(index, length, self.axis, self.spacing_unit))
        if self.radius is not None:
            style.update(
                corner_radii(
                    index, length, self.axis, radius=self.radius, column_radius=self.column_radius
                ).as_style()
            )
        return style

    def apply(self, children: Iterable[object | None]) -> list[StyledElement[Any]]:
        return compose_sequence(children, self.override_for)
