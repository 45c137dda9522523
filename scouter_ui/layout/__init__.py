"""Positional layout overrides for sibling sequences (Stack, ButtonGroup, lists)."""

from .sequence import (
    DEFAULT_GROUP_RADIUS,
    Axis,
    CornerRadii,
    SequenceLayout,
    SequencePosition,
    StyledElement,
    apply_corner_rounding,
    apply_spacing,
    compose_sequence,
    corner_radii,
    flatten_style,
    merge_style,
    spacing_override,
)

__all__ = [
    "Axis",
    "CornerRadii",
    "DEFAULT_GROUP_RADIUS",
    "SequenceLayout",
    "SequencePosition",
    "StyledElement",
    "apply_corner_rounding",
    "apply_spacing",
    "compose_sequence",
    "corner_radii",
    "flatten_style",
    "merge_style",
    "spacing_override",
]
