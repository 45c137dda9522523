"""Presentation-state core and widget models for Scouter UI."""

from .animation import AnimationEngine, ImmediateAnimationEngine, SpringSpec, TrackedValue
from .config import UIConfig, ambient_config, load_config
from .controls import (
    Alert,
    Button,
    ButtonGroup,
    Checkbox,
    Counter,
    Dropdown,
    Heading,
    PressEvent,
    RadioButton,
    Stack,
    TextField,
    WidgetContext,
    parse_press_event,
)
from .layout import (
    CornerRadii,
    SequenceLayout,
    StyledElement,
    apply_corner_rounding,
    apply_spacing,
    corner_radii,
    flatten_style,
    merge_style,
    spacing_override,
)
from .state import DeferredState, UpdateScheduler
from .style.resolve import ColorResolver, parse_color_token, resolve_color
from .style.theme import DEFAULT_THEME, Theme, load_theme, validate_theme

__all__ = [
    "Alert",
    "AnimationEngine",
    "Button",
    "ButtonGroup",
    "Checkbox",
    "ColorResolver",
    "CornerRadii",
    "Counter",
    "DEFAULT_THEME",
    "DeferredState",
    "Dropdown",
    "Heading",
    "ImmediateAnimationEngine",
    "PressEvent",
    "RadioButton",
    "SequenceLayout",
    "SpringSpec",
    "Stack",
    "StyledElement",
    "TextField",
    "Theme",
    "TrackedValue",
    "UIConfig",
    "UpdateScheduler",
    "WidgetContext",
    "ambient_config",
    "apply_corner_rounding",
    "apply_spacing",
    "corner_radii",
    "flatten_style",
    "load_config",
    "load_theme",
    "merge_style",
    "parse_color_token",
    "parse_press_event",
    "resolve_color",
    "spacing_override",
    "validate_theme",
]
