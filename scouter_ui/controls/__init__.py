"""Headless widget models for Scouter UI."""

from .alert import Alert, AlertColors, AlertRole
from .button import Button, ButtonColors, ButtonState
from .button_group import ButtonGroup
from .checkbox import Checkbox
from .context import WidgetContext
from .counter import Counter
from .dropdown import Dropdown, DropdownRow, DropdownState
from .heading import Heading
from .interaction import PressEvent, PressPhase, parse_press_event
from .radio_button import RadioButton
from .stack import Stack
from .text_field import ErrorRow, TextField, TextFieldColors

__all__ = [
    "Alert",
    "AlertColors",
    "AlertRole",
    "Button",
    "ButtonColors",
    "ButtonGroup",
    "ButtonState",
    "Checkbox",
    "Counter",
    "Dropdown",
    "DropdownRow",
    "DropdownState",
    "ErrorRow",
    "Heading",
    "PressEvent",
    "PressPhase",
    "RadioButton",
    "Stack",
    "TextField",
    "TextFieldColors",
    "WidgetContext",
    "parse_press_event",
]
