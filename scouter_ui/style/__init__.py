"""Theme palette and size dictionary for Scouter UI."""

from .dictionary import FONT_WEIGHT_MAP, SIZE_MAP, FontWeightKey, SizeKey, font_weight, size_px
from .theme import DEFAULT_THEME, Theme, load_theme, validate_theme

__all__ = [
    "DEFAULT_THEME",
    "FONT_WEIGHT_MAP",
    "FontWeightKey",
    "SIZE_MAP",
    "SizeKey",
    "Theme",
    "font_weight",
    "load_theme",
    "size_px",
    "validate_theme",
]
