from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from types import MappingProxyType
from typing import Any, Mapping

Palette = Mapping[str, Mapping[str, str]]


def _freeze_colors(colors: Mapping[str, Mapping[str, str]]) -> Palette:
    return MappingProxyType({family: MappingProxyType(dict(shades)) for family, shades in colors.items()})


@dataclass(frozen=True)
class Theme:
    """Immutable color palette plus breakpoints.

    Never mutated in place; swapping themes means building a new `Theme`.
    """

    colors: Palette = field(default_factory=lambda: MappingProxyType({}))
    breakpoints: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def families(self) -> tuple[str, ...]:
        return tuple(self.colors.keys())

    def shades(self, family: str) -> tuple[str, ...]:
        return tuple(self.colors.get(family, {}).keys())

    def replace_colors(self, colors: Mapping[str, Mapping[Any, Any]]) -> Theme:
        return validate_theme(colors, self.breakpoints)

    def as_dict(self) -> dict[str, Any]:
        return {
            "colors": {family: dict(shades) for family, shades in self.colors.items()},
            "breakpoints": dict(self.breakpoints),
        }


def validate_theme(
    colors: Mapping[Any, Mapping[Any, Any]],
    breakpoints: Mapping[Any, Any] | None = None,
) -> Theme:
    """Validate a nested palette and build a frozen `Theme`.

    Shade keys are normalized to strings so `{500: "#fff"}` and `{"500": "#fff"}`
    resolve identically.
    """

    if not isinstance(colors, Mapping):
        raise ValueError("Theme colors must be a mapping of family -> shades")
    raw: dict[str, dict[str, str]] = {}
    for family, shades in colors.items():
        family_key = str(family)
        if not family_key:
            raise ValueError("Theme color family names must be non-empty")
        if not isinstance(shades, Mapping) or not shades:
            raise ValueError(f"Color family `{family_key}` must define at least one shade")
        family_shades: dict[str, str] = {}
        for shade, value in shades.items():
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"Color `{family_key}.{shade}` must be a non-empty string")
            family_shades[str(shade)] = value
        raw[family_key] = family_shades

    frozen_breakpoints: dict[str, str] = {}
    for name, value in (breakpoints or {}).items():
        if not isinstance(value, str):
            raise ValueError(f"Breakpoint `{name}` must be a string")
        frozen_breakpoints[str(name)] = value

    return Theme(colors=_freeze_colors(raw), breakpoints=MappingProxyType(frozen_breakpoints))


def load_theme(path: str | Path) -> Theme:
    """Load a theme from a TOML file with `[colors.<family>]` and `[breakpoints]` tables."""

    with Path(path).open("rb") as f:
        raw = tomllib.load(f)
    try:
        colors = raw["colors"]
    except KeyError as exc:
        raise ValueError(f"theme file missing required table: {exc.args[0]}") from exc
    breakpoints = raw.get("breakpoints", {})
    if not isinstance(breakpoints, Mapping):
        raise ValueError("theme `breakpoints` must be a table")
    return validate_theme(colors, breakpoints)


DEFAULT_THEME = validate_theme(
    {
        "black": {"50": "#000"},
        "blue": {
            "50": "#eff6ff",
            "100": "#dbeafe",
            "200": "#bfdbfe",
            "300": "#a3cfff",
            "400": "#60a5fa",
            "500": "#3b82f6",
            "600": "#2563eb",
            "700": "#173da6",
            "800": "#1a3478",
            "900": "#14204a",
            "950": "#0c142e",
        },
        "gray": {
            "50": "#fafafa",
            "100": "#f4f4f5",
            "200": "#e4e4e7",
            "300": "#d4d4d8",
            "400": "#a1a1aa",
            "500": "#71717a",
            "600": "#52525b",
            "700": "#3f3f46",
            "800": "#27272a",
            "900": "#18181b",
        },
        "green": {
            "50": "#f0fdf4",
            "100": "#dcfce7",
            "200": "#bbf7d0",
            "300": "#86efac",
            "400": "#4ade80",
            "500": "#22c55e",
            "600": "#16a34a",
            "700": "#116932",
            "800": "#124a28",
            "900": "#042713",
            "950": "#03190c",
        },
        "red": {
            "50": "#fef2f2",
            "100": "#fee2e2",
            "200": "#fecaca",
            "300": "#fca5a5",
            "400": "#f87171",
            "500": "#ef4444",
            "600": "#dc2626",
            "700": "#991919",
            "800": "#511111",
            "900": "#300c0c",
        },
        "white": {"50": "#fff"},
        "yellow": {
            "50": "#fefce8",
            "100": "#fef9c3",
            "200": "#fef08a",
            "300": "#fde047",
            "400": "#facc15",
            "500": "#eab308",
            "600": "#ca8a04",
            "700": "#a16207",
            "800": "#854d0e",
            "900": "#713f12",
            "950": "#422006",
        },
    },
    {
        "2xl": "1536px",
        "lg": "1024px",
        "md": "768px",
        "sm": "640px",
        "xl": "1280px",
        "xs": "320px",
    },
)
