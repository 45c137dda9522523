from __future__ import annotations

from typing import Literal

SizeKey = Literal["none", "xs", "sm", "md", "lg", "xl", "2xl", "3xl", "4xl", "5xl", "6xl"]
FontWeightKey = Literal["light", "normal", "medium", "semibold", "bold", "extrabold", "black"]

SIZE_MAP: dict[str, str] = {
    "2xl": "30px",
    "3xl": "36px",
    "4xl": "48px",
    "5xl": "60px",
    "6xl": "72px",
    "lg": "20px",
    "md": "16px",
    "none": "0px",
    "sm": "14px",
    "xl": "24px",
    "xs": "12px",
}

FONT_WEIGHT_MAP: dict[str, str] = {
    "black": "900",
    "bold": "700",
    "extrabold": "800",
    "light": "300",
    "medium": "500",
    "normal": "400",
    "semibold": "600",
}


def size_px(key: str) -> float:
    """Numeric pixel value for a size key (`"sm"` -> 14.0)."""

    try:
        raw = SIZE_MAP[key]
    except KeyError as exc:
        raise ValueError(f"Unknown size key: {key}") from exc
    return float(raw.removesuffix("px"))


def font_weight(key: str) -> str:
    try:
        return FONT_WEIGHT_MAP[key]
    except KeyError as exc:
        raise ValueError(f"Unknown font weight key: {key}") from exc
