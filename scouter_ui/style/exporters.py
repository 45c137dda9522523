from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from .theme import Theme


@dataclass(frozen=True)
class PaletteExportConfig:
    swatch_px: int = 48
    label_px: int = 96
    padding: int = 16
    gap: int = 4
    bg: tuple[int, int, int] = (17, 24, 39)
    fg: tuple[int, int, int] = (226, 232, 240)

    def __post_init__(self) -> None:
        if self.swatch_px <= 0:
            raise ValueError("swatch_px must be > 0")
        if self.padding < 0 or self.gap < 0:
            raise ValueError("padding/gap must be >= 0")


def parse_hex_rgb(value: str) -> tuple[int, int, int]:
    raw = value.strip()
    if not raw.startswith("#"):
        raise ValueError(f"invalid color: {value}")
    h = raw[1:]
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    if len(h) in (6, 8):
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    raise ValueError(f"invalid color: {value}")


def export_palette_png(
    theme: Theme,
    out_path: str | Path,
    config: PaletteExportConfig | None = None,
) -> Path:
    """Write a swatch sheet: one row per color family, one square per shade.

    Non-hex values (named colors) are drawn as an outlined empty square.
    """

    cfg = config or PaletteExportConfig()
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    families = theme.families()
    max_shades = max((len(theme.shades(f)) for f in families), default=1)
    row_h = cfg.swatch_px + cfg.gap
    width = cfg.padding * 2 + cfg.label_px + max_shades * (cfg.swatch_px + cfg.gap)
    height = cfg.padding * 2 + max(1, len(families)) * row_h

    font = ImageFont.load_default()
    image = Image.new("RGB", (width, height), color=cfg.bg)
    draw = ImageDraw.Draw(image)

    y = cfg.padding
    for family in families:
        draw.text((cfg.padding, y + cfg.swatch_px // 3), family, fill=cfg.fg, font=font)
        x = cfg.padding + cfg.label_px
        for shade in theme.shades(family):
            box = (x, y, x + cfg.swatch_px - 1, y + cfg.swatch_px - 1)
            try:
                fill = parse_hex_rgb(theme.colors[family][shade])
            except ValueError:
                draw.rectangle(box, outline=cfg.fg)
            else:
                draw.rectangle(box, fill=fill)
            x += cfg.swatch_px + cfg.gap
        y += row_h

    image.save(out)
    return out
