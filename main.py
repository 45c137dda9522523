from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from pathlib import Path

from scouter_ui.config import SUPPORTED_PLATFORMS, UIConfig, load_config
from scouter_ui.layout.sequence import SequenceLayout
from scouter_ui.style.exporters import export_palette_png
from scouter_ui.style.resolve import resolve_color
from scouter_ui.style.theme import Theme, load_theme


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scouter-ui")
    parser.add_argument("--verbose", action="store_true", help="Enable INFO logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Resolve a color token like `blue.700` against a theme.")
    resolve.add_argument("token")
    resolve.add_argument("--fallback", default="black")
    resolve.add_argument("--platform", choices=SUPPORTED_PLATFORMS, default=None)
    resolve.add_argument(
        "--override",
        action="append",
        default=[],
        metavar="PLATFORM=COLOR",
        help="Platform-specific color that wins over the theme. Repeatable.",
    )
    resolve.add_argument("--theme", type=Path, default=None, help="TOML theme file. Default: built-in palette.")

    layout = sub.add_parser("layout", help="Print per-position style overrides for a sibling sequence.")
    layout.add_argument("--count", type=int, required=True)
    layout.add_argument("--axis", choices=["row", "column"], default="row")
    layout.add_argument("--policy", choices=["spacing", "corners", "both"], default="spacing")
    layout.add_argument("--spacing", type=float, default=14.0)
    layout.add_argument("--radius", type=float, default=15.0)
    layout.add_argument("--column-radius", type=float, default=0.0)

    palette = sub.add_parser("palette", help="Print theme families and shades; optionally export a swatch PNG.")
    palette.add_argument("--theme", type=Path, default=None)
    palette.add_argument("--png", type=Path, default=None)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    config = load_config()

    if args.command == "resolve":
        if args.platform is not None:
            config = dataclasses.replace(config, platform=args.platform)
        theme = _load_theme(args.theme, config)
        overrides = _parse_overrides(args.override)
        print(resolve_color(args.token, theme, args.fallback, overrides or None, config=config))
        return

    if args.command == "layout":
        if args.count < 0:
            raise ValueError("--count must be >= 0")
        policy = SequenceLayout(
            axis=args.axis,
            spacing_unit=args.spacing if args.policy in ("spacing", "both") else None,
            radius=args.radius if args.policy in ("corners", "both") else None,
            column_radius=args.column_radius,
        )
        rows = [
            {"index": index, "override": policy.override_for(index, args.count)}
            for index in range(args.count)
        ]
        print(json.dumps(rows, indent=2, sort_keys=True))
        return

    if args.command == "palette":
        theme = _load_theme(args.theme, config)
        print(json.dumps(theme.as_dict(), indent=2, sort_keys=True))
        if args.png is not None:
            out = export_palette_png(theme, args.png)
            logging.getLogger(__name__).info("wrote palette swatches to %s", out)
        return

    raise RuntimeError(f"unsupported command: {args.command}")


def _load_theme(path: Path | None, config: UIConfig) -> Theme:
    if path is not None:
        return load_theme(path)
    return config.load_theme()


def _parse_overrides(raw: list[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for entry in raw:
        platform, sep, color = entry.partition("=")
        if not sep or not platform.strip() or not color.strip():
            raise ValueError(f"override must use PLATFORM=COLOR format: {entry}")
        overrides[platform.strip()] = color.strip()
    return overrides


if __name__ == "__main__":
    main()
