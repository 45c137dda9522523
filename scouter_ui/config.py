from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os
from pathlib import Path
from typing import Literal, Mapping

from .style.theme import DEFAULT_THEME, Theme, load_theme

LOGGER = logging.getLogger(__name__)

PlatformName = Literal["ios", "android", "web", "windows", "macos"]

SUPPORTED_PLATFORMS: tuple[str, ...] = ("ios", "android", "web", "windows", "macos")
DEFAULT_PLATFORM = "web"

ENV_DEV_MODE = "SCOUTER_UI_DEV"
ENV_PLATFORM = "SCOUTER_UI_PLATFORM"
ENV_THEME = "SCOUTER_UI_THEME"


@dataclass(frozen=True)
class UIConfig:
    """Process-wide presentation settings.

    `dev_mode` gates developer diagnostics (resolver misses). `platform` picks the
    entry consulted in platform override maps.
    """

    dev_mode: bool = True
    platform: str = DEFAULT_PLATFORM
    theme_path: Path | None = None

    def __post_init__(self) -> None:
        if self.platform not in SUPPORTED_PLATFORMS:
            raise ValueError(f"Unsupported platform: {self.platform}")

    def load_theme(self) -> Theme:
        if self.theme_path is None:
            return DEFAULT_THEME
        return load_theme(self.theme_path)


def load_config(env: Mapping[str, str] | None = None, *, strict: bool = True) -> UIConfig:
    """Build a `UIConfig` from `SCOUTER_UI_*` variables.

    With `strict=False` an unsupported platform is logged and replaced by `web`
    instead of raising.
    """

    source = os.environ if env is None else env
    dev_mode = source.get(ENV_DEV_MODE, "1").strip() == "1"
    platform = source.get(ENV_PLATFORM, DEFAULT_PLATFORM).strip().lower() or DEFAULT_PLATFORM
    if not strict and platform not in SUPPORTED_PLATFORMS:
        LOGGER.warning("Unsupported platform %r in %s; using %s.", platform, ENV_PLATFORM, DEFAULT_PLATFORM)
        platform = DEFAULT_PLATFORM
    raw_theme = source.get(ENV_THEME, "").strip()
    return UIConfig(
        dev_mode=dev_mode,
        platform=platform,
        theme_path=Path(raw_theme) if raw_theme else None,
    )


@lru_cache(maxsize=1)
def ambient_config() -> UIConfig:
    """Environment config read once per process; used when no config is passed.

    Call `ambient_config.cache_clear()` after changing the environment.
    """

    return load_config(strict=False)
