from __future__ import annotations

from collections import OrderedDict
import logging
from typing import Any, Mapping

from ..config import UIConfig, ambient_config
from .theme import Theme

LOGGER = logging.getLogger(__name__)

DEFAULT_SHADE = "500"
DEFAULT_FALLBACK = "black"

PlatformOverrides = Mapping[str, Any]


def parse_color_token(token: str) -> tuple[str, str]:
    """Split `family.shade` on the first dot; a bare family maps to shade `500`.

    `"blue."` yields an empty shade, which never matches a theme entry.
    """

    family, sep, shade = token.partition(".")
    if not sep:
        return family, DEFAULT_SHADE
    return family, shade


def resolve_color(
    token: object,
    theme: Theme,
    fallback: str = DEFAULT_FALLBACK,
    overrides: PlatformOverrides | None = None,
    *,
    config: UIConfig | None = None,
) -> str:
    """Resolve a theme color token like `"blue.700"` to a concrete color string.

    A platform override for the active platform wins over the theme. Unknown
    families or shades degrade to `fallback`; in development mode a warning is
    logged. Never raises for bad tokens.
    """

    cfg = config or ambient_config()
    if overrides:
        override = overrides.get(cfg.platform)
        if override:
            return str(override)
    if not token or not isinstance(token, str):
        return fallback
    family, shade = parse_color_token(token)
    shades = theme.colors.get(family)
    if not shades:
        if cfg.dev_mode:
            LOGGER.warning('[resolve_color] Color base "%s" not found in theme. Returning fallback.', family)
        return fallback
    value = shades.get(shade)
    if not value:
        if cfg.dev_mode:
            LOGGER.warning(
                '[resolve_color] Shade "%s" for color "%s" not found in theme. Returning fallback.',
                shade,
                family,
            )
        return fallback
    return str(value)


class ColorResolver:
    """Memoizing resolver bound to one theme and config.

    Results are cached per (token, fallback, overrides) and recomputed only when an
    input changes; installing a different theme or config drops the cache. Since a
    cached miss is not resolved again, its dev-mode warning is logged once per key.
    The cache keeps the `max_entries` most recently used keys.
    """

    def __init__(self, theme: Theme, config: UIConfig | None = None, *, max_entries: int = 512) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be > 0")
        self._theme = theme
        self._config = config or ambient_config()
        self._max_entries = max_entries
        self._cache: OrderedDict[tuple[object, str, tuple[tuple[str, str], ...]], str] = OrderedDict()

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def config(self) -> UIConfig:
        return self._config

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def use_theme(self, theme: Theme) -> None:
        if theme is self._theme:
            return
        self._theme = theme
        self._cache.clear()

    def use_config(self, config: UIConfig) -> None:
        if config == self._config:
            return
        self._config = config
        self._cache.clear()

    def resolve(
        self,
        token: object,
        fallback: str = DEFAULT_FALLBACK,
        overrides: PlatformOverrides | None = None,
    ) -> str:
        key = (
            token if isinstance(token, str) else None,
            fallback,
            tuple(sorted((str(k), str(v)) for k, v in (overrides or {}).items())),
        )
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return cached
        value = resolve_color(token, self._theme, fallback, overrides, config=self._config)
        self._cache[key] = value
        if len(self._cache) > self._max_entries:
            self._cache.popitem(last=False)
        return value
