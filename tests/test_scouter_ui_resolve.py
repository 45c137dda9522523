from __future__ import annotations

import os
import unittest
from unittest import mock

from scouter_ui.config import ENV_PLATFORM, UIConfig, ambient_config
from scouter_ui.style.resolve import ColorResolver, parse_color_token, resolve_color
from scouter_ui.style.theme import DEFAULT_THEME, validate_theme

LOGGER_NAME = "scouter_ui.style.resolve"
DEV_IOS = UIConfig(dev_mode=True, platform="ios")
PROD_IOS = UIConfig(dev_mode=False, platform="ios")


class ParseColorTokenTests(unittest.TestCase):
    def test_bare_family_defaults_to_500(self) -> None:
        self.assertEqual(parse_color_token("blue"), ("blue", "500"))

    def test_split_happens_on_first_dot_only(self) -> None:
        self.assertEqual(parse_color_token("blue.500.x"), ("blue", "500.x"))
        self.assertEqual(parse_color_token("blue."), ("blue", ""))
        self.assertEqual(parse_color_token(".500"), ("", "500"))


class ResolveColorTests(unittest.TestCase):
    def test_existing_family_and_shade_resolve_exactly(self) -> None:
        for family in DEFAULT_THEME.families():
            for shade in DEFAULT_THEME.shades(family):
                with self.subTest(token=f"{family}.{shade}"):
                    self.assertEqual(
                        resolve_color(f"{family}.{shade}", DEFAULT_THEME, config=DEV_IOS),
                        DEFAULT_THEME.colors[family][shade],
                    )

    def test_bare_family_equals_shade_500(self) -> None:
        self.assertEqual(
            resolve_color("blue", DEFAULT_THEME, config=DEV_IOS),
            resolve_color("blue.500", DEFAULT_THEME, config=DEV_IOS),
        )

    def test_missing_family_returns_fallback_and_warns_in_dev(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="WARNING") as logs:
            value = resolve_color("purple.500", DEFAULT_THEME, "#123456", config=DEV_IOS)
        self.assertEqual(value, "#123456")
        self.assertEqual(len(logs.output), 1)
        self.assertIn('Color base "purple" not found', logs.output[0])

    def test_missing_shade_returns_fallback_and_warns_in_dev(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="WARNING") as logs:
            value = resolve_color("blue.450", DEFAULT_THEME, config=DEV_IOS)
        self.assertEqual(value, "black")
        self.assertIn('Shade "450" for color "blue" not found', logs.output[0])

    def test_bare_family_without_500_shade_falls_back(self) -> None:
        with self.assertLogs(LOGGER_NAME, level="WARNING"):
            self.assertEqual(resolve_color("white", DEFAULT_THEME, config=DEV_IOS), "black")
        self.assertEqual(resolve_color("white.50", DEFAULT_THEME, config=DEV_IOS), "#fff")

    def test_warnings_are_suppressed_outside_dev_mode(self) -> None:
        with self.assertNoLogs(LOGGER_NAME, level="WARNING"):
            self.assertEqual(resolve_color("purple", DEFAULT_THEME, config=PROD_IOS), "black")
            self.assertEqual(resolve_color("blue.1", DEFAULT_THEME, config=PROD_IOS), "black")

    def test_malformed_tokens_fall_through_to_fallback(self) -> None:
        for token in ("blue.", "blue.500.x", ".500"):
            with self.subTest(token=token):
                with self.assertLogs(LOGGER_NAME, level="WARNING"):
                    self.assertEqual(resolve_color(token, DEFAULT_THEME, "red", config=DEV_IOS), "red")

    def test_absent_or_non_string_token_returns_fallback_silently(self) -> None:
        with self.assertNoLogs(LOGGER_NAME, level="WARNING"):
            self.assertEqual(resolve_color(None, DEFAULT_THEME, config=DEV_IOS), "black")
            self.assertEqual(resolve_color("", DEFAULT_THEME, config=DEV_IOS), "black")
            self.assertEqual(resolve_color(500, DEFAULT_THEME, "#eee", config=DEV_IOS), "#eee")

    def test_platform_override_for_active_platform_always_wins(self) -> None:
        overrides = {"ios": "#ff0000", "android": "#00ff00"}
        with self.assertNoLogs(LOGGER_NAME, level="WARNING"):
            self.assertEqual(resolve_color("blue.500", DEFAULT_THEME, overrides=overrides, config=DEV_IOS), "#ff0000")
            self.assertEqual(resolve_color("nope.1", DEFAULT_THEME, overrides=overrides, config=DEV_IOS), "#ff0000")
            self.assertEqual(resolve_color(None, DEFAULT_THEME, overrides=overrides, config=DEV_IOS), "#ff0000")

    def test_override_for_other_platform_is_ignored(self) -> None:
        value = resolve_color("blue.500", DEFAULT_THEME, overrides={"android": "#00ff00"}, config=DEV_IOS)
        self.assertEqual(value, "#3b82f6")

    def test_resolved_value_is_coerced_to_string(self) -> None:
        value = resolve_color("x", DEFAULT_THEME, overrides={"ios": 0xFF0000}, config=DEV_IOS)
        self.assertEqual(value, str(0xFF0000))


class ColorResolverTests(unittest.TestCase):
    def test_memoizes_until_an_input_changes(self) -> None:
        resolver = ColorResolver(DEFAULT_THEME, DEV_IOS)
        with self.assertLogs(LOGGER_NAME, level="WARNING") as logs:
            self.assertEqual(resolver.resolve("purple"), "black")
            self.assertEqual(resolver.resolve("purple"), "black")
            self.assertEqual(resolver.resolve("purple", "#111"), "#111")
        self.assertEqual(len(logs.output), 2)

    def test_theme_swap_recomputes(self) -> None:
        resolver = ColorResolver(DEFAULT_THEME, DEV_IOS)
        self.assertEqual(resolver.resolve("blue"), "#3b82f6")
        resolver.use_theme(validate_theme({"blue": {"500": "#0000ff"}}))
        self.assertEqual(resolver.resolve("blue"), "#0000ff")

    def test_config_swap_changes_platform_override(self) -> None:
        resolver = ColorResolver(DEFAULT_THEME, DEV_IOS)
        overrides = {"android": "#00ff00"}
        self.assertEqual(resolver.resolve("blue", overrides=overrides), "#3b82f6")
        resolver.use_config(UIConfig(dev_mode=True, platform="android"))
        self.assertEqual(resolver.resolve("blue", overrides=overrides), "#00ff00")

    def test_cache_keeps_most_recently_used_entries(self) -> None:
        resolver = ColorResolver(DEFAULT_THEME, PROD_IOS, max_entries=2)
        resolver.resolve("blue")
        resolver.resolve("red")
        resolver.resolve("blue")
        resolver.resolve("green")
        self.assertEqual(resolver.cache_size, 2)
        with self.assertRaises(ValueError):
            ColorResolver(DEFAULT_THEME, PROD_IOS, max_entries=0)

    def test_evicted_miss_warns_again_when_resolved_anew(self) -> None:
        resolver = ColorResolver(DEFAULT_THEME, DEV_IOS, max_entries=1)
        with self.assertLogs(LOGGER_NAME, level="WARNING") as logs:
            resolver.resolve("purple")
            resolver.resolve("blue")
            resolver.resolve("purple")
        self.assertEqual(len(logs.output), 2)


class AmbientConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        ambient_config.cache_clear()
        self.addCleanup(ambient_config.cache_clear)

    def test_unknown_platform_in_environment_falls_back_to_web(self) -> None:
        with mock.patch.dict(os.environ, {ENV_PLATFORM: "tvos"}):
            with self.assertLogs("scouter_ui.config", level="WARNING") as logs:
                value = resolve_color("blue.500", DEFAULT_THEME, overrides={"web": "#010203"})
        self.assertEqual(value, "#010203")
        self.assertIn("tvos", logs.output[0])
        self.assertEqual(ambient_config().platform, "web")

    def test_environment_is_read_once(self) -> None:
        with mock.patch.dict(os.environ, {ENV_PLATFORM: "ios"}):
            first = ambient_config()
        with mock.patch.dict(os.environ, {ENV_PLATFORM: "android"}):
            self.assertIs(ambient_config(), first)
            value = resolve_color("blue", DEFAULT_THEME, overrides={"ios": "#0a0a0a"})
        self.assertEqual(value, "#0a0a0a")


if __name__ == "__main__":
    unittest.main()
