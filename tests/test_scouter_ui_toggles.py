from __future__ import annotations

import unittest

from scouter_ui.animation import ImmediateAnimationEngine
from scouter_ui.config import UIConfig
from scouter_ui.controls.checkbox import BOX_BOUNCE, ICON_POP, Checkbox
from scouter_ui.controls.context import WidgetContext
from scouter_ui.controls.counter import Counter
from scouter_ui.controls.interaction import PressEvent
from scouter_ui.controls.radio_button import RING_BOUNCE, RadioButton
from scouter_ui.layout.sequence import flatten_style
from scouter_ui.style.theme import DEFAULT_THEME


def _ctx() -> WidgetContext:
    return WidgetContext.create(
        DEFAULT_THEME,
        UIConfig(dev_mode=False, platform="web"),
        animation=ImmediateAnimationEngine(record=True),
    )


class CheckboxTests(unittest.TestCase):
    def test_mount_does_not_fire_on_press(self) -> None:
        ctx = _ctx()
        calls: list[bool] = []
        checkbox = Checkbox(ctx, on_press=calls.append, is_checked=True)
        ctx.scheduler.flush()
        self.assertTrue(checkbox.checked)
        self.assertEqual(calls, [])

    def test_press_commits_before_on_press_and_animates(self) -> None:
        ctx = _ctx()
        calls: list[bool] = []
        checkbox = Checkbox(ctx, on_press=calls.append)
        ctx.scheduler.flush()

        checkbox.press()
        self.assertFalse(checkbox.checked)
        self.assertEqual(calls, [])

        ctx.scheduler.flush()
        self.assertTrue(checkbox.checked)
        self.assertEqual(calls, [True])
        self.assertEqual(
            [(value, steps) for value, steps in ctx.animation.requests],
            [(checkbox.icon_scale, ICON_POP), (checkbox.box_scale, BOX_BOUNCE)],
        )
        self.assertEqual(checkbox.icon_scale.value, 1.0)

        checkbox.press()
        ctx.scheduler.flush()
        self.assertEqual(calls, [True, False])

    def test_disabled_or_externally_driven_checkbox_ignores_press(self) -> None:
        ctx = _ctx()
        calls: list[bool] = []
        disabled = Checkbox(ctx, on_press=calls.append, disabled=True)
        external = Checkbox(ctx, on_press=calls.append, use_built_in_state=False)
        ctx.scheduler.flush()

        disabled.press()
        external.press()
        ctx.scheduler.flush()
        self.assertFalse(disabled.checked)
        self.assertFalse(external.checked)
        self.assertEqual(calls, [])

    def test_unmount_before_commit_drops_on_press(self) -> None:
        ctx = _ctx()
        calls: list[bool] = []
        checkbox = Checkbox(ctx, on_press=calls.append)
        ctx.scheduler.flush()

        checkbox.press()
        checkbox.unmount()
        ctx.scheduler.flush()
        self.assertEqual(calls, [])

    def test_press_before_first_flush_still_reports(self) -> None:
        ctx = _ctx()
        calls: list[bool] = []
        checkbox = Checkbox(ctx, on_press=calls.append)

        checkbox.press()
        ctx.scheduler.flush()
        self.assertTrue(checkbox.checked)
        self.assertEqual(calls, [True])

    def test_label_heading_resolves_size_weight_and_color(self) -> None:
        ctx = _ctx()
        labelled = Checkbox(
            ctx,
            checkbox_label="Accept terms",
            checkbox_label_color="gray.700",
            checkbox_label_weight="bold",
            checkbox_label_size="lg",
        )
        plain = Checkbox(ctx)
        ctx.scheduler.flush()

        self.assertEqual(
            labelled.style()["label"],
            {"color": "#3f3f46", "fontSize": 20.0, "fontWeight": "700", "marginLeft": 10},
        )
        self.assertEqual(labelled.label_heading.text, "Accept terms")
        self.assertIsNone(plain.style()["label"])

    def test_style_reflects_variant_and_checked_state(self) -> None:
        ctx = _ctx()
        flat = Checkbox(ctx, is_checked=True, color="red.500", size="md")
        outline = Checkbox(ctx, is_checked=True, variant="outline")
        ctx.scheduler.flush()

        flat_style = flat.style()
        self.assertEqual(flat_style["box"]["backgroundColor"], "#ef4444")
        self.assertEqual(flat_style["box"]["width"], 16.0)
        self.assertEqual(flat_style["icon"]["color"], "#fff")
        self.assertEqual(flat_style["icon"]["size"], 8.0)
        self.assertTrue(flat_style["aria_checked"])

        outline_style = outline.style()
        self.assertEqual(outline_style["box"]["backgroundColor"], "transparent")
        self.assertEqual(outline_style["icon"]["color"], "#3b82f6")

    def test_rejects_unknown_variant(self) -> None:
        with self.assertRaises(ValueError):
            Checkbox(_ctx(), variant="glass")  # type: ignore[arg-type]


class RadioButtonTests(unittest.TestCase):
    def test_press_toggles_and_reports_committed_value(self) -> None:
        ctx = _ctx()
        calls: list[bool] = []
        radio = RadioButton(ctx, on_press=calls.append)
        ctx.scheduler.flush()

        radio.press()
        ctx.scheduler.flush()
        self.assertTrue(radio.checked)
        self.assertEqual(calls, [True])
        self.assertEqual(
            [(value, steps) for value, steps in ctx.animation.requests],
            [(radio.outer_scale, RING_BOUNCE), (radio.inner_scale, RING_BOUNCE)],
        )
        self.assertTrue(radio.style()["dot"]["visible"])
        self.assertEqual(radio.style()["ring"]["width"], 20.0)

    def test_disabled_radio_ignores_press(self) -> None:
        ctx = _ctx()
        radio = RadioButton(ctx, disabled=True)
        ctx.scheduler.flush()
        radio.press()
        ctx.scheduler.flush()
        self.assertFalse(radio.checked)


class CounterTests(unittest.TestCase):
    def test_increment_and_decrement_notify_after_commit(self) -> None:
        ctx = _ctx()
        changes: list[int] = []
        counter = Counter(ctx, on_change=changes.append, initial_value=5)
        ctx.scheduler.flush()
        self.assertEqual(changes, [])

        counter.increment()
        self.assertEqual(counter.get_value(), 5)
        ctx.scheduler.flush()
        counter.decrement()
        ctx.scheduler.flush()
        counter.decrement()
        ctx.scheduler.flush()

        self.assertEqual(counter.get_value(), 4)
        self.assertEqual(changes, [6, 5, 4])

    def test_rapid_presses_before_commit_report_final_value_once(self) -> None:
        ctx = _ctx()
        changes: list[int] = []
        counter = Counter(ctx, on_change=changes.append)
        ctx.scheduler.flush()

        counter.increment()
        counter.increment()
        counter.increment()
        ctx.scheduler.flush()
        self.assertEqual(counter.get_value(), 3)
        self.assertEqual(changes, [3])

    def test_buttons_drive_the_counter(self) -> None:
        ctx = _ctx()
        counter = Counter(ctx, color="green.500")
        ctx.scheduler.flush()

        counter.increment_button.handle(PressEvent(phase="press"))
        counter.increment_button.handle(PressEvent(phase="press"))
        ctx.scheduler.flush()
        counter.decrement_button.handle(PressEvent(phase="press"))
        ctx.scheduler.flush()
        self.assertEqual(counter.get_value(), 1)
        self.assertEqual(counter.increment_button.colors().background, "#22c55e")
        self.assertEqual(counter.icon_color(), "#fff")

    def test_layout_places_value_between_buttons(self) -> None:
        ctx = _ctx()
        counter = Counter(ctx, initial_value=7)
        ctx.scheduler.flush()

        laid_out = counter.layout()
        self.assertEqual(
            [item.element for item in laid_out],
            [counter.decrement_button, 7, counter.increment_button],
        )
        self.assertEqual(flatten_style(laid_out[0].style), {"width": "40%"})
        self.assertEqual(flatten_style(laid_out[2].style), {"width": "40%", "marginLeft": 14.0})

    def test_increment_before_first_flush_reports_change(self) -> None:
        ctx = _ctx()
        changes: list[int] = []
        counter = Counter(ctx, on_change=changes.append, initial_value=2)

        counter.increment()
        ctx.scheduler.flush()
        self.assertEqual(counter.get_value(), 3)
        self.assertEqual(changes, [3])


if __name__ == "__main__":
    unittest.main()
