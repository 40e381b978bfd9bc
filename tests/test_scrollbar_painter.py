# test_scrollbar_painter.py
import unittest

from fadebar.ui.anim import FadeAnimation
from fadebar.ui.canvas import Paint, ThumbRect
from fadebar.ui.notifier import ValueNotifier
from fadebar.ui.scroll_model import AxisDirection, ScrollMetrics
from fadebar.ui.scrollbar import ScrollbarPainter
from fadebar.ui.style import ScrollbarStyle, TextDirection


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def draw_rect(self, rect, paint):
        self.calls.append(("rect", rect, paint))

    def draw_rrect(self, rect, radius, paint):
        self.calls.append(("rrect", rect, radius, paint))


def make_painter(opacity=1.0, **overrides):
    kwargs = dict(
        color=(10, 20, 30, 200),
        text_direction=TextDirection.LTR,
        thickness=6.0,
        fadeout_opacity_animation=ValueNotifier(opacity),
        cross_axis_margin=2.0,
    )
    kwargs.update(overrides)
    return ScrollbarPainter(**kwargs)


class TestPaintGuards(unittest.TestCase):
    def test_no_update_no_draw(self):
        canvas = RecordingCanvas()
        make_painter().paint(canvas, (300, 200))
        self.assertEqual(canvas.calls, [])

    def test_fully_faded_no_draw(self):
        canvas = RecordingCanvas()
        p = make_painter(opacity=0.0)
        p.update(ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN)
        p.paint(canvas, (300, 200))
        self.assertEqual(canvas.calls, [])

    def test_collapsed_main_axis_no_draw(self):
        p = make_painter()
        for direction, size in ((AxisDirection.DOWN, (100, 0)), (AxisDirection.UP, (100, 0)),
                                (AxisDirection.RIGHT, (0, 50)), (AxisDirection.LEFT, (0, 50))):
            with self.subTest(direction=direction):
                canvas = RecordingCanvas()
                p.update(ScrollMetrics.from_content(400, 200, 0), direction)
                p.paint(canvas, size)
                self.assertEqual(canvas.calls, [])

    def test_hit_test_never_claims(self):
        p = make_painter()
        p.update(ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN)
        self.assertFalse(p.hit_test((295, 60)))


class TestAxisPlacement(unittest.TestCase):
    def _paint_once(self, painter, metrics, direction, size):
        canvas = RecordingCanvas()
        painter.update(metrics, direction)
        painter.paint(canvas, size)
        self.assertEqual(len(canvas.calls), 1)
        return canvas.calls[0]

    def test_down_ltr_hugs_right_edge(self):
        kind, rect, paint = self._paint_once(
            make_painter(), ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN, (300, 200))
        self.assertEqual(kind, "rect")
        self.assertEqual(rect, ThumbRect(292, 50, 6, 100))

    def test_down_rtl_hugs_left_edge(self):
        _, rect, _ = self._paint_once(
            make_painter(text_direction=TextDirection.RTL),
            ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN, (300, 200))
        self.assertEqual(rect.x, 2)

    def test_up_swaps_before_and_after(self):
        # 20 scrolled, 80 remaining; reversed axis puts the thumb near the bottom
        _, rect, _ = self._paint_once(
            make_painter(), ScrollMetrics.from_content(200, 100, 20), AxisDirection.UP, (300, 200))
        self.assertAlmostEqual(rect.y, 80)
        self.assertAlmostEqual(rect.h, 100)

    def test_right_anchored_to_bottom(self):
        _, rect, _ = self._paint_once(
            make_painter(), ScrollMetrics.from_content(300, 100, 100), AxisDirection.RIGHT, (400, 50))
        self.assertAlmostEqual(rect.x, 400 / 3)
        self.assertAlmostEqual(rect.w, 400 / 3)
        self.assertEqual(rect.y, 44)
        self.assertEqual(rect.h, 6)

    def test_left_at_origin_sits_at_far_end(self):
        _, rect, _ = self._paint_once(
            make_painter(), ScrollMetrics.from_content(300, 100, 0), AxisDirection.LEFT, (400, 50))
        self.assertAlmostEqual(rect.right, 400)

    def test_vertical_requires_text_direction(self):
        p = make_painter(text_direction=None)
        p.update(ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN)
        with self.assertRaises(AssertionError):
            p.paint(RecordingCanvas(), (300, 200))

    def test_horizontal_ignores_text_direction(self):
        p = make_painter(text_direction=None)
        _, rect, _ = self._paint_once(p, ScrollMetrics.from_content(300, 100, 0), AxisDirection.RIGHT, (400, 50))
        self.assertEqual(rect.x, 0)


class TestDrawDispatch(unittest.TestCase):
    def test_radius_draws_rounded(self):
        canvas = RecordingCanvas()
        p = make_painter(radius=3.0)
        p.update(ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN)
        p.paint(canvas, (300, 200))
        kind, rect, radius, _ = canvas.calls[0]
        self.assertEqual(kind, "rrect")
        self.assertEqual(radius, 3.0)

    def test_alpha_multiplied_by_opacity(self):
        canvas = RecordingCanvas()
        p = make_painter(opacity=0.5)
        p.update(ScrollMetrics.from_content(200, 100, 50), AxisDirection.DOWN)
        p.paint(canvas, (300, 200))
        self.assertEqual(canvas.calls[0][2], Paint((10, 20, 30, 100)))


class TestNotifications(unittest.TestCase):
    def test_update_always_notifies(self):
        hits = []
        p = make_painter()
        p.add_listener(lambda: hits.append(1))
        m = ScrollMetrics.from_content(200, 100, 50)
        p.update(m, AxisDirection.DOWN)
        p.update(m, AxisDirection.DOWN)
        self.assertEqual(len(hits), 2)

    def test_opacity_change_requests_repaint(self):
        fade = FadeAnimation(0.0)
        p = make_painter(fadeout_opacity_animation=fade)
        hits = []
        p.add_listener(lambda: hits.append(1))
        fade.show()
        self.assertEqual(len(hits), 1)

    def test_dispose_unsubscribes(self):
        fade = FadeAnimation(0.0)
        p = make_painter(fadeout_opacity_animation=fade)
        p.add_listener(lambda: None)
        self.assertTrue(fade.has_listeners)
        p.dispose()
        self.assertFalse(fade.has_listeners)
        self.assertFalse(p.has_listeners)
        fade.show()  # must not reach the disposed painter
        self.assertEqual(fade.value, 1.0)


class TestShouldRepaint(unittest.TestCase):
    def test_identical_clone(self):
        fade = ValueNotifier(1.0)
        a = make_painter(fadeout_opacity_animation=fade)
        b = make_painter(fadeout_opacity_animation=fade)
        self.assertFalse(a.should_repaint(b))

    def test_thickness_differs(self):
        fade = ValueNotifier(1.0)
        a = make_painter(fadeout_opacity_animation=fade)
        b = make_painter(fadeout_opacity_animation=fade, thickness=6.5)
        self.assertTrue(a.should_repaint(b))

    def test_other_animation_instance(self):
        self.assertTrue(make_painter().should_repaint(make_painter()))

    def test_min_overscroll_length_not_compared(self):
        fade = ValueNotifier(1.0)
        a = make_painter(fadeout_opacity_animation=fade, min_overscroll_length=4.0)
        b = make_painter(fadeout_opacity_animation=fade)
        self.assertFalse(a.should_repaint(b))

    def test_not_a_painter(self):
        self.assertFalse(make_painter().should_repaint(object()))


class TestFromStyle(unittest.TestCase):
    def test_copies_style_fields(self):
        style = ScrollbarStyle(color=(1, 2, 3, 4), thickness=9.0, radius=None, min_length=30.0)
        p = ScrollbarPainter.from_style(style, FadeAnimation.from_style(style))
        self.assertEqual(p.color, (1, 2, 3, 4))
        self.assertEqual(p.thickness, 9.0)
        self.assertIsNone(p.radius)
        self.assertEqual(p.min_length, 30.0)
        self.assertEqual(p.min_overscroll_length, style.min_overscroll_length)
        self.assertEqual(p.fadeout_opacity_animation.duration, style.fade_duration)


if __name__ == "__main__":
    unittest.main()
