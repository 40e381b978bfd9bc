from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol, Tuple

from fadebar.ui.canvas import Canvas, Paint, ThumbRect, faded
from fadebar.ui.notifier import ChangeNotifier, Listener
from fadebar.ui.scroll_model import Axis, AxisDirection
from fadebar.ui.style import MIN_THUMB_EXTENT, ScrollbarStyle, TextDirection

logger = logging.getLogger(__name__)

Size = Tuple[float, float]   # (width, height)


class OpacitySignal(Protocol):
    @property
    def value(self) -> float: ...
    def add_listener(self, listener: Listener) -> None: ...
    def remove_listener(self, listener: Listener) -> None: ...


class ScrollExtents(Protocol):
    def extent_before(self) -> float: ...
    def extent_inside(self) -> float: ...
    def extent_after(self) -> float: ...


def thumb_geometry(before: float, inside: float, after: float, viewport: float, *,
                   main_axis_margin: float = 0.0,
                   min_length: float = MIN_THUMB_EXTENT,
                   min_overscroll_length: float = MIN_THUMB_EXTENT) -> Tuple[float, float]:
    """
    Place the thumb along the main axis. Returns (offset, extent).

    `before`/`after` are already oriented in painting direction. With content on
    both sides the thumb never drops below `min_length`; at an edge the floor
    ramps linearly from nothing at 80% visible up to `min_length` at 100%.
    """
    thumb_extent = min(viewport, min_overscroll_length)

    total = before + inside + after
    if total > 0.0:
        fraction_visible = inside / total
        thumb_extent = max(thumb_extent, viewport * fraction_visible - 2 * main_axis_margin)

        if before != 0.0 and after != 0.0:
            thumb_extent = max(min_length, thumb_extent)
        else:
            thumb_extent = max(thumb_extent, min_length * (((inside / viewport) - 0.8) / 0.2))

    if before + after > 0.0:
        fraction_past = before / (before + after)
        thumb_offset = fraction_past * (viewport - thumb_extent - 2 * main_axis_margin) + main_axis_margin
    else:
        thumb_offset = main_axis_margin

    return thumb_offset, thumb_extent


class ScrollbarPainter(ChangeNotifier):
    """
    Paints an overlay scroll thumb that fades with `fadeout_opacity_animation`.

    Owner feeds update(metrics, axis_direction) on every scroll change and calls
    paint(canvas, size) once per frame. Listeners are told whenever a repaint
    is needed (new metrics or an opacity tick).
    """
    def __init__(self, color: tuple[int, int, int, int], text_direction: Optional[TextDirection],
                 thickness: float, fadeout_opacity_animation: OpacitySignal, *,
                 main_axis_margin: float = 0.0, cross_axis_margin: float = 0.0,
                 radius: Optional[float] = None,
                 min_length: float = MIN_THUMB_EXTENT,
                 min_overscroll_length: float = MIN_THUMB_EXTENT):
        super().__init__()
        self.color = tuple(color)
        self.text_direction = text_direction
        self.thickness = thickness
        self.fadeout_opacity_animation = fadeout_opacity_animation
        self.main_axis_margin = main_axis_margin
        self.cross_axis_margin = cross_axis_margin
        self.radius = radius
        self.min_length = min_length
        self.min_overscroll_length = min_overscroll_length

        self._last_metrics: Optional[ScrollExtents] = None
        self._last_axis_direction: Optional[AxisDirection] = None

        fadeout_opacity_animation.add_listener(self.notify_listeners)

    @classmethod
    def from_style(cls, style: ScrollbarStyle, fadeout_opacity_animation: OpacitySignal) -> "ScrollbarPainter":
        return cls(
            style.color, style.text_direction, style.thickness, fadeout_opacity_animation,
            main_axis_margin=style.main_axis_margin,
            cross_axis_margin=style.cross_axis_margin,
            radius=style.radius,
            min_length=style.min_length,
            min_overscroll_length=style.min_overscroll_length,
        )

    # --------- state ---------
    def update(self, metrics: ScrollExtents, axis_direction: AxisDirection) -> None:
        self._last_metrics = metrics
        self._last_axis_direction = axis_direction
        self.notify_listeners()

    def dispose(self) -> None:
        self.fadeout_opacity_animation.remove_listener(self.notify_listeners)
        logger.debug("ScrollbarPainter disposed (had metrics: %s)", self._last_metrics is not None)
        super().dispose()

    # --------- paint ---------
    @property
    def _paint(self) -> Paint:
        return Paint(faded(self.color, self.fadeout_opacity_animation.value))

    def _get_thumb_x(self, size: Size) -> float:
        assert self.text_direction is not None, "vertical scrollbar needs a text_direction"
        if self.text_direction is TextDirection.RTL:
            return self.cross_axis_margin
        return size[0] - self.thickness - self.cross_axis_margin

    def _draw_thumb(self, canvas: Canvas, rect: ThumbRect) -> None:
        if self.radius is None:
            canvas.draw_rect(rect, self._paint)
        else:
            canvas.draw_rrect(rect, self.radius, self._paint)

    def _paint_vertical_thumb(self, canvas: Canvas, size: Size, thumb_offset: float, thumb_extent: float) -> None:
        self._draw_thumb(canvas, ThumbRect(self._get_thumb_x(size), thumb_offset, self.thickness, thumb_extent))

    def _paint_horizontal_thumb(self, canvas: Canvas, size: Size, thumb_offset: float, thumb_extent: float) -> None:
        self._draw_thumb(canvas, ThumbRect(thumb_offset, size[1] - self.thickness, thumb_extent, self.thickness))

    def _paint_thumb(self, before: float, inside: float, after: float, viewport: float,
                     canvas: Canvas, size: Size,
                     painter: Callable[[Canvas, Size, float, float], None]) -> None:
        thumb_offset, thumb_extent = thumb_geometry(
            before, inside, after, viewport,
            main_axis_margin=self.main_axis_margin,
            min_length=self.min_length,
            min_overscroll_length=self.min_overscroll_length,
        )
        painter(canvas, size, thumb_offset, thumb_extent)

    def paint(self, canvas: Canvas, size: Size) -> None:
        m, direction = self._last_metrics, self._last_axis_direction
        if m is None or direction is None or self.fadeout_opacity_animation.value == 0.0:
            return

        w, h = size
        if direction.axis is Axis.VERTICAL:
            viewport, painter = h, self._paint_vertical_thumb
        else:
            viewport, painter = w, self._paint_horizontal_thumb
        # collapsed layout, nothing to place the thumb in
        if viewport <= 0:
            return

        before, after = m.extent_before(), m.extent_after()
        if direction.is_reversed:
            before, after = after, before
        self._paint_thumb(before, m.extent_inside(), after, viewport, canvas, size, painter)

    def hit_test(self, position: Tuple[float, float]) -> bool:
        return False

    def should_repaint(self, old: object) -> bool:
        # min_overscroll_length is not compared; matches the long-standing behavior
        if not isinstance(old, ScrollbarPainter):
            return False
        return (self.color != old.color
                or self.text_direction != old.text_direction
                or self.thickness != old.thickness
                or self.fadeout_opacity_animation is not old.fadeout_opacity_animation
                or self.main_axis_margin != old.main_axis_margin
                or self.cross_axis_margin != old.cross_axis_margin
                or self.radius != old.radius
                or self.min_length != old.min_length)
