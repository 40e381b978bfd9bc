from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Axis(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class AxisDirection(Enum):
    """ Direction in which scroll offsets grow. DOWN/RIGHT start at the top/left edge. """
    DOWN = "down"
    UP = "up"
    RIGHT = "right"
    LEFT = "left"

    @property
    def axis(self) -> Axis:
        return Axis.VERTICAL if self in (AxisDirection.DOWN, AxisDirection.UP) else Axis.HORIZONTAL

    @property
    def is_reversed(self) -> bool:
        return self in (AxisDirection.UP, AxisDirection.LEFT)


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


@dataclass(frozen=True)
class ScrollMetrics:
    """
    Immutable snapshot of a scroll position.

    pixels            - current scroll offset (may sit outside [min, max] while overscrolling)
    min_scroll_extent - smallest in-range offset (usually 0)
    max_scroll_extent - largest in-range offset (content - viewport)
    viewport_dimension- visible length along the scroll axis
    """
    pixels: float = 0.0
    min_scroll_extent: float = 0.0
    max_scroll_extent: float = 0.0
    viewport_dimension: float = 0.0

    @classmethod
    def from_content(cls, content: float, viewport: float, offset: float = 0.0) -> "ScrollMetrics":
        return cls(
            pixels=float(offset),
            min_scroll_extent=0.0,
            max_scroll_extent=max(0.0, float(content - viewport)),
            viewport_dimension=float(viewport),
        )

    def extent_before(self) -> float:
        return max(self.pixels - self.min_scroll_extent, 0.0)

    def extent_inside(self) -> float:
        vd = self.viewport_dimension
        return (vd
                - _clamp(self.min_scroll_extent - self.pixels, 0.0, vd)
                - _clamp(self.pixels - self.max_scroll_extent, 0.0, vd))

    def extent_after(self) -> float:
        return max(self.max_scroll_extent - self.pixels, 0.0)

