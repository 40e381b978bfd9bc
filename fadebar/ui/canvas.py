from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

import pygame

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class ThumbRect:
    """ Float rectangle in device units; pygame.Rect is integer-only. """
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def to_pygame(self) -> pygame.Rect:
        x0, y0 = round(self.x), round(self.y)
        return pygame.Rect(x0, y0, max(0, round(self.right) - x0), max(0, round(self.bottom) - y0))


@dataclass(frozen=True)
class Paint:
    color: RGBA


def faded(color: RGBA, opacity: float) -> RGBA:
    """ Multiply the color's own alpha by `opacity` (0..1). """
    r, g, b, a = color
    alpha = int(round(a * opacity))
    return (r, g, b, max(0, min(255, alpha)))


class Canvas(Protocol):
    def draw_rect(self, rect: ThumbRect, paint: Paint) -> None: ...
    def draw_rrect(self, rect: ThumbRect, radius: float, paint: Paint) -> None: ...


class SurfaceCanvas:
    """
    Canvas over a pygame.Surface.

    Shapes are drawn into a per-pixel-alpha scratch layer and blitted, so
    translucent thumbs blend over what's already on the target instead of
    overwriting it.
    """
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def draw_rect(self, rect: ThumbRect, paint: Paint) -> None:
        self._draw(rect, paint, radius=0)

    def draw_rrect(self, rect: ThumbRect, radius: float, paint: Paint) -> None:
        self._draw(rect, paint, radius=max(0, int(round(radius))))

    def _draw(self, rect: ThumbRect, paint: Paint, radius: int) -> None:
        r = rect.to_pygame()
        if r.w <= 0 or r.h <= 0:
            return
        layer = pygame.Surface(r.size, pygame.SRCALPHA)
        pygame.draw.rect(layer, paint.color, layer.get_rect(), border_radius=radius)
        self.surface.blit(layer, r.topleft)
