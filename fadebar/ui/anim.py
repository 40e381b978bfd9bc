from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Any

from fadebar.ui.notifier import ValueNotifier

if TYPE_CHECKING:
    from fadebar.ui.style import ScrollbarStyle

def ease_linear(t: float) -> float: return t
def ease_out_cubic(t: float) -> float: t = max(0.0, min(1.0, t)); return 1 - (1 - t) ** 3

@dataclass
class Tween:
    obj: Any
    attr: str
    start: float
    end: float
    duration: float
    ease: Callable[[float], float] = ease_out_cubic
    t: float = 0.0
    on_done: Callable[[], None] | None = None

    def update(self, dt: float) -> bool:
        self.t += dt
        u = 1.0 if self.duration <= 0 else max(0.0, min(1.0, self.t / self.duration))
        v = self.start + (self.end - self.start) * self.ease(u)
        setattr(self.obj, self.attr, v)
        finished = (u >= 1.0)
        if finished and self.on_done:
            self.on_done()
        return finished

class Animator:
    def __init__(self):
        self._tweens: list[Tween] = []

    def add(self, tween: Tween) -> None:
        self._tweens.append(tween)

    def cancel(self, obj: Any, attr: str) -> None:
        self._tweens[:] = [tw for tw in self._tweens if not (tw.obj is obj and tw.attr == attr)]

    @property
    def active(self) -> bool:
        return bool(self._tweens)

    def update(self, dt: float) -> None:
        self._tweens[:] = [tw for tw in self._tweens if not tw.update(dt)]


class FadeAnimation(ValueNotifier[float]):
    """
    Opacity signal for an overlay scrollbar: 1.0 = fully shown, 0.0 = faded out.

    show() snaps to opaque and cancels a pending fade. fade_out() waits `delay`
    seconds, then tweens `value` down to 0 over `duration`. Drive it with update(dt).
    """
    def __init__(self, value: float = 0.0, *, duration: float = 0.3, delay: float = 0.6,
                 ease: Callable[[float], float] = ease_linear):
        super().__init__(max(0.0, min(1.0, float(value))))
        self.duration = duration
        self.delay = delay
        self.ease = ease
        self._animator = Animator()
        self._wait: float | None = None

    @classmethod
    def from_style(cls, style: "ScrollbarStyle", value: float = 0.0) -> "FadeAnimation":
        return cls(value, duration=style.fade_duration, delay=style.fade_delay)

    @property
    def is_fading(self) -> bool:
        return self._wait is not None or self._animator.active

    def show(self) -> None:
        self._wait = None
        self._animator.cancel(self, "value")
        self.value = 1.0

    def fade_out(self) -> None:
        self._animator.cancel(self, "value")
        self._wait = max(0.0, self.delay)

    def update(self, dt: float) -> None:
        if self._wait is not None:
            self._wait -= dt
            if self._wait > 0.0:
                return
            # carry the overshoot into the tween
            overshoot = -self._wait
            self._wait = None
            self._animator.add(Tween(self, "value", self.value, 0.0, self.duration, ease=self.ease))
            dt = overshoot
        self._animator.update(dt)
