from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

MIN_THUMB_EXTENT = 18.0

class TextDirection(Enum):
    LTR = "ltr"
    RTL = "rtl"

    @classmethod
    def parse(cls, raw: "str | TextDirection | None") -> Optional["TextDirection"]:
        if raw is None or isinstance(raw, TextDirection):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise ValueError(f"unknown text_direction {raw!r} (expected 'ltr' or 'rtl')") from None

@dataclass(frozen=True)
class ScrollbarStyle:
    color: tuple[int, int, int, int] = (0, 0, 0, 117)
    text_direction: Optional[TextDirection] = TextDirection.LTR
    thickness: float = 6.0
    main_axis_margin: float = 0.0
    cross_axis_margin: float = 2.0
    radius: Optional[float] = 3.0        # None = square corners
    min_length: float = MIN_THUMB_EXTENT
    min_overscroll_length: float = MIN_THUMB_EXTENT
    fade_duration: float = 0.3           # seconds
    fade_delay: float = 0.6              # seconds idle before fading
    def derive(self, **overrides) -> "ScrollbarStyle":
        """ Create a variant style without mutating the base. """
        return replace(self, **overrides)
