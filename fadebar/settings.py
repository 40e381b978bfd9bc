from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from fadebar.ui.style import ScrollbarStyle, TextDirection

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).resolve().parent / "config" / "defaults.yaml"

@dataclass
class ScrollbarCfg:
    style: ScrollbarStyle = field(default_factory=ScrollbarStyle)
    source: Optional[str] = None       # file the values came from, None = built-in defaults


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def _opt_float(v: Any) -> Optional[float]:
    return None if v is None else float(v)

def load_ui_defaults(path: str | Path = DEFAULTS_PATH) -> Dict[str, Any]:
    """ Load scrollbar defaults from YAML. Raises if the file is missing or malformed. """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data

def build_scrollbar_style_from_defaults(defaults: Dict[str, Any]) -> ScrollbarStyle:
    base = ScrollbarStyle()
    sc = _get(defaults, "theme.scrollbar", {}) or {}

    return ScrollbarStyle(
        color                 = tuple(int(c) for c in sc.get("color", base.color)),
        text_direction        = TextDirection.parse(sc.get("text_direction", base.text_direction)),
        thickness             = float(sc.get("thickness", base.thickness)),
        main_axis_margin      = float(sc.get("main_axis_margin", base.main_axis_margin)),
        cross_axis_margin     = float(sc.get("cross_axis_margin", base.cross_axis_margin)),
        radius                = _opt_float(sc.get("radius", base.radius)),
        min_length            = float(sc.get("min_length", base.min_length)),
        min_overscroll_length = float(sc.get("min_overscroll_length", base.min_overscroll_length)),
        fade_duration         = float(_get(sc, "fade.duration", base.fade_duration)),
        fade_delay            = float(_get(sc, "fade.delay", base.fade_delay)),
    )

def load_settings(path: str | Path = DEFAULTS_PATH) -> ScrollbarCfg:
    p = Path(path)
    if not p.exists():
        logger.debug("No scrollbar settings at %s; using built-in defaults", p)
        return ScrollbarCfg()
    style = build_scrollbar_style_from_defaults(load_ui_defaults(p))
    if len(style.color) != 4:
        raise ValueError(f"theme.scrollbar.color must be RGBA, got {style.color!r}")
    return ScrollbarCfg(style=style, source=str(p))
