from __future__ import annotations

from .fragments import parse_fragment, render_fragment
from .script import load_implementors_script, parse_implementors_script, render_implementors_script

__all__ = [
    "parse_fragment",
    "render_fragment",
    "render_implementors_script",
    "parse_implementors_script",
    "load_implementors_script",
]
