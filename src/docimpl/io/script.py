from __future__ import annotations

"""Browser data-script format for implementor maps.

A trait page loads `implementors/<crate>/trait.<Name>.js`, which builds the
map and then either hands it to `window.register_implementors` (the UI loaded
first) or parks it in `window.pending_implementors` for the UI to drain.
"""

import json
import re
from pathlib import Path

from ..core.entries import ImplementorMap, build_implementor_map
from .fragments import parse_fragment, render_fragment


_PROLOGUE = "(function() {var implementors = {};\n"
_EPILOGUE = (
    "\n"
    "            if (window.register_implementors) {\n"
    "                window.register_implementors(implementors);\n"
    "            } else {\n"
    "                window.pending_implementors = implementors;\n"
    "            }\n"
    "        \n"
    "})()\n"
)
_UNIT_LINE_RE = re.compile(r'^implementors\[(?P<unit>"(?:[^"\\]|\\.)*")\] = \[(?P<items>.*)\];\s*$')


def _js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_implementors_script(implementors: ImplementorMap) -> str:
    lines: list[str] = []
    for unit, entries in implementors.items():
        items = "".join(_js_string(render_fragment(e)) + "," for e in entries)
        lines.append(f"implementors[{_js_string(unit)}] = [{items}];\n")
    return _PROLOGUE + "".join(lines) + _EPILOGUE


def parse_implementors_script(text: str) -> ImplementorMap:
    """Read the unit lines of a generated data script back into an ImplementorMap.

    Lines that are not `implementors["unit"] = [...];` assignments are ignored.
    """

    units: dict[str, list] = {}
    for line in text.splitlines():
        m = _UNIT_LINE_RE.match(line.strip())
        if m is None:
            continue
        unit = json.loads(m.group("unit"))
        items = m.group("items").strip().rstrip(",")
        fragments = json.loads(f"[{items}]")
        units[unit] = [parse_fragment(f) for f in fragments]
    return build_implementor_map(units)


def load_implementors_script(path: str | Path) -> ImplementorMap:
    return parse_implementors_script(Path(path).read_text(encoding="utf-8"))
