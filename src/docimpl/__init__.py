from __future__ import annotations

from .core.entries import ImplementorEntry, ImplementorMap, build_implementor_map
from .core.handoff import HANDOFF, HandoffCell, HandoffState, install_consumer, publish
from .implementors import list_traits, load_page, read_page
from .io.script import parse_implementors_script, render_implementors_script
from .runtime.server import DocimplServer, run
from .sdk.client import DocimplClient

__all__ = [
    "run",
    "DocimplServer",
    "DocimplClient",
    "ImplementorEntry",
    "ImplementorMap",
    "build_implementor_map",
    "HANDOFF",
    "HandoffCell",
    "HandoffState",
    "publish",
    "install_consumer",
    "list_traits",
    "load_page",
    "read_page",
    "render_implementors_script",
    "parse_implementors_script",
]
