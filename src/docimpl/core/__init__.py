from __future__ import annotations

from .entries import (
    ImplementorEntry,
    ImplementorMap,
    build_implementor_map,
    count_implementors,
    lookup_unit,
)
from .handoff import (
    HANDOFF,
    HandoffCell,
    HandoffState,
    ImplementorCallback,
    install_consumer,
    publish,
)

__all__ = [
    "ImplementorEntry",
    "ImplementorMap",
    "build_implementor_map",
    "count_implementors",
    "lookup_unit",
    "HANDOFF",
    "HandoffCell",
    "HandoffState",
    "ImplementorCallback",
    "install_consumer",
    "publish",
]
