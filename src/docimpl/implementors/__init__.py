from __future__ import annotations

"""Trait pages with generated implementor data.

Each page is a module that builds an ImplementorMap and exposes
`publish(cell)`. Loading a page means running that publish against a hand-off
cell and attaching a consumer to the same cell, in either order.
"""

import importlib
from types import ModuleType

from ..core.entries import ImplementorMap
from ..core.handoff import HandoffCell, HandoffState, ImplementorCallback
from ..errors import UnknownTraitError


# Trait page path (as used in the documentation tree) -> data module.
TRAIT_PAGES: dict[str, str] = {
    "rand/trait.Rng": "docimpl.implementors.rand.trait_rng",
}


def normalize_trait(trait: str) -> str:
    t = str(trait).strip().strip("/")
    for suffix in (".js", ".html"):
        if t.endswith(suffix):
            t = t[: -len(suffix)]
    return t


def list_traits() -> list[str]:
    return sorted(TRAIT_PAGES)


def page_module(trait: str) -> ModuleType:
    key = normalize_trait(trait)
    module_name = TRAIT_PAGES.get(key)
    if module_name is None:
        raise UnknownTraitError(key)
    return importlib.import_module(module_name)


def load_page(
    trait: str,
    callback: ImplementorCallback,
    *,
    cell: HandoffCell | None = None,
    consumer_first: bool = False,
) -> HandoffState:
    """Load a trait page's data into `cell` and attach `callback` as its consumer.

    A fresh cell is used unless one is given. `consumer_first` picks which side
    touches the cell first; delivery happens either way.
    """

    module = page_module(trait)
    if cell is None:
        cell = HandoffCell()
    if consumer_first:
        cell.install_consumer(callback)
        return module.publish(cell)
    module.publish(cell)
    return cell.install_consumer(callback)


def read_page(trait: str) -> ImplementorMap:
    received: list[ImplementorMap] = []
    load_page(trait, received.append)
    return received[0]


__all__ = [
    "TRAIT_PAGES",
    "normalize_trait",
    "list_traits",
    "page_module",
    "load_page",
    "read_page",
]
