from __future__ import annotations

from typing import Any

from ..core.entries import ImplementorEntry, ImplementorMap, count_implementors
from ..io.fragments import render_fragment


def entry_to_dict(entry: ImplementorEntry) -> dict[str, Any]:
    return {
        "trait": entry.trait,
        "traitHref": entry.trait_href,
        "traitPath": entry.trait_path,
        "implementor": entry.implementor,
        "implementorHref": entry.implementor_href,
        "implementorPath": entry.implementor_path,
        "kind": entry.kind,
        "html": render_fragment(entry),
    }


def implementor_map_to_dict(implementors: ImplementorMap) -> dict[str, list[dict[str, Any]]]:
    return {unit: [entry_to_dict(e) for e in entries] for unit, entries in implementors.items()}


def page_summary(trait: str, implementors: ImplementorMap) -> dict[str, Any]:
    return {
        "trait": trait,
        "units": len(implementors),
        "implementors": count_implementors(implementors),
    }
