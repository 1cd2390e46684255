from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownUnitError


@dataclass(frozen=True, kw_only=True)
class ImplementorEntry:
    """One "impl Trait for Type" line shown on a trait page.

    Notes:
    - `*_href` values are link targets relative to the documentation root.
    - `*_path` values are the fully qualified item paths (`rand::Rng`); the
      generator puts them in the link title and they are optional.
    - `kind` is the implementing item's kind as the generator classifies it
      (`struct`, `enum`, `union`, `primitive`, ...).
    """

    trait: str
    trait_href: str
    implementor: str
    implementor_href: str
    trait_path: str | None = None
    implementor_path: str | None = None
    kind: str = "struct"


# Library unit id -> entries in render order.
ImplementorMap = Mapping[str, tuple[ImplementorEntry, ...]]


def build_implementor_map(units: Mapping[str, Iterable[ImplementorEntry]]) -> ImplementorMap:
    """Freeze `units` into a read-only ImplementorMap.

    Every unit key is kept, including units without implementors, so a lookup
    of a known unit always yields a (possibly empty) tuple.
    """

    return MappingProxyType({str(unit): tuple(entries) for unit, entries in units.items()})


def count_implementors(implementors: ImplementorMap) -> int:
    return sum(len(entries) for entries in implementors.values())


def lookup_unit(implementors: ImplementorMap, unit: str, *, trait: str = "") -> tuple[ImplementorEntry, ...]:
    try:
        return implementors[unit]
    except KeyError:
        raise UnknownUnitError(trait, unit) from None
