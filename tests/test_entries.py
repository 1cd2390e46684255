from __future__ import annotations

import pytest

from docimpl.core import ImplementorEntry, build_implementor_map, count_implementors, lookup_unit
from docimpl.errors import UnknownUnitError


def _entry() -> ImplementorEntry:
    return ImplementorEntry(
        trait="Rng",
        trait_href="rand/trait.Rng.html",
        implementor="Fortuna",
        implementor_href="crypto/fortuna/struct.Fortuna.html",
    )


def test_empty_unit_is_present_and_empty() -> None:
    m = build_implementor_map({"bytes": [], "crypto": [_entry()]})

    assert "bytes" in m
    assert m["bytes"] == ()
    assert lookup_unit(m, "bytes") == ()
    assert "absent" not in m


def test_lookup_of_absent_unit_raises() -> None:
    m = build_implementor_map({"bytes": []})
    with pytest.raises(UnknownUnitError) as ex:
        lookup_unit(m, "nope", trait="rand/trait.Rng")
    assert isinstance(ex.value, KeyError)
    assert "nope" in str(ex.value)


def test_map_is_read_only() -> None:
    m = build_implementor_map({"crypto": [_entry()]})
    with pytest.raises(TypeError):
        m["other"] = ()  # type: ignore[index]
    assert isinstance(m["crypto"], tuple)


def test_source_lists_are_copied() -> None:
    source = [_entry()]
    m = build_implementor_map({"crypto": source})
    source.append(_entry())
    assert len(m["crypto"]) == 1


def test_count_and_empty_map() -> None:
    assert count_implementors(build_implementor_map({})) == 0
    assert count_implementors(build_implementor_map({"a": [_entry(), _entry()], "b": []})) == 2
