from __future__ import annotations

import pytest

from docimpl.core import HandoffCell, HandoffState
from docimpl.errors import UnknownTraitError
from docimpl.implementors import list_traits, load_page, normalize_trait, read_page
from docimpl.implementors.store import ImplementorStore


def test_known_traits() -> None:
    assert list_traits() == ["rand/trait.Rng"]
    assert normalize_trait("/rand/trait.Rng.js") == "rand/trait.Rng"
    assert normalize_trait("rand/trait.Rng.html") == "rand/trait.Rng"


@pytest.mark.parametrize("consumer_first", [False, True])
def test_load_page_delivers_in_either_order(consumer_first: bool) -> None:
    cell = HandoffCell()
    received: list = []

    state = load_page("rand/trait.Rng", received.append, cell=cell, consumer_first=consumer_first)

    assert state is HandoffState.DELIVERED
    assert len(received) == 1
    assert len(received[0]) == 33
    assert cell.pending is None


def test_unknown_trait_raises() -> None:
    with pytest.raises(UnknownTraitError):
        read_page("serde/trait.Serialize")


def test_store_loads_once() -> None:
    calls: list[str] = []

    def loader(trait: str):
        calls.append(trait)
        return read_page(trait)

    store = ImplementorStore(loader)
    a = store.get("rand/trait.Rng")
    b = store.get("rand/trait.Rng.js")

    assert a is b
    assert calls == ["rand/trait.Rng"]

    store.reset()
    store.get("rand/trait.Rng")
    assert len(calls) == 2
