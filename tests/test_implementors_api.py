from __future__ import annotations

from fastapi.testclient import TestClient

from docimpl.api import create_api_app
from docimpl.api.serializers import entry_to_dict
from docimpl.implementors.store import ImplementorStore
from docimpl.sdk.client import _entry_from_dict


def _client() -> TestClient:
    return TestClient(create_api_app(ImplementorStore()))


def test_healthz() -> None:
    res = _client().get("/healthz")
    assert res.status_code == 200
    assert res.json() == {"ok": True}


def test_list_pages() -> None:
    res = _client().get("/api/implementors")
    assert res.status_code == 200
    assert res.json() == [{"trait": "rand/trait.Rng", "units": 33, "implementors": 5}]


def test_get_page_keeps_empty_units() -> None:
    res = _client().get("/api/implementors/rand/trait.Rng")
    assert res.status_code == 200
    data = res.json()
    assert data["trait"] == "rand/trait.Rng"
    assert data["units"]["bytes"] == []
    crypto = data["units"]["crypto"]
    assert len(crypto) == 1
    assert crypto[0]["implementorPath"] == "crypto::fortuna::Fortuna"
    assert crypto[0]["html"].startswith("impl <a class='trait'")


def test_get_unit_and_unknown_unit() -> None:
    client = _client()
    res = client.get("/api/implementors/rand/trait.Rng/units/network")
    assert res.status_code == 200
    assert [e["implementor"] for e in res.json()] == ["Fortuna"]

    assert client.get("/api/implementors/rand/trait.Rng/units/rand").json() == []
    assert client.get("/api/implementors/rand/trait.Rng/units/missing").status_code == 404


def test_unknown_trait_is_404() -> None:
    assert _client().get("/api/implementors/serde/trait.Serialize").status_code == 404
    assert _client().get("/implementors/serde/trait.Serialize.js").status_code == 404


def test_data_script_endpoint() -> None:
    res = _client().get("/implementors/rand/trait.Rng.js")
    assert res.status_code == 200
    assert "javascript" in res.headers.get("content-type", "")
    assert 'implementors["verification"]' in res.text
    assert "window.pending_implementors = implementors;" in res.text


def test_entry_dict_is_readable_by_client() -> None:
    from docimpl.implementors.rand.trait_rng import IMPLEMENTORS

    entry = IMPLEMENTORS["crypto"][0]
    assert _entry_from_dict(entry_to_dict(entry)) == entry


def test_no_cross_origin_headers() -> None:
    res = _client().get("/healthz", headers={"Origin": "http://localhost:5173"})
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers
