from __future__ import annotations

from typing import Any

import httpx

from ..core.entries import ImplementorEntry, ImplementorMap, build_implementor_map


def _entry_from_dict(d: dict[str, Any]) -> ImplementorEntry:
    return ImplementorEntry(
        trait=str(d["trait"]),
        trait_href=str(d["traitHref"]),
        trait_path=d.get("traitPath"),
        implementor=str(d["implementor"]),
        implementor_href=str(d["implementorHref"]),
        implementor_path=d.get("implementorPath"),
        kind=str(d.get("kind") or "struct"),
    )


class DocimplClient:
    """HTTP client for a running docimpl server.

    Contract (current):
    - GET /api/implementors
    - GET /api/implementors/{crate}/{trait}
    - GET /implementors/{crate}/{trait}.js
    """

    def __init__(self, base_url: str = "http://127.0.0.1:8000") -> None:
        self.base_url = base_url.rstrip("/")

    def _get(self, path: str, *, timeout_s: float) -> httpx.Response:
        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(path)
        if res.status_code >= 400:
            raise RuntimeError(f"GET {path} failed: {res.status_code} {res.text}")
        return res

    def ping(self, *, timeout_s: float = 0.2) -> bool:
        """True if a docimpl server answers `/healthz` at `base_url`."""

        try:
            with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
                res = client.get("/healthz")
            return res.status_code == 200 and bool(res.json().get("ok"))
        except (httpx.HTTPError, ValueError):
            return False

    def list_traits(self, *, timeout_s: float = 10.0) -> list[dict[str, Any]]:
        return list(self._get("/api/implementors", timeout_s=timeout_s).json())

    def get_implementors(self, trait: str, *, timeout_s: float = 10.0) -> ImplementorMap:
        """Fetch a trait page as an ImplementorMap (unit order as served)."""

        data = self._get(f"/api/implementors/{trait.strip('/')}", timeout_s=timeout_s).json()
        units = data.get("units") or {}
        return build_implementor_map({unit: [_entry_from_dict(e) for e in entries] for unit, entries in units.items()})

    def get_script(self, trait: str, *, timeout_s: float = 10.0) -> str:
        return self._get(f"/implementors/{trait.strip('/')}.js", timeout_s=timeout_s).text
