from __future__ import annotations

from fastapi import FastAPI, HTTPException, Response

from ..core.entries import lookup_unit
from ..errors import UnknownTraitError, UnknownUnitError
from ..implementors.store import IMPLEMENTOR_STORE, ImplementorStore
from ..io.script import render_implementors_script
from .serializers import entry_to_dict, implementor_map_to_dict, page_summary


def create_api_app(store: ImplementorStore | None = None) -> FastAPI:
    app = FastAPI(title="docimpl", version="0.1.0")
    store = store or IMPLEMENTOR_STORE

    def _page(trait: str):
        try:
            return store.get(trait)
        except UnknownTraitError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/implementors")
    def list_pages() -> list[dict]:
        return [page_summary(t, store.get(t)) for t in store.traits()]

    @app.get("/api/implementors/{crate}/{trait}")
    def get_page(crate: str, trait: str) -> dict:
        key = f"{crate}/{trait}"
        implementors = _page(key)
        return {"trait": key, "units": implementor_map_to_dict(implementors)}

    @app.get("/api/implementors/{crate}/{trait}/units/{unit}")
    def get_unit(crate: str, trait: str, unit: str) -> list[dict]:
        key = f"{crate}/{trait}"
        implementors = _page(key)
        try:
            entries = lookup_unit(implementors, unit, trait=key)
        except UnknownUnitError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return [entry_to_dict(e) for e in entries]

    @app.get("/implementors/{crate}/{script}")
    def get_script(crate: str, script: str) -> Response:
        if not script.endswith(".js"):
            raise HTTPException(status_code=404, detail="Not a data script")
        implementors = _page(f"{crate}/{script}")
        return Response(
            content=render_implementors_script(implementors),
            media_type="application/javascript",
            headers={"Cache-Control": "no-store"},
        )

    return app


__all__ = ["create_api_app"]
