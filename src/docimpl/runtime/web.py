from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles


def _mount_dist(app: FastAPI, *, dist_root: Path) -> None:
    index_path = dist_root / "index.html"
    assets_path = dist_root / "assets"

    if not index_path.exists():
        raise FileNotFoundError(str(index_path))

    if assets_path.exists():
        app.mount("/assets", StaticFiles(directory=str(assets_path)), name="assets")

    @app.get("/", include_in_schema=False)
    def _index() -> FileResponse:
        return FileResponse(str(index_path))


def mount_frontend(app: FastAPI) -> None:
    """Serve the bundled implementors page.

    The page is packaged under `docimpl/_frontend/dist/`. Its data scripts are
    served by the API (`/implementors/...`), not from disk.
    """

    from importlib import resources as importlib_resources

    dist_root = importlib_resources.files("docimpl._frontend").joinpath("dist")
    with importlib_resources.as_file(dist_root) as dist_root_path:
        dist_root_path = Path(dist_root_path)
        if (dist_root_path / "index.html").exists():
            _mount_dist(app, dist_root=dist_root_path)
            return

    raise FileNotFoundError(
        "docimpl frontend assets are missing. Expected packaged assets at docimpl/_frontend/dist."
    )
