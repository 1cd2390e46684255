from __future__ import annotations

import logging

from fastapi import FastAPI

from ..api import create_api_app
from ..implementors.store import ImplementorStore
from .web import mount_frontend


logger = logging.getLogger(__name__)


def create_app(store: ImplementorStore | None = None) -> FastAPI:
    """Create the full app: API + (optional) bundled frontend."""

    app = create_api_app(store)

    # API-only still works when the package data is missing.
    try:
        mount_frontend(app)
    except FileNotFoundError as e:
        logger.warning("%s", e)

    return app


# Convenience for uvicorn: `uvicorn docimpl.runtime.app:app`
app = create_app()
