from __future__ import annotations

import logging
import os
import socket
import threading
import time
import webbrowser
from dataclasses import dataclass

import uvicorn

from ..core.entries import ImplementorMap
from ..implementors.store import IMPLEMENTOR_STORE
from ..sdk.client import DocimplClient
from .app import create_app


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocimplServer:
    host: str
    port: int
    url: str

    def get_implementors(self, trait: str) -> ImplementorMap:
        """Return a trait page's map straight from the in-process store."""
        return IMPLEMENTOR_STORE.get(trait)

    def _as_client(self) -> DocimplClient:
        return DocimplClient(self.url.rstrip("/"))

    def get_script(self, trait: str, *, timeout_s: float = 10.0) -> str:
        return self._as_client().get_script(trait, timeout_s=timeout_s)


def _attach_candidates(host: str, port: int) -> list[str]:
    """Server URLs worth probing before starting a new one, in priority order."""

    candidates: list[str] = []
    env_url = os.getenv("DOCIMPL_URL", "").strip()
    if env_url:
        candidates.append(env_url if "://" in env_url else f"http://{env_url}")
    # port=0 means "pick a free port", so there is nothing to attach to.
    if port != 0:
        candidates.append(f"http://{host}:{port}")
    return [c.rstrip("/") for c in candidates]


def _bind_port(host: str, port: int) -> int:
    if port != 0:
        return port
    with socket.create_server((host, 0)) as s:
        return int(s.getsockname()[1])


def run(
    *,
    host: str = "127.0.0.1",
    port: int = 0,
    open_browser: bool = True,
    log_level: str | None = None,
    access_log: bool = False,
    new_server: bool = False,
    connect_timeout_s: float = 0.2,
) -> DocimplServer | DocimplClient:
    """Start docimpl (API + bundled page) with a single Python call.

    Behavior:
    - Unless `new_server=True`, attach (client mode) to the first live server among
      DOCIMPL_URL and, when `port != 0`, http://{host}:{port}.
    - Otherwise start a new local server and return a `DocimplServer`.

    `log_level` defaults to DOCIMPL_LOG_LEVEL, then "info".
    """

    log_level = (log_level or os.getenv("DOCIMPL_LOG_LEVEL") or "info").lower()

    if not new_server:
        for url in _attach_candidates(host, port):
            client = DocimplClient(url)
            if client.ping(timeout_s=connect_timeout_s):
                logger.info("attaching to %s", url)
                if open_browser:
                    webbrowser.open(url + "/")
                return client

    port = _bind_port(host, port)
    config = uvicorn.Config(create_app(), host=host, port=port, log_level=log_level, access_log=access_log)
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    # Wait for the socket so a subsequent client ping doesn't race with startup.
    deadline = time.monotonic() + 5.0
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.01)

    url = f"http://{host}:{port}/"
    logger.info("serving on %s", url)
    if open_browser:
        webbrowser.open(url)

    return DocimplServer(host=host, port=port, url=url)
