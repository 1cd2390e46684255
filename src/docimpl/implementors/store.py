from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..core.entries import ImplementorMap
from . import list_traits, normalize_trait, read_page


logger = logging.getLogger(__name__)


class ImplementorStore:
    """Server-side cache of loaded trait pages.

    Pages are loaded on first access and kept for the process lifetime.
    """

    def __init__(self, loader: Callable[[str], ImplementorMap] = read_page) -> None:
        self._lock = threading.RLock()
        self._loader = loader
        self._pages: dict[str, ImplementorMap] = {}

    def traits(self) -> list[str]:
        return list_traits()

    def get(self, trait: str) -> ImplementorMap:
        key = normalize_trait(trait)
        with self._lock:
            cached = self._pages.get(key)
            if cached is not None:
                return cached
            implementors = self._loader(key)
            self._pages[key] = implementors
            logger.info("loaded %s (%d units)", key, len(implementors))
            return implementors

    def reset(self) -> None:
        with self._lock:
            self._pages.clear()


IMPLEMENTOR_STORE = ImplementorStore()
