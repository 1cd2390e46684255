from __future__ import annotations

from .client import DocimplClient

__all__ = ["DocimplClient"]
