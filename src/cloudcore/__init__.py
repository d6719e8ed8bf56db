"""cloudcore — shared cloud contracts, an async HTTP client and object helpers."""

from __future__ import annotations

__version__ = "0.1.0"
