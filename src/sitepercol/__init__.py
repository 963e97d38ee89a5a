"""Site percolation on square grids and threshold estimation."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = ["Percolation", "PercolationStats", "UnionFind"]

# Public name -> defining module; resolved on first attribute access.
_LOCATIONS = {
    "Percolation": "sitepercol.grid",
    "PercolationStats": "sitepercol.stats",
    "UnionFind": "sitepercol.union_find",
}


def __getattr__(name: str) -> Any:
    try:
        module_name = _LOCATIONS[name]
    except KeyError:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from None
    return getattr(import_module(module_name), name)


def __dir__() -> list[str]:
    return sorted(set(globals()) | set(__all__))
