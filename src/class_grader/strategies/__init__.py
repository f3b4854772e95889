"""Strategy registry with decorator-based registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import BaseStrategy

_REGISTRY: dict[str, type[BaseStrategy]] = {}


def register(cls: type[BaseStrategy]) -> type[BaseStrategy]:
    """Class decorator that registers a strategy by its ``name`` attribute."""
    _REGISTRY[cls.name] = cls
    return cls


def get_strategy(name: str) -> BaseStrategy:
    """Instantiate and return a registered strategy by name."""
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise KeyError(f"Unknown strategy {name!r}. Available: {available}")
    return _REGISTRY[name]()


def list_strategies() -> list[dict[str, str]]:
    """Return metadata for all registered strategies."""
    return [
        {"name": _REGISTRY[name].name, "description": _REGISTRY[name].description}
        for name in sorted(_REGISTRY)
    ]


# Import strategy modules to trigger registration.
from . import answers, categories, patterns  # noqa: E402, F401
