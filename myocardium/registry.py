"""Registry of material models by the names used in model input."""

from __future__ import annotations

from typing import Any, Callable

from .material import HolzapfelOgden

_MATERIALS: dict[str, Callable[..., Any]] = {}


def register_material(name: str, cls: Callable[..., Any]) -> None:
    """Register a material class under ``name``."""
    if not isinstance(name, str) or not name:
        raise ValueError("material name must be a non-empty string")
    if not callable(cls):
        raise TypeError(f"material class for '{name}' must be callable")
    if name in _MATERIALS:
        raise ValueError(f"material '{name}' is already registered")
    _MATERIALS[name] = cls


def create_material(name: str, **kwargs: Any) -> Any:
    """Create the material registered as ``name`` with the given parameters."""
    try:
        cls = _MATERIALS[name]
    except KeyError:
        raise KeyError(f"unknown material '{name}'") from None
    return cls(**kwargs)


def material_names() -> tuple[str, ...]:
    """Return the registered material names in sorted order."""
    return tuple(sorted(_MATERIALS))


register_material("Holzapfel_Ogden", HolzapfelOgden)