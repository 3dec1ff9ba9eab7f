"""Ant type registry with auto-discovery.

Import this package to access the full registry::

    from antdefense.units import get_type, all_types

    thrower_cls = get_type("thrower")   # -> ThrowerAnt class
    print(thrower_cls.food_cost)        # 4
    ant = thrower_cls()

The registry is populated on first lookup by walking every submodule
under ``antdefense.units.ants`` and collecting concrete ``Ant``
subclasses.  Discovery is deferred because some ant types build their
own ``Location`` objects and the simulation package imports this one.
"""

from __future__ import annotations

import importlib
import pkgutil
from typing import Optional

from antdefense.units.base import Ant, Bee, Insect, UnitRole

__all__ = [
    "Ant",
    "Bee",
    "Insect",
    "UnitRole",
    "get_type",
    "all_types",
    "type_ids",
]

# ---------------------------------------------------------------------------
# Internal registry
# ---------------------------------------------------------------------------
_registry: dict[str, type[Ant]] = {}


def _discover() -> None:
    """Walk the ants subpackage and register concrete Ant subclasses."""
    package = importlib.import_module("antdefense.units.ants")
    for _, modname, _ in pkgutil.walk_packages(package.__path__, package.__name__ + "."):
        mod = importlib.import_module(modname)
        for attr_name in dir(mod):
            obj = getattr(mod, attr_name)
            if (
                isinstance(obj, type)
                and issubclass(obj, Ant)
                and obj is not Ant
                and "type_id" in vars(obj)
            ):
                _registry[obj.type_id] = obj


def _ensure_registry() -> dict[str, type[Ant]]:
    if not _registry:
        _discover()
    return _registry


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_type(type_id: str) -> Optional[type[Ant]]:
    """Return the Ant class for *type_id* (case-insensitive), or ``None``."""
    return _ensure_registry().get(type_id.strip().lower())


def all_types() -> list[type[Ant]]:
    """Return every registered Ant class (stable order by type_id)."""
    registry = _ensure_registry()
    return [registry[k] for k in sorted(registry)]


def type_ids() -> list[str]:
    """Sorted list of deployable ant type ids."""
    return sorted(_ensure_registry())
