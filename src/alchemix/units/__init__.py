"""
alchemix.units
==============

Unit table, states and name lookup. ``alchemix.units.u`` is a namespace over
the sealed default registry::

    >>> from alchemix.units import u
    >>> u.Vial, u("pinches")
"""
from typing import Any


def __getattr__(name: str) -> Any:
    # The registry module is imported on first access to ``u`` only.
    if name != "u":
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from alchemix.units.registry import DEFAULT_REGISTRY

    return DEFAULT_REGISTRY.as_namespace()


def __dir__() -> list[str]:
    return sorted([*globals(), "u"])
