"""
Routine registry keyed by pixel type and dimensionality.

Each tool owns one registry holding a closed set of processing routines,
one per supported ``(component type, dimension)`` combination. Looking up
a combination without an entry raises ``KeyError`` listing what is
supported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from pximage.pixel_types import normalize_component_type

DispatchKey = Tuple[str, Optional[int]]


@dataclass
class RoutineEntry:
    component_type: str
    dimension: Optional[int]
    routine: Callable[..., Any]


def _format_key(key: DispatchKey) -> str:
    tag, dim = key
    return tag if dim is None else f"{tag} {dim}D"


class RoutineRegistry:
    """Registry for storing processing routines by pixel type and dimension.

    Registries created with ``keyed_by_dimension=False`` dispatch on the
    component type alone.
    """

    def __init__(self, name: str, *, keyed_by_dimension: bool = True) -> None:
        self.name = name
        self.keyed_by_dimension = keyed_by_dimension
        self._registry: Dict[DispatchKey, RoutineEntry] = {}

    # ------------------------------------------------------------------
    def _key(self, component_type: str, dimension: Optional[int]) -> DispatchKey:
        tag = normalize_component_type(component_type)
        if not self.keyed_by_dimension:
            return (tag, None)
        if dimension is None:
            raise ValueError(f"{self.name} routines are keyed by dimension; got dimension=None")
        return (tag, int(dimension))

    def register(
        self,
        component_type: str,
        dimension: Optional[int],
        routine: Callable[..., Any],
        *,
        overwrite: bool = False,
    ) -> None:
        key = self._key(component_type, dimension)
        if not overwrite and key in self._registry:
            raise KeyError(
                f"{self.name} routine for {_format_key(key)!r} already exists. "
                "Set overwrite=True to replace it."
            )
        self._registry[key] = RoutineEntry(
            component_type=key[0],
            dimension=key[1],
            routine=routine,
        )

    def get(self, component_type: str, dimension: Optional[int] = None) -> Callable[..., Any]:
        key = self._key(component_type, dimension)
        try:
            return self._registry[key].routine
        except KeyError as exc:
            available = ", ".join(self.available()) or "<empty>"
            raise KeyError(
                f"Unsupported {self.name} input: pixel type {_format_key(key)!r}. "
                f"Supported: {available}"
            ) from exc

    def supports(self, component_type: str, dimension: Optional[int] = None) -> bool:
        return self._key(component_type, dimension) in self._registry

    def available(self) -> List[str]:
        return [_format_key(key) for key in sorted(self._registry, key=lambda k: (k[1] or 0, k[0]))]

    def __len__(self) -> int:
        return len(self._registry)


def register_routine(
    registry: RoutineRegistry,
    component_type: str,
    dimension: Optional[int] = None,
    *,
    overwrite: bool = False,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator registering a routine for one pixel type / dimension combination.

    Examples
    --------
    >>> ROUTINES = RoutineRegistry("demo")
    >>> @register_routine(ROUTINES, "short", 3)
    ... def run_short_3d(config):
    ...     pass
    """

    def decorator(routine: Callable[..., Any]) -> Callable[..., Any]:
        registry.register(component_type, dimension, routine, overwrite=overwrite)
        return routine

    return decorator
