"""Transform registry — each pipeline stage is a function registered via decorator.

Usage:
    @transform(id="T3.01", layer=Layer.FILTER, dependencies=["T2.01"])
    def parity_filter(image: Image) -> None:
        image.grid = filter_odd_squares(image.grid)

Stages run in ``(layer, id)`` order. A dependency must come strictly earlier
in that order, so the declared edges only check the layering instead of
deciding it.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from identicon.engine.context import Image

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    DIGEST = 0
    COLOR = 1
    GRID = 2
    FILTER = 3
    RASTER = 4


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["Image"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def sort_key(self) -> tuple[Layer, str]:
        return (self.layer, self.id)


class TransformRegistry:
    """Stages keyed by id."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        return sorted(
            (s for s in self._transforms.values() if s.layer == layer),
            key=lambda s: s.id,
        )

    def stages(self) -> list[TransformSpec]:
        """All stages in execution order.

        Raises:
            ValueError: a dependency is unknown or does not run before its dependent.
        """
        ordered = sorted(self._transforms.values(), key=lambda s: s.sort_key)
        for spec in ordered:
            for dep_id in spec.dependencies:
                dep = self._transforms.get(dep_id)
                if dep is None:
                    raise ValueError(f"{spec.id} depends on unknown transform {dep_id}")
                if dep.sort_key >= spec.sort_key:
                    raise ValueError(f"{spec.id} depends on {dep_id}, which runs after it")
        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Register ``fn`` as a pipeline stage."""

    def decorator(fn: Callable[["Image"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
