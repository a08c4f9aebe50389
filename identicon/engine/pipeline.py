"""Pipeline orchestrator — runs transforms in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from identicon.engine.context import Image
from identicon.engine.registry import Layer, TransformRegistry, TransformSpec, get_registry
from identicon.errors import PipelineError

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, image: Image) -> Image:
        """Run the full pipeline on the given image record.

        Stops at the first failing transform and raises ``PipelineError``.
        """
        start = time.perf_counter()
        ordered = self.registry.stages()

        logger.debug("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            self._run_one(spec, image)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Identicon for %r: %d cells filled, %d transforms in %.1fms",
            image.input,
            image.filled_cells,
            len(image.completed_transforms),
            total,
        )
        return image

    def run_layer(self, image: Image, layer: Layer) -> Image:
        """Run only transforms in a specific layer."""
        for spec in self.registry.get_layer(layer):
            self._run_one(spec, image)
        return image

    def _run_one(self, spec: TransformSpec, image: Image) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(image)
        except Exception as e:
            image.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)
            raise PipelineError(spec.id, str(e)) from e
        image.completed_transforms.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.2fms", spec.id, elapsed)


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"identicon.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline with every stage registered."""
    register_transforms()
    return Pipeline()


def generate(text: str) -> Image:
    """Hash, color, grid, filter and rasterize ``text`` in one call."""
    return create_pipeline().run(Image(input=text))
