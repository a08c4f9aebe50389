"""Identicon transform engine."""

from identicon.engine.registry import transform, Layer, get_registry
from identicon.engine.context import Image
from identicon.engine.pipeline import Pipeline, create_pipeline, generate
from identicon.engine.layer0.t0_01_hash_input import hash_input
from identicon.engine.layer1.t1_01_pick_color import pick_color
from identicon.engine.layer2.t2_01_build_grid import build_grid, mirror_row
from identicon.engine.layer3.t3_01_filter_odd_squares import filter_odd_squares
from identicon.engine.layer4.t4_01_pixel_map import build_pixel_map
from identicon.engine.layer4.t4_02_draw_image import draw_image

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "Image",
    "Pipeline",
    "create_pipeline",
    "generate",
    "hash_input",
    "pick_color",
    "build_grid",
    "mirror_row",
    "filter_odd_squares",
    "build_pixel_map",
    "draw_image",
]
