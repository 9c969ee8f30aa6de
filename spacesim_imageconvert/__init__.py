"""
SPACESIM Image Converter
Rebuilds SPACESIM .R8 images and .PLT palettes as BMP files
"""

__version__ = "1.0.0"

from .color_utils import (
    ExpandedColor,
    LegacyColor,
    expand_palette,
    expand_to_8bit,
    quantize_palette,
    quantize_to_6bit,
)
from .palette_loader import load_index_raster, load_palette, palette_from_bytes
from .palette_utils import assemble_palette, overlay_at
from .raster import PillowRaster, RasterSink
from .renderer import render_indexed_image, render_swatch, save_palette_swatches

__all__ = [
    "ExpandedColor",
    "LegacyColor",
    "PillowRaster",
    "RasterSink",
    "assemble_palette",
    "expand_palette",
    "expand_to_8bit",
    "load_index_raster",
    "load_palette",
    "overlay_at",
    "palette_from_bytes",
    "quantize_palette",
    "quantize_to_6bit",
    "render_indexed_image",
    "render_swatch",
    "save_palette_swatches",
]
