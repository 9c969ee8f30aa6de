#!/usr/bin/env python3
"""
SPACESIM palette assembly
Builds the 256 register VGA DAC palette the way SPACESIM.EXE appears to:
default VGA colors as the background, the simulator palette above that,
and the per-image palette filling the top 128 registers.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Optional, TypeVar, Union

from .color_utils import ExpandedColor, LegacyColor, expand_palette
from .constants import (
    ALARM_COLOR,
    CUSTOM_PALETTE_ENTRIES,
    CUSTOM_PALETTE_OFFSET,
    DEBUG_BASENAME,
    PALETTE_ENTRIES,
    SIMULATOR_PALETTE_OFFSET,
    VGA_PALETTE_OFFSET,
)
from .exceptions import PaletteError
from .logging_config import get_logger
from .palette_data import DEFAULT_VGA_PALETTE, SIMULATOR_DUMP_PALETTE
from .raster import CanvasFactory, PillowRaster
from .renderer import save_palette_swatches

logger = get_logger("palette_utils")

ColorT = TypeVar("ColorT")

BLACK = LegacyColor(0, 0, 0)


def const_palette(size: int, color: ColorT) -> list[ColorT]:
    """Get a palette of size entries all set to color."""
    return [color] * size


def overlay_at(
    base: Sequence[ColorT], overlay: Iterable[ColorT], offset: int
) -> list[ColorT]:
    """
    Write overlay entries over a copy of base starting at offset.

    Writes min(len(overlay), len(base) - offset) entries. Everything
    outside that span keeps its base value, extra overlay entries are
    dropped.

    Args:
        base: Palette to paint on
        overlay: Entries to write
        offset: First register to overwrite

    Returns:
        New palette the same length as base

    Raises:
        PaletteError: If offset is negative
    """
    if offset < 0:
        raise PaletteError(f"Overlay offset cannot be negative: {offset}")

    palette = list(base)
    for index, color in zip(range(offset, len(palette)), overlay):
        palette[index] = color
    return palette


def paint_layers(
    size: int,
    layers: Iterable[tuple[Iterable[ColorT], int]],
    fill: ColorT,
) -> list[ColorT]:
    """
    Paint (source, offset) layers in order onto a palette of fill entries.

    Later layers overwrite earlier ones, nothing is blended.
    """
    palette = const_palette(size, fill)
    for source, offset in layers:
        palette = overlay_at(palette, source, offset)
    return palette


def spacesim_layers(
    overlay: Optional[Sequence[LegacyColor]] = None,
) -> list[tuple[Sequence[LegacyColor], int]]:
    """
    Get the palette layers SPACESIM stacks, bottom first.

    Without a custom palette the top 128 registers are filled with bright
    green so unmapped pixels stand out.
    """
    if overlay is None:
        custom = const_palette(CUSTOM_PALETTE_ENTRIES, LegacyColor(*ALARM_COLOR))
    else:
        custom = list(overlay[:CUSTOM_PALETTE_ENTRIES])

    return [
        (DEFAULT_VGA_PALETTE, VGA_PALETTE_OFFSET),
        (SIMULATOR_DUMP_PALETTE, SIMULATOR_PALETTE_OFFSET),
        (custom, CUSTOM_PALETTE_OFFSET),
    ]


def assemble_palette(
    overlay: Optional[Sequence[LegacyColor]] = None,
    debug: bool = False,
    output_dir: Union[str, Path] = ".",
    canvas_factory: CanvasFactory = PillowRaster,
    debug_basename: str = DEBUG_BASENAME,
) -> list[ExpandedColor]:
    """
    Assemble the full SPACESIM palette and expand it for display.

    Args:
        overlay: Custom palette for registers 128-255, None to flag them green
        debug: Also write the palette swatch sheets under debug_basename
        output_dir: Directory for the debug swatch sheets
        canvas_factory: Creates the canvases for the debug swatch sheets
        debug_basename: File name prefix of the debug swatch sheets

    Returns:
        256 entry palette, registers 16-255 expanded to 8 bits
    """
    if overlay is None:
        logger.info("No custom palette, registers 128-255 set to alarm green")
    else:
        used = min(len(overlay), CUSTOM_PALETTE_ENTRIES)
        logger.info(f"Using {used} custom colors from register {CUSTOM_PALETTE_OFFSET}")

    palette = paint_layers(PALETTE_ENTRIES, spacesim_layers(overlay), BLACK)

    # Registers 0-15 keep their 6-bit values
    expanded = expand_palette(palette)

    if debug:
        save_palette_swatches(expanded, debug_basename, output_dir, canvas_factory)

    return expanded
