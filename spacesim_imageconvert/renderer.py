#!/usr/bin/env python3
"""
Render SPACESIM index rasters and palette swatch sheets to RGB.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Union

from .color_utils import ExpandedColor, quantize_palette
from .constants import (
    IMAGE_BYTES_PER_PIXEL,
    IMAGE_HEIGHT,
    IMAGE_SIZE_BYTES,
    IMAGE_WIDTH,
    OUTPUT_EXTENSION,
    PALETTE_6BIT_SUFFIX,
    PALETTE_8BIT_SUFFIX,
    PALETTE_ENTRIES,
    SWATCH_BORDER,
    SWATCH_BORDER_COLOR,
    SWATCH_BOX_SIZE,
    SWATCH_COLUMNS,
)
from .exceptions import FileOperationError, ImageFormatError, PaletteError
from .logging_config import get_logger
from .raster import RGB, CanvasFactory, PillowRaster, RasterSink
from .security_utils import validate_output_path

logger = get_logger("renderer")


def check_index_raster(index_data: bytes) -> None:
    """Raise ImageFormatError unless index_data is a full 256x256 raster."""
    if len(index_data) != IMAGE_SIZE_BYTES:
        raise ImageFormatError(
            f"Must supply a {IMAGE_SIZE_BYTES} byte {IMAGE_WIDTH}x{IMAGE_HEIGHT} "
            f"SPACESIM .R8 image (got {len(index_data)} bytes)"
        )


def render_indexed_image(
    index_data: bytes,
    palette: Sequence[RGB],
    canvas_factory: CanvasFactory = PillowRaster,
) -> RasterSink:
    """
    Map a 256x256 .R8 index raster through a palette.

    Args:
        index_data: 65536 palette indexes, row-major
        palette: 256 entry palette, normally from assemble_palette
        canvas_factory: Creates the canvas to draw on

    Returns:
        The filled 256x256 canvas

    Raises:
        ImageFormatError: If index_data is not exactly 65536 bytes
        PaletteError: If the palette has fewer than 256 entries
    """
    check_index_raster(index_data)
    if len(palette) < PALETTE_ENTRIES:
        raise PaletteError(
            f"Palette has {len(palette)} entries, {PALETTE_ENTRIES} are required"
        )

    img = canvas_factory(IMAGE_WIDTH, IMAGE_HEIGHT)
    for i, (x, y) in enumerate(img.coordinates()):
        img.set_pixel(x, y, palette[index_data[i * IMAGE_BYTES_PER_PIXEL]])
    return img


def swatch_dimensions(palette_size: int) -> tuple[int, int]:
    """Get the (width, height) in pixels of a swatch sheet."""
    rows = (palette_size + SWATCH_COLUMNS - 1) // SWATCH_COLUMNS
    cell = SWATCH_BOX_SIZE + SWATCH_BORDER
    return SWATCH_COLUMNS * cell + SWATCH_BORDER, rows * cell + SWATCH_BORDER


def draw_box(img: RasterSink, x: int, y: int, size: int, color: RGB) -> None:
    """Fill a size x size square with its top-left corner at (x, y)."""
    for box_y in range(y, min(y + size, img.height)):
        for box_x in range(x, min(x + size, img.width)):
            img.set_pixel(box_x, box_y, color)


def render_swatch(
    palette: Sequence[RGB], canvas_factory: CanvasFactory = PillowRaster
) -> RasterSink:
    """
    Lay a palette out as a grid of bordered color boxes.

    Entries run left to right in rows of 16. Every box is 16x16 pixels
    with a 1 pixel black border, including around the outside. Cells
    past the end of the palette stay black.
    """
    width, height = swatch_dimensions(len(palette))
    img = canvas_factory(width, height)

    for x, y in img.coordinates():
        img.set_pixel(x, y, SWATCH_BORDER_COLOR)

    for index, color in enumerate(palette):
        row, col = divmod(index, SWATCH_COLUMNS)
        xmin = SWATCH_BORDER * (col + 1) + SWATCH_BOX_SIZE * col
        ymin = SWATCH_BORDER * (row + 1) + SWATCH_BOX_SIZE * row
        draw_box(img, xmin, ymin, SWATCH_BOX_SIZE, color)

    return img


def save_raster(img: RasterSink, path: Union[str, Path]) -> Path:
    """
    Encode a canvas to disk.

    Raises:
        FileOperationError: If the image cannot be written
        SecurityError: If the output path is rejected
    """
    out_path = validate_output_path(path)
    logger.info(f"Writing out {path}")
    try:
        img.save(out_path)
    except OSError as e:
        raise FileOperationError(f"Could not write {path}: {e}") from e
    return Path(out_path)


def save_palette_swatches(
    palette: Sequence[ExpandedColor],
    basename: str,
    output_dir: Union[str, Path] = ".",
    canvas_factory: CanvasFactory = PillowRaster,
) -> tuple[Path, Path]:
    """
    Write the 8-bit and 6-bit swatch sheets of an assembled palette.

    {basename}_PAL_8.BMP shows the colors as they appear on screen,
    {basename}_PAL_6.BMP the values held in the VGA DAC.

    Args:
        palette: Expanded palette from assemble_palette
        basename: Prefix of both file names
        output_dir: Directory to write into
        canvas_factory: Creates the canvases to draw on

    Returns:
        Paths of the 8-bit and 6-bit sheets
    """
    output_dir = Path(output_dir)

    path_8 = output_dir / f"{basename}{PALETTE_8BIT_SUFFIX}{OUTPUT_EXTENSION}"
    path_8 = save_raster(render_swatch(palette, canvas_factory), path_8)

    path_6 = output_dir / f"{basename}{PALETTE_6BIT_SUFFIX}{OUTPUT_EXTENSION}"
    path_6 = save_raster(render_swatch(quantize_palette(palette), canvas_factory), path_6)

    return path_8, path_6
