#!/usr/bin/env python3
"""
SPACESIM Image Converter
Converts SPACESIM .R8 images and .PLT palettes to BMP files

Usage:
    spacesim-imageconvert [options]

Options:
    -i, --image-path <file>     .R8 image to convert. Without a palette the
                                top of the palette is set to RGB(0,255,0)
                                to flag issues.
    -p, --palette-path <file>   .PLT custom palette for the image. If only a
                                palette is given it is converted to swatch
                                sheets.
    -d, --debug                 Also write IMAGECONVERT_DEBUG_PAL_8.BMP and
                                IMAGECONVERT_DEBUG_PAL_6.BMP
    -o, --output-dir <dir>      Where to write output (default: current dir)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .constants import DEBUG_BASENAME, OUTPUT_EXTENSION
from .exceptions import ImageConvertError, format_error_message
from .logging_config import setup_logging
from .palette_loader import load_index_raster, load_palette
from .palette_utils import assemble_palette
from .renderer import (
    check_index_raster,
    render_indexed_image,
    save_palette_swatches,
    save_raster,
)
from .security_utils import SecurityError
from .settings_manager import get_settings


def image_output_name(image_path: Path) -> str:
    """Get the BMP file name for an image, SHIP.R8 -> SHIP_R8.BMP"""
    extension = image_path.suffix.lstrip(".")
    if extension:
        return f"{image_path.stem}_{extension}{OUTPUT_EXTENSION}"
    return f"{image_path.stem}{OUTPUT_EXTENSION}"


def image_to_bitmap(
    image_path: Path,
    palette_path: Optional[Path],
    debug: bool,
    output_dir: Path,
    debug_basename: str,
    logger: logging.Logger,
) -> Path:
    """Convert a .R8 image, optionally with a custom palette."""
    logger.info(
        f"Attempting to open image {image_path} using custom palette "
        f"{palette_path if palette_path else '<No Custom Palette>'}"
    )

    index_data = load_index_raster(image_path)
    # Fail before the debug sheets are written
    check_index_raster(index_data)
    overlay = load_palette(palette_path) if palette_path else None
    palette = assemble_palette(
        overlay, debug=debug, output_dir=output_dir, debug_basename=debug_basename
    )

    img = render_indexed_image(index_data, palette)

    logger.info(f"Output Directory: {output_dir}")
    return save_raster(img, output_dir / image_output_name(image_path))


def palette_file_to_bitmap(
    palette_path: Path,
    debug: bool,
    output_dir: Path,
    debug_basename: str,
    logger: logging.Logger,
) -> tuple[Path, Path]:
    """Write the swatch sheets of a .PLT palette."""
    palette = assemble_palette(
        load_palette(palette_path),
        debug=debug,
        output_dir=output_dir,
        debug_basename=debug_basename,
    )

    logger.info(f"Output Directory: {output_dir}")
    return save_palette_swatches(palette, palette_path.stem, output_dir)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacesim-imageconvert",
        description="Convert SPACESIM .R8 images and .PLT palettes to BMP",
    )
    parser.add_argument(
        "-p", "--palette-path", type=Path,
        help="Path to the .PLT file with the custom palette for the image. "
             "If only a palette is provided, it will be converted to a bitmap.",
    )
    parser.add_argument(
        "-i", "--image-path", type=Path,
        help="Path to .R8 file to convert. Without a palette the top of the "
             "palette will be set to RGB(0,255,0) to visually flag issues.",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true",
        help="Also output the assembled palette as two debug bitmaps "
             "with 6-bit and 8-bit RGB values",
    )
    parser.add_argument("-o", "--output-dir", type=Path, help="Output directory")
    parser.add_argument("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logger = setup_logging(args.log_level or settings.get("log_level", "INFO"), args.log_file)

    if args.image_path is None and args.palette_path is None:
        logger.info("Must provide either a palette or image or both.")
        return 0

    output_dir = args.output_dir or Path(settings.get("output_dir") or Path.cwd())
    debug_basename = settings.get("debug_basename") or DEBUG_BASENAME

    try:
        if args.image_path is not None:
            image_to_bitmap(
                args.image_path, args.palette_path, args.debug,
                output_dir, debug_basename, logger,
            )
        else:
            palette_file_to_bitmap(
                args.palette_path, args.debug, output_dir, debug_basename, logger,
            )
    except (ImageConvertError, SecurityError) as e:
        logger.error(format_error_message("convert", e))
        return 1

    logger.info("Done!")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
