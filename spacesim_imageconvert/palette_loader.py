#!/usr/bin/env python3
"""
Readers for SPACESIM .PLT palettes and .R8 index rasters
"""

from pathlib import Path
from typing import Union

from .color_utils import LegacyColor
from .constants import BYTES_PER_COLOR
from .exceptions import FileOperationError
from .logging_config import get_logger
from .security_utils import validate_file_path

logger = get_logger("palette_loader")

PathLike = Union[str, Path]


def palette_from_bytes(data: bytes) -> list[LegacyColor]:
    """
    Interpret raw bytes as consecutive R, G, B triples.

    Trailing bytes that do not form a full triple are dropped. Channel
    values are taken as-is.

    Args:
        data: Raw palette bytes

    Returns:
        List of len(data) // 3 colors
    """
    count = len(data) // BYTES_PER_COLOR
    return [
        LegacyColor(*data[i * BYTES_PER_COLOR : i * BYTES_PER_COLOR + BYTES_PER_COLOR])
        for i in range(count)
    ]


def _read_file(path: PathLike, description: str) -> bytes:
    # Any size is read, callers decide what to keep
    file_path = validate_file_path(path)
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileOperationError(f"Could not read {description} file {path}: {e}") from e


def load_palette(path: PathLike) -> list[LegacyColor]:
    """
    Load a .PLT palette file.

    Args:
        path: Path to the palette file

    Returns:
        List of 6-bit colors found in the file

    Raises:
        FileOperationError: If the file cannot be read
        SecurityError: If the path is rejected
    """
    colors = palette_from_bytes(_read_file(path, "palette"))
    logger.info(f"Found {len(colors)} colors in palette {path}")
    return colors


def load_index_raster(path: PathLike) -> bytes:
    """
    Load the raw palette indexes of a .R8 image.

    The size is not checked here, the renderer enforces it.
    """
    data = _read_file(path, "image")
    logger.debug(f"Read {len(data)} bytes from image {path}")
    return data
