#!/usr/bin/env python3
"""
Raster sinks for rendered images

The renderer only talks to the RasterSink protocol. PillowRaster is the
sink used for real output and writes uncompressed BMP files.
"""

from collections.abc import Iterator
from typing import Callable, Protocol

from PIL import Image

from .constants import OUTPUT_FORMAT

RGB = tuple[int, int, int]


class RasterSink(Protocol):
    """Protocol defining a writable RGB canvas"""

    width: int
    height: int

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        """Set the pixel at (x, y) to an RGB triple"""
        ...

    def get_pixel(self, x: int, y: int) -> RGB:
        """Get the RGB triple at (x, y)"""
        ...

    def coordinates(self) -> Iterator[tuple[int, int]]:
        """Iterate all (x, y) coordinates in row-major order"""
        ...

    def save(self, path: str) -> None:
        """Encode the canvas and write it to path"""
        ...


CanvasFactory = Callable[[int, int], RasterSink]


class PillowRaster:
    """RGB canvas backed by a Pillow image"""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height))
        self._pixels = self.image.load()

    def set_pixel(self, x: int, y: int, color: RGB) -> None:
        self._pixels[x, y] = (color[0], color[1], color[2])

    def get_pixel(self, x: int, y: int) -> RGB:
        return self._pixels[x, y]

    def coordinates(self) -> Iterator[tuple[int, int]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def save(self, path: str) -> None:
        self.image.save(path, format=OUTPUT_FORMAT)
