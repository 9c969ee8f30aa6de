"""
Shared pytest fixtures and configuration for image converter tests
"""

import tempfile
from pathlib import Path

import pytest

from spacesim_imageconvert import settings_manager
from spacesim_imageconvert.color_utils import LegacyColor
from spacesim_imageconvert.settings_manager import SettingsManager


class MemoryRaster:
    """In-memory raster sink that records every pixel"""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.pixels = {}
        self.saved_paths = []

    def set_pixel(self, x, y, color):
        assert 0 <= x < self.width and 0 <= y < self.height
        self.pixels[(x, y)] = tuple(color)

    def get_pixel(self, x, y):
        return self.pixels[(x, y)]

    def coordinates(self):
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def save(self, path):
        self.saved_paths.append(str(path))
        Path(path).write_bytes(b"")


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep settings out of the real home directory"""
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()

    def mock_get_settings_path(self):
        return settings_dir / "settings.json"

    monkeypatch.setattr(SettingsManager, "_get_settings_path", mock_get_settings_path)
    monkeypatch.setattr(settings_manager, "_settings_instance", None)
    return settings_dir


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_canvas():
    """Canvas factory that keeps every created canvas"""
    created = []

    def factory(width, height):
        canvas = MemoryRaster(width, height)
        created.append(canvas)
        return canvas

    factory.created = created
    return factory


@pytest.fixture
def sample_index_data():
    """Create a 256x256 index raster where each row uses its own register"""
    data = bytearray(65536)
    for y in range(256):
        for x in range(256):
            data[y * 256 + x] = (x + y) % 256
    return bytes(data)


@pytest.fixture
def sample_palette_data():
    """Create 128 colors of 6-bit palette data (384 bytes)"""
    data = bytearray()
    for i in range(128):
        data.extend([i % 64, (i * 2) % 64, 63 - (i % 64)])
    return bytes(data)


@pytest.fixture
def sample_overlay(sample_palette_data):
    """The sample palette as colors"""
    return [
        LegacyColor(*sample_palette_data[i : i + 3])
        for i in range(0, len(sample_palette_data), 3)
    ]


@pytest.fixture
def image_file(temp_dir, sample_index_data):
    """Create a temporary .R8 image file"""
    image_path = temp_dir / "SHIP.R8"
    image_path.write_bytes(sample_index_data)
    return image_path


@pytest.fixture
def palette_file(temp_dir, sample_palette_data):
    """Create a temporary .PLT palette file"""
    palette_path = temp_dir / "SHIP.PLT"
    palette_path.write_bytes(sample_palette_data)
    return palette_path
