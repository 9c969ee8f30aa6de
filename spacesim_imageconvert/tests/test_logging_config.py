"""
Tests for logging_config.py and exceptions.py
"""

import errno
import logging

import pytest

from spacesim_imageconvert.exceptions import (
    FileOperationError,
    ImageConvertError,
    ImageFormatError,
    PaletteError,
    format_error_message,
)
from spacesim_imageconvert.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def restore_logger():
    """Leave the package logger without handlers after the test"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


@pytest.mark.unit
class TestSetupLogging:
    """Test logger configuration"""

    def test_level_and_handler(self, restore_logger):
        """Test the level is applied and a single console handler is added"""
        logger = setup_logging("DEBUG")

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_repeated_setup_replaces_handlers(self, restore_logger):
        """Test calling setup twice does not duplicate output"""
        setup_logging()
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_unknown_level_defaults_to_info(self, restore_logger):
        """Test a bad level name falls back to INFO"""
        assert setup_logging("LOUD").level == logging.INFO

    def test_log_file(self, temp_dir, restore_logger):
        """Test messages also go to the log file"""
        log_path = temp_dir / "convert.log"
        logger = setup_logging("INFO", str(log_path))

        get_logger("renderer").info("Writing out SHIP_R8.BMP")
        for handler in logger.handlers:
            handler.flush()

        assert "Writing out SHIP_R8.BMP" in log_path.read_text()
        assert "spacesim_imageconvert.renderer" in log_path.read_text()

    def test_bad_log_file_warns(self, temp_dir, restore_logger, capsys):
        """Test an unusable log file only produces a warning"""
        logger = setup_logging("INFO", str(temp_dir / "missing" / "convert.log"))

        assert len(logger.handlers) == 1
        assert "Could not create log file" in capsys.readouterr().out

    def test_get_logger_namespace(self):
        """Test module loggers are children of the package logger"""
        assert get_logger("palette_utils").name == "spacesim_imageconvert.palette_utils"


@pytest.mark.unit
class TestExceptions:
    """Test the exception hierarchy and operator messages"""

    def test_hierarchy(self):
        """Test every error derives from ImageConvertError"""
        assert issubclass(ImageFormatError, FileOperationError)
        assert issubclass(FileOperationError, ImageConvertError)
        assert issubclass(PaletteError, ImageConvertError)

    def test_image_format_message(self):
        """Test image format errors are labelled"""
        message = format_error_message("convert", ImageFormatError("wrong size"))
        assert message == "Invalid image format: wrong size"

    def test_palette_message(self):
        """Test palette errors are labelled"""
        assert format_error_message("convert", PaletteError("bad")) == "Palette error: bad"

    def test_file_not_found_message(self):
        """Test missing files name the file"""
        error = FileNotFoundError(errno.ENOENT, "No such file", "SHIP.R8")
        assert format_error_message("convert", error) == "File not found during convert: SHIP.R8"

    def test_permission_message(self):
        """Test permission errors"""
        error = PermissionError(errno.EACCES, "Permission denied")
        assert format_error_message("convert", error) == "Permission denied during convert"

    def test_generic_message(self):
        """Test other errors keep their text"""
        error = FileOperationError("Could not read image file X")
        assert format_error_message("convert", error) == "Failed to convert: Could not read image file X"
