#!/usr/bin/env python3
"""
Custom exceptions and error handling utilities for the image converter.

This module defines domain-specific exceptions and provides utilities
for consistent error reporting from the command line.
"""


class ImageConvertError(Exception):
    """Base exception for all image converter errors"""
    pass


class FileOperationError(ImageConvertError):
    """Raised when file operations fail"""
    pass


class ImageFormatError(FileOperationError):
    """Raised when an index raster has the wrong structure"""
    pass


class PaletteError(ImageConvertError):
    """Raised when palette operations fail"""
    pass


def format_error_message(operation: str, error: Exception) -> str:
    """
    Format an error message for the operator.

    Args:
        operation: Description of the operation that failed
        error: The exception that was raised

    Returns:
        User-friendly error message
    """
    if isinstance(error, FileNotFoundError):
        return f"File not found during {operation}: {error.filename}"
    elif isinstance(error, PermissionError):
        return f"Permission denied during {operation}"
    elif isinstance(error, ImageFormatError):
        return f"Invalid image format: {error}"
    elif isinstance(error, PaletteError):
        return f"Palette error: {error}"
    else:
        return f"Failed to {operation}: {error}"
