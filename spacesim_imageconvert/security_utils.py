#!/usr/bin/env python3
"""
Path validation for files read and written by the converter
"""

import pathlib


class SecurityError(Exception):
    """Raised when a path is rejected"""
    pass


def _check_path_format(file_path_str):
    """Common path format checks for both input and output paths"""
    if not file_path_str:
        raise SecurityError("Empty path")

    # Check for URI schemes
    if any(file_path_str.startswith(scheme) for scheme in ["file:", "http:", "https:", "ftp:", "sftp:"]):
        raise SecurityError(f"URI schemes not allowed: {file_path_str}")

    # Check for UNC paths
    if file_path_str.startswith("\\\\") or "\\\\?\\" in file_path_str:
        raise SecurityError(f"UNC paths not allowed: {file_path_str}")


def validate_file_path(file_path):
    """
    Validate an input file path

    Missing files are let through so the read itself reports them.

    Args:
        file_path: Path to validate

    Returns:
        Absolute path if valid

    Raises:
        SecurityError: If path is invalid or not a file
    """
    file_path_str = str(file_path)
    _check_path_format(file_path_str)

    try:
        path = pathlib.Path(file_path).resolve()
    except (ValueError, RuntimeError) as e:
        raise SecurityError(f"Invalid path: {e}")

    if path.exists() and not path.is_file():
        raise SecurityError(f"Path is not a file: {path}")

    return str(path)


def validate_output_path(file_path):
    """
    Validate an output file path

    Args:
        file_path: Path to validate

    Returns:
        Absolute path if valid

    Raises:
        SecurityError: If path is invalid or unsafe
    """
    file_path_str = str(file_path)
    _check_path_format(file_path_str)

    try:
        path = pathlib.Path(file_path).resolve()
    except (ValueError, RuntimeError) as e:
        raise SecurityError(f"Invalid path: {e}")

    if not path.parent.exists():
        raise SecurityError(f"Parent directory does not exist: {path.parent}")

    if path.exists():
        if not path.is_file():
            raise SecurityError(f"Path is not a file: {path}")

        # Never overwrite system files
        protected_patterns = [
            "/etc/", "/usr/", "/bin/", "/sbin/", "/lib/",
            "/System/", "C:/Windows/", "C:/Program Files/"
        ]
        path_str = str(path).replace("\\", "/")
        for pattern in protected_patterns:
            if pattern in path_str:
                raise SecurityError(f"Cannot overwrite system file: {path}")

    return str(path)
