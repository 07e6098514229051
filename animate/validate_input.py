"""Validation of command-line input before a model is loaded."""

import os
from pathlib import Path

from animate.errors import ModelNotFoundError


def validate_input(model: Path | None, size: int, steps: int | None = None) -> None:
    """Reject missing or unreadable models and non-positive numeric options."""
    if model is None:
        msg = "Model file is required"
        raise ValueError(msg)
    if not model.exists():
        msg = f"Model file does not exist: {model}"
        raise ModelNotFoundError(msg)
    if not model.is_file() and not model.is_dir():
        msg = f"Model path is not a file or directory: {model}"
        raise ValueError(msg)
    if not os.access(model, os.R_OK):
        msg = f"Model path is not readable: {model}"
        raise ValueError(msg)
    if steps is not None and steps <= 0:
        msg = f"Number of steps must be positive, got: {steps}"
        raise ValueError(msg)
    if size <= 0:
        msg = f"Default set size must be positive, got: {size}"
        raise ValueError(msg)
