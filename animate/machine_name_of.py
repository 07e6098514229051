"""Utility for deriving a machine name from its file path."""

from pathlib import Path

MACHINE_EXTENSION = ".bum"


def machine_name_of(path: Path, extension: str = MACHINE_EXTENSION) -> str:
    """Strip the machine extension from a file name."""
    name = path.name
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return name
