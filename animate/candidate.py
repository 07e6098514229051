"""Data model for machine files discovered during resolution."""

from dataclasses import dataclass
from pathlib import Path

from animate.machine_name_of import MACHINE_EXTENSION, machine_name_of


@dataclass(frozen=True)
class Candidate:
    """A machine file found in a directory or archive."""

    name: str  # machine name, the graph vertex
    path: Path

    @classmethod
    def from_path(cls, path: Path, extension: str = MACHINE_EXTENSION) -> "Candidate":
        """Build a candidate named after the file, minus its extension."""
        return cls(machine_name_of(path, extension), path)
