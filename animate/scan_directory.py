"""Logic for collecting machine files below a directory."""

import logging
import os
from pathlib import Path

from animate.candidate import Candidate
from animate.errors import IOFailureError, ModelNotFoundError
from animate.machine_name_of import MACHINE_EXTENSION

logger = logging.getLogger(__name__)


def _raise_walk_error(err: OSError) -> None:
    # os.walk skips unreadable directories unless the handler raises.
    raise err


def scan_directory(dir_path: Path, extension: str = MACHINE_EXTENSION) -> list[Candidate]:
    """Recursively collect every machine file under ``dir_path``.

    A subdirectory that cannot be listed fails the scan: a partial candidate
    set could select the wrong machine.
    """
    files: list[Path] = []
    try:
        for root, _dirs, names in os.walk(dir_path, onerror=_raise_walk_error):
            for name in names:
                path = Path(root) / name
                if name.endswith(extension) and path.is_file():
                    files.append(path)
    except OSError as e:
        msg = f"Failed to scan directory: {dir_path} ({e})"
        raise IOFailureError(msg) from e
    files.sort()

    if not files:
        msg = f"No {extension} file found in directory: {dir_path}"
        raise ModelNotFoundError(msg)

    logger.debug("Found %s %s file(s) in %s", len(files), extension, dir_path)
    return [Candidate.from_path(p, extension) for p in files]
