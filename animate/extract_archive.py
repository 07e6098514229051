"""Logic for extracting model archives into a scratch directory."""

import logging
import os
import shutil
import tempfile
import zipfile
import zlib
from collections.abc import Callable
from pathlib import Path

from animate.candidate import Candidate
from animate.errors import (
    IOFailureError,
    MalformedInputError,
    ModelNotFoundError,
    SecurityViolationError,
)
from animate.machine_name_of import MACHINE_EXTENSION

logger = logging.getLogger(__name__)

SCRATCH_PREFIX = "animate-"


class ArchiveExtractor:
    """Extracts a zip archive and reports the machine files it contained."""

    def __init__(
        self,
        prefix: str = SCRATCH_PREFIX,
        extension: str = MACHINE_EXTENSION,
        temp_root: Path | None = None,
    ) -> None:
        """Initialize the extractor with scratch naming and the machine extension."""
        self.prefix = prefix
        self.extension = extension
        self.temp_root = temp_root

    def extract(
        self,
        archive_path: Path,
        on_created: Callable[[Path], None] | None = None,
    ) -> tuple[Path, list[Candidate]]:
        """Extract ``archive_path`` into a fresh scratch directory.

        ``on_created`` receives the scratch directory as soon as it exists, so
        the caller owns it even if extraction fails halfway. The extractor never
        deletes it.
        """
        try:
            scratch_dir = Path(tempfile.mkdtemp(prefix=self.prefix, dir=self.temp_root))
        except OSError as e:
            msg = f"Failed to create scratch directory ({e})"
            raise IOFailureError(msg) from e
        logger.debug("Created scratch directory %s", scratch_dir)
        if on_created is not None:
            on_created(scratch_dir)

        try:
            candidates = self._extract_into(archive_path, scratch_dir)
        except zipfile.BadZipFile as e:
            msg = f"Not a valid zip archive: {archive_path} ({e})"
            raise MalformedInputError(msg) from e
        except (RuntimeError, NotImplementedError, zlib.error, EOFError) as e:
            # encrypted entries, unsupported compression, truncated data
            msg = f"Cannot read zip archive: {archive_path} ({e})"
            raise MalformedInputError(msg) from e
        except OSError as e:
            msg = f"Failed to extract zip archive: {archive_path} ({e})"
            raise IOFailureError(msg) from e

        if not candidates:
            msg = f"No {self.extension} file found in zip archive: {archive_path}"
            raise ModelNotFoundError(msg)
        return scratch_dir, candidates

    def _extract_into(self, archive_path: Path, scratch_dir: Path) -> list[Candidate]:
        candidates = []
        with zipfile.ZipFile(archive_path) as zf:
            for info in zf.infolist():
                target = self._safe_target(scratch_dir, info)
                if info.is_dir():
                    target.mkdir(parents=True, exist_ok=True)
                    continue
                target.parent.mkdir(parents=True, exist_ok=True)
                with zf.open(info) as src, target.open("wb") as dst:
                    shutil.copyfileobj(src, dst)
                if info.filename.endswith(self.extension):
                    candidates.append(Candidate.from_path(target, self.extension))
        return candidates

    def _safe_target(self, scratch_dir: Path, info: zipfile.ZipInfo) -> Path:
        """Return the normalized destination for an entry, rejecting escapes."""
        target = Path(os.path.normpath(scratch_dir / info.filename))
        if not target.is_relative_to(scratch_dir):
            msg = f"Zip entry outside target directory: {info.filename}"
            raise SecurityViolationError(msg)
        if target == scratch_dir and not info.is_dir():
            msg = f"Zip entry has no file name: {info.filename}"
            raise SecurityViolationError(msg)
        return target
