"""Resolution of a user-supplied model path to a single machine file."""

import logging
import os
import shutil
from collections.abc import Callable
from pathlib import Path
from types import TracebackType

from animate.candidate import Candidate
from animate.errors import ModelNotFoundError
from animate.extract_archive import ArchiveExtractor
from animate.machine_name_of import MACHINE_EXTENSION
from animate.refinement_graph_resolver import RefinementGraphResolver
from animate.scan_directory import scan_directory

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = ".zip"


class ModelResolver:
    """Turns a file, directory or zip archive into one machine file path.

    Archive input is extracted into a scratch directory owned by this
    resolver. The resolved file lives there, so the directory survives
    ``resolve`` and is only removed by ``cleanup``. Use the resolver as a
    context manager to guarantee that.
    """

    def __init__(
        self,
        extractor: ArchiveExtractor | None = None,
        scanner: Callable[[Path, str], list[Candidate]] = scan_directory,
        graph_resolver: RefinementGraphResolver | None = None,
        machine_extension: str = MACHINE_EXTENSION,
        archive_extension: str = ARCHIVE_EXTENSION,
    ) -> None:
        """Initialize the resolver with its collaborators."""
        self.extractor = extractor or ArchiveExtractor(extension=machine_extension)
        self.scanner = scanner
        self.graph_resolver = graph_resolver or RefinementGraphResolver()
        self.machine_extension = machine_extension
        self.archive_extension = archive_extension
        self.scratch_dir: Path | None = None

    def __enter__(self) -> "ModelResolver":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()

    def resolve(self, input_path: Path) -> Path:
        """Resolve ``input_path`` to the absolute path of one machine file."""
        path = Path(os.path.abspath(input_path))
        if not path.exists():
            msg = f"Model path does not exist: {input_path}"
            raise ModelNotFoundError(msg)

        if path.is_dir():
            candidates = self.scanner(path, self.machine_extension)
            return self.graph_resolver.select(candidates)

        if path.name.endswith(self.archive_extension):
            _, candidates = self.extractor.extract(path, on_created=self._claim)
            return self.graph_resolver.select(candidates)

        return path

    def cleanup(self) -> None:
        """Delete the scratch directory, if any. Safe to call repeatedly."""
        scratch_dir, self.scratch_dir = self.scratch_dir, None
        if scratch_dir is None:
            return
        try:
            shutil.rmtree(scratch_dir)
            logger.debug("Removed scratch directory %s", scratch_dir)
        except FileNotFoundError:
            pass
        except OSError:
            logger.warning("Failed to clean up temp directory: %s", scratch_dir, exc_info=True)

    def _claim(self, scratch_dir: Path) -> None:
        # A second archive on the same resolver releases the first one.
        self.cleanup()
        self.scratch_dir = scratch_dir
