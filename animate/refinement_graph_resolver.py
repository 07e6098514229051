"""Selection of the most refined machine among several candidates."""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from animate.candidate import Candidate
from animate.errors import (
    AmbiguousBundleError,
    CircularRefinementError,
    ModelNotFoundError,
)
from animate.read_refines_target import read_refines_target
from animate.refinement_graph import build_refinement_graph

logger = logging.getLogger(__name__)


class RefinementGraphResolver:
    """Picks the unique leaf of the refinement graph."""

    def __init__(
        self, read_target: Callable[[Path], str | None] = read_refines_target
    ) -> None:
        """Initialize the resolver with the metadata reader to use."""
        self.read_target = read_target

    def select(self, candidates: Sequence[Candidate]) -> Path:
        """Return the path of the machine no other candidate refines.

        A single candidate is returned as is, without reading its metadata.
        """
        if not candidates:
            msg = "No machine files to select from"
            raise ModelNotFoundError(msg)
        if len(candidates) == 1:
            return candidates[0].path

        graph = build_refinement_graph(candidates, self.read_target)
        leaves = graph.leaves()

        if not leaves:
            raise CircularRefinementError(list(graph.nodes))
        if len(leaves) > 1:
            raise AmbiguousBundleError(leaves)

        selected = graph.nodes[leaves[0]]
        logger.info(
            "Multiple machine files found, auto-selected most refined: %s",
            selected.path.name,
        )
        return selected.path
