"""Logic for describing the refinement chain of a resolved machine."""

from collections.abc import Callable
from pathlib import Path

from animate.candidate import Candidate
from animate.machine_name_of import MACHINE_EXTENSION
from animate.read_refines_target import read_refines_target
from animate.refinement_graph import RefinementGraph


def refinement_chain(
    model: Path,
    extension: str = MACHINE_EXTENSION,
    read_target: Callable[[Path], str | None] = read_refines_target,
) -> list[str]:
    """List machine names from ``model`` down to its most abstract ancestor.

    Ancestors are looked up as sibling files in the same directory, the way
    Rodin lays out a project. The walk stops at a missing sibling or when a
    machine repeats.
    """
    graph = RefinementGraph()
    current = Candidate.from_path(model, extension)
    while current.name not in graph.nodes:
        graph.nodes[current.name] = current
        target = read_target(current.path)
        if not target:
            break
        graph.edges[current.name] = target
        sibling = current.path.with_name(target + extension)
        if not sibling.is_file():
            break
        current = Candidate.from_path(sibling, extension)
    return graph.chain_from(Candidate.from_path(model, extension).name)
