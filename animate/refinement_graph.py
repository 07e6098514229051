"""Data model and builder for the machine refinement graph."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from animate.candidate import Candidate
from animate.errors import MalformedInputError
from animate.read_refines_target import read_refines_target


@dataclass
class RefinementGraph:
    """Machines as vertices, with a ``child -> parent`` edge per refines clause."""

    nodes: dict[str, Candidate] = field(default_factory=dict)
    edges: dict[str, str] = field(default_factory=dict)  # child -> refined machine

    def targets(self) -> set[str]:
        """Machines that some other machine refines."""
        return set(self.edges.values())

    def leaves(self) -> list[str]:
        """Machines that no other machine refines, sorted."""
        targets = self.targets()
        return sorted(name for name in self.nodes if name not in targets)

    def chain_from(self, name: str) -> list[str]:
        """Follow refines edges from ``name`` towards the most abstract machine."""
        chain = [name]
        seen = {name}
        current = name
        while current in self.edges:
            current = self.edges[current]
            if current in seen:
                break
            chain.append(current)
            seen.add(current)
        return chain


def build_refinement_graph(
    candidates: Iterable[Candidate],
    read_target: Callable[[Path], str | None] = read_refines_target,
) -> RefinementGraph:
    """Read each candidate's refines clause and assemble the graph."""
    graph = RefinementGraph()
    for cand in candidates:
        if cand.name in graph.nodes:
            other = graph.nodes[cand.name].path
            msg = f"Duplicate machine name {cand.name}: {other}, {cand.path}"
            raise MalformedInputError(msg)
        graph.nodes[cand.name] = cand

        target = read_target(cand.path)
        if target:
            graph.edges[cand.name] = target
    return graph
