"""Tests for the refinement graph and most-refined machine selection."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from animate.candidate import Candidate
from animate.errors import (
    AmbiguousBundleError,
    CircularRefinementError,
    MalformedInputError,
    ModelNotFoundError,
)
from animate.refinement_graph import RefinementGraph, build_refinement_graph
from animate.refinement_graph_resolver import RefinementGraphResolver


def make_candidates(*names: str) -> list[Candidate]:
    """Create candidates with fake paths named after the machines."""
    return [Candidate(name, Path(f"/models/{name}.bum")) for name in names]


def fake_reader(targets: dict[str, str | None]) -> MagicMock:
    """Create a metadata reader answering from a name -> target mapping."""
    return MagicMock(side_effect=lambda path: targets.get(path.stem))


def test_candidate_from_path() -> None:
    """Verify that the machine name is the file name minus the extension."""
    cand = Candidate.from_path(Path("/x/y/Bridge_M2.bum"))
    assert cand.name == "Bridge_M2"


def test_graph_leaves_and_targets() -> None:
    """Verify that leaves are the machines no one refines."""
    graph = build_refinement_graph(
        make_candidates("M0", "M1", "M2"), fake_reader({"M1": "M0", "M2": "M1"})
    )
    assert graph.edges == {"M1": "M0", "M2": "M1"}
    assert graph.targets() == {"M0", "M1"}
    assert graph.leaves() == ["M2"]
    assert graph.chain_from("M2") == ["M2", "M1", "M0"]


def test_chain_stops_on_cycle() -> None:
    """Verify that following a cycle terminates."""
    graph = RefinementGraph(edges={"A": "B", "B": "A"})
    assert graph.chain_from("A") == ["A", "B"]


def test_duplicate_machine_names_rejected() -> None:
    """Verify that two files with the same machine name are refused."""
    candidates = [
        Candidate("M0", Path("/a/M0.bum")),
        Candidate("M0", Path("/b/M0.bum")),
    ]
    with pytest.raises(MalformedInputError, match="Duplicate machine name M0"):
        build_refinement_graph(candidates, fake_reader({}))


def test_single_candidate_skips_metadata() -> None:
    """Verify that a lone candidate is returned without parsing anything."""
    reader = fake_reader({})
    resolver = RefinementGraphResolver(reader)
    (only,) = make_candidates("M0")
    assert resolver.select([only]) == only.path
    reader.assert_not_called()


def test_linear_chain_selects_most_refined(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that the end of a refinement chain is selected and logged."""
    resolver = RefinementGraphResolver(fake_reader({"M1": "M0", "M2": "M1"}))
    with caplog.at_level(logging.INFO, logger="animate"):
        selected = resolver.select(make_candidates("M1", "M0", "M2"))
    assert selected == Path("/models/M2.bum")
    assert "auto-selected most refined: M2.bum" in caplog.text


def test_independent_machines_are_ambiguous() -> None:
    """Verify that unrelated machines fail with their names listed in order."""
    resolver = RefinementGraphResolver(fake_reader({}))
    with pytest.raises(AmbiguousBundleError, match="Leaf machines: A, B$") as exc:
        resolver.select(make_candidates("B", "A"))
    assert exc.value.leaves == ["A", "B"]


def test_two_chains_are_ambiguous() -> None:
    """Verify that two chains sharing nothing report both leaves."""
    resolver = RefinementGraphResolver(
        fake_reader({"X1": "X0", "Y1": "Y0"})
    )
    with pytest.raises(AmbiguousBundleError) as exc:
        resolver.select(make_candidates("X0", "X1", "Y0", "Y1"))
    assert exc.value.leaves == ["X1", "Y1"]


def test_cycle_is_circular() -> None:
    """Verify that mutually refining machines are rejected."""
    resolver = RefinementGraphResolver(fake_reader({"A": "B", "B": "A"}))
    with pytest.raises(CircularRefinementError, match="A, B") as exc:
        resolver.select(make_candidates("B", "A"))
    assert exc.value.machines == ["A", "B"]


def test_target_outside_bundle_is_ignored() -> None:
    """Verify that refining a machine missing from the bundle still resolves."""
    resolver = RefinementGraphResolver(fake_reader({"M1": "Lib", "M2": "M1"}))
    assert resolver.select(make_candidates("M1", "M2")) == Path("/models/M2.bum")


def test_no_candidates() -> None:
    """Verify that an empty candidate list is reported as not found."""
    with pytest.raises(ModelNotFoundError):
        RefinementGraphResolver(fake_reader({})).select([])
