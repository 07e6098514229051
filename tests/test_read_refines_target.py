"""Tests for reading refinement targets from machine files."""

from collections.abc import Callable
from pathlib import Path

import pytest

from animate.errors import IOFailureError, MalformedInputError
from animate.read_refines_target import read_refines_target


def test_refines_target_found(tmp_path: Path, machine_writer: Callable[..., Path]) -> None:
    """Verify that the declared target machine is returned."""
    path = machine_writer(tmp_path, "M1", refines="M0")
    assert read_refines_target(path) == "M0"


def test_no_refines_clause(tmp_path: Path, machine_writer: Callable[..., Path]) -> None:
    """Verify that an abstract machine refines nothing."""
    path = machine_writer(tmp_path, "M0")
    assert read_refines_target(path) is None


def test_first_refines_clause_wins(tmp_path: Path) -> None:
    """Verify that only the first refines declaration is used."""
    path = tmp_path / "M2.bum"
    path.write_text(
        "<org.eventb.core.machineFile>"
        '<org.eventb.core.refinesMachine org.eventb.core.target="M1"/>'
        '<org.eventb.core.refinesMachine org.eventb.core.target="M0"/>'
        "</org.eventb.core.machineFile>"
    )
    assert read_refines_target(path) == "M1"


def test_empty_target_attribute(tmp_path: Path) -> None:
    """Verify that an empty or missing target counts as no refinement."""
    empty = tmp_path / "A.bum"
    empty.write_text(
        '<m><org.eventb.core.refinesMachine org.eventb.core.target=""/></m>'
    )
    missing = tmp_path / "B.bum"
    missing.write_text("<m><org.eventb.core.refinesMachine/></m>")
    assert read_refines_target(empty) is None
    assert read_refines_target(missing) is None


def test_malformed_xml(tmp_path: Path) -> None:
    """Verify that a malformed machine file aborts with a parse error."""
    path = tmp_path / "Bad.bum"
    path.write_text("<org.eventb.core.machineFile><unclosed>")
    with pytest.raises(MalformedInputError, match="Bad.bum"):
        read_refines_target(path)


def test_missing_file(tmp_path: Path) -> None:
    """Verify that an unreadable file is reported as an I/O failure."""
    with pytest.raises(IOFailureError):
        read_refines_target(tmp_path / "Nope.bum")
