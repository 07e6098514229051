"""Shared helpers for building Rodin-style machine files and archives."""

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

MACHINE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<org.eventb.core.machineFile org.eventb.core.configuration="org.eventb.core.fwd" version="5">
{refines}<org.eventb.core.event name="'" org.eventb.core.convergence="0" org.eventb.core.extended="false" org.eventb.core.label="INITIALISATION"/>
</org.eventb.core.machineFile>
"""


def machine_xml(refines: str | None = None) -> str:
    """Return the XML of a machine, optionally refining another one."""
    clause = ""
    if refines is not None:
        clause = (
            '<org.eventb.core.refinesMachine name="internal_refinesMachine1" '
            f'org.eventb.core.target="{refines}"/>\n'
        )
    return MACHINE_TEMPLATE.format(refines=clause)


def write_machine(directory: Path, name: str, refines: str | None = None) -> Path:
    """Write ``<name>.bum`` into ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{name}.bum"
    path.write_text(machine_xml(refines), encoding="utf-8")
    return path


def write_zip(path: Path, entries: dict[str, str | bytes]) -> Path:
    """Write a zip archive; names ending in '/' become directory entries."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries.items():
            if name.endswith("/"):
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, data)
    return path


@pytest.fixture
def machine_writer() -> Callable[..., Path]:
    """Fixture exposing write_machine."""
    return write_machine


@pytest.fixture
def zip_writer() -> Callable[..., Path]:
    """Fixture exposing write_zip."""
    return write_zip
