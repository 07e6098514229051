"""Logic for reading the refinement target declared by a machine file."""

import xml.etree.ElementTree as ET
from pathlib import Path

from animate.errors import IOFailureError, MalformedInputError

REFINES_MACHINE_TAG = "org.eventb.core.refinesMachine"
TARGET_ATTRIBUTE = "org.eventb.core.target"


def read_refines_target(path: Path) -> str | None:
    """Return the machine that ``path`` refines, or None if it refines nothing.

    Only the first refines declaration counts: a machine refines at most one
    other machine.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        msg = f"Failed to parse machine file: {path} ({e})"
        raise MalformedInputError(msg) from e
    except OSError as e:
        msg = f"Failed to read machine file: {path} ({e})"
        raise IOFailureError(msg) from e

    element = next(root.iter(REFINES_MACHINE_TAG), None)
    if element is None:
        return None
    return element.get(TARGET_ATTRIBUTE) or None
