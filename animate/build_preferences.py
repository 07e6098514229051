"""Logic for assembling the ProB preferences passed to the engine."""

from typing import Any

BASE_PREFERENCES: dict[str, str] = {
    "MEMOIZE_FUNCTIONS": "true",
    "SYMBOLIC": "true",
    "TRACE_INFO": "true",
    "TRY_FIND_ABORT": "true",
    "SYMMETRY_MODE": "hash",
    "COMPRESSION": "true",
    "CLPFD": "true",
    "PROOF_INFO": "true",
    "OPERATION_REUSE": "true",
}


def build_preferences(
    size: int, perf: bool = False, config: dict[str, Any] | None = None
) -> dict[str, str]:
    """Build the preference map for loading a machine.

    Values from the ``preferences`` section of the config win over the
    built-in ones.
    """
    prefs = dict(BASE_PREFERENCES)
    prefs["DEFAULT_SETSIZE"] = str(size)
    if perf:
        prefs["PERFORMANCE_INFO"] = "true"
    overrides = (config or {}).get("preferences") or {}
    prefs.update({str(k): _as_pref_value(v) for k, v in overrides.items()})
    return prefs


def _as_pref_value(value: object) -> str:
    # YAML turns true/false into booleans; ProB expects lowercase words.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
