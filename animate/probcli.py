"""Thin adapter around the ``probcli`` executable.

The ProB engine does all the model work: loading, random animation, invariant
checking, coverage, trace replay and visualization. This module only turns
those requests into ``probcli`` command lines and reports failures.
"""

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from animate.errors import EngineError

logger = logging.getLogger(__name__)

VISUALIZATION_EXTENSIONS = (".dot", ".svg")


class ProbSession:
    """A machine loaded with a fixed set of preferences."""

    def __init__(
        self,
        executable: str,
        model_path: str,
        preferences: dict[str, str],
        extra_args: Sequence[str] = (),
    ) -> None:
        """Initialize the session for one resolved machine file."""
        self.executable = executable
        self.model_path = model_path
        self.preferences = dict(preferences)
        self.extra_args = list(extra_args)

    def command(self, *action: str) -> list[str]:
        """Build the full probcli command line for an action."""
        cmd = [self.executable, self.model_path]
        for name, value in self.preferences.items():
            cmd.extend(["-p", name, value])
        cmd.extend(self.extra_args)
        cmd.extend(action)
        return cmd

    def version(self) -> str:
        """Return the engine version string."""
        cmd = [self.executable, "-svers"]
        return self._run(cmd, capture=True).strip()

    def animate(
        self,
        steps: int,
        check_invariants: bool = False,
        trace_file: Path | None = None,
    ) -> None:
        """Run ``steps`` random steps and print the state and coverage."""
        action = ["-animate", str(steps), "-animate_stats", "-coverage"]
        if not check_invariants:
            action.append("-noinv")
        if trace_file is not None:
            action.extend(["-his", str(trace_file), "-his_option", "json"])
        self._run(self.command(*action))

    def replay(self, trace_file: Path) -> None:
        """Replay a JSON trace against the machine."""
        self._run(self.command("-trace_replay", "json", str(trace_file)))

    def visualize(self, category: str, path: Path) -> None:
        """Write one of the engine's graphs (dot or svg) to ``path``."""
        if path.suffix not in VISUALIZATION_EXTENSIONS:
            msg = f"Unknown extension {path.suffix.lstrip('.')}"
            raise EngineError(msg)
        self._run(self.command("-init", "-dot", category, str(path)))

    def save_prolog(self, path: Path) -> None:
        """Pretty-print the engine's internal model representation to ``path``."""
        self._run(self.command("-pp", str(path)))

    def _run(self, cmd: list[str], capture: bool = False) -> str:
        logger.debug("Running: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=True, capture_output=capture, text=True)
        except FileNotFoundError as e:
            msg = f"ProB executable not found: {cmd[0]}"
            raise EngineError(msg) from e
        except subprocess.CalledProcessError as e:
            msg = f"probcli exited with status {e.returncode}: {' '.join(cmd)}"
            raise EngineError(msg) from e
        return result.stdout or ""


class ProbCli:
    """Entry point for loading machines into ProB."""

    def __init__(self, executable: str = "probcli", extra_args: Sequence[str] = ()) -> None:
        """Initialize with the probcli executable name or path."""
        self.executable = executable
        self.extra_args = list(extra_args)

    def load(self, model_path: str, preferences: dict[str, str]) -> ProbSession:
        """Load a resolved machine file with the given preferences."""
        if shutil.which(self.executable) is None:
            msg = f"ProB executable not found: {self.executable}"
            raise EngineError(msg)
        return ProbSession(self.executable, model_path, preferences, self.extra_args)
