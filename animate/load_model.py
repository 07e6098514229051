"""Resolution of the model argument and loading it into the engine."""

import argparse
import logging
import sys
from typing import Any

from animate.build_preferences import build_preferences
from animate.errors import EngineError, ResolutionError
from animate.extract_archive import ArchiveExtractor
from animate.machine_name_of import machine_name_of
from animate.model_resolver import ModelResolver
from animate.probcli import ProbCli, ProbSession
from animate.validate_input import validate_input

logger = logging.getLogger(__name__)


def resolver_from_config(config: dict[str, Any]) -> ModelResolver:
    """Build a ModelResolver using the configured extensions and scratch prefix."""
    machine_ext = config["extensions"]["machine"]
    extractor = ArchiveExtractor(prefix=config["scratch"]["prefix"], extension=machine_ext)
    return ModelResolver(
        extractor=extractor,
        machine_extension=machine_ext,
        archive_extension=config["extensions"]["archive"],
    )


def engine_from_config(config: dict[str, Any]) -> ProbCli:
    """Build the ProB adapter from the ``probcli`` config section."""
    section = config["probcli"]
    return ProbCli(section["executable"], section.get("extra_args") or [])


def load_model(
    args: argparse.Namespace,
    resolver: ModelResolver,
    engine: ProbCli,
    config: dict[str, Any],
) -> ProbSession | None:
    """Resolve ``args.model`` and load it, or report why that failed.

    Returns None after printing the error. The caller still owns the
    resolver and must clean it up.
    """
    try:
        validate_input(args.model, args.size, getattr(args, "steps", None))
        prefs = build_preferences(args.size, args.perf, config)

        logger.info("Load Event-B Machine")
        resolved = resolver.resolve(args.model)
        print(f"Machine: {machine_name_of(resolved, resolver.machine_extension)}")
        session = engine.load(str(resolved), prefs)
        logger.info("ProB Version: %s", session.version())
    except (ResolutionError, EngineError, ValueError) as e:
        logger.debug("Error loading model", exc_info=True)
        print(f"Error loading model: {e}", file=sys.stderr)
        return None
    return session
