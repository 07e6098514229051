"""Dumping information about a resolved machine."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from animate.errors import EngineError, ResolutionError
from animate.load_model import engine_from_config, load_model, resolver_from_config
from animate.probcli import ProbCli, ProbSession
from animate.refinement_chain import refinement_chain

logger = logging.getLogger(__name__)

# option attribute -> ProB graph category
VISUALIZATIONS = {
    "machine": "machine_hierarchy",
    "events": "event_hierarchy",
    "properties": "properties",
    "invariant": "invariant",
}


def run_info(
    args: argparse.Namespace, config: dict[str, Any], engine: ProbCli | None = None
) -> int:
    """Save the requested graphs, or print the refinement chain."""
    engine = engine or engine_from_config(config)
    err = 0
    with resolver_from_config(config) as resolver:
        session = load_model(args, resolver, engine, config)
        if session is None:
            return 1

        requested = False
        for attr, category in VISUALIZATIONS.items():
            path = getattr(args, attr)
            if path is None:
                continue
            requested = True
            err |= _save_visualization(session, category, path)

        if args.bmodel is not None:
            requested = True
            logger.info("Saving B model to %s", args.bmodel)
            try:
                session.save_prolog(args.bmodel)
            except EngineError as e:
                print(f"Error saving model: {e}", file=sys.stderr)
                err = 1

        if not requested:
            resolved = Path(session.model_path)
            try:
                chain = refinement_chain(resolved, resolver.machine_extension)
            except ResolutionError as e:
                print(f"Error reading refinements: {e}", file=sys.stderr)
                return 1
            print(" -> ".join(chain))
    return err


def _save_visualization(session: ProbSession, category: str, path: Path) -> int:
    logger.info("Saving %s to %s", category, path)
    try:
        session.visualize(category, path)
    except EngineError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0
