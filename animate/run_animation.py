"""Random animation of a resolved machine."""

import argparse
import logging
import sys
from typing import Any

from animate.errors import EngineError
from animate.load_model import engine_from_config, load_model, resolver_from_config
from animate.probcli import ProbCli

logger = logging.getLogger(__name__)


def run_animation(
    args: argparse.Namespace, config: dict[str, Any], engine: ProbCli | None = None
) -> int:
    """Animate the model for ``args.steps`` random steps."""
    engine = engine or engine_from_config(config)
    with resolver_from_config(config) as resolver:
        session = load_model(args, resolver, engine, config)
        if session is None:
            return 1
        try:
            print("Animation steps:")
            if args.save:
                logger.info("Saving animation trace to %s", args.save)
            session.animate(args.steps, check_invariants=args.invariants, trace_file=args.save)
        except EngineError as e:
            logger.debug("Error animating model", exc_info=True)
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0
