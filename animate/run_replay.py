"""Replay of a saved JSON trace."""

import argparse
import sys
from typing import Any

from animate.errors import EngineError
from animate.load_model import engine_from_config, load_model, resolver_from_config
from animate.probcli import ProbCli


def run_replay(
    args: argparse.Namespace, config: dict[str, Any], engine: ProbCli | None = None
) -> int:
    """Replay ``args.trace`` against the resolved model."""
    engine = engine or engine_from_config(config)
    with resolver_from_config(config) as resolver:
        session = load_model(args, resolver, engine, config)
        if session is None:
            return 1
        try:
            print("Starting trace replay. Use --debug to view steps.")
            session.replay(args.trace)
        except EngineError as e:
            print(f"Error replaying trace: {e}", file=sys.stderr)
            return 1
    return 0
