"""Command-line interface for animating Event-B machines with ProB.

The model argument may be a single ``.bum`` file, a Rodin project directory
or a zip archive of one. Bundles are resolved to their most refined machine
before the ProB engine is invoked.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TYPE_CHECKING, Any

from animate.load_config import load_config
from animate.run_animation import run_animation
from animate.run_info import run_info
from animate.run_replay import run_replay

if TYPE_CHECKING:
    from animate.probcli import ProbCli

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def init_logging(debug: bool) -> None:
    """Configure logging: quiet by default, everything with ``--debug``."""
    logging.basicConfig(format=LOG_FORMAT)
    root = logging.getLogger()
    if debug:
        root.setLevel(logging.DEBUG)
        logging.getLogger("animate").setLevel(logging.NOTSET)
    else:
        root.setLevel(logging.WARNING)
        logging.getLogger("animate").setLevel(logging.INFO)


def _package_version() -> str:
    try:
        return version("animate")
    except PackageNotFoundError:
        return "unknown"


def build_parser(config: dict[str, Any]) -> argparse.ArgumentParser:
    """Build the argument parser, taking numeric defaults from the config."""
    defaults = config["defaults"]

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "model",
        type=Path,
        help="path to model.bum, a project directory, or a .zip file",
    )
    common.add_argument(
        "-z",
        "--size",
        type=int,
        default=defaults["size"],
        help="default size for ProB sets (default: %(default)s)",
    )
    common.add_argument(
        "--perf",
        action="store_true",
        help="print ProB performance info",
    )
    # SUPPRESS keeps the subcommand from resetting a root-level --debug
    common.add_argument(
        "--debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="enable debug log",
    )

    ap = argparse.ArgumentParser(
        prog="animate",
        description="Animate Event-B machines with ProB.",
    )
    ap.add_argument(
        "--version", action="version", version=f"animate {_package_version()}"
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument("--debug", action="store_true", help="enable debug log")
    sub = ap.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", parents=[common], help="Randomly animate the model")
    run.add_argument(
        "-s",
        "--steps",
        type=int,
        default=defaults["steps"],
        help="number of random steps (default: %(default)s)",
    )
    run.add_argument(
        "-i", "--invariants", action="store_true", help="check invariants"
    )
    run.add_argument(
        "--save",
        type=Path,
        metavar="trace.json",
        help="save animation trace in json to a file",
    )
    run.set_defaults(handler=run_animation)

    replay = sub.add_parser("replay", parents=[common], help="Replay json trace")
    replay.add_argument(
        "-t",
        "--trace",
        type=Path,
        required=True,
        metavar="trace.json",
        help="Path to a json trace",
    )
    replay.set_defaults(handler=run_replay)

    info = sub.add_parser(
        "info", parents=[common], help="Dump information about the model"
    )
    info.add_argument(
        "-m", "--machine", type=Path, metavar="machine.dot",
        help="save machine hierarchy graph in dot or svg",
    )
    info.add_argument(
        "-e", "--events", type=Path, metavar="events.dot",
        help="save events hierarchy graph in dot or svg",
    )
    info.add_argument(
        "-p", "--properties", type=Path, metavar="properties.dot",
        help="save properties graph in dot or svg",
    )
    info.add_argument(
        "-i", "--invariant", type=Path, metavar="invariant.dot",
        help="save invariant graph in dot or svg",
    )
    info.add_argument(
        "-b", "--bmodel", type=Path, metavar="model.eventb",
        help="dump prolog model to .eventb file",
    )
    info.set_defaults(handler=run_info)
    return ap


def _config_path(argv: Sequence[str] | None) -> str | None:
    """Find ``--config`` before the full parse, since it feeds the defaults."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    known, _ = pre.parse_known_args(argv)
    return known.config


def main(argv: Sequence[str] | None = None, engine: ProbCli | None = None) -> int:
    """Run the animate command line."""
    config = load_config(_config_path(argv))
    args = build_parser(config).parse_args(argv)
    init_logging(args.debug)
    return args.handler(args, config, engine)


if __name__ == "__main__":
    raise SystemExit(main())
