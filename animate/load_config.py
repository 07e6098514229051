"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from animate.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "probcli": {
        "executable": "probcli",
        "extra_args": [],
    },
    "preferences": {},
    "extensions": {
        "machine": ".bum",
        "archive": ".zip",
    },
    "scratch": {
        "prefix": "animate-",
    },
    "defaults": {
        "steps": 5,
        "size": 4,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
