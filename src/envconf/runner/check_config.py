from __future__ import annotations

import argparse
import dataclasses
import importlib
import json
import sys
from typing import Dict, List, Optional

from envconf.errors import EnvConfError
from envconf.loader import load
from envconf.utils.logger import LOG_LEVELS, configure_logging, get_logger

logger = get_logger(__name__)

MASK = "***"


def import_target(target: str) -> type:
    """Resolve ``package.module:ClassName`` to the class object."""
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"target must look like 'module:ClassName', got '{target}'")
    module = importlib.import_module(module_name)
    obj = module
    for part in attr.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise ValueError(f"target '{target}' is not a class")
    return obj


def render_record(record: object, show_values: bool = False) -> Dict[str, object]:
    payload: Dict[str, object] = {}
    for f in dataclasses.fields(record):
        value = getattr(record, f.name)
        if not show_values and isinstance(value, str) and value:
            value = MASK
        payload[f.name] = value
    return payload


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a dataclass config from .env or the environment and print it.")
    parser.add_argument("--target", required=True, help="Config dataclass as 'module:ClassName'.")
    parser.add_argument("--env-file", default=None, help="Env file name relative to --cwd (default: .env).")
    parser.add_argument("--cwd", default=None, help="Directory holding the env file (default: current directory).")
    parser.add_argument("--show-values", action="store_true", help="Print values instead of masking them.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for events written to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        record_type = import_target(args.target)
    except (ImportError, AttributeError, ValueError) as exc:
        print(f"error: cannot import target: {exc}", file=sys.stderr)
        return 2
    try:
        record = record_type()
    except TypeError as exc:
        print(f"error: {args.target} needs a default for every field: {exc}", file=sys.stderr)
        return 2

    try:
        load(record, args.env_file, cwd=args.cwd)
    except EnvConfError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    logger.info("config_checked", target=args.target, fields=len(dataclasses.fields(record)))
    print(json.dumps(render_record(record, show_values=args.show_values), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
