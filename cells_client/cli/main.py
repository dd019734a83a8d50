"""
CLI entry point for the cells-models command.

Usage:
    cells-models list
    cells-models describe RestSettingsAccess
    cells-models convert RestListProcessesRequest --input payload.json
    cat payload.json | cells-models convert RestSettingsAccess
    cells-models --swagger cellsapi-rest.swagger.json list
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from .. import model  # noqa: F401  (registers the built-in models)
from ..api_client import get_model, registered_models
from ..core.config_storage import load_config_from_file
from ..core.dto import BaseDTO
from ..core.errors import CellsError
from ..core.logging import configure_logging, get_logger
from ..swagger import load_swagger

logger = get_logger("cells.cli")


def _tag_name(tag: Any) -> Any:
    if isinstance(tag, list):
        return [_tag_name(item) for item in tag]
    if isinstance(tag, dict):
        return {key: _tag_name(value) for key, value in tag.items()}
    if isinstance(tag, type):
        return tag.__name__
    return tag


def describe_model(cls: type) -> Dict[str, Any]:
    """Return wire name -> type tag for a model, or enum member -> value."""
    if issubclass(cls, BaseDTO):
        return {
            wire_name: _tag_name(cls.swagger_types[attr])
            for attr, wire_name in cls.attribute_map.items()
        }
    return {member.name: member.value for member in cls}  # type: ignore[attr-defined]


def convert_payload(cls: type, payload: Any) -> Any:
    """Convert a payload (or each element of a list payload) with ``cls``."""
    if isinstance(payload, list):
        return [convert_payload(cls, item) for item in payload]
    record = cls.from_dict(payload)
    return record.to_dict()


def cmd_list(args: argparse.Namespace) -> int:
    for name in registered_models():
        print(name)
    return 0


def cmd_describe(args: argparse.Namespace) -> int:
    cls = get_model(args.model)
    print(json.dumps(describe_model(cls), indent=2))
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    cls = get_model(args.model)
    if not issubclass(cls, BaseDTO):
        raise CellsError(f"{args.model} is not an object model")

    if args.input:
        with open(args.input, "r") as f:
            raw = f.read()
    else:
        raw = sys.stdin.read()

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CellsError(f"Input is not valid JSON: {exc}") from exc

    print(json.dumps(convert_payload(cls, payload), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cells-models",
        description="Inspect Cells REST models and convert JSON payloads with them.",
    )
    parser.add_argument(
        "--swagger",
        help="Swagger 2.0 JSON document with extra definitions to load",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the JSON configuration file",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List registered models")
    list_parser.set_defaults(func=cmd_list)

    describe_parser = subparsers.add_parser("describe", help="Show the fields of a model")
    describe_parser.add_argument("model")
    describe_parser.set_defaults(func=cmd_describe)

    convert_parser = subparsers.add_parser("convert", help="Convert a JSON payload")
    convert_parser.add_argument("model")
    convert_parser.add_argument("--input", "-i", help="JSON file to read (default: stdin)")
    convert_parser.set_defaults(func=cmd_convert)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config_from_file(args.config) if args.config else load_config_from_file()
        configure_logging(config.logging)

        swagger_file = args.swagger
        replace = False
        if swagger_file is None and config.swagger is not None:
            swagger_file = config.swagger.definitions_file
            replace = config.swagger.replace_builtin
        if swagger_file:
            load_swagger(swagger_file, replace=replace)

        return args.func(args)
    except (CellsError, OSError) as exc:
        logger.error("cells-models %s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
