"""Border tool CLI

Command-line utility to inspect a palette and run border attributes through
hydration, dehydration and resets. Attribute and border arguments are JSON;
results are printed as JSON on stdout.
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from blockborder.attributes import reset_border, reset_border_radius
from blockborder.borders import dehydrate_border, hydrate_border
from blockborder.exceptions import BlockBorderError, ValidationError
from blockborder.logger import Logger, border_logger
from blockborder.palette import get_multi_origin_color
from blockborder.startup import create_palette_registry


def _load_json(raw: str) -> Any:
    """Parse a JSON argument; "-" reads it from stdin."""
    if raw == "-":
        raw = sys.stdin.read()
    return json.loads(raw)


def _load_object(raw: str, label: str, allow_null: bool = False) -> Any:
    """Parse a JSON argument that must be an object."""
    value = _load_json(raw)
    if value is None and allow_null:
        return None
    if not isinstance(value, dict):
        raise ValidationError(
            f"{label} must be a JSON object, got {type(value).__name__}",
            details={"argument": label},
        )
    return value


def _emit(value: Any) -> None:
    print(json.dumps(value, indent=2, sort_keys=True))


def _registry(args):
    origin_order = args.origins.split(",") if args.origins else None
    return create_palette_registry(args.palette_dir, origin_order, logger=args.logger)


def list_origins(args) -> int:
    """List loaded origins and their colors"""
    registry = _registry(args)
    _emit({origin.name: origin.model_dump()["colors"] for origin in registry.get_origins()})
    return 0


def resolve_color(args) -> int:
    """Resolve a slug and/or literal color"""
    registry = _registry(args)
    resolved = get_multi_origin_color(
        registry.get_origins(), named_color=args.slug, custom_color=args.color
    )
    _emit(resolved.model_dump())
    return 0


def hydrate(args) -> int:
    """Show the display value for stored attributes"""
    registry = _registry(args)
    _emit(hydrate_border(_load_object(args.attributes, "attributes"), registry.get_origins()))
    return 0


def dehydrate(args) -> int:
    """Show the attribute patch for an edited border"""
    registry = _registry(args)
    attributes = _load_object(args.attributes, "attributes") if args.attributes else {}
    border = _load_object(args.border, "border", allow_null=True)
    patch = dehydrate_border(border, attributes.get("style"), registry.get_origins())
    _emit(patch.to_attributes())
    return 0


def reset(args) -> int:
    """Show the attribute patch for a border or radius reset"""
    attributes = _load_object(args.attributes, "attributes")
    patch = reset_border_radius(attributes) if args.radius else reset_border(attributes)
    _emit(patch.to_attributes())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect palettes and border attribute transformations"
    )
    parser.add_argument(
        "--palette-dir",
        type=str,
        default=None,
        help="Palette directory (default: BLOCKBORDER_PALETTE_DIR or data/palettes)",
    )
    parser.add_argument(
        "--origins",
        type=str,
        default=None,
        help="Comma separated origin order (default: BLOCKBORDER_ORIGIN_ORDER or default,theme,user)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    origins_parser = subparsers.add_parser("origins", help="List palette origins")
    origins_parser.set_defaults(func=list_origins)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a color")
    resolve_parser.add_argument("--slug", type=str, default=None, help="Named color slug")
    resolve_parser.add_argument("--color", type=str, default=None, help="Custom color value")
    resolve_parser.set_defaults(func=resolve_color)

    hydrate_parser = subparsers.add_parser("hydrate", help="Hydrate stored attributes")
    hydrate_parser.add_argument("attributes", help="Block attributes as JSON, or - for stdin")
    hydrate_parser.set_defaults(func=hydrate)

    dehydrate_parser = subparsers.add_parser("dehydrate", help="Dehydrate an edited border")
    dehydrate_parser.add_argument("border", help="Edited border as JSON, or - for stdin")
    dehydrate_parser.add_argument(
        "--attributes", type=str, default=None, help="Current block attributes as JSON"
    )
    dehydrate_parser.set_defaults(func=dehydrate)

    reset_parser = subparsers.add_parser("reset", help="Reset border or radius")
    reset_parser.add_argument("attributes", help="Block attributes as JSON, or - for stdin")
    reset_parser.add_argument("--radius", action="store_true", help="Reset the radius instead")
    reset_parser.set_defaults(func=reset)

    return parser


def main(argv: Optional[List[str]] = None, logger: Optional[Logger] = None) -> int:
    args = build_parser().parse_args(argv)
    args.logger = logger or border_logger

    try:
        return args.func(args)
    except json.JSONDecodeError as e:
        args.logger.error(f"Invalid JSON argument: {e}")
        return 1
    except BlockBorderError as e:
        args.logger.error(f"Command '{args.command}' failed: {e.message}", error=e.to_dict())
        return 1


if __name__ == "__main__":
    sys.exit(main())
