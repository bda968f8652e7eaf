"""
Token Generator - Main Entry Point

Runs one color token generation against a fresh in-memory document and
prints the resulting namespaces and diagnostics.
"""

import argparse
import logging
import sys
import os

# Add src to path
src_path = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, src_path)

from core.generation_state import APPEARANCES
from models.results import GenerationStatus

logger = logging.getLogger(__name__)

EXIT_CODES = {
    GenerationStatus.COMPLETE: 0,
    GenerationStatus.DEGRADED: 1,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="token-synth",
        description="Generate primitive, semantic and spacing design tokens from seed colors.",
    )
    parser.add_argument("--brand", dest="hex_color", help="Brand seed color, e.g. '#3B82F6'")
    parser.add_argument("--neutral", help="Neutral seed color")
    parser.add_argument("--success", help="Success seed color")
    parser.add_argument("--error", help="Error seed color")
    parser.add_argument("--appearance", choices=APPEARANCES, help="Appearance modes to generate")
    parser.add_argument(
        "--no-primitives",
        dest="include_primitives",
        action="store_false",
        default=None,
        help="Write role tokens directly instead of primitive + semantic namespaces",
    )
    parser.add_argument("--font", dest="font_family", help="Font family; enables spacing tokens")
    parser.add_argument(
        "--documentation",
        dest="export_documentation",
        action="store_true",
        default=None,
        help="Build the documentation table",
    )
    parser.add_argument("--config", default="config/default_config.yaml", help="Configuration file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def option_overrides(args: argparse.Namespace) -> dict:
    """Options given on the command line; unset arguments keep the configured defaults"""
    names = (
        "hex_color", "neutral", "success", "error", "appearance",
        "include_primitives", "font_family", "export_documentation",
    )
    return {
        name: getattr(args, name)
        for name in names
        if getattr(args, name) is not None
    }


def print_report(report) -> None:
    print(report.summary)
    for kind, collection in report.collections.items():
        modes = ", ".join(mode.name for mode in collection.modes)
        print(f"  {kind:<10} {collection.name} [{modes}] {collection.variable_count} tokens")

    if report.documentation:
        print("Documentation:")
        for row in report.documentation:
            print(f"  {row.category:<10} {row.name:<36} {row.primitive_source:<22} {row.hex_value}")

    for message in report.warnings:
        print(f"WARNING: {message}")
    for message in report.errors:
        print(f"ERROR: {message}", file=sys.stderr)


def main(argv=None) -> int:
    """Application entry point"""
    args = build_parser().parse_args(argv)

    from app.container_factory import GeneratorContainerFactory
    container = GeneratorContainerFactory.create(config_path=args.config)

    level = "DEBUG" if args.verbose else container.config.get("logging.level", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=container.config.get("logging.format", "%(levelname)s %(name)s: %(message)s"),
    )

    try:
        container.state.update_options(option_overrides(args))
        report = container.generation.generate()
        print_report(report)
    finally:
        container.cleanup()

    return EXIT_CODES.get(report.status, 2)


if __name__ == "__main__":
    sys.exit(main())
