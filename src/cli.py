"""Command-line interface for module-poet."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from blueprint.write import build_project_blueprint, write_blueprint
from config.loader import SAMPLE_CONFIG, load_config
from errors import ConfigurationError
from logging_config import setup_logging
from verify.verify import verify_blueprint


def _add_config_path(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "config",
        help="Generation config file (.json or .toml)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="poet")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log topology and partition details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate", help="Build the project blueprint and print the dependency graph"
    )
    _add_config_path(generate_parser)
    generate_parser.add_argument(
        "--out",
        default=None,
        help="Write the blueprint as JSON to this path",
    )

    verify_parser = subparsers.add_parser(
        "verify", help="Verify a written blueprint is reproducible from its config"
    )
    _add_config_path(verify_parser)
    verify_parser.add_argument(
        "--blueprint",
        required=True,
        help="Previously written blueprint JSON",
    )

    subparsers.add_parser("sample", help="Print a sample generation config")

    return parser


def _handle_generate(config_path: Path, out: str | None) -> int:
    started = time.perf_counter()
    config = load_config(config_path)
    blueprint = build_project_blueprint(config)
    if out is not None:
        write_blueprint(Path(out).expanduser().resolve(), blueprint)
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    sys.stdout.write(f"Finished in {elapsed_ms} ms\n")
    sys.stdout.write("Dependency graph:\n")
    for line in blueprint.describe():
        sys.stdout.write(f"{line}\n")
    if blueprint.has_circular_dependencies():
        sys.stdout.write("WARNING: there are circular dependencies\n")
    return 0


def _handle_verify(config_path: Path, blueprint: str) -> int:
    blueprint_path = Path(blueprint).expanduser().resolve()
    try:
        result = verify_blueprint(config_path=config_path, blueprint_path=blueprint_path)
    except FileNotFoundError as exc:
        sys.stderr.write(f"blueprint: {blueprint_path}\n")
        sys.stderr.write(f"error: {exc}\n")
        return 2
    if not result.ok:
        for path in result.mismatches:
            sys.stderr.write(f"mismatch: {path}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None, force=args.verbose)

    if args.command == "sample":
        sys.stdout.write(SAMPLE_CONFIG)
        return 0

    config_path = Path(args.config).expanduser().resolve()
    try:
        if args.command == "generate":
            return _handle_generate(config_path, args.out)

        if args.command == "verify":
            return _handle_verify(config_path, args.blueprint)
    except ConfigurationError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
