"""Command-line interface for the specification mapper.

Usage::

    specmap [--reqs REQUIREMENTS.md] [--spec-map OUT.md] [--store] \
        integration_test/*_test.dart

The report is always printed to stdout.  With ``--store`` it is also written
as markdown to ``--spec-map`` (``docs/specifications-map.md`` by default).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, TextIO

from .aggregate import create_specification_map
from .config import SpecMapConfig, load_config
from .errors import SpecMapError
from .extract import expand_test_paths, parse_test_files
from .report import render_console, render_markdown, store_markdown
from .requirements import parse_requirements_file

logger = logging.getLogger("specmap")


def run(config: SpecMapConfig, out: TextIO | None = None) -> int:
    """Run the pipeline described by ``config``.

    Read errors raise :class:`SpecMapError` before the report is printed;
    a failure to store the markdown raises after it.
    """
    out = out or sys.stdout
    test_cases = parse_test_files(config.test_files, config.call_token)
    requirements = parse_requirements_file(config.requirements_file)
    spec_map, untagged = create_specification_map(test_cases)
    logger.debug(
        "Mapped %d test case(s): %d tag(s), %d untagged",
        len(test_cases),
        len(spec_map),
        len(untagged),
    )

    out.write(render_console(spec_map, untagged, requirements))

    if config.store:
        logger.info("Storing specification map in %s", config.spec_map_output)
        store_markdown(
            config.spec_map_output,
            render_markdown(spec_map, untagged, requirements),
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="specmap",
        description=(
            "Map patrolTest descriptions to tags and reconcile them with a "
            "requirement table."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "test_files",
        nargs="*",
        metavar="testfile",
        help="Test source files or glob patterns to scan",
    )
    parser.add_argument(
        "--reqs",
        dest="requirements_file",
        default=None,
        help="Path to file with requirements (markdown table)",
    )
    parser.add_argument(
        "--spec-map",
        dest="spec_map_output",
        default=None,
        help="Filepath for output of specification map "
        "(default: docs/specifications-map.md)",
    )
    parser.add_argument(
        "--store",
        action="store_true",
        default=None,
        help="Whether to store the output to disk",
    )
    parser.add_argument(
        "--call-token",
        default=None,
        help="Test function whose descriptions are collected (default: patrolTest)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Configuration file (default: .specmap.yml when present)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def build_config(args: argparse.Namespace) -> SpecMapConfig:
    settings = load_config(args.config)
    for key in ("requirements_file", "spec_map_output", "store", "call_token"):
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    return SpecMapConfig(
        test_files=expand_test_paths(args.test_files),
        requirements_file=settings["requirements_file"],
        spec_map_output=settings["spec_map_output"],
        store=settings["store"],
        call_token=settings["call_token"],
    )


def main(argv: List[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[specmap] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    if not args.test_files:
        parser.error("Please specify test files")

    try:
        return run(build_config(args))
    except SpecMapError as exc:
        print(str(exc), file=sys.stderr)
        return 1
