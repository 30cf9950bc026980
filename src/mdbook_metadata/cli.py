"""Command-line interface for the mdBook metadata preprocessor."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import nullcontext
from importlib.metadata import PackageNotFoundError, version

from mdbook_metadata import (
    BookLoadError,
    ConfigError,
    MetadataPreprocessor,
    PreprocessError,
    read_input,
    write_book,
)
from mdbook_metadata.progress import RichPreprocessProgress

logger = logging.getLogger(__name__)

PROG = "mdbook-metadata"


def _package_version() -> str:
    try:
        return version("mdbook-metadata")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="An mdbook preprocessor that parses markdown metadata")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")

    subparsers = parser.add_subparsers(dest="command")
    supports_parser = subparsers.add_parser("supports", help="Check whether a renderer is supported")
    supports_parser.add_argument("renderer", help="Renderer name, e.g. html")

    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(message)s", stream=sys.stderr)


def _run_preprocess(args: argparse.Namespace) -> None:
    context, book = read_input(sys.stdin)
    progress_cm = RichPreprocessProgress() if args.progress else nullcontext()
    with progress_cm as progress:
        preprocessor = MetadataPreprocessor.from_context(context, progress=progress)
        processed = preprocessor.run(book)
    write_book(processed, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "supports":
        logger.debug("Renderer support requested: %s", args.renderer)
        return 0 if MetadataPreprocessor.supports_renderer(args.renderer) else 1

    try:
        _run_preprocess(args)
        return 0
    except PreprocessError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (ConfigError, BookLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
