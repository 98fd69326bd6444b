#!/usr/bin/env python3
"""
Product-name suggestions: CLI entry point.

Asks a Gemini text model for SEO-friendly names for one or more product
titles and prints only the list content of each response.  With
``--from-file`` the model is skipped and a saved response is cleaned
instead.

Usage::

    python suggest_names.py "Green plant"
    python suggest_names.py "Green plant" "Ceramic pot" --project my-gcp-project
    python suggest_names.py --from-file response.txt --debug-lines
    cat response.txt | python suggest_names.py --from-file -

Verbosity levels::

    -v 0   Quiet: warnings and errors only.
    -v 1   Normal: progress bars and per-product summaries (default).
    -v 2   Debug: timings and retry detail.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from extraction.models import TerminatorPolicy
from suggestion.generator import DEFAULT_MODEL
from suggestion.pipeline import SuggestionConfig, SuggestionPipeline, SuggestionResult

logger = logging.getLogger("suggestion")

# Mapping from --verbose integer to logging level
_VERBOSITY_MAP = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


# ------------------------------------------------------------------
# Argument parsing
# ------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser with all pipeline options."""
    p = argparse.ArgumentParser(
        description="Suggest product names with a generative model and keep only the lists.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            '  python suggest_names.py "Green plant"\n'
            "  python suggest_names.py --from-file response.txt\n"
            "  python suggest_names.py --from-file - --stop-at-terminator\n"
        ),
    )

    # -- Positional --------------------------------------------------------
    p.add_argument(
        "products",
        nargs="*",
        help="Product titles to generate names for",
    )

    # -- Input -------------------------------------------------------------
    p.add_argument(
        "--from-file",
        default=None,
        metavar="PATH",
        help="Extract lists from a saved model response ('-' for stdin) "
        "instead of calling the model",
    )

    # -- Extraction --------------------------------------------------------
    extraction = p.add_argument_group("extraction")
    extraction.add_argument(
        "--stop-at-terminator",
        action="store_true",
        help="Stop at the first **Remember:** / bold-label line instead of "
        "skipping just that line",
    )

    # -- Model -------------------------------------------------------------
    model = p.add_argument_group("model")
    model.add_argument(
        "--model",
        default=DEFAULT_MODEL,
        help=f"Vertex AI model id (default: {DEFAULT_MODEL})",
    )
    model.add_argument(
        "--project",
        default=None,
        help="Google Cloud project (default: $GOOGLE_CLOUD_PROJECT)",
    )
    model.add_argument(
        "--location",
        default=None,
        help="Vertex AI region (default: $GOOGLE_CLOUD_REGION)",
    )
    model.add_argument(
        "--temperature",
        type=float,
        default=0.9,
        metavar="FLOAT",
        help="Sampling temperature (default: 0.9)",
    )
    model.add_argument(
        "--retries",
        type=int,
        default=3,
        metavar="N",
        help="Generation attempts per product (default: 3)",
    )

    # -- Debug / output control --------------------------------------------
    debug = p.add_argument_group("debug & output")
    debug.add_argument(
        "--debug-lines",
        action="store_true",
        help="Log how every response line was classified",
    )
    debug.add_argument(
        "-v",
        "--verbose",
        type=int,
        choices=[0, 1, 2],
        default=1,
        help="Verbosity: 0=quiet, 1=normal (default), 2=debug",
    )
    debug.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars",
    )

    return p


# ------------------------------------------------------------------
# Logging setup
# ------------------------------------------------------------------


def _configure_logging(verbosity: int) -> None:
    """
    Set up the ``suggestion`` and ``extraction`` loggers.

    At verbosity 0 (WARNING), uses a minimal format. At 2 (DEBUG),
    includes timestamps and the module name.
    """
    level = _VERBOSITY_MAP.get(verbosity, logging.INFO)

    if level <= logging.DEBUG:
        fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        datefmt = "%H:%M:%S"
    elif level <= logging.INFO:
        fmt = "%(message)s"
        datefmt = None
    else:
        fmt = "%(levelname)s: %(message)s"
        datefmt = None

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    for name in ("suggestion", "extraction"):
        pkg_logger = logging.getLogger(name)
        pkg_logger.setLevel(level)
        pkg_logger.handlers.clear()
        pkg_logger.addHandler(handler)

    # Suppress noisy third-party loggers regardless of verbosity
    for name in ("google", "langchain", "urllib3", "grpc"):
        logging.getLogger(name).setLevel(logging.WARNING)


# ------------------------------------------------------------------
# Input / output
# ------------------------------------------------------------------


def _read_response(path: str) -> str:
    """Read a saved model response from *path*, or stdin for ``-``."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _print_results(results: List[SuggestionResult]) -> None:
    """Write extracted lists to stdout, one block per product."""
    many = len(results) > 1
    for result in results:
        if many:
            print(f"## {result.product_name}")
        if result.suggestions:
            print(result.suggestions)
        if many:
            print()
        logger.info(result.summary())


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------


def main(argv=None):
    """Parse arguments, configure logging, and run the pipeline."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Logging must be configured before any logger calls
    _configure_logging(args.verbose)

    if args.from_file is None and not args.products:
        parser.error("Give at least one product title, or --from-file PATH.")
    if args.from_file is not None and args.products:
        parser.error("Product titles and --from-file are mutually exclusive.")
    if args.from_file not in (None, "-") and not Path(args.from_file).is_file():
        parser.error(f"Input file not found: {args.from_file}")
    if args.retries < 1:
        parser.error("--retries must be >= 1")

    policy = (
        TerminatorPolicy.STOP if args.stop_at_terminator else TerminatorPolicy.SKIP_LINE
    )

    config = SuggestionConfig(
        model_name=args.model,
        project=args.project,
        location=args.location,
        temperature=args.temperature,
        max_retries=args.retries,
        policy=policy,
        debug_lines=args.debug_lines,
        disable_tqdm=args.no_progress or args.verbose == 0,
    )
    pipeline = SuggestionPipeline(config)

    if args.from_file is not None:
        try:
            raw_text = _read_response(args.from_file)
        except (OSError, UnicodeDecodeError) as e:
            parser.error(f"Could not read {args.from_file}: {e}")
        results = [pipeline.extract(raw_text)]
    else:
        logger.info("Product name suggestions")
        logger.info("  Model:    %s", config.model_name)
        logger.info("  Products: %d", len(args.products))
        results = pipeline.suggest_many(args.products)

    _print_results(results)

    if not any(r.suggestions for r in results):
        logger.warning("No list content was produced")
        sys.exit(1)


if __name__ == "__main__":
    main()
