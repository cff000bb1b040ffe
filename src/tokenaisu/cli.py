"""CLI entrypoint for tokenaisu."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from tokenaisu.config import AppConfig, load_config
from tokenaisu.core import TokenizerOptions, tokenize_document
from tokenaisu.io import InvalidEncodingError, read_lines, to_json, write_json, write_lines
from tokenaisu.languages import list_languages, resolve_language
from tokenaisu.models import TokenizeResponse

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="tokenaisu",
        description="Moses-style rule-based tokenizer.",
    )
    subparsers = parser.add_subparsers(dest="command")

    tokenize = subparsers.add_parser("tokenize", help="Tokenize a text file line by line")
    tokenize.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    tokenize.add_argument(
        "-o",
        "--output",
        default="-",
        help="Output file. If omitted, prints to stdout.",
    )
    tokenize.add_argument(
        "-l",
        "--language",
        default=None,
        help="Language code (default: configured language, usually en)",
    )
    tokenize.add_argument(
        "-a",
        "--aggressive-dash-splits",
        action="store_true",
        help="Split hyphens between alphanumerics as @-@",
    )
    tokenize.add_argument(
        "--escape",
        action="store_true",
        help="Escape XML special characters and the factor separator",
    )
    tokenize.add_argument(
        "-p",
        "--protect",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Regex whose matches are never split (repeatable)",
    )
    tokenize.add_argument(
        "--protected-patterns-file",
        default=None,
        help="File with one protected regex per line",
    )
    tokenize.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes (default: configured value or all CPUs)",
    )
    tokenize.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON document instead of plain tokenized lines",
    )

    subparsers.add_parser("languages", help="List supported language codes")

    serve = subparsers.add_parser("serve", help="Run the tokenaisu HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def configure_logging(level: str) -> None:
    """Route log records to stderr at ``level``."""
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = load_config()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    configure_logging(config.log_level)

    if args.command == "languages":
        for code in list_languages():
            print(code)
        return 0

    if args.command == "tokenize":
        return _run_tokenize(args, config)

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`tokenaisu serve` requires uvicorn. Install the `serve` extra first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "tokenaisu.api:app",
            host=host,
            port=port,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


def _run_tokenize(args: argparse.Namespace, config: AppConfig) -> int:
    try:
        language = resolve_language(args.language or config.language)
        patterns = list(args.protect)
        if args.protected_patterns_file:
            patterns.extend(_read_patterns(args.protected_patterns_file))
        options = TokenizerOptions(
            aggressive_dash_splits=args.aggressive_dash_splits,
            escape=args.escape,
            protected_patterns=tuple(patterns),
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        lines = read_lines(args.input)
    except InvalidEncodingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    workers = args.workers if args.workers is not None else config.workers
    tokenized = tokenize_document(lines, language, options, workers=workers)

    try:
        if args.json:
            response = TokenizeResponse.from_lines(language.value, tokenized)
            if args.output == "-":
                print(to_json(response))
            else:
                write_json(response, args.output)
        else:
            write_lines(tokenized, args.output)
    except OSError as exc:
        print(f"error: cannot write {args.output}: {exc}", file=sys.stderr)
        return 1

    logger.debug("Tokenized %d lines as %s", len(tokenized), language.value)
    return 0


def _read_patterns(path: str) -> list[str]:
    text = Path(path).read_text(encoding="utf-8")
    return [line for line in text.splitlines() if line.strip()]


if __name__ == "__main__":
    raise SystemExit(main())
