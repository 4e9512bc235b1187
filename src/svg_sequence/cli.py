"""Command-line interface: render a .cfg sequence file to SVG."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .errors import ConfigParseError, ConfigReadError, SequenceError
from .parser import generate_from_cfg

logger = logging.getLogger(__name__)


@dataclass
class CliError(Exception):
    code: str
    message: str
    exit_code: int = 1
    file: Optional[str] = None
    line: Optional[int] = None


class UsageError(Exception):
    pass


class FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # pragma: no cover - argparse callback
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = FriendlyArgumentParser(
        prog="svg-sequence",
        description="Generate an SVG sequence diagram from a CFG file.",
        epilog="Example:\n  svg-sequence -i sequence.cfg -o sequence.svg",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", required=True, help="Input CFG file (required)")
    parser.add_argument("-o", "--output", help="Output SVG file (default: stdout)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser


def _error_from_exception(exc: Exception) -> CliError:
    if isinstance(exc, CliError):
        return exc
    if isinstance(exc, ConfigReadError):
        return CliError("E_IO_READ", str(exc), exit_code=1, file=exc.path)
    if isinstance(exc, ConfigParseError):
        return CliError("E_PARSE", str(exc), exit_code=1, line=exc.line)
    if isinstance(exc, SequenceError):
        return CliError("E_SEQUENCE", str(exc), exit_code=1)
    return CliError("E_INTERNAL", str(exc) or exc.__class__.__name__, exit_code=1)


def _emit_error(err: CliError) -> None:
    sys.stderr.write(f"error[{err.code}]: {err.message}\n")


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise CliError(
            "E_IO_WRITE",
            f"failed to write output file: {path} ({exc})",
            exit_code=4,
            file=str(path),
        )


def main(argv: Optional[Iterable[str]] = None) -> int:
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    try:
        args = parser.parse_args(raw_argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        _emit_error(CliError("E_ARGS", str(exc), exit_code=2))
        return 2

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        svg_text = generate_from_cfg(args.input)

        if not args.output:
            sys.stdout.write(svg_text)
            return 0

        output_path = Path(args.output)
        _write_text(output_path, svg_text)
        logger.info("Sequence written to %s", output_path)
        return 0
    except Exception as exc:
        err = _error_from_exception(exc)
        _emit_error(err)
        return err.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
