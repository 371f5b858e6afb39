"""Command-line interface for the HTML Obfuscator.

WHY: Build scripts and deploy pipelines need to obfuscate pages without
a window. The CLI wires the core and the formatter registry behind a
single command, and can also reveal the markup inside a generated page.

HOW: Uses argparse to accept an input file (or "-" for stdin), output
format selection, output directory, and unit width. Runs encode(), then
each selected formatter, and saves the files next to the source (or to
--output-dir). --stdout prints the full document instead; --reveal
decodes a previously generated document. Status messages go to stderr.

RULES:
- Positional argument: input file path, or "-" to read stdin
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts
  (-obfuscated-2.html); stdin input uses the stem "stdin" and the CWD
- Status output goes to stderr (not stdout)
- Every failure prints "Error: ..." to stderr and exits with status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from html_obfuscator.config import (
    DEFAULT_UNIT_WIDTH,
    LOG_LEVEL,
    UNIT_WIDTH_CHOICES,
    parse_unit_width,
)
from html_obfuscator.core.decoder import reveal
from html_obfuscator.core.errors import ObfuscatorError
from html_obfuscator.core.obfuscator import encode
from html_obfuscator.formatters import FORMATTERS
from html_obfuscator.formatters.base import FormatterOutput

_STDIN_MARKER = "-"
_STDIN_STEM = "stdin"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _read_input(source: str) -> str:
    """Read the markup from a file path or stdin."""
    if source == _STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    if not path.is_file():
        _fail("File not found: {}".format(path.resolve()))
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        _fail("Input file is not valid UTF-8: {}".format(path))


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the obfuscator multiple times on the same file.
    Overwriting a previous output would lose work.

    RULES:
    - First attempt: {stem}{suffix} (e.g. landing-obfuscated.html)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. landing-obfuscated-2.html)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _select_formats(formats: Optional[str]) -> List[str]:
    if not formats:
        return list(FORMATTERS.keys())

    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _run(args: argparse.Namespace) -> None:
    """Execute one CLI invocation.

    RULES:
    - --reveal short-circuits: decode INPUT and print the markup to stdout
    - --stdout prints OutputDocument.html and saves nothing
    - Otherwise every selected formatter's outputs are saved
    """
    text = _read_input(args.input_file)

    if args.reveal:
        try:
            markup = reveal(text)
        except ObfuscatorError as exc:
            _fail(str(exc))
        sys.stdout.write(markup + "\n")
        return

    try:
        unit_width = parse_unit_width(args.unit_width)
    except ValueError as exc:
        _fail(str(exc))

    format_keys = _select_formats(args.formats)

    if args.input_file == _STDIN_MARKER:
        stem = _STDIN_STEM
        default_dir = Path.cwd()
    else:
        input_path = Path(args.input_file).resolve()
        stem = input_path.stem
        default_dir = input_path.parent

    output_dir = Path(args.output_dir).resolve() if args.output_dir else default_dir
    if not args.stdout and not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        document = encode(text, unit_width)
    except ObfuscatorError as exc:
        _fail(str(exc))

    _status("Encoded {} code units ({}-digit hex)".format(
        document.code_units.unit_count, document.unit_width,
    ))

    if args.stdout:
        sys.stdout.write(document.html + "\n")
        return

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(document):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="html-obfuscator",
        description="Turn HTML into a self-decoding page whose source does not "
                    "show the original markup.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the HTML file to obfuscate, or '-' to read stdin.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--unit-width",
        choices=UNIT_WIDTH_CHOICES,
        default=DEFAULT_UNIT_WIDTH,
        help="Hex digits per UTF-16 code unit; 'auto' uses 2 when the text "
             "fits in one byte per unit, otherwise 4 (default: %(default)s).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the obfuscated document to stdout instead of saving files.",
    )

    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Treat the input as a generated document and print the markup it rebuilds.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (DEBUG, INFO, WARNING, ERROR) (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    _run(args)


if __name__ == "__main__":
    main()
