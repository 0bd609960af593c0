from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Sequence

import pptxnotes
from pptxnotes.exceptions import ConversionError, NotesError
from pptxnotes.extractors.serialization import serialize_notes
from pptxnotes.pipeline import DEFAULT_OPTIONS, process_presentation


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pptxnotes",
        description=(
            "Extract speaker notes of a .pptx file to notes.json and render "
            "the deck to slides.pdf with LibreOffice."
        ),
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Path to the .pptx file.",
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        default=None,
        help="Output directory (default: current working directory). Created if missing.",
    )
    parser.add_argument(
        "--no-pdf",
        action="store_true",
        help="Only extract notes, skip the PDF rendition.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the notes JSON to stdout instead of writing any files.",
    )
    parser.add_argument(
        "--converter",
        default=DEFAULT_OPTIONS.converter,
        help=f"Converter executable (default: {DEFAULT_OPTIONS.converter}).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_OPTIONS.conversion_timeout,
        help="Conversion timeout in seconds.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {pptxnotes.__version__}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        return 0 if exc.code == 0 else 1

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"pptxnotes: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.stdout:
            document = pptxnotes.load_notes(args.input)
            sys.stdout.write(serialize_notes(document))
            sys.stdout.write("\n")
            return 0

        output_dir = args.output.resolve() if args.output else Path.cwd()
        options = dataclasses.replace(
            DEFAULT_OPTIONS,
            convert=not args.no_pdf,
            converter=args.converter,
            conversion_timeout=args.timeout,
        )
        try:
            result = process_presentation(args.input, output_dir, options)
        except ConversionError as exc:
            print(
                f"pptxnotes: notes written to {output_dir / options.notes_filename}",
                file=sys.stderr,
            )
            print(f"pptxnotes: PDF conversion failed: {exc}", file=sys.stderr)
            return 1

        print(f"Notes written to {result.notes_path}")
        if options.convert:
            if result.rendition_path is None:
                print(
                    "pptxnotes: warning: PDF conversion failed: output file not found.",
                    file=sys.stderr,
                )
            else:
                print(f"PDF saved as {result.rendition_path}")
        return 0
    except (NotesError, OSError) as exc:
        print(f"pptxnotes: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
