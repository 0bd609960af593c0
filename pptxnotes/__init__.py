"""
pptxnotes: speaker notes extraction for PowerPoint packages.

Reads the notes slides of a .pptx file, flattens their rich text into
HTML-like markup (one string per slide) and writes them, sorted by slide, to
a JSON file. Optionally renders the deck to PDF through LibreOffice.
"""

import io
from pathlib import Path
from typing import Any, Generator

from pptxnotes.exceptions import (
    ArchiveEncryptedError,
    ArchiveError,
    ArchiveZipBombError,
    ConversionError,
    NotesError,
)
from pptxnotes.extractors.data_types import NotesDocument, Paragraph, Run, SlideNotes
from pptxnotes.extractors.util.zip_bomb import (
    DEFAULT_ZIP_BOMB_LIMITS,
    ZipBombLimits,
)
from pptxnotes.pipeline import (
    ProcessingOptions,
    ProcessingResult,
    load_notes,
    process_presentation,
)

__version__ = "0.1.0"


def read_pptx_notes(
    file_like: io.BytesIO,
    path: str | None = None,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
) -> Generator[NotesDocument, Any, None]:
    """Extract speaker notes from a PPTX file."""
    from pptxnotes.extractors.notes_extractor import (
        read_pptx_notes as _read_pptx_notes,
    )

    return _read_pptx_notes(file_like, path, limits=limits)


def read_file(path: str | Path) -> Generator[NotesDocument, Any, None]:
    """
    Read a .pptx file from disk and extract its speaker notes.

    Raises:
        ArchiveError: If the file is not a readable presentation package.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> import pptxnotes
        >>> for document in pptxnotes.read_file("deck.pptx"):
        ...     print(document.to_json())
    """
    path = Path(path)
    with open(path, "rb") as f:
        yield from read_pptx_notes(io.BytesIO(f.read()), str(path))


__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_file",
    "read_pptx_notes",
    "load_notes",
    "process_presentation",
    # Data types
    "NotesDocument",
    "SlideNotes",
    "Paragraph",
    "Run",
    "ProcessingOptions",
    "ProcessingResult",
    "ZipBombLimits",
    # Errors
    "NotesError",
    "ArchiveError",
    "ArchiveEncryptedError",
    "ArchiveZipBombError",
    "ConversionError",
]
