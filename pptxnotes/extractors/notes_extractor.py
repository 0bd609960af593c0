"""
Speaker Notes Extractor
=======================

Extracts the speaker notes of a PowerPoint .pptx package as flattened
HTML-like markup, one record per notes slide.

File Format Background
----------------------
Each slide that carries notes has a companion part in the package:

    ppt/notesSlides/notesSlide1.xml, notesSlide2.xml, ...
    ppt/notesSlides/_rels/notesSlide1.xml.rels

The numeric suffix of the part name is used as the slide index. The notes
text lives in the first ``p:txBody`` of the part; each ``a:p`` below it is a
paragraph made of ``a:r`` runs whose ``a:rPr`` carries the run formatting.

Output
------
Every qualifying part with a ``p:txBody`` yields a :class:`SlideNotes`, even
when its text is empty. Parts without a ``p:txBody`` (including the
``.rels`` companions and parts that fail to parse) are skipped. Records are
sorted by ascending slide index once all parts have been read; parts whose
name carries no numeric suffix get index ``-1`` and sort first.

Usage
-----
    >>> import io
    >>> from pptxnotes.extractors.notes_extractor import read_pptx_notes
    >>>
    >>> with open("slides.pptx", "rb") as f:
    ...     for doc in read_pptx_notes(io.BytesIO(f.read()), path="slides.pptx"):
    ...         for slide in doc.slides:
    ...             print(slide.slide_index, slide.notes)
"""

import io
import logging
import re
from typing import Any, Callable, Generator, Iterable, Mapping

from pptxnotes.exceptions import ArchiveError, NotesError
from pptxnotes.extractors.data_types import NotesDocument, NotesMetadata, SlideNotes
from pptxnotes.extractors.formatting import format_paragraph, read_paragraph
from pptxnotes.extractors.util.package_reader import PackageReader
from pptxnotes.extractors.util.zip_bomb import DEFAULT_ZIP_BOMB_LIMITS, ZipBombLimits
from pptxnotes.extractors.xml_tree import DocumentTree, parse_document

logger = logging.getLogger(__name__)

P_TXBODY = "p:txBody"
A_P = "a:p"

NOTES_ENTRY_PATTERN = re.compile(r"notesSlide\w+", re.IGNORECASE)
SLIDE_INDEX_PATTERN = re.compile(r"notesSlide(\d+)\.xml$")

UNNUMBERED_SLIDE = -1


def is_notes_entry(name: str) -> bool:
    return NOTES_ENTRY_PATTERN.search(name) is not None


def slide_index_from_name(name: str) -> int:
    match = SLIDE_INDEX_PATTERN.search(name)
    return int(match.group(1)) if match else UNNUMBERED_SLIDE


def collect_slide_notes(name: str, tree: DocumentTree) -> SlideNotes | None:
    """
    Flatten the notes body of one notes-slide part.

    Returns None when the tree has no ``p:txBody``.
    """
    body = tree.find_element(P_TXBODY)
    if body is None:
        return None

    paragraphs = [read_paragraph(p) for p in body.iter_descendants(A_P)]
    notes = "".join(format_paragraph(paragraph) for paragraph in paragraphs)
    text = "\n".join(paragraph.text for paragraph in paragraphs)

    return SlideNotes(
        slide_index=slide_index_from_name(name),
        notes=notes.strip(),
        text=text.strip(),
    )


def sort_notes(notes: Iterable[SlideNotes]) -> list[SlideNotes]:
    return sorted(notes, key=lambda slide: slide.slide_index)


def extract_notes(
    entries: Mapping[str, Callable[[], str]],
) -> tuple[list[SlideNotes], int]:
    """
    Collect notes from every qualifying entry and sort them by slide index.

    Args:
        entries: Entry identifier mapped to an accessor returning its text.

    Returns:
        The sorted records and the number of qualifying entries skipped.
    """
    collected: list[SlideNotes] = []
    skipped = 0

    for name, read_text in entries.items():
        if not is_notes_entry(name):
            continue

        tree = parse_document(read_text(), "text/xml")
        slide = collect_slide_notes(name, tree)
        if slide is None:
            logger.debug(f"Skipping [{name}]: no notes body")
            skipped += 1
            continue
        collected.append(slide)

    return sort_notes(collected), skipped


def read_pptx_notes(
    file_like: io.BytesIO,
    path: str | None = None,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
) -> Generator[NotesDocument, Any, None]:
    """
    Extract the speaker notes of a .pptx package.

    This function uses a generator pattern for API consistency with
    :func:`pptxnotes.read_file`, even though a package holds one document.

    Args:
        file_like: BytesIO object containing the complete package data.
        path: Optional filesystem path used to populate file metadata.
        limits: ZIP-bomb thresholds applied when opening the package.

    Yields:
        NotesDocument: slides sorted by ascending slide index.

    Raises:
        ArchiveError: If the bytes cannot be read as a presentation package.
    """
    try:
        logger.debug("Reading pptx notes")
        with PackageReader(file_like, limits=limits, source=path) as package:
            entries = package.entries()
            slides, skipped = extract_notes(entries)

        metadata = NotesMetadata(total_entries=len(entries), skipped_entries=skipped)
        metadata.populate_from_path(path)

        logger.info(
            "Extracted notes: %d slides, %d notes parts skipped",
            len(slides),
            skipped,
        )
        yield NotesDocument(metadata=metadata, slides=slides)
    except NotesError:
        raise
    except Exception as exc:
        raise ArchiveError("Failed to read presentation package", cause=exc) from exc
