import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pptxnotes.conversion import (
    DEFAULT_CONVERTER,
    DEFAULT_TARGET_EXTENSION,
    DEFAULT_TIMEOUT,
    convert_document,
    count_pdf_pages,
    place_rendition,
)
from pptxnotes.extractors.data_types import NotesDocument
from pptxnotes.extractors.notes_extractor import read_pptx_notes
from pptxnotes.extractors.serialization import write_notes
from pptxnotes.extractors.util.zip_bomb import DEFAULT_ZIP_BOMB_LIMITS, ZipBombLimits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessingOptions:
    notes_filename: str = "notes.json"
    rendition_filename: str = "slides.pdf"
    convert: bool = True
    converter: str = DEFAULT_CONVERTER
    target_extension: str = DEFAULT_TARGET_EXTENSION
    conversion_timeout: float = DEFAULT_TIMEOUT
    zip_limits: ZipBombLimits = field(default=DEFAULT_ZIP_BOMB_LIMITS)


DEFAULT_OPTIONS = ProcessingOptions()


@dataclass
class ProcessingResult:
    document: NotesDocument
    notes_path: Path
    # None when conversion was disabled or the rendition did not appear
    rendition_path: Path | None = None
    rendition_pages: int | None = None


def load_notes(
    input_path: str | Path, *, limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS
) -> NotesDocument:
    input_path = Path(input_path)
    with open(input_path, "rb") as f:
        file_like = io.BytesIO(f.read())
    return next(read_pptx_notes(file_like, str(input_path), limits=limits))


def process_presentation(
    input_path: str | Path,
    output_dir: str | Path,
    options: ProcessingOptions = DEFAULT_OPTIONS,
) -> ProcessingResult:
    """
    Write the notes of a presentation to disk, then render it.

    The notes file is written before conversion starts and is kept when the
    conversion fails.

    Args:
        input_path: Path of the .pptx package.
        output_dir: Directory receiving the notes file and the rendition.
            Created if missing.
        options: File names and converter settings.

    Returns:
        ProcessingResult with the extracted document and the written paths.

    Raises:
        ArchiveError: If the input is not a readable presentation package.
        ConversionError: If the converter fails.
    """
    input_path = Path(input_path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    document = load_notes(input_path, limits=options.zip_limits)
    notes_path = write_notes(document, output_dir / options.notes_filename)
    logger.info("Notes written to %s", notes_path)

    result = ProcessingResult(document=document, notes_path=notes_path)
    if not options.convert:
        return result

    generated = convert_document(
        input_path,
        output_dir,
        converter=options.converter,
        target_extension=options.target_extension,
        timeout=options.conversion_timeout,
    )
    result.rendition_path = place_rendition(
        generated, output_dir / options.rendition_filename
    )
    if result.rendition_path is not None and options.target_extension == "pdf":
        result.rendition_pages = count_pdf_pages(result.rendition_path)
        logger.info(
            "Rendition saved as %s (%s pages)",
            result.rendition_path,
            result.rendition_pages,
        )
    return result
