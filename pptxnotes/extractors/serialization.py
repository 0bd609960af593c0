import json
import typing
from pathlib import Path

from pptxnotes.extractors.data_types import NotesDocument, SlideNotes

_SLIDE_KEY = "slide"
_NOTES_KEY = "notes"


def serialize_notes(document: NotesDocument) -> str:
    """Render the persisted notes payload: a pretty-printed JSON array."""
    return json.dumps(document.to_json(), indent=2, ensure_ascii=False)


def write_notes(document: NotesDocument, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(serialize_notes(document), encoding="utf-8")
    return path


def _deserialize_slide(item: typing.Any) -> SlideNotes:
    if not isinstance(item, dict) or _SLIDE_KEY not in item or _NOTES_KEY not in item:
        raise ValueError(f"Not a notes record: {item!r}")
    slide, notes = item[_SLIDE_KEY], item[_NOTES_KEY]
    if isinstance(slide, bool) or not isinstance(slide, int):
        raise ValueError(f"Slide index must be an integer: {slide!r}")
    if not isinstance(notes, str):
        raise ValueError(f"Notes must be a string: {notes!r}")
    return SlideNotes(slide_index=slide, notes=notes)


def deserialize_notes(payload: typing.Any) -> NotesDocument:
    """
    Rebuild a NotesDocument from a parsed notes payload.

    This is the inverse of NotesDocument.to_json() for the persisted fields;
    plain text and metadata are not part of the payload and stay empty.

    Args:
        payload: A list of ``{"slide": int, "notes": str}`` objects, or the
            JSON text of such a list.

    Raises:
        ValueError: If the payload is not a list of notes records.
    """
    if isinstance(payload, str):
        payload = json.loads(payload)
    if not isinstance(payload, list):
        raise ValueError("Notes payload must be a list")
    return NotesDocument(slides=[_deserialize_slide(item) for item in payload])
