import typing
from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class FileMetadataInterface:
    filename: str | None = None
    file_extension: str | None = None
    file_path: str | None = None
    folder_path: str | None = None

    def populate_from_path(self, path: str | Path | None) -> None:
        """Populate file metadata fields from a path."""
        if path is None:
            return
        p = Path(path)
        self.filename = p.name
        self.file_extension = p.suffix
        self.file_path = str(p.resolve()) if p.exists() else str(p)
        self.folder_path = (
            str(p.parent.resolve()) if p.parent.exists() else str(p.parent)
        )


@dataclass(frozen=True)
class Run:
    """A styled text unit (``a:r``). ``text`` is None when the run has no ``a:t``."""

    text: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False


@dataclass(frozen=True)
class Paragraph:
    runs: tuple[Run, ...] = ()
    indent_level: int = 0

    @property
    def text(self) -> str:
        return "".join(run.text or "" for run in self.runs)


@dataclass
class SlideNotes:
    slide_index: int = -1
    # flattened markup, persisted as "notes"
    notes: str = ""
    # plain text of the notes body, never persisted
    text: str = ""

    def to_dict(self) -> dict[str, typing.Any]:
        return {"slide": self.slide_index, "notes": self.notes}


@dataclass
class NotesMetadata(FileMetadataInterface):
    total_entries: int = 0
    skipped_entries: int = 0


@dataclass
class NotesDocument:
    metadata: NotesMetadata = field(default_factory=NotesMetadata)
    slides: List[SlideNotes] = field(default_factory=list)

    def iterator(self) -> typing.Iterator[str]:
        """Plain notes text per slide, in slide order."""
        for slide in self.slides:
            yield slide.text

    def get_full_text(self) -> str:
        return "\n".join(text for text in self.iterator() if text)

    def get_metadata(self) -> NotesMetadata:
        return self.metadata

    def to_json(self) -> list[dict[str, typing.Any]]:
        return [slide.to_dict() for slide in self.slides]
