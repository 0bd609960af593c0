import io

import pytest
from helpers import (
    NOTES_RELS,
    build_pptx,
    notes_slide_xml,
    paragraph_xml,
    run_xml,
)


@pytest.fixture
def sample_pptx() -> io.BytesIO:
    """A deck with notes on slides 1, 2 and 10, stored out of order."""
    return build_pptx(
        {
            "ppt/notesSlides/notesSlide10.xml": notes_slide_xml(
                paragraph_xml(run_xml("Closing", b="1"))
            ),
            "ppt/notesSlides/_rels/notesSlide10.xml.rels": NOTES_RELS,
            "ppt/notesSlides/notesSlide2.xml": notes_slide_xml(
                paragraph_xml(run_xml("Intro"), run_xml("text", i="1")),
                paragraph_xml(run_xml("point", u="sng"), lvl="1"),
            ),
            "ppt/notesSlides/_rels/notesSlide2.xml.rels": NOTES_RELS,
            "ppt/notesSlides/notesSlide1.xml": notes_slide_xml(
                paragraph_xml(run_xml("Welcome"))
            ),
        }
    )


@pytest.fixture
def sample_pptx_file(tmp_path, sample_pptx):
    path = tmp_path / "deck.pptx"
    path.write_bytes(sample_pptx.getvalue())
    return path
