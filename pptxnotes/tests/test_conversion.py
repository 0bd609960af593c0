import logging
import subprocess
from pathlib import Path

import pytest
from pypdf import PdfWriter

from pptxnotes import conversion
from pptxnotes.conversion import (
    convert_document,
    count_pdf_pages,
    expected_rendition_path,
    place_rendition,
)
from pptxnotes.exceptions import ConversionError


def _write_pdf(path: Path, pages: int) -> Path:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=72, height=72)
    with open(path, "wb") as f:
        writer.write(f)
    return path


def test_expected_rendition_path_uses_input_stem(tmp_path) -> None:
    assert expected_rendition_path("/in/My Deck.pptx", tmp_path) == tmp_path / "My Deck.pdf"
    assert expected_rendition_path("deck.pptx", tmp_path, "png") == tmp_path / "deck.png"


def test_convert_document_invokes_headless_converter(monkeypatch, tmp_path) -> None:
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, 0, stdout="convert ok", stderr="")

    monkeypatch.setattr(conversion.subprocess, "run", fake_run)

    result = convert_document(tmp_path / "deck.pptx", tmp_path, timeout=5)

    assert result == tmp_path / "deck.pdf"
    cmd, kwargs = calls[0]
    assert cmd == [
        "libreoffice",
        "--headless",
        "--convert-to",
        "pdf",
        str(tmp_path / "deck.pptx"),
        "--outdir",
        str(tmp_path),
    ]
    assert kwargs["timeout"] == 5
    assert kwargs["capture_output"] is True


def test_nonzero_exit_raises_conversion_error(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(
        conversion.subprocess,
        "run",
        lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 77, "", "boom"),
    )

    with pytest.raises(ConversionError) as excinfo:
        convert_document(tmp_path / "deck.pptx", tmp_path)

    assert excinfo.value.returncode == 77
    assert excinfo.value.stderr == "boom"


def test_missing_converter_raises_conversion_error(monkeypatch, tmp_path) -> None:
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(conversion.subprocess, "run", fake_run)

    with pytest.raises(ConversionError, match="Converter not found: soffice"):
        convert_document(tmp_path / "deck.pptx", tmp_path, converter="soffice")


def test_timeout_raises_conversion_error(monkeypatch, tmp_path) -> None:
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

    monkeypatch.setattr(conversion.subprocess, "run", fake_run)

    with pytest.raises(ConversionError, match="timed out"):
        convert_document(tmp_path / "deck.pptx", tmp_path, timeout=1)


def test_place_rendition_renames_and_replaces(tmp_path) -> None:
    generated = tmp_path / "deck.pdf"
    generated.write_bytes(b"new")
    destination = tmp_path / "slides.pdf"
    destination.write_bytes(b"old")

    assert place_rendition(generated, destination) == destination
    assert destination.read_bytes() == b"new"
    assert not generated.exists()


def test_place_rendition_warns_when_missing(tmp_path, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="pptxnotes.conversion"):
        assert place_rendition(tmp_path / "deck.pdf", tmp_path / "slides.pdf") is None
    assert "Rendition not found" in caplog.text


def test_count_pdf_pages(tmp_path) -> None:
    assert count_pdf_pages(_write_pdf(tmp_path / "slides.pdf", 3)) == 3


def test_count_pdf_pages_of_unreadable_file(tmp_path, caplog) -> None:
    path = tmp_path / "slides.pdf"
    path.write_bytes(b"not a pdf")
    with caplog.at_level(logging.WARNING, logger="pptxnotes.conversion"):
        assert count_pdf_pages(path) is None
    assert "Failed to read rendition" in caplog.text
