"""
Rendition of a presentation through LibreOffice in headless mode.

LibreOffice writes ``<input-stem>.<extension>`` into the output directory;
callers then move that file to its final name with :func:`place_rendition`.
"""

import logging
import subprocess
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from pptxnotes.exceptions import ConversionError

logger = logging.getLogger(__name__)

DEFAULT_CONVERTER = "libreoffice"
DEFAULT_TARGET_EXTENSION = "pdf"
DEFAULT_TIMEOUT = 120


def expected_rendition_path(
    input_path: str | Path,
    output_dir: str | Path,
    target_extension: str = DEFAULT_TARGET_EXTENSION,
) -> Path:
    return Path(output_dir) / f"{Path(input_path).stem}.{target_extension}"


def convert_document(
    input_path: str | Path,
    output_dir: str | Path,
    *,
    converter: str = DEFAULT_CONVERTER,
    target_extension: str = DEFAULT_TARGET_EXTENSION,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """
    Run the converter and return the path the rendition is expected at.

    The returned path is not checked; LibreOffice can exit 0 without
    producing output.

    Raises:
        ConversionError: If the converter is missing, times out or exits non-zero.
    """
    cmd = [
        converter,
        "--headless",
        "--convert-to",
        target_extension,
        str(input_path),
        "--outdir",
        str(output_dir),
    ]
    logger.info(f"Converting via {converter} | source={input_path} outdir={output_dir}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as exc:
        raise ConversionError(
            f"Converter not found: {converter}", cause=exc
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise ConversionError(
            f"Conversion timed out after {timeout}s (file={input_path})", cause=exc
        ) from exc

    if result.returncode != 0:
        logger.error(
            f"Conversion failed (returncode={result.returncode} stderr={result.stderr})"
        )
        raise ConversionError(
            f"{converter} exited with code {result.returncode}",
            returncode=result.returncode,
            stderr=result.stderr,
        )

    if result.stdout:
        logger.debug(result.stdout.strip())
    return expected_rendition_path(input_path, output_dir, target_extension)


def place_rendition(generated: str | Path, destination: str | Path) -> Path | None:
    """
    Move the generated rendition to ``destination``, replacing any existing file.

    Returns None, and logs a warning, when the generated file does not exist.
    """
    generated = Path(generated)
    destination = Path(destination)
    if not generated.exists():
        logger.warning(f"Rendition not found after conversion (expected={generated})")
        return None
    if generated.resolve() != destination.resolve():
        generated.replace(destination)
    return destination


def count_pdf_pages(path: str | Path) -> int | None:
    """Page count of a PDF rendition, or None if pypdf cannot read it."""
    try:
        return len(PdfReader(str(path)).pages)
    except (PyPdfError, OSError) as e:
        logger.warning("Failed to read rendition [%s]: %s", path, e)
        return None
