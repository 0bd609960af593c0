import io
import logging
import zipfile
from typing import Callable

from pptxnotes.exceptions import ArchiveEncryptedError, ArchiveError
from pptxnotes.extractors.util.encryption import is_ooxml_encrypted
from pptxnotes.extractors.util.zip_bomb import (
    DEFAULT_ZIP_BOMB_LIMITS,
    ZipBombLimits,
    open_zipfile,
)

logger = logging.getLogger(__name__)


class PackageReader:
    """
    Read-only view over the entries of a zipped presentation package.

    The archive is opened once; entry contents are decoded lazily through
    per-entry accessors so callers only pay for the entries they read.
    """

    def __init__(
        self,
        file_like: io.BytesIO,
        *,
        limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
        source: str | None = None,
    ):
        self.source = source
        if is_ooxml_encrypted(file_like):
            raise ArchiveEncryptedError(
                "Presentation is encrypted or password-protected"
            )
        try:
            self._zip = open_zipfile(file_like, limits=limits, source=source)
        except ArchiveError:
            raise
        except zipfile.BadZipFile as exc:
            raise ArchiveError(
                f"Not a valid presentation package: {source or '<bytes>'}", cause=exc
            ) from exc
        self._names = [
            info.filename for info in self._zip.infolist() if not info.is_dir()
        ]
        logger.debug("Opened package with %d entries", len(self._names))

    @property
    def names(self) -> list[str]:
        """Entry identifiers in archive order, directories excluded."""
        return list(self._names)

    def read_text(self, name: str) -> str:
        data = self._zip.read(name)
        return data.decode("utf-8-sig", errors="replace")

    def entries(self) -> dict[str, Callable[[], str]]:
        """Map every entry identifier to an accessor returning its text."""
        return {name: self._accessor(name) for name in self._names}

    def _accessor(self, name: str) -> Callable[[], str]:
        return lambda: self.read_text(name)

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "PackageReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
