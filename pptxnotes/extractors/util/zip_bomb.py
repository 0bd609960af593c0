from __future__ import annotations

import io
import zipfile
from dataclasses import dataclass

from pptxnotes.exceptions import ArchiveZipBombError


@dataclass(frozen=True)
class ZipBombLimits:
    """
    Heuristics for rejecting presentation packages that are probable ZIP bombs.

    A real deck rarely exceeds a few hundred entries or a few hundred MiB once
    inflated; the defaults leave generous headroom for media-heavy decks.
    """

    max_entries: int = 20_000
    max_total_uncompressed_bytes: int = 2 * 1024 * 1024 * 1024  # 2 GiB
    max_single_uncompressed_bytes: int = 512 * 1024 * 1024  # 512 MiB
    max_total_compression_ratio: float = 200.0
    max_entry_compression_ratio: float = 500.0


DEFAULT_ZIP_BOMB_LIMITS = ZipBombLimits()


def _reject(message: str, source: str | None) -> ArchiveZipBombError:
    if source:
        message = f"{message} [{source}]"
    return ArchiveZipBombError(message)


def validate_zipfile(
    zf: zipfile.ZipFile,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> None:
    """
    Check an opened package against ZIP-bomb indicators.

    Only the central directory is inspected; nothing is inflated.
    """
    infos = zf.infolist()
    if len(infos) > limits.max_entries:
        raise _reject(
            f"Package has too many entries ({len(infos)} > {limits.max_entries})",
            source,
        )

    total_uncompressed = 0
    total_compressed = 0

    for info in infos:
        if info.is_dir():
            continue

        if info.file_size > limits.max_single_uncompressed_bytes:
            raise _reject(
                f"Package entry {info.filename} too large "
                f"({info.file_size} bytes > {limits.max_single_uncompressed_bytes})",
                source,
            )

        if info.file_size > 0:
            if info.compress_size <= 0:
                raise _reject(
                    f"Package entry {info.filename} has zero compressed size "
                    "but non-zero uncompressed size",
                    source,
                )
            ratio = info.file_size / info.compress_size
            if ratio > limits.max_entry_compression_ratio:
                raise _reject(
                    f"Package entry {info.filename} compression ratio too high "
                    f"({ratio:.1f} > {limits.max_entry_compression_ratio})",
                    source,
                )

        total_uncompressed += info.file_size
        total_compressed += info.compress_size

        if total_uncompressed > limits.max_total_uncompressed_bytes:
            raise _reject(
                f"Package uncompressed size too large "
                f"({total_uncompressed} bytes > {limits.max_total_uncompressed_bytes})",
                source,
            )

    if total_uncompressed > 0:
        total_ratio = total_uncompressed / max(total_compressed, 1)
        if total_ratio > limits.max_total_compression_ratio:
            raise _reject(
                f"Package compression ratio too high "
                f"({total_ratio:.1f} > {limits.max_total_compression_ratio})",
                source,
            )


def open_zipfile(
    file_like: io.BytesIO,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> zipfile.ZipFile:
    """
    Open a package and validate it for ZIP-bomb indicators.

    Caller owns the returned ZipFile and must close it.
    """
    file_like.seek(0)
    zf = zipfile.ZipFile(file_like, "r")
    try:
        validate_zipfile(zf, limits=limits, source=source)
    except Exception:
        zf.close()
        raise
    return zf
