import io

import olefile

# Streams that only appear when an OOXML package has been wrapped in an
# encrypted OLE compound file.
_ENCRYPTION_STREAMS = ("EncryptionInfo", "EncryptedPackage", "DataSpaces")


def is_ooxml_encrypted(file_like: io.BytesIO) -> bool:
    """Return True if the bytes are an OLE container holding an encrypted package."""
    file_like.seek(0)
    if not olefile.isOleFile(file_like):
        file_like.seek(0)
        return False

    file_like.seek(0)
    with olefile.OleFileIO(file_like) as ole:
        encrypted = any(ole.exists(stream) for stream in _ENCRYPTION_STREAMS)
    file_like.seek(0)
    return encrypted
