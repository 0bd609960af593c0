class NotesError(Exception):
    """Base class for all errors raised while processing a presentation."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        # Use exception chaining if cause is provided
        self.__cause__ = cause


class ArchiveError(NotesError):
    """Raised when the input bytes cannot be opened as a presentation package."""


class ArchiveEncryptedError(ArchiveError):
    """Raised when the package is encrypted or password-protected."""


class ArchiveZipBombError(ArchiveError):
    """Raised when the package looks like a ZIP bomb."""


class ConversionError(NotesError):
    """Raised when the external document converter reports a failure."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
        cause: Exception | None = None,
    ):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message, cause=cause)
