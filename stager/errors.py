"""Worker Asset Stager - Error taxonomy.

Every failure is fatal to the build: no retries, no recovery. The underlying
OSError is chained as __cause__ so the detail reaches the entry point.
"""

from __future__ import annotations


class StagingErrorCode:
    """Stable error codes carried by StagingError subclasses."""

    MISSING_SOURCE = "MISSING_SOURCE"
    DIRECTORY_CREATION_FAILED = "DIRECTORY_CREATION_FAILED"
    COPY_FAILED = "COPY_FAILED"
    MANIFEST_INVALID = "MANIFEST_INVALID"


class StagingError(RuntimeError):
    """Raised when an asset cannot be staged and the build cannot proceed."""

    error_code = "STAGING_ERROR"

    def __str__(self) -> str:
        return f"[{self.error_code}] {super().__str__()}"


class MissingSourceError(StagingError):
    """The dependency asset does not exist (or is not a regular file)."""

    error_code = StagingErrorCode.MISSING_SOURCE


class DirectoryCreationError(StagingError):
    """The destination directory could not be created."""

    error_code = StagingErrorCode.DIRECTORY_CREATION_FAILED


class CopyError(StagingError):
    """Copying bytes to the destination failed."""

    error_code = StagingErrorCode.COPY_FAILED


class ManifestError(StagingError):
    """The staging manifest is missing, unreadable, or fails validation."""

    error_code = StagingErrorCode.MANIFEST_INVALID


__all__ = [
    "StagingErrorCode",
    "StagingError",
    "MissingSourceError",
    "DirectoryCreationError",
    "CopyError",
    "ManifestError",
]
