"""Worker Asset Stager - Atomic I/O utilities.

Atomic publish rule:
1. Write to temp path in the same directory as the destination
2. Flush + best-effort fsync
3. Rename temp -> final (the publish boundary)

The final path either holds the complete new bytes or is left exactly as it
was. Partial writes only ever affect the temp file.

Failpoints:
- ATOMIC_COPY_AFTER_TMP_WRITE: After copying into the temp file, before fsync
- ATOMIC_COPY_BEFORE_RENAME: After fsync, before atomic rename
"""

import os
from pathlib import Path

from stager.config import TEMP_SUFFIX
from stager.utils.failpoints import maybe_fail


def temp_path_for(final_path: str | Path, temp_suffix: str = TEMP_SUFFIX) -> Path:
    """Get the sibling temp path used while publishing `final_path`."""
    final_path = Path(final_path)
    return final_path.with_name(final_path.name + temp_suffix)


def _write_all(fd: int, data: bytes) -> None:
    """Write all bytes to a file descriptor, handling short writes and EINTR.

    Raises:
        OSError: If write fails or returns 0 bytes unexpectedly.
    """
    total_written = 0
    data_len = len(data)

    while total_written < data_len:
        try:
            written = os.write(fd, data[total_written:])
            if written == 0:
                raise OSError("os.write() returned 0 bytes unexpectedly")
            total_written += written
        except InterruptedError:
            continue


def _fsync_directory(dir_path: Path) -> None:
    """Best-effort fsync on a directory for rename durability."""
    try:
        fd = os.open(dir_path, os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(fd)
        finally:
            os.close(fd)
    except (OSError, AttributeError):
        # O_DIRECTORY is missing on Windows; directory fsync is optional
        pass


def _remove_quietly(path: Path) -> None:
    try:
        os.remove(path)
    except OSError:
        pass  # Best-effort cleanup


def atomic_copy_file(
    source_path: str | Path,
    final_path: str | Path,
    temp_suffix: str = TEMP_SUFFIX,
    chunk_size: int = 65536,
) -> int:
    """Atomically copy a file from source to destination.

    The destination's parent directory must already exist. An existing
    destination is replaced unconditionally. A leftover temp file from an
    interrupted run is truncated and reused.

    Args:
        source_path: Path to the source file.
        final_path: Target path for the copied file.
        temp_suffix: Suffix for the temporary file (default: ".tmp").
        chunk_size: Buffer size for copying (default: 64KB).

    Returns:
        Number of bytes copied.

    Raises:
        FileNotFoundError: If the source file does not exist.
        OSError: If reading, writing, or the rename fails. The temp file is
            removed before the error propagates.
    """
    source_path = Path(source_path)
    final_path = Path(final_path)
    temp_path = temp_path_for(final_path, temp_suffix)

    total_bytes = 0
    src_fd = os.open(source_path, os.O_RDONLY)
    try:
        dst_fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        try:
            while True:
                chunk = os.read(src_fd, chunk_size)
                if not chunk:
                    break
                _write_all(dst_fd, chunk)
                total_bytes += len(chunk)

            maybe_fail("ATOMIC_COPY_AFTER_TMP_WRITE")

            os.fsync(dst_fd)
        except OSError:
            os.close(dst_fd)
            _remove_quietly(temp_path)
            raise
        else:
            os.close(dst_fd)
    finally:
        os.close(src_fd)

    maybe_fail("ATOMIC_COPY_BEFORE_RENAME")

    try:
        os.replace(temp_path, final_path)
    except OSError:
        # e.g. destination held open by a dev server on Windows
        _remove_quietly(temp_path)
        raise

    _fsync_directory(final_path.parent)

    return total_bytes
