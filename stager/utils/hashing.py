"""Worker Asset Stager - Hashing utilities.

Hash functions return HEX DIGEST ONLY (no prefix).
"""

import hashlib
from pathlib import Path


def sha256_file(path: str | Path) -> str:
    """Compute SHA256 hash of a file.

    Args:
        path: Path to the file to hash.

    Returns:
        SHA256 hex digest (64 lowercase hex characters, no prefix).

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    hasher = hashlib.sha256()

    with open(path, "rb") as f:
        while chunk := f.read(65536):  # 64KB chunks
            hasher.update(chunk)

    return hasher.hexdigest()
