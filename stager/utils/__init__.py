"""Worker Asset Stager - Utility modules."""

from stager.utils.atomic_io import atomic_copy_file
from stager.utils.hashing import sha256_file

__all__ = [
    # atomic_io
    "atomic_copy_file",
    # hashing
    "sha256_file",
]
