"""Worker Asset Stager - Configuration constants.

No external config libraries. Paths in this module are relative to the
project being staged; they are resolved against the project root at run time.
"""

import logging
import os
from pathlib import Path

# Package directory (stager/)
PACKAGE_DIR = Path(__file__).parent.resolve()

# JSON schemas (versioned contracts), shipped as package data
SPECS_DIR = PACKAGE_DIR / "specs"
MANIFEST_SCHEMA_PATH = SPECS_DIR / "staging_manifest.schema.json"
MANIFEST_SCHEMA_ID = "staging_manifest.v1"

# gif.js ships its worker script here; the encoder loads it from /gif.worker.js
DEFAULT_SOURCE_RELPATH = Path("node_modules") / "gif.js" / "dist" / "gif.worker.js"
DEFAULT_DESTINATION_RELPATH = Path("public") / "gif.worker.js"

# Atomic copy temp suffix (sibling of the destination file)
TEMP_SUFFIX = ".tmp"

# Exit codes for the command-line entry point
EXIT_OK = 0
EXIT_FAILURE = 1


def get_project_root() -> Path:
    """Get the project root from environment or use the working directory.

    Environment variable STAGER_PROJECT_ROOT allows override.

    Returns:
        Absolute, resolved project root.
    """
    env_val = os.environ.get("STAGER_PROJECT_ROOT")
    if env_val:
        return Path(env_val).expanduser().resolve()
    return Path.cwd().resolve()


def get_manifest_path() -> Path | None:
    """Get the staging manifest path from STAGER_MANIFEST, if set."""
    env_val = os.environ.get("STAGER_MANIFEST")
    if env_val:
        return Path(env_val).expanduser()
    return None


def get_log_level() -> int:
    """Get log level from STAGER_LOG_LEVEL (name or number).

    Unknown values fall back to WARNING.

    Returns:
        A logging level integer.
    """
    env_val = os.environ.get("STAGER_LOG_LEVEL", "").strip()
    if not env_val:
        return logging.WARNING
    if env_val.isdigit():
        return int(env_val)
    level = logging.getLevelName(env_val.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING
