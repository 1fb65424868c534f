"""Worker Asset Stager - Staging operations.

Copies a dependency-owned runtime asset (e.g. gif.js's gif.worker.js) into
the directory served as static public content.

Steps per asset:
1. Verify the source is an existing regular file (nothing is touched otherwise)
2. Create the destination directory and missing ancestors
3. Atomically copy the bytes, replacing any existing destination

Error codes:
- MISSING_SOURCE: the dependency asset is absent or not a regular file
- DIRECTORY_CREATION_FAILED: the destination directory cannot be created
- COPY_FAILED: reading, writing, or publishing the copy failed

Failures raise StagingError subclasses. Only the command-line entry point
turns them into an exit code.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from stager.config import DEFAULT_DESTINATION_RELPATH, DEFAULT_SOURCE_RELPATH
from stager.errors import (
    CopyError,
    DirectoryCreationError,
    MissingSourceError,
    StagingError,
)
from stager.schemas import StagingTask
from stager.utils.atomic_io import atomic_copy_file
from stager.utils.hashing import sha256_file

logger = logging.getLogger(__name__)


# --- Result Types ---


@dataclass(frozen=True)
class StageOutcome:
    """What a successful stage() produced."""

    source_path: Path
    destination_path: Path
    bytes_copied: int
    sha256: str


@dataclass
class StageResult:
    """Result of staging one task within a batch."""

    task: StagingTask
    ok: bool
    error_code: str | None = None
    message: str | None = None
    outcome: StageOutcome | None = None


# --- Core Operation ---


def default_task(project_root: str | Path) -> StagingTask:
    """The gif.js worker script task for a project."""
    return StagingTask.for_project(
        project_root,
        DEFAULT_SOURCE_RELPATH,
        DEFAULT_DESTINATION_RELPATH,
    )


def stage(source_path: str | Path, destination_path: str | Path) -> StageOutcome:
    """Copy source_path to destination_path, creating the destination directory.

    Idempotent: the destination is overwritten unconditionally, so repeated
    calls with unchanged inputs leave the same bytes in place.

    Args:
        source_path: Existing regular file to copy.
        destination_path: Target file location.

    Returns:
        StageOutcome with byte count and SHA256 of the staged file.

    Raises:
        MissingSourceError: Source does not exist or is not a regular file.
        DirectoryCreationError: Destination directory cannot be created.
        CopyError: The copy or the final rename failed.
    """
    source_path = Path(source_path)
    destination_path = Path(destination_path)

    # Checked before any destination-side effect
    if not source_path.exists():
        raise MissingSourceError(f"Source file not found: {source_path}")
    if not source_path.is_file():
        raise MissingSourceError(f"Source is not a regular file: {source_path}")

    destination_dir = destination_path.parent
    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(
            f"Cannot create destination directory {destination_dir}: {exc}"
        ) from exc

    try:
        bytes_copied = atomic_copy_file(source_path, destination_path)
    except FileNotFoundError as exc:
        if exc.filename is not None and Path(exc.filename) == source_path:
            raise MissingSourceError(f"Source file not found: {source_path}") from exc
        raise CopyError(f"Cannot copy {source_path} to {destination_path}: {exc}") from exc
    except OSError as exc:
        raise CopyError(f"Cannot copy {source_path} to {destination_path}: {exc}") from exc

    try:
        digest = sha256_file(destination_path)
    except OSError as exc:
        raise CopyError(f"Cannot read back {destination_path}: {exc}") from exc

    logger.info(
        "Staged %s -> %s (%d bytes, sha256=%s)",
        source_path,
        destination_path,
        bytes_copied,
        digest,
    )
    return StageOutcome(
        source_path=source_path,
        destination_path=destination_path,
        bytes_copied=bytes_copied,
        sha256=digest,
    )


def stage_task(task: StagingTask) -> StageOutcome:
    """Stage a StagingTask. See stage()."""
    return stage(task.source_path, task.destination_path)


# --- Batch ---


def run_staging(tasks: Iterable[StagingTask]) -> list[StageResult]:
    """Stage tasks in order, stopping at the first failure.

    Args:
        tasks: Tasks to stage.

    Returns:
        One StageResult per attempted task. If the last result is not ok,
        the tasks after it were not attempted.
    """
    results: list[StageResult] = []
    for task in tasks:
        try:
            outcome = stage_task(task)
        except StagingError as exc:
            logger.info("Staging of %s aborted: %s", task.display_name, exc.error_code)
            results.append(
                StageResult(
                    task=task,
                    ok=False,
                    error_code=exc.error_code,
                    message=str(exc),
                )
            )
            break
        results.append(
            StageResult(
                task=task,
                ok=True,
                message=f"{task.display_name} has been copied to {_describe_dir(task)}",
                outcome=outcome,
            )
        )
    return results


def _describe_dir(task: StagingTask) -> str:
    parent = task.destination_path.parent.name
    return f"{parent} directory" if parent else str(task.destination_path.parent)
