"""Worker Asset Stager - Staging manifest loading.

A manifest lists the assets to stage:

    {
      "schema_id": "staging_manifest.v1",
      "version": "1.0.0",
      "assets": [
        {"source": "node_modules/gif.js/dist/gif.worker.js",
         "destination": "public/gif.worker.js"}
      ]
    }

It is validated against specs/staging_manifest.schema.json (Draft 2020-12)
before being parsed into pydantic models.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from pydantic import ValidationError

from stager.config import MANIFEST_SCHEMA_PATH
from stager.errors import ManifestError
from stager.schemas import StagingManifest, StagingTask

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _load_validator(schema_path: Path) -> Draft202012Validator:
    try:
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        Draft202012Validator.check_schema(schema)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, SchemaError) as exc:
        raise ManifestError(f"Cannot load manifest schema {schema_path}: {exc}") from exc
    return Draft202012Validator(schema)


def _manifest_validator() -> Draft202012Validator:
    return _load_validator(MANIFEST_SCHEMA_PATH)


def validate_manifest_data(data: Any) -> StagingManifest:
    """Validate decoded manifest JSON and parse it.

    Raises:
        ManifestError: On the first schema violation (reported with its path),
            or if the bundled schema itself cannot be loaded.
    """
    errors = sorted(_manifest_validator().iter_errors(data), key=lambda e: list(e.path))
    if errors:
        first = errors[0]
        location = "/".join(str(p) for p in first.path) or "<root>"
        raise ManifestError(f"Manifest schema violation at {location}: {first.message}")

    try:
        return StagingManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(f"Manifest validation failed: {exc}") from exc


def load_manifest(
    manifest_path: str | Path,
    project_root: str | Path | None = None,
) -> list[StagingTask]:
    """Load a staging manifest and resolve its tasks.

    Args:
        manifest_path: Path to the manifest JSON file.
        project_root: Base for relative asset paths. Defaults to the
            directory containing the manifest.

    Returns:
        Tasks in manifest order, with absolute resolved paths.

    Raises:
        ManifestError: If the file is unreadable, not JSON, or invalid.
    """
    manifest_path = Path(manifest_path)
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {manifest_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read manifest {manifest_path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest {manifest_path} is not valid JSON: {exc}") from exc

    manifest = validate_manifest_data(data)

    if project_root is None:
        project_root = manifest_path.resolve().parent
    tasks = manifest.to_tasks(project_root)
    logger.debug("Loaded %d staging task(s) from %s", len(tasks), manifest_path)
    return tasks
