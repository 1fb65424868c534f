"""Worker Asset Stager - Pydantic models.

StagingTask is the explicit configuration of one copy: where the
dependency-owned asset lives and where it must appear under public/.
StagingManifest corresponds to specs/staging_manifest.schema.json.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stager.config import MANIFEST_SCHEMA_ID


class StagingTask(BaseModel):
    """One asset to stage. Both paths are absolute and resolved."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path = Field(..., description="Dependency-provided asset")
    destination_path: Path = Field(..., description="Target under the public asset root")
    name: str | None = Field(
        default=None,
        min_length=1,
        description="Display name (defaults to the destination file name)",
    )

    @field_validator("source_path", "destination_path")
    @classmethod
    def _require_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"path must be absolute, got {value}")
        return value

    @property
    def display_name(self) -> str:
        return self.name or self.destination_path.name

    @classmethod
    def for_project(
        cls,
        project_root: str | Path,
        source: str | Path,
        destination: str | Path,
        name: str | None = None,
    ) -> "StagingTask":
        """Build a task whose relative paths are resolved against project_root.

        Absolute `source` or `destination` values are kept as given (resolved).
        """
        root = Path(project_root).expanduser().resolve()
        return cls(
            source_path=(root / Path(source).expanduser()).resolve(),
            destination_path=(root / Path(destination).expanduser()).resolve(),
            name=name,
        )


class ManifestAsset(BaseModel):
    """One entry of a staging manifest. Paths may be relative."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    source: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)


class StagingManifest(BaseModel):
    """A list of assets staged in order."""

    model_config = ConfigDict(extra="forbid")

    schema_id: str = Field(default=MANIFEST_SCHEMA_ID, description="Schema identifier")
    version: str = Field(default="1.0.0", description="Schema version")
    assets: list[ManifestAsset] = Field(..., min_length=1)

    def to_tasks(self, project_root: str | Path) -> list[StagingTask]:
        return [
            StagingTask.for_project(project_root, a.source, a.destination, name=a.name)
            for a in self.assets
        ]


__all__ = [
    "StagingTask",
    "ManifestAsset",
    "StagingManifest",
]
