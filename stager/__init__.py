"""Worker Asset Stager - copies dependency-owned runtime assets into public/.

Provides:
- StagingTask / StagingManifest models (pydantic)
- stage(): atomic, idempotent copy of one asset
- run_staging(): fail-fast batch staging
- JSON manifest loading validated against specs/staging_manifest.schema.json
"""

__version__ = "0.1.0"
