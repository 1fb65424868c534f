"""Shared pytest fixtures for Worker Asset Stager tests."""

from pathlib import Path

import pytest

from stager.config import DEFAULT_DESTINATION_RELPATH, DEFAULT_SOURCE_RELPATH

WORKER_BYTES = b"WORKER_V1"


@pytest.fixture(autouse=True)
def clean_stager_env(monkeypatch):
    """Keep STAGER_* variables from the developer's shell out of tests."""
    for name in (
        "STAGER_PROJECT_ROOT",
        "STAGER_MANIFEST",
        "STAGER_LOG_LEVEL",
        "STAGER_ENABLE_FAILPOINTS",
        "STAGER_FAILPOINT",
        "STAGER_FAILPOINT_EXIT_CODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project_root(tmp_path) -> Path:
    """A project with gif.js installed and no public/ directory yet.

    Yields:
        Path: Project root containing node_modules/gif.js/dist/gif.worker.js.
    """
    root = tmp_path / "project"
    source = root / DEFAULT_SOURCE_RELPATH
    source.parent.mkdir(parents=True)
    source.write_bytes(WORKER_BYTES)
    return root


@pytest.fixture
def worker_source(project_root) -> Path:
    return project_root / DEFAULT_SOURCE_RELPATH


@pytest.fixture
def worker_destination(project_root) -> Path:
    return project_root / DEFAULT_DESTINATION_RELPATH


@pytest.fixture
def worker_bytes(worker_source) -> bytes:
    """Contents of the installed gif.js worker script."""
    return worker_source.read_bytes()
