"""Worker Asset Stager - command-line entry point.

Run before a build or dev server start:

    stage-assets                       # gif.js worker into ./public
    stage-assets --project-root web/
    stage-assets --manifest staging.json

Exit status is 0 when every asset is staged and 1 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from stager.config import (
    DEFAULT_DESTINATION_RELPATH,
    DEFAULT_SOURCE_RELPATH,
    EXIT_FAILURE,
    EXIT_OK,
    get_log_level,
    get_manifest_path,
    get_project_root,
)
from stager.errors import ManifestError
from stager.manifest import load_manifest
from stager.schemas import StagingTask
from stager.stage import run_staging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stage-assets",
        description="Copy dependency-provided runtime assets into the public directory",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Base for relative paths (default: $STAGER_PROJECT_ROOT or the current directory)",
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help=f"Asset to copy (default: {DEFAULT_SOURCE_RELPATH})",
    )
    parser.add_argument(
        "--destination",
        type=Path,
        default=None,
        help=f"Target file (default: {DEFAULT_DESTINATION_RELPATH})",
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="JSON manifest listing assets to stage (default: $STAGER_MANIFEST)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each step at INFO level",
    )
    return parser


def _resolve_tasks(args: argparse.Namespace, parser: argparse.ArgumentParser) -> list[StagingTask]:
    project_root = args.project_root.resolve() if args.project_root else None
    manifest_path = args.manifest
    single_asset = args.source is not None or args.destination is not None

    if manifest_path is not None and single_asset:
        parser.error("--manifest cannot be combined with --source/--destination")

    if manifest_path is None and not single_asset:
        manifest_path = get_manifest_path()

    if manifest_path is not None:
        return load_manifest(manifest_path, project_root=project_root)

    root = project_root or get_project_root()
    return [
        StagingTask.for_project(
            root,
            args.source if args.source is not None else DEFAULT_SOURCE_RELPATH,
            args.destination if args.destination is not None else DEFAULT_DESTINATION_RELPATH,
        )
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        tasks = _resolve_tasks(args, parser)
    except ManifestError as exc:
        print(f"Error loading staging manifest: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    results = run_staging(tasks)
    for result in results:
        if result.ok:
            print(result.message)
        else:
            print(f"Error copying {result.task.display_name}: {result.message}", file=sys.stderr)
            return EXIT_FAILURE

    logger.debug("Staged %d asset(s)", len(results))
    return EXIT_OK
