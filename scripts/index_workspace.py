#!/usr/bin/env python3
"""
QML Script IntelliSense Workspace Indexer.

Prints the function index of every script in a workspace, or the
resolved script imports of one QML file, as JSON.
Requires Python 3.11+.

Usage:
    python scripts/index_workspace.py /path/to/workspace
    python scripts/index_workspace.py /path/to/workspace --qml Main.qml
"""

import argparse
import asyncio
import json
import sys
import time
from pathlib import Path
from typing import Any

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from resolver.alias_resolver import find_js_file_for_alias
from resolver.constants import SCRIPT_GLOB
from resolver.content import safe_read_file
from resolver.import_extractor import find_javascript_imports
from utils.config import get_settings
from utils.logger import configure_logging, get_logger
from workspace.session import IntellisenseSession


configure_logging()
logger = get_logger("index_workspace")


async def index_scripts(root_path: Path, max_files: int | None = None) -> dict[str, Any]:
    """
    Parse every script under the workspace root.

    Args:
        root_path: Workspace root
        max_files: Override for the configured script bound

    Returns:
        Dictionary with the index and statistics
    """
    settings = get_settings()
    start_time = time.perf_counter()

    with IntellisenseSession(root_path, settings=settings, watch=False) as session:
        logger.info("scanning_for_scripts", path=str(root_path))
        script_files = await session.finder.find_files(
            SCRIPT_GLOB,
            session.exclude_patterns,
            max_files or settings.workspace.max_script_files,
        )
        logger.info("found_scripts", count=len(script_files))

        index: dict[str, Any] = {}
        unreadable: list[str] = []
        for script_path in script_files:
            functions = session.cache.get_functions(script_path)
            if functions is None:
                unreadable.append(script_path)
                continue
            index[str(Path(script_path).relative_to(root_path.resolve()))] = [
                func.as_dict for func in functions
            ]

    elapsed = time.perf_counter() - start_time
    logger.info(
        "indexing_completed",
        scripts=len(index),
        unreadable=len(unreadable),
        time_seconds=round(elapsed, 2),
    )
    return {
        "root": str(root_path),
        "scripts": index,
        "unreadable": unreadable,
        "total_functions": sum(len(funcs) for funcs in index.values()),
    }


def resolve_markup(qml_path: Path) -> dict[str, Any]:
    """Resolve every script import of one QML file."""
    content = safe_read_file(qml_path)
    if content is None:
        return {"error": f"Cannot read {qml_path}"}

    document_path = str(qml_path.resolve())
    resolved = []
    for imp in find_javascript_imports(content):
        target = find_js_file_for_alias(content, document_path, imp.alias)
        resolved.append({**imp.as_dict, "path": target, "exists": bool(target and Path(target).is_file())})

    return {"document": document_path, "imports": resolved}


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Index the JavaScript functions visible to QML files in a workspace",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Workspace root directory",
    )
    parser.add_argument(
        "--qml",
        type=Path,
        default=None,
        help="Resolve the script imports of this QML file instead (relative to the root)",
    )
    parser.add_argument(
        "--max-files",
        type=int,
        default=None,
        help="Maximum number of script files to index",
    )

    args = parser.parse_args()

    if not args.path.is_dir():
        logger.error("invalid_path", path=str(args.path))
        return 1

    if args.qml is not None:
        qml_path = args.qml if args.qml.is_absolute() else args.path / args.qml
        result = resolve_markup(qml_path)
    else:
        result = asyncio.run(index_scripts(args.path, args.max_files))

    print(json.dumps(result, indent=2))
    return 1 if "error" in result else 0


if __name__ == "__main__":
    sys.exit(main())
