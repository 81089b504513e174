"""Deterministic recursive directory walk."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def walk_files(root: Path) -> Iterator[Path]:
    """Yield every file under root, directories and names in sorted order.

    A root that is itself a file is yielded as is. Directories that cannot be
    listed are skipped.
    """
    root = Path(root)
    if root.is_file():
        yield root
        return

    def _on_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {error.filename}: {error}")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(dirpath) / filename
