"""
GeoJSON file discovery.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

# Names ending in ".geojson", any case
GEOJSON_RE = re.compile(r"\.geojson\Z", re.IGNORECASE)


def _raise(error: OSError) -> None:
    raise error


def find_geojson_files(data_dir: Union[str, Path]) -> List[Path]:
    """
    Recursively find the GeoJSON files under a directory.

    Args:
        data_dir: Directory to search

    Returns:
        Paths of the regular files whose name ends in ``.geojson``.
        The list is sorted, but callers should not rely on its order.

    Raises:
        FileNotFoundError: If the directory doesn't exist
        NotADirectoryError: If the path is not a directory
        PermissionError: If the directory or a subdirectory can't be listed
    """
    data_dir = Path(data_dir)
    if not data_dir.exists():
        raise FileNotFoundError(f"Data directory not found: {data_dir}")
    if not data_dir.is_dir():
        raise NotADirectoryError(f"Not a directory: {data_dir}")

    files = []
    for root, _dirs, names in os.walk(data_dir, onerror=_raise):
        for name in names:
            path = Path(root) / name
            if GEOJSON_RE.search(name) and path.is_file():
                files.append(path)

    files.sort()
    logger.info("Found %d GeoJSON files under %s", len(files), data_dir)
    return files


def logical_name(path: Union[str, Path]) -> str:
    """Base name of a GeoJSON file with the ``.geojson`` suffix removed."""
    return GEOJSON_RE.sub("", Path(path).name)
