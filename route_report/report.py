"""
Route Report

Functions for enumerating route features and building the sorted
list of multi-segment routes.
"""

import concurrent.futures
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from .locator import find_geojson_files
from .parser import read_geojson
from .schemas import RouteFeatureCollection, RouteRecord

logger = logging.getLogger(__name__)

RoutePair = Tuple[str, Optional[str]]

# Printed in place of a missing RouteID
MISSING_ROUTE_ID = "-"


def enumerate_features(
    name: str,
    collection: RouteFeatureCollection,
) -> Iterator[RouteRecord]:
    """
    Iterate over the features of a collection in source order.

    Args:
        name: Logical name of the source file
        collection: Filtered route feature collection

    Yields:
        RouteRecord of (name, route ID, geometry) for each feature. The
        route ID is None when the feature has no RouteID.
    """
    for feature in collection.features:
        route_id = feature.properties.RouteID if feature.properties else None
        yield RouteRecord(name, route_id, feature.geometry)


def load_collections(
    paths: Sequence[Path],
    max_workers: Optional[int] = None,
) -> Iterator[Tuple[str, RouteFeatureCollection]]:
    """
    Read GeoJSON files concurrently.

    All reads are submitted up front; results are yielded in the order of
    ``paths``, not in completion order. The first failure is raised when its
    result is reached.

    Args:
        paths: GeoJSON files to read
        max_workers: Thread pool size (executor default if None)

    Yields:
        Tuple of (logical name, filtered feature collection) per file
    """
    with concurrent.futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(read_geojson, path) for path in paths]

        for future in futures:
            yield future.result()


def select_multi_segment(records: Iterable[RouteRecord]) -> List[RoutePair]:
    """Keep records whose geometry has more than one segment, without the geometry."""
    return [
        (record.name, record.route_id)
        for record in records
        if record.geometry.segment_count > 1
    ]


def sort_route_pairs(pairs: Iterable[RoutePair]) -> List[RoutePair]:
    """Sort pairs by name, then route ID. A missing route ID sorts first."""
    return sorted(pairs, key=lambda pair: (pair[0], pair[1] or ""))


def build_report(
    data_dir: Union[str, Path],
    max_workers: Optional[int] = None,
) -> List[RoutePair]:
    """
    Build the sorted list of multi-segment routes under a directory.

    Args:
        data_dir: Directory searched recursively for GeoJSON files
        max_workers: Thread pool size for reading files

    Returns:
        Sorted list of (name, route ID) pairs

    Raises:
        FileNotFoundError: If the data directory doesn't exist
        OSError: If a file can't be read
        ValueError: If a file is not a valid route feature collection
    """
    paths = find_geojson_files(data_dir)

    pairs: List[RoutePair] = []
    for name, collection in load_collections(paths, max_workers=max_workers):
        selected = select_multi_segment(enumerate_features(name, collection))
        logger.info(
            "%s: %d of %d features have multiple segments",
            name, len(selected), len(collection.features)
        )
        pairs.extend(selected)

    return sort_route_pairs(pairs)


def write_report(pairs: Iterable[RoutePair], stream: Optional[TextIO] = None) -> None:
    """
    Print one ``name route_id`` line per pair.

    A missing route ID is printed as ``MISSING_ROUTE_ID``, which reads the
    same as a route whose RouteID is literally "-".

    Args:
        pairs: (name, route ID) pairs, already sorted
        stream: Output stream (standard output if None)
    """
    if stream is None:
        stream = sys.stdout

    for name, route_id in pairs:
        print(name, route_id if route_id is not None else MISSING_ROUTE_ID, file=stream)
