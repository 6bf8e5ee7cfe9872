"""
Route GeoJSON parser.

Reads a route GeoJSON file and removes the attribute fields that the
report has no use for. Fields are removed by key name wherever they occur
in the document, before any typed model is built from it.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Tuple, Union

from pydantic import ValidationError

from .locator import logical_name
from .schemas import RouteAttributes, RouteFeatureCollection

logger = logging.getLogger(__name__)


# Every published attribute except the route identifier
DROP_FIELDS = frozenset(
    name for name in RouteAttributes.model_fields if name != "RouteID"
)


def drop_fields(value: Any, fields: Iterable[str] = DROP_FIELDS) -> Any:
    """
    Remove keys by name from a parsed JSON value, at any depth.

    Args:
        value: Parsed JSON value (dict, list or scalar)
        fields: Key names to remove

    Returns:
        A new value with every matching key, and everything under it, removed.
        Scalars are returned unchanged.
    """
    if not isinstance(fields, (set, frozenset)):
        fields = frozenset(fields)

    if isinstance(value, dict):
        return {
            key: drop_fields(item, fields)
            for key, item in value.items()
            if key not in fields
        }
    if isinstance(value, list):
        return [drop_fields(item, fields) for item in value]
    return value


def read_geojson(path: Union[str, Path]) -> Tuple[str, RouteFeatureCollection]:
    """
    Read a route GeoJSON file.

    Args:
        path: Path to the GeoJSON file

    Returns:
        Tuple of (logical name, filtered feature collection)

    Raises:
        OSError: If the file can't be read
        ValueError: If the file is not valid JSON or not a route feature collection
    """
    path = Path(path)
    logger.debug("Reading %s", path)

    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    try:
        data = drop_fields(json.loads(text))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        collection = RouteFeatureCollection.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid route feature collection in {path}: {e}") from e

    name = logical_name(path)
    logger.info("Parsed %s: %d features", name, len(collection.features))
    return name, collection
