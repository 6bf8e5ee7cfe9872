import json

import pytest

ONE_SEGMENT = [[[-122.3, 47.6], [-122.2, 47.7]]]
TWO_SEGMENTS = [
    [[-122.3, 47.6], [-122.2, 47.7]],
    [[-122.1, 47.8, 10.0], [-122.0, 47.9, 12.5]],
]


def make_attributes(route_id, **overrides):
    """Full published attribute record for a route."""
    attributes = {
        "OBJECTID": 1,
        "DISPLAY": "2",
        "RT_TYPEA": "US",
        "RT_TYPEB": 2,
        "LRS_Date": "20211231",
        "RouteID": route_id,
        "StateRouteNumber": "002",
        "RelRouteType": "",
        "RelRouteQual": None,
        "SHAPE_Length": 6.1811609982518618,
    }
    attributes.update(overrides)
    return attributes


def make_feature(route_id, coordinates, **overrides):
    return {
        "type": "Feature",
        "properties": make_attributes(route_id, **overrides),
        "geometry": {"type": "MultiLineString", "coordinates": coordinates},
    }


def make_collection(*features):
    return {"type": "FeatureCollection", "features": list(features)}


@pytest.fixture
def write_geojson(tmp_path):
    """Write a document under tmp_path/data and return its path."""
    data_dir = tmp_path / "data"
    data_dir.mkdir(exist_ok=True)

    def _write(relative_path, document):
        path = data_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir(exist_ok=True)
    return path
