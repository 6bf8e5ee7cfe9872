"""
Route data models using Pydantic.

These models define the structure of the route attribute records,
the MultiLineString route features read from GeoJSON, and the
report configuration.
"""

from pathlib import Path
from typing import Dict, List, Literal, NamedTuple, Optional, Any
from pydantic import BaseModel, Field, ConfigDict
import yaml


class RouteAttributes(BaseModel):
    """Full attribute record of a route feature, as published."""

    OBJECTID: int = Field(..., description="Unique object identifier")
    DISPLAY: str = Field(..., description="Display string")
    RT_TYPEA: str = Field(..., description="Route type A")
    RT_TYPEB: int = Field(..., description="Route type B")
    LRS_Date: str = Field(
        ..., pattern=r"^\d+$", description="Linear Referencing System date (digits only)"
    )
    RouteID: str = Field(..., description="Route identifier")
    StateRouteNumber: str = Field(..., description="State route number")
    RelRouteType: Optional[str] = Field(None, description="Related route type")
    RelRouteQual: Optional[str] = Field(None, description="Related route type qualifier")
    SHAPE_Length: float = Field(..., description="Length of the route geometry")


class FilteredRouteAttributes(BaseModel):
    """Attribute record left after the drop-set has been removed."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    RouteID: Optional[str] = Field(None, description="Route identifier")


class MultiLineStringGeometry(BaseModel):
    """A MultiLineString geometry: one coordinate sequence per segment."""

    model_config = ConfigDict(extra="allow")

    type: str = Field("MultiLineString", description="GeoJSON geometry type")
    # Positions are not checked; only the number of segments is read
    coordinates: List[Any] = Field(
        ..., description="Segments as lists of [x, y] or [x, y, z] positions"
    )

    @property
    def segment_count(self) -> int:
        """Number of line segments, not the number of positions."""
        return len(self.coordinates)


class RouteFeature(BaseModel):
    """A single route feature."""

    model_config = ConfigDict(extra="allow")

    type: str = Field("Feature", description="GeoJSON object type")
    properties: Optional[FilteredRouteAttributes] = Field(
        None, description="Filtered route attributes"
    )
    geometry: MultiLineStringGeometry = Field(..., description="Route geometry")


class RouteFeatureCollection(BaseModel):
    """A GeoJSON FeatureCollection of route features."""

    model_config = ConfigDict(extra="allow")

    type: str = Field("FeatureCollection", description="GeoJSON object type")
    features: List[RouteFeature] = Field(..., description="Route features")


class RouteRecord(NamedTuple):
    """One enumerated feature: source name, route identifier and geometry."""

    name: str
    route_id: Optional[str]
    geometry: MultiLineStringGeometry


class ReportConfig(BaseModel):
    """Route report configuration."""

    data_dir: Optional[Path] = Field(None, description="Directory searched for GeoJSON files")
    max_workers: Optional[int] = Field(
        None, gt=0, description="Thread pool size for reading files"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "WARNING", description="Logging level"
    )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ReportConfig":
        """
        Load configuration from a YAML file.

        A relative ``data_dir`` is resolved against the directory that
        holds the configuration file.
        """
        yaml_path = Path(yaml_path)
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        config = cls(**data)
        if config.data_dir is not None and not config.data_dir.is_absolute():
            config.data_dir = yaml_path.parent / config.data_dir
        return config
