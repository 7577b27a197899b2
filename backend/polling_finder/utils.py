from polling_finder.core.constants import WGS84_SRID
from polling_finder.schemas.responses.polling_station import PollingStationRecord
from pyproj import Transformer
from shapely import Geometry, Point
from shapely.geometry import mapping
from shapely.ops import transform


def transform_geometry(geometry: Geometry, source_srid: int, dest_srid: int) -> Geometry:
    if source_srid == dest_srid:
        return geometry
    transformer = Transformer.from_crs(source_srid, dest_srid, always_xy=True)
    return transform(transformer.transform, geometry)


def station_location(record: PollingStationRecord, destination_srid: int | None = None) -> dict:
    """GeoJSON point for the station, reprojected when a target SRID is given."""
    point = Point(record.longitude, record.latitude)
    if destination_srid is not None:
        point = transform_geometry(point, WGS84_SRID, destination_srid)
    return mapping(point)
