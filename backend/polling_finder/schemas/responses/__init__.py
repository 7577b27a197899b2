from polling_finder.schemas.responses.geojson import Point
from polling_finder.schemas.responses.polling_station import PollingStationMatch, PollingStationRecord

__all__ = ['Point', 'PollingStationMatch', 'PollingStationRecord']
