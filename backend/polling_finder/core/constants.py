WGS84_SRID = 4326

TABLE_POLLING_STATIONS = 'polling_stations'

LATITUDE_BOUNDS = (-90.0, 90.0)
LONGITUDE_BOUNDS = (-180.0, 180.0)
