from pydantic import BaseModel, Field, field_validator
from pyproj import CRS
from pyproj.exceptions import CRSError


class SearchPollingStation(BaseModel):
    free_text: str = Field(min_length=1, max_length=200)
    destination_srid: int | None = None

    model_config = {
        'str_strip_whitespace': True,
    }

    @field_validator('destination_srid')
    @classmethod
    def known_srid(cls, value: int | None) -> int | None:
        if value is None:
            return value
        try:
            CRS.from_epsg(value)
        except CRSError as exc:
            raise ValueError(f'Unknown EPSG code: {value}') from exc
        return value
