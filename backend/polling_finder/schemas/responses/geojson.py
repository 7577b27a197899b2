from typing import Literal
from pydantic import BaseModel

COORDINATES_TYPE = tuple[float, float] | tuple[float, float, float]


class Point(BaseModel):
    type: Literal["Point"]
    coordinates: COORDINATES_TYPE
