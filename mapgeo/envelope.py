from dataclasses import dataclass

from pyproj import CRS
from shapely.geometry import Polygon, box

from mapgeo.project_types import Coord


@dataclass(frozen=True)
class ReferencedEnvelope:
    """Axis-aligned rectangle in the coordinate space of ``crs``"""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    crs: CRS

    def __post_init__(self):
        if self.min_x > self.max_x:
            raise ValueError("min_x must be less than or equal to max_x")
        if self.min_y > self.max_y:
            raise ValueError("min_y must be less than or equal to max_y")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Coord:
        return ((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    @property
    def geometry(self) -> Polygon:
        return box(self.min_x, self.min_y, self.max_x, self.max_y)
