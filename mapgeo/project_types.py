from dataclasses import dataclass
from typing import Tuple

Lon = float
Lat = float
GeoCoord = Tuple[Lon, Lat]
Coord = Tuple[float, float]


@dataclass(frozen=True)
class PaintArea:
    """Pixel size of the area the map is painted on"""

    width: int
    height: int

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError("width must be an integer number of pixels")
        if isinstance(self.height, bool) or not isinstance(self.height, int):
            raise ValueError("height must be an integer number of pixels")
        if self.width <= 0:
            raise ValueError("width must be positive")
        if self.height <= 0:
            raise ValueError("height must be positive")


class PrintConfig:
    def __init__(
        self,
        projection: str,
        center: Coord,
        scale_denominator: float,
        dpi: float = 72.0,
        page_width_px: int = 800,
        page_height_px: int = 600,
        geodetic: bool = True,
    ):
        if not projection:
            raise ValueError("projection is required")
        if center is None or len(center) != 2:
            raise ValueError("center must be an (x, y) pair")
        if scale_denominator is None or scale_denominator <= 0:
            raise ValueError("scale_denominator must be positive")
        if dpi is None or dpi <= 0:
            raise ValueError("dpi must be positive")

        self.projection = projection
        self.center: Coord = (float(center[0]), float(center[1]))
        self.scale_denominator = float(scale_denominator)
        self.dpi = float(dpi)
        self.paint_area = PaintArea(page_width_px, page_height_px)
        self.geodetic = geodetic
