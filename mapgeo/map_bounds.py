from abc import ABC, abstractmethod

from pyproj import CRS

from mapgeo.crs import projection_unit
from mapgeo.envelope import ReferencedEnvelope
from mapgeo.epsg3857 import (
    compute_orthodromic_width_in_inches,
    compute_referenced_envelope,
    is_3857,
)
from mapgeo.logger import logger
from mapgeo.project_types import Coord, PaintArea
from mapgeo.scale import DEFAULT_DPI, Scale


class MapBounds(ABC):
    """The area of the world a printed map shows"""

    def __init__(self, projection: CRS):
        self.projection = projection

    @property
    @abstractmethod
    def center(self) -> Coord: ...

    @abstractmethod
    def to_referenced_envelope(self, paint_area: PaintArea) -> ReferencedEnvelope: ...

    @abstractmethod
    def scale(self, paint_area: PaintArea, dpi: float = DEFAULT_DPI) -> Scale: ...


class BBoxMapBounds(MapBounds):
    def __init__(self, envelope: ReferencedEnvelope):
        super().__init__(envelope.crs)
        self.envelope = envelope

    @property
    def center(self) -> Coord:
        return self.envelope.center

    def to_referenced_envelope(self, paint_area: PaintArea) -> ReferencedEnvelope:
        return self.envelope

    def scale(
        self, paint_area: PaintArea, dpi: float = DEFAULT_DPI, geodetic: bool = False
    ) -> Scale:
        """Scale at which the box fills ``paint_area`` when printed at ``dpi``.

        With ``geodetic`` the true ground width of the box is used instead of
        its projected width.
        """
        unit = projection_unit(self.projection)
        if not geodetic:
            resolution = self.envelope.width / paint_area.width
            return Scale.from_resolution(resolution, unit, dpi)

        width_in_inches = compute_orthodromic_width_in_inches(self.envelope)
        denominator = width_in_inches * dpi / paint_area.width
        logger.debug(f"Geodetic scale denominator: {denominator:.2f}")
        return Scale(denominator, unit, dpi)


class CenterScaleMapBounds(MapBounds):
    def __init__(self, projection: CRS, center_x: float, center_y: float, scale: Scale):
        super().__init__(projection)
        self.center_x = center_x
        self.center_y = center_y
        self._scale = scale

    @property
    def center(self) -> Coord:
        return (self.center_x, self.center_y)

    def to_referenced_envelope(
        self, paint_area: PaintArea, geodetic: bool = False
    ) -> ReferencedEnvelope:
        """Envelope shown on ``paint_area``.

        With ``geodetic`` on a Web Mercator projection the extent is solved on
        the ellipsoid; otherwise it is laid out in projected units.
        """
        if geodetic and is_3857(self.projection):
            return compute_referenced_envelope(
                paint_area, self._scale, self.center, self.projection
            )

        resolution = self._scale.resolution_in(projection_unit(self.projection))
        half_width = resolution * paint_area.width / 2
        half_height = resolution * paint_area.height / 2
        return ReferencedEnvelope(
            self.center_x - half_width,
            self.center_x + half_width,
            self.center_y - half_height,
            self.center_y + half_height,
            self.projection,
        )

    def scale(self, paint_area: PaintArea, dpi: float = DEFAULT_DPI) -> Scale:
        if dpi == self._scale.dpi:
            return self._scale
        return Scale(self._scale.denominator, self._scale.unit, dpi)
