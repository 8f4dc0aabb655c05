"""
Ellipsoidal distance and direction solving.

Geographic points are (longitude, latitude) degrees. Distances going in and
out of a solver are expressed in the ellipsoid's axis unit, which callers must
read from ``axis_unit`` rather than assume to be metres.
"""

from typing import Callable, NamedTuple, Protocol

from pyproj import CRS, Geod

from mapgeo.project_types import GeoCoord
from mapgeo.units import DistanceUnit

# Azimuths in degrees, clockwise from north
NORTH = 0
EAST = 90
SOUTH = 180
WEST = -90


class DirectSolution(NamedTuple):
    destination: GeoCoord
    distance: float


class GeodeticSolver(Protocol):
    axis_unit: DistanceUnit

    def inverse(self, start: GeoCoord, end: GeoCoord) -> float: ...

    def direct(self, start: GeoCoord, azimuth: float, distance: float) -> DirectSolution: ...


SolverFactory = Callable[[CRS], GeodeticSolver]


def ellipsoid_axis_unit(crs: CRS) -> DistanceUnit:
    """Unit the CRS ellipsoid's axes are defined in"""
    ellipsoid = crs.ellipsoid
    if ellipsoid is None:
        raise ValueError(f"{crs.name} has no ellipsoid")
    semi_major = ellipsoid.to_json_dict()["semi_major_axis"]
    if not isinstance(semi_major, dict):
        # PROJJSON omits the unit when it is the metre
        return DistanceUnit.M
    unit = semi_major.get("unit", "metre")
    if isinstance(unit, dict):
        unit = unit["name"]
    return DistanceUnit.from_string(unit)


class EllipsoidSolver:
    """Geodesic solver on the ellipsoid of a CRS, backed by ``pyproj.Geod``.

    ``Geod`` works in metres; values are converted to and from ``axis_unit``
    at this boundary.
    """

    def __init__(self, geod: Geod, axis_unit: DistanceUnit = DistanceUnit.M):
        self.geod = geod
        self.axis_unit = axis_unit

    @classmethod
    def for_crs(cls, crs: CRS) -> "EllipsoidSolver":
        axis_unit = ellipsoid_axis_unit(crs)
        geod = crs.get_geod()
        if geod is None:
            raise ValueError(f"{crs.name} has no ellipsoid")
        return cls(geod, axis_unit)

    def inverse(self, start: GeoCoord, end: GeoCoord) -> float:
        """Orthodromic distance between two geographic points"""
        _, _, distance_m = self.geod.inv(start[0], start[1], end[0], end[1])
        return DistanceUnit.M.convert_to(distance_m, self.axis_unit)

    def direct(self, start: GeoCoord, azimuth: float, distance: float) -> DirectSolution:
        """Destination reached travelling ``distance`` from ``start`` along ``azimuth``"""
        distance_m = self.axis_unit.convert_to(distance, DistanceUnit.M)
        lon, lat, _ = self.geod.fwd(start[0], start[1], azimuth, distance_m)
        return DirectSolution((lon, lat), distance)


def average_half_height(south_height: float, north_height: float) -> float:
    """Half the height of an envelope centered on its starting point.

    Off the equator the distances travelled south and north of a center do not
    in general map to the same ordinate span, so the two are averaged and the
    result applied on both sides of the center's Y ordinate.
    """
    return (south_height + north_height) / 2
