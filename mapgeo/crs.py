import math
from typing import List, Protocol

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from mapgeo.project_types import Coord
from mapgeo.units import DistanceUnit

GEOGRAPHIC_CODE = "EPSG:4326"


def parse_projection(code: str | CRS) -> CRS:
    """Build a CRS from an ``AUTHORITY:CODE`` string, WKT, PROJ string or CRS"""
    return CRS.from_user_input(code)


def geographic_crs() -> CRS:
    return parse_projection(GEOGRAPHIC_CODE)


def crs_identifiers(crs: CRS) -> List[str]:
    """Identifiers declared by the CRS, as ``AUTHORITY:CODE`` strings, in order"""
    definition = crs.to_json_dict()
    if "ids" in definition:
        ids = definition["ids"]
    elif "id" in definition:
        ids = [definition["id"]]
    else:
        ids = []
    return [f"{entry['authority']}:{entry['code']}" for entry in ids]


def projection_unit(crs: CRS) -> DistanceUnit:
    """Linear unit of the CRS's first axis"""
    if not crs.axis_info:
        raise ValueError(f"{crs.name} declares no axes")
    return DistanceUnit.from_string(crs.axis_info[0].unit_name)


class Reprojector(Protocol):
    def reproject(self, point: Coord, source_crs: CRS, target_crs: CRS) -> Coord: ...


class PyprojReprojector:
    """Point reprojection through pyproj, always in (x/lon, y/lat) axis order"""

    def reproject(self, point: Coord, source_crs: CRS, target_crs: CRS) -> Coord:
        transformer = Transformer.from_crs(source_crs, target_crs, always_xy=True)
        x, y = transformer.transform(point[0], point[1], errcheck=True)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjError(
                f"Point {point} has no finite image from {source_crs.name} to {target_crs.name}"
            )
        return (x, y)


DEFAULT_REPROJECTOR = PyprojReprojector()
