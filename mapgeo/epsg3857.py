"""
Geodetic corrections for maps printed in Web Mercator (EPSG:3857).

The solver and reprojection capabilities are injected through the keyword-only
``solver_factory`` and ``reprojector`` arguments; defaults are backed by pyproj.
"""

from typing import TYPE_CHECKING

from pyproj import CRS

from mapgeo.crs import DEFAULT_REPROJECTOR, Reprojector, crs_identifiers, geographic_crs
from mapgeo.envelope import ReferencedEnvelope
from mapgeo.errors import GeodeticComputationError
from mapgeo.geodetic import (
    EAST,
    NORTH,
    SOUTH,
    WEST,
    EllipsoidSolver,
    SolverFactory,
    average_half_height,
)
from mapgeo.logger import logger
from mapgeo.project_types import Coord, GeoCoord, PaintArea
from mapgeo.scale import Scale
from mapgeo.units import DistanceUnit

if TYPE_CHECKING:
    from mapgeo.map_bounds import MapBounds

PSEUDO_MERCATOR_NAME = "WGS 84 / Pseudo-Mercator"
PSEUDO_MERCATOR_CODE = "EPSG:3857"


def is_3857(crs: CRS) -> bool:
    """Whether ``crs`` is named or identified as Web Mercator"""
    identifiers = crs_identifiers(crs)
    if not identifiers:
        raise GeodeticComputationError(f"{crs.name} declares no identifier")
    return (
        crs.name.lower() == PSEUDO_MERCATOR_NAME.lower()
        or identifiers[0].lower() == PSEUDO_MERCATOR_CODE.lower()
    )


def compute_scaling_factor(
    bounds: "MapBounds",
    *,
    solver_factory: SolverFactory = EllipsoidSolver.for_crs,
    reprojector: Reprojector = DEFAULT_REPROJECTOR,
) -> float:
    """Ratio of one degree of longitude at the equator to one at the bounds' latitude"""
    try:
        crs = bounds.projection
        solver = solver_factory(crs)
        equator_degree = solver.inverse((0, 0), (1, 0))

        center_y = bounds.center[1]
        _, latitude = reprojector.reproject((0, center_y), crs, geographic_crs())
        latitude_degree = solver.inverse((0, latitude), (1, latitude))

        factor = equator_degree / latitude_degree
    except Exception as exc:
        raise GeodeticComputationError("Can't compute resolution for EPSG:3857", exc) from exc

    logger.debug(f"Scaling factor at latitude {latitude:.6f}: {factor:.6f}")
    return factor


def compute_orthodromic_width_in_inches(
    bbox: ReferencedEnvelope,
    *,
    solver_factory: SolverFactory = EllipsoidSolver.for_crs,
    reprojector: Reprojector = DEFAULT_REPROJECTOR,
) -> float:
    """Ground width of ``bbox`` along its horizontal center-line, in inches"""
    try:
        crs = bbox.crs
        solver = solver_factory(crs)
        center_y = bbox.center[1]

        geographic = geographic_crs()
        start = reprojector.reproject((bbox.min_x, center_y), crs, geographic)
        end = reprojector.reproject((bbox.max_x, center_y), crs, geographic)
        width = solver.inverse(start, end)

        width_in_inches = solver.axis_unit.convert_to(width, DistanceUnit.IN)
    except Exception as exc:
        raise GeodeticComputationError(
            "Can't compute orthodromic width in inches for EPSG:3857", exc
        ) from exc

    logger.debug(f"Orthodromic width: {width:.3f} {solver.axis_unit} ({width_in_inches:.1f} in)")
    return width_in_inches


def _unwrapped_x(
    destination: GeoCoord,
    start: GeoCoord,
    azimuth: float,
    crs: CRS,
    reprojector: Reprojector,
) -> float:
    """X ordinate in ``crs`` of a west or east destination, continuous with ``start``.

    A solve crossing the antimeridian comes back with a wrapped longitude; its
    X is moved by one world width so that it stays on the travelled side of
    the start. The result may lie outside the projection's nominal X range.
    """
    geographic = geographic_crs()
    x = reprojector.reproject(destination, geographic, crs)[0]
    if azimuth == WEST and destination[0] > start[0]:
        return x - _world_width(destination[1], crs, reprojector)
    if azimuth == EAST and destination[0] < start[0]:
        return x + _world_width(destination[1], crs, reprojector)
    return x


def _world_width(latitude: float, crs: CRS, reprojector: Reprojector) -> float:
    """Span of X covering 360 degrees of longitude at ``latitude``"""
    geographic = geographic_crs()
    east_edge = reprojector.reproject((180.0, latitude), geographic, crs)[0]
    return 2 * abs(east_edge)


def compute_referenced_envelope(
    paint_area: PaintArea,
    scale: Scale,
    center: Coord,
    crs: CRS,
    *,
    solver_factory: SolverFactory = EllipsoidSolver.for_crs,
    reprojector: Reprojector = DEFAULT_REPROJECTOR,
) -> ReferencedEnvelope:
    """Envelope in ``crs`` shown by a page of ``paint_area`` pixels printed at ``scale``.

    The X extents come from independent west and east solves and are not
    forced symmetric around the center. The Y extents use the averaged
    south/north half height and are symmetric by construction.
    """
    try:
        resolution_m = scale.resolution_in(DistanceUnit.M)
        geo_width_m = resolution_m * paint_area.width
        geo_height_m = resolution_m * paint_area.height

        solver = solver_factory(crs)
        geo_width = DistanceUnit.M.convert_to(geo_width_m, solver.axis_unit)
        geo_height = DistanceUnit.M.convert_to(geo_height_m, solver.axis_unit)

        geographic = geographic_crs()
        start = reprojector.reproject(center, crs, geographic)

        west = solver.direct(start, WEST, geo_width / 2.0)
        min_x = _unwrapped_x(west.destination, start, WEST, crs, reprojector)

        east = solver.direct(start, EAST, geo_width / 2.0)
        max_x = _unwrapped_x(east.destination, start, EAST, crs, reprojector)

        south_height = solver.direct(start, SOUTH, geo_height / 2.0).distance
        north_height = solver.direct(start, NORTH, geo_height / 2.0).distance

        half_height = average_half_height(south_height, north_height)
        min_y = center[1] - half_height
        max_y = center[1] + half_height

        envelope = ReferencedEnvelope(min_x, max_x, min_y, max_y, crs)
    except Exception as exc:
        raise GeodeticComputationError("Failed to compute referenced envelope", exc) from exc

    logger.debug(
        f"Envelope for {paint_area.width}x{paint_area.height}px at {scale}: "
        f"{envelope.geometry.bounds}"
    )
    return envelope
