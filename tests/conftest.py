import pytest
from pyproj import CRS

from mapgeo.geodetic import DirectSolution
from mapgeo.units import DistanceUnit


class FakeCRS:
    """Just enough of a CRS for identity checks"""

    def __init__(self, name, ids):
        self.name = name
        self.ids = ids

    def to_json_dict(self):
        return {
            "name": self.name,
            "ids": [{"authority": a, "code": c} for a, c in self.ids],
        }


class IdentityReprojector:
    def __init__(self):
        self.calls = []

    def reproject(self, point, source_crs, target_crs):
        self.calls.append(point)
        return point


class PlanarSolver:
    """Flat-earth solver measuring in ``axis_unit`` one unit per degree"""

    def __init__(self, axis_unit=DistanceUnit.M):
        self.axis_unit = axis_unit
        self.directs = []

    def inverse(self, start, end):
        return ((end[0] - start[0]) ** 2 + (end[1] - start[1]) ** 2) ** 0.5

    def direct(self, start, azimuth, distance):
        self.directs.append((azimuth, distance))
        offsets = {0: (0, 1), 90: (1, 0), 180: (0, -1), -90: (-1, 0)}
        dx, dy = offsets[azimuth]
        return DirectSolution((start[0] + dx * distance, start[1] + dy * distance), distance)


@pytest.fixture
def web_mercator():
    return CRS.from_user_input("EPSG:3857")


@pytest.fixture
def wgs84():
    return CRS.from_user_input("EPSG:4326")


@pytest.fixture
def utm_31n():
    return CRS.from_user_input("EPSG:32631")


@pytest.fixture
def fake_crs():
    return FakeCRS


@pytest.fixture
def identity_reprojector():
    return IdentityReprojector()


@pytest.fixture
def planar_solver():
    return PlanarSolver
