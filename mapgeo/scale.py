from reportlab.lib.units import inch

from mapgeo.units import DistanceUnit

POINTS_PER_INCH = inch  # Standard PostScript points per inch
DEFAULT_DPI = POINTS_PER_INCH


class Scale:
    """A printed map scale.

    ``denominator`` is the N of a 1:N scale, ``unit`` the linear unit of the
    map projection and ``dpi`` the resolution of the output device. The ground
    distance covered by one output pixel is the ``resolution``.
    """

    def __init__(
        self,
        denominator: float,
        unit: DistanceUnit = DistanceUnit.M,
        dpi: float = DEFAULT_DPI,
    ):
        if denominator is None or denominator <= 0:
            raise ValueError("denominator must be positive")
        if dpi is None or dpi <= 0:
            raise ValueError("dpi must be positive")
        self.denominator = float(denominator)
        self.unit = unit
        self.dpi = float(dpi)

    @classmethod
    def from_resolution(
        cls,
        resolution: float,
        unit: DistanceUnit = DistanceUnit.M,
        dpi: float = DEFAULT_DPI,
    ) -> "Scale":
        if resolution is None or resolution <= 0:
            raise ValueError("resolution must be positive")
        return cls(unit.convert_to(resolution, DistanceUnit.IN) * dpi, unit, dpi)

    @property
    def resolution(self) -> float:
        """Ground distance per pixel, in ``unit``"""
        return DistanceUnit.IN.convert_to(self.denominator / self.dpi, self.unit)

    def resolution_in(self, unit: DistanceUnit) -> float:
        return self.unit.convert_to(self.resolution, unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scale):
            return NotImplemented
        return (
            self.denominator == other.denominator
            and self.unit is other.unit
            and self.dpi == other.dpi
        )

    def __repr__(self) -> str:
        return f"Scale(1:{self.denominator:.2f}, unit={self.unit}, dpi={self.dpi:g})"
