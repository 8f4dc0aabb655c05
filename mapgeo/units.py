from enum import Enum
from typing import Tuple

from reportlab.lib.units import cm, inch, mm, pica

# Sizes are expressed in PostScript points, the unit reportlab measures pages in
POINTS_PER_METER = 100 * cm
POINTS_PER_FOOT = 12 * inch


class DistanceUnit(Enum):
    """Linear units, each carrying its size in points and its known names"""

    M = (POINTS_PER_METER, ("m", "meter", "meters", "metre", "metres"))
    CM = (cm, ("cm", "centimeter", "centimeters", "centimetre", "centimetres"))
    MM = (mm, ("mm", "millimeter", "millimeters", "millimetre", "millimetres"))
    KM = (1000 * POINTS_PER_METER, ("km", "kilometer", "kilometers", "kilometre", "kilometres"))
    IN = (inch, ("in", "inch", "inches", '"'))
    FT = (POINTS_PER_FOOT, ("ft", "foot", "feet", "'"))
    YD = (3 * POINTS_PER_FOOT, ("yd", "yard", "yards"))
    MI = (5280 * POINTS_PER_FOOT, ("mi", "mile", "miles"))
    PT = (1.0, ("pt", "point", "points"))
    PC = (pica, ("pc", "pica", "picas"))

    def __init__(self, points: float, names: Tuple[str, ...]):
        self.points = points
        self.names = names

    def convert_to(self, value: float, target: "DistanceUnit") -> float:
        """Convert ``value`` expressed in this unit to ``target``"""
        if self is target:
            return value
        return value * self.points / target.points

    @classmethod
    def from_string(cls, text: str) -> "DistanceUnit":
        key = text.strip().lower()
        for unit in cls:
            if key == unit.name.lower() or key in unit.names:
                return unit
        raise ValueError(f"Unknown distance unit: {text!r}")

    def __str__(self) -> str:
        return self.names[0]


def convert(value: float, from_unit: DistanceUnit, to_unit: DistanceUnit) -> float:
    return from_unit.convert_to(value, to_unit)
