"""Runway geometry and designation parsing.

Typical usage:
    from airnav.airports.runway import Runway

    runway = Runway("Runway 03L", Vector3(-1336.0, -2434.0, 13.9), heading=93.0, length=800.0)
    runway.number             # 3
    runway.designator         # "L"
    runway.reciprocal_number  # 21
    runway.end_position       # threshold + 800 m along 93 degrees
"""

import dataclasses
from dataclasses import dataclass, field

from airnav.airports.approach import (
    DEFAULT_GLIDESLOPE_DEG,
    ApproachProcedure,
    generate_standard_approach,
)
from airnav.physics.vectors import Vector3

RUNWAY_LABEL_PREFIXES = ("Runway ", "RWY ")
RUNWAY_DESIGNATORS = ("L", "R", "C")


def parse_runway_designation(label: str) -> tuple[int, str]:
    """Extract runway number and side designator from a label.

    Unparsable numbers give 0; the designation is only used for
    announcements, so a bad label is never an error.

    Args:
        label: Label such as "Runway 03L", "RWY 12" or "30"

    Returns:
        (number, designator) where designator is "", "L", "R" or "C"

    Examples:
        >>> parse_runway_designation("Runway 03L")
        (3, 'L')
        >>> parse_runway_designation("Helipad")
        (0, '')
    """
    cleaned = label
    for prefix in RUNWAY_LABEL_PREFIXES:
        cleaned = cleaned.replace(prefix, "")
    cleaned = cleaned.strip()

    if not cleaned:
        return 0, ""

    designator = ""
    if cleaned[-1] in RUNWAY_DESIGNATORS:
        designator = cleaned[-1]
        cleaned = cleaned[:-1]

    try:
        number = int(cleaned)
    except ValueError:
        number = 0

    return number, designator


def reciprocal_runway_number(number: int) -> int:
    """Runway number of the opposite direction, wrapping 0 to 36.

    Examples:
        >>> reciprocal_runway_number(3)
        21
        >>> reciprocal_runway_number(18)
        36
    """
    return ((number + 18 - 1) % 36) + 1


@dataclass(frozen=True)
class Runway:
    """A runway direction, defined by its landing threshold.

    Attributes:
        name: Raw label as supplied by the facility data
        threshold: Landing threshold position
        heading: Compass heading in degrees (0 = north, clockwise)
        length: Length in meters
        width: Width in meters
        approach: Approach procedure to this runway, if one was generated
        number: Runway number parsed from the name (0 if unparsable)
        designator: Side designator parsed from the name ("", "L", "R", "C")
    """

    name: str
    threshold: Vector3
    heading: float
    length: float
    width: float = 45.0
    approach: ApproachProcedure | None = field(default=None, compare=False, repr=False)
    number: int = field(init=False)
    designator: str = field(init=False)

    def __post_init__(self) -> None:
        number, designator = parse_runway_designation(self.name)
        object.__setattr__(self, "number", number)
        object.__setattr__(self, "designator", designator)

    @property
    def end_position(self) -> Vector3:
        """Far end of the runway, length meters along the heading."""
        return self.threshold + Vector3.from_heading(self.heading, self.length)

    @property
    def elevation(self) -> float:
        return self.threshold.z

    @property
    def reciprocal_number(self) -> int:
        return reciprocal_runway_number(self.number)

    @property
    def reciprocal_heading(self) -> float:
        return (self.heading + 180.0) % 360.0

    @property
    def ident(self) -> str:
        """Canonical identifier such as "03L", or the raw name if unparsed."""
        if self.number == 0:
            return self.name
        return f"{self.number:02d}{self.designator}"

    def with_approach(
        self, name: str | None = None, glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG
    ) -> "Runway":
        """Return a copy of this runway carrying a standard approach procedure.

        The procedure is attached to the returned copy, so
        ``runway.approach.runway is runway`` holds for the result.
        """
        runway = dataclasses.replace(self, approach=None)
        procedure = generate_standard_approach(runway, name, glideslope_angle)
        object.__setattr__(runway, "approach", procedure)
        return runway
