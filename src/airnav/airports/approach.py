"""Instrument approach procedures generated from runway geometry.

A standard approach is five fixes laid out on the extended runway
centreline, from the Initial Approach Fix down to the threshold.

Typical usage:
    from airnav.airports.approach import generate_standard_approach

    procedure = generate_standard_approach(runway)
    for waypoint in procedure.waypoints:
        print(waypoint.name, waypoint.altitude_agl, waypoint.target_speed)
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from airnav.physics.vectors import Vector3

if TYPE_CHECKING:
    from airnav.airports.runway import Runway

logger = logging.getLogger(__name__)

KNOTS_TO_MPS = 0.514444
DEFAULT_GLIDESLOPE_DEG = 3.0
DEFAULT_LOCALIZER_WIDTH_DEG = 5.0


class ApproachWaypointType(Enum):
    """Phase of an approach a waypoint belongs to, farthest first."""

    INITIAL_APPROACH_FIX = "IAF"
    INTERMEDIATE_FIX = "IF"
    FINAL_APPROACH_FIX = "FAF"
    MISSED_APPROACH_POINT = "MAP"
    THRESHOLD = "THR"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ApproachWaypoint:
    """A fix of an approach procedure.

    Attributes:
        name: Short fix name (e.g., "IAF", "FAF")
        position: Position in local coordinates, z is elevation above sea level
        waypoint_type: Phase of the approach
        altitude_agl: Crossing altitude above runway elevation in meters
        target_speed: Target speed in meters per second

    Examples:
        >>> wp = ApproachWaypoint.from_knots(
        ...     "IAF", Vector3(0.0, -18500.0, 1220.0),
        ...     ApproachWaypointType.INITIAL_APPROACH_FIX, 1220.0, 250.0)
        >>> round(wp.target_speed, 2)
        128.61
    """

    name: str
    position: Vector3
    waypoint_type: ApproachWaypointType
    altitude_agl: float
    target_speed: float

    @classmethod
    def from_knots(
        cls,
        name: str,
        position: Vector3,
        waypoint_type: ApproachWaypointType,
        altitude_agl: float,
        target_speed_kts: float,
    ) -> "ApproachWaypoint":
        """Create a waypoint from a target speed given in knots."""
        return cls(name, position, waypoint_type, altitude_agl, target_speed_kts * KNOTS_TO_MPS)

    @property
    def target_speed_kts(self) -> float:
        return self.target_speed / KNOTS_TO_MPS

    def distance_from(self, point: Vector3) -> float:
        """Horizontal distance from a point (usually the runway threshold)."""
        return self.position.horizontal_distance_to(point)


# (name, type, distance from threshold m, altitude AGL m, speed kt)
STANDARD_APPROACH_FIXES: tuple[tuple[str, ApproachWaypointType, float, float, float], ...] = (
    ("IAF", ApproachWaypointType.INITIAL_APPROACH_FIX, 18500.0, 1220.0, 250.0),
    ("IF", ApproachWaypointType.INTERMEDIATE_FIX, 9200.0, 760.0, 200.0),
    ("FAF", ApproachWaypointType.FINAL_APPROACH_FIX, 5500.0, 450.0, 160.0),
    ("MAP", ApproachWaypointType.MISSED_APPROACH_POINT, 900.0, 60.0, 140.0),
    ("THR", ApproachWaypointType.THRESHOLD, 0.0, 0.0, 130.0),
)


@dataclass(frozen=True)
class ApproachProcedure:
    """An approach procedure to one runway.

    Attributes:
        name: Procedure name (e.g., "ILS 03")
        runway: Runway the procedure lands on
        waypoints: Fixes ordered from farthest (IAF) to the threshold
        glideslope_angle: Glideslope in degrees
        localizer_width: Localizer course width in degrees
    """

    name: str
    runway: "Runway"
    waypoints: tuple[ApproachWaypoint, ...]
    glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG
    localizer_width: float = DEFAULT_LOCALIZER_WIDTH_DEG

    @property
    def final_approach_course(self) -> float:
        """Inbound course flown on final, equal to the runway heading."""
        return self.runway.heading

    def get_waypoint(self, waypoint_type: ApproachWaypointType) -> ApproachWaypoint | None:
        for waypoint in self.waypoints:
            if waypoint.waypoint_type == waypoint_type:
                return waypoint
        return None

    def glideslope_height_at(self, distance_m: float) -> float:
        """Height above the threshold of the glideslope at a given distance.

        Args:
            distance_m: Horizontal distance from the threshold in meters.

        Returns:
            Height in meters (0 at or past the threshold).
        """
        if distance_m <= 0:
            return 0.0
        return distance_m * math.tan(math.radians(self.glideslope_angle))


def generate_standard_approach(
    runway: "Runway",
    name: str | None = None,
    glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG,
) -> ApproachProcedure:
    """Generate the standard five-fix approach for a runway.

    Fixes are placed on the reciprocal of the runway heading, so an aircraft
    flying them in order is aligned with the runway when it reaches the
    threshold. Each fix sits at runway elevation plus its altitude AGL.

    Args:
        runway: Runway to build the approach for
        name: Procedure name, defaults to "ILS <ident>"
        glideslope_angle: Glideslope in degrees

    Returns:
        ApproachProcedure with IAF, IF, FAF, MAP and THR waypoints

    Examples:
        >>> procedure = generate_standard_approach(runway)
        >>> [wp.name for wp in procedure.waypoints]
        ['IAF', 'IF', 'FAF', 'MAP', 'THR']
    """
    outbound = runway.reciprocal_heading
    threshold = runway.threshold

    waypoints = []
    for fix_name, fix_type, distance, altitude_agl, speed_kts in STANDARD_APPROACH_FIXES:
        offset = Vector3.from_heading(outbound, distance)
        position = Vector3(
            threshold.x + offset.x,
            threshold.y + offset.y,
            runway.elevation + altitude_agl,
        )
        waypoints.append(
            ApproachWaypoint.from_knots(fix_name, position, fix_type, altitude_agl, speed_kts)
        )

    procedure = ApproachProcedure(
        name=name or f"ILS {runway.ident}",
        runway=runway,
        waypoints=tuple(waypoints),
        glideslope_angle=glideslope_angle,
    )
    logger.debug(
        "Generated approach %s: %d waypoints, outbound %.0f deg",
        procedure.name,
        len(waypoints),
        outbound,
    )
    return procedure
