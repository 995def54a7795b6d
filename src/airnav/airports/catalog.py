"""Built-in airport catalog.

Surveyed facility data for the four airfields served out of the box. Every
runway carries a generated standard approach.

Typical usage:
    from airnav.airports.catalog import build_default_airports

    airports = build_default_airports()
"""

from airnav.airports.airport import Airport
from airnav.airports.approach import DEFAULT_GLIDESLOPE_DEG
from airnav.airports.parking import ParkingPosition, ParkingType
from airnav.airports.runway import Runway
from airnav.airports.taxiway import TaxiwaySegment
from airnav.physics.vectors import Vector3


def _runway(
    name: str,
    x: float,
    y: float,
    z: float,
    heading: float,
    length: float,
    approach: str,
    glideslope_angle: float,
) -> Runway:
    return Runway(name, Vector3(x, y, z), heading, length).with_approach(approach, glideslope_angle)


def _taxiway(name: str, start: tuple[float, float, float], end: tuple[float, float, float]) -> TaxiwaySegment:
    return TaxiwaySegment(name, Vector3(*start), Vector3(*end))


def _parking(name: str, x: float, y: float, z: float, heading: float, parking_type: ParkingType) -> ParkingPosition:
    return ParkingPosition(name, Vector3(x, y, z), heading, parking_type)


def build_los_santos_international(glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG) -> Airport:
    runways = (
        # 03/21 main runway, 12/30 cross runway
        _runway("03", -1336.0, -2434.0, 13.9, 93.0, 800.0, "ILS 03", glideslope_angle),
        _runway("21", -942.0, -2988.0, 13.9, 273.0, 800.0, "ILS 21", glideslope_angle),
        _runway("12", -1850.0, -2978.0, 13.9, 183.0, 800.0, "ILS 12", glideslope_angle),
        _runway("30", -1218.0, -2563.0, 13.9, 3.0, 800.0, "ILS 30", glideslope_angle),
    )

    parking = (
        _parking("Terminal Gate A1", -1037.0, -2962.0, 14.0, 180.0, ParkingType.GATE),
        _parking("Terminal Gate A2", -1067.0, -2962.0, 14.0, 180.0, ParkingType.GATE),
        _parking("Terminal Gate A3", -1097.0, -2962.0, 14.0, 180.0, ParkingType.GATE),
        _parking("Terminal Gate B1", -1200.0, -2890.0, 14.0, 90.0, ParkingType.GATE),
        _parking("Terminal Gate B2", -1200.0, -2920.0, 14.0, 90.0, ParkingType.GATE),
        _parking("Cargo Ramp 1", -1550.0, -2730.0, 14.0, 270.0, ParkingType.CARGO),
        _parking("Cargo Ramp 2", -1550.0, -2780.0, 14.0, 270.0, ParkingType.CARGO),
        _parking("FBO Hangar", -1250.0, -3050.0, 14.0, 0.0, ParkingType.FBO),
        _parking("Private Hangar 1", -1150.0, -3100.0, 14.0, 0.0, ParkingType.HANGAR),
        _parking("Private Hangar 2", -1080.0, -3100.0, 14.0, 0.0, ParkingType.HANGAR),
    )

    taxiways = (
        # Alpha runs along the south side, split so every junction is an endpoint
        _taxiway("Alpha", (-1150.0, -2500.0, 14.0), (-1100.0, -2600.0, 14.0)),
        _taxiway("Alpha 2", (-1100.0, -2600.0, 14.0), (-1050.0, -2700.0, 14.0)),
        _taxiway("Alpha 3", (-1050.0, -2700.0, 14.0), (-1000.0, -2800.0, 14.0)),
        _taxiway("Alpha 4", (-1000.0, -2800.0, 14.0), (-1000.0, -2900.0, 14.0)),
        _taxiway("Alpha 5", (-1000.0, -2900.0, 14.0), (-1037.0, -2962.0, 14.0)),
        _taxiway("Bravo", (-1100.0, -2600.0, 14.0), (-1200.0, -2550.0, 14.0)),
        _taxiway("Bravo 2", (-1200.0, -2550.0, 14.0), (-1270.0, -2490.0, 14.0)),
        _taxiway("Bravo 3", (-1270.0, -2490.0, 14.0), (-1336.0, -2434.0, 14.0)),
        _taxiway("Charlie", (-1000.0, -2800.0, 14.0), (-970.0, -2880.0, 14.0)),
        _taxiway("Charlie 2", (-970.0, -2880.0, 14.0), (-942.0, -2988.0, 14.0)),
        _taxiway("Delta", (-1200.0, -2890.0, 14.0), (-1350.0, -2800.0, 14.0)),
        _taxiway("Delta 2", (-1350.0, -2800.0, 14.0), (-1500.0, -2850.0, 14.0)),
        _taxiway("Delta 3", (-1500.0, -2850.0, 14.0), (-1700.0, -2920.0, 14.0)),
        _taxiway("Delta 4", (-1700.0, -2920.0, 14.0), (-1850.0, -2978.0, 14.0)),
        _taxiway("Echo", (-1200.0, -2550.0, 14.0), (-1218.0, -2563.0, 14.0)),
        _taxiway("Terminal A", (-1037.0, -2962.0, 14.0), (-1097.0, -2962.0, 14.0)),
        _taxiway("Terminal A2", (-1097.0, -2962.0, 14.0), (-1150.0, -2950.0, 14.0)),
        _taxiway("Terminal B", (-1200.0, -2890.0, 14.0), (-1200.0, -2920.0, 14.0)),
        _taxiway("Terminal B2", (-1150.0, -2950.0, 14.0), (-1200.0, -2890.0, 14.0)),
        # South apron links the private hangars to Terminal A
        _taxiway("South Apron 1", (-1150.0, -3100.0, 14.0), (-1150.0, -3050.0, 14.0)),
        _taxiway("South Apron 2", (-1150.0, -3050.0, 14.0), (-1100.0, -3000.0, 14.0)),
        _taxiway("South Apron 3", (-1100.0, -3000.0, 14.0), (-1037.0, -2962.0, 14.0)),
        _taxiway("South Apron 4", (-1080.0, -3100.0, 14.0), (-1100.0, -3050.0, 14.0)),
        _taxiway("South Apron 5", (-1100.0, -3050.0, 14.0), (-1100.0, -3000.0, 14.0)),
        _taxiway("FBO Connector", (-1250.0, -3050.0, 14.0), (-1200.0, -3000.0, 14.0)),
        _taxiway("FBO Connector 2", (-1200.0, -3000.0, 14.0), (-1150.0, -2950.0, 14.0)),
        _taxiway("FBO Connector 3", (-1150.0, -2950.0, 14.0), (-1097.0, -2962.0, 14.0)),
        _taxiway("DW Hangar", (-1355.0, -3059.0, 14.0), (-1300.0, -3000.0, 14.0)),
        _taxiway("DW Hangar 2", (-1300.0, -3000.0, 14.0), (-1250.0, -2950.0, 14.0)),
        _taxiway("DW Hangar 3", (-1250.0, -2950.0, 14.0), (-1200.0, -2890.0, 14.0)),
        # Golf links Terminal A to the runway 21 threshold
        _taxiway("Golf 1", (-1037.0, -2962.0, 14.0), (-990.0, -2975.0, 14.0)),
        _taxiway("Golf 2", (-990.0, -2975.0, 14.0), (-942.0, -2988.0, 14.0)),
    )

    return Airport(
        "Los Santos International",
        "LSIA",
        Vector3(-1350.0, -2800.0, 14.0),
        1500.0,
        runways,
        parking,
        taxiways,
    )


def build_sandy_shores(glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG) -> Airport:
    return Airport(
        "Sandy Shores Airfield",
        "KSSA",
        Vector3(1650.0, 3200.0, 41.0),
        500.0,
        runways=(
            _runway("12", 1747.0, 3273.0, 41.1, 118.0, 600.0, "VIS 12", glideslope_angle),
            _runway("30", 1395.0, 3130.0, 40.4, 298.0, 600.0, "VIS 30", glideslope_angle),
        ),
        parking_positions=(
            _parking("Main Hangar", 1770.0, 3239.0, 42.0, 0.0, ParkingType.HANGAR),
            _parking("Ramp North", 1700.0, 3300.0, 41.0, 180.0, ParkingType.RAMP),
            _parking("Ramp South", 1450.0, 3150.0, 40.0, 0.0, ParkingType.RAMP),
        ),
        taxiways=(
            _taxiway("Alpha", (1770.0, 3239.0, 42.0), (1747.0, 3273.0, 41.0)),
            _taxiway("Bravo", (1450.0, 3150.0, 40.0), (1395.0, 3130.0, 40.0)),
        ),
    )


def build_mckenzie_field(glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG) -> Airport:
    return Airport(
        "McKenzie Field",
        "KMCK",
        Vector3(2070.0, 4780.0, 41.0),
        400.0,
        runways=(
            _runway("10", 2134.0, 4801.0, 41.2, 100.0, 500.0, "VIS 10", glideslope_angle),
            _runway("28", 2012.0, 4750.0, 40.5, 280.0, 500.0, "VIS 28", glideslope_angle),
        ),
        parking_positions=(
            _parking("Hangar", 2100.0, 4720.0, 41.0, 90.0, ParkingType.HANGAR),
            _parking("Grass Ramp", 2050.0, 4780.0, 41.0, 180.0, ParkingType.RAMP),
        ),
        taxiways=(
            _taxiway("Alpha", (2100.0, 4720.0, 41.0), (2134.0, 4801.0, 41.0)),
        ),
    )


def build_fort_zancudo(glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG) -> Airport:
    return Airport(
        "Fort Zancudo",
        "KNKX",
        Vector3(-2350.0, 3060.0, 33.0),
        800.0,
        runways=(
            _runway("12", -2259.0, 3102.0, 32.8, 117.0, 900.0, "ILS 12", glideslope_angle),
            _runway("30", -2454.0, 3015.0, 32.8, 297.0, 900.0, "ILS 30", glideslope_angle),
        ),
        parking_positions=(
            _parking("Hangar 1", -2100.0, 3150.0, 33.0, 270.0, ParkingType.MILITARY),
            _parking("Hangar 2", -2100.0, 3200.0, 33.0, 270.0, ParkingType.MILITARY),
            _parking("Flight Line", -2200.0, 3150.0, 33.0, 180.0, ParkingType.MILITARY),
            _parking("Helipad Main", -2148.0, 3176.0, 33.0, 0.0, ParkingType.RAMP),
            _parking("Control Tower Pad", -2358.0, 3249.0, 101.5, 0.0, ParkingType.RAMP),
        ),
        taxiways=(
            _taxiway("Alpha", (-2100.0, 3150.0, 33.0), (-2259.0, 3102.0, 33.0)),
            _taxiway("Bravo", (-2200.0, 3150.0, 33.0), (-2350.0, 3060.0, 33.0)),
            _taxiway("Charlie", (-2350.0, 3060.0, 33.0), (-2454.0, 3015.0, 33.0)),
        ),
    )


def build_default_airports(glideslope_angle: float = DEFAULT_GLIDESLOPE_DEG) -> list[Airport]:
    """Build every built-in airport, in lookup order."""
    return [
        build_los_santos_international(glideslope_angle),
        build_sandy_shores(glideslope_angle),
        build_mckenzie_field(glideslope_angle),
        build_fort_zancudo(glideslope_angle),
    ]
