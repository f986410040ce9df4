"""
Decoded AIS records.

Values are kept as transmitted: scaled to natural units but with the
"not available" sentinels left in place (heading 511, lon 181, ...).
A field set to None on a record being encoded is sent as its sentinel.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


# Position report sentinels
ROT_NOT_AVAILABLE = -128
SOG_NOT_AVAILABLE = 102.3
LON_NOT_AVAILABLE = 181.0
LAT_NOT_AVAILABLE = 91.0
COG_NOT_AVAILABLE = 360.0
HEADING_NOT_AVAILABLE = 511
SECOND_NOT_AVAILABLE = 60
NAV_STATUS_NOT_DEFINED = 15

# Static and voyage sentinels
ETA_MONTH_NOT_AVAILABLE = 0
ETA_DAY_NOT_AVAILABLE = 0
ETA_HOUR_NOT_AVAILABLE = 24
ETA_MINUTE_NOT_AVAILABLE = 60

POSITION_TYPES = {1, 2, 3}
STATIC_TYPES = {5}


@dataclass
class PositionReport:
    """Class A position report, message types 1, 2 and 3."""
    mmsi: int
    message_type: int = 1
    repeat: Optional[int] = None
    nav_status: Optional[int] = None
    rate_of_turn: Optional[int] = None
    sog: Optional[float] = None             # knots
    accuracy: Optional[bool] = None
    lon: Optional[float] = None             # degrees
    lat: Optional[float] = None             # degrees
    cog: Optional[float] = None             # degrees
    heading: Optional[int] = None
    timestamp: Optional[int] = None         # UTC second
    special_manoeuvre: Optional[int] = None
    raim: Optional[bool] = None
    radio: Optional[int] = None
    channel: Optional[str] = None

    @property
    def has_position(self) -> bool:
        """True unless lon/lat are missing or carry the 181/91 sentinels."""
        if self.lon is None or self.lat is None:
            return False
        return self.lon != LON_NOT_AVAILABLE and self.lat != LAT_NOT_AVAILABLE

    def asdict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StaticVoyageReport:
    """Static and voyage related data, message type 5."""
    mmsi: int
    message_type: int = 5
    repeat: Optional[int] = None
    ais_version: Optional[int] = None
    imo: Optional[int] = None
    callsign: Optional[str] = None
    name: Optional[str] = None
    ship_type: Optional[int] = None
    to_bow: Optional[int] = None
    to_stern: Optional[int] = None
    to_port: Optional[int] = None
    to_starboard: Optional[int] = None
    epfd: Optional[int] = None
    eta_month: Optional[int] = None
    eta_day: Optional[int] = None
    eta_hour: Optional[int] = None
    eta_minute: Optional[int] = None
    draught: Optional[float] = None         # meters
    destination: Optional[str] = None
    dte_available: Optional[bool] = None
    channel: Optional[str] = None

    @property
    def eta_available(self) -> bool:
        return not (
            self.eta_month in (None, ETA_MONTH_NOT_AVAILABLE)
            or self.eta_day in (None, ETA_DAY_NOT_AVAILABLE)
            or self.eta_hour in (None, ETA_HOUR_NOT_AVAILABLE)
            or self.eta_minute in (None, ETA_MINUTE_NOT_AVAILABLE)
        )

    def asdict(self) -> Dict[str, Any]:
        return asdict(self)
