"""
Message types 1, 2, 3 - Class A position report.

Fixed length: 168 bits.

References:
- ITU-R M.1371-5, Annex 8, 3.1
- https://gpsd.gitlab.io/gpsd/AIVDM.html#_types_1_2_and_3_position_report_class_a
"""

from __future__ import annotations
from typing import Optional

from .bitreader import COORD_SCALE, BitReader, BitWriter
from .exceptions import EncodeError
from .messages import (
    COG_NOT_AVAILABLE,
    HEADING_NOT_AVAILABLE,
    LAT_NOT_AVAILABLE,
    LON_NOT_AVAILABLE,
    NAV_STATUS_NOT_DEFINED,
    POSITION_TYPES,
    ROT_NOT_AVAILABLE,
    SECOND_NOT_AVAILABLE,
    SOG_NOT_AVAILABLE,
    PositionReport,
)

POSITION_BITS = 168

# Raw "not available" values as packed on the wire
RAW_ROT_NA = ROT_NOT_AVAILABLE
RAW_SOG_NA = round(SOG_NOT_AVAILABLE * 10)
RAW_LON_NA = round(LON_NOT_AVAILABLE * COORD_SCALE)
RAW_LAT_NA = round(LAT_NOT_AVAILABLE * COORD_SCALE)
RAW_COG_NA = round(COG_NOT_AVAILABLE * 10)
RAW_HEADING_NA = HEADING_NOT_AVAILABLE
RAW_SECOND_NA = SECOND_NOT_AVAILABLE


def decode_position(bits: str, channel: Optional[str] = None) -> Optional[PositionReport]:
    """
    Decode a position report from a dearmored bitstring.

    Returns None when the bitstring is too short for the fixed layout.
    """
    if len(bits) < POSITION_BITS:
        return None
    r = BitReader(bits)
    lon, lat = r.get_position_28(61)

    return PositionReport(
        message_type=r.get_uint(0, 6),
        repeat=r.get_uint(6, 2),
        mmsi=r.get_uint(8, 30),
        nav_status=r.get_uint(38, 4),
        rate_of_turn=r.get_int(42, 8),
        sog=r.get_uint(50, 10) / 10.0,
        accuracy=r.get_bool(60),
        lon=lon,
        lat=lat,
        cog=r.get_uint(116, 12) / 10.0,
        heading=r.get_uint(128, 9),
        timestamp=r.get_uint(137, 6),
        special_manoeuvre=r.get_uint(143, 2),
        # 145-147 spare
        raim=r.get_bool(148),
        radio=r.get_uint(149, 19),
        channel=channel,
    )


def _or(value, default):
    return default if value is None else value


def encode_position_bits(msg: PositionReport) -> str:
    """Pack a position report into its 168-bit layout."""
    if msg.message_type not in POSITION_TYPES:
        raise EncodeError(f"Position report message type must be 1-3, got {msg.message_type}")
    if msg.mmsi is None:
        raise EncodeError("Position report requires an MMSI")

    sog = RAW_SOG_NA if msg.sog is None else round(msg.sog * 10)
    cog = RAW_COG_NA if msg.cog is None else round(msg.cog * 10)

    w = BitWriter()
    w.put_uint(msg.message_type, 6, "message_type")
    w.put_uint(_or(msg.repeat, 0), 2, "repeat")
    w.put_uint(msg.mmsi, 30, "mmsi")
    w.put_uint(_or(msg.nav_status, NAV_STATUS_NOT_DEFINED), 4, "nav_status")
    w.put_int(_or(msg.rate_of_turn, RAW_ROT_NA), 8, "rate_of_turn")
    w.put_uint(sog, 10, "sog")
    w.put_bool(bool(msg.accuracy))
    w.put_int(RAW_LON_NA if msg.lon is None else round(msg.lon * COORD_SCALE), 28, "lon")
    w.put_int(RAW_LAT_NA if msg.lat is None else round(msg.lat * COORD_SCALE), 27, "lat")
    w.put_uint(cog, 12, "cog")
    w.put_uint(_or(msg.heading, RAW_HEADING_NA), 9, "heading")
    w.put_uint(_or(msg.timestamp, RAW_SECOND_NA), 6, "timestamp")
    w.put_uint(_or(msg.special_manoeuvre, 0), 2, "special_manoeuvre")
    w.put_spare(3)
    w.put_bool(bool(msg.raim))
    w.put_uint(_or(msg.radio, 0), 19, "radio")
    return w.getvalue()
