"""
Message type 5 - Static and voyage related data.

Fixed length: 424 bits, which always spans two sentences at 60
characters per sentence.

References:
- ITU-R M.1371-5, Annex 8, 3.3
- https://gpsd.gitlab.io/gpsd/AIVDM.html#_type_5_static_and_voyage_related_data
"""

from __future__ import annotations
from typing import Optional

from .bitreader import BitReader, BitWriter
from .exceptions import EncodeError
from .messages import (
    ETA_DAY_NOT_AVAILABLE,
    ETA_HOUR_NOT_AVAILABLE,
    ETA_MINUTE_NOT_AVAILABLE,
    ETA_MONTH_NOT_AVAILABLE,
    StaticVoyageReport,
)

STATIC_BITS = 424


def decode_static(bits: str, channel: Optional[str] = None) -> Optional[StaticVoyageReport]:
    """
    Decode static and voyage data from a dearmored bitstring.

    Returns None when the bitstring is too short for the fixed layout.
    """
    if len(bits) < STATIC_BITS:
        return None
    r = BitReader(bits)

    return StaticVoyageReport(
        message_type=5,
        repeat=r.get_uint(6, 2),
        mmsi=r.get_uint(8, 30),
        ais_version=r.get_uint(38, 2),
        imo=r.get_uint(40, 30),
        callsign=r.get_string(70, 42),
        name=r.get_string(112, 120),
        ship_type=r.get_uint(232, 8),
        to_bow=r.get_uint(240, 9),
        to_stern=r.get_uint(249, 9),
        to_port=r.get_uint(258, 6),
        to_starboard=r.get_uint(264, 6),
        epfd=r.get_uint(270, 4),
        eta_month=r.get_uint(274, 4),
        eta_day=r.get_uint(278, 5),
        eta_hour=r.get_uint(283, 5),
        eta_minute=r.get_uint(288, 6),
        draught=r.get_uint(294, 8) / 10.0,
        destination=r.get_string(302, 120),
        # Inverted: 0 means the DTE is ready
        dte_available=not r.get_bool(422),
        channel=channel,
    )


def _or(value, default):
    return default if value is None else value


def encode_static_bits(msg: StaticVoyageReport) -> str:
    """Pack static and voyage data into its 424-bit layout."""
    if msg.message_type != 5:
        raise EncodeError(f"Static and voyage report message type must be 5, got {msg.message_type}")
    if msg.mmsi is None:
        raise EncodeError("Static and voyage report requires an MMSI")

    draught = 0 if msg.draught is None else round(msg.draught * 10)
    # Absent DTE is sent as "not available"
    dte_bit = msg.dte_available is not True

    w = BitWriter()
    w.put_uint(5, 6, "message_type")
    w.put_uint(_or(msg.repeat, 0), 2, "repeat")
    w.put_uint(msg.mmsi, 30, "mmsi")
    w.put_uint(_or(msg.ais_version, 0), 2, "ais_version")
    w.put_uint(_or(msg.imo, 0), 30, "imo")
    w.put_string(msg.callsign, 42)
    w.put_string(msg.name, 120)
    w.put_uint(_or(msg.ship_type, 0), 8, "ship_type")
    w.put_uint(_or(msg.to_bow, 0), 9, "to_bow")
    w.put_uint(_or(msg.to_stern, 0), 9, "to_stern")
    w.put_uint(_or(msg.to_port, 0), 6, "to_port")
    w.put_uint(_or(msg.to_starboard, 0), 6, "to_starboard")
    w.put_uint(_or(msg.epfd, 0), 4, "epfd")
    w.put_uint(_or(msg.eta_month, ETA_MONTH_NOT_AVAILABLE), 4, "eta_month")
    w.put_uint(_or(msg.eta_day, ETA_DAY_NOT_AVAILABLE), 5, "eta_day")
    w.put_uint(_or(msg.eta_hour, ETA_HOUR_NOT_AVAILABLE), 5, "eta_hour")
    w.put_uint(_or(msg.eta_minute, ETA_MINUTE_NOT_AVAILABLE), 6, "eta_minute")
    w.put_uint(draught, 8, "draught")
    w.put_string(msg.destination, 120)
    w.put_bool(dte_bit)
    w.put_spare(1)
    return w.getvalue()
