"""
Encoding of AIS records into sentence lines.

Usage:
    from aivdm import PositionReport, encode_position_report

    lines = encode_position_report(PositionReport(mmsi=123456789, lat=40.7128, lon=-74.006))
"""

from __future__ import annotations
from typing import List, Optional

from .config import config
from .exceptions import EncodeError
from .messages import PositionReport, StaticVoyageReport
from .msg123 import encode_position_bits
from .msg5 import encode_static_bits
from .nmea import build_sentences


def encode_position_report(
    msg: PositionReport,
    seq_id: Optional[int] = None,
    talker: str = config.DEFAULT_TALKER,
) -> List[str]:
    """Encode a position report (types 1-3) into sentence lines."""
    return build_sentences(encode_position_bits(msg), msg.channel, seq_id, talker)


def encode_static_voyage_report(
    msg: StaticVoyageReport,
    seq_id: Optional[int] = None,
    talker: str = config.DEFAULT_TALKER,
) -> List[str]:
    """Encode static and voyage data (type 5) into sentence lines."""
    return build_sentences(encode_static_bits(msg), msg.channel, seq_id, talker)


def encode_report(msg, seq_id: Optional[int] = None,
                  talker: str = config.DEFAULT_TALKER) -> List[str]:
    """Encode either record type."""
    if isinstance(msg, PositionReport):
        return encode_position_report(msg, seq_id, talker)
    if isinstance(msg, StaticVoyageReport):
        return encode_static_voyage_report(msg, seq_id, talker)
    raise EncodeError(f"Cannot encode {type(msg).__name__}")
