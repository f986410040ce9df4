"""
aivdm - AIS AIVDM/AIVDO sentence decoder and encoder.

Decodes Class A position reports (types 1-3) and static and voyage data
(type 5) from NMEA 0183 sentences, reassembling multipart messages, and
encodes the same records back into checksummed sentences.

Usage:
    from aivdm import AISDecoder, PositionReport, encode_position_report

    lines = encode_position_report(
        PositionReport(mmsi=123456789, lat=40.7128, lon=-74.0060, sog=12.3, heading=90)
    )

    decoder = AISDecoder()
    for line in lines:
        msg = decoder.decode_sentence(line)
        if msg is not None:
            print(msg.mmsi, msg.lat, msg.lon)
"""

from __future__ import annotations

from .bitreader import BitReader, BitWriter, bits_to_payload, payload_to_bits
from .decoder import AISDecoder, decode, decode_bits
from .encoder import encode_position_report, encode_report, encode_static_voyage_report
from .exceptions import AISError, EncodeError, FieldRangeError, InvalidChannelError
from .messages import PositionReport, StaticVoyageReport
from .msg123 import encode_position_bits
from .msg5 import encode_static_bits
from .nmea import Sentence, build_sentences, checksum, parse_sentence, verify_checksum


__version__ = "0.1.0"
__all__ = [
    "AISDecoder",
    "decode",
    "decode_bits",
    "encode_position_report",
    "encode_static_voyage_report",
    "encode_report",
    "encode_position_bits",
    "encode_static_bits",
    "PositionReport",
    "StaticVoyageReport",
    "Sentence",
    "parse_sentence",
    "build_sentences",
    "checksum",
    "verify_checksum",
    "BitReader",
    "BitWriter",
    "payload_to_bits",
    "bits_to_payload",
    "AISError",
    "EncodeError",
    "FieldRangeError",
    "InvalidChannelError",
]
