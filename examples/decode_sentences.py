#!/usr/bin/env python3
"""
Example: Encoding and decoding AIS sentences with aivdm.

Run with: python examples/decode_sentences.py
"""

from aivdm import AISDecoder, PositionReport, StaticVoyageReport, encode_report


def main():
    reports = [
        PositionReport(mmsi=123456789, lat=40.7128, lon=-74.0060, sog=12.3, heading=90),
        StaticVoyageReport(
            mmsi=123456789,
            imo=9876543,
            callsign="CALL123",
            name="TEST SHIP",
            ship_type=70,
            to_bow=10,
            to_stern=20,
            to_port=5,
            to_starboard=7,
            eta_month=12,
            eta_day=31,
            eta_hour=23,
            eta_minute=59,
            draught=6.5,
            destination="NEW YORK",
            dte_available=True,
        ),
    ]

    print("=== Encoding ===\n")
    lines = []
    for report in reports:
        for line in encode_report(report):
            print(f"  {line}")
            lines.append(line)

    print("\n=== Decoding ===\n")
    decoder = AISDecoder()
    for msg in decoder.decode_lines(lines):
        print(f"{type(msg).__name__}:")
        for k, v in msg.asdict().items():
            print(f"  {k}: {v}")
        print()

    print("=== Cross-check with pyais ===\n")
    try:
        from pyais import decode
    except ImportError:
        print("pyais not installed (pip install pyais)")
        return
    print(decode(lines[0]).asdict())


if __name__ == '__main__':
    main()
