"""
AIS sentence decoder/encoder command line.

Usage:
    aivdm decode capture.nmea               # One JSON record per line
    cat capture.nmea | aivdm decode --stats
    aivdm encode position --mmsi 123456789 --lat 40.7128 --lon -74.006 --sog 12.3
    aivdm encode static --mmsi 123456789 --name "TEST SHIP" --destination "NEW YORK"
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import config
from .decoder import AISDecoder
from .encoder import encode_position_report, encode_static_voyage_report
from .exceptions import EncodeError
from .messages import PositionReport, StaticVoyageReport


def run_decode(args) -> int:
    decoder = AISDecoder(timeout=args.timeout)

    files = args.files or ["-"]
    for name in files:
        stream = sys.stdin if name == "-" else open(name, encoding="ascii", errors="replace")
        try:
            for msg in decoder.decode_lines(stream):
                print(json.dumps(msg.asdict()))
        finally:
            if stream is not sys.stdin:
                stream.close()

    if args.stats:
        print("\nDecoding statistics:", file=sys.stderr)
        for key, value in sorted(decoder.get_stats().items()):
            print(f"  {key}: {value}", file=sys.stderr)
    return 0


def run_encode_position(args) -> List[str]:
    msg = PositionReport(
        mmsi=args.mmsi,
        message_type=args.type,
        repeat=args.repeat,
        nav_status=args.status,
        rate_of_turn=args.turn,
        sog=args.sog,
        accuracy=args.accuracy,
        lon=args.lon,
        lat=args.lat,
        cog=args.cog,
        heading=args.heading,
        timestamp=args.second,
        raim=args.raim,
        radio=args.radio,
        channel=args.channel,
    )
    return encode_position_report(msg, seq_id=args.seq_id, talker=args.talker)


def run_encode_static(args) -> List[str]:
    msg = StaticVoyageReport(
        mmsi=args.mmsi,
        repeat=args.repeat,
        imo=args.imo,
        callsign=args.callsign,
        name=args.name,
        ship_type=args.ship_type,
        to_bow=args.to_bow,
        to_stern=args.to_stern,
        to_port=args.to_port,
        to_starboard=args.to_starboard,
        epfd=args.epfd,
        eta_month=args.eta_month,
        eta_day=args.eta_day,
        eta_hour=args.eta_hour,
        eta_minute=args.eta_minute,
        draught=args.draught,
        destination=args.destination,
        dte_available=args.dte,
        channel=args.channel,
    )
    return encode_static_voyage_report(msg, seq_id=args.seq_id, talker=args.talker)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aivdm", description="AIS AIVDM/AIVDO decoder and encoder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log dropped sentences")
    sub = parser.add_subparsers(dest="command", required=True)

    dec = sub.add_parser("decode", help="Decode sentences to JSON records")
    dec.add_argument("files", nargs="*", help="Input files (default: stdin)")
    dec.add_argument(
        "--timeout",
        type=float,
        default=config.MULTIPART_TIMEOUT,
        help="Multipart expiry in seconds",
    )
    dec.add_argument("--stats", action="store_true", help="Print statistics to stderr")
    dec.set_defaults(func=run_decode)

    enc = sub.add_parser("encode", help="Encode a record to sentences")
    kinds = enc.add_subparsers(dest="kind", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--mmsi", type=int, required=True)
    common.add_argument("--repeat", type=int)
    common.add_argument("--channel", default=config.DEFAULT_CHANNEL, help="A or B")
    common.add_argument("--seq-id", type=int, help="Sequence id for multipart output")
    common.add_argument("--talker", default=config.DEFAULT_TALKER, choices=["AIVDM", "AIVDO"])

    pos = kinds.add_parser("position", parents=[common], help="Position report (types 1-3)")
    pos.add_argument("--type", type=int, default=1, choices=[1, 2, 3])
    pos.add_argument("--status", type=int, help="Navigation status")
    pos.add_argument("--turn", type=int, help="Rate of turn (raw, signed)")
    pos.add_argument("--sog", type=float, help="Speed over ground (knots)")
    pos.add_argument("--accuracy", action="store_true")
    pos.add_argument("--lon", type=float)
    pos.add_argument("--lat", type=float)
    pos.add_argument("--cog", type=float, help="Course over ground (degrees)")
    pos.add_argument("--heading", type=int)
    pos.add_argument("--second", type=int, help="UTC second")
    pos.add_argument("--raim", action="store_true")
    pos.add_argument("--radio", type=int)
    pos.set_defaults(func=run_encode_position)

    sta = kinds.add_parser("static", parents=[common], help="Static and voyage data (type 5)")
    sta.add_argument("--imo", type=int)
    sta.add_argument("--callsign")
    sta.add_argument("--name")
    sta.add_argument("--ship-type", type=int)
    sta.add_argument("--to-bow", type=int)
    sta.add_argument("--to-stern", type=int)
    sta.add_argument("--to-port", type=int)
    sta.add_argument("--to-starboard", type=int)
    sta.add_argument("--epfd", type=int)
    sta.add_argument("--eta-month", type=int)
    sta.add_argument("--eta-day", type=int)
    sta.add_argument("--eta-hour", type=int)
    sta.add_argument("--eta-minute", type=int)
    sta.add_argument("--draught", type=float, help="Meters")
    sta.add_argument("--destination")
    sta.add_argument("--dte", action="store_true", help="DTE available")
    sta.set_defaults(func=run_encode_static)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "decode":
        return args.func(args)

    try:
        lines = args.func(args)
    except EncodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
