"""
Sentence-level AIS decoding.

AISDecoder turns a stream of sentence lines into PositionReport and
StaticVoyageReport records. It is stateful only through the multipart
reassembler; everything else is a pure function of the input.

Usage:
    decoder = AISDecoder()
    for line in lines:
        msg = decoder.decode_sentence(line)
        if msg is not None:
            ...
"""

from __future__ import annotations
import logging
import time
from collections import defaultdict
from typing import Callable, Iterable, Iterator, Optional, Union

from .bitreader import BitReader, payload_to_bits
from .config import config
from .messages import POSITION_TYPES, STATIC_TYPES, PositionReport, StaticVoyageReport
from .msg123 import decode_position
from .msg5 import decode_static
from .multipart import MultipartReassembler
from .nmea import parse_sentence

LOGGER = logging.getLogger(__name__)

AISMessage = Union[PositionReport, StaticVoyageReport]


def decode_bits(bits: str, channel: Optional[str] = None) -> Optional[AISMessage]:
    """
    Decode a dearmored message bitstring.

    Dispatches on the 6-bit message type. Types other than 1-3 and 5, and
    bitstrings too short for their type, yield None.
    """
    if len(bits) < 6:
        return None
    msg_type = BitReader(bits).get_uint(0, 6)

    if msg_type in STATIC_TYPES:
        return decode_static(bits, channel)
    if msg_type in POSITION_TYPES:
        return decode_position(bits, channel)
    return None


class AISDecoder:
    """Decodes AIVDM/AIVDO sentences, reassembling multipart messages."""

    def __init__(
        self,
        timeout: float = config.MULTIPART_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
        position_callback: Optional[Callable[[PositionReport], None]] = None,
        static_callback: Optional[Callable[[StaticVoyageReport], None]] = None,
    ):
        self.multipart = MultipartReassembler(timeout=timeout, clock=clock)
        self.position_callback = position_callback
        self.static_callback = static_callback
        self.stats = defaultdict(int)

    @property
    def pending(self) -> int:
        """Number of incomplete multipart messages held."""
        return len(self.multipart)

    def decode_sentence(self, line: str) -> Optional[AISMessage]:
        """
        Decode one sentence.

        Returns a record when this sentence completes a message, None when
        it was buffered, malformed, or carries an unsupported type.
        """
        self.stats["sentences"] += 1
        sentence = parse_sentence(line)
        if sentence is None:
            self.stats["invalid_nmea"] += 1
            return None

        if sentence.total == 1:
            payload, fill = sentence.payload, sentence.fill
        else:
            joined = self.multipart.add(
                sentence.seq_id, sentence.total, sentence.part,
                sentence.payload, sentence.fill,
            )
            if joined is None:
                self.stats["buffered"] += 1
                return None
            payload, fill = joined

        msg = self._decode_payload(payload, fill, sentence.channel)
        if isinstance(msg, PositionReport):
            self.stats["positions"] += 1
        elif isinstance(msg, StaticVoyageReport):
            self.stats["static"] += 1
        return msg

    def _decode_payload(self, payload: str, fill: int, channel: str) -> Optional[AISMessage]:
        bits = payload_to_bits(payload, fill)
        msg = decode_bits(bits, channel)
        if msg is None:
            if len(bits) >= 6 and BitReader(bits).get_uint(0, 6) in POSITION_TYPES | STATIC_TYPES:
                self.stats["short_payload"] += 1
                LOGGER.debug("Payload too short (%d bits): %s", len(bits), payload)
            else:
                self.stats["unsupported_type"] += 1
        return msg

    def decode_lines(self, lines: Iterable[str]) -> Iterator[AISMessage]:
        """Yield every record produced by a sequence of sentence lines."""
        for line in lines:
            msg = self.decode_sentence(line)
            if msg is not None:
                yield msg

    def on_sentence(self, line: str) -> Optional[AISMessage]:
        """Decode one sentence and hand the result to the registered callback."""
        msg = self.decode_sentence(line)
        if isinstance(msg, PositionReport) and self.position_callback is not None:
            self.position_callback(msg)
        elif isinstance(msg, StaticVoyageReport) and self.static_callback is not None:
            self.static_callback(msg)
        return msg

    def expire(self) -> int:
        """Drop timed-out multipart buffers now."""
        return self.multipart.expire()

    def start_sweeper(self, interval: float = config.SWEEP_INTERVAL):
        self.multipart.start_sweeper(interval)

    def stop_sweeper(self):
        self.multipart.stop_sweeper()

    def get_stats(self) -> dict:
        stats = dict(self.stats)
        stats["buffer"] = self.multipart.get_stats()
        stats["incomplete"] = self.multipart.expired_count
        return stats


def decode(*sentences: str) -> Optional[AISMessage]:
    """
    Decode one complete message from all of its sentences.

    Example:
        >>> msg = decode(part1, part2)
    """
    decoder = AISDecoder()
    msg = None
    for line in sentences:
        msg = decoder.decode_sentence(line)
    return msg
