"""
Exceptions raised by aivdm.

Decoding never raises for malformed input: noisy feeds interleave junk
lines, so bad sentences are dropped and counted instead. Encoding raises,
because an invalid record is a caller bug and must not become a corrupt
sentence on the wire.
"""

from __future__ import annotations


class AISError(Exception):
    """Base class for aivdm errors."""


class EncodeError(AISError, ValueError):
    """A record cannot be encoded as given."""


class FieldRangeError(EncodeError):
    """A field value does not fit in its bit width."""

    def __init__(self, field: str, value: int, width: int, signed: bool = False):
        self.field = field
        self.value = value
        self.width = width
        self.signed = signed
        if signed:
            lo, hi = -(1 << (width - 1)), (1 << (width - 1)) - 1
        else:
            lo, hi = 0, (1 << width) - 1
        super().__init__(
            f"{field}={value} does not fit in {width} "
            f"{'signed' if signed else 'unsigned'} bits [{lo}, {hi}]"
        )


class InvalidChannelError(EncodeError):
    """Radio channel is not a single 'A' or 'B' character."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"Invalid AIS channel {channel!r}, expected 'A' or 'B'")
