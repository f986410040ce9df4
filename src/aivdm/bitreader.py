"""
Bit-level transcoding for AIS payloads.

An AIVDM payload is "armored": each character carries 6 bits of the
underlying message. This module converts armored payloads to and from flat
bitstrings ('0'/'1' text, MSB first) and reads/writes unsigned integers,
two's-complement signed integers and 6-bit text at arbitrary bit offsets.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from .exceptions import EncodeError, FieldRangeError


# 6-bit text alphabet (ITU-R M.1371 table 47). Index is the 6-bit value.
SIXBIT_TEXT = "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_ !\"#$%&'()*+,-./0123456789:;<=>?"
TEXT_CODES = {c: i for i, c in enumerate(SIXBIT_TEXT)}

# Coordinates are carried in 1/10000 minute
COORD_SCALE = 600000.0


def char_to_sixbit(char: str) -> int:
    """Map one armored payload character to its 6-bit value."""
    val = ord(char) - 48
    if val > 40:
        val -= 8
    return val


def sixbit_to_char(val: int) -> str:
    """Map a 6-bit value to its armored payload character."""
    if val < 0 or val > 63:
        raise ValueError(f"6-bit value out of range: {val}")
    return chr(val + 48 if val < 40 else val + 56)


def payload_to_bits(payload: str, fill: int = 0) -> str:
    """
    Dearmor an AIS payload into a bitstring.

    Args:
        payload: The armored payload string (e.g., "15M67FC000G?ufbE`FepT@3n00Sa")
        fill: Number of fill bits padding the last character

    Returns:
        Bitstring with the fill bits removed from the end
    """
    bits = "".join(format(char_to_sixbit(c) & 0x3F, "06b") for c in payload)

    # A fill of 6 would swallow a whole character; seen from encoders that
    # pad to byte boundaries, so it is treated as no fill at all.
    if fill == 6:
        fill = 0
    if fill > 0 and len(bits) >= fill:
        bits = bits[:-fill]
    return bits


def _as_int(value, name: str) -> int:
    """Accept integral floats such as 90.0; reject anything else that is not an int."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int):
        raise EncodeError(f"{name}={value!r} is not an integer")
    return value


def pad_to_sixbit(bits: str) -> str:
    """Right-pad a bitstring with zeros to a multiple of 6 bits."""
    remainder = len(bits) % 6
    if remainder:
        bits += "0" * (6 - remainder)
    return bits


def bits_to_payload(bits: str) -> str:
    """Armor a bitstring, zero-padding it to whole characters first."""
    bits = pad_to_sixbit(bits)
    return "".join(sixbit_to_char(int(bits[i:i + 6], 2)) for i in range(0, len(bits), 6))


@dataclass
class BitReader:
    """
    Read fields from a bitstring at arbitrary bit offsets.

    Example:
        >>> reader = BitReader("000001" "00")
        >>> reader.get_uint(0, 6)
        1
    """
    bits: str

    def __len__(self) -> int:
        return len(self.bits)

    def get_uint(self, offset: int, width: int) -> int:
        """
        Extract an unsigned integer, MSB first.

        Args:
            offset: Starting bit position (0-indexed)
            width: Number of bits to extract

        Returns:
            Unsigned integer value
        """
        if width == 0:
            return 0
        if offset + width > len(self.bits):
            raise ValueError(f"Bit range [{offset}:{offset+width}] exceeds data length ({len(self.bits)} bits)")
        return int(self.bits[offset:offset + width], 2)

    def get_int(self, offset: int, width: int) -> int:
        """Extract a two's complement signed integer."""
        val = self.get_uint(offset, width)
        if val & (1 << (width - 1)):
            val -= (1 << width)
        return val

    def get_bool(self, offset: int) -> bool:
        """Extract a single bit as a boolean."""
        return self.get_uint(offset, 1) == 1

    def get_string(self, offset: int, width: int) -> str:
        """
        Extract 6-bit text.

        Trailing '@' padding is removed before surrounding whitespace is
        trimmed, so "AB @@" reads as "AB".
        """
        if width % 6 != 0:
            raise ValueError(f"String width must be multiple of 6, got {width}")

        chars = [SIXBIT_TEXT[self.get_uint(offset + i * 6, 6)] for i in range(width // 6)]
        return ''.join(chars).rstrip('@').strip()

    def get_position_28(self, offset: int) -> Tuple[float, float]:
        """
        Extract a 28-bit longitude followed by a 27-bit latitude.

        Returns:
            Tuple of (longitude, latitude) in decimal degrees
        """
        lon = self.get_int(offset, 28) / COORD_SCALE
        lat = self.get_int(offset + 28, 27) / COORD_SCALE
        return (lon, lat)


@dataclass
class BitWriter:
    """
    Append fields to a growing bitstring.

    Every put_* validates that the value fits the field; the field name is
    only used for the error message.
    """
    chunks: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return sum(len(c) for c in self.chunks)

    def put_uint(self, value: int, width: int, name: str = "value") -> "BitWriter":
        value = _as_int(value, name)
        if value < 0 or value >= (1 << width):
            raise FieldRangeError(name, value, width)
        self.chunks.append(format(value, f"0{width}b"))
        return self

    def put_int(self, value: int, width: int, name: str = "value") -> "BitWriter":
        value = _as_int(value, name)
        lo, hi = -(1 << (width - 1)), (1 << (width - 1)) - 1
        if value < lo or value > hi:
            raise FieldRangeError(name, value, width, signed=True)
        if value < 0:
            value += (1 << width)
        self.chunks.append(format(value, f"0{width}b"))
        return self

    def put_bool(self, value: bool) -> "BitWriter":
        self.chunks.append("1" if value else "0")
        return self

    def put_spare(self, width: int) -> "BitWriter":
        self.chunks.append("0" * width)
        return self

    def put_string(self, text: str, width: int) -> "BitWriter":
        """Write text padded with '@' (or truncated) to width // 6 characters."""
        if width % 6 != 0:
            raise ValueError(f"String width must be multiple of 6, got {width}")
        nchars = width // 6
        text = (text or "")[:nchars].ljust(nchars, "@")
        # Characters outside the alphabet encode as '@'
        self.chunks.extend(format(TEXT_CODES.get(c, 0), "06b") for c in text)
        return self

    def getvalue(self) -> str:
        return "".join(self.chunks)
