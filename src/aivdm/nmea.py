"""
NMEA 0183 framing for AIVDM/AIVDO sentences.

    !AIVDM,<total>,<part>,<seq_id>,<channel>,<payload>,<fill>*<checksum>

The checksum is the XOR of every character between '!' and '*'
(exclusive), written as two hex digits after the '*'.
"""

from __future__ import annotations
import logging
import random
import re
from dataclasses import dataclass
from typing import List, Optional

from .bitreader import bits_to_payload, pad_to_sixbit
from .config import config
from .exceptions import EncodeError, InvalidChannelError

LOGGER = logging.getLogger(__name__)

TALKERS = ("AIVDM", "AIVDO")

# Payload characters per sentence; keeps every line within 82 characters
MAX_PAYLOAD_CHARS = 60

SENTENCE_RE = re.compile(
    r"^!(AIVDM|AIVDO),(\d+),(\d+),([^,]*),([AB]),([^,]*),([0-7])\*([0-9A-Fa-f]{2})"
)


@dataclass(frozen=True)
class Sentence:
    """Fields of one parsed AIVDM/AIVDO sentence."""
    talker: str
    total: int
    part: int
    seq_id: str
    channel: str
    payload: str
    fill: int

    @property
    def is_multipart(self) -> bool:
        return self.total > 1


def checksum(body: str) -> str:
    """XOR checksum of a sentence body (the text between '!' and '*')."""
    cs = 0
    for c in body:
        cs ^= ord(c)
    return f"{cs:02X}"


def verify_checksum(line: str) -> bool:
    """Check the trailing checksum of a sentence, case-insensitively."""
    line = line.strip()
    if not line.startswith("!"):
        return False
    star = line.find("*")
    if star == -1 or star + 3 > len(line):
        return False
    return checksum(line[1:star]) == line[star + 1:star + 3].upper()


def parse_sentence(line: str) -> Optional[Sentence]:
    """
    Parse and validate one sentence.

    Returns None for anything that is not a well-formed AIVDM/AIVDO
    sentence with a matching checksum. Feeds routinely interleave other
    traffic, so this is not an error.
    """
    if not line:
        return None
    line = line.strip()
    m = SENTENCE_RE.match(line)
    if m is None:
        LOGGER.debug("Not an AIVDM/AIVDO sentence: %r", line)
        return None
    if not verify_checksum(line):
        LOGGER.debug("Checksum mismatch: %r", line)
        return None

    talker, total, part, seq_id, channel, payload, fill, _ = m.groups()
    total, part = int(total), int(part)
    if total < 1 or not 1 <= part <= total:
        LOGGER.debug("Bad fragment numbering %d/%d: %r", part, total, line)
        return None

    return Sentence(
        talker=talker,
        total=total,
        part=part,
        seq_id=seq_id,
        channel=channel,
        payload=payload,
        fill=int(fill),
    )


def format_sentence(talker: str, total: int, part: int, seq_id: str,
                    channel: str, payload: str, fill: int) -> str:
    """Assemble one sentence line and append its checksum."""
    body = f"{talker},{total},{part},{seq_id},{channel},{payload},{fill}"
    return f"!{body}*{checksum(body)}"


def build_sentences(
    bits: str,
    channel: Optional[str] = None,
    seq_id: Optional[int] = None,
    talker: str = config.DEFAULT_TALKER,
) -> List[str]:
    """
    Armor a packed message and split it into sentence lines.

    Each chunk holds at most MAX_PAYLOAD_CHARS payload characters. A
    message that needs several sentences gets one sequence id (random 1-9
    unless given) shared by all its parts; a single sentence leaves the
    field empty.

    Args:
        bits: Packed message bitstring
        channel: 'A' or 'B' (None means the configured default)
        seq_id: Sequence id for multipart messages
        talker: 'AIVDM' or 'AIVDO'

    Returns:
        Ordered list of checksummed sentence lines
    """
    if channel is None:
        channel = config.DEFAULT_CHANNEL
    if not isinstance(channel, str) or len(channel) != 1 or channel not in "AB":
        raise InvalidChannelError(channel)
    if talker not in TALKERS:
        raise EncodeError(f"Unknown talker {talker!r}, expected one of {TALKERS}")

    payload = bits_to_payload(pad_to_sixbit(bits))
    chunks = [payload[i:i + MAX_PAYLOAD_CHARS]
              for i in range(0, len(payload), MAX_PAYLOAD_CHARS)] or [""]
    total = len(chunks)

    if total == 1:
        sid = ""
    else:
        if seq_id is None:
            seq_id = random.randint(1, 9)
        sid = str(seq_id)

    sentences = []
    for index, chunk in enumerate(chunks, start=1):
        fill = (8 - (len(chunk) * 6) % 8) % 8
        sentences.append(format_sentence(talker, total, index, sid, channel, chunk, fill))
    return sentences
