"""
Disc Image Reader
=================

Reads the System ID out of a raw Saturn disc image.

A raw (2352-byte sector) image starts with a 16-byte preamble before the
System ID:

    |0|1|2|3|4|5|6|7|8|9|A|B|C|D|E|F|
    ---------------------------------
    |    synchronization    |M S F|M|
    ---------------------------------

    MSF: Minute, Second, Frame (1 byte each, BCD)
    M:   Sector mode

The preamble is skipped, then exactly 256 bytes are read. Images cut to
2048-byte sectors have no preamble; pass preamble_size=0 for those.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union
import logging

from saturn_ip.errors import InputTooSmallError
from saturn_ip.header.layout import SYSTEM_ID_SIZE
from saturn_ip.header.records import SystemIdRecord, decode

logger = logging.getLogger(__name__)

PREAMBLE_SIZE = 16

SYNC_PATTERN = b"\x00" + b"\xff" * 10 + b"\x00"

Source = Union[str, Path, BinaryIO]


# =============================================================================
# Preamble
# =============================================================================

@dataclass(frozen=True)
class Preamble:
    """
    The 16 bytes in front of the System ID.

    Informational only; the validator never looks at it.
    """
    sync: bytes
    minute: int
    second: int
    frame: int
    mode: int

    @property
    def has_sync_pattern(self) -> bool:
        return self.sync == SYNC_PATTERN

    @property
    def msf(self) -> str:
        """Address as MM:SS:FF (BCD digits shown as hex)."""
        return f"{self.minute:02X}:{self.second:02X}:{self.frame:02X}"


def describe_preamble(data: bytes) -> Preamble:
    """
    Split a raw sector preamble into its parts.

    Raises:
        InputTooSmallError: If fewer than 16 bytes are given
    """
    if len(data) < PREAMBLE_SIZE:
        raise InputTooSmallError(len(data), PREAMBLE_SIZE)
    return Preamble(
        sync=bytes(data[0:12]),
        minute=data[12],
        second=data[13],
        frame=data[14],
        mode=data[15],
    )


# =============================================================================
# System ID Reading
# =============================================================================

def _read_stream(stream: BinaryIO, preamble_size: int) -> bytes:
    skipped = stream.read(preamble_size)
    if len(skipped) < preamble_size:
        raise InputTooSmallError(0, SYSTEM_ID_SIZE)

    data = stream.read(SYSTEM_ID_SIZE)
    if len(data) < SYSTEM_ID_SIZE:
        raise InputTooSmallError(len(data), SYSTEM_ID_SIZE)
    return data


def read_system_id(source: Source, preamble_size: int = PREAMBLE_SIZE) -> bytes:
    """
    Read the 256 System ID bytes from an image file or binary stream.

    A stream is consumed from its current position.

    Args:
        source: Path to the image, or an open binary stream
        preamble_size: Bytes to skip before the System ID

    Returns:
        Exactly 256 bytes

    Raises:
        InputTooSmallError: If fewer than 256 bytes follow the preamble
        FileNotFoundError: If the path does not exist
    """
    if preamble_size < 0:
        raise ValueError(f"Invalid preamble size: {preamble_size}")

    if isinstance(source, (str, Path)):
        path = Path(source)
        logger.debug(f"Reading System ID from {path} (skipping {preamble_size} bytes)")
        with path.open("rb") as f:
            return _read_stream(f, preamble_size)

    return _read_stream(source, preamble_size)


def read_preamble(source: Source) -> Preamble:
    """Read and split the preamble of an image file or stream."""
    if isinstance(source, (str, Path)):
        with Path(source).open("rb") as f:
            return describe_preamble(f.read(PREAMBLE_SIZE))
    return describe_preamble(source.read(PREAMBLE_SIZE))


def load_system_id(source: Source, preamble_size: int = PREAMBLE_SIZE) -> SystemIdRecord:
    """Read and decode the System ID of an image."""
    return decode(read_system_id(source, preamble_size))
