"""
System ID Field Layout
======================

The Saturn System ID is a packed 256-byte record found right after the
16-byte preamble of the first raw sector of a disc image. Every field
sits at a fixed offset with a fixed width; those offsets are the
compatibility contract of the format.

Layout
------
    Offset  Size    Field
    ------  ----    -----
    0x00    16      Hardware identifier ("SEGA SEGASATURN ")
    0x10    16      Maker ID
    0x20    10      Product number
    0x2A    6       Product version ("V1.000")
    0x30    8       Release date (YYYYMMDD)
    0x38    8       Device information ("CD-1/1")
    0x40    10      Area symbols
    0x4A    6       Reserved (spaces)
    0x50    16      Compatible peripherals
    0x60    112     Game title
    0xD0    16      Reserved
    0xE0    4       IP size
    0xE4    4       Reserved
    0xE8    4       Master SH-2 stack
    0xEC    4       Slave SH-2 stack
    0xF0    4       First read address
    0xF4    4       First read size
    0xF8    8       Reserved

The layout is described as an explicit table rather than a struct format
string so that offsets can be listed, checked and dumped.

Byte Order
----------
Integer fields are written in the Saturn's native big-endian order.
to_host_order() reads them the way a host would read its own memory and
swaps the bytes when the host is not big-endian, which is how the value
ends up in host order regardless of platform.
"""

from dataclasses import dataclass
from enum import Enum
import sys


# =============================================================================
# Constants
# =============================================================================

SYSTEM_ID_SIZE = 0x100

# Byte order the format is always written in
STORED_BYTEORDER = "big"


# =============================================================================
# Field Table
# =============================================================================

class FieldKind(Enum):
    """How the bytes of a field are interpreted."""
    CHARS = "chars"     # Fixed-width, space-padded character data
    INT32 = "int32"     # Signed 32-bit integer in stored byte order
    RAW = "raw"         # Reserved bytes, kept verbatim


@dataclass(frozen=True)
class FieldSpec:
    """
    A single field of the System ID.

    Attributes:
        name: Attribute name on SystemIdRecord
        offset: Byte offset from the start of the System ID
        width: Field width in bytes
        kind: How the bytes are interpreted
    """
    name: str
    offset: int
    width: int
    kind: FieldKind

    @property
    def end(self) -> int:
        """Offset of the first byte after this field."""
        return self.offset + self.width

    def slice(self, data: bytes) -> bytes:
        """Return this field's raw bytes from a System ID buffer."""
        return bytes(data[self.offset:self.end])


FIELD_LAYOUT: tuple[FieldSpec, ...] = (
    FieldSpec("hardware_identifier", 0x00, 16, FieldKind.CHARS),
    FieldSpec("maker_id", 0x10, 16, FieldKind.CHARS),
    FieldSpec("product_number", 0x20, 10, FieldKind.CHARS),
    FieldSpec("product_version", 0x2A, 6, FieldKind.CHARS),
    FieldSpec("release_date", 0x30, 8, FieldKind.CHARS),
    FieldSpec("device_information", 0x38, 8, FieldKind.CHARS),
    FieldSpec("area_symbols", 0x40, 10, FieldKind.CHARS),
    FieldSpec("reserved_spaces", 0x4A, 6, FieldKind.CHARS),
    FieldSpec("compatible_peripherals", 0x50, 16, FieldKind.CHARS),
    FieldSpec("game_title", 0x60, 112, FieldKind.CHARS),
    FieldSpec("reserved_1", 0xD0, 16, FieldKind.RAW),
    FieldSpec("ip_size", 0xE0, 4, FieldKind.INT32),
    FieldSpec("reserved_2", 0xE4, 4, FieldKind.INT32),
    FieldSpec("stack_master", 0xE8, 4, FieldKind.INT32),
    FieldSpec("stack_slave", 0xEC, 4, FieldKind.INT32),
    FieldSpec("first_read_address", 0xF0, 4, FieldKind.INT32),
    FieldSpec("first_read_size", 0xF4, 4, FieldKind.INT32),
    FieldSpec("reserved_3", 0xF8, 8, FieldKind.RAW),
)

FIELDS_BY_NAME: dict[str, FieldSpec] = {spec.name: spec for spec in FIELD_LAYOUT}


def _check_layout() -> None:
    """Fields must be contiguous and cover exactly SYSTEM_ID_SIZE bytes."""
    offset = 0
    for spec in FIELD_LAYOUT:
        if spec.offset != offset:
            raise AssertionError(
                f"field {spec.name} at 0x{spec.offset:02X}, expected 0x{offset:02X}"
            )
        offset = spec.end
    if offset != SYSTEM_ID_SIZE:
        raise AssertionError(f"layout covers {offset} bytes, expected {SYSTEM_ID_SIZE}")


_check_layout()


def get_field(name: str) -> FieldSpec:
    """Look up a field by name, raising KeyError for unknown names."""
    return FIELDS_BY_NAME[name]


# =============================================================================
# Byte Order Helpers
# =============================================================================

def swap_bytes(raw: bytes) -> bytes:
    """Reverse the byte order of an integer's bytes."""
    return bytes(reversed(raw))


def to_host_order(raw: bytes, host_byteorder: str = sys.byteorder) -> int:
    """
    Convert a stored (big-endian) signed integer field to its value.

    The raw bytes are first read as the host would read them from memory.
    When the host byte order differs from STORED_BYTEORDER, the bytes are
    swapped before reading, so the result is the same on every host.

    Args:
        raw: The field bytes exactly as found in the image
        host_byteorder: "little" or "big" (defaults to the running host)

    Returns:
        The signed integer value

    Raises:
        ValueError: If host_byteorder is not "little" or "big"
    """
    if host_byteorder not in ("little", "big"):
        raise ValueError(f"Invalid byte order: {host_byteorder!r}")

    if host_byteorder != STORED_BYTEORDER:
        raw = swap_bytes(raw)
    return int.from_bytes(raw, host_byteorder, signed=True)


def from_host_order(value: int, width: int = 4) -> bytes:
    """Encode a signed integer back into its stored (big-endian) bytes."""
    return value.to_bytes(width, STORED_BYTEORDER, signed=True)
