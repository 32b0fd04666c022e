"""
System ID Record
================

This module defines SystemIdRecord, the decoded form of the 256-byte
Saturn System ID, and decode(), which builds one from raw bytes.

Decoding is pure layout interpretation: every field is sliced at its
fixed offset (see layout.FIELD_LAYOUT) and kept as raw bytes, with no
trimming and no validation. Integer fields are converted from the stored
big-endian order to their values. Any buffer of at least 256 bytes
decodes; garbage in gives garbage out, and the validator decides.

Usage
-----
    >>> from saturn_ip.header import decode
    >>> record = decode(data[16:16 + 256])
    >>> record.maker_id
    b'SEGA ENTERPRISES'
    >>> record.release_year
    '1995'
"""

from dataclasses import dataclass, field
import sys

from saturn_ip.errors import InputTooSmallError
from saturn_ip.header.layout import (
    FIELD_LAYOUT,
    SYSTEM_ID_SIZE,
    FieldKind,
    get_field,
    to_host_order,
    from_host_order,
)


@dataclass(frozen=True)
class SystemIdRecord:
    """
    Decoded Saturn System ID.

    Character and reserved fields hold the raw bytes found in the image.
    Integer fields hold their signed values, already in host order.

    The record is immutable: validation and display are read-only passes
    over it.
    """
    hardware_identifier: bytes = b" " * 16
    maker_id: bytes = b" " * 16
    product_number: bytes = b" " * 10
    product_version: bytes = b" " * 6
    release_date: bytes = b" " * 8
    device_information: bytes = b" " * 8
    area_symbols: bytes = b" " * 10
    reserved_spaces: bytes = b" " * 6
    compatible_peripherals: bytes = b" " * 16
    game_title: bytes = b" " * 112
    reserved_1: bytes = field(default=bytes(16), repr=False)
    ip_size: int = 0
    reserved_2: int = field(default=0, repr=False)
    stack_master: int = 0
    stack_slave: int = 0
    first_read_address: int = 0
    first_read_size: int = 0
    reserved_3: bytes = field(default=bytes(8), repr=False)

    def __post_init__(self) -> None:
        """Check that every byte field has its layout width."""
        for spec in FIELD_LAYOUT:
            if spec.kind is FieldKind.INT32:
                continue
            value = getattr(self, spec.name)
            if len(value) != spec.width:
                raise ValueError(
                    f"{spec.name} must be {spec.width} bytes, got {len(value)}"
                )

    # =========================================================================
    # Serialization
    # =========================================================================

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        host_byteorder: str = sys.byteorder,
    ) -> "SystemIdRecord":
        """
        Decode a System ID from the first 256 bytes of a buffer.

        Args:
            data: Buffer starting at the System ID (preamble already skipped)
            host_byteorder: Byte order used when reading integer fields;
                defaults to the running host

        Returns:
            The decoded record

        Raises:
            InputTooSmallError: If the buffer holds fewer than 256 bytes
        """
        if len(data) < SYSTEM_ID_SIZE:
            raise InputTooSmallError(len(data), SYSTEM_ID_SIZE)

        values = {}
        for spec in FIELD_LAYOUT:
            raw = spec.slice(data)
            if spec.kind is FieldKind.INT32:
                values[spec.name] = to_host_order(raw, host_byteorder)
            else:
                values[spec.name] = raw

        return cls(**values)

    def to_bytes(self) -> bytes:
        """Serialize the record back to its 256-byte stored form."""
        result = bytearray()
        for spec in FIELD_LAYOUT:
            value = getattr(self, spec.name)
            if spec.kind is FieldKind.INT32:
                result.extend(from_host_order(value, spec.width))
            else:
                result.extend(value)
        return bytes(result)

    # =========================================================================
    # Field Access
    # =========================================================================

    def text(self, name: str) -> str:
        """Return a character field decoded as latin-1, untrimmed."""
        spec = get_field(name)
        if spec.kind is FieldKind.INT32:
            raise ValueError(f"{name} is not a character field")
        return getattr(self, name).decode("latin-1")

    @property
    def release_year(self) -> str:
        return self.release_date[0:4].decode("latin-1")

    @property
    def release_month(self) -> str:
        return self.release_date[4:6].decode("latin-1")

    @property
    def release_day(self) -> str:
        return self.release_date[6:8].decode("latin-1")

    @property
    def display_title(self) -> str:
        """Game title with trailing padding and NULs removed."""
        return self.text("game_title").rstrip(" \x00")

    @property
    def display_product_number(self) -> str:
        return self.text("product_number").rstrip(" \x00")


def decode(data: bytes, host_byteorder: str = sys.byteorder) -> SystemIdRecord:
    """Decode a 256-byte System ID buffer. See SystemIdRecord.from_bytes()."""
    return SystemIdRecord.from_bytes(data, host_byteorder)
