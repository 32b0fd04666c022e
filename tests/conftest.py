"""
Shared Test Fixtures
====================

Synthetic System ID headers and disc images for the test suite.

make_header() builds a valid 256-byte System ID; keyword arguments replace
individual fields (character fields are padded with spaces to their
width). make_image() prepends a raw sector preamble.
"""

import pytest

from saturn_ip.header.layout import FIELDS_BY_NAME, FieldKind, from_host_order

PREAMBLE = b"\x00" + b"\xff" * 10 + b"\x00" + b"\x00\x02\x00\x01"

VALID_FIELDS = {
    "hardware_identifier": b"SEGA SEGASATURN ",
    "maker_id": b"SEGA ENTERPRISES",
    "product_number": b"GS-9001",
    "product_version": b"V1.000",
    "release_date": b"19941122",
    "device_information": b"CD-1/1",
    "area_symbols": b"JTUE",
    "compatible_peripherals": b"JAEMKST",
    "game_title": b"VIRTUA FIGHTER",
    "ip_size": 2048,
    "stack_master": 0x06002000,
    "stack_slave": 0x06001000,
    "first_read_address": 0x06004000,
    "first_read_size": 0,
}


def make_header(**overrides) -> bytes:
    """Build a 256-byte System ID from the valid defaults plus overrides."""
    fields = dict(VALID_FIELDS, **overrides)
    data = bytearray(b" " * 0xD0 + bytes(0x30))

    for name, value in fields.items():
        spec = FIELDS_BY_NAME[name]
        if spec.kind is FieldKind.INT32:
            raw = from_host_order(value, spec.width)
        else:
            raw = value.ljust(spec.width, b" ")
            assert len(raw) == spec.width, f"{name} too long for its field"
        data[spec.offset:spec.end] = raw

    return bytes(data)


def make_image(header: bytes = None, trailer: int = 2048) -> bytes:
    """Build a raw image: preamble, System ID, then padding."""
    if header is None:
        header = make_header()
    return PREAMBLE + header + bytes(trailer)


@pytest.fixture
def valid_header() -> bytes:
    """A valid System ID (first-party, all regions, all peripherals)."""
    return make_header()


@pytest.fixture
def image_file(tmp_path):
    """A valid raw disc image written to disk."""
    path = tmp_path / "game.bin"
    path.write_bytes(make_image())
    return path


@pytest.fixture
def build_header():
    """Factory fixture for make_header()."""
    return make_header


@pytest.fixture
def build_image():
    """Factory fixture for make_image()."""
    return make_image
