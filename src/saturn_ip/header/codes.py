"""
Area and Peripheral Code Tables
===============================

The area symbols and compatible peripherals fields are lists of
single-character codes, space padded to their fixed width. Each field has
its own closed code table.

The two tables are independent namespaces: 'E' means "PAL" in the area
symbols but "Analog Controller" in the peripherals, and 'J' and 'T' are
shared the same way.

Area Codes
----------
    J   Japan
    T   Asia
    U   America
    E   PAL

Peripheral Codes
----------------
    J   Control Pad
    A   Analog Controller
    E   Analog Controller (3D pad)
    M   Mouse
    K   Keyboard
    S   Steering Controller
    T   Multitap
"""

from enum import Enum
from typing import Optional, Type, Union
import logging

from saturn_ip.errors import UnrecognizedCodeError

logger = logging.getLogger(__name__)


# =============================================================================
# Code Tables
# =============================================================================

class RegionCode(Enum):
    """Area symbol codes (geographic markets)."""
    JAPAN = "J"
    ASIA = "T"
    AMERICA = "U"
    PAL = "E"

    @classmethod
    def from_char(cls, char: str) -> Optional["RegionCode"]:
        """Look up a code character, returning None if unknown."""
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Human-readable region name."""
        labels = {
            RegionCode.JAPAN: "Japan",
            RegionCode.ASIA: "Asia",
            RegionCode.AMERICA: "America",
            RegionCode.PAL: "PAL",
        }
        return labels[self]


class PeripheralCode(Enum):
    """Compatible peripheral codes (input/output hardware)."""
    CONTROL_PAD = "J"
    ANALOG_CONTROLLER = "A"
    ANALOG_3D_PAD = "E"
    MOUSE = "M"
    KEYBOARD = "K"
    STEERING_CONTROLLER = "S"
    MULTITAP = "T"

    @classmethod
    def from_char(cls, char: str) -> Optional["PeripheralCode"]:
        """Look up a code character, returning None if unknown."""
        try:
            return cls(char)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Human-readable peripheral name."""
        labels = {
            PeripheralCode.CONTROL_PAD: "Control Pad",
            PeripheralCode.ANALOG_CONTROLLER: "Analog Controller",
            PeripheralCode.ANALOG_3D_PAD: "Analog Controller",
            PeripheralCode.MOUSE: "Mouse",
            PeripheralCode.KEYBOARD: "Keyboard",
            PeripheralCode.STEERING_CONTROLLER: "Steering Controller",
            PeripheralCode.MULTITAP: "Multitap",
        }
        return labels[self]


CodeTable = Union[Type[RegionCode], Type[PeripheralCode]]


# =============================================================================
# Expansion
# =============================================================================

def expand_codes(
    data: bytes,
    table: CodeTable,
    field: str,
    description: str,
) -> list[str]:
    """
    Expand a code field into its labels, in left-to-right order.

    Spaces are skipped. Any other byte must be a code of the given table.

    Args:
        data: Raw field bytes
        table: RegionCode or PeripheralCode
        field: Field name used in errors (e.g. "area_symbols")
        description: Field description used in errors (e.g. "area symbols")

    Returns:
        Labels in encounter order; empty for an all-space field

    Raises:
        UnrecognizedCodeError: On the first byte outside the table
    """
    labels = []
    for position, byte in enumerate(data):
        char = chr(byte)
        if char == " ":
            continue

        code = table.from_char(char)
        if code is None:
            logger.debug(f"{field}: unrecognized code {char!r} at position {position}")
            raise UnrecognizedCodeError(field, char, description, position)

        labels.append(code.label)

    return labels


def format_labels(labels: list[str]) -> str:
    """Join labels for display, without a trailing separator."""
    return ", ".join(labels)
