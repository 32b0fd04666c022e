"""
Saturn IP Error Hierarchy
=========================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from SaturnIPError, allowing callers to catch every
header-related error with a single except clause if desired.

Exception Hierarchy
-------------------
SaturnIPError (base)
├── InputTooSmallError - fewer than 256 bytes after the preamble
└── FieldValidationError - first System ID field that failed its check
    └── UnrecognizedCodeError - unknown region/peripheral code character

Every error is terminal for the image being inspected: there is no
partial-success mode. Decoding itself never fails on a full-size buffer,
only the size guard and the validator raise.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class SaturnIPError(Exception):
    """
    Base exception for all Saturn IP errors.

        try:
            report = validate(load_system_id("game.bin"))
        except SaturnIPError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Input Boundary Exceptions
# =============================================================================

class InputTooSmallError(SaturnIPError):
    """
    Not enough bytes to hold a System ID.

    Raised by the reader (and as a guard by the decoder) when fewer than
    256 bytes are available after the 16-byte preamble has been skipped.

    Attributes:
        available: Number of bytes actually available
        required: Number of bytes needed
    """

    def __init__(self, available: int, required: int, message: str = ""):
        self.available = available
        self.required = required
        if not message:
            message = (
                f"File does not respect minimum size of {required:#x} bytes "
                f"(only {available} available after preamble)"
            )
        super().__init__(message)


# =============================================================================
# Validation Exceptions
# =============================================================================

class FieldValidationError(SaturnIPError):
    """
    A System ID field failed its format check.

    The validator stops at the first failing field, so this identifies
    exactly one field.

    Attributes:
        field: Name of the failing field (e.g. "maker_id")
        message: Human-readable diagnostic (e.g. "Invalid maker ID")
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class UnrecognizedCodeError(FieldValidationError):
    """
    A code-table lookup met a character outside its closed set.

    Area symbols and compatible peripherals are lists of single-character
    codes. Any byte that is neither a space nor a known code makes the
    whole field invalid.

    Attributes:
        character: The offending character
        position: Index of the character inside the field (optional)
    """

    def __init__(
        self,
        field: str,
        character: str,
        description: str,
        position: Optional[int] = None,
    ):
        self.character = character
        self.position = position
        message = f"Invalid {description}: unrecognized code {character!r}"
        if position is not None:
            message += f" at position {position}"
        super().__init__(field, message)
