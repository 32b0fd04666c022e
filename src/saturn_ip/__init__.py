"""
Saturn IP - Sega Saturn System ID Reader
========================================

This package reads the System ID header found at the start of every Sega
Saturn disc, checks it against the format rules and reports its contents.

The System ID is a fixed 256-byte record that follows the 16-byte
preamble (sync pattern, MSF address, mode) of the first raw sector. It
identifies the disc's hardware target, maker, product number and
version, release date, disc number, regions and supported peripherals,
and carries the size of the initial program (IP).

Main Components
---------------
- **header**: Layout, decoding, code tables, validation and reading
- **config**: Reader settings from defaults and environment
- **cli**: The satip command-line tool

Quick Start
-----------
Decode and validate an image:
    >>> from saturn_ip import load_system_id, validate
    >>> record = load_system_id("game.bin")
    >>> report = validate(record)
    >>> report.regions
    ['Japan']

Check without exceptions:
    >>> from saturn_ip import check
    >>> result = check(record)
    >>> if not result.is_valid:
    ...     print(f"{result.failed_field}: {result.message}")

Or use the command-line tool:
    $ satip show game.bin
    $ satip validate *.bin

Reference Documentation
-----------------------
- Sega Saturn disc format: "Disc Format Standards Specification Sheet"
  (Sega of America, ST-040)
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from saturn_ip.errors import (
    SaturnIPError,
    InputTooSmallError,
    FieldValidationError,
    UnrecognizedCodeError,
)

from saturn_ip.header import (
    FIELD_LAYOUT,
    SYSTEM_ID_SIZE,
    PREAMBLE_SIZE,
    FieldSpec,
    RegionCode,
    PeripheralCode,
    SystemIdRecord,
    SystemIdReport,
    SystemIdValidator,
    ValidationResult,
    ReportLine,
    decode,
    validate,
    check,
    read_system_id,
    load_system_id,
)

from saturn_ip.config import ReaderConfig

__all__ = [
    # Version info
    "__version__",
    # Exception hierarchy
    "SaturnIPError",
    "InputTooSmallError",
    "FieldValidationError",
    "UnrecognizedCodeError",
    # Header handling
    "FIELD_LAYOUT",
    "SYSTEM_ID_SIZE",
    "PREAMBLE_SIZE",
    "FieldSpec",
    "RegionCode",
    "PeripheralCode",
    "SystemIdRecord",
    "SystemIdReport",
    "SystemIdValidator",
    "ValidationResult",
    "ReportLine",
    "decode",
    "validate",
    "check",
    "read_system_id",
    "load_system_id",
    # Configuration
    "ReaderConfig",
]
