"""
Saturn System ID Handling
=========================

Decoding, validation and reading of the 256-byte Sega Saturn System ID.

This module provides:
- **decode / SystemIdRecord**: Fixed-offset layout interpretation
- **validate / check / SystemIdValidator**: Ordered field checks and report
- **RegionCode / PeripheralCode**: Area and peripheral code tables
- **read_system_id / load_system_id**: Reading from disc images

Quick Start
-----------
    >>> from saturn_ip.header import load_system_id, validate
    >>> record = load_system_id("game.bin")
    >>> report = validate(record, extended=True)
    >>> print(report.render())
"""

# =============================================================================
# Public API Exports
# =============================================================================

from saturn_ip.header.layout import (
    FIELD_LAYOUT,
    SYSTEM_ID_SIZE,
    STORED_BYTEORDER,
    FieldKind,
    FieldSpec,
    get_field,
    swap_bytes,
    to_host_order,
    from_host_order,
)
from saturn_ip.header.codes import (
    RegionCode,
    PeripheralCode,
    expand_codes,
    format_labels,
)
from saturn_ip.header.records import (
    SystemIdRecord,
    decode,
)
from saturn_ip.header.validator import (
    HARDWARE_IDENTIFIER,
    FIRST_PARTY_MAKER,
    THIRD_PARTY_PREFIX,
    ReportLine,
    SystemIdReport,
    SystemIdValidator,
    ValidationResult,
    check_version_format,
    check_date_format,
    parse_device_information,
    validate,
    check,
)
from saturn_ip.header.reader import (
    PREAMBLE_SIZE,
    SYNC_PATTERN,
    Preamble,
    describe_preamble,
    read_preamble,
    read_system_id,
    load_system_id,
)

__all__ = [
    # Layout
    "FIELD_LAYOUT",
    "SYSTEM_ID_SIZE",
    "STORED_BYTEORDER",
    "FieldKind",
    "FieldSpec",
    "get_field",
    "swap_bytes",
    "to_host_order",
    "from_host_order",
    # Code tables
    "RegionCode",
    "PeripheralCode",
    "expand_codes",
    "format_labels",
    # Record
    "SystemIdRecord",
    "decode",
    # Validator
    "HARDWARE_IDENTIFIER",
    "FIRST_PARTY_MAKER",
    "THIRD_PARTY_PREFIX",
    "ReportLine",
    "SystemIdReport",
    "SystemIdValidator",
    "ValidationResult",
    "check_version_format",
    "check_date_format",
    "parse_device_information",
    "validate",
    "check",
    # Reader
    "PREAMBLE_SIZE",
    "SYNC_PATTERN",
    "Preamble",
    "describe_preamble",
    "read_preamble",
    "read_system_id",
    "load_system_id",
]
