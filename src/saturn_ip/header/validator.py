"""
System ID Field Validator
=========================

This module checks a decoded SystemIdRecord against the format rules of
the Saturn System ID and builds a human-readable report.

Check Order
-----------
Checks always run in this order and stop at the first failure:

1. Hardware identifier   exactly "SEGA SEGASATURN "
2. Maker ID              "SEGA ENTERPRISES", or any "SEGA TP " third party
3. Product version       "V" digit "." digit digit digit (e.g. "V1.003")
4. Release date          eight ASCII digits (YYYYMMDD)
5. Device information    "CD-<n>/<m>" with m >= n
6. Area symbols          region codes or spaces
7. Compatible peripherals  peripheral codes or spaces
8. IP size               extended mode only, reported but not range-checked

A failure raises FieldValidationError naming the field; nothing after it
is checked or reported.

Reporting
---------
Each passing check produces one ReportLine. Lines are collected into the
returned SystemIdReport and, when an on_field callback is given, handed to
it as soon as the check passes, so a caller can print them interleaved
with the checks exactly as the lines become available:

    >>> validate(record, on_field=lambda line: print(line))
    Hardware identifier: SEGA SEGASATURN
    Maker ID: SEGA ENTERPRISES
    ...
"""

from dataclasses import dataclass, field
from typing import Callable, Optional
import logging
import re

from saturn_ip.errors import FieldValidationError
from saturn_ip.header.codes import (
    PeripheralCode,
    RegionCode,
    expand_codes,
    format_labels,
)
from saturn_ip.header.records import SystemIdRecord

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

HARDWARE_IDENTIFIER = b"SEGA SEGASATURN "
FIRST_PARTY_MAKER = b"SEGA ENTERPRISES"
THIRD_PARTY_PREFIX = b"SEGA TP "

_DIGITS = b"0123456789"

# Same grammar as sscanf("CD-%d/%d"): whitespace and a sign may precede
# each number, anything after the second number is ignored.
_DEVICE_INFO_RE = re.compile(rb"CD-\s*([+-]?[0-9]+)/\s*([+-]?[0-9]+)")


# =============================================================================
# Report Types
# =============================================================================

@dataclass(frozen=True)
class ReportLine:
    """
    One line of the human-readable report.

    Attributes:
        field: Name of the record field this line reports
        label: Display label (e.g. "Maker ID")
        value: Display value
        separator: Text between label and value
    """
    field: str
    label: str
    value: str
    separator: str = ": "

    def __str__(self) -> str:
        return f"{self.label}{self.separator}{self.value}"


@dataclass
class SystemIdReport:
    """
    Display values of a System ID that passed validation.

    ip_size is only set in extended mode.
    """
    hardware_identifier: str
    maker_id: str
    product_number: str
    product_version: str
    release_year: str
    release_month: str
    release_day: str
    disc_number: int
    disc_total: int
    regions: list[str]
    peripherals: list[str]
    game_title: str
    ip_size: Optional[int] = None
    lines: list[ReportLine] = field(default_factory=list, repr=False)

    @property
    def release_date(self) -> str:
        return f"{self.release_year}/{self.release_month}/{self.release_day}"

    @property
    def is_third_party(self) -> bool:
        return self.maker_id.startswith(THIRD_PARTY_PREFIX.decode("ascii"))

    def render(self) -> str:
        """Render all report lines, one per line."""
        return "\n".join(str(line) for line in self.lines)


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of check(): either a report or the first failure.

    Attributes:
        report: The report, when validation passed
        error: The failure, when validation failed
    """
    report: Optional[SystemIdReport] = None
    error: Optional[FieldValidationError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def failed_field(self) -> Optional[str]:
        return self.error.field if self.error else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None


# =============================================================================
# Field Checks
# =============================================================================

def check_version_format(version: bytes) -> bool:
    """Check the product version grammar, e.g. b"V1.000"."""
    return (
        len(version) == 6
        and version[0:1] == b"V"
        and version[1] in _DIGITS
        and version[2:3] == b"."
        and all(b in _DIGITS for b in version[3:6])
    )


def check_date_format(date: bytes) -> bool:
    """Check that a release date is eight ASCII digits."""
    return len(date) == 8 and all(b in _DIGITS for b in date)


def parse_device_information(info: bytes) -> Optional[tuple[int, int]]:
    """
    Scan device information as "CD-<n>/<m>".

    Returns:
        (disc number, disc total), or None if both numbers cannot be read
    """
    match = _DEVICE_INFO_RE.match(info)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def _c_string(data: bytes) -> str:
    """Printable form of a fixed-width field, cut at the first NUL."""
    return data.split(b"\x00", 1)[0].decode("latin-1")


# =============================================================================
# Validator
# =============================================================================

class SystemIdValidator:
    """
    Runs the ordered System ID checks.

    Args:
        extended: Also report the IP size
        on_field: Called with each ReportLine as soon as its check passes

    Example:
        >>> validator = SystemIdValidator(extended=True)
        >>> report = validator.validate(record)
        >>> report.regions
        ['Japan', 'America']
    """

    def __init__(
        self,
        extended: bool = False,
        on_field: Optional[Callable[[ReportLine], None]] = None,
    ):
        self.extended = extended
        self.on_field = on_field

    def validate(self, record: SystemIdRecord) -> SystemIdReport:
        """
        Validate a record, stopping at the first invalid field.

        Returns:
            The report for a valid record

        Raises:
            FieldValidationError: For the first field that fails
        """
        lines: list[ReportLine] = []

        def emit(field_name: str, label: str, value: str, separator: str = ": ") -> None:
            line = ReportLine(field_name, label, value, separator)
            lines.append(line)
            logger.debug(f"{field_name}: OK")
            if self.on_field is not None:
                self.on_field(line)

        if record.hardware_identifier != HARDWARE_IDENTIFIER:
            self._fail("hardware_identifier", "Invalid hardware identifier")
        emit("hardware_identifier", "Hardware identifier",
             _c_string(record.hardware_identifier))

        if (record.maker_id != FIRST_PARTY_MAKER
                and not record.maker_id.startswith(THIRD_PARTY_PREFIX)):
            self._fail("maker_id", "Invalid maker ID")
        emit("maker_id", "Maker ID", _c_string(record.maker_id))

        if not check_version_format(record.product_version):
            self._fail("product_version", "Invalid product version")
        emit("product_version", "Version", _c_string(record.product_version))

        if not check_date_format(record.release_date):
            self._fail("release_date", "Invalid release date format")
        emit("release_date", "Release date",
             f"{record.release_year}/{record.release_month}/{record.release_day}")

        disc = parse_device_information(record.device_information)
        if disc is None or disc[1] < disc[0]:
            self._fail("device_information", "Invalid device information format")
        disc_number, disc_total = disc
        emit("device_information", "CD", f"{disc_number}/{disc_total}")

        regions = expand_codes(
            record.area_symbols, RegionCode, "area_symbols", "area symbols"
        )
        emit("area_symbols", "Regions", format_labels(regions))

        peripherals = expand_codes(
            record.compatible_peripherals, PeripheralCode,
            "compatible_peripherals", "compatible peripherals",
        )
        emit("compatible_peripherals", "Compatible peripherals",
             format_labels(peripherals))

        ip_size = None
        if self.extended:
            ip_size = record.ip_size
            emit("ip_size", "IP Size", f"{ip_size} ({ip_size & 0xFFFFFFFF:x})", " ")

        return SystemIdReport(
            hardware_identifier=_c_string(record.hardware_identifier),
            maker_id=_c_string(record.maker_id),
            product_number=record.display_product_number,
            product_version=_c_string(record.product_version),
            release_year=record.release_year,
            release_month=record.release_month,
            release_day=record.release_day,
            disc_number=disc_number,
            disc_total=disc_total,
            regions=regions,
            peripherals=peripherals,
            game_title=record.display_title,
            ip_size=ip_size,
            lines=lines,
        )

    def check(self, record: SystemIdRecord) -> ValidationResult:
        """Validate a record, returning the failure instead of raising it."""
        try:
            return ValidationResult(report=self.validate(record))
        except FieldValidationError as e:
            return ValidationResult(error=e)

    @staticmethod
    def _fail(field_name: str, message: str) -> None:
        logger.debug(f"{field_name}: {message}")
        raise FieldValidationError(field_name, message)


def validate(
    record: SystemIdRecord,
    extended: bool = False,
    on_field: Optional[Callable[[ReportLine], None]] = None,
) -> SystemIdReport:
    """Validate a record. See SystemIdValidator.validate()."""
    return SystemIdValidator(extended=extended, on_field=on_field).validate(record)


def check(record: SystemIdRecord, extended: bool = False) -> ValidationResult:
    """Validate a record without raising. See SystemIdValidator.check()."""
    return SystemIdValidator(extended=extended).check(record)
