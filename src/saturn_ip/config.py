"""
Reader Configuration
====================

Settings for reading and reporting System IDs. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)

There is no configuration file.
"""

from dataclasses import dataclass
from typing import Optional
import os

from saturn_ip.header.reader import PREAMBLE_SIZE

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(value: str) -> Optional[bool]:
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


@dataclass
class ReaderConfig:
    """
    Configuration for reading a disc image.

    Attributes:
        preamble_size: Bytes skipped before the System ID (default: 16,
            use 0 for images with 2048-byte sectors)
        extended: Also report the IP size (default: False)
        verbose: Enable debug logging (default: False)
    """
    preamble_size: int = PREAMBLE_SIZE
    extended: bool = False
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        """
        Create ReaderConfig from environment variables.

        Environment variables (all optional):
            SATIP_PREAMBLE_SIZE: Bytes to skip (non-negative integer)
            SATIP_EXTENDED: Report the IP size (1/0, true/false, yes/no)
            SATIP_VERBOSE: Debug logging (1/0, true/false, yes/no)

        Invalid values are ignored.
        """
        config = cls()

        if preamble := os.environ.get("SATIP_PREAMBLE_SIZE"):
            try:
                size = int(preamble, 0)
            except ValueError:
                size = -1
            if size >= 0:
                config.preamble_size = size

        if extended := os.environ.get("SATIP_EXTENDED"):
            parsed = _parse_bool(extended)
            if parsed is not None:
                config.extended = parsed

        if verbose := os.environ.get("SATIP_VERBOSE"):
            parsed = _parse_bool(verbose)
            if parsed is not None:
                config.verbose = parsed

        return config
