"""
satip - Saturn System ID Command-Line Interface
================================================

This module implements the command-line interface for inspecting the
System ID header of Sega Saturn disc images.

Commands
--------
- **show**: Validate one image and print its System ID, field by field
- **validate**: Check one or more images and print PASSED/FAILED for each
- **dump**: Print the raw decoded fields without validating them

Usage Examples
--------------
Show the System ID of a raw image:
    $ satip show game.bin

Include the IP size:
    $ satip show --extended game.bin

Image with 2048-byte sectors (no preamble):
    $ satip show --preamble-size 0 game.iso

Check a whole collection:
    $ satip validate *.bin

Environment variables SATIP_PREAMBLE_SIZE, SATIP_EXTENDED and SATIP_VERBOSE
set the defaults for the matching options.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from saturn_ip import __version__
from saturn_ip.cli.errors import ExitCode, handle_cli_exception
from saturn_ip.config import ReaderConfig
from saturn_ip.errors import SaturnIPError
from saturn_ip.header import (
    FIELD_LAYOUT,
    FieldKind,
    SystemIdValidator,
    load_system_id,
    read_preamble,
)


# =============================================================================
# Helpers
# =============================================================================

def _build_config(
    preamble_size: Optional[int],
    extended: bool,
    verbose: bool,
) -> ReaderConfig:
    """Environment defaults, overridden by explicit command-line options."""
    config = ReaderConfig.from_env()
    if preamble_size is not None:
        config.preamble_size = preamble_size
    if extended:
        config.extended = True
    if verbose:
        config.verbose = True
    return config


def _setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


_preamble_option = click.option(
    "-p", "--preamble-size",
    type=click.IntRange(min=0),
    default=None,
    help="Bytes to skip before the System ID (default: 16)",
)

_verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.version_option(__version__, "--version", "-V", prog_name="satip")
def main() -> None:
    """
    Sega Saturn System ID inspector.

    Reads the 256-byte System ID that follows the 16-byte sector preamble
    of a Saturn disc image, validates it and prints its contents.

    \b
    Commands:
      show      Validate and print one System ID
      validate  Check several images
      dump      Print raw decoded fields
    """
    pass


# =============================================================================
# Show Command
# =============================================================================

@main.command("show")
@click.argument(
    "image",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-x", "--extended",
    is_flag=True,
    help="Also report the IP size",
)
@_preamble_option
@_verbose_option
def cmd_show(
    image: Path,
    extended: bool,
    preamble_size: Optional[int],
    verbose: bool,
) -> None:
    """
    Validate IMAGE and print its System ID.

    Each field is printed as soon as it passes its check. The first
    invalid field stops the run with a diagnostic and a non-zero exit
    status.

    \b
    Examples:
      satip show game.bin
      satip show -x game.bin
    """
    config = _build_config(preamble_size, extended, verbose)
    _setup_logging(config.verbose)

    try:
        record = load_system_id(image, config.preamble_size)
        validator = SystemIdValidator(
            extended=config.extended,
            on_field=lambda line: click.echo(str(line)),
        )
        report = validator.validate(record)

        if config.verbose:
            click.echo(f"Product number: {report.product_number}")
            click.echo(f"Title: {report.game_title}")
    except Exception as e:
        handle_cli_exception(e, config.verbose)


# =============================================================================
# Validate Command
# =============================================================================

@main.command("validate")
@click.argument(
    "images",
    nargs=-1,
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
)
@_preamble_option
@_verbose_option
def cmd_validate(
    images: tuple[Path, ...],
    preamble_size: Optional[int],
    verbose: bool,
) -> None:
    """
    Check the System ID of one or more images.

    Prints one PASSED or FAILED line per image and exits with status 1 if
    any image failed.

    \b
    Example:
      satip validate disc1.bin disc2.bin
    """
    config = _build_config(preamble_size, False, verbose)
    _setup_logging(config.verbose)
    validator = SystemIdValidator()
    failures = 0

    for image in images:
        try:
            result = validator.check(load_system_id(image, config.preamble_size))
        except (SaturnIPError, OSError) as e:
            click.echo(f"{image}: FAILED ({e})")
            failures += 1
            continue

        if result.is_valid:
            report = result.report
            click.echo(f"{image}: PASSED")
            if config.verbose:
                click.echo(f"  {report.product_number} {report.product_version} "
                           f"{report.game_title}")
        else:
            click.echo(f"{image}: FAILED ({result.failed_field}: {result.message})")
            failures += 1

    if failures:
        click.echo(f"\n{failures} of {len(images)} images failed validation")
        raise SystemExit(ExitCode.VALIDATION_ERROR)


# =============================================================================
# Dump Command
# =============================================================================

@main.command("dump")
@click.argument(
    "image",
    type=click.Path(dir_okay=False, path_type=Path),
)
@_preamble_option
@_verbose_option
def cmd_dump(image: Path, preamble_size: Optional[int], verbose: bool) -> None:
    """
    Print the decoded fields of IMAGE without validating them.

    \b
    Example:
      satip dump game.bin
    """
    config = _build_config(preamble_size, False, verbose)
    _setup_logging(config.verbose)

    try:
        if config.preamble_size:
            preamble = read_preamble(image)
            sync = "OK" if preamble.has_sync_pattern else "missing"
            click.echo(f"Preamble:    sync {sync}, MSF {preamble.msf}, mode {preamble.mode}")

        record = load_system_id(image, config.preamble_size)

        click.echo("Offset  Size  Field                    Value")
        click.echo("------  ----  -----------------------  -----")
        for spec in FIELD_LAYOUT:
            value = getattr(record, spec.name)
            if spec.kind is FieldKind.INT32:
                shown = f"{value} (0x{value & 0xFFFFFFFF:08X})"
            elif spec.kind is FieldKind.RAW:
                shown = value.hex(" ")
            else:
                shown = repr(value.decode("latin-1"))
            click.echo(f"0x{spec.offset:02X}    {spec.width:4d}  {spec.name:<23}  {shown}")
    except Exception as e:
        handle_cli_exception(e, config.verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
