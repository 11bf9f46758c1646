"""
Main entry point for FRM Workbench.

This module provides the main() function behind the `frm-workbench` command:

    frm-workbench analyze DUMP [--json]
    frm-workbench convert DUMP [-o OUT] [--config-format raw|json]
    frm-workbench report DUMP [--hex-sector N]
    frm-workbench tui DUMP
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from frm_restore import __version__
from frm_restore.analysis.analyzer import AnalysisReport, analyze
from frm_restore.analysis.config_flags import ConfigBlockFormat
from frm_restore.analysis.reporter import (
    generate_complete_report,
    generate_conversion_report,
    sector_hex_dump,
)
from frm_restore.analysis.schema import to_json
from frm_restore.core.layout import TOTAL_SECTORS
from frm_restore.core.settings import Settings
from frm_restore.imaging.image_formats import ImageError, read_metadata
from frm_restore.imaging.image_io import (
    default_output_path,
    load_source_image,
    save_target_image,
)
from frm_restore.imaging.transcoder import convert
from frm_restore.utils.error_handler import (
    EXIT_FAILURE,
    EXIT_INVALID_INPUT,
    EXIT_SUCCESS,
    get_error_severity,
    get_exit_code,
    handle_image_error,
)
from frm_restore.utils.logging import (
    log_error,
    log_image_info,
    log_operation,
    log_performance,
    setup_logging,
)

console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


# =============================================================================
# Output Helpers
# =============================================================================


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"✓ {message}", style="bold green")


def print_error(message: str) -> None:
    """Print error message in red."""
    error_console.print(f"✗ {message}", style="bold red")


def _value(value) -> str:
    return "[dim]-[/dim]" if value is None else str(value)


def build_analysis_table(report: AnalysisReport) -> Table:
    """Build the rich summary table for an analysis."""
    table = Table(title="D-Flash Analysis", box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    variant = report.variant
    if report.variant_is_fallback:
        variant += " [dim](no marker found)[/dim]"

    table.add_row("FRM variant", variant)
    table.add_row(
        "Recoverable sectors",
        f"{report.recoverable_sectors}/{report.total_sectors}"
    )
    table.add_row("Corruption level", f"{report.corruption_level}%")
    table.add_row("VIN", _value(report.vehicle.identifier))
    table.add_row("Model", _value(report.vehicle.category))
    table.add_row("Year", _value(report.vehicle.production_year))
    table.add_row("Mileage", _value(report.vehicle.odometer))
    if report.odometer_big_endian is not None:
        table.add_row("Mileage (big-endian)", f"{report.odometer_big_endian} [yellow](unverified)[/yellow]")

    config = report.config
    table.add_row("Xenon headlights", str(config.xenon_headlights))
    table.add_row("Angel eyes", str(config.angel_eyes))
    table.add_row("Auto wipers", str(config.auto_wipers))
    table.add_row("Comfort access", str(config.comfort_access))
    table.add_row("Follow-me-home", str(config.follow_me_home))
    return table


# =============================================================================
# Commands
# =============================================================================


def _load(path: str) -> bytes:
    data = load_source_image(path)
    metadata = read_metadata(data, Path(path).name)
    log_image_info(path, metadata.size, metadata.kind.name)
    if not metadata.is_source:
        logger.warning("%s is %d bytes, not a D-Flash dump", path, metadata.size)
    return data


def cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze a dump and print the summary (or JSON)."""
    data = _load(args.dump)

    start_time = time.monotonic()
    report = analyze(data, filepath=args.dump)
    log_performance("analyze", time.monotonic() - start_time, sectors=report.total_sectors)

    if args.json:
        console.print_json(to_json(report))
    else:
        console.print(build_analysis_table(report))
    return EXIT_SUCCESS


def cmd_convert(args: argparse.Namespace) -> int:
    """Convert a dump and write the EEPROM image."""
    settings = Settings.instance()
    data = _load(args.dump)

    format_name = args.config_format or settings.conversion.config_block_format
    try:
        config_format = ConfigBlockFormat(format_name)
    except ValueError:
        print_error(f"Unknown configuration block format: {format_name}")
        return EXIT_INVALID_INPUT

    result = convert(data, config_format)
    if not result.success:
        log_error("convert", result.error_code, result.error)
        print_error(result.error)
        return EXIT_INVALID_INPUT

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = default_output_path(args.dump, settings.export.get_output_directory())
    save_target_image(output_path, result.eeprom_data)
    log_operation("convert", f"{args.dump} -> {output_path}")

    console.print(generate_conversion_report(result, str(output_path)))
    print_success(f"EEPROM image written to {output_path}")
    return EXIT_SUCCESS


def cmd_report(args: argparse.Namespace) -> int:
    """Print the full text report, optionally with a sector hex dump."""
    data = _load(args.dump)
    report = analyze(data, filepath=args.dump)

    console.print(generate_complete_report(report), markup=False, highlight=False)
    if args.hex_sector is not None:
        if not 0 <= args.hex_sector < TOTAL_SECTORS:
            print_error(f"Sector must be between 0 and {TOTAL_SECTORS - 1}")
            return EXIT_INVALID_INPUT
        console.print()
        console.print(sector_hex_dump(data, args.hex_sector), markup=False, highlight=False)
    return EXIT_SUCCESS


def cmd_tui(args: argparse.Namespace) -> int:
    """Open the interactive report viewer."""
    data = _load(args.dump)
    report = analyze(data, filepath=args.dump)

    # Textual is only loaded for the viewer
    from frm_restore.tui import FrmWorkbenchApp

    FrmWorkbenchApp(report, source_name=Path(args.dump).name).run()
    return EXIT_SUCCESS


# =============================================================================
# Argument Parsing
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="frm-workbench",
        description="Analyze BMW FRM D-Flash dumps and rebuild EEPROM images",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-file", default="frm_workbench.log",
                        help="Log file path (default: frm_workbench.log)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Show debug messages on the console")

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a D-Flash dump")
    analyze_parser.add_argument("dump", help="D-Flash dump (.bin, .hex, .eep)")
    analyze_parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    analyze_parser.set_defaults(func=cmd_analyze)

    convert_parser = subparsers.add_parser("convert", help="Convert a D-Flash dump to EEPROM")
    convert_parser.add_argument("dump", help="D-Flash dump (.bin, .hex, .eep)")
    convert_parser.add_argument("-o", "--output", help="Output file (default: <dump>_repaired.bin)")
    convert_parser.add_argument(
        "--config-format",
        choices=[fmt.value for fmt in ConfigBlockFormat],
        help="Configuration block format (default: from settings)",
    )
    convert_parser.set_defaults(func=cmd_convert)

    report_parser = subparsers.add_parser("report", help="Print a full text report")
    report_parser.add_argument("dump", help="D-Flash dump (.bin, .hex, .eep)")
    report_parser.add_argument("--hex-sector", type=int, metavar="N",
                               help="Append a hex dump of sector N")
    report_parser.set_defaults(func=cmd_report)

    tui_parser = subparsers.add_parser("tui", help="Open the interactive report viewer")
    tui_parser.add_argument("dump", help="D-Flash dump (.bin, .hex, .eep)")
    tui_parser.set_defaults(func=cmd_tui)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for FRM Workbench.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, console_level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return args.func(args)
    except ImageError as e:
        level = logging.CRITICAL if get_error_severity(e) == "critical" else logging.ERROR
        log_error(args.command, type(e).__name__, str(e), level=level)
        print_error(handle_image_error(e, args.command))
        return get_exit_code(e)
    except KeyboardInterrupt:
        print_error("Interrupted")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
