"""
Sector map widget for FRM Workbench.

Displays the 32 D-Flash sectors as a colour-coded grid:
- Data sectors
- Erased (0xFF) sectors
- Zero-filled sectors
"""

from textual.widgets import Static

from frm_restore.analysis.sectors import SectorClass, SectorMap
from frm_restore.core.layout import SECTOR_SIZE
from frm_restore.core.settings import SectorMapColors

SECTORS_PER_ROW = 8


def build_sector_map_markup(
    sector_map: SectorMap,
    colors: SectorMapColors = SectorMapColors(),
    sectors_per_row: int = SECTORS_PER_ROW
) -> str:
    """
    Build the Rich markup for a sector map.

    Args:
        sector_map: Classified sectors
        colors: Colour scheme
        sectors_per_row: Cells per row

    Returns:
        Markup string with one row per 8 KiB of image
    """
    symbols = {
        SectorClass.MEANINGFUL: f"[{colors.meaningful}]█[/{colors.meaningful}]",
        SectorClass.BLANK_ERASED: f"[{colors.blank_erased}]·[/{colors.blank_erased}]",
        SectorClass.BLANK_ZERO: f"[{colors.blank_zero}]0[/{colors.blank_zero}]",
    }

    lines = []
    lines.append("[bold cyan]═══ D-Flash Sectors ═══[/bold cyan]")
    lines.append("")

    for row_start in range(0, sector_map.total_sectors, sectors_per_row):
        row_end = min(row_start + sectors_per_row, sector_map.total_sectors)
        cells = " ".join(symbols[sector_map.get_class(i)] for i in range(row_start, row_end))
        lines.append(f"[dim]0x{row_start * SECTOR_SIZE:04X}[/dim] {cells}")

    meaningful = len(sector_map.meaningful_sectors)
    lines.append("")
    lines.append(
        f"[dim]Sectors: {sector_map.total_sectors} | "
        f"[{colors.meaningful}]Data: {meaningful}[/{colors.meaningful}] | "
        f"Blank: {sector_map.total_sectors - meaningful}[/dim]"
    )
    lines.append("")
    lines.append(
        f"[dim]Legend: {symbols[SectorClass.MEANINGFUL]} Data  "
        f"{symbols[SectorClass.BLANK_ERASED]} Erased  "
        f"{symbols[SectorClass.BLANK_ZERO]} Zero-filled[/dim]"
    )
    return "\n".join(lines)


class SectorMapWidget(Static):
    """Visual sector map widget."""

    DEFAULT_CSS = """
    SectorMapWidget {
        padding: 1;
        border: heavy green;
        background: $surface;
        width: 100%;
        height: auto;
    }
    """

    def __init__(self, sector_map: SectorMap, colors: SectorMapColors = SectorMapColors(), **kwargs):
        """
        Initialize sector map widget.

        Args:
            sector_map: Classified sectors to display
            colors: Colour scheme
        """
        super().__init__(build_sector_map_markup(sector_map, colors), **kwargs)
        self.sector_map = sector_map
        self.colors = colors
