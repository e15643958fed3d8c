"""
Output - Console output formatting.

Provides pretty-printed output with colors and formatting.
"""

import sys
from typing import Optional

from ..application.area import AreaSummary


class Colors:
    """ANSI color codes."""
    
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    
    RED = "\033[31m"
    GREEN = "\033[32m"
    CYAN = "\033[36m"


class Symbols:
    """Unicode symbols for output."""
    
    CHECK = "✓"
    CROSS = "✗"
    DOT = "•"
    INFO = "ℹ"


class Console:
    """Console output helper with colors and formatting."""
    
    def __init__(self, color: bool = True, precision: int = 4):
        self.color = color and sys.stdout.isatty()
        self.precision = precision
    
    def _c(self, text: str, *codes: str) -> str:
        """Apply color codes to text."""
        if not self.color:
            return text
        return "".join(codes) + text + Colors.RESET
    
    def print(self, text: str = "") -> None:
        """Print text."""
        print(text)
    
    def number(self, value: float) -> str:
        """Format a float with the configured precision."""
        return f"{value:.{self.precision}f}"
    
    def success(self, text: str) -> None:
        """Print success message."""
        self.print(self._c(f"  {Symbols.CHECK} {text}", Colors.GREEN))
    
    def error(self, text: str) -> None:
        """Print error message."""
        self.print(self._c(f"  {Symbols.CROSS} {text}", Colors.RED))
    
    def info(self, text: str) -> None:
        """Print info message."""
        self.print(self._c(f"  {Symbols.INFO} {text}", Colors.CYAN))
    
    def detail(self, text: str) -> None:
        """Print detail text (dimmed)."""
        self.print(self._c(f"    {text}", Colors.DIM))
    
    def item(self, text: str, note: Optional[str] = None) -> None:
        """Print a list item."""
        note_str = self._c(f" ({note})", Colors.DIM) if note else ""
        self.print(f"    {Symbols.DOT} {text}{note_str}")
    
    def table(self, headers: list[str], rows: list[list[str]]) -> None:
        """Print a simple table."""
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                if i < len(widths):
                    widths[i] = max(widths[i], len(str(cell)))
        
        header_line = "  " + "  ".join(
            self._c(h.ljust(widths[i]), Colors.BOLD)
            for i, h in enumerate(headers)
        )
        self.print(header_line)
        self.print("  " + "  ".join("-" * w for w in widths))
        
        for row in rows:
            row_line = "  " + "  ".join(
                str(cell).ljust(widths[i]) if i < len(widths) else str(cell)
                for i, cell in enumerate(row)
            )
            self.print(row_line)
    
    def area_summary(self, summary: AreaSummary) -> None:
        """Print per-kind areas and the total."""
        rows = [[kind, self.number(area)] for kind, area in sorted(summary.by_kind.items())]
        self.table(["Kind", "Area"], rows)
        self.print()
        self.success(f"Total area of {summary.count} shape(s): {self.number(summary.total)}")
