"""
Align whitespace-separated, quote-aware words into columns.
"""

from .columns import Alignment, SparseColumnVector
from .errors import AlignError, ConfigError, InputDecodeError, PositioningError
from .formatter import AlignConfig, ColumnFormatter, format_line
from .measure import WidthMode, byte_width, display_width, measure_columns
from .positioning import Positioning, parse_positioning
from .reader import read_lines
from .words import Words, leading_indent, split_words

__version__ = "0.1.0"

__all__ = [
    "AlignConfig",
    "AlignError",
    "Alignment",
    "ColumnFormatter",
    "ConfigError",
    "InputDecodeError",
    "Positioning",
    "PositioningError",
    "SparseColumnVector",
    "WidthMode",
    "Words",
    "byte_width",
    "display_width",
    "format_line",
    "leading_indent",
    "measure_columns",
    "parse_positioning",
    "read_lines",
    "split_words",
]
