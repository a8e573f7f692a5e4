"""
Display module for Gomoku.
Handles layout, click mapping, board drawing and status text.
"""

from .config import DisplayConfig
from .layout import Layout, compute_layout, default_layout
from .input_mapper import InputMapper
from .renderer import BoardRenderer, star_points
from .status_sink import StatusSink, ConsoleStatusSink, format_status
