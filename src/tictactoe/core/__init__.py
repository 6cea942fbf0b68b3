from .board import Board, create
from .coords import column_label, format_grid_ref, is_valid_grid_ref, parse_grid_ref
from .lines import all_lines
from .rules import has_winner, is_draw, is_line_won, winning_line
from .validator import is_in_bounds, is_occupied, is_valid, rejection_reason

__all__ = [
    "Board",
    "create",
    "column_label",
    "format_grid_ref",
    "is_valid_grid_ref",
    "parse_grid_ref",
    "all_lines",
    "has_winner",
    "is_draw",
    "is_line_won",
    "winning_line",
    "is_in_bounds",
    "is_occupied",
    "is_valid",
    "rejection_reason",
]
