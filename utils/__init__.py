"""
Utility modules for Grid Layout Service
"""

from .grid_utils import (
    cell_geometry,
    compute_cell_height,
    compute_cell_width,
    fits_container,
    insets_for,
    inter_item_spacing_for,
    line_spacing_for,
)

__all__ = [
    "cell_geometry",
    "compute_cell_height",
    "compute_cell_width",
    "fits_container",
    "insets_for",
    "inter_item_spacing_for",
    "line_spacing_for",
]
