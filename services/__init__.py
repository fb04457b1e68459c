"""
Services for Grid Layout Service

GridLayoutService runs layout passes; CellPalette picks cell colours.
"""

from .palette_service import CellPalette, build_palette
from .layout_service import GridLayoutService, layout_service

__all__ = [
    "CellPalette",
    "build_palette",
    "GridLayoutService",
    "layout_service"
]
