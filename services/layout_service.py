"""
Grid Layout Service

Runs a layout pass over a sequence of cells: asks the geometry utilities for
each cell's size, places cells row by row, and picks a colour per cell.

Placement (flow layout, vertical scrolling):
    - column_count cells per row, left to right
    - x = left_inset + column * (cell_width + inter_item_spacing)
    - first row starts at the top inset, rows separated by line spacing
    - a row is as tall as its tallest cell; shorter cells are centred in it
"""

import logging
from typing import List, Optional

from config import settings
from models import GeometricParams, GridLayout, LaidOutCell
from services.palette_service import CellPalette, build_palette, hex_for
from utils.grid_utils import (
    compute_cell_height,
    compute_cell_width,
    fits_container,
    insets_for,
    inter_item_spacing_for,
    line_spacing_for,
)

logger = logging.getLogger(__name__)


class GridLayoutService:
    """
    Lays out a fixed-column grid of coloured cells.

    Features:
        - Deterministic geometry from the grid utilities
        - Colours from an injected palette
        - Degenerate containers reported through GridLayout.fits
    """

    def __init__(self, palette: Optional[CellPalette] = None):
        self.palette = palette if palette is not None else build_palette()

    def layout(
        self,
        container_width: float,
        params: GeometricParams,
        item_count: int = settings.DEFAULT_ITEM_COUNT
    ) -> GridLayout:
        """
        Run one layout pass.

        Args:
            container_width: Width of the viewport hosting the grid
            params: Grid parameters
            item_count: Number of cells to lay out

        Returns:
            GridLayout with placed cells, or with no cells and fits=False
            when the container is too narrow
        """
        insets = insets_for(params)
        line_spacing = line_spacing_for(params)
        inter_item_spacing = inter_item_spacing_for(params)
        cell_width = compute_cell_width(container_width, params)
        fits = fits_container(container_width, params)

        logger.debug(
            f"Layout pass: container={container_width}, columns={params.column_count}, "
            f"padding={params.derived_padding}, cell_width={cell_width}"
        )

        layout = GridLayout(
            container_width=container_width,
            params=params,
            insets=insets,
            line_spacing=line_spacing,
            inter_item_spacing=inter_item_spacing,
            cell_width=cell_width,
            fits=fits
        )

        if not fits:
            logger.warning(
                f"Container width {container_width} leaves no room for "
                f"{params.column_count} columns (padding {params.derived_padding})"
            )
            return layout

        cells: List[LaidOutCell] = []
        row_top = insets.top
        content_bottom = insets.top

        for row_start in range(0, item_count, params.column_count):
            row_indices = range(row_start, min(row_start + params.column_count, item_count))
            heights = [compute_cell_height(cell_width, index) for index in row_indices]
            row_height = max(heights)
            row = row_start // params.column_count

            for column, (index, height) in enumerate(zip(row_indices, heights)):
                color = self.palette.pick()
                cells.append(LaidOutCell(
                    index=index,
                    row=row,
                    column=column,
                    x=insets.left + column * (cell_width + inter_item_spacing),
                    y=row_top + (row_height - height) / 2,
                    width=cell_width,
                    height=height,
                    color=color,
                    color_hex=hex_for(color)
                ))

            content_bottom = row_top + row_height
            row_top = content_bottom + line_spacing

        layout.cells = cells
        layout.content_height = content_bottom + insets.bottom if cells else 0.0

        logger.debug(f"Placed {len(cells)} cells, content height {layout.content_height}")
        return layout


# Singleton instance for use across routers
layout_service = GridLayoutService()
