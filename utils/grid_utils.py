"""
Grid geometry utilities for Grid Layout Service

Pure functions that decide cell width, cell height and spacing for a
fixed-column grid. Nothing here validates, logs or raises: degenerate input
(a container narrower than the padding) yields a degenerate number and the
caller decides what to do with it.

Height rhythm per six-cell block:
    index % 6 in {0, 1} -> height = width * 2/3
    index % 6 in {2..5} -> height = width * 1/3
"""

from models import CellGeometry, EdgeInsets, GeometricParams

# Section top/bottom inset and vertical gap between rows
SECTION_VERTICAL_INSET = 10.0
LINE_SPACING = 10.0

HEIGHT_CYCLE = 6
TALL_MULTIPLIER = 2.0 / 3.0
SHORT_MULTIPLIER = 1.0 / 3.0


def compute_cell_width(container_width: float, params: GeometricParams) -> float:
    """
    Compute the width of every cell in a row.

    Args:
        container_width: Width of the viewport hosting the grid
        params: Grid parameters

    Returns:
        (container_width - derived_padding) / column_count. Negative if the
        container is narrower than the padding.
    """
    available_width = container_width - params.derived_padding
    return available_width / params.column_count


def height_multiplier(cell_index: int) -> float:
    """Aspect ratio multiplier for a cell index."""
    if cell_index % HEIGHT_CYCLE < 2:
        return TALL_MULTIPLIER
    return SHORT_MULTIPLIER


def compute_cell_height(width: float, cell_index: int) -> float:
    """
    Compute a cell's height from its width and linear index.

    Depends only on the index, not on row or column, so the same index
    always gets the same height regardless of how rows wrap.

    Args:
        width: Cell width
        cell_index: Zero-based position in the item sequence

    Returns:
        width * 2/3 for the first two cells of each six-cell block,
        width * 1/3 for the other four
    """
    return width * height_multiplier(cell_index)


def cell_geometry(
    container_width: float,
    params: GeometricParams,
    cell_index: int
) -> CellGeometry:
    """Width and height of the cell at cell_index."""
    width = compute_cell_width(container_width, params)
    return CellGeometry(width=width, height=compute_cell_height(width, cell_index))


def insets_for(params: GeometricParams) -> EdgeInsets:
    """
    Section insets for a parameter set.

    Top and bottom are fixed; left and right come from params.
    """
    return EdgeInsets(
        top=SECTION_VERTICAL_INSET,
        left=params.left_inset,
        bottom=SECTION_VERTICAL_INSET,
        right=params.right_inset
    )


def line_spacing_for(params: GeometricParams) -> float:
    """Vertical gap between rows. Constant for every parameter set."""
    return LINE_SPACING


def inter_item_spacing_for(params: GeometricParams) -> float:
    return params.cell_spacing


def fits_container(container_width: float, params: GeometricParams) -> bool:
    """
    Check that a row of cells fits inside the container.

    Args:
        container_width: Width of the viewport hosting the grid
        params: Grid parameters

    Cell width is what remains after padding, so a full row (cells plus
    padding) spans exactly container_width whenever the width is positive.

    Returns:
        True if cells have positive width
    """
    return compute_cell_width(container_width, params) > 0
