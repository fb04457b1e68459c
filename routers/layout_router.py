"""
Grid Layout Router

Handles layout requests from the host and returns cell geometry, spacing and
colours for a fixed-column grid.

Endpoints:
    POST /layout/grid - Run a layout pass over item_count cells
    POST /layout/cell - Geometry for a single cell index
    POST /layout/spacing - Insets and spacing for a parameter set
    GET /layout/palette - Cell palette colours
"""

import logging

from fastapi import APIRouter

from config import settings
from models import (
    CellGeometryRequest,
    CellGeometryResponse,
    ErrorDetail,
    GeometricParams,
    GridLayoutRequest,
    GridLayoutResponse,
    PaletteResponse,
    SpacingResponse
)
from services.layout_service import layout_service
from utils.grid_utils import (
    cell_geometry,
    fits_container,
    insets_for,
    inter_item_spacing_for,
    line_spacing_for
)

logger = logging.getLogger(__name__)

router = APIRouter()


def container_too_narrow(container_width: float, params: GeometricParams) -> ErrorDetail:
    """Error for a container that cannot hold one row of cells."""
    return ErrorDetail(
        code="CONTAINER_TOO_NARROW",
        message=(
            f"Container width {container_width} is not wider than the "
            f"horizontal padding {params.derived_padding} for {params.column_count} columns."
        ),
        retryable=False,
        suggestion="Use a wider container, fewer columns, or smaller insets and spacing."
    )


@router.post("/layout/grid", response_model=GridLayoutResponse)
async def layout_grid(request: GridLayoutRequest):
    """
    Run a layout pass.

    This endpoint:
    1. Computes the cell width for the container
    2. Computes each cell's height from its index
    3. Places the cells and picks a colour for each

    If the container is too narrow the layout (without cells) is still
    returned alongside the error, so the host can show what was computed.
    """
    logger.info(
        f"Grid layout request: width={request.container_width}, "
        f"columns={request.params.column_count}, items={request.item_count}"
    )

    layout = layout_service.layout(
        container_width=request.container_width,
        params=request.params,
        item_count=request.item_count
    )

    if not layout.fits:
        return GridLayoutResponse(
            success=False,
            layout=layout,
            error=container_too_narrow(request.container_width, request.params)
        )

    logger.info(f"Grid laid out: {len(layout.cells)} cells, height={layout.content_height}")
    return GridLayoutResponse(success=True, layout=layout)


@router.post("/layout/cell", response_model=CellGeometryResponse)
async def layout_cell(request: CellGeometryRequest):
    """
    Get the geometry of a single cell.

    The geometry is returned even for a container that is too narrow;
    success is False in that case and the width is negative or zero.
    """
    geometry = cell_geometry(request.container_width, request.params, request.cell_index)
    fits = fits_container(request.container_width, request.params)
    logger.debug(f"Cell {request.cell_index}: {geometry.width}x{geometry.height}")

    return CellGeometryResponse(
        success=fits,
        cell_index=request.cell_index,
        geometry=geometry,
        fits=fits,
        error=None if fits else container_too_narrow(request.container_width, request.params)
    )


@router.post("/layout/spacing", response_model=SpacingResponse)
async def layout_spacing(params: GeometricParams):
    """Get section insets, line spacing and inter-item spacing."""
    return SpacingResponse(
        insets=insets_for(params),
        line_spacing=line_spacing_for(params),
        inter_item_spacing=inter_item_spacing_for(params),
        derived_padding=params.derived_padding
    )


@router.get("/layout/palette", response_model=PaletteResponse)
async def get_palette():
    """List the colours cells are painted with."""
    return PaletteResponse(
        colors=layout_service.palette.entries(),
        seeded=settings.PALETTE_SEED is not None
    )
