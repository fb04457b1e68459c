"""
Pydantic models for Grid Layout Service

Defines the geometry value objects and the request/response models:
- Geometry (GeometricParams, CellGeometry, EdgeInsets)
- Layout pass (LaidOutCell, GridLayout)
- API envelopes for grid, cell, spacing and palette endpoints
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from config import settings


# ============================================================================
# Shared Models
# ============================================================================

class ErrorDetail(BaseModel):
    """Error information for failed operations"""
    code: str
    message: str
    retryable: bool = False
    suggestion: Optional[str] = None


# ============================================================================
# Geometry Models
# ============================================================================

class GeometricParams(BaseModel):
    """
    Horizontal layout parameters for a fixed-column grid.

    The model is frozen. derived_padding is always derived from the current
    fields, including on copies made with model_copy(update=...).

    Example:
        column_count=2, left_inset=10, right_inset=10, cell_spacing=10
        -> derived_padding = 10 + 10 + 1 * 10 = 30
    """
    model_config = ConfigDict(frozen=True)

    column_count: int = Field(
        default=settings.DEFAULT_COLUMN_COUNT,
        ge=1,
        description="Number of cells per row"
    )
    left_inset: float = Field(default=settings.DEFAULT_INSET, ge=0)
    right_inset: float = Field(default=settings.DEFAULT_INSET, ge=0)
    cell_spacing: float = Field(
        default=settings.DEFAULT_CELL_SPACING,
        ge=0,
        description="Horizontal gap between adjacent cells in a row"
    )

    @computed_field
    @property
    def derived_padding(self) -> float:
        """Horizontal space taken by insets and inter-cell gaps in one row"""
        return (
            self.left_inset
            + self.right_inset
            + (self.column_count - 1) * self.cell_spacing
        )


class CellGeometry(BaseModel):
    """Width and height of a single cell"""
    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class EdgeInsets(BaseModel):
    """Section insets around the grid"""
    model_config = ConfigDict(frozen=True)

    top: float
    left: float
    bottom: float
    right: float


# ============================================================================
# Palette Models
# ============================================================================

class PaletteColor(str, Enum):
    """Colours a cell background can take"""
    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    CYAN = "cyan"
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"
    PURPLE = "purple"
    YELLOW = "yellow"


class PaletteEntry(BaseModel):
    """A palette colour with its hex value"""
    name: PaletteColor
    hex: str


class PaletteResponse(BaseModel):
    """Response listing the cell palette"""
    colors: List[PaletteEntry]
    seeded: bool = Field(
        False,
        description="True if colour selection is seeded and reproducible"
    )


# ============================================================================
# Layout Pass Models
# ============================================================================

class LaidOutCell(BaseModel):
    """A cell placed by a layout pass"""
    index: int
    row: int
    column: int
    x: float
    y: float
    width: float
    height: float
    color: PaletteColor
    color_hex: str


class GridLayout(BaseModel):
    """Result of one layout pass over the item sequence"""
    container_width: float
    params: GeometricParams
    insets: EdgeInsets
    line_spacing: float
    inter_item_spacing: float
    cell_width: float
    fits: bool = Field(
        ...,
        description="False if the container is too narrow for the requested columns"
    )
    cells: List[LaidOutCell] = Field(default_factory=list)
    content_height: float = 0.0
    corner_radius: float = settings.CELL_CORNER_RADIUS
    background_color: str = settings.BACKGROUND_COLOR


class GridLayoutRequest(BaseModel):
    """
    Request to run a layout pass.

    The service will:
    1. Compute the cell width for the container
    2. Compute each cell's height from its index
    3. Place cells row by row and pick a colour for each
    """
    container_width: float = Field(
        default=settings.DEFAULT_CONTAINER_WIDTH,
        ge=0,
        description="Width of the scrollable viewport hosting the grid"
    )
    params: GeometricParams = Field(default_factory=GeometricParams)
    item_count: int = Field(
        default=settings.DEFAULT_ITEM_COUNT,
        ge=0,
        le=settings.MAX_ITEM_COUNT
    )


class GridLayoutResponse(BaseModel):
    """Response from a layout pass"""
    success: bool
    layout: Optional[GridLayout] = None
    error: Optional[ErrorDetail] = None


class CellGeometryRequest(BaseModel):
    """Request for the geometry of a single cell"""
    container_width: float = Field(default=settings.DEFAULT_CONTAINER_WIDTH, ge=0)
    params: GeometricParams = Field(default_factory=GeometricParams)
    cell_index: int = Field(..., ge=0, description="Zero-based position in the item sequence")


class CellGeometryResponse(BaseModel):
    """Response with the geometry of a single cell"""
    success: bool
    cell_index: int
    geometry: Optional[CellGeometry] = None
    fits: Optional[bool] = None
    error: Optional[ErrorDetail] = None


class SpacingResponse(BaseModel):
    """Insets and spacing for a parameter set"""
    insets: EdgeInsets
    line_spacing: float
    inter_item_spacing: float
    derived_padding: float
