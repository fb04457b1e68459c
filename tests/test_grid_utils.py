"""Unit tests for grid geometry utilities."""

import pytest

from models import GeometricParams
from utils.grid_utils import (
    LINE_SPACING,
    cell_geometry,
    compute_cell_height,
    compute_cell_width,
    fits_container,
    height_multiplier,
    insets_for,
    inter_item_spacing_for,
    line_spacing_for,
)


def test_cell_width_for_reference_container(default_params):
    """400 wide container, padding 30 -> 370 available, 185 per cell."""
    assert compute_cell_width(400, default_params) == pytest.approx(185.0)


def test_cell_width_is_deterministic(default_params):
    """Identical inputs give identical output."""
    first = compute_cell_width(317.5, default_params)
    second = compute_cell_width(317.5, default_params)
    assert first == second


def test_cell_width_negative_for_narrow_container(default_params):
    """Container narrower than padding yields a negative width, not an error."""
    assert compute_cell_width(20, default_params) == pytest.approx(-5.0)


def test_cell_width_zero_container():
    params = GeometricParams(column_count=1, left_inset=0, right_inset=0, cell_spacing=0)
    assert compute_cell_width(0, params) == 0


def test_cell_width_single_column_ignores_spacing():
    params = GeometricParams(column_count=1, left_inset=5, right_inset=15, cell_spacing=50)
    assert compute_cell_width(120, params) == pytest.approx(100.0)


@pytest.mark.parametrize(
    "cell_index,multiplier",
    [(0, 2 / 3), (1, 2 / 3), (2, 1 / 3), (3, 1 / 3), (4, 1 / 3), (5, 1 / 3), (6, 2 / 3), (7, 2 / 3), (8, 1 / 3)],
)
def test_height_ratio_by_index(cell_index, multiplier):
    """First two cells of each six-cell block are tall, the other four short."""
    height = compute_cell_height(150.0, cell_index)
    assert height / 150.0 == pytest.approx(multiplier)
    assert height_multiplier(cell_index) == pytest.approx(multiplier)


def test_height_is_periodic():
    """Heights repeat every six indices."""
    for cell_index in range(30):
        assert compute_cell_height(185.0, cell_index) == compute_cell_height(185.0, cell_index + 6)


def test_height_uses_float_division():
    """Multipliers must not truncate to zero."""
    assert compute_cell_height(3, 0) == pytest.approx(2.0)
    assert compute_cell_height(3, 2) == pytest.approx(1.0)


def test_cell_geometry(default_params):
    tall = cell_geometry(400, default_params, 0)
    short = cell_geometry(400, default_params, 5)

    assert tall.width == pytest.approx(185.0)
    assert tall.height == pytest.approx(185.0 * 2 / 3)
    assert short.height == pytest.approx(185.0 / 3)


def test_insets_for(default_params):
    params = GeometricParams(column_count=3, left_inset=4, right_inset=8, cell_spacing=2)
    insets = insets_for(params)

    assert insets.top == 10
    assert insets.bottom == 10
    assert insets.left == 4
    assert insets.right == 8


def test_line_spacing_is_constant():
    """Line spacing ignores params."""
    params = [
        GeometricParams(),
        GeometricParams(column_count=7, left_inset=0, right_inset=0, cell_spacing=0),
        GeometricParams(column_count=1, left_inset=100, right_inset=100, cell_spacing=42),
    ]
    assert all(line_spacing_for(p) == 10 for p in params)
    assert LINE_SPACING == 10


def test_inter_item_spacing_passes_through():
    params = GeometricParams(column_count=4, cell_spacing=7.5)
    assert inter_item_spacing_for(params) == 7.5


def test_fits_container(default_params):
    assert fits_container(400, default_params) is True
    assert fits_container(31, default_params) is True
    assert fits_container(30, default_params) is False
    assert fits_container(20, default_params) is False


def test_fits_very_wide_container():
    """Rounding in large widths does not make a roomy container look too narrow."""
    params = GeometricParams(column_count=6, left_inset=10, right_inset=10, cell_spacing=10)
    container_width = 1.0905873687325774e17

    assert compute_cell_width(container_width, params) > 0
    assert fits_container(container_width, params) is True
