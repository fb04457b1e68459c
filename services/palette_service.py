"""
Cell Palette

Picks a background colour for each cell from a fixed palette. Selection is
unconstrained random choice; the random source is injected so that tests and
seeded deployments get reproducible colours. Kept apart from the geometry
utilities, which stay free of side effects.
"""

import logging
import random
from typing import Dict, List, Optional

from config import settings
from models import PaletteColor, PaletteEntry

logger = logging.getLogger(__name__)

PALETTE_HEX: Dict[PaletteColor, str] = {
    PaletteColor.BLACK: "#000000",
    PaletteColor.BLUE: "#0000FF",
    PaletteColor.BROWN: "#996633",
    PaletteColor.CYAN: "#00FFFF",
    PaletteColor.GREEN: "#00FF00",
    PaletteColor.ORANGE: "#FF8000",
    PaletteColor.RED: "#FF0000",
    PaletteColor.PURPLE: "#800080",
    PaletteColor.YELLOW: "#FFFF00",
}


class CellPalette:
    """
    Random colour picker over a fixed list of colours.

    Args:
        rng: Random source. Defaults to an unseeded random.Random.
        colors: Colours to pick from. Defaults to the full palette.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        colors: Optional[List[PaletteColor]] = None
    ):
        self.rng = rng if rng is not None else random.Random()
        self.colors = list(colors) if colors is not None else list(PALETTE_HEX)
        if not self.colors:
            raise ValueError("Palette needs at least one colour")

    def pick(self) -> PaletteColor:
        """Pick a colour at random."""
        return self.rng.choice(self.colors)

    def entries(self) -> List[PaletteEntry]:
        return [PaletteEntry(name=color, hex=PALETTE_HEX[color]) for color in self.colors]


def hex_for(color: PaletteColor) -> str:
    return PALETTE_HEX[color]


def build_palette(seed: Optional[int] = None) -> CellPalette:
    """
    Build a palette, seeded from settings when no seed is given.

    Args:
        seed: Optional seed overriding settings.PALETTE_SEED

    Returns:
        CellPalette with its own random source
    """
    if seed is None:
        seed = settings.PALETTE_SEED
    if seed is not None:
        logger.info(f"Cell palette seeded with {seed}")
    return CellPalette(rng=random.Random(seed))
