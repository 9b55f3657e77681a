from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from asciify.charsets import check_ramp

ROW_TERMINATOR = "\n"

FLOOR_EPSILON = 1e-9


@dataclass
class AsciiGrid:
    rows: list[str]  # one string per row, no terminator
    indices: np.ndarray  # (rows, cols) ramp indices

    @property
    def width(self) -> int:
        return self.indices.shape[1] if self.indices.ndim == 2 else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def text(self) -> str:
        """Rows in top-to-bottom order, each followed by one terminator."""
        return "".join(row + ROW_TERMINATOR for row in self.rows)

    def __str__(self) -> str:
        return self.text


def ramp_indices(luma: np.ndarray, levels: int, invert: bool = False) -> np.ndarray:
    """Map 0-255 luminance to ramp indices; darker pixels get later (inkier) indices.

    Computes ``floor((255 - v) * (levels - 1) / 255)`` on the unquantized levels.
    Inversion happens in index space so inverted output is the exact complement.
    """
    darkness = 255.0 - np.asarray(luma, dtype=np.float64)
    # Nudge exact bucket edges that land a hair below the integer
    idx = np.floor(darkness * (levels - 1) / 255.0 + FLOOR_EPSILON).astype(np.int64)
    idx = np.clip(idx, 0, levels - 1)
    if invert:
        idx = (levels - 1) - idx
    return idx


def map_glyphs(luma: np.ndarray, ramp: str, invert: bool = False) -> AsciiGrid:
    check_ramp(ramp)
    idx = ramp_indices(luma, len(ramp), invert)
    glyphs = np.array(list(ramp))
    rows = ["".join(row) for row in glyphs[idx]]
    return AsciiGrid(rows=rows, indices=idx)
