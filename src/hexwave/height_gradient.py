# -*- coding: utf-8 -*-

"""
Filename: height_gradient.py
Author: storro
Date: 2026-10-17
Description: Vertical two-color gradient, mirrors assets/shaders/hexwave.frag.glsl
"""

from dataclasses import dataclass

import numpy as np

from src.hexwave.hex_grid_mesh import LatticeSpec


def hex_to_rgb(value: str) -> tuple[float, float, float]:
    value = value.lstrip("#")
    return tuple(int(value[i:i + 2], 16) / 255.0 for i in (0, 2, 4))


WARM_PINK = hex_to_rgb("#EB74CE")
COOL_BLUE = hex_to_rgb("#3289F7")


@dataclass(frozen=True)
class HeightGradient:
    """
    Maps a vertical coordinate to a color. The normalization range is the grid height,
    centered on 0: y = -grid_height/2 gives color_start, y = +grid_height/2 gives color_end.
    """

    grid_height: float = 4.0
    color_start: tuple[float, float, float] = WARM_PINK
    color_end: tuple[float, float, float] = COOL_BLUE

    def __post_init__(self) -> None:
        if self.grid_height <= 0.0:
            raise ValueError("grid_height must be > 0")

    @classmethod
    def for_lattice(cls, spec: LatticeSpec, **kwargs) -> "HeightGradient":
        return cls(grid_height=spec.grid_height, **kwargs)

    def normalize(self, y):
        """(y + H/2) / H clamped to [0, 1]"""
        k = (np.asarray(y, dtype=np.float64) + self.grid_height / 2.0) / self.grid_height
        return np.clip(k, 0.0, 1.0)

    def color_for(self, y: float) -> tuple[float, float, float]:
        k = float(self.normalize(y))
        return tuple(
            start * (1.0 - k) + end * k
            for start, end in zip(self.color_start, self.color_end)
        )

    def colors_for(self, ys) -> np.ndarray:
        """(N, 4) float32 RGBA, alpha is always 1."""
        k = self.normalize(ys).reshape(-1, 1)
        start = np.asarray(self.color_start, dtype=np.float64)
        end = np.asarray(self.color_end, dtype=np.float64)

        colors = np.ones((k.shape[0], 4), dtype=np.float32)
        colors[:, :3] = start * (1.0 - k) + end * k
        return colors
