# -*- coding: utf-8 -*-

"""
Filename: frame_shading.py
Author: storro
Date: 2026-10-17
Description: CPU path for one frame: displace every vertex and color it by height
"""

from dataclasses import dataclass

import numpy as np

from src.hexwave.height_gradient import HeightGradient
from src.hexwave.hex_grid_mesh import Mesh
from src.hexwave.wave_displacement import WaveParams, displace_positions


@dataclass
class ShadedFrame:
    positions: np.ndarray   # (N, 3) float32
    colors: np.ndarray      # (N, 4) float32 RGBA


def base_vertex_colors(mesh: Mesh, gradient: HeightGradient) -> np.ndarray:
    # Displacement never moves vertices along Y, so these hold for every frame
    return gradient.colors_for(mesh.positions[:, 1])


def shade_frame(
    mesh: Mesh,
    elapsed: float,
    params: WaveParams,
    gradient: HeightGradient,
    base_colors: np.ndarray | None = None,
) -> ShadedFrame:
    """
    Call once per frame. The mesh is not modified.
    Colors only depend on the base height, so a caller shading every frame should
    compute them once with base_vertex_colors() and pass them as base_colors.
    """

    layers = params.snapshot()
    positions = displace_positions(mesh.positions, elapsed, layers)

    colors = base_colors if base_colors is not None else base_vertex_colors(mesh, gradient)

    return ShadedFrame(positions=positions, colors=colors)
