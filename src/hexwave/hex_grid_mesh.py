# -*- coding: utf-8 -*-

"""
Filename: hex_grid_mesh.py
Author: storro
Date: 2026-10-17
Description: Procedurally generate a thick-line hexagonal lattice mesh on the XY plane.
             Every hexagon edge becomes an independent quad (4 vertices, 2 triangles),
             no vertices are shared between edges.
"""

import logging
import math

from dataclasses import dataclass

import numpy as np


EDGES_PER_HEX = 6
VERTICES_PER_EDGE = 4
TRIANGLES_PER_EDGE = 2

# Rotates the corner angles so that hexagons are pointy-top
ROTATION_OFFSET = 2.0 * math.pi / 4.0


@dataclass(frozen=True)
class LatticeSpec:
    grid_width: float = 4.0
    grid_height: float = 4.0
    hex_radius: float = 0.1
    line_thickness: float = 0.003

    def __post_init__(self) -> None:
        if self.hex_radius <= 0.0:
            raise ValueError("hex_radius must be > 0")
        if self.grid_width < 0.0 or self.grid_height < 0.0:
            raise ValueError("grid_width and grid_height must be >= 0")
        if self.line_thickness < 0.0:
            raise ValueError("line_thickness must be >= 0")

    @property
    def hex_width(self) -> float:
        return math.sqrt(3.0) * self.hex_radius

    @property
    def hex_height(self) -> float:
        return 2.0 * self.hex_radius

    @property
    def horiz_step(self) -> float:
        """Horizontal distance between hex centers"""
        return self.hex_width

    @property
    def vert_step(self) -> float:
        """Vertical distance between hex centers"""
        return 0.75 * self.hex_height

    @property
    def max_line_thickness(self) -> float:
        """Above this, the quads of adjacent edges start to overlap."""
        return 2.0 * self.hex_radius * math.sin(math.pi / 3.0)

    def lattice_counts(self) -> tuple[int, int]:
        """
        Return (rows, cols). The lattice spans -rows..rows and -cols..cols inclusive,
        which over-covers the requested extent so the tiling has no gaps at the border.
        """
        cols = math.ceil((self.grid_width + self.hex_width) / self.horiz_step)
        rows = math.ceil((self.grid_height + self.hex_height) / self.vert_step)
        return rows, cols

    @property
    def cell_count(self) -> int:
        rows, cols = self.lattice_counts()
        return (2 * rows + 1) * (2 * cols + 1)


@dataclass
class Mesh:
    positions: np.ndarray   # (N, 3) float32
    indices: np.ndarray     # (M, 3) uint32
    normals: np.ndarray     # (N, 3) float32
    cell_count: int

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.indices.shape[0])

    def flat_positions(self) -> np.ndarray:
        return self.positions.reshape(-1)

    def flat_indices(self) -> np.ndarray:
        return self.indices.reshape(-1)


def hex_centers(spec: LatticeSpec) -> np.ndarray:
    """
    Centers of every lattice cell as a (C, 2) array, rows outer and columns inner.
    Odd rows are shifted by half a step (brick offset). The remainder is truncated,
    so negative odd rows shift to the left instead of the right.
    """
    rows, cols = spec.lattice_counts()

    row_ids = np.arange(-rows, rows + 1)
    col_ids = np.arange(-cols, cols + 1)
    row_grid, col_grid = np.meshgrid(row_ids, col_ids, indexing="ij")

    stagger = np.fmod(row_grid, 2) * (spec.horiz_step / 2.0)
    x = col_grid * spec.horiz_step + stagger - spec.grid_width / 2.0
    y = row_grid * spec.vert_step - spec.grid_height / 2.0

    return np.column_stack((x.ravel(), y.ravel()))


def hex_corner_offsets(hex_radius: float) -> tuple[np.ndarray, np.ndarray]:
    """Start and end corner of each of the 6 edges, relative to the hex center."""
    i = np.arange(EDGES_PER_HEX)
    angle_start = (math.pi / 3.0) * i + ROTATION_OFFSET
    angle_end = (math.pi / 3.0) * ((i + 1) % EDGES_PER_HEX) + ROTATION_OFFSET

    start = hex_radius * np.column_stack((np.cos(angle_start), np.sin(angle_start)))
    end = hex_radius * np.column_stack((np.cos(angle_end), np.sin(angle_end)))
    return start, end


def edge_normals(start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """
    Unit normals (-dy, dx) / length of the edges start -> end, shape (..., 2).
    Zero-length edges get a zero normal.
    """
    d = end - start
    length = np.hypot(d[..., 0], d[..., 1])
    degenerate = length == 0.0
    safe_length = np.where(degenerate, 1.0, length)

    normals = np.stack((-d[..., 1], d[..., 0]), axis=-1) / safe_length[..., None]
    normals[degenerate] = 0.0
    return normals


def compute_vertex_normals(positions: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """
    Per-vertex normals: sum of the face normals of every triangle touching the vertex
    (area weighted, as the raw cross product is), then normalized.
    Vertices that only touch zero-area triangles end up with a zero normal.
    """
    pos = positions.astype(np.float64)
    tri = pos[indices]
    face_normals = np.cross(tri[:, 1] - tri[:, 0], tri[:, 2] - tri[:, 0])

    normals = np.zeros_like(pos)
    for corner in range(3):
        np.add.at(normals, indices[:, corner], face_normals)

    length = np.linalg.norm(normals, axis=1)
    nonzero = length > 0.0
    normals[nonzero] /= length[nonzero, None]
    return normals.astype(np.float32)


def build_hex_grid_mesh(spec: LatticeSpec) -> Mesh:
    """
    Generate the thick-line hexagon tiling described by spec.
    Vertex order is cell by cell (rows outer), edge by edge, then the 4 quad corners:
    start + offset, start - offset, end - offset, end + offset.
    """

    if spec.line_thickness >= spec.max_line_thickness:
        logging.warning(
            "line_thickness %.4f >= %.4f, adjacent edge quads will overlap",
            spec.line_thickness,
            spec.max_line_thickness,
        )

    centers = hex_centers(spec)
    corner_start, corner_end = hex_corner_offsets(spec.hex_radius)

    # (cells, edges, 2)
    starts = centers[:, None, :] + corner_start[None, :, :]
    ends = centers[:, None, :] + corner_end[None, :, :]

    offset = edge_normals(starts, ends) * (spec.line_thickness / 2.0)

    # (cells, edges, 4, 2)
    quads = np.stack(
        (starts + offset, starts - offset, ends - offset, ends + offset),
        axis=2,
    )

    quad_xy = quads.reshape(-1, 2)
    positions = np.zeros((quad_xy.shape[0], 3), dtype=np.float32)
    positions[:, :2] = quad_xy

    # Same winding for every quad so the face normals all point +Z
    quad_count = centers.shape[0] * EDGES_PER_HEX
    first = np.arange(quad_count, dtype=np.uint32) * VERTICES_PER_EDGE
    indices = np.column_stack(
        (first, first + 1, first + 2, first, first + 2, first + 3)
    ).reshape(-1, 3)

    normals = compute_vertex_normals(positions, indices)

    logging.debug(
        "Hex grid mesh: %d cells, %d vertices, %d triangles",
        centers.shape[0],
        positions.shape[0],
        indices.shape[0],
    )

    return Mesh(
        positions=positions,
        indices=indices,
        normals=normals,
        cell_count=int(centers.shape[0]),
    )
