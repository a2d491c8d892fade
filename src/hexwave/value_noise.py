# -*- coding: utf-8 -*-

"""
Filename: value_noise.py
Author: storro
Date: 2026-10-17
Description: 2D value noise, a numpy port of the classic GLSL sin-hash noise.
             Works on scalars or on arrays of shape (..., 2).
"""

import numpy as np


HASH_X = 12.9898
HASH_Y = 78.233
HASH_SCALE = 43758.5453123


def fract(x):
    return x - np.floor(x)


def hash2d(p) -> np.ndarray:
    """Deterministic pseudo-random value in [0, 1) for each 2D point."""
    p = np.asarray(p, dtype=np.float64)
    # Elementwise, so scalar and batched calls hash the same point to the same value
    dot = p[..., 0] * HASH_X + p[..., 1] * HASH_Y
    return fract(np.sin(dot) * HASH_SCALE)


def smoothstep_weight(f):
    """3f^2 - 2f^3, zero slope at both ends of the cell."""
    return f * f * (3.0 - 2.0 * f)


def value_noise(p) -> np.ndarray:
    """
    Bilinear blend of the hashed values at the four integer corners around p,
    weighted by smoothstep. Returns the corner hash exactly at integer points.
    """
    p = np.asarray(p, dtype=np.float64)
    i = np.floor(p)
    f = p - i

    # Four corners in 2D of a tile
    a = hash2d(i)
    b = hash2d(i + (1.0, 0.0))
    c = hash2d(i + (0.0, 1.0))
    d = hash2d(i + (1.0, 1.0))

    u = smoothstep_weight(f)
    ux = u[..., 0]
    uy = u[..., 1]

    return (a + (b - a) * ux) + (c - a) * uy * (1.0 - ux) + (d - b) * ux * uy
