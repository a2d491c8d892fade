# -*- coding: utf-8 -*-

"""
Filename: wave_displacement.py
Author: storro
Date: 2026-10-17
Description: Two layers of value noise, scrolled over time, displacing vertices along Z.
             Mirrors assets/shaders/hexwave.vert.glsl for the CPU path.
"""

import dataclasses
import math

from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

from src.hexwave.value_noise import value_noise


# Tuning ranges for live edits: (min, max). Only the fields a write touches are checked.
TUNING_RANGES = {
    "noise_frequency": (0.1, 5.0),
    "noise_amplitude": (0.0, 1.0),
    "speed_modifier": (0.0, 5.0),
}

# The second layer is rotated and runs backwards, slower, so the two layers never line up
LAYER_ROTATIONS = (0.0, math.pi / 4.0)
LAYER_TIME_SCALES = (1.0, -0.6)


@dataclass(frozen=True)
class WaveLayer:
    noise_frequency: float
    noise_amplitude: float
    speed_modifier: float

    def __post_init__(self) -> None:
        if self.noise_frequency <= 0.0:
            raise ValueError("noise_frequency must be > 0")
        if self.noise_amplitude < 0.0:
            raise ValueError("noise_amplitude must be >= 0")


def default_layers() -> tuple[WaveLayer, WaveLayer]:
    return (
        WaveLayer(noise_frequency=0.8, noise_amplitude=0.2, speed_modifier=1.0),
        WaveLayer(noise_frequency=2.0, noise_amplitude=0.15, speed_modifier=0.2),
    )


def _check_range(name: str, value: float, bounds: tuple[float, float]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name}={value} outside [{low}, {high}]")


@dataclass
class WaveParams:
    """
    Live-tunable wave parameters. A tuning front-end writes through update_layer()
    between frames; the render path reads one snapshot() per frame.
    """

    layers: tuple[WaveLayer, WaveLayer] = field(default_factory=default_layers)

    def __post_init__(self) -> None:
        if len(self.layers) != len(LAYER_ROTATIONS):
            raise ValueError(f"expected {len(LAYER_ROTATIONS)} wave layers, got {len(self.layers)}")
        self.layers = tuple(self.layers)

    def snapshot(self) -> tuple[WaveLayer, WaveLayer]:
        # layers is replaced as a whole on every write, so the tuple is a consistent view
        return self.layers

    def update_layer(self, index: int, **changes: float) -> WaveLayer:
        if index not in (0, 1):
            raise IndexError(f"wave layer index must be 0 or 1, got {index}")

        for name, value in changes.items():
            if name in TUNING_RANGES:
                _check_range(name, value, TUNING_RANGES[name])
        updated = dataclasses.replace(self.layers[index], **changes)

        layers = list(self.layers)
        layers[index] = updated
        self.layers = (layers[0], layers[1])
        return updated

    def get_parameters(self) -> dict:
        params = {}
        for n, layer in enumerate(self.layers, start=1):
            params[f"noise_freq_{n}"] = float(layer.noise_frequency)
            params[f"noise_amp_{n}"] = float(layer.noise_amplitude)
            params[f"spd_modifier_{n}"] = float(layer.speed_modifier)
        return params


WaveInput = Union[WaveParams, Sequence[WaveLayer]]


def _resolve_layers(params: WaveInput) -> Sequence[WaveLayer]:
    if isinstance(params, WaveParams):
        return params.snapshot()
    if len(params) != len(LAYER_ROTATIONS):
        raise ValueError(f"expected {len(LAYER_ROTATIONS)} wave layers, got {len(params)}")
    return params


def rotate2d(xy: np.ndarray, angle: float) -> np.ndarray:
    """Same product as GLSL `mat2(cos, -sin, sin, cos) * xy` (column-major)."""
    c = math.cos(angle)
    s = math.sin(angle)
    x = xy[..., 0]
    y = xy[..., 1]
    return np.stack((c * x + s * y, -s * x + c * y), axis=-1)


def wave_height(xy, t: float, params: WaveInput) -> np.ndarray:
    """Z offset for one or many XY points at time t."""
    xy = np.asarray(xy, dtype=np.float64)
    height = np.zeros(xy.shape[:-1])

    for layer, angle, time_scale in zip(_resolve_layers(params), LAYER_ROTATIONS, LAYER_TIME_SCALES):
        p = xy if angle == 0.0 else rotate2d(xy, angle)
        # The time term is a scalar added to both components
        p = p * layer.noise_frequency + t * layer.speed_modifier * time_scale
        height = height + value_noise(p) * layer.noise_amplitude

    return height


def displace(base_pos: Sequence[float], t: float, params: WaveInput) -> tuple[float, float, float]:
    """Displace a single vertex. X and Y pass through, Z accumulates both layers."""
    x, y, z = (float(v) for v in base_pos)
    dz = wave_height((x, y), t, params)
    return x, y, z + float(dz)


def displace_positions(positions: np.ndarray, t: float, params: WaveInput) -> np.ndarray:
    """Displace an (N, 3) vertex buffer. Returns a new array, positions is left untouched."""
    displaced = np.array(positions, dtype=np.float32, copy=True)
    if displaced.shape[0] == 0:
        return displaced

    dz = wave_height(displaced[:, :2], t, _resolve_layers(params))
    displaced[:, 2] += dz.astype(np.float32)
    return displaced
