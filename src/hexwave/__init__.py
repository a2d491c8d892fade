from src.hexwave.frame_shading import ShadedFrame, shade_frame
from src.hexwave.height_gradient import COOL_BLUE, WARM_PINK, HeightGradient
from src.hexwave.hex_grid_mesh import LatticeSpec, Mesh, build_hex_grid_mesh
from src.hexwave.value_noise import hash2d, value_noise
from src.hexwave.wave_displacement import WaveLayer, WaveParams, displace, displace_positions

"""Hex wave lattice core: mesh generation, wave displacement and height gradient."""

__all__ = [
    "COOL_BLUE",
    "WARM_PINK",
    "HeightGradient",
    "LatticeSpec",
    "Mesh",
    "ShadedFrame",
    "WaveLayer",
    "WaveParams",
    "build_hex_grid_mesh",
    "displace",
    "displace_positions",
    "hash2d",
    "shade_frame",
    "value_noise",
]
