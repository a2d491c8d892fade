# -*- coding: utf-8 -*-

"""
Filename: assets_path.py
Author: storro
Date: 2026-10-17
Description: Locate the GLSL sources shipped under <project>/assets/shaders
"""

from pathlib import Path
from panda3d.core import Filename

ASSETS_DIR = Path(__file__).resolve().parents[2] / "assets"
SHADERS_DIR = ASSETS_DIR / "shaders"


def assets_path(*parts: str) -> str:
    return Filename.from_os_specific(str(ASSETS_DIR.joinpath(*parts))).get_fullpath()


def shader_paths(name: str) -> tuple[str, str]:
    """
    Return the (vertex, fragment) pair <name>.vert.glsl / <name>.frag.glsl as Panda3D paths.
    Raises FileNotFoundError up front instead of letting Shader.load fail on a missing stage.
    """
    stages = (SHADERS_DIR / f"{name}.vert.glsl", SHADERS_DIR / f"{name}.frag.glsl")
    for stage in stages:
        if not stage.is_file():
            raise FileNotFoundError(f"shader source not found: {stage}")
    return tuple(assets_path("shaders", stage.name) for stage in stages)
