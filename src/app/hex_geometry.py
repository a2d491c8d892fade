# -*- coding: utf-8 -*-

"""
Filename: hex_geometry.py
Author: storro
Date: 2026-10-17
Description: Upload a hex lattice Mesh into Panda3D geometry, and rewrite its
             positions/colors in place for the CPU shading path
"""

import numpy as np

from panda3d.core import (
    Geom,
    GeomNode,
    GeomTriangles,
    GeomVertexArrayFormat,
    GeomVertexData,
    GeomVertexFormat,
    InternalName,
    NodePath,
)

from src.hexwave.hex_grid_mesh import Mesh

# One array per attribute so positions and colors can be rewritten independently
POSITION_ARRAY = 0
NORMAL_ARRAY = 1
COLOR_ARRAY = 2


def make_vertex_format() -> GeomVertexFormat:
    positions = GeomVertexArrayFormat()
    positions.add_column(InternalName.get_vertex(), 3, Geom.NT_float32, Geom.C_point)

    normals = GeomVertexArrayFormat()
    normals.add_column(InternalName.get_normal(), 3, Geom.NT_float32, Geom.C_normal)

    colors = GeomVertexArrayFormat()
    colors.add_column(InternalName.get_color(), 4, Geom.NT_float32, Geom.C_color)

    fmt = GeomVertexFormat()
    fmt.add_array(positions)
    fmt.add_array(normals)
    fmt.add_array(colors)
    return GeomVertexFormat.register_format(fmt)


def _write_float_array(vdata: GeomVertexData, array_index: int, values: np.ndarray) -> None:
    handle = vdata.modify_array(array_index)
    view = memoryview(handle).cast("B").cast("f")
    view[:] = np.ascontiguousarray(values, dtype=np.float32).reshape(-1)


def make_hex_grid_node(
    mesh: Mesh,
    colors: np.ndarray | None = None,
    dynamic: bool = False,
) -> NodePath:
    """
    Build a NodePath holding the mesh as a single Geom. With dynamic=True the vertex
    data is flagged for per-frame rewrites (CPU shading path).
    """

    usage = Geom.UH_dynamic if dynamic else Geom.UH_static

    if colors is None:
        colors = np.ones((mesh.vertex_count, 4), dtype=np.float32)

    vdata = GeomVertexData("hex_grid", make_vertex_format(), usage)
    vdata.unclean_set_num_rows(mesh.vertex_count)
    _write_float_array(vdata, POSITION_ARRAY, mesh.positions)
    _write_float_array(vdata, NORMAL_ARRAY, mesh.normals)
    _write_float_array(vdata, COLOR_ARRAY, colors)

    tris = GeomTriangles(Geom.UH_static)
    tris.set_index_type(Geom.NT_uint32)
    index_array = tris.modify_vertices()
    index_array.unclean_set_num_rows(mesh.triangle_count * 3)
    view = memoryview(index_array).cast("B").cast("I")
    view[:] = np.ascontiguousarray(mesh.flat_indices(), dtype=np.uint32)

    geom = Geom(vdata)
    geom.add_primitive(tris)

    node = GeomNode("hex_grid")
    node.add_geom(geom)

    return NodePath(node)


def update_hex_grid_node(node_path: NodePath, positions: np.ndarray, colors: np.ndarray) -> None:
    """Overwrite positions and colors of a node made by make_hex_grid_node."""
    geom = node_path.node().modify_geom(0)
    vdata = geom.modify_vertex_data()
    _write_float_array(vdata, POSITION_ARRAY, positions)
    _write_float_array(vdata, COLOR_ARRAY, colors)
