# -*- coding: utf-8 -*-

"""
Filename: hexwave_app.py
Author: storro
Date: 2026-10-17
Description: Main application class, builds the hex lattice once and animates it every frame
"""

import logging

from dataclasses import dataclass, field

from direct.showbase.ShowBase import ShowBase
from direct.task.Task import Task
from panda3d.core import ClockObject, NodePath, Shader, load_prc_file_data

from src.app.hex_geometry import make_hex_grid_node, update_hex_grid_node
from src.hexwave.frame_shading import base_vertex_colors, shade_frame
from src.hexwave.height_gradient import HeightGradient
from src.hexwave.hex_grid_mesh import LatticeSpec, build_hex_grid_mesh
from src.hexwave.wave_displacement import WaveParams
from src.util.assets_path import shader_paths
from src.util.logging_config import setup_logging


@dataclass
class HexWaveConfig:
    lattice: LatticeSpec = field(default_factory=LatticeSpec)
    waves: WaveParams = field(default_factory=WaveParams)

    # False = displace and color the vertex buffer with numpy every frame
    use_gpu_shading: bool = True

    # Tilt of the lattice plane towards the camera, degrees about X
    mesh_tilt: float = -60.0
    camera_distance: float = 4.0
    camera_fov: float = 80.0
    background_color: tuple = (25 / 255, 25 / 255, 50 / 255, 1.0)  # #191932

    log_level: str = "INFO"
    log_to_file: bool = False


class HexWaveApp(ShowBase):
    def __init__(self, config: HexWaveConfig | None = None) -> None:
        self.config = config if config is not None else HexWaveConfig()

        self.configure_panda()
        super().__init__()

        setup_logging(self.config.log_level, self.config.log_to_file)

        # Written between frames by whoever tunes the waves, read once per frame below
        self.wave_params: WaveParams = self.config.waves
        self.gradient = HeightGradient.for_lattice(self.config.lattice)

        self.disable_mouse()
        self.set_background_color(*self.config.background_color)

        logging.info("Creating hex lattice mesh...")
        self.mesh = build_hex_grid_mesh(self.config.lattice)
        self.base_colors = base_vertex_colors(self.mesh, self.gradient)
        self.hex_np: NodePath = make_hex_grid_node(
            self.mesh,
            colors=self.base_colors,
            dynamic=not self.config.use_gpu_shading,
        )
        self.hex_np.reparent_to(self.render)
        self.hex_np.set_light_off(1)
        self.hex_np.set_two_sided(True)
        logging.info(
            "Hex lattice created: %d cells, %d vertices, %d triangles",
            self.mesh.cell_count,
            self.mesh.vertex_count,
            self.mesh.triangle_count,
        )

        # Panda3D is Z-up: +90 stands the XY plane up in front of the camera, then tilt it back
        self.hex_np.set_p(90.0 + self.config.mesh_tilt)

        self.camLens.set_fov(self.config.camera_fov)
        self.camLens.set_near_far(0.1, 100.0)
        self.camera.set_pos(0.0, -self.config.camera_distance, 0.0)
        self.camera.look_at(0.0, 0.0, 0.0)

        if self.config.use_gpu_shading:
            self._setup_shader()
            logging.info("Wave displacement running in shaders")
        else:
            logging.info("Wave displacement running on the CPU")

        self._wireframe = False
        self.accept("w", self._toggle_wireframe)

        self.task_mgr.add(self._wave_step_task, "hexwave_step")

    def _setup_shader(self) -> None:
        vert_path, frag_path = shader_paths("hexwave")
        shader = Shader.load(Shader.SL_GLSL, vert_path, frag_path)
        self.hex_np.set_shader(shader)

        self.hex_np.set_shader_input("u_grid_height", float(self.gradient.grid_height))
        self.hex_np.set_shader_input("u_color_start", self.gradient.color_start)
        self.hex_np.set_shader_input("u_color_end", self.gradient.color_end)

        self._apply_wave_uniforms(elapsed=0.0)

    def _apply_wave_uniforms(self, elapsed: float) -> None:
        self.hex_np.set_shader_input("u_time", float(elapsed))
        layer_1, layer_2 = self.wave_params.snapshot()
        for n, layer in ((1, layer_1), (2, layer_2)):
            self.hex_np.set_shader_input(f"u_noise_freq_{n}", float(layer.noise_frequency))
            self.hex_np.set_shader_input(f"u_noise_amp_{n}", float(layer.noise_amplitude))
            self.hex_np.set_shader_input(f"u_spd_modifier_{n}", float(layer.speed_modifier))

    def _wave_step_task(self, task: Task) -> int:
        elapsed = ClockObject.get_global_clock().get_frame_time()

        if self.config.use_gpu_shading:
            self._apply_wave_uniforms(elapsed)
        else:
            frame = shade_frame(
                self.mesh, elapsed, self.wave_params, self.gradient, base_colors=self.base_colors
            )
            update_hex_grid_node(self.hex_np, frame.positions, frame.colors)

        return task.cont

    def _toggle_wireframe(self) -> None:
        self._wireframe = not self._wireframe
        if self._wireframe:
            self.render.set_render_mode_wireframe()
        else:
            self.render.clear_render_mode()

    def configure_panda(self) -> None:
        prc_data = """
            window-title Hex Wave Lattice
            win-size 1280 720
            fullscreen false
            sync-video true
        """
        load_prc_file_data("", prc_data)

    def get_wave_parameters(self) -> dict:
        return self.wave_params.get_parameters()

    def set_wave_layer(self, index: int, **changes: float) -> None:
        layer = self.wave_params.update_layer(index, **changes)
        logging.debug("Wave layer %d updated: %s", index + 1, layer)
