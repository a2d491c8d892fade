import pytest

from src.hexwave.hex_grid_mesh import LatticeSpec, build_hex_grid_mesh


@pytest.fixture
def small_spec():
    # Thick lines and few cells, so areas are well above float32 noise
    return LatticeSpec(grid_width=1.0, grid_height=1.0, hex_radius=0.5, line_thickness=0.05)


@pytest.fixture
def small_mesh(small_spec):
    return build_hex_grid_mesh(small_spec)
