import math

import numpy as np
import pytest

from src.hexwave.value_noise import value_noise
from src.hexwave.wave_displacement import (
    WaveLayer,
    WaveParams,
    displace,
    displace_positions,
    rotate2d,
    wave_height,
)


def test_origin_at_time_zero_stays_in_amplitude_band():
    x, y, z = displace((0.0, 0.0, 0.0), 0.0, WaveParams())

    assert (x, y) == (0.0, 0.0)
    assert -0.35 <= z <= 0.35


def test_displacement_only_moves_z():
    base = (0.3, -1.2, 0.5)
    x, y, z = displace(base, 2.5, WaveParams())

    assert (x, y) == (0.3, -1.2)
    assert z != 0.5


def test_displace_is_repeatable():
    params = WaveParams()
    results = [displace((0.7, 0.1, 0.0), 1.25, params) for _ in range(3)]

    assert results[0] == results[1] == results[2]


def test_zero_amplitude_is_identity():
    params = WaveParams(layers=(
        WaveLayer(noise_frequency=1.0, noise_amplitude=0.0, speed_modifier=1.0),
        WaveLayer(noise_frequency=1.0, noise_amplitude=0.0, speed_modifier=1.0),
    ))

    assert displace((1.0, 2.0, 3.0), 4.0, params) == (1.0, 2.0, 3.0)


def test_first_layer_matches_noise_formula():
    params = WaveParams(layers=(
        WaveLayer(noise_frequency=0.8, noise_amplitude=0.2, speed_modifier=1.0),
        WaveLayer(noise_frequency=2.0, noise_amplitude=0.0, speed_modifier=0.2),
    ))
    xy = np.array([0.4, -0.9])
    t = 3.0

    expected = value_noise(xy * 0.8 + t * 1.0) * 0.2

    assert wave_height(xy, t, params) == pytest.approx(expected)


def test_second_layer_is_rotated_and_reversed():
    params = WaveParams(layers=(
        WaveLayer(noise_frequency=0.8, noise_amplitude=0.0, speed_modifier=1.0),
        WaveLayer(noise_frequency=2.0, noise_amplitude=0.15, speed_modifier=0.2),
    ))
    xy = np.array([0.4, -0.9])
    t = 3.0
    c = s = math.sqrt(0.5)
    rotated = np.array([c * xy[0] + s * xy[1], -s * xy[0] + c * xy[1]])

    expected = value_noise(rotated * 2.0 - t * 0.2 * 0.6) * 0.15

    assert wave_height(xy, t, params) == pytest.approx(expected)


def test_rotate2d_matches_glsl_column_major_product():
    rotated = rotate2d(np.array([1.0, 0.0]), math.pi / 4.0)

    np.testing.assert_allclose(rotated, [math.sqrt(0.5), -math.sqrt(0.5)])


def test_displace_positions_matches_single_vertex(small_mesh):
    params = WaveParams()
    t = 0.75
    displaced = displace_positions(small_mesh.positions, t, params)

    for i in (0, 17, small_mesh.vertex_count - 1):
        _, _, z = displace(small_mesh.positions[i], t, params)
        assert displaced[i, 2] == pytest.approx(z, abs=1e-6)

    np.testing.assert_array_equal(displaced[:, :2], small_mesh.positions[:, :2])


def test_displace_positions_leaves_input_untouched(small_mesh):
    before = small_mesh.positions.copy()

    displace_positions(small_mesh.positions, 5.0, WaveParams())

    np.testing.assert_array_equal(small_mesh.positions, before)


def test_displace_positions_handles_empty_buffer():
    empty = np.zeros((0, 3), dtype=np.float32)

    assert displace_positions(empty, 1.0, WaveParams()).shape == (0, 3)


def test_displacement_changes_over_time():
    params = WaveParams()
    z0 = displace((0.3, 0.3, 0.0), 0.0, params)[2]
    z1 = displace((0.3, 0.3, 0.0), 0.37, params)[2]

    assert z0 != z1


def test_default_wave_parameters():
    params = WaveParams().get_parameters()

    assert params == {
        "noise_freq_1": 0.8,
        "noise_amp_1": 0.2,
        "spd_modifier_1": 1.0,
        "noise_freq_2": 2.0,
        "noise_amp_2": 0.15,
        "spd_modifier_2": 0.2,
    }


def test_snapshot_is_not_affected_by_later_writes():
    params = WaveParams()
    snapshot = params.snapshot()

    params.update_layer(0, noise_amplitude=0.9)

    assert snapshot[0].noise_amplitude == 0.2
    assert params.snapshot()[0].noise_amplitude == 0.9
    assert params.snapshot()[1] == snapshot[1]


@pytest.mark.parametrize(
    "changes",
    [
        {"noise_frequency": 0.0},
        {"noise_frequency": 6.0},
        {"noise_amplitude": -0.1},
        {"noise_amplitude": 1.5},
        {"speed_modifier": 7.0},
    ],
)
def test_invalid_update_is_rejected_and_not_applied(changes):
    params = WaveParams()
    before = params.snapshot()

    with pytest.raises(ValueError):
        params.update_layer(1, **changes)

    assert params.snapshot() == before


def test_update_with_bad_layer_index():
    with pytest.raises(IndexError):
        WaveParams().update_layer(2, noise_amplitude=0.1)


def test_wave_layer_validation():
    with pytest.raises(ValueError):
        WaveLayer(noise_frequency=0.0, noise_amplitude=0.1, speed_modifier=1.0)
    with pytest.raises(ValueError):
        WaveLayer(noise_frequency=1.0, noise_amplitude=-0.1, speed_modifier=1.0)


def test_update_only_checks_the_fields_it_changes():
    params = WaveParams(layers=(
        WaveLayer(noise_frequency=10.0, noise_amplitude=0.1, speed_modifier=-1.0),
        WaveLayer(noise_frequency=1.0, noise_amplitude=0.1, speed_modifier=0.2),
    ))

    updated = params.update_layer(0, noise_amplitude=0.2)

    assert updated == WaveLayer(noise_frequency=10.0, noise_amplitude=0.2, speed_modifier=-1.0)
    assert params.snapshot()[0] is updated


def test_negative_speed_layer_still_displaces():
    params = WaveParams(layers=(
        WaveLayer(noise_frequency=1.0, noise_amplitude=0.1, speed_modifier=-1.0),
        WaveLayer(noise_frequency=1.0, noise_amplitude=0.0, speed_modifier=0.2),
    ))
    xy = np.array([0.2, 0.6])

    expected = value_noise(xy * 1.0 + 2.0 * -1.0) * 0.1

    assert wave_height(xy, 2.0, params) == pytest.approx(expected)


@pytest.mark.parametrize("count", [1, 3])
def test_wrong_layer_count_is_rejected(count):
    layers = [WaveLayer(noise_frequency=1.0, noise_amplitude=0.1, speed_modifier=1.0)] * count

    with pytest.raises(ValueError):
        wave_height(np.array([0.0, 0.0]), 0.0, layers)
    with pytest.raises(ValueError):
        displace_positions(np.zeros((4, 3), dtype=np.float32), 0.0, layers)
    with pytest.raises(ValueError):
        WaveParams(layers=tuple(layers))


def test_two_layer_sequence_is_accepted():
    layers = list(WaveParams().snapshot())

    assert displace((0.1, 0.2, 0.0), 1.0, layers) == displace((0.1, 0.2, 0.0), 1.0, WaveParams())
