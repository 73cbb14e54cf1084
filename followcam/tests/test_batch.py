"""Vectorised helpers agree with their scalar counterparts."""
from __future__ import annotations

import numpy as np
import pytest

from followcam.angles import normalize_angle, step_axis
from followcam.batch import normalize_angles, positions_in_front, step_angles, velocities_toward
from followcam.kinematics import position_in_front, velocity_toward
from followcam.vector import Vector3


def test_normalize_angles_matches_scalar() -> None:
    angles = np.array([-540.0, -180.0, -0.5, 0.0, 180.0, 181.0, 725.0, 1e9])
    expected = [normalize_angle(float(angle)) for angle in angles]
    result = normalize_angles(angles)
    assert result.tolist() == pytest.approx(expected)
    assert np.all(result > -180.0) and np.all(result <= 180.0)


def test_step_angles_matches_scalar_stepper() -> None:
    rng = np.random.default_rng(7)
    current = rng.uniform(-1000.0, 1000.0, size=(64, 2))
    target = rng.uniform(-1000.0, 1000.0, size=(64, 2))
    result = step_angles(current, target, 32.0)

    assert result.shape == (64, 2)
    for row in range(64):
        for axis in range(2):
            expected = step_axis(float(current[row, axis]), float(target[row, axis]), 32.0)
            assert result[row, axis] == pytest.approx(expected)


def test_step_angles_handles_snap_and_freeze_cases() -> None:
    current = np.array([[10.0, 170.0], [10.0, 10.0]])
    target = np.array([[10.0001, -170.0], [50.0, 10.0]])
    stepped = step_angles(current, target, 20.0)
    assert stepped[0, 0] == pytest.approx(10.0001)
    assert stepped[0, 1] == pytest.approx(170.0 + 20.0 * 20.0 / 180.0)

    frozen = step_angles(current[1], target[1], 0.0)
    assert frozen.tolist() == [10.0, 10.0]


def test_step_angles_broadcasts_a_shared_target() -> None:
    current = np.array([[0.0, 0.0], [0.0, 90.0]])
    result = step_angles(current, [0.0, 90.0], 32.0)
    assert result[0].tolist() == pytest.approx([0.0, 16.0])
    assert result[1].tolist() == [0.0, 90.0]


def test_velocities_toward_matches_scalar() -> None:
    starts = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [5.0, 5.0, 5.0]])
    ends = np.array([[4.0, -6.0, 8.0], [3.0, 4.0, 12.0], [5.0, 5.0, 5.0]])
    for duration in (0.01, 0.0, 2.5):
        result = velocities_toward(starts, ends, duration)
        for row in range(len(starts)):
            expected = velocity_toward(Vector3.from_iter(starts[row]), Vector3.from_iter(ends[row]), duration)
            assert result[row].tolist() == pytest.approx(list(expected.as_tuple()))
    assert velocities_toward(starts, ends, 1.0)[2].tolist() == [0.0, 0.0, 0.0]


def test_positions_in_front_matches_scalar() -> None:
    positions = np.array([[0.0, 0.0, 0.0], [100.0, 50.0, 10.0]])
    yaws = np.array([0.0, 180.0])
    result = positions_in_front(positions, yaws, -110.0, 90.0)
    for row in range(2):
        expected = position_in_front(Vector3.from_iter(positions[row]), float(yaws[row]), -110.0, 90.0)
        assert result[row].tolist() == pytest.approx(list(expected.as_tuple()))


def test_batch_rejects_wrong_component_count() -> None:
    with pytest.raises(ValueError):
        step_angles(np.zeros((4, 3)), np.zeros((4, 3)), 32.0)
    with pytest.raises(ValueError):
        velocities_toward(np.zeros((2, 2)), np.zeros((2, 2)), 1.0)


def test_velocities_toward_keeps_extreme_displacements_finite() -> None:
    starts = np.zeros((2, 3))
    ends = np.array([[1e-200, 0.0, 0.0], [1e200, -1e200, 1e200]])
    result = velocities_toward(starts, ends, 1.0)
    assert np.all(np.isfinite(result))
    assert result.ravel().tolist() == pytest.approx(ends.ravel().tolist(), rel=1e-12, abs=0.0)
