from __future__ import annotations

import math

import numpy as np
import pytest

from portfolio3d.model.motion import (
    BackgroundStyle, MeshTransform, PointerPosition, mesh_transform, radial_gradient, transform_matrix
)


@pytest.mark.parametrize("t", [0.0, 0.016, 1.0, 2.5, 10.0, 123.456, 1e4])
def test_mesh_transform_follows_sine_formula(t: float) -> None:
    transform = mesh_transform(t)
    assert transform.rotation_x == pytest.approx(math.sin(t / 4) / 2)
    assert transform.rotation_y == pytest.approx(math.sin(t / 2) / 2)
    assert transform.position_y == pytest.approx(math.sin(t) / 10)


def test_mesh_transform_is_deterministic() -> None:
    assert mesh_transform(7.25) == mesh_transform(7.25)
    assert [mesh_transform(3.0) for _ in range(5)] == [mesh_transform(3.0)] * 5


def test_mesh_transform_at_zero_is_identity() -> None:
    assert mesh_transform(0.0) == MeshTransform(0.0, 0.0, 0.0)
    np.testing.assert_allclose(transform_matrix(mesh_transform(0.0)), np.eye(4))


def test_transform_matrix_translates_and_rotates() -> None:
    transform = MeshTransform(rotation_x=0.0, rotation_y=math.pi / 2, position_y=0.25)
    matrix = transform_matrix(transform)

    # +X rotated a quarter turn about Y ends up on -Z, then lifted by 0.25
    point = matrix @ np.array([1.0, 0.0, 0.0, 1.0])
    np.testing.assert_allclose(point, [0.0, 0.25, -1.0, 1.0], atol=1e-12)


def test_transform_matrix_rotation_is_orthonormal() -> None:
    rotation = transform_matrix(mesh_transform(5.0))[:3, :3]
    np.testing.assert_allclose(rotation @ rotation.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(rotation) == pytest.approx(1.0)


@pytest.mark.parametrize("x, y", [(0, 0), (120, 45), (1919, 1079), (10.5, 3.25)])
def test_gradient_contains_radius_and_coordinates(x: float, y: float) -> None:
    descriptor = radial_gradient(PointerPosition(x, y))
    assert "600px" in descriptor
    assert f"at {x}px {y}px," in descriptor


def test_gradient_full_descriptor() -> None:
    assert radial_gradient(PointerPosition(120.0, 45.0)) == (
        "radial-gradient(600px at 120px 45px, rgba(29, 78, 216, 0.15), transparent 80%)"
    )


def test_background_style_defaults_to_origin() -> None:
    style = BackgroundStyle()
    assert style.center == PointerPosition(0.0, 0.0)
    assert style.descriptor() == radial_gradient(PointerPosition())


def test_pointer_position_finiteness() -> None:
    assert PointerPosition(1.0, 2.0).is_finite()
    assert not PointerPosition(float("nan"), 2.0).is_finite()
    assert not PointerPosition(1.0, float("inf")).is_finite()
