"""
Animation Formulas
==================
Pure functions behind the two animated layers of the window.

1. The cube: `mesh_transform(t)` maps elapsed seconds to a rotation/bob
   transform. It holds no state, so replaying the same `t` always yields the
   same transform.
2. The background: `radial_gradient(position)` maps the latest pointer
   position to a CSS-like radial-gradient descriptor and `BackgroundStyle`
   carries the same parameters for painting.

Note: This module should be pure Python/NumPy and should NOT import PySide6.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from portfolio3d.config import GRADIENT_FADE_STOP, GRADIENT_RADIUS_PX, GRADIENT_RGBA

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class PointerPosition:
    """Viewport coordinates in pixels, origin at the top-left corner."""
    x: float = 0.0
    y: float = 0.0

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class MeshTransform:
    rotation_x: float = 0.0  # rad
    rotation_y: float = 0.0  # rad
    position_y: float = 0.0


def mesh_transform(elapsed: float) -> MeshTransform:
    """
    Transform of the cube `elapsed` seconds after the scene clock started.

    rotation_x = sin(t/4)/2, rotation_y = sin(t/2)/2, position_y = sin(t)/10
    """
    return MeshTransform(
        rotation_x=math.sin(elapsed / 4) / 2,
        rotation_y=math.sin(elapsed / 2) / 2,
        position_y=math.sin(elapsed) / 10,
    )


def transform_matrix(transform: MeshTransform) -> npt.NDArray[np.float64]:
    """
    4x4 homogeneous matrix: translation along Y after an XYZ-order Euler
    rotation (R = Rx @ Ry @ Rz, with no rotation about Z).
    """
    cx, sx = math.cos(transform.rotation_x), math.sin(transform.rotation_x)
    cy, sy = math.cos(transform.rotation_y), math.sin(transform.rotation_y)

    rot_x = np.array([
        [1.0, 0.0, 0.0],
        [0.0, cx, -sx],
        [0.0, sx, cx],
    ])
    rot_y = np.array([
        [cy, 0.0, sy],
        [0.0, 1.0, 0.0],
        [-sy, 0.0, cy],
    ])

    matrix = np.eye(4)
    matrix[:3, :3] = rot_x @ rot_y
    matrix[1, 3] = transform.position_y
    return matrix


def _css_number(value: float) -> str:
    # 120.0 -> "120", 10.5 -> "10.5"
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class BackgroundStyle:
    """Radial gradient centred on the pointer, fading to transparent."""
    center: PointerPosition = PointerPosition()
    radius: int = GRADIENT_RADIUS_PX
    color: tuple[int, int, int, float] = GRADIENT_RGBA
    fade_stop: float = GRADIENT_FADE_STOP

    def descriptor(self) -> str:
        r, g, b, a = self.color
        return (
            f"radial-gradient({self.radius}px at "
            f"{_css_number(self.center.x)}px {_css_number(self.center.y)}px, "
            f"rgba({r}, {g}, {b}, {a}), transparent {_css_number(round(self.fade_stop * 100, 6))}%)"
        )


def radial_gradient(position: PointerPosition) -> str:
    """Gradient descriptor for a pointer at `position`."""
    return BackgroundStyle(center=position).descriptor()
