"""
3D Cube Scene (PyVista Wrapper)
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import numpy.typing as npt

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor
import pyvista as pv

from portfolio3d.config import (
    AMBIENT_INTENSITY, CAMERA_POSITION, CAMERA_VIEW_ANGLE, PAGE_COLOR, POINT_LIGHT_POSITION
)
from portfolio3d.controller.render_loop import RenderLoop
from portfolio3d.model.motion import MeshTransform, transform_matrix

logger = logging.getLogger(__name__)


def normal_colors(mesh: pv.PolyData) -> npt.NDArray[np.uint8]:
    """RGB per face from its normal (n * 0.5 + 0.5), like a normal material."""
    normals = np.asarray(mesh.cell_normals, dtype=float)
    return np.clip((normals * 0.5 + 0.5) * 255.0, 0, 255).astype(np.uint8)


class CubeSceneWidget(QWidget):
    """
    Fixed camera looking at one unit cube. The user may orbit the view;
    panning and zooming are disabled. The cube itself is moved only by the
    render loop through `apply_transform`.
    """

    def __init__(self, render_loop: RenderLoop, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.render_loop = render_loop

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        # --- Actors state ---
        self._cube_actor: Optional[pv.Actor] = None
        self._closed: bool = False

        self._init_plotter()
        self._init_lights()
        self._init_camera()
        self._init_interaction()
        self._add_cube()

        self.render_loop.set_target(self)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def apply_transform(self, transform: MeshTransform) -> bool:
        """Write the transform into the cube actor and present the frame."""
        if self._closed or self._cube_actor is None:
            return False
        self._cube_actor.user_matrix = transform_matrix(transform)
        self.plotter.render()
        return True

    # ------------------------------------------------------------------------------
    # Internal: Setup
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(PAGE_COLOR)

    def _init_lights(self) -> None:
        self.plotter.remove_all_lights()
        point_light = pv.Light(
            position=POINT_LIGHT_POSITION,
            focal_point=(0.0, 0.0, 0.0),
            light_type="scene light",
            positional=True,
        )
        self.plotter.add_light(point_light)

    def _init_camera(self) -> None:
        self.plotter.camera_position = [CAMERA_POSITION, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
        self.plotter.camera.view_angle = CAMERA_VIEW_ANGLE

    def _init_interaction(self) -> None:
        # Every button orbits; nothing pans or dollies
        self.plotter.enable_custom_trackball_style(
            left="rotate",
            shift_left="rotate",
            control_left="rotate",
            middle="rotate",
            right="rotate",
        )
        style = self.plotter.iren.interactor.GetInteractorStyle()
        if style is not None:
            style.SetMouseWheelMotionFactor(0.0)

    def _add_cube(self) -> None:
        cube = pv.Cube(center=(0.0, 0.0, 0.0), x_length=1.0, y_length=1.0, z_length=1.0)
        cube.cell_data["face_colors"] = normal_colors(cube)

        self._cube_actor = self.plotter.add_mesh(
            cube,
            scalars="face_colors",
            rgb=True,
            ambient=AMBIENT_INTENSITY,
            show_scalar_bar=False,
            pickable=False,
        )
        logger.debug("Cube actor added to scene.")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.shutdown()
        event.accept()

    def shutdown(self) -> None:
        """Detach from the render loop and release the VTK window. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self.render_loop.stop()
        if self.render_loop.target is self:
            self.render_loop.set_target(None)
        self._cube_actor = None
        try:
            self.plotter.close()
        except Exception as e:
            logger.warning(f"Failed to close plotter cleanly: {e}")
