"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers scattered
   throughout the views and controllers.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the bundled content JSON) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_CONTENT_PATH (str): Absolute path to the bundled portfolio content.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/portfolio3d/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_CONTENT_PATH: str = os.path.join(ASSETS_PATH, "content.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

# Window
VISIBLE_APP_NAME: str = "Portfolio"
WINDOW_SIZE: tuple[int, int] = (1100, 900)
CONTENT_MAX_WIDTH: int = 896  # px
PAGE_COLOR: str = "#030712"
TEXT_COLOR: str = "#f3f4f6"
MUTED_TEXT_COLOR: str = "#9ca3af"
ACCENT_TEXT_COLOR: str = "#60a5fa"

# Background gradient
GRADIENT_RADIUS_PX: int = 600
GRADIENT_RGBA: tuple[int, int, int, float] = (29, 78, 216, 0.15)
GRADIENT_FADE_STOP: float = 0.8
BACKGROUND_TWEEN_MS: int = 200

# 3D scene
SCENE_HEIGHT_PX: int = 300
CAMERA_POSITION: tuple[float, float, float] = (0.0, 0.0, 5.0)
CAMERA_VIEW_ANGLE: float = 75.0
AMBIENT_INTENSITY: float = 0.5
POINT_LIGHT_POSITION: tuple[float, float, float] = (10.0, 10.0, 10.0)
FALLBACK_REFRESH_RATE_HZ: float = 60.0

# Section entrance animation
SECTION_FADE_MS: int = 500
SKILL_STAGGER_MS: int = 100
