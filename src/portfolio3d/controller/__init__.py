"""
Controllers
===========
Qt objects that own the live state of the window: the pointer cell, the
background tween and the per-frame clock of the 3D scene.

Note: Controllers may import PySide6 but should NOT import PyVista.
"""
