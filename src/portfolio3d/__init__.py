"""portfolio3d: a personal portfolio window with an animated 3D cube."""
