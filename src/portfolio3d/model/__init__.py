"""
The MODEL layer contains pure data structures and math.
It has NO knowledge of the GUI (Qt) or the Visualization (PyVista).
It deals with portfolio content, its I/O and the animation formulas.
"""
