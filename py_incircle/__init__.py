"""
py_incircle: star polygons from point clouds and their largest inscribed circle.
"""

__version__ = "0.1.0"
