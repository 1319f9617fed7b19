"""Random point clouds for demos and the HTTP API."""

from typing import List, Optional

import numpy as np

from ..exceptions import InvalidInputError
from .geometry import Point, as_points


def generate_points(count: int, width: float, height: float,
                    seed: Optional[int] = None) -> List[Point]:
    """
    Generate points uniformly distributed over ``[0, width) x [0, height)``.

    Args:
        count: Number of points, at least 1
        width: Area width
        height: Area height
        seed: Seed for reproducible clouds; None draws fresh entropy

    Returns:
        List of generated points
    """
    if count <= 0:
        raise InvalidInputError(f"Point count must be positive, got {count}")
    if width <= 0 or height <= 0:
        raise InvalidInputError(f"Area must have positive size, got {width}x{height}")

    rng = np.random.default_rng(seed)
    coords = rng.random((count, 2)) * np.array([width, height])
    return as_points(coords)
