"""
curvegeometry

Parametric-curve algebra for 2D Bezier segments of degree 1 to 3, built on
NumPy arrays.

This package provides:
- Line, Quadratic and Cubic segments with position, derivative, tangent and
  normal evaluation
- Closed-form real root solvers for linear, quadratic and cubic equations
- Axis intercepts and intercept-based projection of a point onto a curve
- Axis-aligned rectangles and closed contours with containment queries
- Affine transforms of curves (2x3 or 3x3 matrices)

# Quick Start
```python
from curvegeometry import Cubic, AAR, Contour, Line
import numpy as np

curve = Cubic([0, 0], [1, 2], [3, 2], [4, 0])
midpoint = curve.position(0.5)
tangent = curve.tangent(0.5)

roots = np.zeros(3)
count = curve.intercepts_x(0, roots)   # where y(t) == 0

box = AAR().set_from_bounds([[0, 0], [4, 2], [-1, 5]])
box.contains([2, 2])  # True

square = Contour.from_points([[0, 0], [4, 0], [4, 4], [0, 4]])
square.contains([2, 2])  # True
```

# Features
- Caller-owned root buffers: solvers write into ``dest`` from ``index``
- Degenerate geometry yields NaN/inf instead of raising
- Optional matplotlib and PyTorch conversions
"""

from .core import CurveGeometryCore, normalize, perpendicular
from .roots import solve_linear, solve_quadratic, solve_cubic
from .bezier import Bezier
from .curves import Line, Quadratic, Cubic
from .shapes import Shape, AAR, Contour
from .transforms import (
    as_affine,
    transform_positions,
    transform_directions,
    translation,
    rotation,
    scaling,
)

__version__ = "0.1.0"
__all__ = [
    "CurveGeometryCore",
    "normalize",
    "perpendicular",
    "solve_linear",
    "solve_quadratic",
    "solve_cubic",
    "Bezier",
    "Line",
    "Quadratic",
    "Cubic",
    "Shape",
    "AAR",
    "Contour",
    "as_affine",
    "transform_positions",
    "transform_directions",
    "translation",
    "rotation",
    "scaling",
]
