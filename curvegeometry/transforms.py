"""
Coordinate transformation utilities

Affine transforms are accepted in two layouts:

- ``(2, 3)``: ``[[m00, m01, tx], [m10, m11, ty]]``, the compact 3x2 affine form
- ``(3, 3)``: a homogeneous matrix whose bottom row is ignored

# Key Functions
- `transform_positions()`: apply the full affine map to points
- `transform_directions()`: apply only the linear part (no translation)
- `translation()`, `rotation()`, `scaling()`: build homogeneous matrices
"""

import numpy as np

from .core import CurveGeometryCore


def as_affine(matrix):
    """
    Reduce a transform to its (2, 3) affine part

    Raises:
    -------
    ValueError
        If the matrix is neither (2, 3) nor (3, 3)
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape == (3, 3):
        return matrix[:2]
    if matrix.shape != (2, 3):
        raise ValueError(f"Transform matrix must be 2x3 or 3x3, got shape {matrix.shape}")
    return matrix


def transform_positions(matrix, points, out=None):
    """
    Apply an affine transform to one point or an (n, 2) array of points

    ``out`` may alias ``points``; the result is computed before writing.
    """
    affine = as_affine(matrix)
    points = np.asarray(points)
    result = points @ affine[:, :2].T + affine[:, 2]
    return CurveGeometryCore.write(result, out)


def transform_directions(matrix, points, out=None):
    """Apply the linear part of an affine transform, ignoring translation"""
    affine = as_affine(matrix)
    points = np.asarray(points)
    result = points @ affine[:, :2].T
    return CurveGeometryCore.write(result, out)


def translation(tx, ty):
    """Homogeneous translation matrix"""
    return np.array([
        [1.0, 0.0, tx],
        [0.0, 1.0, ty],
        [0.0, 0.0, 1.0],
    ])


def rotation(angle):
    """Homogeneous counter-clockwise rotation by ``angle`` radians"""
    cos_angle = np.cos(angle)
    sin_angle = np.sin(angle)
    return np.array([
        [cos_angle, -sin_angle, 0.0],
        [sin_angle, cos_angle, 0.0],
        [0.0, 0.0, 1.0],
    ])


def scaling(sx, sy=None):
    """Homogeneous scaling matrix; uniform when ``sy`` is omitted"""
    if sy is None:
        sy = sx
    return np.array([
        [sx, 0.0, 0.0],
        [0.0, sy, 0.0],
        [0.0, 0.0, 1.0],
    ])
