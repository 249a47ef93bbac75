"""
Shared behaviour of 2D Bezier curve segments

Concrete segments (see ``curves.py``) provide the required primitives:
``position``, ``derivative``, ``intercepts_x`` and ``intercepts_y``. This
module builds everything else on top of them: tangents, normals, projection,
transforms and conversions.

# Conventions
- Control points live in one owned ``(n, 2)`` array; ``point(i)`` hands out
  a view, so writing through it moves the curve.
- Evaluation methods take an optional ``out`` array, numpy style. The result
  is written into ``out`` when given, otherwise a new array is returned.
- ``t`` is never clamped; values outside ``[0, 1]`` extrapolate.
"""

from abc import ABC, abstractmethod

import numpy as np

from .core import CurveGeometryCore, normalize, perpendicular
from .transforms import transform_directions, transform_positions


class Bezier(ABC):
    """Base class for Line, Quadratic and Cubic segments"""

    LENGTH = 0
    _MPL_CODE = None

    def __init__(self, *points):
        """
        Create a curve segment

        Parameters:
        -----------
        *points : array-like, shape (2,)
            Exactly ``LENGTH`` control points, or none for a curve collapsed
            at the origin
        """
        CurveGeometryCore.ensure_initialized()

        if not points:
            self._points = np.zeros((self.LENGTH, 2), dtype=CurveGeometryCore.dtype)
        elif len(points) == self.LENGTH:
            self._points = np.array(
                [CurveGeometryCore.as_point(p) for p in points],
                dtype=CurveGeometryCore.dtype,
            )
        else:
            raise ValueError(
                f"{type(self).__name__} needs {self.LENGTH} control points, got {len(points)}"
            )

    @classmethod
    def from_coordinates(cls, *coordinates):
        """Create a curve from flat ``x0, y0, x1, y1, ...`` coordinates"""
        if len(coordinates) != 2 * cls.LENGTH:
            raise ValueError(
                f"{cls.__name__} needs {2 * cls.LENGTH} coordinates, got {len(coordinates)}"
            )
        return cls(*np.reshape(coordinates, (cls.LENGTH, 2)))

    def length(self):
        """Number of control points"""
        return self.LENGTH

    def __len__(self):
        return self.LENGTH

    def point(self, index):
        """
        Get a control point by index

        The returned array is a view into the curve: writing to it changes
        the curve.

        Raises:
        -------
        IndexError
            If ``index`` is outside ``[0, length())``
        """
        if not 0 <= index < self.LENGTH:
            raise IndexError(
                f"Expected index in range [0-{self.LENGTH - 1}] but received: {index}"
            )
        return self._points[index]

    def __iter__(self):
        for index in range(self.LENGTH):
            yield self._points[index]

    @property
    def control_points(self):
        """Get all control points as an (n, 2) NumPy array copy"""
        return self._points.copy()

    def set(self, *points):
        """
        Overwrite the control point values in place

        Accepts either another curve of the same type or ``LENGTH`` points.
        """
        if len(points) == 1 and isinstance(points[0], Bezier):
            other = points[0]
            if type(other) is not type(self):
                raise TypeError(
                    f"Cannot set {type(self).__name__} from {type(other).__name__}"
                )
            self._points[...] = other._points
            return self

        if len(points) != self.LENGTH:
            raise ValueError(
                f"{type(self).__name__} needs {self.LENGTH} control points, got {len(points)}"
            )
        for index, point in enumerate(points):
            self._points[index] = CurveGeometryCore.as_point(point)
        return self

    def copy(self):
        """Independent curve with the same control points"""
        return type(self)(*self._points)

    @abstractmethod
    def position(self, t, out=None):
        """
        Interpolate between the control points at ``t``

        ``t = 0`` gives the start point and ``t = 1`` the end point.
        """

    @abstractmethod
    def derivative(self, t, out=None):
        """Evaluate the derivative curve at ``t``"""

    @abstractmethod
    def intercepts_x(self, index, dest):
        """
        Find where the curve crosses the X axis, i.e. where y(t) = 0

        Parameters:
        -----------
        index : int
            Position in ``dest`` of the first root
        dest : mutable sequence of float
            Receives the real roots; must hold ``length() - 1`` entries
            from ``index``

        Returns:
        --------
        int
            Number of roots written
        """

    @abstractmethod
    def intercepts_y(self, index, dest):
        """Find where the curve crosses the Y axis, i.e. where x(t) = 0"""

    def tangent(self, t, out=None):
        """
        Unit direction of the curve at ``t``

        Where the derivative vanishes (a degenerate curve) the result is
        [nan, nan].
        """
        return normalize(self.derivative(t, out), out)

    def normal_ccw(self, t, out=None):
        """Tangent rotated +90 degrees: (1, 0) becomes (0, 1)"""
        return perpendicular(self.tangent(t, out), out)

    def normal_cw(self, t, out=None):
        """Tangent rotated -90 degrees: (1, 0) becomes (0, -1)"""
        normal = self.normal_ccw(t, out)
        np.negative(normal, out=normal)
        return normal

    def project(self, position):
        """
        Parameter at which ``position`` projects onto the curve

        The curve is moved so that ``position`` sits at the origin, and the
        smallest root of x(t) = 0 is taken as the projection. The result is
        clamped to [0, 1]; with no root it clamps to 1. This matches the true
        closest point only for queries perpendicular to an X-aligned segment.

        Parameters:
        -----------
        position : array-like, shape (2,)
            Query point

        Returns:
        --------
        float
            Interpolation factor in [0, 1]
        """
        position = CurveGeometryCore.as_point(position)
        shifted = self.copy().translate(-position)

        roots = [0.0] * (self.LENGTH - 1)
        count = shifted.intercepts_y(0, roots)

        proj = np.inf
        for root in roots[:count]:
            if root < proj:
                proj = root
        return float(max(min(proj, 1.0), 0.0))

    def translate(self, offset):
        """Move every control point by ``offset`` in place"""
        self._points += CurveGeometryCore.as_point(offset)
        return self

    def transform_position(self, matrix):
        """
        Apply an affine transform to the control points in place

        Parameters:
        -----------
        matrix : array-like, shape (2, 3) or (3, 3)
            Affine or homogeneous transform
        """
        transform_positions(matrix, self._points, out=self._points)
        return self

    def transform_direction(self, matrix):
        """Apply the linear part of a transform, ignoring translation"""
        transform_directions(matrix, self._points, out=self._points)
        return self

    def bounds(self, dest=None):
        """
        Axis-aligned bounds of the control points

        By the convex hull property this always encloses the curve.
        """
        from .shapes import AAR
        if dest is None:
            dest = AAR()
        return dest.set_from_bounds(self._points)

    def to_mpl_path(self):
        """
        Convert to a matplotlib Path for plotting

        Returns:
        --------
        matplotlib.path.Path
            Single-segment path using the matching Bezier path code

        Example:
        --------
        >>> import matplotlib.pyplot as plt
        >>> from matplotlib.patches import PathPatch
        >>> curve = Quadratic([0, 0], [1, 2], [2, 0])
        >>> fig, ax = plt.subplots()
        >>> ax.add_patch(PathPatch(curve.to_mpl_path(), fill=False))
        >>> plt.show()
        """
        try:
            from matplotlib.path import Path as MPLPath
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_path(). Install with: pip install matplotlib")

        code = getattr(MPLPath, self._MPL_CODE)
        codes = [MPLPath.MOVETO] + [code] * (self.LENGTH - 1)
        return MPLPath(self.control_points, codes)

    def to_torch_tensor(self):
        """
        Convert control points to a PyTorch tensor of shape (n, 2)

        Example:
        --------
        >>> Line([0, 0], [10, 5]).to_torch_tensor()
        tensor([[ 0.,  0.],
                [10.,  5.]], dtype=torch.float64)
        """
        try:
            import torch
        except ImportError:
            raise ImportError("PyTorch is required for to_torch_tensor(). Install with: pip install torch")

        return torch.tensor(self.control_points)

    def __repr__(self):
        points = ", ".join(str(p) for p in self._points)
        return f"{type(self).__name__}({points})"
