"""
Closed shapes built from curve segments

A shape owns an ordered sequence of edges (``Bezier`` segments). Queries are
answered by translating edges so the query point sits at the origin and
aggregating their axis intercepts.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .bezier import Bezier
from .core import CurveGeometryCore
from .curves import Line

logger = logging.getLogger(__name__)


class Shape(ABC):
    """Common interface of closed 2D shapes"""

    @abstractmethod
    def contains(self, position):
        """Check whether ``position`` lies inside the shape"""

    @abstractmethod
    def edges(self):
        """Boundary segments, in order"""

    @abstractmethod
    def bounds(self):
        """Axis-aligned rectangle enclosing the shape"""


class AAR(Shape):
    """
    Axis-aligned rectangle spanning ``min`` to ``max``

    Serves both as a bounding volume and as a four-edge shape. Bounds of an
    empty point set are the inverted rectangle ``min = +inf, max = -inf``,
    which contains nothing.
    """

    def __init__(self, min_corner=None, max_corner=None):
        """
        Create an axis-aligned rectangle

        Parameters:
        -----------
        min_corner : array-like, shape (2,), optional
            Lower corner, defaults to the origin
        max_corner : array-like, shape (2,), optional
            Upper corner, defaults to the origin
        """
        CurveGeometryCore.ensure_initialized()

        self._min = CurveGeometryCore.vector() if min_corner is None else CurveGeometryCore.as_point(min_corner)
        self._max = CurveGeometryCore.vector() if max_corner is None else CurveGeometryCore.as_point(max_corner)
        self._edges = [Line(), Line(), Line(), Line()]

    @property
    def min(self):
        """Get the lower corner as NumPy array"""
        return self._min.copy()

    @property
    def max(self):
        """Get the upper corner as NumPy array"""
        return self._max.copy()

    @property
    def size(self):
        """Get width and height as NumPy array"""
        return self._max - self._min

    @property
    def center(self):
        """Get the rectangle center as NumPy array"""
        return (self._min + self._max) * 0.5

    def set(self, other):
        """Copy the corners of another rectangle"""
        self._min[...] = other._min
        self._max[...] = other._max
        return self

    def set_from_center(self, pos, size):
        """
        Place the rectangle around a center point

        Parameters:
        -----------
        pos : array-like, shape (2,)
            Center point
        size : array-like, shape (2,)
            Full width and height
        """
        pos = CurveGeometryCore.as_point(pos)
        half = CurveGeometryCore.as_point(size) / 2.0
        self._min[...] = pos - half
        self._max[...] = pos + half
        return self

    def set_from_bounds(self, points):
        """
        Fit the rectangle to a set of points

        Parameters:
        -----------
        points : iterable of array-like, shape (2,)
            Points to enclose; an (n, 2) array or a curve also work
        """
        self._min[...] = np.inf
        self._max[...] = -np.inf
        for point in points:
            np.minimum(self._min, point, out=self._min)
            np.maximum(self._max, point, out=self._max)
        return self

    def contains(self, position):
        """Check whether ``position`` lies inside, edges included"""
        x, y = position[0], position[1]
        return bool(
            self._min[0] <= x <= self._max[0]
            and self._min[1] <= y <= self._max[1]
        )

    def edges(self):
        """
        The four boundary lines: top, right, bottom, left

        Endpoints are recomputed from the current corners on every call.
        """
        x0, y0 = self._min
        x1, y1 = self._max
        top, right, bottom, left = self._edges
        top.set((x0, y1), (x1, y1))
        right.set((x1, y1), (x1, y0))
        bottom.set((x1, y0), (x0, y0))
        left.set((x0, y0), (x0, y1))
        return list(self._edges)

    def bounds(self):
        return self

    def to_mpl_rectangle(self, **kwargs):
        """
        Convert to matplotlib Rectangle patch for quick plotting

        Parameters:
        -----------
        **kwargs
            Additional arguments passed to matplotlib.patches.Rectangle
            (e.g., facecolor, edgecolor, alpha, fill)
        """
        try:
            from matplotlib.patches import Rectangle as MPLRectangle
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_rectangle(). Install with: pip install matplotlib")

        width, height = self.size
        return MPLRectangle(self.min, width, height, **kwargs)

    def __repr__(self):
        return f"AAR(min={self._min}, max={self._max})"


class Contour(Shape):
    """
    Closed outline made of Bezier edges

    Edge ``i`` must end where edge ``i + 1`` starts, and the last edge must
    end where the first one starts.
    """

    def __init__(self, edges, tolerance=1e-6):
        """
        Create a contour

        Parameters:
        -----------
        edges : sequence of Bezier
            Boundary segments in order; the contour takes ownership
        tolerance : float
            Allowed gap between consecutive edge endpoints
        """
        edges = list(edges)
        if not edges:
            raise ValueError("Contour needs at least one edge")
        for edge in edges:
            if not isinstance(edge, Bezier):
                raise TypeError(f"Contour edges must be Bezier segments, got {type(edge)}")

        for index, edge in enumerate(edges):
            following = edges[(index + 1) % len(edges)]
            end = edge.point(edge.length() - 1)
            if not np.allclose(end, following.point(0), atol=tolerance):
                raise ValueError(
                    f"Contour is not closed: edge {index} ends at {end}, "
                    f"next edge starts at {following.point(0)}"
                )

        self._edges = edges
        logger.debug("Built contour with %d edges", len(edges))

    @classmethod
    def from_points(cls, points):
        """Closed polygon through ``points``, one Line per side"""
        points = [CurveGeometryCore.as_point(p) for p in points]
        if len(points) < 3:
            raise ValueError(f"Polygon must have at least 3 vertices, got {len(points)}")
        return cls(Line(a, b) for a, b in zip(points, points[1:] + points[:1]))

    def edges(self):
        return list(self._edges)

    def bounds(self, dest=None):
        """Rectangle enclosing every control point of every edge"""
        if dest is None:
            dest = AAR()
        return dest.set_from_bounds(p for edge in self._edges for p in edge)

    def contains(self, position):
        """
        Even-odd test along the +X ray from ``position``

        Each edge is split at its X-axis intercepts, so every piece lies
        entirely above or below the ray. A crossing is counted wherever the
        side changes to the right of ``position``; touching the ray without
        changing side does not count. Points exactly on the boundary may go
        either way.
        """
        position = CurveGeometryCore.as_point(position)
        roots = [0.0, 0.0, 0.0]
        probe = np.empty(2)

        # (side of the ray, x where the piece starts)
        pieces = []
        for edge in self._edges:
            shifted = edge.copy().translate(-position)
            count = shifted.intercepts_x(0, roots)
            cuts = sorted(t for t in roots[:count] if 0.0 < t < 1.0)
            breaks = [0.0] + cuts + [1.0]
            for start, stop in zip(breaks, breaks[1:]):
                shifted.position(0.5 * (start + stop), probe)
                side = np.sign(probe[1])
                if side == 0:
                    # Piece runs along the ray itself
                    continue
                shifted.position(start, probe)
                pieces.append((side, probe[0]))

        if not pieces:
            return False

        crossings = 0
        previous = pieces[-1][0]
        for side, x in pieces:
            if side != previous and x > 0:
                crossings += 1
            previous = side
        return crossings % 2 == 1

    def project(self, position):
        """
        Project ``position`` onto the nearest edge

        Returns:
        --------
        (int, float)
            Index of the chosen edge and the parameter on it
        """
        position = CurveGeometryCore.as_point(position)
        probe = np.empty(2)

        best = None
        for index, edge in enumerate(self._edges):
            t = edge.project(position)
            edge.position(t, probe)
            distance = np.hypot(*(probe - position))
            if best is None or distance < best[0]:
                best = (distance, index, t)
        return best[1], best[2]

    def to_mpl_path(self):
        """Convert the whole outline to a single closed matplotlib Path"""
        try:
            from matplotlib.path import Path as MPLPath
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_path(). Install with: pip install matplotlib")

        return MPLPath.make_compound_path(*(edge.to_mpl_path() for edge in self._edges))

    def to_mpl_patch(self, **kwargs):
        """
        Convert to matplotlib PathPatch for quick plotting

        Parameters:
        -----------
        **kwargs
            Additional arguments passed to matplotlib.patches.PathPatch
        """
        try:
            from matplotlib.patches import PathPatch
        except ImportError:
            raise ImportError("Matplotlib is required for to_mpl_patch(). Install with: pip install matplotlib")

        return PathPatch(self.to_mpl_path(), **kwargs)

    def __len__(self):
        return len(self._edges)

    def __repr__(self):
        return f"Contour({len(self._edges)} edges)"
