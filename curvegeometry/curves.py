"""
Line, quadratic and cubic Bezier segments

Each segment knows how to:

- interpolate its control points with the Bernstein basis,
- differentiate itself by interpolating the scaled forward differences of its
  control points with the next lower degree,
- rewrite one axis of itself as a power-basis polynomial and hand it to the
  root solvers in ``roots.py``.
"""

import logging

import numpy as np

from .bezier import Bezier
from .core import CurveGeometryCore
from .roots import solve_cubic, solve_linear, solve_quadratic

logger = logging.getLogger(__name__)


class Line(Bezier):
    """Degree 1 segment from ``start`` to ``end``"""

    LENGTH = 2
    _MPL_CODE = "LINETO"

    @staticmethod
    def interpolate(p0, p1, t, out=None):
        """Evaluate ``(1-t)*P0 + t*P1``"""
        nt = 1.0 - t
        return CurveGeometryCore.write(
            nt * np.asarray(p0) + t * np.asarray(p1), out
        )

    @staticmethod
    def coefficients(start, end):
        """Power-basis coefficients ``(c0, c1)`` of a 1D linear Bezier"""
        return start, end - start

    @staticmethod
    def solve(start, end, index, dest):
        """Roots of the 1D linear Bezier ``(start, end)``"""
        return solve_linear(*Line.coefficients(start, end), index, dest)

    @property
    def start(self):
        return self._points[0]

    @property
    def end(self):
        return self._points[1]

    def position(self, t, out=None):
        return Line.interpolate(self._points[0], self._points[1], t, out)

    def derivative(self, t, out=None):
        # Constant along the segment
        return CurveGeometryCore.write(self._points[1] - self._points[0], out)

    def intercepts_x(self, index, dest):
        return Line.solve(self._points[0, 1], self._points[1, 1], index, dest)

    def intercepts_y(self, index, dest):
        return Line.solve(self._points[0, 0], self._points[1, 0], index, dest)


class Quadratic(Bezier):
    """Degree 2 segment with a single ``control`` point"""

    LENGTH = 3
    _MPL_CODE = "CURVE3"

    @staticmethod
    def interpolate(p0, p1, p2, t, out=None):
        """Evaluate ``(1-t)^2*P0 + 2(1-t)t*P1 + t^2*P2``"""
        nt = 1.0 - t
        ntnt = nt * nt
        ntt2 = nt * t * 2.0
        tt = t * t
        return CurveGeometryCore.write(
            ntnt * np.asarray(p0) + ntt2 * np.asarray(p1) + tt * np.asarray(p2), out
        )

    @staticmethod
    def coefficients(start, control, end):
        """Power-basis coefficients ``(c0, c1, c2)`` of a 1D quadratic Bezier"""
        return start, (control - start) * 2.0, start - control * 2.0 + end

    @staticmethod
    def solve(start, control, end, index, dest):
        """Roots of the 1D quadratic Bezier ``(start, control, end)``"""
        c0, c1, c2 = Quadratic.coefficients(start, control, end)
        if c2 == 0:
            # Evenly spaced control values: the axis is really linear
            logger.debug("Quadratic leading coefficient is zero, solving as linear")
            return solve_linear(c0, c1, index, dest)
        return solve_quadratic(c0, c1, c2, index, dest)

    @property
    def start(self):
        return self._points[0]

    @property
    def control(self):
        return self._points[1]

    @property
    def end(self):
        return self._points[2]

    def position(self, t, out=None):
        p = self._points
        return Quadratic.interpolate(p[0], p[1], p[2], t, out)

    def derivative(self, t, out=None):
        p = self._points
        return Line.interpolate((p[1] - p[0]) * 2.0, (p[2] - p[1]) * 2.0, t, out)

    def intercepts_x(self, index, dest):
        p = self._points
        return Quadratic.solve(p[0, 1], p[1, 1], p[2, 1], index, dest)

    def intercepts_y(self, index, dest):
        p = self._points
        return Quadratic.solve(p[0, 0], p[1, 0], p[2, 0], index, dest)


class Cubic(Bezier):
    """Degree 3 segment with two control points ``control_a`` and ``control_b``"""

    LENGTH = 4
    _MPL_CODE = "CURVE4"

    @staticmethod
    def interpolate(p0, p1, p2, p3, t, out=None):
        """Evaluate ``(1-t)^3*P0 + 3(1-t)^2t*P1 + 3(1-t)t^2*P2 + t^3*P3``"""
        nt = 1.0 - t
        ntnt = nt * nt
        ntntnt = ntnt * nt
        tt = t * t
        ttt = tt * t
        ntntt3 = ntnt * t * 3.0
        nttt3 = nt * tt * 3.0
        return CurveGeometryCore.write(
            ntntnt * np.asarray(p0)
            + ntntt3 * np.asarray(p1)
            + nttt3 * np.asarray(p2)
            + ttt * np.asarray(p3),
            out,
        )

    @staticmethod
    def coefficients(start, control_a, control_b, end):
        """Power-basis coefficients ``(c0, c1, c2, c3)`` of a 1D cubic Bezier"""
        return (
            start,
            (control_a - start) * 3.0,
            (start - 2.0 * control_a + control_b) * 3.0,
            -start + (control_a - control_b) * 3.0 + end,
        )

    @staticmethod
    def solve(start, control_a, control_b, end, index, dest):
        """Roots of the 1D cubic Bezier ``(start, control_a, control_b, end)``"""
        c0, c1, c2, c3 = Cubic.coefficients(start, control_a, control_b, end)
        if c3 == 0:
            logger.debug("Cubic leading coefficient is zero, solving as quadratic")
            if c2 == 0:
                return solve_linear(c0, c1, index, dest)
            return solve_quadratic(c0, c1, c2, index, dest)
        return solve_cubic(c0, c1, c2, c3, index, dest)

    @property
    def start(self):
        return self._points[0]

    @property
    def control_a(self):
        return self._points[1]

    @property
    def control_b(self):
        return self._points[2]

    @property
    def end(self):
        return self._points[3]

    def position(self, t, out=None):
        p = self._points
        return Cubic.interpolate(p[0], p[1], p[2], p[3], t, out)

    def derivative(self, t, out=None):
        p = self._points
        return Quadratic.interpolate(
            (p[1] - p[0]) * 3.0,
            (p[2] - p[1]) * 3.0,
            (p[3] - p[2]) * 3.0,
            t,
            out,
        )

    def intercepts_x(self, index, dest):
        p = self._points
        return Cubic.solve(p[0, 1], p[1, 1], p[2, 1], p[3, 1], index, dest)

    def intercepts_y(self, index, dest):
        p = self._points
        return Cubic.solve(p[0, 0], p[1, 0], p[2, 0], p[3, 0], index, dest)
