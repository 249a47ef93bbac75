"""
Closed-form real root solvers for linear, quadratic and cubic equations

All solvers share one calling convention:

- Coefficients are given in power-basis order, constant term first
  (``c0 + c1*x + c2*x**2 + c3*x**3``), and the equation is normalized by
  the leading coefficient.
- Real roots are written into the caller-owned buffer ``dest`` starting at
  ``index``; the number of roots written is returned. Entries outside
  ``dest[index:index + count]`` are left untouched, so stale values beyond
  the returned count must not be read.

The caller guarantees ``len(dest) - index`` is at least the degree of the
equation.

Degenerate inputs are not guarded. Arithmetic runs with IEEE semantics, so a
zero leading coefficient yields inf/NaN roots (or no roots) instead of an
exception. Curve segments avoid that path by reducing the degree themselves.

# Examples
>>> roots = [0.0, 0.0, 0.0]
>>> solve_cubic(-6.0, 11.0, -6.0, 1.0, 0, roots)
3
>>> [float(round(r, 6)) for r in sorted(roots)]
[1.0, 2.0, 3.0]
"""

import numpy as np

CUBE_ROOT_EXPONENT = 1.0 / 3.0
SQRT_3 = np.sqrt(3.0)


def _cube_root(value):
    # Real cube root; a negative base would otherwise go complex or NaN
    if value >= 0:
        return value ** CUBE_ROOT_EXPONENT
    return -((-value) ** CUBE_ROOT_EXPONENT)


def solve_linear(c0, c1, index, dest):
    """
    Solve ``c0 + c1*x = 0``

    Parameters:
    -----------
    c0 : float
        Constant term
    c1 : float
        Linear coefficient
    index : int
        Position in ``dest`` of the first root
    dest : mutable sequence of float
        Receives the root

    Returns:
    --------
    int
        0 when ``c1`` is zero (parallel, no intercept), else 1
    """
    if c1 == 0:
        return 0
    dest[index] = -np.float64(c0) / c1
    return 1


def solve_quadratic(c0, c1, c2, index, dest):
    """
    Solve ``c2*x**2 + c1*x + c0 = 0``

    The larger root (``-B + sqrt(d)``) is written first.

    Returns:
    --------
    int
        2 for a positive discriminant, 1 for a zero discriminant, 0 otherwise
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        B = np.float64(c1) / c2
        C = np.float64(c0) / c2
        disc = B * B - 4.0 * C
        if disc > 0:
            disc = np.sqrt(disc)
            dest[index] = 0.5 * (-B + disc)
            dest[index + 1] = 0.5 * (-B - disc)
            return 2
        if disc == 0:
            dest[index] = -0.5 * B
            return 1
    return 0


def solve_cubic(c0, c1, c2, c3, index, dest):
    """
    Solve ``c3*x**3 + c2*x**2 + c1*x + c0 = 0`` by Cardano's method

    The normalized cubic is depressed by substituting ``x = y - C/3``, which
    removes the quadratic term and leaves ``y**3 + v0*y + v1 = 0``. The sign
    of ``disc = v1**2/4 + v0**3/27`` picks the branch:

    - ``disc > 0``: one real root, the sum of two real cube roots
    - ``disc < 0``: three real roots, from the trigonometric substitution
    - ``disc == 0``: a single and a double root, written once each

    Returns:
    --------
    int
        Number of roots written (1, 3 or 2 for the branches above, 0 when the
        discriminant is NaN)
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        A = np.float64(c0) / c3
        B = np.float64(c1) / c3
        C = np.float64(c2) / c3
        v0 = (3.0 * B - C * C) / 3.0
        v1 = (2.0 * C * C * C - 9.0 * C * B + 27.0 * A) / 27.0
        offset = C / 3.0
        half_v1 = 0.5 * v1
        disc = half_v1 * half_v1 + v0 * v0 * v0 / 27.0

        if disc > 0:
            disc = np.sqrt(disc)
            root = _cube_root(-half_v1 + disc) + _cube_root(-half_v1 - disc)
            dest[index] = root - offset
            return 1

        if disc < 0:
            dist = np.sqrt(-v0 / 3.0)
            angle = np.arctan2(np.sqrt(-disc), -half_v1) / 3.0
            cos = np.cos(angle)
            sin = SQRT_3 * np.sin(angle)
            dest[index] = 2.0 * dist * cos - offset
            dest[index + 1] = -dist * (cos + sin) - offset
            dest[index + 2] = -dist * (cos - sin) - offset
            return 3

        if disc == 0:
            temp = _cube_root(-half_v1)
            dest[index] = 2.0 * temp - offset
            dest[index + 1] = -temp - offset
            return 2
    return 0
