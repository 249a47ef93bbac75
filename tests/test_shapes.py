#!/usr/bin/env python3
"""
Tests for AAR and Contour shapes
"""

import sys
import numpy as np
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from curvegeometry import AAR, Contour, Cubic, Line, Quadratic, Shape

# Cubic handle length for a quarter circle
KAPPA = 0.5522847498


def unit_circle():
    k = KAPPA
    return Contour([
        Cubic([1, 0], [1, k], [k, 1], [0, 1]),
        Cubic([0, 1], [-k, 1], [-1, k], [-1, 0]),
        Cubic([-1, 0], [-1, -k], [-k, -1], [0, -1]),
        Cubic([0, -1], [k, -1], [1, -k], [1, 0]),
    ])


def test_aar_from_bounds():
    """Test bounds of a point set"""
    box = AAR().set_from_bounds([[0, 0], [4, 2], [-1, 5]])

    assert np.allclose(box.min, [-1, 0])
    assert np.allclose(box.max, [4, 5])
    assert box.contains([2, 2])
    assert not box.contains([5, 5])
    print("✓ AAR from bounds test passed")


def test_aar_contains_is_inclusive():
    """Test points on the border count as inside"""
    box = AAR([0, 0], [4, 2])

    assert box.contains([0, 0])
    assert box.contains([4, 2])
    assert box.contains([4, 1])
    assert not box.contains([4.001, 1])
    assert not box.contains([2, -0.001])
    print("✓ AAR inclusive containment test passed")


def test_aar_from_center():
    """Test placing a rectangle around a center"""
    box = AAR().set_from_center([1, 2], [4, 6])

    assert np.allclose(box.min, [-1, -1])
    assert np.allclose(box.max, [3, 5])
    assert np.allclose(box.center, [1, 2])
    assert np.allclose(box.size, [4, 6])
    print("✓ AAR from center test passed")


def test_aar_empty_bounds_is_inverted():
    """Test bounds of no points keep the +inf/-inf sentinels"""
    box = AAR().set_from_bounds([])

    assert np.all(box.min == np.inf)
    assert np.all(box.max == -np.inf)
    assert not box.contains([0, 0])
    print("✓ AAR empty bounds test passed")


def test_aar_default_and_copy():
    """Test the default rectangle and set from another one"""
    box = AAR()
    assert np.allclose(box.min, [0, 0])
    assert np.allclose(box.max, [0, 0])

    other = AAR([1, 1], [2, 3])
    box.set(other)
    assert np.allclose(box.min, [1, 1])
    assert np.allclose(box.max, [2, 3])

    # min/max hand out copies
    box.min[0] = 50.0
    assert np.allclose(box.min, [1, 1])
    print("✓ AAR default and copy test passed")


def test_aar_corner_keywords():
    """Test corners can be passed by keyword"""
    box = AAR(min_corner=[-2, -1], max_corner=[2, 3])

    assert np.allclose(box.min, [-2, -1])
    assert np.allclose(box.max, [2, 3])
    assert np.allclose(AAR(max_corner=[1, 1]).min, [0, 0])
    print("✓ AAR corner keyword test passed")


def test_aar_edges():
    """Test the four edges run top, right, bottom, left"""
    box = AAR([0, 0], [4, 2])
    top, right, bottom, left = box.edges()

    assert np.allclose(top.control_points, [[0, 2], [4, 2]])
    assert np.allclose(right.control_points, [[4, 2], [4, 0]])
    assert np.allclose(bottom.control_points, [[4, 0], [0, 0]])
    assert np.allclose(left.control_points, [[0, 0], [0, 2]])
    assert all(isinstance(edge, Line) for edge in box.edges())
    print("✓ AAR edges test passed")


def test_aar_edges_idempotent():
    """Test repeated edges() calls agree on an unchanged rectangle"""
    box = AAR([-1, -2], [3, 4])
    first = [edge.control_points for edge in box.edges()]
    second = [edge.control_points for edge in box.edges()]

    for a, b in zip(first, second):
        assert np.array_equal(a, b)
    print("✓ AAR edges idempotence test passed")


def test_aar_edges_follow_updates():
    """Test edges are re-derived after the corners move"""
    box = AAR([0, 0], [1, 1])
    top = box.edges()[0]

    box.set_from_center([0, 0], [10, 10])
    assert np.allclose(box.edges()[0].control_points, [[-5, 5], [5, 5]])
    # the rectangle keeps owning the same Line objects
    assert box.edges()[0] is top
    print("✓ AAR edges update test passed")


def test_aar_is_its_own_bounds():
    """Test bounds() returns the rectangle itself"""
    box = AAR([0, 0], [1, 1])
    assert box.bounds() is box
    assert isinstance(box, Shape)
    print("✓ AAR bounds test passed")


def test_aar_bounds_from_curve():
    """Test a curve can be passed straight to set_from_bounds"""
    quad = Quadratic([0, 0], [2, 4], [4, 0])
    box = AAR().set_from_bounds(quad)

    assert np.allclose(box.min, [0, 0])
    assert np.allclose(box.max, [4, 4])
    print("✓ AAR from curve test passed")


def test_polygon_contains():
    """Test a square contour"""
    square = Contour.from_points([[0, 0], [4, 0], [4, 4], [0, 4]])

    assert len(square) == 4
    assert square.contains([2, 2])
    assert square.contains([0.5, 3.5])
    assert not square.contains([5, 2])
    assert not square.contains([-1, 2])
    assert not square.contains([2, 5])
    print("✓ Polygon containment test passed")


def test_concave_polygon_contains():
    """Test an L shaped contour"""
    shape = Contour.from_points([[0, 0], [4, 0], [4, 2], [2, 2], [2, 4], [0, 4]])

    assert shape.contains([1, 3])
    assert shape.contains([3, 1])
    assert shape.contains([1, 1])
    assert not shape.contains([3, 3])
    print("✓ Concave containment test passed")


def test_ray_through_vertex():
    """Test rays passing exactly through vertices"""
    diamond = Contour.from_points([[0, -2], [2, 0], [0, 2], [-2, 0]])

    # ray crosses the boundary at the right vertex
    assert diamond.contains([-1, 0])
    assert not diamond.contains([-3, 0])
    # ray only touches the top vertex
    assert not diamond.contains([-1, 2])
    print("✓ Vertex ray test passed")


def test_curved_contour_contains():
    """Test containment on a circle made of cubic edges"""
    circle = unit_circle()

    assert circle.contains([0, 0])
    assert circle.contains([0.5, 0.5])
    assert circle.contains([-0.3, -0.9])
    assert not circle.contains([0.9, 0.9])
    assert not circle.contains([2, 0])
    assert not circle.contains([0, -1.5])
    print("✓ Curved containment test passed")


def test_contour_with_bulging_edge():
    """Test a quadratic edge bulging outward from a square"""
    shape = Contour([
        Line([0, 0], [2, 0]),
        Quadratic([2, 0], [4, 1], [2, 2]),
        Line([2, 2], [0, 2]),
        Line([0, 2], [0, 0]),
    ])

    assert shape.contains([2.5, 1])
    assert shape.contains([1, 1])
    assert not shape.contains([3.5, 1])
    print("✓ Bulging edge test passed")


def test_contour_must_be_closed():
    """Test open outlines are rejected"""
    try:
        Contour([Line([0, 0], [1, 0]), Line([1, 0], [1, 1])])
    except ValueError:
        pass
    else:
        raise AssertionError("Open contour should fail")

    try:
        Contour([])
    except ValueError:
        pass
    else:
        raise AssertionError("Empty contour should fail")

    try:
        Contour.from_points([[0, 0], [1, 1]])
    except ValueError:
        pass
    else:
        raise AssertionError("Two point polygon should fail")
    print("✓ Contour validation test passed")


def test_contour_bounds():
    """Test contour bounds enclose every control point"""
    box = unit_circle().bounds()

    assert isinstance(box, AAR)
    assert np.allclose(box.min, [-1, -1])
    assert np.allclose(box.max, [1, 1])
    print("✓ Contour bounds test passed")


def test_contour_edges():
    """Test edges come back in order"""
    points = [[0, 0], [4, 0], [4, 4]]
    triangle = Contour.from_points(points)
    edges = triangle.edges()

    assert len(edges) == 3
    for edge, start in zip(edges, points):
        assert np.allclose(edge.start, start)
    print("✓ Contour edges test passed")


def test_contour_project():
    """Test projection picks the nearest edge"""
    square = Contour.from_points([[0, 0], [4, 0], [4, 4], [0, 4]])

    index, t = square.project([2, -1])
    assert index == 0
    assert np.isclose(t, 0.5)

    index, t = square.project([2, 5])
    assert index == 2
    assert np.isclose(t, 0.5)
    print("✓ Contour projection test passed")


def test_shapes_to_matplotlib():
    """Test conversion to matplotlib patches"""
    try:
        from matplotlib.patches import PathPatch, Rectangle as MPLRectangle
    except ImportError:
        print("⊘ Matplotlib not installed - skipping matplotlib tests")
        return

    patch = AAR([1, 2], [4, 6]).to_mpl_rectangle(fill=False)
    assert isinstance(patch, MPLRectangle)
    assert np.allclose(patch.get_xy(), [1, 2])
    assert np.isclose(patch.get_width(), 3.0)
    assert np.isclose(patch.get_height(), 4.0)

    patch = unit_circle().to_mpl_patch(fill=False)
    assert isinstance(patch, PathPatch)
    print("✓ Shapes to matplotlib test passed")


def main():
    print("Running shape tests...")
    print("=" * 60)

    try:
        test_aar_from_bounds()
        test_aar_contains_is_inclusive()
        test_aar_from_center()
        test_aar_empty_bounds_is_inverted()
        test_aar_default_and_copy()
        test_aar_corner_keywords()
        test_aar_edges()
        test_aar_edges_idempotent()
        test_aar_edges_follow_updates()
        test_aar_is_its_own_bounds()
        test_aar_bounds_from_curve()
        test_polygon_contains()
        test_concave_polygon_contains()
        test_ray_through_vertex()
        test_curved_contour_contains()
        test_contour_with_bulging_edge()
        test_contour_must_be_closed()
        test_contour_bounds()
        test_contour_edges()
        test_contour_project()
        test_shapes_to_matplotlib()

        print("=" * 60)
        print("✓ All tests passed!")
        return True

    except AssertionError as e:
        print(f"✗ Test failed: {e}")
        import traceback
        traceback.print_exc()
        return False


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
