#!/usr/bin/env python3
"""
Basic usage examples for curvegeometry
"""

import numpy as np
from curvegeometry import AAR, Contour, Cubic, Line, Quadratic, rotation, translation


def example_curves():
    """Example evaluating curve segments"""
    print("=== Curve Example ===")

    cubic = Cubic([0.0, 0.0], [1.0, 3.0], [4.0, 3.0], [5.0, 0.0])
    print(f"Curve: {cubic}")

    for t in [0.0, 0.5, 1.0]:
        print(f"t={t:.1f} position={cubic.position(t)} tangent={cubic.tangent(t)}")

    # Where does the curve cross x = 2.5?
    roots = np.zeros(3)
    shifted = cubic.copy().translate([-2.5, 0.0])
    count = shifted.intercepts_y(0, roots)
    print(f"Crosses x=2.5 at t={roots[:count]}")

    return cubic


def example_projection():
    """Example projecting points onto a line"""
    print("\n=== Projection Example ===")

    line = Line([0.0, 0.0], [10.0, 0.0])
    for query in [[3.0, 7.0], [15.0, 0.0], [-2.0, 1.0]]:
        t = line.project(query)
        print(f"Point {query} projects to t={t:.2f} -> {line.position(t)}")


def example_shapes():
    """Example using bounds and contours"""
    print("\n=== Shape Example ===")

    box = AAR().set_from_bounds([[0, 0], [4, 2], [-1, 5]])
    print(f"Bounds: {box}")
    print(f"Contains (2, 2): {box.contains([2, 2])}")

    blob = Contour([
        Line([0.0, 0.0], [2.0, 0.0]),
        Quadratic([2.0, 0.0], [4.0, 1.0], [2.0, 2.0]),
        Line([2.0, 2.0], [0.0, 2.0]),
        Line([0.0, 2.0], [0.0, 0.0]),
    ])
    for query in [[1.0, 1.0], [2.5, 1.0], [3.5, 1.0]]:
        print(f"Contour contains {query}: {blob.contains(query)}")

    blob_bounds = blob.bounds()
    print(f"Contour bounds: {blob_bounds}")

    return box, blob


def example_transforms():
    """Example moving a curve with a homogeneous matrix"""
    print("\n=== Transform Example ===")

    quad = Quadratic([0.0, 0.0], [1.0, 2.0], [2.0, 0.0])
    quad.transform_position(translation(5.0, 5.0) @ rotation(np.pi / 4))
    print(f"Transformed: {quad}")


def plot_examples():
    """Plot the curves and shapes"""
    import matplotlib.pyplot as plt

    print("\n=== Plotting Examples ===")

    cubic = example_curves()
    box, blob = example_shapes()

    fig, ax = plt.subplots(figsize=(6, 6))
    samples = np.array([cubic.position(t) for t in np.linspace(0.0, 1.0, 64)])
    ax.plot(samples[:, 0], samples[:, 1], 'b-', linewidth=2, label='Cubic')
    ax.plot(*cubic.control_points.T, 'ro--', markersize=4, label='Control points')
    ax.add_patch(box.to_mpl_rectangle(fill=False, edgecolor='g', label='AAR'))
    ax.add_patch(blob.to_mpl_patch(fill=False, edgecolor='m', label='Contour'))
    ax.set_aspect('equal')
    ax.autoscale()
    ax.grid(True)
    ax.legend()

    plt.tight_layout()
    plt.savefig('curvegeometry_examples.png', dpi=150, bbox_inches='tight')
    print("Saved plot as 'curvegeometry_examples.png'")
    plt.show()


if __name__ == "__main__":
    # Run examples
    example_curves()
    example_projection()
    example_shapes()
    example_transforms()

    # Create plots if matplotlib is available
    try:
        plot_examples()
    except ImportError:
        print("Matplotlib not available - skipping plots")
        print("Install with: pip install matplotlib")
