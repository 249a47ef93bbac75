"""
Core settings and vector helpers for curvegeometry
"""

import logging
import os

import numpy as np

logger = logging.getLogger(__name__)

SUPPORTED_DTYPES = {
    "float32": np.float32,
    "float64": np.float64,
}


class CurveGeometryCore:
    """Library-wide numeric settings shared by curves and shapes"""

    _initialized = False
    dtype = np.float64

    @classmethod
    def initialize(cls, dtype=None):
        """Select the storage dtype for control points and bounds"""
        if cls._initialized:
            return

        # Fall back to the environment, then to double precision
        if dtype is None:
            dtype = os.environ.get("CURVEGEOMETRY_DTYPE", "float64")

        if isinstance(dtype, str):
            if dtype not in SUPPORTED_DTYPES:
                raise ValueError(
                    f"Unsupported dtype {dtype!r}, expected one of {sorted(SUPPORTED_DTYPES)}"
                )
            dtype = SUPPORTED_DTYPES[dtype]
        elif np.dtype(dtype) not in [np.dtype(d) for d in SUPPORTED_DTYPES.values()]:
            raise ValueError(f"Unsupported dtype {dtype!r}")

        cls.dtype = np.dtype(dtype).type
        cls._initialized = True
        logger.debug("curvegeometry initialized with dtype %s", np.dtype(cls.dtype).name)

    @classmethod
    def ensure_initialized(cls):
        """Ensure settings are resolved"""
        if not cls._initialized:
            cls.initialize()

    @classmethod
    def reset(cls):
        """Forget the resolved settings so the next use re-reads them"""
        cls._initialized = False
        cls.dtype = np.float64

    @classmethod
    def as_point(cls, value):
        """Copy a point-like value into a new (2,) array"""
        cls.ensure_initialized()
        point = np.array(value, dtype=cls.dtype)
        if point.shape != (2,):
            raise ValueError(f"Point must be 2D, got shape {point.shape}")
        return point

    @classmethod
    def vector(cls, x=0.0, y=0.0):
        """Create a (2,) array from coordinates"""
        cls.ensure_initialized()
        return np.array([x, y], dtype=cls.dtype)

    @staticmethod
    def write(value, out=None):
        """Store value into out, or hand back a fresh array when out is None"""
        if out is None:
            return np.array(value, dtype=CurveGeometryCore.dtype)
        out[...] = value
        return out


def normalize(vector, out=None):
    """
    Scale a vector to unit length

    A zero vector has no direction; the result is [nan, nan] rather than
    an error.
    """
    vector = np.asarray(vector)
    with np.errstate(divide="ignore", invalid="ignore"):
        return CurveGeometryCore.write(vector / np.hypot(vector[0], vector[1]), out)


def perpendicular(vector, out=None):
    """Rotate a vector +90 degrees, so (1, 0) becomes (0, 1)"""
    x, y = vector[0], vector[1]
    return CurveGeometryCore.write((-y, x), out)
