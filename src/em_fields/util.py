# MIT License (see LICENSE)
"""
Utility functions for component storage and text formatting.

Field components are kept as plain floats and exposed as float64 numpy
arrays of shape (3,). Formatting mirrors the default stream formatting
of a C++ iostream (six significant digits, shortest of fixed/scientific),
which is what Python's ``%g`` produces.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs wherever a component vector is expected.
    """
    return np.array(x, dtype=np.float64)


def fmt_scalar(value: float) -> str:
    """Format a scalar with six significant digits, e.g. 0, 100000, 4e-05."""
    return f"{float(value):g}"


def fmt_components(components) -> str:
    """Format three components as ``(x, y, z)``."""
    x, y, z = components
    return f"({fmt_scalar(x)}, {fmt_scalar(y)}, {fmt_scalar(z)})"


def add_components(a, b) -> tuple[float, float, float]:
    """Element-wise sum of two component vectors, returned as plain floats."""
    x, y, z = f64(a) + f64(b)
    return float(x), float(y), float(z)
