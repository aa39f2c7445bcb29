# MIT License (see LICENSE)
"""
Core field magnitude laws.

This subpackage provides:
    - gauss_point_charge: Electric field magnitude of a point charge.
    - ampere_straight_wire: Magnetic field magnitude around a straight wire.

Typical usage:
    from em_fields.core import gauss_point_charge

    e = gauss_point_charge(1e-6, 0.05)
"""
from .laws import gauss_point_charge, ampere_straight_wire

__all__ = [
    "gauss_point_charge",
    "ampere_straight_wire",
]
