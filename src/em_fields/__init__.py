# MIT License (see LICENSE)
"""
em_fields - Electric and magnetic field samples from textbook laws.

This package wraps two closed-form field magnitudes in small
three-component field objects that can be added and printed.

Main entry points:
    - FieldSample: Plain (x, y, z) field components.
    - ElectricField: Components plus a Gauss's Law magnitude (N/C).
    - MagneticField: Components plus an Ampere's Law magnitude (T).
    - run_demo: The fixed console demonstration.

Submodules:
    - core: Gauss's Law and Ampere's Law evaluators.
    - report: Console and buffered output adapters.

Example:
    from em_fields import ElectricField

    e = ElectricField(0.0, 1e5, 1e3)
    e.compute_field(charge=1e-6, distance=0.05)
    print(e.describe())
"""
from .constants import EPSILON_0, MU_0
from .types import FieldSample, ElectricField, MagneticField, FieldModel, describe_field
from .demo import run_demo

__all__ = [
    # Constants
    "EPSILON_0",
    "MU_0",
    # Field kinds
    "FieldSample",
    "ElectricField",
    "MagneticField",
    "FieldModel",
    "describe_field",
    # Demo
    "run_demo",
]
