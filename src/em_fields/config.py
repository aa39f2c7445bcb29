# MIT License (see LICENSE)
"""
Inputs for the console demonstration.

All values are fixed literals in SI units; nothing is read from files,
arguments or the environment.
"""
from __future__ import annotations
from dataclasses import dataclass

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class DemoConfig:
    """
    Literal inputs of the demo run.

    Attributes:
        electric: Components of the first electric field (N/C).
        electric_addend: Components of the electric field added to it.
        magnetic: Components of the first magnetic field (T).
        magnetic_addend: Components of the magnetic field added to it.
        charge: Point charge Q for Gauss's Law (C).
        current: Wire current I for Ampere's Law (A).
        distance: Distance r used for both laws (m).
    """
    electric: Vec3 = (0.0, 1e5, 1e3)
    electric_addend: Vec3 = (1e4, 2e4, 3e4)
    magnetic: Vec3 = (1e-4, 2e-4, 3e-4)
    magnetic_addend: Vec3 = (2e-4, 3e-4, 1e-4)
    charge: float = 1e-6
    current: float = 10.0
    distance: float = 0.05
