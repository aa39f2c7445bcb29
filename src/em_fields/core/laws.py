# MIT License (see LICENSE)
"""
Closed-form field magnitude laws.

This module evaluates the two textbook field magnitudes used by the
field models:
- Gauss's Law for a point charge:        E = Q / (4π r² ε₀)
- Ampere's Law for a long straight wire: B = μ₀ I / (2π r)

Inputs are not validated. Arithmetic is done in numpy float64 with
floating-point errors suppressed, so a zero distance yields inf (or nan
for a zero source) instead of raising ZeroDivisionError.

Reference:
    Gauss's law: https://en.wikipedia.org/wiki/Gauss%27s_law
    Ampere's law: https://en.wikipedia.org/wiki/Amp%C3%A8re%27s_circuital_law
"""
from __future__ import annotations

import numpy as np

from ..constants import EPSILON_0, MU_0
from ..log import get_logger

logger = get_logger(__name__)


def gauss_point_charge(charge: float, distance: float) -> float:
    """
    Electric field magnitude at a distance from a point charge.

    Implements E = Q / (4π r² ε₀).

    Args:
        charge: Source charge Q in Coulombs.
        distance: Distance r from the charge in meters.

    Returns:
        Field magnitude in N/C. inf or nan when distance == 0.
    """
    q = np.float64(charge)
    r = np.float64(distance)
    with np.errstate(divide="ignore", invalid="ignore"):
        e = q / (4 * np.pi * r * r * EPSILON_0)
    logger.debug("gauss_point_charge Q=%g r=%g -> E=%g", q, r, e)
    return float(e)


def ampere_straight_wire(current: float, distance: float) -> float:
    """
    Magnetic field magnitude at a distance from a long straight wire.

    Implements B = μ₀ I / (2π r).

    Args:
        current: Wire current I in Amperes.
        distance: Perpendicular distance r from the wire in meters.

    Returns:
        Field magnitude in Tesla. inf or nan when distance == 0.
    """
    i = np.float64(current)
    r = np.float64(distance)
    with np.errstate(divide="ignore", invalid="ignore"):
        b = (MU_0 * i) / (2 * np.pi * r)
    logger.debug("ampere_straight_wire I=%g r=%g -> B=%g", i, r, b)
    return float(b)
