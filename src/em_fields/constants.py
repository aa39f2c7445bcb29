# MIT License (see LICENSE)
"""
Physical constants used by the field models.

These constants use SI units and represent the vacuum properties
needed for Gauss's Law and Ampere's Law evaluations.
"""
from __future__ import annotations

import numpy as np

# Permittivity of free space (electric constant), ε₀
# Value: 8.854187817 × 10⁻¹² F/m (CODATA 2014)
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?ep0
EPSILON_0: float = 8.854187817e-12

# Permeability of free space (magnetic constant), μ₀ = 4π × 10⁻⁷ H/m.
# Uses the exact pre-2019 SI definition rather than the measured value.
MU_0: float = 4 * np.pi * 1e-7
