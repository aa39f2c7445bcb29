import numpy as np
from em_fields.constants import EPSILON_0, MU_0
from em_fields.core.laws import gauss_point_charge, ampere_straight_wire

def test_gauss_point_charge_accuracy():
    """
    Point charge (Gauss's Law):
      E = Q / (4 pi r^2 eps0)
    """
    for Q, r in [(1e-6, 0.05), (-3e-9, 1.5), (2.5e-4, 1e-3), (1.0, 10.0)]:
        e = gauss_point_charge(Q, r)
        e_exp = Q / (4 * np.pi * r * r * EPSILON_0)
        err = abs(e - e_exp) / abs(e_exp)
        print("E", e, "exp", e_exp, "relerr", err)
        assert err < 1e-9

def test_ampere_straight_wire_accuracy():
    """
    Long straight wire (Ampere's Law):
      B = mu0 I / (2 pi r)
    """
    for I, r in [(10.0, 0.05), (-2.0, 0.3), (1e3, 2.0), (0.5, 1e-4)]:
        b = ampere_straight_wire(I, r)
        b_exp = (MU_0 * I) / (2 * np.pi * r)
        err = abs(b - b_exp) / abs(b_exp)
        print("B", b, "exp", b_exp, "relerr", err)
        assert err < 1e-9

def test_mu0_definition():
    # mu0 = 4 pi 1e-7 makes B = 2e-7 I / r
    assert abs(ampere_straight_wire(10.0, 0.05) - 4e-5) < 1e-18
    assert abs(MU_0 - 1.2566370614359173e-06) < 1e-20

def test_zero_distance_is_not_guarded():
    """A zero distance produces inf (or nan) instead of raising."""
    assert np.isinf(gauss_point_charge(1e-6, 0.0))
    assert np.isinf(ampere_straight_wire(10.0, 0.0))
    assert np.isnan(gauss_point_charge(0.0, 0.0))
    assert np.isnan(ampere_straight_wire(0.0, 0.0))

def test_results_are_plain_floats():
    assert type(gauss_point_charge(1e-6, 0.05)) is float
    assert type(ampere_straight_wire(10.0, 0.05)) is float
