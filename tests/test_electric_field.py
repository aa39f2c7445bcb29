import dataclasses

import numpy as np
import pytest
from em_fields.constants import EPSILON_0
from em_fields.types import ElectricField, MagneticField

def test_initial_description():
    """Scenario: E(0, 1e5, 1e3) before any calculation."""
    e = ElectricField(0, 1e5, 1e3)
    assert e.calculated_magnitude == 0.0
    assert e.describe() == (
        "Field components: (0, 100000, 1000)\n"
        "Calculated Electric Field: 0 N/C"
    )

def test_compute_field_gauss():
    """
    Gauss's Law for a point charge:
      E = Q / (4 pi r^2 eps0),  Q = 1e-6 C, r = 0.05 m
    """
    e = ElectricField(0, 1e5, 1e3)
    Q, r = 1e-6, 0.05
    out = e.compute_field(Q, r)

    e_exp = Q / (4 * np.pi * r * r * EPSILON_0)
    err = abs(e.calculated_magnitude - e_exp) / e_exp
    print("E", e.calculated_magnitude, "exp", e_exp, "relerr", err)

    assert err < 1e-9
    assert out == e.calculated_magnitude
    assert e.calculated_magnitude == pytest.approx(3.595e6, rel=1e-3)
    # components untouched
    assert np.array_equal(e.components, [0.0, 1e5, 1e3])
    assert e.describe().splitlines()[1] == "Calculated Electric Field: 3.59502e+06 N/C"

def test_compute_field_zero_distance():
    e = ElectricField(1, 2, 3)
    e.compute_field(1e-6, 0.0)
    assert np.isinf(e.calculated_magnitude)
    assert e.describe().endswith("Calculated Electric Field: inf N/C")

def test_add_components_and_reset():
    """Scenario: calculated E(0, 1e5, 1e3) + E(1e4, 2e4, 3e4)."""
    e1 = ElectricField(0, 1e5, 1e3)
    e1.compute_field(1e-6, 0.05)
    e2 = ElectricField(1e4, 2e4, 3e4)
    e2.compute_field(5e-6, 0.2)

    e3 = e1.add(e2)
    assert e3 is not e1 and e3 is not e2
    assert e3.components == pytest.approx([1e4, 1.2e5, 3.1e4])
    assert e3.calculated_magnitude == 0.0
    # operands unchanged
    assert np.array_equal(e1.components, [0.0, 1e5, 1e3])
    assert e1.calculated_magnitude > 0

def test_add_is_commutative():
    a = ElectricField(1.5, -2.25, 3e3)
    b = ElectricField(-7.0, 0.125, 4e-3)
    assert np.array_equal(a.add(b).components, b.add(a).components)

def test_plus_operator():
    e3 = ElectricField(0, 1e5, 1e3) + ElectricField(1e4, 2e4, 3e4)
    assert isinstance(e3, ElectricField)
    assert e3.components == pytest.approx([1e4, 1.2e5, 3.1e4])

def test_add_rejects_other_kinds():
    e = ElectricField(1, 2, 3)
    with pytest.raises(TypeError):
        e.add(MagneticField(1, 2, 3))
    with pytest.raises(TypeError):
        e + MagneticField(1, 2, 3)

def test_text_form_excludes_magnitude():
    e = ElectricField(1e4, 1.2e5, 3.1e4)
    e.compute_field(1e-6, 0.05)
    assert e.format_components() == "Electric Field components: (10000, 120000, 31000)"
    assert str(e) == e.format_components()

def test_copy_keeps_magnitude():
    e = ElectricField(1, 2, 3)
    e.compute_field(1e-6, 0.05)
    c = e.copy()
    assert c == e
    assert c is not e
    c.compute_field(2e-6, 0.05)
    assert c.calculated_magnitude != e.calculated_magnitude

def test_components_are_immutable():
    """Components are fixed at construction; only compute_field changes the magnitude."""
    e = ElectricField(0, 1e5, 1e3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.x = 42.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.calculated_magnitude = 1.0
    e.compute_field(1e-6, 0.05)
    assert (e.x, e.y, e.z) == (0.0, 1e5, 1e3)
    assert e.calculated_magnitude > 0
