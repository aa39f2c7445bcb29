# MIT License (see LICENSE)
"""
Core type definitions for electric and magnetic field samples.

Defines the fundamental data structures:
- FieldSample: three SI field components (x, y, z) with no derived data.
- ElectricField: components plus a magnitude from Gauss's Law (N/C).
- MagneticField: components plus a magnitude from Ampere's Law (T).

The three kinds share a shape, not a base class. FieldModel is the union
used for dispatch, and the derived descriptions compose the plain
component description explicitly.

Components are set at construction and never reassigned; addition builds
a new instance. A sum starts with calculated_magnitude = 0 because the
magnitudes of the operands say nothing about the magnitude of the sum
until it is recomputed.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .core.laws import gauss_point_charge, ampere_straight_wire
from .util import f64, fmt_scalar, fmt_components, add_components


# =============================================================================
# Plain Field Sample
# =============================================================================

@dataclass(frozen=True)
class FieldSample:
    """
    Three field components along x, y and z in SI units.

    FieldSample() is the zero field (0, 0, 0). Otherwise all three
    components must be given.
    """
    x: float | None = None
    y: float | None = None
    z: float | None = None

    def __post_init__(self) -> None:
        """Store components as plain Python floats."""
        given = [c is not None for c in (self.x, self.y, self.z)]
        if not any(given):
            object.__setattr__(self, "x", 0.0)
            object.__setattr__(self, "y", 0.0)
            object.__setattr__(self, "z", 0.0)
            return
        if not all(given):
            raise TypeError("FieldSample takes either zero or three components")
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @property
    def components(self) -> np.ndarray:
        """Components as a fresh float64 array [x, y, z]."""
        return f64((self.x, self.y, self.z))

    def describe(self) -> str:
        """Human-readable component line, e.g. 'Field components: (0, 1, 2)'."""
        return f"Field components: {fmt_components((self.x, self.y, self.z))}"


# =============================================================================
# Electric Field
# =============================================================================

@dataclass(frozen=True)
class ElectricField:
    """
    Electric field sample with a Gauss's Law magnitude.

    Attributes:
        x, y, z: Field components in N/C.
        calculated_magnitude: Result of the last compute_field() call in N/C.
                              Starts at 0 and is 0 for every sum.
    """
    x: float
    y: float
    z: float
    calculated_magnitude: float = field(default=0.0, init=False)

    unit = "N/C"

    def __post_init__(self) -> None:
        """Store components as plain Python floats."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @property
    def components(self) -> np.ndarray:
        """Components as a fresh float64 array [x, y, z]."""
        return f64((self.x, self.y, self.z))

    @property
    def sample(self) -> FieldSample:
        """The components alone, as a plain FieldSample."""
        return FieldSample(self.x, self.y, self.z)

    def compute_field(self, charge: float, distance: float) -> float:
        """
        Set calculated_magnitude from Gauss's Law, E = Q / (4π r² ε₀).

        Components are left untouched. A zero distance is not guarded
        and stores inf (or nan).

        Args:
            charge: Point charge Q in Coulombs.
            distance: Distance r from the charge in meters.

        Returns:
            The new calculated_magnitude.
        """
        object.__setattr__(self, "calculated_magnitude", gauss_point_charge(charge, distance))
        return self.calculated_magnitude

    def add(self, other: ElectricField) -> ElectricField:
        """Component-wise sum as a new, uncalculated ElectricField."""
        if not isinstance(other, ElectricField):
            raise TypeError(f"Cannot add {type(other).__name__} to ElectricField")
        return ElectricField(*add_components(self.components, other.components))

    def __add__(self, other):
        if not isinstance(other, ElectricField):
            return NotImplemented
        return self.add(other)

    def copy(self) -> ElectricField:
        """Independent copy keeping both components and calculated_magnitude."""
        out = ElectricField(self.x, self.y, self.z)
        object.__setattr__(out, "calculated_magnitude", self.calculated_magnitude)
        return out

    def describe(self) -> str:
        """Component line followed by the calculated magnitude line."""
        return (
            f"{self.sample.describe()}\n"
            f"Calculated Electric Field: {fmt_scalar(self.calculated_magnitude)} {self.unit}"
        )

    def format_components(self) -> str:
        """Components only, e.g. 'Electric Field components: (0, 1, 2)'."""
        return f"Electric Field components: {fmt_components((self.x, self.y, self.z))}"

    def __str__(self) -> str:
        return self.format_components()


# =============================================================================
# Magnetic Field
# =============================================================================

@dataclass(frozen=True)
class MagneticField:
    """
    Magnetic field sample with an Ampere's Law magnitude.

    Attributes:
        x, y, z: Field components in Tesla.
        calculated_magnitude: Result of the last compute_field() call in T.
                              Starts at 0 and is 0 for every sum.
    """
    x: float
    y: float
    z: float
    calculated_magnitude: float = field(default=0.0, init=False)

    unit = "T"

    def __post_init__(self) -> None:
        """Store components as plain Python floats."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @property
    def components(self) -> np.ndarray:
        """Components as a fresh float64 array [x, y, z]."""
        return f64((self.x, self.y, self.z))

    @property
    def sample(self) -> FieldSample:
        """The components alone, as a plain FieldSample."""
        return FieldSample(self.x, self.y, self.z)

    def compute_field(self, current: float, distance: float) -> float:
        """
        Set calculated_magnitude from Ampere's Law, B = μ₀ I / (2π r).

        Components are left untouched. A zero distance is not guarded
        and stores inf (or nan).

        Args:
            current: Wire current I in Amperes.
            distance: Perpendicular distance r from the wire in meters.

        Returns:
            The new calculated_magnitude.
        """
        object.__setattr__(self, "calculated_magnitude", ampere_straight_wire(current, distance))
        return self.calculated_magnitude

    def add(self, other: MagneticField) -> MagneticField:
        """Component-wise sum as a new, uncalculated MagneticField."""
        if not isinstance(other, MagneticField):
            raise TypeError(f"Cannot add {type(other).__name__} to MagneticField")
        return MagneticField(*add_components(self.components, other.components))

    def __add__(self, other):
        if not isinstance(other, MagneticField):
            return NotImplemented
        return self.add(other)

    def copy(self) -> MagneticField:
        """Independent copy keeping both components and calculated_magnitude."""
        out = MagneticField(self.x, self.y, self.z)
        object.__setattr__(out, "calculated_magnitude", self.calculated_magnitude)
        return out

    def describe(self) -> str:
        """Component line followed by the calculated magnitude line."""
        return (
            f"{self.sample.describe()}\n"
            f"Calculated Magnetic Field: {fmt_scalar(self.calculated_magnitude)} {self.unit}"
        )

    def format_components(self) -> str:
        """Components only, e.g. 'Magnetic Field components: (0, 1, 2)'."""
        return f"Magnetic Field components: {fmt_components((self.x, self.y, self.z))}"

    def __str__(self) -> str:
        return self.format_components()


# Union type for field dispatch
FieldModel = FieldSample | ElectricField | MagneticField


def describe_field(f: FieldModel) -> str:
    """
    Full description of any field kind.

    Plain samples give the component line only; electric and magnetic
    fields add their calculated magnitude line.

    Raises:
        TypeError: If f is not one of the FieldModel kinds.
    """
    if isinstance(f, (FieldSample, ElectricField, MagneticField)):
        return f.describe()
    raise TypeError(f"Unknown field type: {type(f)}")
