#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Statistical Mechanics Models
================================================================================

Project:        Physical Chemistry Studio
Module:         statistical.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Closed-form partition-function models behind the statistical mechanics
studios:

- Einstein (quantum harmonic) oscillator:  U and Cv versus T
- Two-level system:                        populations and the Schottky anomaly
- Rigid rotor:                             level populations, Z_rot, S_rot
- 2D ideal gas:                            λ, ln Z, F, U, P, S

Oscillator and two-level results are reduced (k_B = 1 or normalized by
k_B·θ). The rigid rotor works in SI units.
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numba import jit

from .constants import AMU, ANGSTROM, AVOGADRO, BOLTZMANN, PLANCK, SPEED_OF_LIGHT_CM


# Above x = θ/T = 100 the oscillator heat capacity is zero to double precision
OSCILLATOR_X_CUTOFF = 100.0

# Schottky peak: k_B·T_peak / ΔE at the maximum of x²eˣ/(1 + eˣ)²
SCHOTTKY_PEAK_RATIO = 0.417

MAX_ROTATIONAL_J = 50


def _require_positive(**values: float) -> None:
    for label, value in values.items():
        if not np.isfinite(value) or value <= 0:
            raise ValueError(f"{label} must be positive, got {value}")


# =============================================================================
# Einstein oscillator
# =============================================================================

@dataclass
class OscillatorCurves:
    """Reduced energy U/(k·θ) and heat capacity Cv/k with their limits."""
    temperature: np.ndarray
    x: np.ndarray
    energy: np.ndarray
    energy_high_t: np.ndarray
    energy_low_t: np.ndarray
    heat_capacity: np.ndarray
    heat_capacity_high_t: np.ndarray
    heat_capacity_low_t: np.ndarray


def oscillator_energy(x: np.ndarray) -> np.ndarray:
    """U/(k·θ) = 1/2 + 1/(eˣ - 1), with x = θ/T."""
    x = np.asarray(x, dtype=float)
    with np.errstate(over="ignore"):
        return 0.5 + 1.0 / np.expm1(x)


def oscillator_heat_capacity(x: np.ndarray) -> np.ndarray:
    """Cv/k = x²eˣ/(eˣ - 1)², zero for x ≥ 100."""
    x = np.asarray(x, dtype=float)
    safe_x = np.minimum(x, OSCILLATOR_X_CUTOFF)
    cv = safe_x ** 2 * np.exp(safe_x) / np.expm1(safe_x) ** 2
    return np.where(x < OSCILLATOR_X_CUTOFF, cv, 0.0)


def einstein_oscillator_curves(theta: float, max_temperature: float) -> OscillatorCurves:
    """
    Sweep the Einstein oscillator from T = 1 K to max_temperature.

    Uses 100 steps of max_temperature/100, starting at 1 K to avoid T = 0.

    Args:
        theta: Characteristic (Einstein) temperature θ_E in K
        max_temperature: Upper end of the sweep in K (>= 1)

    Returns:
        OscillatorCurves
    """
    _require_positive(theta=theta, max_temperature=max_temperature)
    if max_temperature < 1.0:
        raise ValueError(f"max_temperature must be at least 1 K, got {max_temperature}")

    step = max_temperature / 100.0
    temperature = np.arange(1.0, max_temperature + 0.5 * step, step)
    temperature = temperature[temperature <= max_temperature]
    x = theta / temperature

    return OscillatorCurves(
        temperature=temperature,
        x=x,
        energy=oscillator_energy(x),
        energy_high_t=temperature / theta,
        energy_low_t=np.full_like(temperature, 0.5),
        heat_capacity=oscillator_heat_capacity(x),
        heat_capacity_high_t=np.ones_like(temperature),
        heat_capacity_low_t=x ** 2 * np.exp(-x),
    )


def is_quantum_regime(theta: float, max_temperature: float) -> bool:
    """True when θ/T > 2 at the middle of the sweep (quantum effects dominate)."""
    return theta / (max_temperature / 2.0) > 2.0


# =============================================================================
# Two-level system
# =============================================================================

@dataclass
class TwoLevelCurves:
    """Partition function, populations and Cv of a two-level system."""
    temperature: np.ndarray
    partition_function: np.ndarray
    ground_population: np.ndarray
    excited_population: np.ndarray
    heat_capacity: np.ndarray

    def schottky_peak(self) -> Tuple[float, float]:
        """(T, Cv) of the sampled heat-capacity maximum."""
        i = int(np.argmax(self.heat_capacity))
        return float(self.temperature[i]), float(self.heat_capacity[i])


def two_level_curves(
    delta_e: float,
    max_temperature: float,
    n_points: int = 100,
    kb: float = 1.0
) -> TwoLevelCurves:
    """
    Sweep a two-level system over T_i = i·T_max/N, i = 1..N.

    Args:
        delta_e: Energy gap ΔE
        max_temperature: Highest temperature
        n_points: Number of samples
        kb: Boltzmann constant in the chosen units

    Returns:
        TwoLevelCurves
    """
    _require_positive(delta_e=delta_e, max_temperature=max_temperature, kb=kb)
    if n_points < 1:
        raise ValueError(f"n_points must be at least 1, got {n_points}")

    temperature = np.arange(1, n_points + 1) * (max_temperature / n_points)
    x = delta_e / (kb * temperature)
    boltzmann = np.exp(-x)
    z = 1.0 + boltzmann

    return TwoLevelCurves(
        temperature=temperature,
        partition_function=z,
        ground_population=1.0 / z,
        excited_population=boltzmann / z,
        heat_capacity=kb * x ** 2 * boltzmann / z ** 2,
    )


def schottky_peak_temperature(delta_e: float, kb: float = 1.0) -> float:
    """Theoretical Schottky peak, T ≈ 0.417·ΔE/k_B."""
    return SCHOTTKY_PEAK_RATIO * delta_e / kb


# =============================================================================
# Rigid rotor
# =============================================================================

@dataclass
class RotorLevels:
    """Per-level data for J = 0..J_max."""
    j: np.ndarray
    degeneracy: np.ndarray
    energy: np.ndarray              # J
    energy_wavenumber: np.ndarray   # cm⁻¹
    boltzmann_factor: np.ndarray
    population: np.ndarray


@dataclass
class RotorProperties:
    """Rigid-rotor molecular and thermodynamic properties."""
    moment_of_inertia: float        # kg·m²
    rotational_constant: float      # J
    rotational_constant_wavenumber: float  # cm⁻¹
    rotational_temperature: float   # K
    symmetry_number: int
    partition_function: float
    molar_entropy: float            # J/(mol·K)
    levels: RotorLevels

    @property
    def most_populated_j(self) -> int:
        return int(self.levels.j[np.argmax(self.levels.population)])


def moment_of_inertia(mass1_amu: float, mass2_amu: float, bond_length_angstrom: float) -> float:
    """I = μr² for a diatomic, in kg·m²."""
    _require_positive(mass1=mass1_amu, mass2=mass2_amu, bond_length=bond_length_angstrom)
    m1 = mass1_amu * AMU
    m2 = mass2_amu * AMU
    mu = m1 * m2 / (m1 + m2)
    r = bond_length_angstrom * ANGSTROM
    return mu * r * r


def rotational_constant(inertia: float) -> float:
    """B = h²/(8π²I) in joules."""
    _require_positive(inertia=inertia)
    return PLANCK ** 2 / (8.0 * math.pi ** 2 * inertia)


def joules_to_wavenumbers(energy: float) -> float:
    """E/(h·c) in cm⁻¹."""
    return energy / (PLANCK * SPEED_OF_LIGHT_CM)


def rotational_temperature(b_joules: float) -> float:
    """θ_rot = B/k_B in K."""
    return b_joules / BOLTZMANN


@jit(nopython=True, cache=True)
def _rotor_level_sums(b_joules: float, kt: float, j_max: int) -> Tuple[float, float]:
    """Σ g·e^(-E/kT) and Σ E·g·e^(-E/kT) over J = 0..j_max."""
    z_sum = 0.0
    e_sum = 0.0
    for j in range(j_max + 1):
        energy = b_joules * j * (j + 1)
        weight = (2 * j + 1) * math.exp(-energy / kt)
        z_sum += weight
        e_sum += energy * weight
    return z_sum, e_sum


def rigid_rotor(
    mass1_amu: float,
    mass2_amu: float,
    bond_length_angstrom: float,
    temperature: float,
    homonuclear: bool = False,
    j_max: int = MAX_ROTATIONAL_J
) -> RotorProperties:
    """
    Rigid-rotor thermodynamics from an explicit sum over levels.

    The symmetry number σ = 2 for homonuclear molecules divides the
    partition function; level populations are normalized over all
    J = 0..j_max so that they sum to one. Homonuclear molecules use
    mass1 for both atoms.

    Args:
        mass1_amu: Mass of atom 1 (amu)
        mass2_amu: Mass of atom 2 (amu), ignored if homonuclear
        bond_length_angstrom: Bond length (Å)
        temperature: Temperature (K)
        homonuclear: Identical nuclei (σ = 2)
        j_max: Highest J included in the sum

    Returns:
        RotorProperties
    """
    _require_positive(temperature=temperature)
    if homonuclear:
        mass2_amu = mass1_amu

    inertia = moment_of_inertia(mass1_amu, mass2_amu, bond_length_angstrom)
    b_joules = rotational_constant(inertia)
    sigma = 2 if homonuclear else 1
    kt = BOLTZMANN * temperature

    z_sum, e_sum = _rotor_level_sums(b_joules, kt, j_max)
    z_rot = z_sum / sigma
    mean_energy = e_sum / z_sum
    entropy = BOLTZMANN * (math.log(z_rot) + mean_energy / kt)

    j = np.arange(j_max + 1)
    degeneracy = 2 * j + 1
    energy = b_joules * j * (j + 1)
    boltzmann_factor = np.exp(-energy / kt)

    levels = RotorLevels(
        j=j,
        degeneracy=degeneracy,
        energy=energy,
        energy_wavenumber=energy / (PLANCK * SPEED_OF_LIGHT_CM),
        boltzmann_factor=boltzmann_factor,
        population=degeneracy * boltzmann_factor / z_sum,
    )

    return RotorProperties(
        moment_of_inertia=inertia,
        rotational_constant=b_joules,
        rotational_constant_wavenumber=joules_to_wavenumbers(b_joules),
        rotational_temperature=rotational_temperature(b_joules),
        symmetry_number=sigma,
        partition_function=z_rot,
        molar_entropy=entropy * AVOGADRO,
        levels=levels,
    )


def rotational_lines(b_wavenumber: float, n_lines: int = 10) -> np.ndarray:
    """Absorption line positions 2B(J + 1) in cm⁻¹ for J → J + 1, J = 0..n-1."""
    return 2.0 * b_wavenumber * np.arange(1, n_lines + 1)


# =============================================================================
# 2D ideal gas
# =============================================================================

@dataclass
class IdealGas2D:
    """Canonical-ensemble results for N particles in a 2D box (reduced units)."""
    thermal_wavelength: float
    ln_partition_function: float
    helmholtz_energy: float
    internal_energy: float
    pressure: float
    entropy: float


def ideal_gas_2d(
    temperature: float,
    particle_count: int,
    width: float,
    height: float = 300.0,
    mass: float = 1.0,
    kb: float = 1.0,
    planck: float = 10.0
) -> IdealGas2D:
    """
    Thermodynamics of a 2D ideal gas from its partition function.

    λ = h/√(2πmkT),  Z₁ = A/λ²,  ln Z = N ln Z₁ - (N ln N - N)  (Stirling)
    F = -kT ln Z,  U = NkT,  P = NkT/A,  S = (U - F)/T

    Args:
        temperature: Temperature
        particle_count: Number of particles N
        width: Box width (the "volume" slider)
        height: Box height
        mass: Particle mass
        kb: Boltzmann constant
        planck: Planck constant (scaled for the studio)

    Returns:
        IdealGas2D
    """
    _require_positive(
        temperature=temperature, particle_count=particle_count,
        width=width, height=height, mass=mass
    )

    n = particle_count
    area = width * height
    wavelength = planck / math.sqrt(2.0 * math.pi * mass * kb * temperature)
    z1 = area / wavelength ** 2
    ln_z = n * math.log(z1) - (n * math.log(n) - n)

    helmholtz = -kb * temperature * ln_z
    internal = n * kb * temperature

    return IdealGas2D(
        thermal_wavelength=wavelength,
        ln_partition_function=ln_z,
        helmholtz_energy=helmholtz,
        internal_energy=internal,
        pressure=n * kb * temperature / area,
        entropy=(internal - helmholtz) / temperature,
    )
