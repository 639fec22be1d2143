#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Classical Thermodynamics Models
================================================================================

Project:        Physical Chemistry Studio
Module:         thermodynamics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module handles the macroscopic thermodynamics studios:
- Clausius-Clapeyron linearization of vapor pressure data (ln P vs 1/T)
- Gibbs energy minimization for 2 NO2 <=> N2O4
- Phase identification on a schematic water phase diagram
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .constants import CELSIUS_OFFSET, R, R_KJ


# =============================================================================
# Clausius-Clapeyron
# =============================================================================

@dataclass(frozen=True)
class VaporPressurePoint:
    """A measured vapor pressure."""
    t_celsius: float
    pressure: float        # Pa


# Ethanol vapor pressure (NIST)
ETHANOL_VAPOR_PRESSURE: List[VaporPressurePoint] = [
    VaporPressurePoint(-31.3, 133.3),       # ~1 mmHg
    VaporPressurePoint(-2.3, 1333.2),       # ~10 mmHg
    VaporPressurePoint(19.0, 5332.9),       # ~40 mmHg
    VaporPressurePoint(34.9, 13332.2),      # ~100 mmHg
    VaporPressurePoint(48.0, 26664.0),      # ~200 mmHg
    VaporPressurePoint(63.5, 53329.0),      # ~400 mmHg
    VaporPressurePoint(78.4, 101325.0),     # normal boiling point
    VaporPressurePoint(97.5, 202650.0),     # ~2 atm
]

# Literature ΔH_vap of ethanol at its boiling point
ETHANOL_HVAP_LITERATURE = 38.6  # kJ/mol

ANSWER_TOLERANCE_PERCENT = 5.0


@dataclass(frozen=True)
class LinearizedPoint:
    """A vapor pressure point in Clausius-Clapeyron coordinates."""
    t_celsius: float
    t_kelvin: float
    inverse_temperature: float     # 1/K
    ln_pressure: float


@dataclass(frozen=True)
class RegressionResult:
    """Least-squares fit of ln P = slope·(1/T) + intercept."""
    slope: float
    intercept: float
    r_squared: float
    count: int

    @property
    def enthalpy_of_vaporization(self) -> float:
        """ΔH_vap = -slope·R in J/mol."""
        return -self.slope * R

    def predict(self, inverse_temperature: np.ndarray) -> np.ndarray:
        return self.slope * np.asarray(inverse_temperature) + self.intercept


@dataclass(frozen=True)
class AnswerFeedback:
    """Result of checking a student's ΔH_vap."""
    correct: bool
    message: str
    error_percent: Optional[float] = None


def linearize(points: Sequence[VaporPressurePoint]) -> List[LinearizedPoint]:
    """Transform (t °C, P Pa) into (1/T, ln P)."""
    transformed = []
    for point in points:
        if point.pressure <= 0:
            raise ValueError(f"Vapor pressure must be positive, got {point.pressure}")
        t_k = point.t_celsius + CELSIUS_OFFSET
        transformed.append(LinearizedPoint(
            t_celsius=point.t_celsius,
            t_kelvin=t_k,
            inverse_temperature=1.0 / t_k,
            ln_pressure=math.log(point.pressure),
        ))
    return transformed


def linear_regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """
    Ordinary least squares from the running sums.

    Fewer than two points (or a degenerate x range) gives an all-zero fit.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    n = len(x)

    if n < 2:
        return RegressionResult(0.0, 0.0, 0.0, n)

    sum_x = np.sum(x)
    sum_y = np.sum(y)
    sum_xy = np.sum(x * y)
    sum_xx = np.sum(x * x)
    sum_yy = np.sum(y * y)

    denom = n * sum_xx - sum_x ** 2
    if denom == 0:
        return RegressionResult(0.0, 0.0, 0.0, n)

    slope = (n * sum_xy - sum_x * sum_y) / denom
    intercept = (sum_y - slope * sum_x) / n

    ss_y = n * sum_yy - sum_y ** 2
    r_squared = (n * sum_xy - sum_x * sum_y) ** 2 / (denom * ss_y) if ss_y > 0 else 1.0

    return RegressionResult(float(slope), float(intercept), float(r_squared), n)


def fit_clausius_clapeyron(
    points: Sequence[LinearizedPoint],
    selection: Optional[Tuple[int, int]] = None
) -> RegressionResult:
    """
    Fit ln P against 1/T over an inclusive index range.

    Args:
        points: Linearized data
        selection: (first, last) indices, inclusive; default all points

    Returns:
        RegressionResult
    """
    if selection is None:
        selection = (0, len(points) - 1)
    first, last = selection
    subset = list(points)[first:last + 1]

    return linear_regression(
        [p.inverse_temperature for p in subset],
        [p.ln_pressure for p in subset],
    )


def check_enthalpy_answer(
    answer: Union[str, float],
    fit: RegressionResult,
    tolerance_percent: float = ANSWER_TOLERANCE_PERCENT
) -> AnswerFeedback:
    """
    Grade a ΔH_vap answer in kJ/mol against the regression value.

    Args:
        answer: Student's value (kJ/mol), as typed
        fit: Current regression
        tolerance_percent: Relative error accepted as correct

    Returns:
        AnswerFeedback
    """
    try:
        value = float(answer)
    except (TypeError, ValueError):
        return AnswerFeedback(False, "Please enter a numeric value.")
    if math.isnan(value):
        return AnswerFeedback(False, "Please enter a numeric value.")

    actual = fit.enthalpy_of_vaporization / 1000.0
    if actual == 0:
        return AnswerFeedback(False, "Select at least two points to fit a line.")

    error = abs((value - actual) / actual) * 100.0

    if error < tolerance_percent:
        return AnswerFeedback(
            True,
            f"Excellent! Your value of {value:g} kJ/mol is within {error:.1f}% "
            f"of the regression value ({actual:.2f} kJ/mol).",
            error,
        )
    return AnswerFeedback(
        False,
        f"Not quite. Based on the current slope of {fit.slope:.0f}, the result "
        f"should be closer to {actual:.2f} kJ/mol. Check your sign or units.",
        error,
    )


# =============================================================================
# Gibbs energy minimization: 2 NO2 <=> N2O4
# =============================================================================

@dataclass(frozen=True)
class SpeciesData:
    """Standard formation enthalpy (kJ/mol) and entropy (kJ/(mol·K))."""
    name: str
    enthalpy: float
    entropy: float

    def chemical_potential(self, temperature: float) -> float:
        """μ° = H° - T·S° (H and S taken as constant in T)."""
        return self.enthalpy - temperature * self.entropy


NO2 = SpeciesData("NO2", 33.18, 0.240)
N2O4 = SpeciesData("N2O4", 9.16, 0.304)


class ReactionDirection(Enum):
    """Spontaneous direction at the current extent."""
    FORWARD = "Forward Spontaneous"
    REVERSE = "Reverse Spontaneous"
    EQUILIBRIUM = "Equilibrium"


# |Δ_rG| below this (kJ/mol) is reported as equilibrium
EQUILIBRIUM_BAND = 0.5


@dataclass
class GibbsCurve:
    """Total Gibbs energy over the extent of reaction."""
    extent: np.ndarray
    gibbs: np.ndarray           # kJ

    def minimum(self) -> Tuple[float, float]:
        """(ξ, G) at the sampled minimum (the equilibrium composition)."""
        i = int(np.argmin(self.gibbs))
        return float(self.extent[i]), float(self.gibbs[i])


@dataclass(frozen=True)
class ReactionState:
    """Thermodynamic driving force at a given extent."""
    extent: float
    reaction_quotient: float
    equilibrium_constant: float
    reaction_gibbs: float       # Δ_rG, kJ/mol
    gibbs: float                # G at this extent, kJ
    reaction_enthalpy: float    # Δ_rH°, kJ/mol
    reaction_entropy: float     # Δ_rS°, kJ/(mol·K)

    @property
    def direction(self) -> ReactionDirection:
        if self.reaction_gibbs < -EQUILIBRIUM_BAND:
            return ReactionDirection.FORWARD
        if self.reaction_gibbs > EQUILIBRIUM_BAND:
            return ReactionDirection.REVERSE
        return ReactionDirection.EQUILIBRIUM


def _composition(extent: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Moles of NO2 and N2O4 starting from 2 mol NO2."""
    return 2.0 - 2.0 * extent, extent


def system_gibbs(extent: np.ndarray, temperature: float, pressure: float) -> np.ndarray:
    """G(ξ) = Σ nᵢ(μᵢ° + RT ln pᵢ), pressure in bar."""
    if temperature <= 0 or pressure <= 0:
        raise ValueError("temperature and pressure must be positive")
    extent = np.asarray(extent, dtype=float)
    n_no2, n_n2o4 = _composition(extent)
    n_total = n_no2 + n_n2o4

    p_no2 = n_no2 / n_total * pressure
    p_n2o4 = n_n2o4 / n_total * pressure

    rt = R_KJ * temperature
    mu_no2 = NO2.chemical_potential(temperature) + rt * np.log(p_no2)
    mu_n2o4 = N2O4.chemical_potential(temperature) + rt * np.log(p_n2o4)
    return n_no2 * mu_no2 + n_n2o4 * mu_n2o4


def gibbs_curve(temperature: float, pressure: float) -> GibbsCurve:
    """Sample G over ξ = 0.01..0.99 in steps of 0.01."""
    extent = np.round(np.arange(1, 100) * 0.01, 2)
    return GibbsCurve(extent=extent, gibbs=system_gibbs(extent, temperature, pressure))


def equilibrium_constant(temperature: float) -> float:
    """K = exp(-Δ_rG°/RT) for 2 NO2 <=> N2O4."""
    dh = N2O4.enthalpy - 2.0 * NO2.enthalpy
    ds = N2O4.entropy - 2.0 * NO2.entropy
    return math.exp(-(dh - temperature * ds) / (R_KJ * temperature))


def reaction_state(extent: float, temperature: float, pressure: float) -> ReactionState:
    """
    Reaction quotient, K and Δ_rG = RT ln(Q/K) at extent ξ.

    Args:
        extent: Extent of reaction, strictly between 0 and 1
        temperature: K
        pressure: Total pressure in bar

    Returns:
        ReactionState
    """
    if not 0.0 < extent < 1.0:
        raise ValueError(f"extent must lie strictly between 0 and 1, got {extent}")
    if temperature <= 0 or pressure <= 0:
        raise ValueError("temperature and pressure must be positive")

    n_no2, n_n2o4 = _composition(extent)
    n_total = n_no2 + n_n2o4
    y_no2 = n_no2 / n_total
    y_n2o4 = n_n2o4 / n_total

    q = y_n2o4 / (y_no2 ** 2 * pressure)
    k = equilibrium_constant(temperature)

    return ReactionState(
        extent=extent,
        reaction_quotient=q,
        equilibrium_constant=k,
        reaction_gibbs=R_KJ * temperature * math.log(q / k),
        gibbs=float(system_gibbs(extent, temperature, pressure)),
        reaction_enthalpy=N2O4.enthalpy - 2.0 * NO2.enthalpy,
        reaction_entropy=N2O4.entropy - 2.0 * NO2.entropy,
    )


# =============================================================================
# Water phase diagram
# =============================================================================

class Phase(Enum):
    """Phases on the water phase diagram."""
    SOLID = "solid"
    LIQUID = "liquid"
    VAPOR = "vapor"
    SUPERCRITICAL = "supercritical"


@dataclass(frozen=True)
class PhaseInfo:
    """Information about a point on the phase diagram."""
    phase: Phase
    temperature: float
    pressure: float
    title: str
    description: str


TRIPLE_POINT = (273.16, 611.66)         # (K, Pa)
CRITICAL_POINT = (647.1, 22.064e6)      # (K, Pa)
STANDARD_PRESSURE = 101325.0            # Pa

_PHASE_TEXT = {
    Phase.SOLID: ("Solid Phase (Ice Ih)",
                  "Molecules locked in a lattice. Vibrating but not translating."),
    Phase.LIQUID: ("Liquid Phase",
                   "Molecules close together, high density, flowing freely."),
    Phase.VAPOR: ("Vapor Phase",
                  "Molecules far apart, high speeds, negligible forces."),
    Phase.SUPERCRITICAL: ("Supercritical Fluid",
                          "Hybrid state: Gas-like kinetic energy, Liquid-like density."),
}


def sublimation_pressure(temperature: np.ndarray) -> np.ndarray:
    """Schematic solid-vapor boundary below the triple point (Pa)."""
    return 611.0 * np.exp(-20.0 * (1.0 - np.asarray(temperature) / 273.0))


def saturation_pressure(temperature: np.ndarray) -> np.ndarray:
    """Magnus-type liquid-vapor boundary (Pa)."""
    t = np.asarray(temperature)
    return 611.0 * np.exp(17.27 * (t - 273.16) / (t - 35.86))


def classify_phase(temperature: float, pressure: float) -> Phase:
    """Phase of water at (T in K, P in Pa) on the schematic diagram."""
    if temperature <= 0 or pressure <= 0:
        raise ValueError("temperature and pressure must be positive")

    t_triple, p_triple = TRIPLE_POINT
    if pressure < p_triple:
        if temperature > t_triple:
            return Phase.VAPOR
        return Phase.VAPOR if pressure < sublimation_pressure(temperature) else Phase.SOLID

    if temperature < 273.0:
        return Phase.SOLID
    if temperature > 647.0 and pressure > CRITICAL_POINT[1]:
        return Phase.SUPERCRITICAL
    if pressure > saturation_pressure(temperature):
        return Phase.LIQUID
    return Phase.VAPOR


def identify_phase(temperature: float, pressure: float) -> PhaseInfo:
    """
    Identify the phase with its display title and description.

    Args:
        temperature: K
        pressure: Pa

    Returns:
        PhaseInfo
    """
    phase = classify_phase(temperature, pressure)
    title, description = _PHASE_TEXT[phase]
    return PhaseInfo(phase, temperature, pressure, title, description)
