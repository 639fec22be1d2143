#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Real-Gas Equations of State
================================================================================

Project:        Physical Chemistry Studio
Module:         eos.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module computes the compressibility factor Z = PV/(RT) of a gas with
two cubic equations of state:

Van der Waals:
    P = RT/(V - b) - a/V²
    a = 27 R² Tc² / (64 Pc),   b = R Tc / (8 Pc)

Peng-Robinson:
    P = RT/(V - b) - a(T) / (V(V + b) + b(V - b))
    κ    = 0.37464 + 1.54226ω - 0.26992ω²
    α(T) = (1 + κ(1 - √(T/Tc)))²
    a(T) = 0.45724 R² Tc² / Pc · α(T),   b = 0.07780 R Tc / Pc

With A = aP/(RT)² and B = bP/(RT) both become a cubic in Z, solved by
pchem_studio.cubic for the largest (vapor) root.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .constants import R
from .cubic import CubicCoefficients, solve_cubic

logger = logging.getLogger(__name__)


class EOSDomainError(ValueError):
    """Raised when EOS inputs fall outside the physically valid region."""


class GasKind(Enum):
    """Whether a species is evaluated with an equation of state."""
    IDEAL = "ideal"
    REAL = "real"


class EOSModel(Enum):
    """Equation-of-state models offered by the real gas studio."""
    IDEAL = "ideal"
    VAN_DER_WAALS = "vdw"
    PENG_ROBINSON = "pr"

    @property
    def label(self) -> str:
        return _MODEL_LABELS[self]

    @property
    def color(self) -> str:
        return _MODEL_COLORS[self]


_MODEL_LABELS = {
    EOSModel.IDEAL: "Ideal Gas",
    EOSModel.VAN_DER_WAALS: "Van der Waals",
    EOSModel.PENG_ROBINSON: "Peng-Robinson",
}

_MODEL_COLORS = {
    EOSModel.IDEAL: "#94a3b8",          # Slate
    EOSModel.VAN_DER_WAALS: "#3b82f6",  # Blue
    EOSModel.PENG_ROBINSON: "#10b981",  # Emerald
}


@dataclass(frozen=True)
class GasSpecies:
    """
    Critical constants of a gas.

    Attributes:
        name: Display name
        critical_temperature: Tc in K
        critical_pressure: Pc in Pa
        acentric_factor: Pitzer acentric factor ω (dimensionless)
        kind: GasKind.IDEAL for the reference placeholder
    """
    name: str
    critical_temperature: float
    critical_pressure: float
    acentric_factor: float = 0.0
    kind: GasKind = GasKind.REAL

    @property
    def is_ideal(self) -> bool:
        return self.kind is GasKind.IDEAL


@dataclass(frozen=True)
class EOSParameters:
    """Attraction (a, Pa·m⁶/mol²) and co-volume (b, m³/mol) coefficients."""
    a: float
    b: float


GAS_PRESETS: List[GasSpecies] = [
    GasSpecies("Ideal Gas (Reference)", 0.0, 1.0, 0.0, GasKind.IDEAL),
    GasSpecies("Carbon Dioxide (CO2)", 304.13, 73.77e5, 0.224),
    GasSpecies("Nitrogen (N2)", 126.2, 33.9e5, 0.037),
    GasSpecies("Water Vapor (H2O)", 647.1, 220.6e5, 0.344),
    GasSpecies("Methane (CH4)", 190.56, 45.99e5, 0.011),
    GasSpecies("Helium (He)", 5.19, 2.27e5, -0.385),
]


def get_species(name: str) -> GasSpecies:
    """
    Look up a preset by name.

    Matches the full display name or the formula in parentheses,
    case-insensitively ("CO2", "carbon dioxide (co2)").
    """
    key = name.strip().lower()
    for species in GAS_PRESETS:
        full = species.name.lower()
        formula = full[full.find("(") + 1:full.rfind(")")] if "(" in full else full
        if key in (full, formula):
            return species
    raise KeyError(f"Unknown gas species: {name!r}")


def _require_positive(**values: float) -> None:
    for label, value in values.items():
        if not math.isfinite(value) or value <= 0.0:
            raise EOSDomainError(f"{label} must be positive and finite, got {value}")


def _require_real_species(species: GasSpecies) -> None:
    if species.is_ideal:
        raise EOSDomainError(
            f"{species.name} is an ideal-gas placeholder; use Z = 1 instead"
        )
    _require_positive(
        critical_temperature=species.critical_temperature,
        critical_pressure=species.critical_pressure,
    )


def van_der_waals_parameters(species: GasSpecies) -> EOSParameters:
    """Van der Waals a and b (independent of temperature)."""
    _require_real_species(species)
    tc = species.critical_temperature
    pc = species.critical_pressure

    a = 27.0 * R ** 2 * tc ** 2 / (64.0 * pc)
    b = R * tc / (8.0 * pc)
    return EOSParameters(a=a, b=b)


def peng_robinson_kappa(acentric_factor: float) -> float:
    """κ = 0.37464 + 1.54226ω - 0.26992ω²"""
    omega = acentric_factor
    return 0.37464 + 1.54226 * omega - 0.26992 * omega ** 2


def peng_robinson_alpha(temperature: float, species: GasSpecies) -> float:
    """α(T) = (1 + κ(1 - √Tr))²"""
    tr = temperature / species.critical_temperature
    kappa = peng_robinson_kappa(species.acentric_factor)
    return (1.0 + kappa * (1.0 - math.sqrt(tr))) ** 2


def peng_robinson_parameters(species: GasSpecies, temperature: float) -> EOSParameters:
    """Peng-Robinson a(T) (alpha already applied) and b."""
    _require_real_species(species)
    _require_positive(temperature=temperature)
    tc = species.critical_temperature
    pc = species.critical_pressure

    alpha = peng_robinson_alpha(temperature, species)
    a = 0.45724 * R ** 2 * tc ** 2 / pc * alpha
    b = 0.07780 * R * tc / pc
    return EOSParameters(a=a, b=b)


def eos_parameters(
    model: EOSModel,
    species: GasSpecies,
    temperature: Optional[float] = None
) -> EOSParameters:
    """
    Model-specific a and b.

    Args:
        model: VAN_DER_WAALS or PENG_ROBINSON
        species: Gas species (must be a real gas)
        temperature: Required for Peng-Robinson

    Returns:
        EOSParameters
    """
    if model is EOSModel.VAN_DER_WAALS:
        return van_der_waals_parameters(species)
    if model is EOSModel.PENG_ROBINSON:
        if temperature is None:
            raise EOSDomainError("Peng-Robinson parameters require a temperature")
        return peng_robinson_parameters(species, temperature)
    raise EOSDomainError(f"{model.label} has no EOS parameters")


def dimensionless_parameters(
    params: EOSParameters,
    pressure: float,
    temperature: float
) -> Tuple[float, float]:
    """A = aP/(RT)², B = bP/(RT)"""
    rt = R * temperature
    return params.a * pressure / rt ** 2, params.b * pressure / rt


def cubic_coefficients(
    model: EOSModel,
    pressure: float,
    temperature: float,
    species: GasSpecies
) -> Tuple[EOSParameters, CubicCoefficients]:
    """
    Build the Z-cubic for a model at (P, T).

    Args:
        model: VAN_DER_WAALS or PENG_ROBINSON
        pressure: Pressure in Pa
        temperature: Temperature in K
        species: Real gas species

    Returns:
        (EOSParameters, CubicCoefficients)

    Raises:
        EOSDomainError: For non-positive P or T, or an unusable species
    """
    _require_positive(pressure=pressure, temperature=temperature)
    params = eos_parameters(model, species, temperature)
    big_a, big_b = dimensionless_parameters(params, pressure, temperature)

    if model is EOSModel.VAN_DER_WAALS:
        coefficients = CubicCoefficients(
            a2=-(1.0 + big_b),
            a1=big_a,
            a0=-big_a * big_b,
        )
    else:
        coefficients = CubicCoefficients(
            a2=-(1.0 - big_b),
            a1=big_a - 3.0 * big_b ** 2 - 2.0 * big_b,
            a0=-(big_a * big_b - big_b ** 2 - big_b ** 3),
        )

    return params, coefficients


def compressibility_factor(
    pressure: float,
    temperature: float,
    species: GasSpecies,
    model: EOSModel = EOSModel.PENG_ROBINSON
) -> float:
    """
    Compressibility factor Z at a single (P, T).

    The ideal model and the ideal reference species bypass the EOS and
    return exactly 1.0.

    Args:
        pressure: Pressure in Pa
        temperature: Temperature in K
        species: Gas species
        model: Equation of state

    Returns:
        Z (largest real root of the EOS cubic)
    """
    _require_positive(pressure=pressure, temperature=temperature)

    if model is EOSModel.IDEAL or species.is_ideal:
        return 1.0

    _, coefficients = cubic_coefficients(model, pressure, temperature, species)
    z = solve_cubic(coefficients)
    logger.debug(
        "%s %s: P=%.4g Pa, T=%.4g K -> Z=%.6f",
        model.label, species.name, pressure, temperature, z
    )
    return z


def molar_volume(z: float, pressure: float, temperature: float) -> float:
    """V = Z·R·T/P in m³/mol."""
    _require_positive(pressure=pressure, temperature=temperature)
    return z * R * temperature / pressure


def computed_parameters(species: GasSpecies, temperature: float) -> Dict[EOSModel, EOSParameters]:
    """
    a and b for every EOS model, as shown in the studio's side panel.

    Returns an empty dict for the ideal reference species.
    """
    if species.is_ideal:
        return {}
    return {
        EOSModel.VAN_DER_WAALS: van_der_waals_parameters(species),
        EOSModel.PENG_ROBINSON: peng_robinson_parameters(species, temperature),
    }
