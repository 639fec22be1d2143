#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Isotherm Generator
================================================================================

Project:        Physical Chemistry Studio
Module:         isotherm.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Sweeps pressure along an isotherm and evaluates Z and the molar volume at
each sample. Pressures are P_i = i·(P_max/N) for i = 1..N; P = 0 is
skipped because V = ZRT/P is singular there.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional

import numpy as np

from .constants import R
from .eos import (
    EOSDomainError,
    EOSModel,
    GasSpecies,
    compressibility_factor,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IsothermPoint:
    """One sample of an isotherm (SI units)."""
    pressure: float        # Pa
    z: float               # dimensionless
    molar_volume: float    # m³/mol


@dataclass(frozen=True)
class IsothermConfig:
    """Inputs of an isotherm sweep."""
    species: GasSpecies
    temperature: float                 # K
    max_pressure: float                # Pa
    n_points: int = 100
    model: EOSModel = EOSModel.PENG_ROBINSON

    def __post_init__(self):
        if not np.isfinite(self.temperature) or self.temperature <= 0:
            raise EOSDomainError(f"temperature must be positive, got {self.temperature}")
        if not np.isfinite(self.max_pressure) or self.max_pressure <= 0:
            raise EOSDomainError(f"max_pressure must be positive, got {self.max_pressure}")
        if self.n_points < 1:
            raise EOSDomainError(f"n_points must be at least 1, got {self.n_points}")

    @property
    def pressure_step(self) -> float:
        return self.max_pressure / self.n_points


@dataclass
class IsothermSeries:
    """Array form of an isotherm, for plotting."""
    model: EOSModel
    pressure: np.ndarray = field(default_factory=lambda: np.zeros(0))
    z: np.ndarray = field(default_factory=lambda: np.zeros(0))
    molar_volume: np.ndarray = field(default_factory=lambda: np.zeros(0))

    def __len__(self) -> int:
        return len(self.pressure)


def _sweep(config: IsothermConfig) -> Iterator[IsothermPoint]:
    step = config.pressure_step
    ideal = config.model is EOSModel.IDEAL or config.species.is_ideal

    for i in range(1, config.n_points + 1):
        pressure = i * step
        if ideal:
            z = 1.0
        else:
            z = compressibility_factor(
                pressure, config.temperature, config.species, config.model
            )
        yield IsothermPoint(
            pressure=pressure,
            z=z,
            molar_volume=z * R * config.temperature / pressure,
        )


def generate_isotherm(
    species: GasSpecies,
    temperature: float,
    max_pressure: float,
    n_points: int = 100,
    model: EOSModel = EOSModel.PENG_ROBINSON
) -> Iterator[IsothermPoint]:
    """
    Lazily generate an isotherm.

    Inputs are validated before the first point is produced, so an
    invalid configuration raises at call time rather than on iteration.

    Args:
        species: Gas species
        temperature: Temperature in K
        max_pressure: Highest pressure sample in Pa
        n_points: Number of samples N
        model: Equation of state

    Returns:
        Iterator over N IsothermPoint values in increasing pressure

    Raises:
        EOSDomainError: For non-positive T or P_max, or N < 1
    """
    config = IsothermConfig(species, temperature, max_pressure, n_points, model)
    logger.debug(
        "Isotherm %s / %s: T=%.4g K, P_max=%.4g Pa, N=%d",
        config.model.label, species.name, temperature, max_pressure, n_points
    )
    return _sweep(config)


def isotherm_from_config(config: IsothermConfig) -> Iterator[IsothermPoint]:
    """Generate an isotherm from an existing IsothermConfig."""
    return generate_isotherm(
        config.species, config.temperature, config.max_pressure,
        config.n_points, config.model
    )


def isotherm_arrays(config: IsothermConfig) -> IsothermSeries:
    """
    Evaluate a full isotherm into numpy arrays.

    Returns:
        IsothermSeries with pressure (Pa), z, molar_volume (m³/mol)
    """
    points = list(isotherm_from_config(config))
    return IsothermSeries(
        model=config.model,
        pressure=np.array([p.pressure for p in points]),
        z=np.array([p.z for p in points]),
        molar_volume=np.array([p.molar_volume for p in points]),
    )


def compare_models(
    species: GasSpecies,
    temperature: float,
    max_pressure: float,
    n_points: int = 100,
    models: Optional[Iterable[EOSModel]] = None
) -> Dict[EOSModel, IsothermSeries]:
    """
    One isotherm per enabled model, as overlaid in the real gas studio.

    Args:
        species: Gas species
        temperature: Temperature in K
        max_pressure: Highest pressure sample in Pa
        n_points: Samples per isotherm
        models: Models to evaluate (default: all)

    Returns:
        Dict mapping each model to its IsothermSeries
    """
    if models is None:
        models = list(EOSModel)

    return {
        model: isotherm_arrays(
            IsothermConfig(species, temperature, max_pressure, n_points, model)
        )
        for model in models
    }
