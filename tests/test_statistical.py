#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Statistical Mechanics Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import math

import numpy as np
import pytest
from pchem_studio.constants import R
from pchem_studio.statistical import (
    einstein_oscillator_curves,
    ideal_gas_2d,
    is_quantum_regime,
    joules_to_wavenumbers,
    moment_of_inertia,
    oscillator_energy,
    oscillator_heat_capacity,
    rigid_rotor,
    rotational_constant,
    rotational_lines,
    schottky_peak_temperature,
    two_level_curves,
)


class TestEinsteinOscillator:
    """Tests for U and Cv of the quantum harmonic oscillator."""

    def test_heat_capacity_classical_limit(self):
        assert oscillator_heat_capacity(1e-4) == pytest.approx(1.0, abs=1e-6)

    def test_heat_capacity_at_x_one(self):
        expected = math.e / (math.e - 1) ** 2
        assert oscillator_heat_capacity(1.0) == pytest.approx(expected)

    def test_heat_capacity_frozen_out(self):
        assert oscillator_heat_capacity(100.0) == 0.0
        assert oscillator_heat_capacity(500.0) == 0.0

    def test_energy_limits(self):
        assert oscillator_energy(50.0) == pytest.approx(0.5)
        assert oscillator_energy(0.01) == pytest.approx(1 / 0.01, rel=1e-4)

    def test_sweep_range(self):
        curves = einstein_oscillator_curves(100.0, 500.0)
        assert curves.temperature[0] == pytest.approx(1.0)
        assert curves.temperature.max() <= 500.0
        assert len(curves.temperature) >= 99
        assert np.all(np.diff(curves.temperature) > 0)

    def test_heat_capacity_rises_with_temperature(self):
        curves = einstein_oscillator_curves(100.0, 500.0)
        assert np.all(np.diff(curves.heat_capacity) >= -1e-12)
        assert curves.heat_capacity[-1] < 1.0
        assert curves.heat_capacity[-1] > 0.9

    def test_limit_curves(self):
        curves = einstein_oscillator_curves(100.0, 500.0)
        np.testing.assert_allclose(curves.heat_capacity_high_t, 1.0)
        np.testing.assert_allclose(curves.energy_low_t, 0.5)
        np.testing.assert_allclose(curves.energy_high_t, curves.temperature / 100.0)

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            einstein_oscillator_curves(0.0, 500.0)
        with pytest.raises(ValueError):
            einstein_oscillator_curves(100.0, 0.5)

    def test_regime(self):
        assert is_quantum_regime(100.0, 50.0)
        assert not is_quantum_regime(100.0, 500.0)


class TestTwoLevelSystem:
    """Populations and the Schottky anomaly."""

    def test_populations_sum_to_one(self):
        curves = two_level_curves(2.0, 5.0)
        np.testing.assert_allclose(
            curves.ground_population + curves.excited_population, 1.0
        )

    def test_excited_population_bounded(self):
        curves = two_level_curves(2.0, 50.0)
        assert np.all(curves.excited_population < 0.5)
        assert np.all(curves.ground_population > 0.5)

    def test_temperature_grid(self):
        curves = two_level_curves(2.0, 5.0, n_points=50)
        assert len(curves.temperature) == 50
        assert curves.temperature[0] == pytest.approx(0.1)
        assert curves.temperature[-1] == pytest.approx(5.0)

    def test_schottky_peak(self):
        curves = two_level_curves(2.0, 5.0, n_points=500)
        t_peak, cv_peak = curves.schottky_peak()
        assert t_peak == pytest.approx(schottky_peak_temperature(2.0), abs=0.02)
        assert cv_peak == pytest.approx(0.439, abs=0.005)

    def test_peak_scales_with_gap(self):
        assert schottky_peak_temperature(4.0) == pytest.approx(2 * schottky_peak_temperature(2.0))

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            two_level_curves(0.0, 5.0)
        with pytest.raises(ValueError):
            two_level_curves(2.0, 5.0, n_points=0)


class TestRigidRotor:
    """Rigid rotor molecular constants and thermodynamics."""

    def test_carbon_monoxide_constant(self):
        inertia = moment_of_inertia(12.0, 16.0, 1.13)
        b_cm = joules_to_wavenumbers(rotational_constant(inertia))
        assert 1.85 < b_cm < 2.0

    def test_populations_normalized(self):
        rotor = rigid_rotor(12.0, 16.0, 1.13, 300.0)
        assert rotor.levels.population.sum() == pytest.approx(1.0)
        assert len(rotor.levels.j) == 51

    def test_high_temperature_partition_function(self):
        rotor = rigid_rotor(12.0, 16.0, 1.13, 300.0)
        assert rotor.partition_function == pytest.approx(
            300.0 / rotor.rotational_temperature, rel=1e-2
        )

    def test_high_temperature_entropy(self):
        rotor = rigid_rotor(12.0, 16.0, 1.13, 300.0)
        assert rotor.molar_entropy == pytest.approx(
            R * (math.log(rotor.partition_function) + 1.0), rel=1e-2
        )

    def test_most_populated_level(self):
        rotor = rigid_rotor(12.0, 16.0, 1.13, 300.0)
        expected = math.sqrt(300.0 / (2 * rotor.rotational_temperature)) - 0.5
        assert abs(rotor.most_populated_j - expected) <= 1.0

    def test_homonuclear_symmetry_number(self):
        hetero = rigid_rotor(14.0, 14.0, 1.1, 300.0)
        homo = rigid_rotor(14.0, 14.0, 1.1, 300.0, homonuclear=True)
        assert homo.symmetry_number == 2
        assert homo.partition_function == pytest.approx(hetero.partition_function / 2)
        np.testing.assert_allclose(homo.levels.population, hetero.levels.population)

    def test_homonuclear_ignores_second_mass(self):
        homo = rigid_rotor(14.0, 99.0, 1.1, 300.0, homonuclear=True)
        assert homo.moment_of_inertia == pytest.approx(moment_of_inertia(14.0, 14.0, 1.1))

    def test_rotational_lines(self):
        np.testing.assert_allclose(rotational_lines(2.0, 3), [4.0, 8.0, 12.0])

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            rigid_rotor(12.0, 16.0, 1.13, 0.0)
        with pytest.raises(ValueError):
            moment_of_inertia(12.0, 16.0, -1.0)


class TestIdealGas2D:
    """Partition-function thermodynamics of the 2D box."""

    def test_equation_of_state(self):
        gas = ideal_gas_2d(10.0, 50, 200.0)
        assert gas.pressure * 200.0 * 300.0 == pytest.approx(50 * 10.0)

    def test_energy_and_entropy(self):
        gas = ideal_gas_2d(10.0, 50, 200.0)
        assert gas.internal_energy == pytest.approx(500.0)
        assert gas.entropy == pytest.approx((gas.internal_energy - gas.helmholtz_energy) / 10.0)

    def test_thermal_wavelength(self):
        gas = ideal_gas_2d(10.0, 50, 200.0)
        assert gas.thermal_wavelength == pytest.approx(10.0 / math.sqrt(2 * math.pi * 10.0))

    def test_expansion_raises_entropy(self):
        small = ideal_gas_2d(10.0, 50, 200.0)
        large = ideal_gas_2d(10.0, 50, 400.0)
        assert large.entropy > small.entropy
        assert large.pressure == pytest.approx(small.pressure / 2)

    def test_invalid_inputs(self):
        with pytest.raises(ValueError):
            ideal_gas_2d(0.0, 50, 200.0)
        with pytest.raises(ValueError):
            ideal_gas_2d(10.0, 0, 200.0)
