#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Equation of State Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import logging
import math

import pytest
from pchem_studio.constants import BAR, R
from pchem_studio.cubic import cubic_residual
from pchem_studio.eos import (
    GAS_PRESETS,
    EOSDomainError,
    EOSModel,
    EOSParameters,
    GasKind,
    GasSpecies,
    compressibility_factor,
    computed_parameters,
    cubic_coefficients,
    dimensionless_parameters,
    eos_parameters,
    get_species,
    molar_volume,
    peng_robinson_alpha,
    peng_robinson_kappa,
    peng_robinson_parameters,
    van_der_waals_parameters,
)


@pytest.fixture
def co2():
    return get_species("CO2")


@pytest.fixture
def helium():
    return get_species("He")


@pytest.fixture
def ideal():
    return GAS_PRESETS[0]


class TestGasPresets:
    """Tests for the species table and lookup."""

    def test_six_presets(self):
        assert len(GAS_PRESETS) == 6
        assert GAS_PRESETS[0].is_ideal
        assert all(not g.is_ideal for g in GAS_PRESETS[1:])

    def test_co2_constants(self, co2):
        assert co2.critical_temperature == 304.13
        assert co2.critical_pressure == 73.77e5
        assert co2.acentric_factor == 0.224

    def test_lookup_by_formula(self):
        assert get_species("N2").name == "Nitrogen (N2)"
        assert get_species(" ch4 ").name == "Methane (CH4)"

    def test_lookup_by_full_name(self):
        assert get_species("water vapor (h2o)").critical_temperature == 647.1

    def test_unknown_species(self):
        with pytest.raises(KeyError):
            get_species("Xenon")

    def test_default_kind_is_real(self):
        species = GasSpecies("Argon", 150.9, 48.7e5)
        assert species.kind is GasKind.REAL
        assert species.acentric_factor == 0.0


class TestModelMetadata:
    """EOSModel labels and colors."""

    def test_values(self):
        assert EOSModel("pr") is EOSModel.PENG_ROBINSON
        assert EOSModel("vdw") is EOSModel.VAN_DER_WAALS

    def test_labels_and_colors(self):
        assert EOSModel.IDEAL.label == "Ideal Gas"
        assert EOSModel.PENG_ROBINSON.color == "#10b981"
        assert len({m.color for m in EOSModel}) == 3


class TestVanDerWaalsParameters:
    """a = 27R²Tc²/(64Pc), b = RTc/(8Pc)"""

    def test_formula(self, co2):
        params = van_der_waals_parameters(co2)
        tc, pc = co2.critical_temperature, co2.critical_pressure
        assert params.a == pytest.approx(27 * R ** 2 * tc ** 2 / (64 * pc))
        assert params.b == pytest.approx(R * tc / (8 * pc))

    def test_co2_magnitudes(self, co2):
        params = van_der_waals_parameters(co2)
        assert 0.36 < params.a < 0.37
        assert 4.2e-5 < params.b < 4.35e-5

    def test_independent_of_temperature(self, co2):
        vdw_low = eos_parameters(EOSModel.VAN_DER_WAALS, co2, 200.0)
        vdw_high = eos_parameters(EOSModel.VAN_DER_WAALS, co2, 800.0)
        assert vdw_low == vdw_high

    def test_ideal_species_rejected(self, ideal):
        with pytest.raises(EOSDomainError):
            van_der_waals_parameters(ideal)


class TestPengRobinsonParameters:
    """Tests for κ, α(T), a(T) and b."""

    def test_kappa(self):
        assert peng_robinson_kappa(0.0) == pytest.approx(0.37464)
        assert peng_robinson_kappa(0.224) == pytest.approx(
            0.37464 + 1.54226 * 0.224 - 0.26992 * 0.224 ** 2
        )

    def test_alpha_is_one_at_critical_temperature(self, co2):
        assert peng_robinson_alpha(co2.critical_temperature, co2) == pytest.approx(1.0)

    def test_alpha_decreases_with_temperature(self, co2):
        assert peng_robinson_alpha(200.0, co2) > peng_robinson_alpha(400.0, co2)

    def test_a_at_critical_temperature(self, co2):
        tc, pc = co2.critical_temperature, co2.critical_pressure
        params = peng_robinson_parameters(co2, tc)
        assert params.a == pytest.approx(0.45724 * R ** 2 * tc ** 2 / pc)
        assert params.b == pytest.approx(0.07780 * R * tc / pc)

    def test_requires_temperature(self, co2):
        with pytest.raises(EOSDomainError):
            eos_parameters(EOSModel.PENG_ROBINSON, co2)

    def test_ideal_model_has_no_parameters(self, co2):
        with pytest.raises(EOSDomainError):
            eos_parameters(EOSModel.IDEAL, co2, 300.0)

    def test_non_positive_temperature(self, co2):
        with pytest.raises(EOSDomainError):
            peng_robinson_parameters(co2, 0.0)


class TestCubicCoefficients:
    """The Z-cubic for each model."""

    def test_dimensionless_parameters(self):
        params = EOSParameters(a=0.5, b=4e-5)
        big_a, big_b = dimensionless_parameters(params, 1e6, 300.0)
        rt = R * 300.0
        assert big_a == pytest.approx(0.5 * 1e6 / rt ** 2)
        assert big_b == pytest.approx(4e-5 * 1e6 / rt)

    def test_van_der_waals_coefficients(self, co2):
        params, coefficients = cubic_coefficients(
            EOSModel.VAN_DER_WAALS, 50 * BAR, 310.0, co2
        )
        big_a, big_b = dimensionless_parameters(params, 50 * BAR, 310.0)
        assert coefficients.a2 == pytest.approx(-(1 + big_b))
        assert coefficients.a1 == pytest.approx(big_a)
        assert coefficients.a0 == pytest.approx(-big_a * big_b)

    def test_peng_robinson_coefficients(self, co2):
        params, coefficients = cubic_coefficients(
            EOSModel.PENG_ROBINSON, 50 * BAR, 310.0, co2
        )
        big_a, big_b = dimensionless_parameters(params, 50 * BAR, 310.0)
        assert coefficients.a2 == pytest.approx(-(1 - big_b))
        assert coefficients.a1 == pytest.approx(big_a - 3 * big_b ** 2 - 2 * big_b)
        assert coefficients.a0 == pytest.approx(-(big_a * big_b - big_b ** 2 - big_b ** 3))


class TestCompressibilityFactor:
    """Z from the largest real root."""

    def test_co2_attractive_regime(self, co2):
        """CO2 near its critical point: Z < 1 and V below the ideal volume."""
        pressure, temperature = 50 * BAR, 310.0
        z = compressibility_factor(pressure, temperature, co2, EOSModel.PENG_ROBINSON)
        assert 0.5 < z < 1.0
        assert molar_volume(z, pressure, temperature) < R * temperature / pressure

    def test_co2_van_der_waals_attractive(self, co2):
        z = compressibility_factor(50 * BAR, 310.0, co2, EOSModel.VAN_DER_WAALS)
        assert 0.5 < z < 1.0

    def test_repulsive_regime(self, co2):
        """Far above Tc at high pressure, Z > 1."""
        assert compressibility_factor(500 * BAR, 1000.0, co2) > 1.0

    def test_helium_is_nearly_ideal(self, helium):
        assert compressibility_factor(1 * BAR, 300.0, helium) == pytest.approx(1.0, abs=1e-3)

    def test_low_pressure_limit(self, co2):
        for model in (EOSModel.VAN_DER_WAALS, EOSModel.PENG_ROBINSON):
            assert compressibility_factor(1.0, 310.0, co2, model) == pytest.approx(1.0, abs=1e-5)

    def test_ideal_model_is_exactly_one(self, co2):
        assert compressibility_factor(50 * BAR, 310.0, co2, EOSModel.IDEAL) == 1.0

    def test_ideal_species_is_exactly_one(self, ideal):
        assert compressibility_factor(50 * BAR, 310.0, ideal, EOSModel.PENG_ROBINSON) == 1.0

    def test_z_solves_the_cubic(self, co2):
        for model in (EOSModel.VAN_DER_WAALS, EOSModel.PENG_ROBINSON):
            z = compressibility_factor(80 * BAR, 280.0, co2, model)
            _, coefficients = cubic_coefficients(model, 80 * BAR, 280.0, co2)
            assert abs(cubic_residual(z, *coefficients.as_tuple())) < 1e-10

    def test_vapor_root_below_critical_temperature(self, co2):
        """Below Tc the reported root is the largest of the three."""
        _, coefficients = cubic_coefficients(EOSModel.PENG_ROBINSON, 30 * BAR, 260.0, co2)
        z = compressibility_factor(30 * BAR, 260.0, co2)
        a2, a1, a0 = coefficients.as_tuple()
        # Any larger root would give a sign change to the right of z
        for probe in (z + 0.01, z + 0.1, z + 1.0):
            assert cubic_residual(probe, a2, a1, a0) > 0

    def test_all_presets_finite(self):
        for species in GAS_PRESETS:
            for model in EOSModel:
                z = compressibility_factor(100 * BAR, 310.0, species, model)
                assert math.isfinite(z)
                assert z > 0

    def test_logs_at_debug(self, co2, caplog):
        with caplog.at_level(logging.DEBUG, logger="pchem_studio.eos"):
            compressibility_factor(50 * BAR, 310.0, co2)
        assert any("Peng-Robinson" in r.getMessage() for r in caplog.records)


class TestDomainErrors:
    """EOSDomainError for invalid state points."""

    def test_is_value_error(self):
        assert issubclass(EOSDomainError, ValueError)

    @pytest.mark.parametrize("pressure, temperature", [
        (0.0, 300.0),
        (-1.0, 300.0),
        (1e5, 0.0),
        (1e5, -10.0),
        (float("nan"), 300.0),
        (1e5, float("inf")),
    ])
    def test_invalid_state(self, co2, pressure, temperature):
        with pytest.raises(EOSDomainError):
            compressibility_factor(pressure, temperature, co2)

    def test_ideal_model_still_validates(self, co2):
        with pytest.raises(EOSDomainError):
            compressibility_factor(-1.0, 300.0, co2, EOSModel.IDEAL)

    def test_molar_volume_validates(self):
        with pytest.raises(EOSDomainError):
            molar_volume(1.0, 0.0, 300.0)


class TestMolarVolume:
    """V = ZRT/P and the parameter summary."""

    def test_ideal_volume(self):
        assert molar_volume(1.0, 1e5, 300.0) == pytest.approx(R * 300.0 / 1e5)

    def test_computed_parameters(self, co2, ideal):
        params = computed_parameters(co2, 310.0)
        assert set(params) == {EOSModel.VAN_DER_WAALS, EOSModel.PENG_ROBINSON}
        assert computed_parameters(ideal, 310.0) == {}
