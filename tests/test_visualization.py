#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
License:        MIT License
================================================================================
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from pchem_studio.constants import BAR
from pchem_studio.eos import EOSModel, get_species
from pchem_studio.isotherm import compare_models
from pchem_studio.statistical import (
    einstein_oscillator_curves, rigid_rotor, two_level_curves
)
from pchem_studio.thermodynamics import (
    ETHANOL_VAPOR_PRESSURE, fit_clausius_clapeyron, gibbs_curve, linearize
)
from pchem_studio.visualization import (
    VisualizationConfig,
    figure_to_png,
    render_clausius_clapeyron,
    render_compressibility_chart,
    render_gibbs_curve,
    render_oscillator_chart,
    render_phase_diagram,
    render_pv_isotherm,
    render_rotor_populations,
    render_two_level_chart,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def series():
    return compare_models(get_species("CO2"), 310.0, 100 * BAR, 20)


class TestVisualizationConfig:
    """Tests for chart configuration."""

    def test_defaults(self):
        config = VisualizationConfig()
        assert config.figsize == (8, 5)
        assert config.dark

    def test_light_theme(self, series):
        fig = render_compressibility_chart(series, VisualizationConfig(dark=False))
        assert fig.axes[0].get_facecolor() != matplotlib.colors.to_rgba("#0f172a")


class TestRealGasCharts:
    """Z and P-V charts."""

    def test_one_line_per_model(self, series):
        fig = render_compressibility_chart(series)
        assert len(fig.axes[0].get_lines()) == len(EOSModel)

    def test_pv_uses_log_volume(self, series):
        fig = render_pv_isotherm(series)
        assert fig.axes[0].get_xscale() == "log"

    def test_existing_axes(self, series):
        fig, axes = plt.subplots(1, 2)
        assert render_compressibility_chart(series, ax=axes[0]) is fig
        assert render_pv_isotherm(series, ax=axes[1]) is fig


class TestStatisticalCharts:
    """Oscillator, two-level and rotor charts."""

    def test_oscillator_with_limits(self):
        curves = einstein_oscillator_curves(100.0, 500.0)
        fig = render_oscillator_chart(curves, "cv")
        assert len(fig.axes[0].get_lines()) == 3

    def test_oscillator_without_limits(self):
        curves = einstein_oscillator_curves(100.0, 500.0)
        fig = render_oscillator_chart(curves, "u", show_limits=False)
        assert len(fig.axes[0].get_lines()) == 1

    def test_oscillator_unknown_quantity(self):
        curves = einstein_oscillator_curves(100.0, 500.0)
        with pytest.raises(ValueError):
            render_oscillator_chart(curves, "entropy")

    def test_two_level_panels(self):
        fig = render_two_level_chart(two_level_curves(2.0, 5.0))
        assert len(fig.axes) == 2

    def test_rotor_bars(self):
        rotor = rigid_rotor(12.0, 16.0, 1.13, 300.0)
        fig = render_rotor_populations(rotor, max_j=20)
        assert len(fig.axes[0].patches) == 20


class TestThermodynamicsCharts:
    """Clausius-Clapeyron, Gibbs and phase diagram charts."""

    def test_clausius_clapeyron_fit_line(self):
        points = linearize(ETHANOL_VAPOR_PRESSURE)
        fit = fit_clausius_clapeyron(points, (1, 5))
        fig = render_clausius_clapeyron(points, fit, (1, 5))
        assert len(fig.axes[0].get_lines()) == 1

    def test_clausius_clapeyron_without_fit(self):
        points = linearize(ETHANOL_VAPOR_PRESSURE)
        fig = render_clausius_clapeyron(points)
        assert len(fig.axes[0].get_lines()) == 0

    def test_gibbs_markers(self):
        fig = render_gibbs_curve(gibbs_curve(298.0, 1.0), current_extent=0.3)
        assert len(fig.axes[0].get_lines()) == 3

    def test_phase_diagram(self):
        fig = render_phase_diagram((300.0, 101325.0))
        ax = fig.axes[0]
        assert ax.get_yscale() == "log"
        assert ax.get_xlim() == (200.0, 700.0)


class TestFigureExport:
    """PNG export."""

    def test_png_bytes(self, series):
        fig = render_compressibility_chart(series)
        data = figure_to_png(fig, dpi=50)
        assert data.startswith(b"\x89PNG")
        assert not plt.fignum_exists(fig.number)
