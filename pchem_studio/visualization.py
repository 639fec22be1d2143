#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Chart Rendering Module
================================================================================

Project:        Physical Chemistry Studio
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This module provides Matplotlib figures for every studio:
- Compressibility factor and P-V isotherms per EOS model
- Einstein oscillator and two-level heat capacities
- Rigid rotor level populations
- Clausius-Clapeyron plot with the fitted line
- Gibbs energy versus extent of reaction
- Schematic water phase diagram
"""

import io
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .constants import BAR, M3_TO_LITRE
from .eos import EOSModel
from .isotherm import IsothermSeries
from .statistical import OscillatorCurves, RotorProperties, TwoLevelCurves
from .thermodynamics import (
    CRITICAL_POINT,
    TRIPLE_POINT,
    GibbsCurve,
    LinearizedPoint,
    Phase,
    RegressionResult,
    saturation_pressure,
    sublimation_pressure,
)


PHASE_COLORS = {
    Phase.SOLID: '#93c5fd',         # Light blue
    Phase.LIQUID: '#3b82f6',        # Blue
    Phase.VAPOR: '#f87171',         # Red
    Phase.SUPERCRITICAL: '#a78bfa', # Purple
}


@dataclass
class VisualizationConfig:
    """Configuration for chart rendering."""
    figsize: Tuple[int, int] = (8, 5)
    background_color: str = "#0f172a"
    foreground_color: str = "#94a3b8"
    grid_color: str = "#334155"
    line_width: float = 2.0
    dark: bool = True


def _new_axes(config: VisualizationConfig, ax: Optional[plt.Axes]) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=config.figsize)
    else:
        fig = ax.figure
    ax.clear()
    return fig, ax


def _style_axes(ax: plt.Axes, config: VisualizationConfig) -> None:
    """Apply the dark studio theme."""
    ax.grid(True, alpha=0.3, color=config.grid_color)
    if not config.dark:
        return
    ax.set_facecolor(config.background_color)
    ax.figure.patch.set_facecolor(config.background_color)
    ax.tick_params(colors=config.foreground_color)
    ax.xaxis.label.set_color(config.foreground_color)
    ax.yaxis.label.set_color(config.foreground_color)
    ax.title.set_color(config.foreground_color)
    for spine in ax.spines.values():
        spine.set_color(config.grid_color)


def render_compressibility_chart(
    series: Dict[EOSModel, IsothermSeries],
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Z versus pressure (bar) for each model.

    Args:
        series: IsothermSeries per model
        config: Visualization configuration
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    for model, data in series.items():
        ax.plot(data.pressure / BAR, data.z, color=model.color,
                linewidth=config.line_width, label=model.label)

    ax.set_xlabel('Pressure (bar)')
    ax.set_ylabel('Z = PV / RT')
    ax.set_title('Compressibility Factor (Z)')
    ax.legend(loc='best', fontsize=8)
    _style_axes(ax, config)
    return fig


def render_pv_isotherm(
    series: Dict[EOSModel, IsothermSeries],
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """Pressure (bar) versus molar volume (L/mol, log scale)."""
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    for model, data in series.items():
        ax.plot(data.molar_volume * M3_TO_LITRE, data.pressure / BAR,
                color=model.color, linewidth=config.line_width, label=model.label)

    ax.set_xscale('log')
    ax.set_xlabel('Molar Volume (L/mol)')
    ax.set_ylabel('Pressure (bar)')
    ax.set_title('P-V Isotherm')
    ax.legend(loc='best', fontsize=8)
    _style_axes(ax, config)
    return fig


def render_oscillator_chart(
    curves: OscillatorCurves,
    quantity: str = "cv",
    show_limits: bool = True,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Einstein oscillator heat capacity ("cv") or energy ("u") versus T.
    """
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    if quantity == "cv":
        exact, high, low = (curves.heat_capacity, curves.heat_capacity_high_t,
                            curves.heat_capacity_low_t)
        ax.set_ylabel('Cv / k')
        ax.set_title('Heat Capacity')
    elif quantity == "u":
        exact, high, low = curves.energy, curves.energy_high_t, curves.energy_low_t
        ax.set_ylabel('U / kθ')
        ax.set_title('Internal Energy')
    else:
        raise ValueError(f"Unknown quantity: {quantity!r}")

    ax.plot(curves.temperature, exact, color='#6366f1',
            linewidth=config.line_width, label='Quantum')
    if show_limits:
        ax.plot(curves.temperature, high, 'r--', linewidth=1, label='Classical (high T)')
        ax.plot(curves.temperature, low, 'g:', linewidth=1, label='Low T')
        if quantity == "cv":
            ax.set_ylim(0, 1.2)

    ax.set_xlabel('Temperature (K)')
    ax.legend(loc='best', fontsize=8)
    _style_axes(ax, config)
    return fig


def render_two_level_chart(
    curves: TwoLevelCurves,
    config: Optional[VisualizationConfig] = None,
    axes: Optional[Sequence[plt.Axes]] = None
) -> plt.Figure:
    """Populations (left) and Schottky heat capacity (right)."""
    if config is None:
        config = VisualizationConfig()
    if axes is None:
        fig, axes = plt.subplots(1, 2, figsize=(config.figsize[0] * 1.5, config.figsize[1]))
    ax_pop, ax_cv = axes
    fig = ax_pop.figure

    ax_pop.clear()
    ax_pop.plot(curves.temperature, curves.ground_population, 'b-', label='Ground')
    ax_pop.plot(curves.temperature, curves.excited_population, 'r-', label='Excited')
    ax_pop.axhline(y=0.5, color='gray', linestyle='--', alpha=0.5)
    ax_pop.set_xlabel('Temperature')
    ax_pop.set_ylabel('Population')
    ax_pop.set_title('Level Populations')
    ax_pop.set_ylim(0, 1)
    ax_pop.legend(loc='best', fontsize=8)
    _style_axes(ax_pop, config)

    t_peak, cv_peak = curves.schottky_peak()
    ax_cv.clear()
    ax_cv.plot(curves.temperature, curves.heat_capacity, color='#f59e0b',
               linewidth=config.line_width)
    ax_cv.plot(t_peak, cv_peak, 'ko', markersize=6, label=f'Peak T = {t_peak:.2f}')
    ax_cv.set_xlabel('Temperature')
    ax_cv.set_ylabel('Cv')
    ax_cv.set_title('Schottky Anomaly')
    ax_cv.legend(loc='best', fontsize=8)
    _style_axes(ax_cv, config)

    return fig


def render_rotor_populations(
    rotor: RotorProperties,
    max_j: int = 30,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """Bar chart of P(J); the most populated level is highlighted."""
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    j = rotor.levels.j[:max_j]
    population = rotor.levels.population[:max_j]
    colors = ['#6366f1' if level == rotor.most_populated_j else '#94a3b8' for level in j]

    ax.bar(j, population, color=colors)
    ax.set_xlabel('J')
    ax.set_ylabel('Population')
    ax.set_title(f'Rotational Populations (Z_rot = {rotor.partition_function:.1f})')
    _style_axes(ax, config)
    return fig


def render_clausius_clapeyron(
    points: Sequence[LinearizedPoint],
    fit: Optional[RegressionResult] = None,
    selection: Optional[Tuple[int, int]] = None,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """ln P versus 1/T with the best-fit line over the selected range."""
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    x = np.array([p.inverse_temperature for p in points])
    y = np.array([p.ln_pressure for p in points])
    ax.scatter(x, y, color='#6366f1', zorder=3, label='Data')

    if fit is not None and fit.count >= 2:
        first, last = selection if selection is not None else (0, len(points) - 1)
        x_fit = x[first:last + 1]
        x_line = np.array([x_fit.min(), x_fit.max()])
        ax.plot(x_line, fit.predict(x_line), 'r-', linewidth=config.line_width,
                label=f'Fit (R² = {fit.r_squared:.4f})')

    ax.set_xlabel('1/T (1/K)')
    ax.set_ylabel('ln P')
    ax.set_title('Clausius-Clapeyron Plot')
    ax.ticklabel_format(axis='x', style='sci', scilimits=(0, 0))
    ax.legend(loc='best', fontsize=8)
    _style_axes(ax, config)
    return fig


def render_gibbs_curve(
    curve: GibbsCurve,
    current_extent: Optional[float] = None,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """G(ξ) with the equilibrium minimum and an optional current point."""
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    ax.plot(curve.extent, curve.gibbs, color='#2563eb', linewidth=config.line_width)

    xi_eq, g_eq = curve.minimum()
    ax.plot(xi_eq, g_eq, 'go', markersize=8, label=f'Equilibrium ξ = {xi_eq:.2f}')

    if current_extent is not None:
        g_now = np.interp(current_extent, curve.extent, curve.gibbs)
        ax.plot(current_extent, g_now, 'ro', markersize=8, label='Current')

    ax.set_xlabel('Extent of Reaction (ξ)')
    ax.set_ylabel('G (kJ)')
    ax.set_title('Gibbs Energy of 2 NO₂ ⇌ N₂O₄')
    ax.legend(loc='best', fontsize=8)
    _style_axes(ax, config)
    return fig


def render_phase_diagram(
    current: Optional[Tuple[float, float]] = None,
    t_range: Tuple[float, float] = (200.0, 700.0),
    p_range: Tuple[float, float] = (1.0, 1.0e8),
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Schematic water phase diagram with log pressure axis.

    Args:
        current: Optional (T, P) marker
        t_range: Temperature limits in K
        p_range: Pressure limits in Pa
        config: Visualization configuration
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()
    fig, ax = _new_axes(config, ax)

    t_triple, p_triple = TRIPLE_POINT
    t_crit, p_crit = CRITICAL_POINT

    t_sub = np.linspace(t_range[0], t_triple, 100)
    ax.plot(t_sub, sublimation_pressure(t_sub), 'w-', linewidth=1.5, label='Sublimation')

    t_sat = np.linspace(t_triple, t_crit, 200)
    ax.plot(t_sat, saturation_pressure(t_sat), color='#f87171', linewidth=1.5,
            label='Vaporization')

    ax.plot([t_triple, t_triple], [p_triple, p_range[1]], color='#93c5fd',
            linewidth=1.5, label='Melting')

    ax.plot(t_triple, p_triple, 'yo', markersize=6, label='Triple point')
    ax.plot(t_crit, p_crit, 'mo', markersize=6, label='Critical point')

    if current is not None:
        ax.plot(current[0], current[1], 'ko', markersize=9, markeredgecolor='white')

    ax.set_yscale('log')
    ax.set_xlim(*t_range)
    ax.set_ylim(*p_range)
    ax.set_xlabel('Temperature (K)')
    ax.set_ylabel('Pressure (Pa)')
    ax.set_title('Phase Diagram of Water')
    ax.legend(loc='lower right', fontsize=8)
    _style_axes(ax, config)
    return fig


def figure_to_png(fig: plt.Figure, dpi: int = 100) -> bytes:
    """
    Render a figure to PNG bytes and close it.

    Args:
        fig: Matplotlib figure
        dpi: Resolution

    Returns:
        PNG image as bytes
    """
    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=dpi,
                facecolor=fig.get_facecolor(), edgecolor='none',
                bbox_inches='tight')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()
