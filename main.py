#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Chemistry Studio - Command Line Interface
================================================================================

Project:        Physical Chemistry Studio
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Command line interface for evaluating the studio models and printing or
plotting their results.
"""

import argparse
import logging

import matplotlib.pyplot as plt

from pchem_studio.constants import BAR, M3_TO_LITRE, R
from pchem_studio.cubic import CubicDomainError
from pchem_studio.eos import (
    GAS_PRESETS, EOSDomainError, EOSModel, compressibility_factor,
    computed_parameters, get_species, molar_volume
)
from pchem_studio.isotherm import compare_models
from pchem_studio.statistical import (
    einstein_oscillator_curves, rigid_rotor, rotational_lines,
    schottky_peak_temperature, two_level_curves
)
from pchem_studio.thermodynamics import (
    ETHANOL_HVAP_LITERATURE, ETHANOL_VAPOR_PRESSURE, fit_clausius_clapeyron,
    gibbs_curve, identify_phase, linearize, reaction_state
)
from pchem_studio.visualization import (
    render_clausius_clapeyron, render_compressibility_chart,
    render_gibbs_curve, render_oscillator_chart, render_pv_isotherm,
    render_rotor_populations, render_two_level_chart
)

MODEL_CHOICES = {model.value: model for model in EOSModel}


def _header(title: str) -> None:
    print("=" * 60)
    print(f"Physical Chemistry Studio - {title}")
    print("=" * 60)


def _save(fig, filename: str) -> None:
    fig.savefig(filename, dpi=150)
    print(f"\nPlot saved to {filename}")
    plt.show()


def run_point(species_name: str, temperature: float, pressure_bar: float, model_key: str):
    """
    Evaluate Z and the molar volume at a single state point.

    Args:
        species_name: Preset name or formula
        temperature: Temperature in K
        pressure_bar: Pressure in bar
        model_key: "ideal", "vdw" or "pr"
    """
    species = get_species(species_name)
    model = MODEL_CHOICES[model_key]
    pressure = pressure_bar * BAR

    _header("State Point")
    z = compressibility_factor(pressure, temperature, species, model)
    v = molar_volume(z, pressure, temperature)
    v_ideal = R * temperature / pressure

    print(f"\n  Species:         {species.name}")
    print(f"  Model:           {model.label}")
    print(f"  T = {temperature:.2f} K, P = {pressure_bar:.2f} bar")
    print(f"  Z:               {z:.6f}")
    print(f"  Molar volume:    {v * M3_TO_LITRE:.6f} L/mol")
    print(f"  Ideal volume:    {v_ideal * M3_TO_LITRE:.6f} L/mol")

    if z < 1:
        print("  Attractive forces dominate (Z < 1)")
    elif z > 1:
        print("  Repulsive forces dominate (Z > 1)")


def run_isotherm(
    species_name: str,
    temperature: float,
    max_pressure_bar: float,
    n_points: int,
    plot: bool = False
):
    """
    Print (and optionally plot) isotherms for all three models.

    Args:
        species_name: Preset name or formula
        temperature: Temperature in K
        max_pressure_bar: Highest pressure in bar
        n_points: Samples per isotherm
        plot: Save and show the Z and P-V charts
    """
    species = get_species(species_name)
    series = compare_models(species, temperature, max_pressure_bar * BAR, n_points)

    _header("Real Gas Isotherm")
    print(f"\n  {species.name} at {temperature:.1f} K")

    for model, params in computed_parameters(species, temperature).items():
        print(f"  {model.label:15s} a = {params.a:.4f} Pa·m⁶/mol², "
              f"b = {params.b * 1e5:.3f}e-5 m³/mol")

    print(f"\n  {'P (bar)':>10s}" + "".join(f"{m.label:>16s}" for m in series))
    stride = max(1, n_points // 10)
    for i in range(stride - 1, n_points, stride):
        p_bar = series[EOSModel.IDEAL].pressure[i] / BAR
        row = "".join(f"{data.z[i]:16.5f}" for data in series.values())
        print(f"  {p_bar:10.2f}{row}")

    if plot:
        fig, axes = plt.subplots(1, 2, figsize=(14, 5))
        render_compressibility_chart(series, ax=axes[0])
        render_pv_isotherm(series, ax=axes[1])
        plt.tight_layout()
        _save(fig, 'real_gas_isotherm.png')


def run_statistical_demo(plot: bool = False):
    """Oscillator, two-level and rigid rotor summaries."""
    _header("Statistical Mechanics")

    curves = einstein_oscillator_curves(theta=100.0, max_temperature=500.0)
    print("\nEinstein oscillator (θ = 100 K):")
    for i in range(0, len(curves.temperature), 25):
        print(f"  T = {curves.temperature[i]:7.1f} K   U/kθ = {curves.energy[i]:8.4f}"
              f"   Cv/k = {curves.heat_capacity[i]:.4f}")

    two_level = two_level_curves(delta_e=2.0, max_temperature=5.0)
    t_peak, cv_peak = two_level.schottky_peak()
    print("\nTwo-level system (ΔE = 2.0):")
    print(f"  Sampled peak:     T = {t_peak:.2f}, Cv = {cv_peak:.4f}")
    print(f"  Theoretical peak: T = {schottky_peak_temperature(2.0):.2f}")

    rotor = rigid_rotor(12.0, 16.0, 1.13, 300.0)
    print("\nRigid rotor (CO, 300 K):")
    print(f"  I       = {rotor.moment_of_inertia:.4e} kg·m²")
    print(f"  B       = {rotor.rotational_constant_wavenumber:.3f} cm⁻¹")
    print(f"  θ_rot   = {rotor.rotational_temperature:.3f} K")
    print(f"  Z_rot   = {rotor.partition_function:.2f}")
    print(f"  S_rot   = {rotor.molar_entropy:.2f} J/(mol·K)")
    print(f"  J_max   = {rotor.most_populated_j}")
    lines = rotational_lines(rotor.rotational_constant_wavenumber, 5)
    print("  Lines   = " + ", ".join(f"{nu:.2f}" for nu in lines) + " cm⁻¹")

    if plot:
        fig, axes = plt.subplots(2, 2, figsize=(12, 10))
        render_oscillator_chart(curves, "cv", ax=axes[0, 0])
        render_oscillator_chart(curves, "u", ax=axes[0, 1])
        render_two_level_chart(two_level, axes=(axes[1, 0], axes[1, 1]))
        plt.tight_layout()
        _save(fig, 'statistical_mechanics.png')

        fig = render_rotor_populations(rotor)
        _save(fig, 'rotor_populations.png')


def run_thermodynamics_demo(temperature: float = 298.0, pressure_bar: float = 1.0,
                            plot: bool = False):
    """Clausius-Clapeyron fit, Gibbs equilibrium and phase lookup."""
    _header("Thermodynamics")

    points = linearize(ETHANOL_VAPOR_PRESSURE)
    fit = fit_clausius_clapeyron(points)
    print("\nClausius-Clapeyron (ethanol):")
    print(f"  slope     = {fit.slope:.1f} K")
    print(f"  intercept = {fit.intercept:.3f}")
    print(f"  R²        = {fit.r_squared:.5f}")
    print(f"  ΔH_vap    = {fit.enthalpy_of_vaporization / 1000:.2f} kJ/mol "
          f"(literature {ETHANOL_HVAP_LITERATURE} kJ/mol)")

    curve = gibbs_curve(temperature, pressure_bar)
    xi_eq, g_eq = curve.minimum()
    state = reaction_state(xi_eq, temperature, pressure_bar)
    print(f"\n2 NO2 <=> N2O4 at {temperature:.1f} K, {pressure_bar:.2f} bar:")
    print(f"  Equilibrium ξ = {xi_eq:.2f}, G = {g_eq:.3f} kJ")
    print(f"  K = {state.equilibrium_constant:.4f}, Q = {state.reaction_quotient:.4f}")
    print(f"  Δ_rG = {state.reaction_gibbs:.3f} kJ/mol ({state.direction.value})")

    info = identify_phase(temperature, pressure_bar * BAR)
    print(f"\nWater at {temperature:.1f} K, {pressure_bar:.2f} bar: {info.title}")
    print(f"  {info.description}")

    if plot:
        fig, axes = plt.subplots(1, 2, figsize=(14, 5))
        render_clausius_clapeyron(points, fit, ax=axes[0])
        render_gibbs_curve(curve, ax=axes[1])
        plt.tight_layout()
        _save(fig, 'thermodynamics.png')


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Physical Chemistry Studio - Closed-form Thermodynamics Models",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --point --species CO2 -T 310 -P 50 --model pr
  python main.py --isotherm --species N2 -T 200 --max-pressure 300 --plot
  python main.py --statistical
  python main.py --thermodynamics -T 298 -P 1
  python main.py --app               Launch Streamlit app
        """
    )

    parser.add_argument('--point', action='store_true',
                        help='Evaluate Z at a single (T, P)')
    parser.add_argument('--isotherm', action='store_true',
                        help='Compare EOS models along an isotherm')
    parser.add_argument('--statistical', action='store_true',
                        help='Run the statistical mechanics demo')
    parser.add_argument('--thermodynamics', action='store_true',
                        help='Run the thermodynamics demo')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--species', default='CO2',
                        help='Gas preset: ' + ', '.join(g.name for g in GAS_PRESETS))
    parser.add_argument('--temperature', '-T', type=float, default=310.0,
                        help='Temperature in K (default: 310)')
    parser.add_argument('--pressure', '-P', type=float, default=50.0,
                        help='Pressure in bar (default: 50)')
    parser.add_argument('--max-pressure', type=float, default=200.0,
                        help='Isotherm maximum pressure in bar (default: 200)')
    parser.add_argument('--points', '-n', type=int, default=100,
                        help='Isotherm samples (default: 100)')
    parser.add_argument('--model', choices=sorted(MODEL_CHOICES), default='pr',
                        help='Equation of state (default: pr)')
    parser.add_argument('--plot', action='store_true',
                        help='Save and show charts')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.point:
            run_point(args.species, args.temperature, args.pressure, args.model)
        elif args.isotherm:
            run_isotherm(args.species, args.temperature, args.max_pressure,
                         args.points, plot=args.plot)
        elif args.statistical:
            run_statistical_demo(plot=args.plot)
        elif args.thermodynamics:
            run_thermodynamics_demo(args.temperature, args.pressure, plot=args.plot)
        elif args.app:
            import subprocess
            print("Launching Streamlit app...")
            subprocess.run(['streamlit', 'run', 'app.py'])
        else:
            parser.print_help()
            print("\nNo action specified. Run with --point, --isotherm, "
                  "--statistical, --thermodynamics, or --app")
    except (EOSDomainError, CubicDomainError, KeyError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
