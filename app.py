#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Chemistry Studio - Interactive Streamlit Application
================================================================================

Project:        Physical Chemistry Studio
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This is the main Streamlit application for the Physical Chemistry Studio.
Users can:
- Compare ideal, Van der Waals and Peng-Robinson isotherms
- Fit the Clausius-Clapeyron equation to vapor pressure data
- Find the Gibbs energy minimum of 2 NO2 <=> N2O4
- Explore oscillator, two-level, rigid rotor and ideal gas statistics
- Locate states on the water phase diagram
"""

import streamlit as st
import matplotlib.pyplot as plt

from pchem_studio.constants import BAR, M3_TO_LITRE
from pchem_studio.cubic import CubicDomainError
from pchem_studio.eos import (
    GAS_PRESETS, EOSDomainError, EOSModel, computed_parameters
)
from pchem_studio.isotherm import compare_models
from pchem_studio.statistical import (
    einstein_oscillator_curves, ideal_gas_2d, is_quantum_regime,
    rigid_rotor, schottky_peak_temperature, two_level_curves
)
from pchem_studio.thermodynamics import (
    ETHANOL_HVAP_LITERATURE, ETHANOL_VAPOR_PRESSURE, check_enthalpy_answer,
    fit_clausius_clapeyron, gibbs_curve, identify_phase, linearize,
    reaction_state
)
from pchem_studio.visualization import (
    PHASE_COLORS, render_clausius_clapeyron, render_compressibility_chart,
    render_gibbs_curve, render_oscillator_chart, render_phase_diagram,
    render_pv_isotherm, render_rotor_populations, render_two_level_chart
)


# Page configuration
st.set_page_config(
    page_title="Physical Chemistry Studio",
    page_icon="⚗️",
    layout="wide",
    initial_sidebar_state="expanded"
)

STUDIOS = [
    "Real Gas Studio",
    "Clausius-Clapeyron",
    "Gibbs Equilibrium",
    "Harmonic Oscillator",
    "Two-Level System",
    "Rigid Rotor",
    "Ideal Gas",
    "Phase Diagram",
]


def show_figure(fig):
    """Render a Matplotlib figure and release it."""
    st.pyplot(fig)
    plt.close(fig)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'models' not in st.session_state:
        st.session_state.models = {model: True for model in EOSModel}
    if 'cc_selection' not in st.session_state:
        st.session_state.cc_selection = (0, len(ETHANOL_VAPOR_PRESSURE) - 1)


def render_sidebar() -> str:
    """Render the sidebar and return the selected studio."""
    st.sidebar.title("⚗️ Physical Chemistry Studio")
    studio = st.sidebar.radio("Studio", STUDIOS)

    st.sidebar.markdown("""
    ---
    ### 👤 Author
    **Ryan Kamp**
    University of Cincinnati
    Department of Computer Science
    📧 kamprj@mail.uc.edu
    🔗 [GitHub](https://github.com/ryanjosephkamp)
    """)
    return studio


def render_real_gas():
    """Real gas EOS comparison."""
    st.title("🧪 Real Gas Studio")
    st.caption("Computational EOS Comparison")

    controls, charts = st.columns([1, 3])

    with controls:
        names = [g.name for g in GAS_PRESETS]
        gas = GAS_PRESETS[names.index(st.selectbox("Substance", names, index=1))]
        if not gas.is_ideal:
            st.markdown(f"Tc: {gas.critical_temperature} K · "
                        f"Pc: {gas.critical_pressure / BAR:.1f} bar · ω: {gas.acentric_factor}")

        temperature = st.slider("Temperature (K)", 100, 1000, 310, step=5)
        max_pressure = st.slider("Max Pressure (bar)", 50, 500, 200, step=10)

        st.markdown("**Models**")
        for model in EOSModel:
            st.session_state.models[model] = st.checkbox(
                model.label, value=st.session_state.models[model], key=f"model_{model.value}"
            )

        for model, params in computed_parameters(gas, temperature).items():
            st.markdown(f"**{model.label}**  \n"
                        f"a: `{params.a:.3f}`  \n"
                        f"b: `{params.b * 1e5:.2f} e-5`")

    enabled = [m for m, on in st.session_state.models.items() if on]

    with charts:
        if not enabled:
            st.info("Enable at least one model.")
            return
        try:
            series = compare_models(gas, float(temperature), max_pressure * BAR, 100, enabled)
        except (EOSDomainError, CubicDomainError) as exc:
            st.error(f"Cannot evaluate the equation of state: {exc}")
            return

        col1, col2 = st.columns(2)
        with col1:
            show_figure(render_compressibility_chart(series))
            st.caption("Z < 1: attractive forces dominate. Z > 1: repulsive forces dominate.")
        with col2:
            show_figure(render_pv_isotherm(series))
            st.caption("Pressure vs molar volume (log scale on V).")

        last = {m.label: f"{s.molar_volume[-1] * M3_TO_LITRE:.4f} L/mol" for m, s in series.items()}
        st.markdown(f"### Analysis: {gas.name}")
        st.write(f"Molar volume at {max_pressure} bar and {temperature} K:", last)


def render_clausius_clapeyron_studio():
    """Vapor pressure linearization exercise."""
    st.title("📈 Clausius-Clapeyron Studio")
    points = linearize(ETHANOL_VAPOR_PRESSURE)

    first, last = st.select_slider(
        "Fit range",
        options=list(range(len(points))),
        value=st.session_state.cc_selection,
        format_func=lambda i: f"{points[i].t_celsius} °C",
    )
    st.session_state.cc_selection = (first, last)
    fit = fit_clausius_clapeyron(points, (first, last))

    col1, col2 = st.columns([2, 1])
    with col1:
        show_figure(render_clausius_clapeyron(points, fit, (first, last)))
    with col2:
        st.metric("Slope (K)", f"{fit.slope:.0f}")
        st.metric("R²", f"{fit.r_squared:.5f}")
        answer = st.text_input("Your ΔH_vap (kJ/mol)")
        if st.button("Check Answer"):
            feedback = check_enthalpy_answer(answer, fit)
            (st.success if feedback.correct else st.warning)(feedback.message)
        st.caption(f"Literature value: {ETHANOL_HVAP_LITERATURE} kJ/mol")


def render_equilibrium_studio():
    """Gibbs energy minimization for 2 NO2 <=> N2O4."""
    st.title("⚖️ Gibbs Energy Minimization")
    c1, c2, c3 = st.columns(3)
    temperature = c1.slider("Temperature (K)", 250, 400, 298)
    pressure = c2.slider("Pressure (bar)", 0.1, 10.0, 1.0, step=0.1)
    extent = c3.slider("Extent ξ", 0.01, 0.99, 0.5, step=0.01)

    curve = gibbs_curve(temperature, pressure)
    state = reaction_state(extent, temperature, pressure)

    col1, col2 = st.columns([2, 1])
    with col1:
        show_figure(render_gibbs_curve(curve, extent))
    with col2:
        st.metric("Δ_rG (kJ/mol)", f"{state.reaction_gibbs:.2f}")
        st.metric("Q", f"{state.reaction_quotient:.3f}")
        st.metric("K", f"{state.equilibrium_constant:.3f}")
        st.markdown(f"**{state.direction.value}**")


def render_oscillator_studio():
    """Einstein oscillator thermodynamics."""
    st.title("〰️ Harmonic Oscillator Studio")
    c1, c2 = st.columns(2)
    theta = c1.slider("θ_E (K)", 10, 1000, 100, step=10)
    max_temperature = c2.slider("Max T (K)", 50, 2000, 500, step=50)
    show_limits = st.checkbox("Show limits", value=True)
    quantity = st.radio("Quantity", ["cv", "u"], horizontal=True,
                        format_func=lambda q: "Heat Capacity" if q == "cv" else "Internal Energy")

    curves = einstein_oscillator_curves(theta, max_temperature)
    show_figure(render_oscillator_chart(curves, quantity, show_limits))
    if is_quantum_regime(theta, max_temperature):
        st.info("Quantum regime: most oscillators are frozen in the ground state.")
    else:
        st.info("Classical regime: equipartition is approached.")


def render_two_level_studio():
    """Two-level system and the Schottky anomaly."""
    st.title("🔀 Two-Level System")
    c1, c2, c3 = st.columns(3)
    delta_e = c1.slider("ΔE", 0.5, 5.0, 2.0, step=0.1)
    max_temperature = c2.slider("Max T", 1.0, 20.0, 5.0, step=0.5)
    n_points = c3.slider("Resolution", 50, 500, 100, step=50)

    curves = two_level_curves(delta_e, max_temperature, n_points)
    show_figure(render_two_level_chart(curves))
    t_peak, cv_peak = curves.schottky_peak()
    st.markdown(f"Sampled peak: T = {t_peak:.2f}, Cv = {cv_peak:.4f} · "
                f"Theoretical: T ≈ {schottky_peak_temperature(delta_e):.2f}")


def render_rotor_studio():
    """Rigid rotor spectroscopy and thermodynamics."""
    st.title("🔄 Rigid Rotor Studio")
    homonuclear = st.checkbox("Homonuclear (σ = 2)")
    c1, c2, c3, c4 = st.columns(4)
    mass1 = c1.slider("Mass 1 (amu)", 1, 100, 12)
    mass2 = c2.slider("Mass 2 (amu)", 1, 100, 16, disabled=homonuclear)
    bond = c3.slider("Bond length (Å)", 0.5, 3.0, 1.13, step=0.01)
    temperature = c4.slider("Temperature (K)", 10, 1000, 300, step=10)

    rotor = rigid_rotor(mass1, mass2, bond, temperature, homonuclear)
    col1, col2 = st.columns([2, 1])
    with col1:
        show_figure(render_rotor_populations(rotor))
    with col2:
        st.metric("B (cm⁻¹)", f"{rotor.rotational_constant_wavenumber:.2f}")
        st.metric("θ_rot (K)", f"{rotor.rotational_temperature:.2f}")
        st.metric("Z_rot", f"{rotor.partition_function:.2f}")
        st.metric("S_rot (J/mol·K)", f"{rotor.molar_entropy:.2f}")


def render_ideal_gas_studio():
    """2D ideal gas from the partition function."""
    st.title("💨 Ideal Gas Studio")
    c1, c2, c3 = st.columns(3)
    temperature = c1.slider("Temperature", 1.0, 100.0, 10.0)
    particles = c2.slider("Particles (N)", 5, 200, 50)
    width = c3.slider("Volume (box width)", 100, 600, 200, step=10)

    gas = ideal_gas_2d(temperature, particles, width)
    cols = st.columns(3)
    cols[0].metric("λ", f"{gas.thermal_wavelength:.2f}")
    cols[1].metric("ln Z", f"{gas.ln_partition_function:.2f}")
    cols[2].metric("F", f"{gas.helmholtz_energy:.2f}")
    cols = st.columns(3)
    cols[0].metric("U", f"{gas.internal_energy:.2f}")
    cols[1].metric("P", f"{gas.pressure:.4f}")
    cols[2].metric("S", f"{gas.entropy:.2f}")


def render_phase_diagram_studio():
    """Schematic water phase diagram."""
    st.title("🧊 Phase Diagram of Water")
    c1, c2 = st.columns(2)
    temperature = c1.slider("Temperature (K)", 200, 700, 300)
    log_p = c2.slider("log₁₀ P (Pa)", 0.0, 8.0, 5.0, step=0.1)
    pressure = 10 ** log_p

    info = identify_phase(float(temperature), pressure)
    col1, col2 = st.columns([2, 1])
    with col1:
        show_figure(render_phase_diagram((temperature, pressure)))
    with col2:
        st.markdown(
            f"<div style='background-color:{PHASE_COLORS[info.phase]};"
            f"padding:10px;border-radius:8px;color:white;font-weight:bold;"
            f"text-align:center'>{info.title}</div>",
            unsafe_allow_html=True,
        )
        st.write(info.description)
        st.caption(f"{temperature} K / {pressure:.1e} Pa")


RENDERERS = {
    "Real Gas Studio": render_real_gas,
    "Clausius-Clapeyron": render_clausius_clapeyron_studio,
    "Gibbs Equilibrium": render_equilibrium_studio,
    "Harmonic Oscillator": render_oscillator_studio,
    "Two-Level System": render_two_level_studio,
    "Rigid Rotor": render_rotor_studio,
    "Ideal Gas": render_ideal_gas_studio,
    "Phase Diagram": render_phase_diagram_studio,
}


def main():
    """Main application entry point."""
    initialize_session_state()
    studio = render_sidebar()
    RENDERERS[studio]()


if __name__ == "__main__":
    main()
