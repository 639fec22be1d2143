#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Chemistry Studio
================================================================================

Project:        Physical Chemistry Studio
Description:    Closed-form physical chemistry models behind a set of
                interactive teaching studios

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

This package implements the numerical models of the studios:
- Real gases: Van der Waals and Peng-Robinson compressibility factors
  from an analytic cubic solver
- Statistical mechanics: Einstein oscillator, two-level system,
  rigid rotor, 2D ideal gas
- Classical thermodynamics: Clausius-Clapeyron regression, Gibbs
  energy minimization, water phase diagram

Modules:
    - constants: Physical constants and unit conversions
    - cubic: Cardano / trigonometric cubic root solver
    - eos: Gas species and equation-of-state parameters
    - isotherm: Pressure sweeps along an isotherm
    - statistical: Partition-function models
    - thermodynamics: Macroscopic thermodynamics models
    - visualization: Matplotlib rendering of each studio
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
