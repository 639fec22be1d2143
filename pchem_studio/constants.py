#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Physical Constants
================================================================================

Project:        Physical Chemistry Studio
Module:         constants.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

SI constants shared by the models. The gas constant is kept at the four
significant figures used throughout the studios so that tabulated results
match the classroom handouts.
"""

# Molar gas constant
R = 8.314                       # J/(mol·K)
R_KJ = 0.008314                 # kJ/(mol·K)

# Exact SI (2019) values
PLANCK = 6.62607015e-34         # J·s
BOLTZMANN = 1.380649e-23        # J/K
AVOGADRO = 6.02214076e23        # 1/mol
SPEED_OF_LIGHT_CM = 2.99792458e10   # cm/s, for wavenumbers
AMU = 1.66053906660e-27         # kg

# Unit conversions
BAR = 1.0e5                     # Pa
ANGSTROM = 1.0e-10              # m
CELSIUS_OFFSET = 273.15         # K
M3_TO_LITRE = 1000.0
