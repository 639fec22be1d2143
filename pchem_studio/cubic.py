#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Analytic Cubic Root Solver
================================================================================

Project:        Physical Chemistry Studio
Module:         cubic.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 19, 2026
Last Updated:   October 19, 2026

License:        MIT License
================================================================================

Closed-form roots of the normalized cubic

    z³ + a2·z² + a1·z + a0 = 0

using Cardano's method. With the intermediates

    Q  = (3·a1 - a2²) / 9
    Rc = (9·a2·a1 - 27·a0 - 2·a2³) / 54
    D  = Q³ + Rc²

the cubic has one real root when D > 0:

    z = cbrt(Rc + √D) + cbrt(Rc - √D) - a2/3

and three real roots when D ≤ 0 (trigonometric form):

    θ   = acos(Rc / √(-Q³))
    z_k = 2√(-Q)·cos((θ + 2πk)/3) - a2/3,   k = 0, 1, 2

Cubic equations of state can have three real volume roots below the
critical temperature (liquid, unstable, vapor). The studios plot the gas
branch, so the solver reports the largest real root.

The kernels are compiled with Numba since an isotherm evaluates them once
per pressure sample on every slider change.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from numba import jit


# |D| below this fraction of max(|Q|³, Rc²) is treated as a repeated root
DISCRIMINANT_RTOL = 1e-12


class CubicDomainError(ArithmeticError):
    """Raised when the cubic cannot be solved in real arithmetic."""


@dataclass(frozen=True)
class CubicCoefficients:
    """Coefficients of z³ + a2·z² + a1·z + a0 = 0."""
    a2: float
    a1: float
    a0: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.a2, self.a1, self.a0


@jit(nopython=True, cache=True)
def _real_cbrt(x: float) -> float:
    """Real (sign-preserving) cube root."""
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


@jit(nopython=True, cache=True)
def cubic_intermediates(a2: float, a1: float, a0: float) -> Tuple[float, float, float]:
    """
    Depressed-cubic intermediates.

    Returns:
        (Q, Rc, D)
    """
    q = (3.0 * a1 - a2 * a2) / 9.0
    r = (9.0 * a2 * a1 - 27.0 * a0 - 2.0 * a2 * a2 * a2) / 54.0
    d = q * q * q + r * r
    return q, r, d


@jit(nopython=True, cache=True)
def _is_multiple_root_branch(q: float, r: float, d: float) -> bool:
    if d <= 0.0:
        return True
    scale = max(abs(q * q * q), r * r)
    return d <= DISCRIMINANT_RTOL * scale


@jit(nopython=True, cache=True)
def cardano_root(a2: float, a1: float, a0: float) -> float:
    """
    The single real root from Cardano's formula.

    Only meaningful for D ≥ 0. At D = 0 it returns the simple root of
    the repeated-root pair.
    """
    q, r, d = cubic_intermediates(a2, a1, a0)
    sqrt_d = math.sqrt(max(d, 0.0))
    s = _real_cbrt(r + sqrt_d)
    t = _real_cbrt(r - sqrt_d)
    return s + t - a2 / 3.0


@jit(nopython=True, cache=True)
def trigonometric_roots(a2: float, a1: float, a0: float) -> Tuple[float, float, float]:
    """
    The three real roots from the trigonometric form.

    Only meaningful for D ≤ 0. The acos argument is clamped to [-1, 1] so
    that rounding at D ≈ 0 resolves to the repeated root instead of NaN.
    """
    q, r, _ = cubic_intermediates(a2, a1, a0)
    shift = a2 / 3.0

    if q >= 0.0:
        # Q = 0 with D <= 0 forces Rc = 0: triple root
        return -shift, -shift, -shift

    ratio = r / math.sqrt(-q * q * q)
    ratio = min(1.0, max(-1.0, ratio))
    theta = math.acos(ratio)
    m = 2.0 * math.sqrt(-q)

    z0 = m * math.cos(theta / 3.0) - shift
    z1 = m * math.cos((theta + 2.0 * math.pi) / 3.0) - shift
    z2 = m * math.cos((theta + 4.0 * math.pi) / 3.0) - shift
    return z0, z1, z2


@jit(nopython=True, cache=True)
def _largest_root_kernel(a2: float, a1: float, a0: float) -> float:
    q, r, d = cubic_intermediates(a2, a1, a0)

    if not _is_multiple_root_branch(q, r, d):
        return cardano_root(a2, a1, a0)

    z0, z1, z2 = trigonometric_roots(a2, a1, a0)
    return max(z0, max(z1, z2))


def _check_finite(a2: float, a1: float, a0: float) -> None:
    if not (math.isfinite(a2) and math.isfinite(a1) and math.isfinite(a0)):
        raise CubicDomainError(
            f"Non-finite cubic coefficients: a2={a2}, a1={a1}, a0={a0}"
        )


def largest_real_root(a2: float, a1: float, a0: float) -> float:
    """
    Largest real root of z³ + a2·z² + a1·z + a0 = 0.

    Args:
        a2: Quadratic coefficient
        a1: Linear coefficient
        a0: Constant term

    Returns:
        The largest real root (the vapor branch for a cubic EOS)

    Raises:
        CubicDomainError: If the coefficients or the root are not finite
    """
    a2, a1, a0 = float(a2), float(a1), float(a0)
    _check_finite(a2, a1, a0)

    root = _largest_root_kernel(a2, a1, a0)

    if not math.isfinite(root):
        raise CubicDomainError(
            f"Cubic root is not finite for a2={a2}, a1={a1}, a0={a0}"
        )
    return root


def solve_cubic(coefficients: CubicCoefficients) -> float:
    """Largest real root for a CubicCoefficients value."""
    return largest_real_root(*coefficients.as_tuple())


def real_roots(a2: float, a1: float, a0: float) -> Tuple[float, ...]:
    """
    All real roots, sorted ascending.

    Returns one root when the discriminant is positive, otherwise three
    (repeated roots appear more than once).
    """
    a2, a1, a0 = float(a2), float(a1), float(a0)
    _check_finite(a2, a1, a0)

    q, r, d = cubic_intermediates(a2, a1, a0)
    if not _is_multiple_root_branch(q, r, d):
        return (cardano_root(a2, a1, a0),)

    return tuple(sorted(trigonometric_roots(a2, a1, a0)))


def cubic_residual(z: float, a2: float, a1: float, a0: float) -> float:
    """Evaluate z³ + a2·z² + a1·z + a0 (Horner form)."""
    return ((z + a2) * z + a1) * z + a0


def discriminant(a2: float, a1: float, a0: float) -> float:
    """D = Q³ + Rc². Positive means one real root."""
    return cubic_intermediates(float(a2), float(a1), float(a0))[2]
