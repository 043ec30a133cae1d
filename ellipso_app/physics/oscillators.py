from __future__ import annotations

from typing import Any

import numpy as np

__all__ = ["drude_real", "drude_imag", "lorentzian_real", "lorentzian_imag"]

# Each evaluator accepts a scalar or an array for the photon energy `e` (eV)
# and returns a numpy scalar or array. Degenerate inputs (e = 0 in the Drude
# imaginary part, zero damping) yield inf/NaN under IEEE-754 rules; nothing
# here raises.


def drude_real(e: Any, einf: float, ep: float, g: float) -> Any:
    """ε₁ of the Drude term: einf − ep² / (e² + g²)."""
    e = np.asarray(e, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return einf - (ep * ep) / (e * e + g * g)


def drude_imag(e: Any, ep: float, g: float) -> Any:
    """ε₂ of the Drude term: ep²·g·e / (e⁴ + g²·e²). Undefined (NaN) at e = 0."""
    e = np.asarray(e, dtype=float)
    quad_e = e * e
    with np.errstate(divide="ignore", invalid="ignore"):
        return (ep * ep * g * e) / (quad_e * quad_e + g * g * quad_e)


def lorentzian_real(e: Any, ek: float, fk: float, gk: float) -> Any:
    r"""
    ε₁ of one Lorentzian oscillator.

    With δ = ek² − e²:  fk·ek²·δ / (δ² + gk²·e²)

    Together with ``lorentzian_imag`` this is fk·ek² / (ek² − e² − i·gk·e),
    so the pair is Kramers–Kronig consistent. Exactly zero at e = ek.
    """
    e = np.asarray(e, dtype=float)
    quad_e = e * e
    quad_ek = ek * ek
    delta = quad_ek - quad_e
    with np.errstate(divide="ignore", invalid="ignore"):
        return (fk * quad_ek * delta) / (delta * delta + gk * gk * quad_e)


def lorentzian_imag(e: Any, ek: float, fk: float, gk: float) -> Any:
    """ε₂ of one Lorentzian oscillator: fk·ek²·gk·e / (gk²·e² + δ²), peaked near e ≈ ek."""
    e = np.asarray(e, dtype=float)
    quad_e = e * e
    quad_ek = ek * ek
    delta = quad_ek - quad_e
    with np.errstate(divide="ignore", invalid="ignore"):
        return (fk * quad_ek * gk * e) / (gk * gk * quad_e + delta * delta)
