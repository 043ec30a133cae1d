from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from ellipso_app.domain.models import ModelParameters
from ellipso_app.physics.oscillators import (
    drude_imag,
    drude_real,
    lorentzian_imag,
    lorentzian_real,
)

__all__ = [
    "total_real",
    "total_imag",
    "evaluate_permittivity",
    "complex_permittivity",
]


def total_real(e: Any, params: ModelParameters) -> Any:
    """ε₁: Drude real part plus every Lorentzian real part, summed in input order."""
    som = drude_real(e, params.einf, params.ep, params.g)
    for term in params.lorentzians:
        som = som + lorentzian_real(e, term.ek, term.fk, term.gk)
    return som


def total_imag(e: Any, params: ModelParameters) -> Any:
    """ε₂: Drude imaginary part plus every Lorentzian imaginary part."""
    som = drude_imag(e, params.ep, params.g)
    for term in params.lorentzians:
        som = som + lorentzian_imag(e, term.ek, term.fk, term.gk)
    return som


def evaluate_permittivity(e: Any, params: ModelParameters) -> Tuple[Any, Any]:
    return total_real(e, params), total_imag(e, params)


def complex_permittivity(e: Any, params: ModelParameters) -> Any:
    eps1, eps2 = evaluate_permittivity(e, params)
    return np.asarray(eps1) + 1j * np.asarray(eps2)

