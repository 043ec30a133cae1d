from __future__ import annotations

import logging
from typing import Any

import numpy as np
import xarray as xr

from ellipso_app.adapters.thinfilm.tmm import TmmThinFilmSimulator
from ellipso_app.domain.models import ModelParameters
from ellipso_app.domain.ports import ThinFilmSimulator
from ellipso_app.physics.oscillators import (
    drude_imag,
    drude_real,
    lorentzian_imag,
    lorentzian_real,
)
from ellipso_app.physics.permittivity import evaluate_permittivity
from ellipso_app.physics.reflectivity import ReflectivityEngine, energy_to_wavelength_nm

__all__ = ["compute_spectrum"]

logger = logging.getLogger(__name__)


def compute_spectrum(
    params: ModelParameters,
    energy_ev: Any,
    simulator: ThinFilmSimulator | None = None,
) -> xr.Dataset:
    """Evaluate the model over an energy grid and pack the curves into a Dataset.

    Permittivity curves are vectorized; reflectivity is evaluated per energy,
    each call independent of the others. ``k`` is taken from the conjugated
    exit index, so it is ≤ 0 for an absorbing material.
    """
    e = np.asarray(energy_ev, dtype=float)
    if e.ndim != 1 or e.size == 0:
        raise ValueError("energy_ev must be a non-empty 1D grid")
    if (e <= 0.0).any():
        raise ValueError("energy_ev must be strictly positive")

    engine = ReflectivityEngine(simulator or TmmThinFilmSimulator())
    logger.debug(
        "Spectrum scan: %d energies in [%.4g, %.4g] eV, %d Lorentzian term(s), simulator=%s",
        e.size,
        float(e.min()),
        float(e.max()),
        len(params.lorentzians),
        type(engine.simulator).__name__,
    )

    eps1, eps2 = evaluate_permittivity(e, params)
    index = np.array([engine.exit_index(float(x), params) for x in e], dtype=complex)
    refl = np.array(
        [engine.reflectivity_at_index(float(x), n) for x, n in zip(e, index)], dtype=float
    )

    n_osc = len(params.lorentzians)
    lor_re = np.empty((n_osc, e.size), dtype=float)
    lor_im = np.empty((n_osc, e.size), dtype=float)
    for i, t in enumerate(params.lorentzians):
        lor_re[i] = lorentzian_real(e, t.ek, t.fk, t.gk)
        lor_im[i] = lorentzian_imag(e, t.ek, t.fk, t.gk)

    ds = xr.Dataset(
        data_vars=dict(
            eps1=(("energy_ev",), np.asarray(eps1, dtype=float)),
            eps2=(("energy_ev",), np.asarray(eps2, dtype=float)),
            n=(("energy_ev",), index.real),
            k=(("energy_ev",), index.imag),
            wavelength_nm=(("energy_ev",), np.asarray(energy_to_wavelength_nm(e), dtype=float)),
            R=(("energy_ev",), refl),
            drude_real=(("energy_ev",), np.asarray(drude_real(e, params.einf, params.ep, params.g))),
            drude_imag=(("energy_ev",), np.asarray(drude_imag(e, params.ep, params.g))),
            lorentzian_real=(("oscillator", "energy_ev"), lor_re),
            lorentzian_imag=(("oscillator", "energy_ev"), lor_im),
        ),
        coords=dict(energy_ev=e, oscillator=np.arange(n_osc, dtype=int)),
        attrs=dict(
            einf=params.einf,
            ep=params.ep,
            g=params.g,
            simulator=type(engine.simulator).__name__,
            note="Drude–Lorentz bare-substrate spectrum",
        ),
    )

    n_bad = int(np.count_nonzero(~np.isfinite(refl)))
    if n_bad:
        logger.warning("Spectrum scan produced %d non-finite reflectivity value(s)", n_bad)
    return ds
