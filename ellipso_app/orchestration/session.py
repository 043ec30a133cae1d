from __future__ import annotations

import logging

import numpy as np
import xarray as xr

from ellipso_app.adapters.registry import make_simulator
from ellipso_app.domain.models import (
    LorentzianTerm,
    ModelConfig,
    ModelParameters,
    SpectrumConfig,
)
from ellipso_app.orchestration.spectrum import compute_spectrum

__all__ = ["default_config", "energy_grid", "run_config"]

logger = logging.getLogger(__name__)


# -------------------------
# Configuration helpers
# -------------------------


def default_config() -> ModelConfig:
    """
    Return a fully-populated configuration (ModelConfig).

    Notes:
    • The parameter set is a weakly metallic, silicon-like example: a small Drude
      term plus the E1 and E2 interband resonances.
    • Energies are in eV; the default span covers the visible and near UV.
    """
    parameters = ModelParameters(
        einf=1.0,
        ep=1.2,
        g=0.1,
        lorentzians=(
            LorentzianTerm(ek=3.4, fk=3.0, gk=0.3),
            LorentzianTerm(ek=4.3, fk=5.5, gk=0.6),
        ),
    )
    spectrum = SpectrumConfig(energy_ev=(0.5, 6.0, 111))
    return ModelConfig(parameters=parameters, spectrum=spectrum)


def energy_grid(cfg: ModelConfig) -> np.ndarray:
    e_min, e_max, npts = cfg.spectrum.energy_ev
    return np.linspace(float(e_min), float(e_max), int(npts))


def run_config(cfg: ModelConfig) -> xr.Dataset:
    """Build the configured simulator and evaluate the spectrum over the configured grid."""
    if cfg.parameters.is_degenerate():
        logger.warning("Parameter set has zero damping; results will contain inf/NaN")
    simulator = make_simulator(cfg.simulator)
    ds = compute_spectrum(cfg.parameters, energy_grid(cfg), simulator=simulator)
    logger.info(
        "Spectrum computed: %d points, simulator=%s, version=%s",
        ds.sizes["energy_ev"],
        cfg.simulator,
        cfg.version,
    )
    return ds
