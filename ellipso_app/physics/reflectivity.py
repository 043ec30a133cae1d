from __future__ import annotations

from math import pi
from typing import Any, Sequence

import numpy as np

from ellipso_app.domain.models import ModelParameters
from ellipso_app.domain.ports import ThinFilmSimulator
from ellipso_app.physics.permittivity import evaluate_permittivity

__all__ = [
    "HC_EV_NM",
    "energy_to_wavelength_nm",
    "ReflectivityEngine",
    "evaluate_reflectivity",
]

# E[eV] · λ[nm] ≈ 1240
HC_EV_NM: float = 1240.0

# Normal incidence, p/s average, vacuum as the incident medium
COS_INCIDENCE: float = 1.0
POLARIZATION_ANGLE: float = pi / 4
INCIDENT_INDEX: float = 1.0


def energy_to_wavelength_nm(e: Any) -> Any:
    """Photon energy (eV) → vacuum wavelength (nm). e = 0 maps to inf."""
    with np.errstate(divide="ignore"):
        return HC_EV_NM / np.asarray(e, dtype=float)


class ReflectivityEngine:
    """Bare-substrate reflectivity of a Drude–Lorentz material.

    The thin-film simulator is injected; the engine only supplies it the exit
    medium index, the wavelength and a fixed normal-incidence geometry.
    """

    def __init__(self, simulator: ThinFilmSimulator) -> None:
        self.simulator = simulator

    def exit_index(self, e: float, params: ModelParameters) -> complex:
        """conj(√ε): principal root (Re ≥ 0) turned into the n − ik form."""
        eps1, eps2 = evaluate_permittivity(e, params)
        n = np.sqrt(complex(eps1, eps2))
        return complex(np.conj(n))

    def reflectivity(
        self, e: float, params: ModelParameters, layers: Sequence[Any] = ()
    ) -> float:
        """
        Reflectivity at photon energy ``e`` (eV, expected > 0).

        ``layers`` is handed to the simulator untouched; the empty default is the
        bare substrate. Simulator errors propagate unchanged.
        """
        return self.reflectivity_at_index(e, self.exit_index(e, params), layers)

    def reflectivity_at_index(
        self, e: float, exit_index: complex, layers: Sequence[Any] = ()
    ) -> float:
        """Simulator call for an already computed exit index (n − ik form)."""
        wavelength_nm = float(energy_to_wavelength_nm(e))
        return self.simulator.simulate(
            COS_INCIDENCE,
            wavelength_nm,
            POLARIZATION_ANGLE,
            INCIDENT_INDEX,
            exit_index,
            list(layers),
        )


def evaluate_reflectivity(
    e: float, params: ModelParameters, simulator: ThinFilmSimulator | None = None
) -> float:
    if simulator is None:
        from ellipso_app.adapters.thinfilm.tmm import TmmThinFilmSimulator

        simulator = TmmThinFilmSimulator()
    return ReflectivityEngine(simulator).reflectivity(e, params)
