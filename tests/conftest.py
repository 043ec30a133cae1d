from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np
import pytest

from ellipso_app.domain.models import LorentzianTerm, ModelParameters
from ellipso_app.domain.ports import ThinFilmSimulator


class RecordingSimulator(ThinFilmSimulator):
    """Stub simulator: records every call and returns a fixed reflectivity."""

    def __init__(self, result: float = 0.25) -> None:
        self.result = result
        self.calls: List[dict[str, Any]] = []

    def simulate(
        self,
        cos_incidence: float,
        wavelength_nm: float,
        polarization_angle: float,
        incident_index: complex,
        exit_index: complex,
        layers: Sequence[Any],
    ) -> float:
        self.calls.append(
            dict(
                cos_incidence=cos_incidence,
                wavelength_nm=wavelength_nm,
                polarization_angle=polarization_angle,
                incident_index=incident_index,
                exit_index=exit_index,
                layers=list(layers),
            )
        )
        return self.result


@pytest.fixture
def recorder() -> RecordingSimulator:
    return RecordingSimulator()


@pytest.fixture(scope="session")
def constant_params() -> ModelParameters:
    """Drude term degenerates to ε = einf = 1; no oscillators."""
    return ModelParameters(einf=1.0, ep=0.0, g=1.0, lorentzians=())


@pytest.fixture(scope="session")
def peak_params() -> ModelParameters:
    return ModelParameters(
        einf=1.0, ep=0.0, g=1.0, lorentzians=(LorentzianTerm(ek=2.0, fk=1.0, gk=0.1),)
    )


@pytest.fixture(scope="session")
def metal_params() -> ModelParameters:
    """Absorbing Drude metal with two interband resonances."""
    return ModelParameters(
        einf=1.5,
        ep=8.0,
        g=0.07,
        lorentzians=(
            LorentzianTerm(ek=2.5, fk=0.8, gk=0.4),
            LorentzianTerm(ek=4.1, fk=1.6, gk=0.9),
        ),
    )


@pytest.fixture(scope="session")
def energy_axis() -> np.ndarray:
    return np.linspace(0.5, 6.0, 56)
