from __future__ import annotations

from math import cos, sin, sqrt
from typing import Any, Sequence

import numpy as np

from ellipso_app.domain.ports import ThinFilmSimulator


class FresnelThinFilmSimulator(ThinFilmSimulator):
    """Closed-form reflectivity of a single interface (bare substrate only).

    The wavelength does not enter a single-interface result; it is accepted to
    honour the port signature. Any layer in the stack is a precondition error.
    """

    def simulate(
        self,
        cos_incidence: float,
        wavelength_nm: float,
        polarization_angle: float,
        incident_index: complex,
        exit_index: complex,
        layers: Sequence[Any],
    ) -> float:
        if len(layers) != 0:
            raise ValueError("Fresnel simulator handles a bare substrate only; got layers")
        if not 0.0 < cos_incidence <= 1.0:
            raise ValueError(f"cos_incidence must lie in (0, 1], got {cos_incidence}")

        n0, ns = np.complex128(incident_index), np.complex128(exit_index)
        sin0 = sqrt(max(0.0, 1.0 - cos_incidence * cos_incidence))
        with np.errstate(divide="ignore", invalid="ignore"):
            cos_s = np.sqrt(1.0 - (n0 * sin0 / ns) ** 2)
            r_s = (n0 * cos_incidence - ns * cos_s) / (n0 * cos_incidence + ns * cos_s)
            r_p = (ns * cos_incidence - n0 * cos_s) / (ns * cos_incidence + n0 * cos_s)
        w_p = cos(polarization_angle) ** 2
        w_s = sin(polarization_angle) ** 2
        return float(w_p * abs(r_p) ** 2 + w_s * abs(r_s) ** 2)
