from __future__ import annotations

from dataclasses import dataclass
from math import cos, pi, sin, sqrt
from typing import Literal, Sequence

import numpy as np

from ellipso_app.domain.ports import ThinFilmSimulator

Pol = Literal["TE", "TM"]  # TE ≡ s (perpendicular), TM ≡ p (parallel)


@dataclass(frozen=True)
class LayerSpec:
    n: complex  # refractive index n = n' − i k (k ≥ 0 ⇒ Im(n) ≤ 0)
    d_nm: float | None  # physical thickness in nm; None ⇒ skipped


def _cos_theta_in_layer(n0: complex, n: complex, sin0: float) -> complex:
    # Snell: n0 sinθ0 = n sinθ. Branch chosen so that Im(n cosθ) ≤ 0, the
    # decaying wave for the n − ik convention.
    if sin0 == 0.0:
        return 1.0 + 0.0j
    s2 = (n0 / n) ** 2 * sin0**2
    cos_t = complex(np.sqrt(1.0 - s2 + 0j))
    y = n * cos_t
    if y.imag > 0.0 or (y.imag == 0.0 and y.real < 0.0):
        cos_t = -cos_t
    return cos_t


def _q_param(pol: Pol, n: complex, cos_t: complex) -> complex:
    # TE: q = n cosθ ; TM: q = cosθ / n
    return n * cos_t if pol == "TE" else cos_t / n


def _layer_matrix(pol: Pol, k0: float, n: complex, cos_t: complex, d_nm: float) -> np.ndarray:
    # Characteristic matrix for a single homogeneous layer
    beta = k0 * n * cos_t * d_nm  # phase thickness (rad)
    c, s = np.cos(beta), 1j * np.sin(beta)
    q = _q_param(pol, n, cos_t)
    return np.array([[c, s / q], [q * s, c]], dtype=complex)


def _r_from_global(M: np.ndarray, q0: complex, qs: complex) -> complex:
    A, B, C, D = M[0, 0], M[0, 1], M[1, 0], M[1, 1]
    return complex((q0 * A + q0 * qs * B - C - qs * D) / (q0 * A + q0 * qs * B + C + qs * D))


def tmm_r(
    pol: Pol,
    n0: complex,
    ns: complex,
    layers: Sequence[LayerSpec],
    wavelength_nm: float,
    cos0: float,
) -> complex:
    """Field reflection coefficient of a planar multilayer via characteristic matrices.

    layers are the *internal* finite layers between semi-infinite incident (n0) and exit (ns)
    media, listed from the incident side.
    """
    k0 = 2.0 * pi / float(wavelength_nm)
    sin0 = sqrt(max(0.0, 1.0 - cos0 * cos0))
    q0 = _q_param(pol, n0, _cos_theta_in_layer(n0, n0, sin0))

    M = np.eye(2, dtype=complex)
    for L in layers:
        if L.d_nm is None or L.d_nm == 0:
            continue
        cosL = _cos_theta_in_layer(n0, L.n, sin0)
        M = M @ _layer_matrix(pol, k0, L.n, cosL, float(L.d_nm))

    qs = _q_param(pol, ns, _cos_theta_in_layer(n0, ns, sin0))
    return _r_from_global(M, q0, qs)


class TmmThinFilmSimulator(ThinFilmSimulator):
    """Planar multilayer reflectivity; p and s powers mixed by the polarization angle."""

    def simulate(
        self,
        cos_incidence: float,
        wavelength_nm: float,
        polarization_angle: float,
        incident_index: complex,
        exit_index: complex,
        layers: Sequence[LayerSpec],
    ) -> float:
        if not 0.0 < cos_incidence <= 1.0:
            raise ValueError(f"cos_incidence must lie in (0, 1], got {cos_incidence}")
        if not wavelength_nm > 0.0:
            raise ValueError(f"wavelength_nm must be > 0, got {wavelength_nm}")
        for L in layers:
            if not isinstance(L, LayerSpec):
                raise ValueError(f"Unsupported layer descriptor: {L!r}")
            if L.d_nm is not None and L.d_nm < 0.0:
                raise ValueError(f"Layer thickness must be ≥ 0 nm, got {L.d_nm}")

        n0, ns = np.complex128(incident_index), np.complex128(exit_index)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            r_p = tmm_r("TM", n0, ns, layers, wavelength_nm, cos_incidence)
            r_s = tmm_r("TE", n0, ns, layers, wavelength_nm, cos_incidence)
        w_p = cos(polarization_angle) ** 2
        w_s = sin(polarization_angle) ** 2
        return float(w_p * abs(r_p) ** 2 + w_s * abs(r_s) ** 2)
