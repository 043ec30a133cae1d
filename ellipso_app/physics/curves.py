from __future__ import annotations

from typing import Any, Literal

from ellipso_app.domain.models import ModelParameters
from ellipso_app.domain.ports import ThinFilmSimulator
from ellipso_app.physics.oscillators import (
    drude_imag,
    drude_real,
    lorentzian_imag,
    lorentzian_real,
)
from ellipso_app.physics.permittivity import total_imag, total_real
from ellipso_app.physics.reflectivity import evaluate_reflectivity

__all__ = ["Kind", "Part", "component"]

Kind = Literal["total", "drude", "lorentzian", "reflectivity"]
Part = Literal["real", "imag"]


def component(
    kind: Kind,
    part: Part,
    e: Any,
    params: ModelParameters,
    index: int | None = None,
    simulator: ThinFilmSimulator | None = None,
) -> Any:
    """
    Evaluate one curve of the model: the full permittivity sum, the Drude term
    alone, a single Lorentzian term selected by position in ``params.lorentzians``,
    or the bare-substrate reflectivity.

    ``part`` picks ε₁ or ε₂ and is checked but not used for ``"reflectivity"``,
    which is a real scalar at a single energy ``e``. ``simulator`` only applies to
    that kind (planar TMM when omitted).

    Raises IndexError when ``index`` does not select an existing term and
    ValueError for an unknown kind/part.
    """
    if part not in ("real", "imag"):
        raise ValueError(f"Unknown part {part!r}; expected 'real' or 'imag'")
    real = part == "real"

    if kind == "total":
        return total_real(e, params) if real else total_imag(e, params)
    if kind == "drude":
        if real:
            return drude_real(e, params.einf, params.ep, params.g)
        return drude_imag(e, params.ep, params.g)
    if kind == "lorentzian":
        if index is None or not 0 <= index < len(params.lorentzians):
            raise IndexError(
                f"Lorentzian index {index!r} out of range for {len(params.lorentzians)} term(s)"
            )
        t = params.lorentzians[index]
        fn = lorentzian_real if real else lorentzian_imag
        return fn(e, t.ek, t.fk, t.gk)
    if kind == "reflectivity":
        return evaluate_reflectivity(float(e), params, simulator=simulator)
    raise ValueError(f"Unknown component kind {kind!r}")
