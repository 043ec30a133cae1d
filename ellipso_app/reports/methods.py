from __future__ import annotations

from datetime import datetime, timezone
from textwrap import dedent

from ellipso_app.domain.models import ModelConfig


def methods_markdown(cfg: ModelConfig, *, rmse: float | None = None) -> str:
    p = cfg.parameters
    e_min, e_max, npts = cfg.spectrum.energy_ev
    md = f"""
    # Methods (Auto‑generated)

    **Simulator:** {cfg.simulator}
    **Config version:** {cfg.version}
    **Generated:** {datetime.now(timezone.utc).replace(tzinfo=None).isoformat()}Z

    ## Dielectric model
    ε(E) = ε∞ − Ep²/(E² + iγE) + Σₖ fₖEₖ²/(Eₖ² − E² − iγₖE)

    Drude: ε∞={p.einf:.4g}, Ep={p.ep:.4g} eV, γ={p.g:.4g} eV.

    ## Lorentzian oscillators
"""
    if not p.lorentzians:
        md += "    (none)\n"
    for i, t in enumerate(p.lorentzians):
        md += f"    - L{i}: Eₖ={t.ek:.4g} eV, fₖ={t.fk:.4g}, γₖ={t.gk:.4g} eV\n"

    md += f"""

    ## Reflectivity
    Bare substrate at normal incidence from vacuum, p/s average; exit index conj(√ε);
    λ[nm] = 1240 / E[eV]. E∈[{e_min:.3g},{e_max:.3g}] eV × {npts} pts.
    """
    if rmse is not None:
        md += f"\n    **RMSE against reference R(E):** {rmse:.2e}.\n"
    return dedent(md).strip() + "\n"
