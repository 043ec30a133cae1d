from __future__ import annotations

import logging
from io import StringIO

import numpy as np
import pandas as pd

from ellipso_app.physics.reflectivity import HC_EV_NM

logger = logging.getLogger(__name__)


def read_csv_text(text: str) -> pd.DataFrame:
    """Parse a measured reflectance export; lines starting with '#' are instrument headers."""
    return pd.read_csv(StringIO(text), comment="#", skipinitialspace=True)


def map_columns(
    df: pd.DataFrame,
    *,
    refl_col: str,
    energy_col: str | None = None,
    wavelength_col: str | None = None,
    percent: bool = False,
) -> pd.DataFrame:
    """Reduce a reference table to `energy_ev` (eV) and `R` (fraction), ready for the model grid.

    The abscissa is either a photon-energy column (eV) or a vacuum-wavelength
    column (nm), converted with E = 1240 / λ. Rows without a positive, finite
    energy are dropped since the model is undefined there. Duplicate energies
    are averaged so the result is strictly increasing; R is clipped to [0, 1].
    """
    if (energy_col is None) == (wavelength_col is None):
        raise ValueError("Give exactly one of energy_col or wavelength_col")
    x_col = energy_col if energy_col is not None else wavelength_col
    missing = [c for c in (x_col, refl_col) if c not in df.columns]
    if missing:
        raise KeyError(f"Columns not present in reference table: {missing}")

    x = pd.to_numeric(df[x_col], errors="coerce").to_numpy(dtype=float)
    r = pd.to_numeric(df[refl_col], errors="coerce").to_numpy(dtype=float)
    if wavelength_col is not None:
        with np.errstate(divide="ignore", invalid="ignore"):
            energy = np.where(x > 0.0, HC_EV_NM / x, np.nan)
    else:
        energy = x
    if percent:
        r = r / 100.0

    keep = np.isfinite(energy) & (energy > 0.0) & np.isfinite(r)
    n_drop = int(keep.size - keep.sum())
    if n_drop:
        logger.info("Reference table: dropped %d row(s) without a positive energy or R value", n_drop)

    out = pd.DataFrame({"energy_ev": energy[keep], "R": np.clip(r[keep], 0.0, 1.0)})
    return out.groupby("energy_ev", as_index=False, sort=True)["R"].mean()
