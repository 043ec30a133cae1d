from __future__ import annotations

from math import sqrt
from typing import Tuple

import numpy as np
import pandas as pd
import xarray as xr


def _overlap_on_model_grid(
    e_model: np.ndarray, e_ref: np.ndarray, r_ref: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Interpolate reference onto model energy grid over the overlapping range.

    Returns (mask_common, r_ref_interp). Requires ≥ 3 overlapping points.
    """
    lo = max(float(e_model.min()), float(e_ref.min()))
    hi = min(float(e_model.max()), float(e_ref.max()))
    mask = (e_model >= lo) & (e_model <= hi)
    if int(mask.sum()) < 3:
        raise ValueError("Insufficient spectral overlap between model and reference")
    return mask, np.interp(e_model[mask], e_ref, r_ref)


def rmse_reflectivity_on_common_energy(ds: xr.Dataset, ref: pd.DataFrame) -> float:
    """Compute RMSE between model R(E) and reference R_ref(E) on the model grid.

    The reference is interpolated onto the overlapping model energy grid.
    """
    e_model = ds["energy_ev"].values.astype(float)
    r_model = ds["R"].values.astype(float)

    e_ref = ref["energy_ev"].to_numpy(dtype=float)
    r_ref = ref["R"].to_numpy(dtype=float)

    mask, r_ref_interp = _overlap_on_model_grid(e_model, e_ref, r_ref)
    diff = r_model[mask] - r_ref_interp
    return sqrt(float(np.mean(diff * diff)))


def badge_for_rmse(rmse: float, *, pass_th: float = 0.01, warn_th: float = 0.03) -> str:
    if rmse <= pass_th:
        return "PASS"
    if rmse <= warn_th:
        return "WARN"
    return "FAIL"
