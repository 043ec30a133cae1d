from __future__ import annotations

import io
from typing import Iterable

import pandas as pd
import xarray as xr


def dataset_table(
    ds: xr.Dataset,
    vars: Iterable[str] = ("eps1", "eps2", "n", "k", "R"),
) -> pd.DataFrame:
    """Return a wide table on energy: one `energy_ev` column plus one column per variable.

    Only variables living on the single `energy_ev` dimension are accepted.
    """
    names = list(vars)
    for v in names:
        if v not in ds.data_vars:
            raise KeyError(f"Dataset missing variable {v!r}")
        if ds[v].dims != ("energy_ev",):
            raise ValueError(f"Variable {v!r} is not a 1D curve on energy_ev")
    return ds[names].to_dataframe().reset_index()[["energy_ev", *names]]


def oscillator_long_table(ds: xr.Dataset, part: str = "real") -> pd.DataFrame:
    """Tidy (oscillator, energy_ev, value) table of the per-term Lorentzian curves."""
    var = f"lorentzian_{part}"
    if var not in ds.data_vars:
        raise KeyError(f"Dataset missing variable {var!r}")
    return ds[var].to_dataframe().reset_index()[["oscillator", "energy_ev", var]]


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
