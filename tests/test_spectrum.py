from __future__ import annotations

import numpy as np
import pytest

from ellipso_app.adapters.thinfilm.fresnel import FresnelThinFilmSimulator
from ellipso_app.domain.models import ModelParameters
from ellipso_app.orchestration.spectrum import compute_spectrum
from ellipso_app.physics.permittivity import total_imag, total_real
from ellipso_app.physics.reflectivity import ReflectivityEngine


def test_spectrum_dataset_contracts(metal_params: ModelParameters, energy_axis: np.ndarray) -> None:
    ds = compute_spectrum(metal_params, energy_axis)

    assert "energy_ev" in ds.coords and "oscillator" in ds.coords
    for v in ("eps1", "eps2", "n", "k", "wavelength_nm", "R", "drude_real", "drude_imag"):
        assert v in ds.data_vars, f"Missing variable {v}"
        assert ds[v].dims == ("energy_ev",)
    assert ds["lorentzian_real"].dims == ("oscillator", "energy_ev")
    assert ds.sizes["oscillator"] == len(metal_params.lorentzians)

    assert np.allclose(ds["eps1"].values, total_real(energy_axis, metal_params))
    assert np.allclose(ds["eps2"].values, total_imag(energy_axis, metal_params))
    assert np.allclose(ds["wavelength_nm"].values * energy_axis, 1240.0)

    R = ds["R"].values
    assert np.isfinite(R).all()
    assert ((R >= 0.0) & (R <= 1.0)).all()
    # conjugated index: absorbing material carries k ≤ 0
    assert (ds["k"].values <= 0.0).all()
    assert (ds["n"].values >= 0.0).all()


def test_components_add_up_to_totals(metal_params: ModelParameters, energy_axis: np.ndarray) -> None:
    ds = compute_spectrum(metal_params, energy_axis)
    re = ds["drude_real"] + ds["lorentzian_real"].sum("oscillator")
    im = ds["drude_imag"] + ds["lorentzian_imag"].sum("oscillator")
    assert np.allclose(re.values, ds["eps1"].values, rtol=1e-12)
    assert np.allclose(im.values, ds["eps2"].values, rtol=1e-12)


def test_reflectivity_is_pointwise(metal_params: ModelParameters, energy_axis: np.ndarray) -> None:
    sim = FresnelThinFilmSimulator()
    ds = compute_spectrum(metal_params, energy_axis, simulator=sim)
    engine = ReflectivityEngine(sim)
    for i in (0, 17, energy_axis.size - 1):
        assert ds["R"].values[i] == engine.reflectivity(float(energy_axis[i]), metal_params)


def test_one_simulator_call_per_energy(recorder, constant_params: ModelParameters) -> None:
    e = np.linspace(1.0, 3.0, 7)
    ds = compute_spectrum(constant_params, e, simulator=recorder)
    assert len(recorder.calls) == e.size
    assert np.allclose([c["wavelength_nm"] for c in recorder.calls], 1240.0 / e)
    assert np.all(ds["R"].values == recorder.result)
    assert ds.sizes["oscillator"] == 0


@pytest.mark.parametrize(
    "grid",
    [
        [],
        [[1.0, 2.0], [3.0, 4.0]],
        [0.0, 1.0, 2.0],
        [-1.0, 1.0],
    ],
)
def test_invalid_energy_grids_are_rejected(constant_params: ModelParameters, grid: list) -> None:
    with pytest.raises(ValueError):
        compute_spectrum(constant_params, grid)


def test_exit_index_computed_once_per_energy(
    recorder, metal_params: ModelParameters, monkeypatch: pytest.MonkeyPatch
) -> None:
    seen: list[float] = []
    original = ReflectivityEngine.exit_index

    def counting(self: ReflectivityEngine, e: float, params: ModelParameters) -> complex:
        seen.append(e)
        return original(self, e, params)

    monkeypatch.setattr(ReflectivityEngine, "exit_index", counting)
    e = np.linspace(1.0, 3.0, 5)
    ds = compute_spectrum(metal_params, e, simulator=recorder)

    assert len(seen) == e.size
    passed = np.array([c["exit_index"] for c in recorder.calls])
    assert np.array_equal(passed, ds["n"].values + 1j * ds["k"].values)
