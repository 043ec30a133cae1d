#"""
#Domain models (v1.0.0)
#
#Pydantic v2 models define the oscillator parameter set and run configuration.
#All models are frozen: a parameter set is a read-only snapshot shared by every
#evaluation that uses it.
#"""
from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class LorentzianTerm(BaseModel):
    model_config = ConfigDict(frozen=True)

    ek: float = Field(..., description="Resonance energy (eV)")
    fk: float = Field(..., description="Oscillator strength")
    gk: float = Field(..., description="Broadening (eV)")


class ModelParameters(BaseModel):
    """Drude term (einf, ep, g) plus an ordered sequence of Lorentzian terms.

    Zero damping (g == 0 or any gk == 0) is not rejected here; the evaluators
    return inf/NaN for it. Use ``is_degenerate()`` to screen parameter sets.
    """

    model_config = ConfigDict(frozen=True)

    einf: float = Field(1.0, description="High-frequency dielectric constant")
    ep: float = Field(0.0, description="Drude amplitude (eV)")
    g: float = Field(1.0, description="Drude damping (eV)")
    lorentzians: tuple[LorentzianTerm, ...] = Field(
        (), validation_alias=AliasChoices("lorentzians", "laurentians")
    )

    def is_degenerate(self) -> bool:
        return self.g == 0.0 or any(t.gk == 0.0 for t in self.lorentzians)


class SpectrumConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    energy_ev: tuple[float, float, int] = (0.5, 6.0, 111)  # (min, max, npts)

    @model_validator(mode="after")
    def _check_span(self) -> SpectrumConfig:
        e_min, e_max, npts = self.energy_ev
        if e_min <= 0.0:
            raise ValueError("energy_ev minimum must be > 0 eV")
        if e_max <= e_min:
            raise ValueError("energy_ev maximum must exceed the minimum")
        if npts < 2:
            raise ValueError("energy_ev needs at least 2 points")
        return self


class ModelConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    parameters: ModelParameters
    spectrum: SpectrumConfig = SpectrumConfig()
    simulator: str = "Planar TMM"
    version: str = "1.0.0"
