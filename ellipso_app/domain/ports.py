# """
# Ports (interfaces) for adapters. The physics core depends ONLY on these.
# """
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence


class ThinFilmSimulator(ABC):
    @abstractmethod
    def simulate(
        self,
        cos_incidence: float,
        wavelength_nm: float,
        polarization_angle: float,
        incident_index: complex,
        exit_index: complex,
        layers: Sequence[Any],
    ) -> float:
        """Return the power reflectivity of ``layers`` between the incident and exit media.

        ``exit_index`` uses the n − ik convention (extinction coefficient ≤ 0).
        ``polarization_angle`` mixes p and s: 0 ⇒ parallel, π/2 ⇒ perpendicular,
        π/4 ⇒ average. Raises ValueError on a malformed geometry or stack.
        """
