# ellipso_app/adapters/registry.py
from __future__ import annotations

import logging
from typing import Dict, List, Type

from ellipso_app.adapters.thinfilm.fresnel import FresnelThinFilmSimulator
from ellipso_app.adapters.thinfilm.tmm import TmmThinFilmSimulator
from ellipso_app.domain.ports import ThinFilmSimulator

__all__ = ["list_simulators", "make_simulator"]

logger = logging.getLogger(__name__)

# Registry: human-readable name → simulator class
_REGISTRY: Dict[str, Type[ThinFilmSimulator]] = {
    "Planar TMM": TmmThinFilmSimulator,
    "Fresnel (bare substrate)": FresnelThinFilmSimulator,
}


def list_simulators() -> List[str]:
    return list(_REGISTRY.keys())


def make_simulator(name: str) -> ThinFilmSimulator:
    """Instantiate the requested thin-film simulator."""
    cls = _REGISTRY.get(name)
    if cls is None:
        raise KeyError(f"Unknown simulator '{name}'. Available: {', '.join(_REGISTRY)}")
    logger.debug("Using thin-film simulator %r (%s)", name, cls.__name__)
    return cls()
