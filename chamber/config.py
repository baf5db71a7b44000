"""
Chamber configuration.

Gathers the tunable constants of the kinetics law, the resolvers and the
chamber geometry into one object that can be overridden by keyword or from
a JSON file. Unknown keys are rejected so typos do not silently fall back
to defaults.
"""
from __future__ import annotations
from typing import Dict, Any, Optional
import json
import logging

from . import constants as C

logger = logging.getLogger(__name__)


_DEFAULTS: Dict[str, Any] = {
    "width": C.DEFAULT_WIDTH,
    "height": C.DEFAULT_HEIGHT,
    "spawn_margin": C.SPAWN_MARGIN,
    "gas_constant": C.GAS_CONSTANT,
    "activation_energy": C.ACTIVATION_ENERGY,
    "pre_exponential_factor": C.PRE_EXPONENTIAL_FACTOR,
    "probability_ceiling": C.PROBABILITY_CEILING,
    "reference_temperature_c": C.REFERENCE_TEMPERATURE_C,
    "speed_floor": C.SPEED_FLOOR,
    "speed_ceiling": C.SPEED_CEILING,
    "cold_threshold_c": C.COLD_THRESHOLD_C,
    "cold_probability_factor": C.COLD_PROBABILITY_FACTOR,
    "cold_speed_factor": C.COLD_SPEED_FACTOR,
    "trap_probability_factor": C.TRAP_PROBABILITY_FACTOR,
    "trap_speed_factor": C.TRAP_SPEED_FACTOR,
    "contact_multiplier": C.CONTACT_MULTIPLIER,
    "overlap_push_fraction": C.OVERLAP_PUSH_FRACTION,
    "relax_iterations": C.RELAX_ITERATIONS,
    "product_jitter": C.PRODUCT_JITTER,
}


class ChamberConfig:
    """
    Configuration values for one simulation run.

    Usage:
        cfg = ChamberConfig(activation_energy=12000.0)
        cfg = load_config("classroom.json")
    """

    def __init__(self, **overrides: Any):
        unknown = set(overrides) - set(_DEFAULTS)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        values = dict(_DEFAULTS)
        values.update(overrides)
        for key, value in values.items():
            setattr(self, key, int(value) if key == "relax_iterations" else float(value))

        if self.width < C.MIN_CHAMBER_SIZE or self.height < C.MIN_CHAMBER_SIZE:
            raise ValueError(
                f"Chamber must be at least {C.MIN_CHAMBER_SIZE:.0f} px on each side, "
                f"got {self.width}x{self.height}"
            )
        if self.contact_multiplier <= 1.0:
            raise ValueError("contact_multiplier must be > 1.0")

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in _DEFAULTS}

    def copy(self, **overrides: Any) -> "ChamberConfig":
        values = self.to_dict()
        values.update(overrides)
        return ChamberConfig(**values)

    def __repr__(self) -> str:
        return (
            f"<ChamberConfig {self.width:.0f}x{self.height:.0f} "
            f"Ea={self.activation_energy} A={self.pre_exponential_factor}>"
        )


def load_config(path: Optional[str] = None) -> ChamberConfig:
    """
    Load a ChamberConfig from a JSON object file. Missing keys keep their
    defaults; a None path returns the defaults.
    """
    if path is None:
        return ChamberConfig()
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    cfg = ChamberConfig(**raw)
    logger.info(f"Loaded chamber config from {path}: {cfg}")
    return cfg
