"""
Temperature-dependent kinetics of the chamber.

Thermal agitation scales motion speed with sqrt(T / T_ref); the chance that
an H2/Cl2 encounter reacts follows an Arrhenius law p = A * exp(-Ea / (R T)).
Below the cold threshold both are damped, more strongly in trap mode, so
the reaction is visibly almost frozen.
"""
from __future__ import annotations
from typing import NamedTuple, Optional
import math
import logging

from .config import ChamberConfig
from .constants import (
    KELVIN_OFFSET,
    MIN_TEMPERATURE_C,
    MAX_TEMPERATURE_C,
    DEFAULT_TEMPERATURE_C,
)

logger = logging.getLogger(__name__)


class KineticParams(NamedTuple):
    speed: float
    probability: float


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def clamp_temperature(temperature_c: float) -> float:
    """
    Coerce a temperature reading into the supported range. NaN or
    unparsable values fall back to the default temperature.
    """
    try:
        t = float(temperature_c)
    except (TypeError, ValueError):
        logger.warning(f"Unusable temperature {temperature_c!r}; using {DEFAULT_TEMPERATURE_C} C")
        return DEFAULT_TEMPERATURE_C
    if math.isnan(t):
        logger.warning(f"NaN temperature; using {DEFAULT_TEMPERATURE_C} C")
        return DEFAULT_TEMPERATURE_C
    clamped = clamp(t, MIN_TEMPERATURE_C, MAX_TEMPERATURE_C)
    if clamped != t:
        logger.warning(f"Temperature {t} C clamped to {clamped} C")
    return clamped


def arrhenius_probability(temperature_k: float, config: ChamberConfig) -> float:
    """Raw per-encounter probability A * exp(-Ea / (R T)), before damping and capping."""
    return config.pre_exponential_factor * math.exp(
        -config.activation_energy / (config.gas_constant * temperature_k)
    )


def kinetic_params(temperature_c: float, trap_mode: bool = False,
                   config: Optional[ChamberConfig] = None) -> KineticParams:
    """
    Map a Celsius temperature and the trap flag to (speed, probability).

    speed is clamped to [speed_floor, speed_ceiling] before cold damping;
    probability always ends in [0, probability_ceiling].
    """
    cfg = config or ChamberConfig()
    tc = clamp_temperature(temperature_c)
    tk = tc + KELVIN_OFFSET
    tref = cfg.reference_temperature_c + KELVIN_OFFSET

    speed = clamp(math.sqrt(tk / tref), cfg.speed_floor, cfg.speed_ceiling)
    p = arrhenius_probability(tk, cfg)

    if tc < cfg.cold_threshold_c:
        p *= cfg.trap_probability_factor if trap_mode else cfg.cold_probability_factor
        speed *= cfg.trap_speed_factor if trap_mode else cfg.cold_speed_factor

    p = clamp(p, 0.0, cfg.probability_ceiling)
    return KineticParams(speed=speed, probability=p)
