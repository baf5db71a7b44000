from __future__ import annotations
from typing import List, Dict, Optional, Any
import logging

import numpy as np

from .config import ChamberConfig
from .constants import MIN_COUNT, MAX_COUNT
from .integrators import Integrator, create_integrator
from .kinetics import KineticParams, kinetic_params, clamp_temperature
from .molecules import Molecule, Species
from .overlap import resolve_overlaps, relax
from .reactions import ReactionEngine

logger = logging.getLogger(__name__)


# -----------------------
# Simulation state
# -----------------------
class SimulationState:
    """
    Everything one run owns: the reactant and product collections, the
    reaction counter and the random source. A re-initialization builds a
    new SimulationState instead of mutating an old one.
    """

    def __init__(self,
                 reactants: List[Molecule],
                 config: ChamberConfig,
                 rng: np.random.Generator,
                 integrator: Optional[Integrator] = None):
        self.config = config
        self.rng = rng
        self.reactants: List[Molecule] = reactants
        self.products: List[Molecule] = []
        self.reaction_count: int = 0
        self.frame: int = 0
        self.initial_counts: Dict[str, int] = {
            Species.H2.value: sum(1 for m in reactants if m.species is Species.H2),
            Species.CL2.value: sum(1 for m in reactants if m.species is Species.CL2),
        }
        self.integrator = integrator or create_integrator("reflect", config.width, config.height)
        self.reaction_engine = ReactionEngine(
            self.reactants, self.products, rng=self.rng,
            contact_multiplier=config.contact_multiplier,
            product_jitter=config.product_jitter,
        )

    @property
    def width(self) -> float:
        return self.config.width

    @property
    def height(self) -> float:
        return self.config.height

    @property
    def events(self) -> List[Dict[str, Any]]:
        return self.reaction_engine.events

    def active_reactants(self) -> List[Molecule]:
        return [m for m in self.reactants if not m.consumed]

    def __repr__(self) -> str:
        return (
            f"<SimulationState frame={self.frame} reactants={len(self.active_reactants())}/"
            f"{len(self.reactants)} products={len(self.products)} reactions={self.reaction_count}>"
        )


class Snapshot:
    """
    Renderable view of one tick: positions, species and radii of every
    visible molecule plus the numbers the diagnostic overlay shows.
    """

    def __init__(self, state: SimulationState, temperature_c: float, trap_mode: bool,
                 params: KineticParams):
        visible = state.active_reactants() + list(state.products)
        self.frame: int = state.frame
        self.width: float = state.width
        self.height: float = state.height
        self.species: List[Species] = [m.species for m in visible]
        self.uids: List[str] = [m.uid for m in visible]
        self.positions: np.ndarray = (
            np.array([m.pos for m in visible], dtype=float) if visible else np.zeros((0, 2))
        )
        self.radii: np.ndarray = np.array([m.radius for m in visible], dtype=float)
        self.counts: Dict[str, int] = get_counts(state)
        self.initial_counts: Dict[str, int] = dict(state.initial_counts)
        self.temperature_c: float = temperature_c
        self.trap_mode: bool = bool(trap_mode)
        self.speed: float = params.speed
        self.probability: float = params.probability

    def __len__(self) -> int:
        return len(self.species)

    def __repr__(self) -> str:
        return f"<Snapshot frame={self.frame} molecules={len(self)} counts={self.counts}>"


# -----------------------
# Construction helpers
# -----------------------
def clamp_count(value: Any, name: str = "count") -> int:
    """Coerce a molecule count into [MIN_COUNT, MAX_COUNT]."""
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Unusable {name} {value!r}; using {MIN_COUNT}")
        return MIN_COUNT
    clamped = max(MIN_COUNT, min(MAX_COUNT, n))
    if clamped != n:
        logger.warning(f"{name} {n} clamped to {clamped}")
    return clamped


def initialize(h2_count: int,
               cl2_count: int,
               config: Optional[ChamberConfig] = None,
               rng: Optional[np.random.Generator] = None,
               seed: Optional[int] = None) -> SimulationState:
    """
    Build a fresh run: spawn H2 then Cl2 molecules at random positions,
    pre-separate any overlapping spawn, and return the new state.

    The Cl2 excess is the caller's responsibility; a run without it is
    logged and still built.
    """
    cfg = config or ChamberConfig()
    rng = rng if rng is not None else np.random.default_rng(seed=seed)
    h2 = clamp_count(h2_count, "H2 count")
    cl2 = clamp_count(cl2_count, "Cl2 count")
    if cl2 <= h2:
        logger.warning(f"Cl2 count ({cl2}) is not in excess over H2 ({h2})")

    reactants: List[Molecule] = []
    for species, count in ((Species.H2, h2), (Species.CL2, cl2)):
        for _ in range(count):
            reactants.append(Molecule.spawn(species, cfg.width, cfg.height, cfg.spawn_margin, rng))

    state = SimulationState(reactants, cfg, rng)
    relax(state.reactants, iterations=cfg.relax_iterations,
          fraction=cfg.overlap_push_fraction, bounds=state.integrator)

    logger.info(f"Simulation initialized: H2={h2} Cl2={cl2} chamber={cfg.width:.0f}x{cfg.height:.0f}")
    return state


# -----------------------
# Core stepping
# -----------------------
def tick(state: SimulationState, temperature_c: float, trap_mode: bool = False) -> Snapshot:
    """
    Advance the run by one frame:
     - derive speed and reaction probability from the temperature
     - move active reactants and all products
     - separate overlaps among reactants, then among products
     - resolve H2/Cl2 encounters and reactions
    """
    tc = clamp_temperature(temperature_c)
    params = kinetic_params(tc, trap_mode, state.config)

    state.integrator.advance(state.reactants, params.speed)
    state.integrator.advance(state.products, params.speed)

    fraction = state.config.overlap_push_fraction
    resolve_overlaps(state.reactants, fraction=fraction, bounds=state.integrator)
    resolve_overlaps(state.products, fraction=fraction, bounds=state.integrator)

    state.reaction_count += state.reaction_engine.step(params.probability, frame=state.frame,
                                                       temperature_c=tc)
    snapshot = Snapshot(state, tc, trap_mode, params)
    state.frame += 1
    return snapshot


# -----------------------
# Read-only summaries
# -----------------------
def get_counts(state: SimulationState) -> Dict[str, int]:
    """Remaining reactants per species, products and reaction events."""
    h2 = sum(1 for m in state.reactants if m.species is Species.H2 and not m.consumed)
    cl2 = sum(1 for m in state.reactants if m.species is Species.CL2 and not m.consumed)
    return {
        Species.H2.value: h2,
        Species.CL2.value: cl2,
        Species.HCL.value: len(state.products),
        "reactions": state.reaction_count,
    }


def diagnostic_lines(state: SimulationState, temperature_c: float, trap_mode: bool) -> List[str]:
    """Text rows of the instructor diagnostic overlay."""
    counts = get_counts(state)
    init = state.initial_counts
    return [
        "Instructor diagnostic (P)",
        f"T = {clamp_temperature(temperature_c):.0f} °C   |   Trap mode (T): {'ON' if trap_mode else 'OFF'}",
        f"Initial: white={init['H2']}   green={init['Cl2']}",
        f"Remaining: white={counts['H2']}   green={counts['Cl2']}",
        f"Product: {counts['HCl']}   |   Reaction events: {counts['reactions']}",
    ]
