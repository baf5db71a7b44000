from __future__ import annotations
from typing import List, Dict, Any, Optional
import logging

import numpy as np

from .constants import CONTACT_MULTIPLIER, PRODUCT_JITTER
from .molecules import Molecule, Species, random_velocity

logger = logging.getLogger(__name__)


REACTIVE_PAIR = frozenset((Species.H2, Species.CL2))


def is_reactive_pair(a: Molecule, b: Molecule) -> bool:
    """True for one H2 and one Cl2, in either order."""
    return {a.species, b.species} == REACTIVE_PAIR


# -----------------------
# Reaction Engine (encounters and H2 + Cl2 -> 2 HCl)
# -----------------------
class ReactionEngine:
    """
    Responsible for:
      - finding H2/Cl2 pairs within contact distance
      - bouncing them by swapping their velocity vectors
      - firing the reaction with the current per-encounter probability
      - spawning the two HCl products and logging the event

    Same-species pairs are ignored here; their spacing is handled by the
    overlap resolver. Once a molecule is consumed it is never evaluated
    again in the same pass: the outer loop moves on immediately and the
    inner loop skips consumed partners.
    """

    def __init__(self,
                 reactants: List[Molecule],
                 products: List[Molecule],
                 rng: Optional[np.random.Generator] = None,
                 contact_multiplier: float = CONTACT_MULTIPLIER,
                 product_jitter: float = PRODUCT_JITTER):
        self.reactants = reactants
        self.products = products
        self.rng = rng if rng is not None else np.random.default_rng()
        self.contact_multiplier = float(contact_multiplier)
        self.product_jitter = float(product_jitter)
        self.events: List[Dict[str, Any]] = []

    def in_contact(self, a: Molecule, b: Molecule) -> bool:
        reach = (a.radius + b.radius) * self.contact_multiplier
        delta = a.pos - b.pos
        return float(delta @ delta) <= reach * reach

    def step(self, probability: float, frame: int = 0, temperature_c: Optional[float] = None) -> int:
        """
        Resolve one pass of encounters over the reactant collection.

        Returns:
            int: number of reactions fired during this pass.
        """
        fired = 0
        n = len(self.reactants)
        for i in range(n):
            a = self.reactants[i]
            if a.consumed:
                continue
            for j in range(i + 1, n):
                b = self.reactants[j]
                if b.consumed or not is_reactive_pair(a, b):
                    continue
                if not self.in_contact(a, b):
                    continue

                # elastic bounce, simplified to a full velocity swap
                a.vel, b.vel = b.vel.copy(), a.vel.copy()

                if self.rng.random() < probability:
                    self._react(a, b, probability, frame, temperature_c)
                    fired += 1
                    break
        return fired

    def _react(self, a: Molecule, b: Molecule, probability: float,
               frame: int, temperature_c: Optional[float]) -> None:
        a.consume()
        b.consume()
        midpoint = (a.pos + b.pos) / 2.0
        spawned = []
        for _ in range(2):
            offset = self.rng.uniform(-self.product_jitter, self.product_jitter, size=2)
            product = Molecule(Species.HCL, pos=midpoint + offset, vel=random_velocity(self.rng))
            self.products.append(product)
            spawned.append(product)

        ev = {
            "frame": frame,
            "event_type": "reaction",
            "reactants": [a.uid, b.uid],
            "products": [p.uid for p in spawned],
            "midpoint": list(map(float, midpoint)),
            "probability": float(probability),
            "temperature": None if temperature_c is None else float(temperature_c),
        }
        self.events.append(ev)
        logger.debug(f"Reaction at frame {frame}: {a.uid} + {b.uid} -> {spawned[0].uid}, {spawned[1].uid}")
