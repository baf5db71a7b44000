from __future__ import annotations
from enum import Enum
from typing import Optional
import itertools
import logging

import numpy as np

from .constants import (
    ATOM_RADII,
    ENVELOPE_MARGIN,
    FALLBACK_ENVELOPE_RADIUS,
    INITIAL_SPEED_RANGE,
)

logger = logging.getLogger(__name__)

_uid_counter = itertools.count()


class Species(Enum):
    """Molecule species. H2 and Cl2 are reactants, HCl is the terminal product."""
    H2 = "H2"
    CL2 = "Cl2"
    HCL = "HCl"

    @property
    def atoms(self):
        """Atom symbols of the diatomic, left to right."""
        return {
            Species.H2: ("H", "H"),
            Species.CL2: ("Cl", "Cl"),
            Species.HCL: ("H", "Cl"),
        }[self]


def envelope_radius(species: Species) -> float:
    """
    Collision envelope of a diatomic: both atom radii plus a small margin.
    """
    try:
        left, right = species.atoms
        return ATOM_RADII[left] + ATOM_RADII[right] + ENVELOPE_MARGIN
    except (KeyError, ValueError):
        return FALLBACK_ENVELOPE_RADIUS


def random_velocity(rng: np.random.Generator) -> np.ndarray:
    """Fresh velocity with both components uniform in [-1, 1]."""
    return rng.uniform(-INITIAL_SPEED_RANGE, INITIAL_SPEED_RANGE, size=2)


class Molecule:
    """
    A single diatomic molecule in the chamber.

    Consumed molecules stay in their collection and are skipped by every
    resolver; they never move again and are never revived.
    """

    def __init__(
        self,
        species: Species,
        pos: Optional[np.ndarray] = None,
        vel: Optional[np.ndarray] = None,
        uid: Optional[str] = None,
    ):
        """
        Args:
            species (Species): H2, Cl2 or HCl.
            pos (np.ndarray, optional): 2D position. Defaults to origin.
            vel (np.ndarray, optional): 2D velocity. Defaults to zero.
            uid (str, optional): Unique identifier. Auto-generated if None.
        """
        self.species: Species = species
        self.uid: str = uid or f"{species.value}_{next(_uid_counter)}"
        self.radius: float = envelope_radius(species)
        self.pos: np.ndarray = np.array(pos if pos is not None else np.zeros(2), dtype=float)
        self.vel: np.ndarray = np.array(vel if vel is not None else np.zeros(2), dtype=float)
        self.consumed: bool = False

    @classmethod
    def spawn(cls, species: Species, width: float, height: float, margin: float,
              rng: np.random.Generator) -> "Molecule":
        """
        Create a molecule at a uniformly random position at least `margin`
        away from the walls, with a random initial velocity.
        """
        mx = min(margin, width / 2.0)
        my = min(margin, height / 2.0)
        pos = np.array([rng.uniform(mx, width - mx), rng.uniform(my, height - my)])
        return cls(species, pos=pos, vel=random_velocity(rng))

    def consume(self) -> None:
        """Mark the molecule as reacted. Products cannot be consumed."""
        if self.species is Species.HCL:
            raise ValueError(f"Product molecule {self.uid} cannot be consumed")
        self.consumed = True

    def distance_to(self, other: Molecule) -> float:
        return float(np.hypot(*(self.pos - other.pos)))

    def __repr__(self) -> str:
        state = " consumed" if self.consumed else ""
        return f"<Molecule {self.uid} {self.species.value} pos={self.pos} vel={self.vel}{state}>"
