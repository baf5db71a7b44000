from __future__ import annotations
from typing import Iterable
import logging

from .molecules import Molecule

logger = logging.getLogger(__name__)


class Integrator:
    """
    Base class for motion integrators.
    """

    def __init__(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)

    def advance(self, molecules: Iterable[Molecule], speed: float) -> None:
        """
        Move every active molecule by one tick at the given speed multiplier.
        """
        raise NotImplementedError

    def contain(self, m: Molecule) -> None:
        """Clamp a molecule inside the chamber without touching its velocity."""
        r = m.radius
        m.pos[0] = min(max(m.pos[0], r), self.width - r)
        m.pos[1] = min(max(m.pos[1], r), self.height - r)


class WallReflectIntegrator(Integrator):
    """
    Explicit per-tick integrator with elastic wall reflection.

    pos += vel * speed; a molecule reaching a wall (its envelope radius
    included) is clamped to it and the matching velocity component flips.
    Axes are handled independently.
    """

    def advance(self, molecules: Iterable[Molecule], speed: float) -> None:
        for m in molecules:
            if m.consumed:
                continue
            m.pos += m.vel * speed
            self._reflect(m)

    def _reflect(self, m: Molecule) -> None:
        r = m.radius
        for axis, bound in ((0, self.width), (1, self.height)):
            if m.pos[axis] < r:
                m.pos[axis] = r
                m.vel[axis] *= -1
            if m.pos[axis] > bound - r:
                m.pos[axis] = bound - r
                m.vel[axis] *= -1


def create_integrator(integrator_type: str, width: float, height: float) -> Integrator:
    """
    Factory function to create an integrator instance.
    """
    if integrator_type.lower() == "reflect":
        return WallReflectIntegrator(width, height)
    else:
        raise ValueError(f"Unknown integrator type: {integrator_type}")
