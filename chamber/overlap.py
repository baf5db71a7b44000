"""
Positional overlap correction.

Keeps molecules of one collection from clumping: any pair whose centers are
closer than the sum of their envelope radii is pushed apart along the line
between them. Velocities are never touched; bouncing is the encounter
resolver's job.
"""
from __future__ import annotations
from typing import List, Optional
import logging

import numpy as np

from .constants import EPSILON, OVERLAP_PUSH_FRACTION, RELAX_ITERATIONS
from .integrators import Integrator
from .molecules import Molecule

logger = logging.getLogger(__name__)


def resolve_overlaps(molecules: List[Molecule],
                     fraction: float = OVERLAP_PUSH_FRACTION,
                     bounds: Optional[Integrator] = None,
                     eps: float = EPSILON) -> int:
    """
    Run one separation pass over every unordered pair of active molecules.

    Each overlapping pair moves apart by `fraction` of the overlap, split
    evenly between the two. Pairs whose centers coincide (distance <= eps)
    have no usable direction and are left alone. If `bounds` is given the
    pushed molecules are clamped back inside the chamber.

    Returns:
        int: number of pairs corrected.
    """
    corrected = 0
    n = len(molecules)
    for i in range(n):
        a = molecules[i]
        if a.consumed:
            continue
        for j in range(i + 1, n):
            b = molecules[j]
            if b.consumed:
                continue
            delta = b.pos - a.pos
            d = float(np.hypot(delta[0], delta[1]))
            min_d = a.radius + b.radius
            if eps < d < min_d:
                normal = delta / d
                shift = normal * ((min_d - d) * fraction * 0.5)
                a.pos -= shift
                b.pos += shift
                if bounds is not None:
                    bounds.contain(a)
                    bounds.contain(b)
                corrected += 1
    return corrected


def relax(molecules: List[Molecule],
          iterations: int = RELAX_ITERATIONS,
          fraction: float = OVERLAP_PUSH_FRACTION,
          bounds: Optional[Integrator] = None) -> int:
    """
    Repeat the separation pass to pre-separate a fresh random spawn.
    Stops early once a pass finds nothing to correct.

    Returns:
        int: number of passes run.
    """
    passes = 0
    for _ in range(max(0, int(iterations))):
        passes += 1
        if resolve_overlaps(molecules, fraction=fraction, bounds=bounds) == 0:
            break
    logger.debug(f"Relaxed {len(molecules)} molecules in {passes} passes")
    return passes


def overlapping_pairs(molecules: List[Molecule], tolerance: float = 0.0) -> int:
    """Count active pairs still closer than the sum of their radii (minus tolerance)."""
    count = 0
    active = [m for m in molecules if not m.consumed]
    for i, a in enumerate(active):
        for b in active[i + 1:]:
            if a.distance_to(b) < a.radius + b.radius - tolerance:
                count += 1
    return count
