"""
Count history for the chamber, used by the CLI summary and the history plot.
"""

from __future__ import annotations
from typing import Dict, List
import logging
from collections import deque

logger = logging.getLogger(__name__)


class CountMetrics:
    """
    Tracks remaining reactants, products and reaction events per frame.
    """

    def __init__(self, max_history: int = 2000):
        """
        Args:
            max_history: Maximum number of frames to keep
        """
        self.max_history = max_history
        self.frames: deque[int] = deque(maxlen=max_history)
        self.h2: deque[int] = deque(maxlen=max_history)
        self.cl2: deque[int] = deque(maxlen=max_history)
        self.hcl: deque[int] = deque(maxlen=max_history)
        self.reactions: deque[int] = deque(maxlen=max_history)

    def update(self, frame: int, counts: Dict[str, int]) -> None:
        self.frames.append(int(frame))
        self.h2.append(int(counts.get("H2", 0)))
        self.cl2.append(int(counts.get("Cl2", 0)))
        self.hcl.append(int(counts.get("HCl", 0)))
        self.reactions.append(int(counts.get("reactions", 0)))

    def clear(self) -> None:
        for series in (self.frames, self.h2, self.cl2, self.hcl, self.reactions):
            series.clear()

    def reaction_rate(self, window: int = 60) -> float:
        """Reaction events per frame over the last `window` recorded frames."""
        if len(self.reactions) < 2:
            return 0.0
        recent = list(self.reactions)[-window:]
        span = len(recent) - 1
        return (recent[-1] - recent[0]) / span if span > 0 else 0.0

    def get_plot_data(self) -> Dict[str, List[int]]:
        return {
            "frame": list(self.frames),
            "H2": list(self.h2),
            "Cl2": list(self.cl2),
            "HCl": list(self.hcl),
            "reactions": list(self.reactions),
        }

    def __len__(self) -> int:
        return len(self.frames)
