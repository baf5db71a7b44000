import os
import logging
from typing import Optional, List

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from chamber.constants import ATOM_RADII
from chamber.metrics import CountMetrics
from chamber.simulation import Snapshot
from visual.colors import (
    get_species_colors,
    VISUAL_BG,
    VISUAL_ATOM_OUTLINE,
    VISUAL_BOND,
    OVERLAY_BG,
    OVERLAY_TEXT,
    SERIES_COLORS,
)

logger = logging.getLogger(__name__)


def _new_axes(snapshot: Snapshot):
    fig = plt.figure(figsize=(snapshot.width / 100.0, snapshot.height / 100.0), facecolor=VISUAL_BG)
    ax = fig.add_axes([0, 0, 1, 1])
    return fig, ax


def render_snapshot(snapshot: Snapshot, ax=None, diagnostics: Optional[List[str]] = None):
    """
    Draw one frame: every visible molecule as two touching atoms joined by
    a short bond. The chamber uses screen coordinates, y pointing down.
    If `diagnostics` is given the overlay box is drawn on top.

    Returns the axes drawn on.
    """
    if ax is None:
        _, ax = _new_axes(snapshot)

    ax.clear()
    ax.set_xlim(0, snapshot.width)
    ax.set_ylim(snapshot.height, 0)
    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(VISUAL_BG)
    for spine in ax.spines.values():
        spine.set_visible(False)

    for species, (x, y) in zip(snapshot.species, snapshot.positions):
        left, right = species.atoms
        r1, r2 = ATOM_RADII[left], ATOM_RADII[right]
        c1, c2 = get_species_colors(species)
        draw_bond(ax, x, y, r1, c1, r2, c2)

    if diagnostics:
        draw_diagnostic_overlay(ax, diagnostics)
    return ax


def draw_bond(ax, x: float, y: float, r1: float, c1: str, r2: float, c2: str) -> None:
    """Two atoms centred either side of (x, y) with the bond line between them."""
    ax.plot([x - r1 + 1, x + r2 - 1], [y, y], color=VISUAL_BOND, linewidth=2, zorder=1)
    ax.add_patch(Circle((x - r1, y), r1, facecolor=c1, edgecolor=VISUAL_ATOM_OUTLINE,
                        linewidth=1, zorder=2))
    ax.add_patch(Circle((x + r2, y), r2, facecolor=c2, edgecolor=VISUAL_ATOM_OUTLINE,
                        linewidth=1, zorder=2))


def draw_diagnostic_overlay(ax, lines: List[str]) -> None:
    """
    Discreet diagnostic box in the top-left corner.
    """
    if not lines:
        return
    title, *rows = lines
    text = title + "\n" + "\n".join(rows)
    ax.text(0.015, 0.975, text, transform=ax.transAxes, ha='left', va='top',
            fontsize=9, color=OVERLAY_TEXT, family='sans-serif', zorder=10,
            bbox=dict(boxstyle='square,pad=0.6', facecolor=OVERLAY_BG, alpha=0.92, edgecolor='none'))


def plot_count_history(metrics: CountMetrics, ax=None):
    """
    Plot remaining H2, Cl2 and product HCl against frame number.
    """
    if ax is None:
        fig = plt.figure(figsize=(6, 3.5))
        ax = fig.add_subplot(1, 1, 1)
    data = metrics.get_plot_data()
    ax.clear()
    for key in ("H2", "Cl2", "HCl"):
        ax.plot(data["frame"], data[key], color=SERIES_COLORS[key], linewidth=1.5, label=key)
    ax.set_xlabel('Frame', fontsize=9)
    ax.set_ylabel('Molecules', fontsize=9)
    ax.set_title('Composition over time', fontsize=10)
    ax.legend(loc='upper right', fontsize=8)
    ax.grid(True, alpha=0.3)
    return ax


def save_frame_png(snapshot: Snapshot, filename: str,
                   diagnostics: Optional[List[str]] = None, dpi: int = 100) -> str:
    """
    Render a snapshot headlessly and save it as a PNG.
    """
    ax = render_snapshot(snapshot, diagnostics=diagnostics)
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    ax.figure.savefig(filename, dpi=dpi, facecolor=VISUAL_BG)
    plt.close(ax.figure)
    logger.info(f"Saved frame to {filename}")
    return filename
