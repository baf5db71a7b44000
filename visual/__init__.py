from .renderer import render_snapshot, draw_diagnostic_overlay, plot_count_history, save_frame_png
from .colors import VISUAL_BG, VISUAL_ATOM_OUTLINE, VISUAL_BOND, get_species_colors

__all__ = [
    "render_snapshot", "draw_diagnostic_overlay", "plot_count_history", "save_frame_png",
    "VISUAL_BG", "VISUAL_ATOM_OUTLINE", "VISUAL_BOND", "get_species_colors"
]
