from typing import Dict, Tuple

from chamber.molecules import Species

# -----------------------------
# Atom color management
# -----------------------------

ATOM_COLORS: Dict[str, str] = {
    "H": "#ffffff",   # white
    "Cl": "#4caf50",  # green
}


def get_atom_color(symbol: str, fallback: str = '#888888') -> str:
    """Return the hex color of an atom symbol."""
    return ATOM_COLORS.get(symbol, fallback)


def get_species_colors(species: Species) -> Tuple[str, str]:
    """Left and right atom colors of a diatomic species."""
    left, right = species.atoms
    return get_atom_color(left), get_atom_color(right)


# Visual constants
VISUAL_BG = "#1e1e1e"
VISUAL_ATOM_OUTLINE = "#000000"
VISUAL_BOND = "#777777"
OVERLAY_BG = "#111111"
OVERLAY_TEXT = "#ffffff"

SERIES_COLORS = {
    "H2": "#9e9e9e",
    "Cl2": "#4caf50",
    "HCl": "#2563eb",
}
