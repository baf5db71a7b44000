# chamber/__init__.py
from .molecules import Molecule, Species
from .kinetics import KineticParams, kinetic_params
from .simulation import SimulationState, Snapshot, initialize, tick, get_counts, diagnostic_lines
from .simulation_manager import SimulationManager

__all__ = [
    "Molecule", "Species", "KineticParams", "kinetic_params",
    "SimulationState", "Snapshot", "initialize", "tick", "get_counts",
    "diagnostic_lines", "SimulationManager"
]
