"""Hexagonal-lattice snowflake growth by reaction-diffusion cellular automaton."""

from snowflake_ca.config.types import BoundaryPolicy, RenderConfig, SimulationConfig
from snowflake_ca.domain.grid import CellStatus, Grid
from snowflake_ca.simulation.engine import SimulationResult, run_simulation
from snowflake_ca.simulation.step import step

__all__ = [
    "BoundaryPolicy",
    "CellStatus",
    "Grid",
    "RenderConfig",
    "SimulationConfig",
    "SimulationResult",
    "run_simulation",
    "step",
]

__version__ = "0.1.0"
