from backend.engine.gamesolver.parity import is_solvable, repair_to_solvable
from backend.engine.gamesolver.solver import Solution, Solver, SolverConfig

__all__ = [
    "Solution",
    "Solver",
    "SolverConfig",
    "is_solvable",
    "repair_to_solvable",
]
