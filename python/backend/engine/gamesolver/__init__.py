from backend.engine.gamesolver.neighbors import Neighbors, neighbors
from backend.engine.gamesolver.solver import Solver, moves_for, solve

__all__ = ["Neighbors", "Solver", "moves_for", "neighbors", "solve"]
