from puzzlecore.engine.gamesolver.solver import Algorithm, Solver

__all__ = ["Algorithm", "Solver"]
