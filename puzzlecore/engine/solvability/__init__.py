from puzzlecore.engine.solvability.checker import count_inversions, is_solvable

__all__ = ["count_inversions", "is_solvable"]
