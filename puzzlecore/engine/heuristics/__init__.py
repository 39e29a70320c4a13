from puzzlecore.engine.heuristics.heuristics import Heuristic, euclidean, manhattan

__all__ = ["Heuristic", "euclidean", "manhattan"]
