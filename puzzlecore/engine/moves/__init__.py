from puzzlecore.engine.moves.moves import apply_move, legal_moves, replay, successors

__all__ = ["apply_move", "legal_moves", "replay", "successors"]
