from puzzlecore.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]
