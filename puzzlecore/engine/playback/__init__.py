from puzzlecore.engine.playback.player import PlaybackStep, SolutionPlayer

__all__ = ["PlaybackStep", "SolutionPlayer"]
