"""Default settings for the solver and the terminal shell.

Every value can be overridden on the command line; the matching
environment variable names are listed alongside.
"""

from __future__ import annotations

# Number of random slides applied to the goal when scrambling.
SHUFFLE_STEPS = 150
SHUFFLE_STEPS_ENV = "EIGHTPUZZLE_SHUFFLE_STEPS"

# Search caps, checked once per frontier pop. None means uncapped.
MAX_EXPANSIONS: int | None = None
MAX_EXPANSIONS_ENV = "EIGHTPUZZLE_MAX_EXPANSIONS"

TIMEOUT: float | None = None
TIMEOUT_ENV = "EIGHTPUZZLE_TIMEOUT"

# Seconds between boards when animating a solution.
STEP_DELAY = 0.3
STEP_DELAY_ENV = "EIGHTPUZZLE_STEP_DELAY"

# Path lengths (boards, initial included) used to rate a solution.
RATING_EXCELLENT_MAX = 20
RATING_GOOD_MAX = 30
