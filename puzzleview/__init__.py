"""Terminal presentation shell for the 8-puzzle solver."""
