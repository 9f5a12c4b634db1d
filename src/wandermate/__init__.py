"""WanderMate travel companion core."""

__version__ = "0.3.0"
