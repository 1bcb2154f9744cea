"""Terminal progress reporting."""

from .tracker import PageProgressContext, ProgressTracker

__all__ = ["PageProgressContext", "ProgressTracker"]
