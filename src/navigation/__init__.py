"""Chapter navigation."""

from .loop import NavigationLoop, NavState

__all__ = ["NavState", "NavigationLoop"]
