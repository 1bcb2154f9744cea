"""Terminal interaction helpers."""

from .prompt import Prompter

__all__ = ["Prompter"]
