"""Chapter processing."""

from .chapter_pipeline import ChapterPipeline

__all__ = ["ChapterPipeline"]
