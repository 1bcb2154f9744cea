"""External program collaborators."""

from .tools import DocumentViewer, ZipArchiver, check_dependencies

__all__ = ["DocumentViewer", "ZipArchiver", "check_dependencies"]
