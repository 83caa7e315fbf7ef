"""Shared utility modules for the snippet checker."""

from .file_loader import DocumentLoader, FileInfo

__all__ = [
    "DocumentLoader",
    "FileInfo",
]
