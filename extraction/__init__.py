"""List extraction from free-form generative-AI responses."""

from .classifier import classify_line, classify_lines, group_by_header
from .list_extractor import ListExtractor, extract_lists, preview_lines
from .models import ClassifiedLine, LineKind, TerminatorPolicy

__all__ = [
    "LineKind",
    "TerminatorPolicy",
    "ClassifiedLine",
    "classify_line",
    "classify_lines",
    "group_by_header",
    "ListExtractor",
    "extract_lists",
    "preview_lines",
]
