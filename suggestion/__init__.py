"""
Product-name suggestion pipeline.

Prompt construction, model generation, and list extraction for
suggesting SEO-friendly product names.
"""

from .generator import BaseGenerator, GeminiGenerator, GenerationError
from .pipeline import SuggestionConfig, SuggestionPipeline, SuggestionResult
from .prompts import PROMPT_TEMPLATE, build_prompt

__all__ = [
    "BaseGenerator",
    "GeminiGenerator",
    "GenerationError",
    "SuggestionConfig",
    "SuggestionPipeline",
    "SuggestionResult",
    "PROMPT_TEMPLATE",
    "build_prompt",
]
