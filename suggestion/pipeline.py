"""
Suggestion pipeline orchestrator: product name → prompt → model → lists.

Coordinates the suggestion workflow:

1. **Prompt**: fill the SEO naming prompt for the product title.
2. **Generation**: send it to the text model (Gemini by default).
3. **Extraction**: keep only the header and bullet lines of the
   response, dropping preamble and trailing commentary.

Usage::

    from suggestion.pipeline import SuggestionConfig, SuggestionPipeline

    pipeline = SuggestionPipeline(SuggestionConfig(project="my-project"))
    result = pipeline.suggest("Green plant")
    print(result.suggestions)
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tqdm import tqdm

from extraction.list_extractor import ListExtractor, preview_lines
from extraction.models import TerminatorPolicy

from .generator import DEFAULT_MODEL, BaseGenerator, GeminiGenerator, GenerationError
from .prompts import build_prompt

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@dataclass
class SuggestionConfig:
    """
    All tuneable parameters for the suggestion pipeline.

    Attributes:
        model_name:       Vertex AI model id.
        project:          Google Cloud project (``None`` for environment default).
        location:         Vertex AI region (``None`` for environment default).
        temperature:      Sampling temperature.
        max_retries:      Generation attempts per product.
        backoff_seconds:  Delay multiplier between attempts.
        policy:           How terminator lines affect extraction.
        debug_lines:      Log the per-line classification of every response.
        disable_tqdm:     Suppress progress bars.
    """

    model_name: str = DEFAULT_MODEL
    project: Optional[str] = None
    location: Optional[str] = None
    temperature: float = 0.9
    max_retries: int = 3
    backoff_seconds: float = 2.0

    policy: TerminatorPolicy = TerminatorPolicy.SKIP_LINE

    debug_lines: bool = False
    disable_tqdm: bool = False


# ------------------------------------------------------------------
# Result
# ------------------------------------------------------------------


@dataclass
class SuggestionResult:
    """Outcome of one suggestion request."""

    product_name: str = ""
    prompt: str = ""
    raw_text: str = ""
    suggestions: str = ""
    error: Optional[str] = None
    elapsed_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def suggestion_lines(self) -> List[str]:
        if not self.suggestions:
            return []
        return self.suggestions.split("\n")

    def summary(self) -> str:
        """Format a human-readable summary of this result."""
        title = self.product_name or "(offline text)"
        if not self.ok:
            status = f"FAILED: {self.error}"
        elif not self.suggestions:
            status = "no list content found"
        else:
            status = f"{len(self.suggestion_lines)} lines"
        return f"{title}: {status} ({self.elapsed_seconds:.2f}s)"


# ------------------------------------------------------------------
# Pipeline
# ------------------------------------------------------------------


class SuggestionPipeline:
    """
    End-to-end product-name suggestion pipeline.

    The generator is created lazily on first use, so offline extraction
    runs never load the model client.
    """

    def __init__(
        self,
        config: Optional[SuggestionConfig] = None,
        generator: Optional[BaseGenerator] = None,
    ):
        self.config = config or SuggestionConfig()
        self.extractor = ListExtractor(self.config.policy)
        self._generator = generator

    def _ensure_generator(self) -> BaseGenerator:
        if self._generator is None:
            cfg = self.config
            self._generator = GeminiGenerator(
                model_name=cfg.model_name,
                project=cfg.project,
                location=cfg.location,
                temperature=cfg.temperature,
                max_retries=cfg.max_retries,
                backoff_seconds=cfg.backoff_seconds,
            )
            logger.info("Generator ready: %s", self._generator)
        return self._generator

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def extract(self, raw_text: str) -> SuggestionResult:
        """Run extraction only, on an already generated response."""
        t0 = time.perf_counter()
        result = SuggestionResult(raw_text=raw_text)
        result.suggestions = self._extract(raw_text)
        result.elapsed_seconds = time.perf_counter() - t0
        return result

    def suggest(self, product_name: str) -> SuggestionResult:
        """
        Ask the model for names for *product_name* and extract the lists.

        Raises:
            ValueError:      If *product_name* is empty.
            GenerationError: If the model call fails after all retries.
        """
        t0 = time.perf_counter()
        result = SuggestionResult(product_name=product_name)
        result.prompt = build_prompt(product_name)

        generator = self._ensure_generator()
        logger.info("Requesting suggestions for %r", product_name)
        result.raw_text = generator.generate(result.prompt)

        result.suggestions = self._extract(result.raw_text)
        if not result.suggestions:
            logger.warning("No list content in response for %r", product_name)

        result.elapsed_seconds = time.perf_counter() - t0
        return result

    def suggest_many(self, product_names: Iterable[str]) -> List[SuggestionResult]:
        """
        Run :meth:`suggest` for each name.

        A failure for one name is recorded on its result and logged;
        the remaining names are still processed.
        """
        names = list(product_names)
        results: List[SuggestionResult] = []

        pbar = tqdm(
            names,
            desc="Generating names",
            unit="product",
            disable=self.config.disable_tqdm,
        )
        for name in pbar:
            pbar.set_postfix(product=name[:20])
            t0 = time.perf_counter()
            try:
                result = self.suggest(name)
            except (ValueError, GenerationError) as e:
                logger.error("Suggestion failed for %r: %s", name, e)
                result = SuggestionResult(
                    product_name=name,
                    error=str(e),
                    elapsed_seconds=time.perf_counter() - t0,
                )
            results.append(result)

        ok = sum(1 for r in results if r.ok)
        logger.info("Suggestions: %d/%d succeeded", ok, len(results))
        return results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _extract(self, raw_text: str) -> str:
        if self.config.debug_lines:
            logger.info("\n%s", preview_lines(self.extractor.classify(raw_text)))
        return self.extractor.extract(raw_text)
