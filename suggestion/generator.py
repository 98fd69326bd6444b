"""
Text generators used to ask a model for product-name suggestions.

BaseGenerator is the one-method interface the pipeline talks to.
GeminiGenerator implements it on top of Vertex AI through LangChain.
The Vertex client is created on first use, so offline runs (extracting
from a saved response) never touch Google Cloud credentials.
"""

import logging
import os
import time
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"


class GenerationError(RuntimeError):
    """Raised when the model could not produce a response."""


class BaseGenerator(ABC):
    """
    Abstract interface for text generation backends.

    Subclasses only need to implement :meth:`generate`.
    """

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """
        Send *prompt* to the model and return the response text.

        Raises:
            GenerationError: If no response could be obtained.
        """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class GeminiGenerator(BaseGenerator):
    """
    Gemini text model via ``langchain_google_vertexai``.

    Usage::

        gen = GeminiGenerator(project="my-project")
        text = gen.generate("Suggest names for a green plant")
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL,
        project: Optional[str] = None,
        location: Optional[str] = None,
        temperature: float = 0.9,
        max_retries: int = 3,
        backoff_seconds: float = 2.0,
    ):
        """
        Args:
            model_name:      Vertex AI model id.
            project:         Google Cloud project.  Defaults to
                             ``$GOOGLE_CLOUD_PROJECT``.
            location:        Vertex AI region.  Defaults to
                             ``$GOOGLE_CLOUD_REGION``.
            temperature:     Sampling temperature.
            max_retries:     Attempts per prompt before giving up.
            backoff_seconds: Delay multiplier between attempts.
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {max_retries}")

        self.model_name = model_name
        self.project = project or os.environ.get("GOOGLE_CLOUD_PROJECT")
        self.location = location or os.environ.get("GOOGLE_CLOUD_REGION")
        self.temperature = temperature
        self.max_retries = max_retries
        self.backoff_seconds = backoff_seconds
        self._llm = None

    # ------------------------------------------------------------------
    # Lazy client
    # ------------------------------------------------------------------

    def _ensure_llm(self):
        if self._llm is None:
            from langchain_google_vertexai import VertexAI

            kwargs = {"model_name": self.model_name, "temperature": self.temperature}
            if self.project:
                kwargs["project"] = self.project
            if self.location:
                kwargs["location"] = self.location

            logger.info("Loading Vertex AI model: %s", self.model_name)
            self._llm = VertexAI(**kwargs)
        return self._llm

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, prompt: str) -> str:
        # Client setup errors are not transient, so they are not retried
        try:
            llm = self._ensure_llm()
        except Exception as e:
            raise GenerationError(
                f"Could not create Vertex AI client for {self.model_name}: {e}"
            ) from e

        last_exc: Optional[Exception] = None

        for attempt in range(1, self.max_retries + 1):
            try:
                t0 = time.perf_counter()
                text = llm.invoke(prompt)
                logger.debug(
                    "Generated %d chars in %.2fs (attempt %d)",
                    len(text),
                    time.perf_counter() - t0,
                    attempt,
                )
                return text
            except Exception as e:
                last_exc = e
                logger.warning(
                    "Generation attempt %d/%d failed: %s",
                    attempt,
                    self.max_retries,
                    e,
                )
                if attempt < self.max_retries:
                    time.sleep(self.backoff_seconds * attempt)

        raise GenerationError(
            f"All {self.max_retries} generation attempts failed for {self.model_name}"
        ) from last_exc

    @property
    def name(self) -> str:
        return self.model_name

    def __repr__(self) -> str:
        return (
            f"GeminiGenerator(model={self.model_name}, "
            f"project={self.project}, location={self.location})"
        )
