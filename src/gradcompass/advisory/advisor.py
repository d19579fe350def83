"""
Advisor Module - AI-generated advisory text.
============================================

Generates short advisory texts with the Gemini API:
- Shortlist recommendations from the student profile
- Statement of Purpose outlines for a program
- Return-on-investment summaries for a program

Advisory text is never critical: every operation returns a fixed
fallback text instead of raising when the key is missing, the model
returns nothing, or the call fails after retries.
"""

from typing import Optional

from tenacity import retry, stop_after_attempt, wait_exponential

from gradcompass.advisory import prompts
from gradcompass.shared.config import get_settings
from gradcompass.shared.logging import get_logger
from gradcompass.shared.schemas import Program, UserProfile

logger = get_logger(__name__)


class Advisor:
    """
    Gemini-backed advisory text generator.

    Example:
        >>> advisor = Advisor()
        >>> print(advisor.shortlist_recommendation(profile))
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        api_key: Optional[str] = None,
    ):
        """
        Initialize the advisor.

        Args:
            model_name: Gemini model name (default from config)
            temperature: Generation temperature (default from config)
            max_tokens: Maximum tokens to generate (default from config)
            api_key: Gemini API key (default from GEMINI_API_KEY / API_KEY)
        """
        settings = get_settings()
        gen_config = settings.generation

        self.model_name = model_name or settings.get_effective_model()
        self.temperature = temperature if temperature is not None else gen_config.temperature
        self.max_tokens = max_tokens or gen_config.max_output_tokens
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.max_retries = gen_config.max_retries
        self.retry_min_wait = gen_config.retry_min_wait
        self.retry_max_wait = gen_config.retry_max_wait

        self._client = None

        logger.debug(
            f"Advisor initialized: model={self.model_name}, "
            f"temp={self.temperature}, key={'set' if self.api_key else 'missing'}"
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def client(self):
        """Lazy-load Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise ValueError("Gemini API key not found. Set GEMINI_API_KEY environment variable.")
            try:
                from google import genai
            except ImportError:
                raise ImportError(
                    "google-genai is required for advisory text. "
                    "Install with: pip install google-genai"
                )
            self._client = genai.Client(api_key=self.api_key)
            logger.debug("Gemini client initialized")
        return self._client

    def _generate_text(self, prompt: str) -> str:
        """
        Generate text with retry logic.

        Returns:
            Generated text ("" if the model returned none)
        """

        @retry(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=1, min=self.retry_min_wait, max=self.retry_max_wait),
            before_sleep=lambda retry_state: logger.warning(
                f"Gemini retry {retry_state.attempt_number}/{self.max_retries}"
            ),
            reraise=True,
        )
        def _generate_with_retry():
            return self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config={
                    "temperature": self.temperature,
                    "max_output_tokens": self.max_tokens,
                },
            )

        response = _generate_with_retry()
        return (response.text or "").strip()

    def _advise(self, prompt: str, no_key: str, empty: str, error: str, topic: str) -> str:
        if not self.has_api_key:
            logger.info(f"No Gemini API key, using fallback {topic}")
            return no_key

        try:
            text = self._generate_text(prompt)
        except Exception as e:
            logger.error(f"Gemini error ({topic}): {e}")
            return error

        if not text:
            logger.warning(f"Gemini returned no text ({topic})")
            return empty
        return text

    def shortlist_recommendation(self, profile: UserProfile) -> str:
        """Three things the student should look for in a program."""
        return self._advise(
            prompts.build_recommendation_prompt(profile),
            no_key=prompts.RECOMMENDATION_NO_KEY,
            empty=prompts.RECOMMENDATION_EMPTY,
            error=prompts.RECOMMENDATION_ERROR,
            topic="recommendation",
        )

    def essay_outline(self, program: Program, profile: UserProfile) -> str:
        """Markdown outline of a Statement of Purpose for a program."""
        return self._advise(
            prompts.build_essay_outline_prompt(program, profile),
            no_key=prompts.essay_outline_placeholder(program, profile),
            empty=prompts.ESSAY_OUTLINE_EMPTY,
            error=prompts.ESSAY_OUTLINE_ERROR,
            topic="essay outline",
        )

    def finance_roi(self, program: Program) -> str:
        """Salary uplift and break-even summary for a program."""
        return self._advise(
            prompts.build_finance_roi_prompt(program),
            no_key=prompts.FINANCE_ROI_NO_KEY,
            empty=prompts.FINANCE_ROI_EMPTY,
            error=prompts.FINANCE_ROI_ERROR,
            topic="ROI analysis",
        )


# ─────────────────────────────────────────────────────────────────────────────
# Global Instance
# ─────────────────────────────────────────────────────────────────────────────


_advisor: Optional[Advisor] = None


def get_advisor() -> Advisor:
    """Get or create global advisor instance."""
    global _advisor
    if _advisor is None:
        _advisor = Advisor()
    return _advisor


# ─────────────────────────────────────────────────────────────────────────────
# Convenience Functions
# ─────────────────────────────────────────────────────────────────────────────


def generate_shortlist_recommendation(profile: UserProfile) -> str:
    """Shortlist recommendation using the global advisor."""
    return get_advisor().shortlist_recommendation(profile)


def generate_essay_outline(program: Program, profile: UserProfile) -> str:
    """Essay outline using the global advisor."""
    return get_advisor().essay_outline(program, profile)


def analyze_finance_roi(program: Program) -> str:
    """ROI analysis using the global advisor."""
    return get_advisor().finance_roi(program)
