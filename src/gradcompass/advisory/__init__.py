"""
Advisory Module - AI-generated guidance.
========================================

- prompts: Prompt templates and fallback texts
- advisor: Gemini-backed generation with retries and fallbacks
"""

from gradcompass.advisory.advisor import (
    Advisor,
    analyze_finance_roi,
    generate_essay_outline,
    generate_shortlist_recommendation,
    get_advisor,
)

__all__ = [
    "Advisor",
    "analyze_finance_roi",
    "generate_essay_outline",
    "generate_shortlist_recommendation",
    "get_advisor",
]
