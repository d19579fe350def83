"""
Prompts Module - Prompt templates for advisory text.
====================================================

Three prompts, one per advisory feature:
- Shortlist recommendation: what to look for in a program
- Essay outline: Statement of Purpose structure for one program
- Finance ROI: salary uplift and break-even for one program

Each feature also has fixed fallback texts, used when no API key is
configured, when the model returns nothing, or when the call fails.
"""

import json

from gradcompass.shared.schemas import Program, UserProfile
from gradcompass.shared.utils import format_usd


# ─────────────────────────────────────────────────────────────────────────────
# Prompt Templates
# ─────────────────────────────────────────────────────────────────────────────


RECOMMENDATION_PROMPT = """Based on this student profile, suggest 3 key factors they should look for in a university program.
Profile: {profile_json}
Keep it brief and encouraging."""


ESSAY_OUTLINE_PROMPT = """Create a structure for a Statement of Purpose for:
Program: {program_name} at {university}
Student Profile: {profile_json}

Output structured Markdown with section headers and bullet points."""


FINANCE_ROI_PROMPT = """Analyze the ROI for {program_name} at {university} with tuition {tuition}.
Provide a short summary of potential salary uplift and break-even period."""


# ─────────────────────────────────────────────────────────────────────────────
# Fallback Texts
# ─────────────────────────────────────────────────────────────────────────────


RECOMMENDATION_NO_KEY = (
    "AI personalization unavailable (Missing API Key). Based on your profile, "
    "we recommend looking at top 50 universities in your selected countries."
)
RECOMMENDATION_EMPTY = "Explore programs that align with your research interests."
RECOMMENDATION_ERROR = "Explore programs that match your academic background and budget."

ESSAY_OUTLINE_NO_KEY = """**Outline Placeholder**

1. Introduction: Why {program_name}?
2. Academic Background: Relate to your GPA of {gpa}.
3. Future Goals: How this degree helps.
4. Conclusion."""
ESSAY_OUTLINE_EMPTY = "Could not generate outline."
ESSAY_OUTLINE_ERROR = "Error generating outline. Please try again."

FINANCE_ROI_NO_KEY = "ROI Analysis unavailable."
FINANCE_ROI_EMPTY = "Analysis pending."
FINANCE_ROI_ERROR = "Could not analyze ROI."


def _profile_json(profile: UserProfile) -> str:
    return json.dumps(profile.to_json_dict(), ensure_ascii=False)


def build_recommendation_prompt(profile: UserProfile) -> str:
    """Prompt for the shortlist recommendation."""
    return RECOMMENDATION_PROMPT.format(profile_json=_profile_json(profile))


def build_essay_outline_prompt(program: Program, profile: UserProfile) -> str:
    """Prompt for a Statement of Purpose outline."""
    return ESSAY_OUTLINE_PROMPT.format(
        program_name=program.program_name,
        university=program.university,
        profile_json=_profile_json(profile),
    )


def build_finance_roi_prompt(program: Program) -> str:
    """Prompt for the ROI analysis."""
    return FINANCE_ROI_PROMPT.format(
        program_name=program.program_name,
        university=program.university,
        tuition=format_usd(program.tuition),
    )


def essay_outline_placeholder(program: Program, profile: UserProfile) -> str:
    """Static outline shown when no API key is configured."""
    return ESSAY_OUTLINE_NO_KEY.format(program_name=program.program_name, gpa=profile.gpa)
