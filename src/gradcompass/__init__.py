"""
GradCompass - Graduate Program Discovery
========================================

Helps students discover graduate and study-abroad programs, shortlist
them, track applications and find mentors:

- Facet-based search with live suggestions ("MBA in Germany")
- Exact-match filtering with a tuition ceiling
- Profile and shortlist persistence via Supabase
- Gemini-generated recommendations, essay outlines and ROI summaries

The search core works on an in-memory catalog: facet values are derived
once per catalog load, suggestions and filters are pure functions of the
catalog and the user's input.
"""

__version__ = "0.1.0"
__author__ = "GradCompass Team"
__license__ = "MIT"

# Public API - lazy imports to avoid circular dependencies and speed up startup
__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Main modules (imported on demand)
    "shared",
    "search",
    "catalog",
    "journey",
    "advisory",
    "cli",
]
