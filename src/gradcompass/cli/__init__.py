"""
CLI Module - Command-line interface for GradCompass.
====================================================

Provides CLI commands for:
- Live search suggestions and free-text query resolution
- Filtering programs by facets and tuition
- Browsing programs, universities and mentors
- AI guidance (recommendations, essay outlines, ROI)

Usage:
    gradcompass --help
    gradcompass suggest "mba in ger"
    gradcompass search --country India --max-tuition 20000
    gradcompass advise roi --program p1

Components:
- main: Typer CLI application
"""

from gradcompass.cli.main import app, cli

__all__ = ["app", "cli"]
