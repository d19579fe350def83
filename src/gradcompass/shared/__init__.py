"""
Shared Module - Common utilities, configuration, schemas, and logging.
======================================================================

This module provides foundational components used across all other modules:

- config: Configuration loading and management
- logging: Rich-backed logging setup
- schemas: Pydantic data models (programs, profiles, mentors)
- utils: JSON I/O and formatting helpers
"""

from gradcompass.shared.config import get_settings, reload_settings, Settings
from gradcompass.shared.logging import get_logger, setup_logging
from gradcompass.shared.schemas import (
    INITIAL_PROFILE,
    ApplicationSetItem,
    AppStatus,
    Mentor,
    MentorCategory,
    Program,
    Tier,
    UserProfile,
)
from gradcompass.shared.utils import (
    ensure_parent_directory,
    format_usd,
    load_json,
    load_models_from_json,
    save_json,
)

__all__ = [
    # Config
    "get_settings",
    "reload_settings",
    "Settings",
    # Logging
    "get_logger",
    "setup_logging",
    # Schemas
    "INITIAL_PROFILE",
    "ApplicationSetItem",
    "AppStatus",
    "Mentor",
    "MentorCategory",
    "Program",
    "Tier",
    "UserProfile",
    # Utils
    "ensure_parent_directory",
    "format_usd",
    "load_json",
    "load_models_from_json",
    "save_json",
]
