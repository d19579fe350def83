"""
Configuration Module - Load and validate application settings.
==============================================================

Loads configuration from:
1. config/settings.yaml (defaults)
2. Environment variables from .env file
3. Environment variables from system

Environment variables override YAML defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file early
load_dotenv()

# Find project root (where pyproject.toml is located)
def _find_project_root() -> Path:
    """Find the project root directory by looking for pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback to current working directory
    return Path.cwd()


PROJECT_ROOT = _find_project_root()
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "settings.yaml"


# ─────────────────────────────────────────────────────────────────────────────
# Nested Configuration Models
# ─────────────────────────────────────────────────────────────────────────────


class SearchConfig(BaseModel):
    """Search suggestion and filter settings."""

    min_query_length: int = 2
    max_suggestions: int = 8
    default_max_tuition: int = 100000


class ShortlistConfig(BaseModel):
    """Shortlist and application set defaults."""

    guest_limit: int = 10
    default_tier: str = "Reach"
    default_round: str = "Round 1"
    default_deadline: str = "2025-01-01"


class GenerationConfig(BaseModel):
    """LLM generation settings for advisory text."""

    model_name: str = "gemini-2.5-flash"
    temperature: float = 0.7
    max_output_tokens: int = 1024
    max_retries: int = 3
    retry_min_wait: int = 2
    retry_max_wait: int = 10


class SupabaseConfig(BaseModel):
    """Hosted auth/database settings."""

    url: str = ""
    profiles_table: str = "profiles"
    timeout: int = 15
    max_retries: int = 3
    retry_min_wait: int = 1
    retry_max_wait: int = 8


class PathsConfig(BaseModel):
    """Data paths configuration."""

    data_dir: str = "data"
    catalog_file: str = "data/programs.json"
    mentors_file: str = "data/mentors.json"
    profiles_file: str = "data/local/profiles.json"
    accounts_file: str = "data/local/accounts.json"

    def resolve(self, base_path: Path) -> "ResolvedPaths":
        """Resolve paths relative to a base path."""
        return ResolvedPaths(
            data_dir=base_path / self.data_dir,
            catalog_file=base_path / self.catalog_file,
            mentors_file=base_path / self.mentors_file,
            profiles_file=base_path / self.profiles_file,
            accounts_file=base_path / self.accounts_file,
        )


class ResolvedPaths(BaseModel):
    """Resolved absolute paths."""

    data_dir: Path
    catalog_file: Path
    mentors_file: Path
    profiles_file: Path
    accounts_file: Path

    model_config = {"arbitrary_types_allowed": True}


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    rich_console: bool = True
    file: str = ""


# ─────────────────────────────────────────────────────────────────────────────
# Main Settings Class
# ─────────────────────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from:
    1. config/settings.yaml (defaults)
    2. Environment variables

    Environment variables override YAML settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # API keys (from environment only)
    gemini_api_key: str = Field(
        default="", validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    supabase_anon_key: str = Field(default="", validation_alias="SUPABASE_ANON_KEY")

    # Top-level environment overrides
    supabase_url: Optional[str] = Field(default=None, validation_alias="SUPABASE_URL")
    gemini_model: Optional[str] = Field(default=None, validation_alias="GEMINI_MODEL")
    max_suggestions: Optional[int] = Field(default=None, validation_alias="MAX_SUGGESTIONS")
    log_level: Optional[str] = Field(default=None, validation_alias="LOG_LEVEL")

    # Nested configurations (from YAML)
    search: SearchConfig = Field(default_factory=SearchConfig)
    shortlist: ShortlistConfig = Field(default_factory=ShortlistConfig)
    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    supabase: SupabaseConfig = Field(default_factory=SupabaseConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Computed properties
    _project_root: Path = PROJECT_ROOT
    _resolved_paths: Optional[ResolvedPaths] = None

    @field_validator("gemini_api_key", "supabase_anon_key", mode="before")
    @classmethod
    def validate_api_key(cls, v: Any) -> str:
        """Allow empty keys; features depending on them fall back."""
        if v is None:
            return ""
        return str(v)

    @property
    def project_root(self) -> Path:
        """Get the project root directory."""
        return self._project_root

    @property
    def resolved_paths(self) -> ResolvedPaths:
        """Get resolved absolute paths."""
        if self._resolved_paths is None:
            self._resolved_paths = self.paths.resolve(self._project_root)
        return self._resolved_paths

    def get_effective_supabase_url(self) -> str:
        """Get the effective Supabase URL (env override or config)."""
        return (self.supabase_url or self.supabase.url).rstrip("/")

    def get_effective_model(self) -> str:
        """Get the effective Gemini model (env override or config)."""
        return self.gemini_model or self.generation.model_name

    def get_effective_max_suggestions(self) -> int:
        """Get the effective suggestion limit (env override or config)."""
        if self.max_suggestions is not None:
            return self.max_suggestions
        return self.search.max_suggestions

    def get_effective_log_level(self) -> str:
        """Get the effective log level (env override or config)."""
        if self.log_level:
            return self.log_level.upper()
        return self.logging.level.upper()


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
        return data if data else {}


def _create_settings(config_path: Optional[Path] = None) -> Settings:
    """Create settings instance by merging YAML defaults with environment."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE

    # Load YAML defaults
    yaml_config = _load_yaml_config(config_path)

    # Create settings with YAML as defaults, env vars will override
    return Settings(**yaml_config)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the singleton settings instance.

    Returns:
        Settings instance with merged configuration

    Example:
        >>> settings = get_settings()
        >>> print(settings.search.max_suggestions)
        8
    """
    return _create_settings()


def reload_settings() -> Settings:
    """
    Force reload of settings (clears cache).

    Returns:
        Fresh Settings instance
    """
    get_settings.cache_clear()
    return get_settings()
