"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (MEDSEARCH_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_FACET_VOCABULARY = [
    "Rinoplastia",
    "Mamoplastia",
    "Blefaroplastia",
    "Lifting",
    "Cirurgia Plástica",
    "Dermatologia",
    "Medicina Estética",
]


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=8080, description="Server port")
    workers: int = Field(default=1, ge=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class ScoringWeights(BaseModel):
    """Points awarded by the relevance scorer.

    Defaults reproduce the production ranking; changing them changes result
    order for every query.
    """

    title_exact: float = Field(default=100, description="Token equals the whole title")
    title_prefix: float = Field(default=80, description="Title starts with the token")
    title_contains: float = Field(default=60, description="Title contains the token elsewhere")
    body: float = Field(default=30, description="Body/description contains the token")
    author: float = Field(default=25, description="Author/source contains the token")
    facet: float = Field(default=40, description="Specialty/category contains the token")
    tag: float = Field(default=20, description="Per matching tag")
    views_divisor: float = Field(default=100, gt=0, description="Views are divided by this before capping")
    views_cap: float = Field(default=10, description="Maximum boost from views")
    rating_multiplier: float = Field(default=2, description="Rating is multiplied by this")


class SearchSettings(BaseModel):
    """Search behavior configuration."""

    data_path: Path | None = Field(default=None, description="YAML/JSON catalogue loaded at startup")
    default_limit: int = Field(default=20, ge=1, description="Page size when the caller gives none")
    max_limit: int = Field(default=100, ge=1, description="Largest page size accepted by the HTTP API")
    suggest_limit: int = Field(default=5, ge=1, description="Default number of suggestions")
    min_suggest_length: int = Field(default=2, ge=1, description="Shorter partial queries get no suggestions")
    normalize_accents: bool = Field(
        default=False,
        description="Strip diacritics before matching (e.g. 'rinoplástia' matches 'rinoplastia')",
    )
    facet_vocabulary: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FACET_VOCABULARY),
        description="Known facet labels offered as suggestions after titles",
    )
    weights: ScoringWeights = Field(default_factory=ScoringWeights)

    @field_validator("facet_vocabulary", mode="before")
    @classmethod
    def _parse_vocabulary(cls, v: Any) -> list[str]:
        """Parse the vocabulary from a comma-separated string (env var) or list."""
        if isinstance(v, str):
            return [label.strip() for label in v.split(",") if label.strip()]
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the MEDSEARCH_ prefix.
    Nested settings use double underscores: MEDSEARCH_SERVER__PORT=9090

    Example:
        MEDSEARCH_SERVER__PORT=9090
        MEDSEARCH_SEARCH__DATA_PATH=./catalogue.yaml
        MEDSEARCH_SEARCH__NORMALIZE_ACCENTS=true
    """

    model_config = {
        "env_prefix": "MEDSEARCH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="MedSearch", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    server: ServerSettings = Field(default_factory=ServerSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
