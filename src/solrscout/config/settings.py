"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SOLRSCOUT_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, YamlConfigSettingsSource


class SolrSettings(BaseModel):
    """Solr connection configuration."""

    base_url: str = Field(default="http://localhost:8983/solr", description="Solr base URL")
    default_endpoint: str = Field(
        default="collection1",
        description="Core/collection used when an operation names no index (e.g. CLI commands run without --endpoint)",
    )
    username: str | None = Field(default=None, description="Basic-auth username")
    password: str | None = Field(default=None, description="Basic-auth password")
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class SearchSettings(BaseModel):
    """Search driver configuration."""

    driver: str = Field(default="solr", description="Search driver: solr, null")
    solr: SolrSettings = Field(default_factory=SolrSettings)

    @field_validator("driver")
    @classmethod
    def _normalize_driver(cls, v: str) -> str:
        return v.strip().lower()


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Nested settings use double underscores:

        SOLRSCOUT_SEARCH__DRIVER=solr
        SOLRSCOUT_SEARCH__SOLR__BASE_URL=http://solr:8983/solr
        SOLRSCOUT_SEARCH__SOLR__DEFAULT_ENDPOINT=posts
    """

    model_config = {
        "env_prefix": "SOLRSCOUT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    debug: bool = Field(default=False, description="Debug mode")

    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        The file is read as a settings source ranked below environment
        variables and `.env`, so `SOLRSCOUT_*` values override it.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        class _YamlSettings(cls):  # type: ignore[valid-type,misc]
            model_config = {**cls.model_config, "yaml_file": config_path}

            @classmethod
            def settings_customise_sources(
                cls,
                settings_cls: type[BaseSettings],
                init_settings: PydanticBaseSettingsSource,
                env_settings: PydanticBaseSettingsSource,
                dotenv_settings: PydanticBaseSettingsSource,
                file_secret_settings: PydanticBaseSettingsSource,
            ) -> tuple[PydanticBaseSettingsSource, ...]:
                return (
                    init_settings,
                    env_settings,
                    dotenv_settings,
                    YamlConfigSettingsSource(settings_cls),
                    file_secret_settings,
                )

        return cls.model_validate(_YamlSettings().model_dump())
