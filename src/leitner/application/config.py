from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from leitner.domain.constants import (
    CONFIG_DIRNAME,
    CONFIG_FILENAME,
    DEFAULT_DB_FILENAME,
    ENV_PREFIX,
    LEGACY_CONFIG_FILENAME,
)


def config_dir() -> Path:
    return Path.home() / CONFIG_DIRNAME


def config_files() -> list[Path]:
    return [config_dir() / CONFIG_FILENAME, Path.home() / LEGACY_CONFIG_FILENAME]


def default_database_url() -> str:
    return f"sqlite:///{config_dir() / DEFAULT_DB_FILENAME}"


class AppConfig(BaseSettings):
    """
    Configuration model for leitner.
    Supports loading from:
    1. Environment variables (LEITNER_*)
    2. Config file (~/.config/leitner/config.toml or ~/.leitner.toml)
    3. Manual overrides (CLI)
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    # Storage
    database_url: str = Field(default_factory=default_database_url)
    echo_sql: bool = False

    # Decks
    deck_path: Path | None = None  # YAML deck used by `init`; bundled deck if unset
    seed_on_init: bool = True

    verbose: int = 0  # 0 warnings only, 1 info, 2+ debug

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        from pydantic_settings import TomlConfigSettingsSource

        # First existing file wins
        toml_file = next((f for f in config_files() if f.exists()), None)

        # Earlier sources take priority: CLI overrides, then env, then file.
        if toml_file:
            return (
                init_settings,
                env_settings,
                TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            )
        return (
            init_settings,
            env_settings,
        )

    @field_validator("deck_path", mode="before")
    @classmethod
    def resolve_deck_path(cls, v: Any) -> Path | None:
        if v:
            return Path(v).expanduser().resolve()
        return None


def resolve_config(cli_overrides: dict[str, Any] | None = None) -> AppConfig:
    """
    Build the effective config. Later layers win:
    defaults, then the TOML file, then LEITNER_* variables, then CLI
    options. Options left as None are not applied.
    """
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    return AppConfig(**overrides)
