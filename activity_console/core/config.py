import os
from pathlib import Path
from typing import Any, ClassVar, Literal

from dotenv import dotenv_values
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from activity_console.core.errors import ConfigurationError


BASE_CONFIG_FILE = "appsettings.json"
ENV_FILE = ".env"
DEFAULT_ENVIRONMENT = "Production"
BORED_API_URL = "https://www.boredapi.com/api/activity"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ActivityParamsConfig(BaseModel):
    min_number_of_participants: int = Field(default=1, ge=1)
    max_number_of_participants: int = 5

    @model_validator(mode="after")
    def _check_range(self) -> "ActivityParamsConfig":
        # The upper bound is exclusive, so an equal pair leaves nothing to draw.
        if self.max_number_of_participants <= self.min_number_of_participants:
            raise ValueError(
                "max_number_of_participants must be greater than min_number_of_participants "
                f"(got min={self.min_number_of_participants}, max={self.max_number_of_participants})"
            )
        return self


class BoredClientConfig(BaseModel):
    use_mock: bool = True
    base_url: str = BORED_API_URL
    timeout_seconds: float = Field(default=10.0, gt=0)


class Settings(BaseSettings):
    app_name: str = "activity-console"
    app_env: str = DEFAULT_ENVIRONMENT
    log_level: LogLevel = "INFO"

    activity_params: ActivityParamsConfig = Field(default_factory=ActivityParamsConfig)
    bored_client: BoredClientConfig = Field(default_factory=BoredClientConfig)

    # Lowest priority first; later files override earlier ones. Relative to the working directory.
    config_files: ClassVar[tuple[Path, ...]] = (Path(BASE_CONFIG_FILE),)

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        json_sources = tuple(
            JsonConfigSettingsSource(settings_cls, json_file=path) for path in reversed(cls.config_files)
        )
        return (init_settings, env_settings, dotenv_settings, *json_sources)


def config_files_for(config_dir: Path, environment: str) -> tuple[Path, ...]:
    return (
        config_dir / BASE_CONFIG_FILE,
        config_dir / f"appsettings.{environment}.json",
    )


def resolve_environment(environment: str | None, env_file: Path | str | None) -> str:
    """Pick the environment name: argument, then process env, then `.env`, then the default."""
    if environment:
        return environment
    if os.getenv("APP_ENVIRONMENT"):
        return os.environ["APP_ENVIRONMENT"]
    if env_file is not None and Path(env_file).is_file():
        from_dotenv = dotenv_values(env_file).get("APP_ENVIRONMENT")
        if from_dotenv:
            return from_dotenv
    return DEFAULT_ENVIRONMENT


def load_settings(
    *,
    config_dir: Path | str | None = None,
    environment: str | None = None,
    **overrides: Any,
) -> Settings:
    """Load settings from JSON files, `.env`, environment variables and overrides.

    `config_dir` defaults to the current working directory and holds
    `appsettings.json` (required), `appsettings.<environment>.json` and `.env`
    (both optional). Keyword overrides win over every other source and may be
    nested dicts, e.g. ``activity_params={"min_number_of_participants": 2}``.
    """
    config_dir = Path.cwd() if config_dir is None else Path(config_dir)
    overrides.setdefault("_env_file", config_dir / ENV_FILE)
    environment = resolve_environment(environment, overrides["_env_file"])
    files = config_files_for(config_dir, environment)
    if not files[0].is_file():
        raise ConfigurationError(f"Configuration file not found: {files[0]}")

    class EnvironmentSettings(Settings):
        config_files: ClassVar[tuple[Path, ...]] = files

    overrides.setdefault("app_env", environment)
    try:
        return EnvironmentSettings(**overrides)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
