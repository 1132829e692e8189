"""
Application configuration.

Loads settings from init kwargs, environment variables, a .env file
and ``application.yaml``, in that order of priority.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

YAML_CONFIG_FILE = "application.yaml"


class Settings(BaseSettings):
    """Application settings.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for matched routes.
        throw_exception_if_no_handler_found: Raise a catchable route-miss
            error instead of answering an empty 404. Also accepted under the
            hyphenated key ``throw-exception-if-no-handler-found``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file=YAML_CONFIG_FILE,
        extra="ignore",
    )

    project_name: str = "Route Miss API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    throw_exception_if_no_handler_found: bool = Field(
        default=False,
        validation_alias=AliasChoices(
            "throw_exception_if_no_handler_found",
            "throw-exception-if-no-handler-found",
        ),
    )

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


settings = Settings()
