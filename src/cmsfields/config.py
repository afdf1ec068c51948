"""Builder defaults loading and validation."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from . import consts
from .enums import Button, Revision
from .errors import ConfigException

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Overridable defaults used by the builders.

    Explicit builder arguments always win over these values.
    """

    field_i18n: bool = Field(default=consts.FIELD_I18N)
    emit_field_i18n: bool = Field(default=consts.EMIT_FIELD_I18N)
    content_i18n: bool = Field(default=consts.CONTENT_I18N)

    content_path: str = Field(default=consts.CONTENT_PATH)
    posts_path: str = Field(default=consts.POSTS_PATH)
    pages_folder: str = Field(default=consts.PAGES_FOLDER)
    data_folder: str = Field(default=consts.DATA_FOLDER)
    page_extension: str = Field(default=consts.PAGE_EXTENSION)
    post_format: str = Field(default=consts.POST_FORMAT)
    slug: str = Field(default=consts.SLUG_TEMPLATE)

    markdown_buttons: List[str] = Field(
        default_factory=lambda: list(consts.MARKDOWN_BUTTONS)
    )
    date_format: Union[bool, str] = Field(default=consts.DATE_FORMAT)
    time_format: Union[bool, str] = Field(default=consts.TIME_FORMAT)
    datetime_format: str = Field(default=consts.DATETIME_FORMAT)

    url_revision: Revision = Field(default=Revision.LATER)
    url_message: str = Field(default=consts.URL_MESSAGE)
    tags_hint: str = Field(default=consts.TAGS_HINT)

    model_config = SettingsConfigDict(
        env_prefix=consts.ENV_PREFIX,
        env_nested_delimiter="__",
        frozen=True,
    )

    @field_validator("markdown_buttons")
    @classmethod
    def validate_markdown_buttons(cls, v: List[str]) -> List[str]:
        known = {b.value for b in Button}
        unknown = [b for b in v if b not in known]
        if unknown:
            raise ValueError(
                f"Unknown markdown buttons: {', '.join(unknown)}. "
                f"Supported buttons: {', '.join(sorted(known))}"
            )
        return v

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
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load_from_file(cls, config_path: str) -> "Settings":
        """Load settings from specified path."""
        path = Path(config_path)
        if not path.exists():
            raise ConfigException(f"Settings file not found: {config_path}")

        class _Settings(cls):
            model_config = SettingsConfigDict(
                toml_file=str(path),
                env_prefix=consts.ENV_PREFIX,
                env_nested_delimiter="__",
                frozen=True,
            )

        try:
            return build_settings(_Settings)
        except ConfigException:
            raise
        except ValueError as e:
            # tomllib.TOMLDecodeError
            raise ConfigException(f"Invalid settings file {config_path}: {e}") from e

    @property
    def url_pattern(self) -> str:
        if self.url_revision == Revision.EARLIER:
            return consts.URL_PATTERN_EARLIER
        return consts.URL_PATTERN


def build_settings(settings_cls: type[Settings] = Settings, **values) -> Settings:
    """Instantiate settings, turning validation errors into ConfigException.

    Args:
        settings_cls: Settings class to build, possibly bound to a TOML file
        **values: Explicit values, taking precedence over the environment

    Raises:
        ConfigException: If any source holds an invalid value
    """
    try:
        return settings_cls(**values)
    except ValidationError as e:
        error_lines = ["Settings validation failed:"]
        for error in e.errors():
            loc = " -> ".join(str(item) for item in error["loc"])
            error_lines.append(f"  - {loc}: {error['msg']}")
        raise ConfigException("\n".join(error_lines)) from e


_active: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the active settings, reading the environment on first use.

    Raises:
        ConfigException: If a CMSFIELDS_* variable holds an invalid value
    """
    global _active

    if _active is None:
        _active = build_settings()
    return _active


def configure(settings: Optional[Settings] = None) -> Optional[Settings]:
    """Replace the active settings.

    Meant to be called once at startup. Passing ``None`` drops the active
    settings so the next :func:`get_settings` call reads the environment again.
    """
    global _active

    _active = settings
    if settings is not None:
        logger.info(
            f"Builder settings configured: content_path={settings.content_path}, "
            f"url_revision={settings.url_revision.value}"
        )
    return settings
