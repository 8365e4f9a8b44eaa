"""JcreateSettings: the one configuration value handed to every component.

Sources, strongest first:

1. keyword arguments (the global CLI flags),
2. ``JCREATE_*`` environment variables, ``__`` separating nested keys
   (``JCREATE_OPTIONS__JAVA_VERSION=11``),
3. the jcreate.toml chosen by ``--config`` or by discovery,
4. the code defaults in :mod:`jcreate.config.models`.

Settings are frozen and built once per invocation; nothing reads
configuration from module state afterwards.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from jcreate.config.discovery import find_config
from jcreate.config.models import (
    OptionsConfig,
    check_templates,
    merge_import_defaults,
    merge_template_defaults,
)
from jcreate.domain.kinds import DEFAULT_TEMPLATES

# The TOML file for the settings object under construction.
_toml_file: ContextVar[Path | None] = ContextVar("jcreate_toml_file", default=None)


class JcreateSettings(BaseSettings):
    """Flags, options, templates, and imports for one invocation.

    Attributes:
        cwd: Directory the request starts from; project discovery and the
            default package are resolved against it.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="JCREATE_",
        env_nested_delimiter="__",
    )

    cwd: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    templates: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TEMPLATES))
    default_imports: dict[str, list[str]] = Field(
        default_factory=lambda: merge_import_defaults(None)
    )
    options: OptionsConfig = Field(default_factory=OptionsConfig)

    @field_validator("templates", mode="before")
    @classmethod
    def _merge_templates(cls, value: Any) -> Any:
        return merge_template_defaults(value)

    @field_validator("templates")
    @classmethod
    def _check_templates(cls, value: dict[str, str]) -> dict[str, str]:
        return check_templates(value)

    @field_validator("default_imports", mode="before")
    @classmethod
    def _merge_imports(cls, value: Any) -> Any:
        return merge_import_defaults(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No dotenv or secrets; the TOML file sits below the environment.
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> JcreateSettings:
        """Build settings for a request starting in *cwd* (default: process cwd).

        An explicit *config_path* must exist; otherwise jcreate.toml is
        discovered from *cwd*.

        Raises:
            click.ClickException: the config file is missing, is not valid
                TOML, or holds values that fail validation.
        """
        start = cwd or Path.cwd()
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(start)

        token = _toml_file.set(toml_path)
        try:
            return cls(cwd=start, config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc
        except ValidationError as exc:
            msg = f"Invalid configuration in {toml_path or 'environment'}:\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_file.reset(token)
