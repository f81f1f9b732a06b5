# src/simplerrd/config.py
"""Configuration module for simplerrd."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import yaml
from pydantic import BaseModel, PositiveInt, ValidationError

from simplerrd.utils.exceptions import InvalidSettingsError, MissingSimpleRRDKeyError, SettingsReadOnlyError
from simplerrd.utils.logger import logger

DEFAULT_CONFIG_FILE = "simplerrd.yml"

# Basic CSS color keywords; rrdtool itself only understands hex, so callers
# relying on names are expected to post-process or use a patched rrdtool.
BASIC_COLORS: tuple[str, ...] = (
    "black",
    "silver",
    "gray",
    "white",
    "maroon",
    "red",
    "purple",
    "fuchsia",
    "green",
    "lime",
    "olive",
    "yellow",
    "navy",
    "blue",
    "teal",
    "aqua",
    "orange",
)


# ---------------------------------------------------------------------------
# Pydantic schema — every configurable knob is declared here
# ---------------------------------------------------------------------------
class CommandsCfg(BaseModel):
    """Defaults and vocabularies used when building graph directives.

    Attributes:
        line_width (int): Width given to a LINE when none is specified.
        colors (Sequence[str]): Symbolic color names accepted besides hex values.
    """

    line_width: PositiveInt = 1
    colors: Sequence[str] = BASIC_COLORS


class SimpleRRDCfg(BaseModel):
    """Top-level configuration section.

    Attributes:
        commands (CommandsCfg): Settings for the directive builders.
    """

    commands: CommandsCfg = CommandsCfg()


class Settings(BaseModel):
    """Facade imported by all modules: from simplerrd.config import get_settings()."""

    simplerrd: SimpleRRDCfg

    @classmethod
    def load(cls, path: Path | str | None = None) -> Settings:
        """Load the configuration settings from a YAML file.

        If no path is provided, ``simplerrd.yml`` in the current working directory
        is used. A missing file yields the built-in defaults.

        Args:
            path (Path | str | None, optional): The path to the YAML configuration file.
                Defaults to None.

        Returns:
            Settings: An instance of the Settings class loaded with configuration data.

        Raises:
            MissingSimpleRRDKeyError: If the top-level 'simplerrd' key is missing in the YAML file.
            InvalidSettingsError: If the configuration file fails validation.
        """
        cfg_path = Path(path) if path else Path.cwd() / DEFAULT_CONFIG_FILE
        if not cfg_path.is_file():
            # fall back to built-in defaults if no YAML found
            return cls(simplerrd=SimpleRRDCfg())
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
        if "simplerrd" not in raw:
            raise MissingSimpleRRDKeyError()
        try:
            settings = cls(**raw)
        except ValidationError as exc:
            logger.error("Invalid configuration file %s:\n%s", cfg_path, exc)
            raise InvalidSettingsError(cfg_path, exc) from exc
        logger.info("Loaded settings from %s", cfg_path)
        return settings

    def __setattr__(self, key: str, value: object) -> None:
        """Reject every attribute assignment once the model is built.

        Pydantic populates fields without going through ``__setattr__``, so this
        only affects callers trying to modify the loaded settings.

        Args:
            key (str): The name of the attribute to set.
            value (object): The value to assign to the attribute.

        Raises:
            SettingsReadOnlyError: Always.
        """
        raise SettingsReadOnlyError()


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------
_settings: Settings | None = None


def get_settings(path: Path | str | None = None) -> Settings:
    """Return the singleton Settings, loading + validating on the first call.

    The first call wins: once settings are loaded, later calls return them and
    ignore *path*, so the builders (which call this without arguments) see the
    file the application chose. Use :func:`reset_settings` to load another one.

    Args:
        path (Path | str | None): Path to the YAML configuration file.
            If None, defaults to "simplerrd.yml" in the current directory.

    Returns:
        Settings: The loaded settings.
    """
    global _settings  # noqa: PLW0603  # pylint: disable=global-statement
    if _settings is None:
        _settings = Settings.load(path)
    return _settings


def reset_settings() -> None:
    """Forget the loaded settings so the next :func:`get_settings` call reloads them."""
    global _settings  # noqa: PLW0603  # pylint: disable=global-statement
    _settings = None
