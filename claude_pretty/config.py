"""
Global configuration for claude-pretty-printer.

This module defines the user directories and the RenderConfigLoader class
for building the render configuration from an optional config.yaml and
CLI overrides.

Usage:
    from claude_pretty.config import RenderConfigLoader, ConfigNotFoundError

    loader = RenderConfigLoader()
    loader.apply_cli_overrides(layout="compact", theme=None)
    config = loader.get_render_config()

Example config.yaml:
    display:
      theme: nord
      layout: compact
      stats: false
      colors: true
      filter: [assistant, result]
"""
import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml

from .core.schemas import LayoutName, RenderConfig, ThemeName

logger = logging.getLogger(__name__)


class ConfigNotFoundError(Exception):
    """Raised when an explicitly requested configuration file is not found."""
    pass


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


# Allow override via CLAUDE_PRETTY_HOME (tests, containers)
_home_override = os.environ.get("CLAUDE_PRETTY_HOME")
if _home_override:
    PRETTY_HOME: Path = Path(_home_override).resolve()
else:
    PRETTY_HOME = Path.home() / ".claude-pretty"

CONFIG_FILE: Path = PRETTY_HOME / "config.yaml"


class RenderConfigLoader:
    """
    Loads display settings from YAML and merges CLI overrides.

    The default config file is optional; a path given explicitly must exist.
    CLI overrides take precedence over the file. Keys:

    - theme: one of default, monokai, dracula, nord
    - layout: one of full, compact, minimal, header
    - stats: bool (False suppresses result statistics)
    - colors: bool
    - filter: list of message kinds, or a comma-separated string
    - width: int box width
    """

    KNOWN_KEYS = ("theme", "layout", "stats", "colors", "filter", "width")

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to a config.yaml. Defaults to CONFIG_FILE,
                which may be absent.
        """
        self._explicit = config_path is not None
        self._config_path = config_path or CONFIG_FILE
        self._config: dict[str, Any] = {}
        self._cli_overrides: dict[str, Any] = {}
        self._loaded = False

    def load(self) -> None:
        """
        Load settings from the YAML file, if there is one.

        Raises:
            ConfigNotFoundError: If an explicit config path does not exist.
            ConfigValidationError: If the file is malformed or holds invalid values.
        """
        self._load_file()
        self._validate(self._config, str(self._config_path))
        self._loaded = True

    def _load_file(self) -> None:
        if not self._config_path.exists():
            if self._explicit:
                raise ConfigNotFoundError(
                    f"Configuration file not found: {self._config_path}"
                )
            logger.debug(f"No config file at {self._config_path}, using defaults")
            return

        try:
            with self._config_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Failed to parse configuration {self._config_path}: {e}"
            ) from e

        if data is None:
            return
        if not isinstance(data, dict) or not isinstance(data.get("display"), dict):
            raise ConfigValidationError(
                f"No 'display' section found in {self._config_path}"
            )
        self._config = dict(data["display"])
        logger.info(f"Configuration loaded from {self._config_path}")

    @staticmethod
    def _validate(values: dict[str, Any], source: str) -> None:
        """Check names and types of display settings."""
        unknown = [key for key in values if key not in RenderConfigLoader.KNOWN_KEYS]
        if unknown:
            raise ConfigValidationError(
                f"Unknown display settings in {source}: {', '.join(unknown)}"
            )

        theme = values.get("theme")
        if theme is not None and theme not in {t.value for t in ThemeName}:
            raise ConfigValidationError(
                f"Invalid theme '{theme}' in {source} "
                f"(expected one of: {', '.join(t.value for t in ThemeName)})"
            )

        layout = values.get("layout")
        if layout is not None and layout not in {name.value for name in LayoutName}:
            raise ConfigValidationError(
                f"Invalid layout '{layout}' in {source} "
                f"(expected one of: {', '.join(name.value for name in LayoutName)})"
            )

        for key in ("stats", "colors"):
            if key in values and not isinstance(values[key], bool):
                raise ConfigValidationError(
                    f"Invalid value for {key} in {source}: expected true or false"
                )

        width = values.get("width")
        if width is not None and (
            isinstance(width, bool) or not isinstance(width, int) or width <= 0
        ):
            raise ConfigValidationError(
                f"Invalid value for width in {source}: expected a positive integer"
            )

        kinds = values.get("filter")
        if kinds is not None and not isinstance(kinds, (str, list)):
            raise ConfigValidationError(
                f"Invalid value for filter in {source}: expected a list or a string"
            )

    def apply_cli_overrides(self, **kwargs: Any) -> None:
        """
        Apply CLI argument overrides (None values are ignored).

        Args:
            **kwargs: Settings to override (e.g., theme="nord", stats=False).
        """
        for key, value in kwargs.items():
            if value is not None:
                self._cli_overrides[key] = value
                logger.debug(f"CLI override: {key}={value}")

    def get_config(self) -> dict[str, Any]:
        """
        Get the merged settings (YAML + CLI overrides).

        Returns:
            Settings dictionary.
        """
        if not self._loaded:
            self.load()

        merged = dict(self._config)
        merged.update(self._cli_overrides)
        self._validate(merged, "command line")
        return merged

    def get_render_config(self, use_colors: bool = True) -> RenderConfig:
        """
        Build the immutable render configuration.

        Args:
            use_colors: Color default when neither file nor CLI set it.

        Returns:
            RenderConfig snapshot.
        """
        merged = self.get_config()
        return RenderConfig(
            theme=merged.get("theme", ThemeName.DEFAULT.value),
            layout=merged.get("layout", LayoutName.FULL.value),
            suppress_stats=not merged.get("stats", True),
            filter_types=parse_filter(merged.get("filter")),
            use_colors=merged.get("colors", use_colors),
            width=merged.get("width"),
        )

    @property
    def config_path(self) -> Path:
        """Return the path to the config file."""
        return self._config_path


def parse_filter(value: Any) -> Optional[frozenset[str]]:
    """
    Normalize a kind filter.

    Args:
        value: None, a comma-separated string, or a list of kinds.

    Returns:
        Set of kinds, or None when no kinds are given.
    """
    if value is None:
        return None
    items = value.split(",") if isinstance(value, str) else value
    kinds = frozenset(str(item).strip() for item in items if str(item).strip())
    return kinds or None
