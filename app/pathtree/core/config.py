"""pathtree configuration.

Configuration is stored in ~/.config/pathtree/config.toml. A missing file
means defaults; an unreadable or invalid file is an error.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pathtree.core.paths import get_config_path

logger = logging.getLogger(__name__)


class PathTreeConfig(BaseModel):
    """Settings for tree building and display.

    Attributes:
        use_git_ignore: Default for the --git-ignore flag. Accepted but
            ignore-file filtering is not implemented yet.
        max_depth: Maximum depth rendered by ``pathtree show`` (None = unlimited).
        show_hidden: Render entries whose name starts with a dot.
    """

    model_config = ConfigDict(extra="forbid")

    use_git_ignore: Annotated[
        bool,
        Field(description="Respect ignore files (no effect yet)"),
    ] = False
    max_depth: Annotated[
        int | None,
        Field(ge=0, description="Maximum rendered depth"),
    ] = None
    show_hidden: Annotated[
        bool,
        Field(description="Render dot-prefixed entries"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> PathTreeConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit config file. If None, uses the default config path
            and falls back to defaults when that file does not exist.

    Returns:
        Validated PathTreeConfig object.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config at %s, using defaults", config_path)
        return PathTreeConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return PathTreeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: PathTreeConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and then
    moved into place with os.replace().

    Args:
        config: The PathTreeConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: PathTreeConfig) -> dict[str, object]:
    """Convert PathTreeConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are omitted.
    """
    return config.model_dump(exclude_none=True)
