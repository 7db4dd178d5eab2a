"""
Configuration parameters for mcfetch.

Values come from CLI flags, or from the [mcfetch] table of a TOML file:

    [mcfetch]
    version = "1.20.1"
    server = false
    root_path = "~/games/minecraft"
    request_timeout = 30
"""

import dataclasses
import pathlib
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

try:
    import tomllib
except ModuleNotFoundError:
    # Python < 3.11
    import tomli as tomllib

from mcfetch.mcfetch_exceptions import ConfigError
from mcfetch.mcfetch_settings import MCFetchSettings


@dataclass
class MCFetchConfig:
    """
    Configuration for a single fetch run.
    """

    version: str = "release"
    server: bool = False
    root_path: Optional[pathlib.Path] = None
    manifest_url: str = MCFetchSettings.DEFAULT_MANIFEST_URL
    request_timeout: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.version, str) or not self.version:
            raise ConfigError("version must be a non-empty string")
        if not isinstance(self.server, bool):
            raise ConfigError("server must be a boolean")
        if self.root_path is not None:
            self.root_path = pathlib.Path(self.root_path).expanduser()
        if self.request_timeout is not None:
            if isinstance(self.request_timeout, bool) or not isinstance(self.request_timeout, (int, float)):
                raise ConfigError("request_timeout must be a number of seconds")
            if self.request_timeout <= 0:
                raise ConfigError("request_timeout must be positive")

    def resolved_root(self) -> pathlib.Path:
        """Returns the cache root, falling back to the default location."""
        if self.root_path is not None:
            return self.root_path
        return MCFetchSettings.get_default_root()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "MCFetchConfig":
        """
        Create an MCFetchConfig from a dictionary.

        Raises:
            ConfigError: If the dictionary holds unknown keys or invalid values
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**config_dict)

    @classmethod
    def from_toml(cls, path: Union[str, pathlib.Path]) -> "MCFetchConfig":
        """
        Load the [mcfetch] table of a TOML file.

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Could not parse config file {path}: {e}") from e

        section = data.get("mcfetch", {})
        if not isinstance(section, dict):
            raise ConfigError(f"[mcfetch] in {path} must be a table")
        return cls.from_dict(section)

    def merged(self, **overrides: Any) -> "MCFetchConfig":
        """Returns a copy with the non-None overrides applied."""
        return dataclasses.replace(self, **{k: v for k, v in overrides.items() if v is not None})
