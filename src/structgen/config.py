"""Configuration management for structgen."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from structgen.exceptions import ConfigError

# Dialects whose DDL accepts inline column comments.
COMMENT_DIALECTS = frozenset({"mysql", "mymysql"})

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GenerationOptions:
    """Switches controlling which sub-tags the tag formatter emits.

    Args:
        gen_json: Emit a ``json:"<column>"`` sub-tag.
        gen_comment: Emit a ``comment:"<text>"`` sub-tag.
        support_comment: Target dialect supports inline comments; embeds
            ``comment('<text>')`` into the xorm sub-tag.
    """

    gen_json: bool = False
    gen_comment: bool = False
    support_comment: bool = False


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean setting such as ``yes`` or ``0``."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean value for {name}: '{value}'")


def load_config_file(
    profile: str = "DEFAULT", path: Optional[Path] = None
) -> dict[str, str]:
    """Load settings for a profile from ~/.structgen.cfg.

    Args:
        profile: Profile name to load (default: "DEFAULT")
        path: Override the config file location

    Returns:
        Dict of raw string settings; empty if the file does not exist

    Raises:
        ConfigError: If the profile doesn't exist
    """
    cfg_path = path or Path.home() / ".structgen.cfg"
    if not cfg_path.exists():
        return {}

    config = configparser.ConfigParser()
    try:
        config.read(cfg_path)
    except configparser.Error as e:
        raise ConfigError(f"Cannot parse {cfg_path}: {e}") from e

    if profile not in config:
        available = [s for s in config.sections() if s != "DEFAULT"] or ["DEFAULT"]
        raise ConfigError(
            f"Profile '{profile}' not found in {cfg_path}. "
            f"Available profiles: {', '.join(available)}"
        )

    return {key: value.strip() for key, value in config[profile].items()}


@dataclass
class Config:
    """Configuration for structgen."""

    schema_path: str = "schema"
    package: str = "models"
    dialect: str = "mysql"
    gen_json: bool = False
    gen_comment: bool = False

    @classmethod
    def from_env(
        cls,
        *,
        schema_path: Optional[str] = None,
        package: Optional[str] = None,
        dialect: Optional[str] = None,
        gen_json: Optional[bool] = None,
        gen_comment: Optional[bool] = None,
        profile: Optional[str] = None,
        config_path: Optional[Path] = None,
    ) -> "Config":
        """Load configuration from the config file, env vars, with CLI overrides.

        Priority (highest to lowest):
        1. Explicit parameters (CLI args)
        2. Environment variables
        3. ~/.structgen.cfg profile
        4. Defaults
        """
        profile_name = profile or os.environ.get("STRUCTGEN_PROFILE", "DEFAULT")
        file_cfg = load_config_file(profile_name, config_path)

        def resolve(explicit, env_key, cfg_key, default):
            if explicit is not None:
                return explicit
            env_val = os.environ.get(env_key)
            if env_val is not None:
                return env_val
            return file_cfg.get(cfg_key, default)

        def resolve_bool(explicit, env_key, cfg_key):
            value = resolve(explicit, env_key, cfg_key, False)
            if isinstance(value, bool):
                return value
            return parse_bool(value, env_key)

        return cls(
            schema_path=resolve(schema_path, "STRUCTGEN_SCHEMA_PATH", "schema_path", "schema"),
            package=resolve(package, "STRUCTGEN_PACKAGE", "package", "models"),
            dialect=resolve(dialect, "STRUCTGEN_DIALECT", "dialect", "mysql").lower(),
            gen_json=resolve_bool(gen_json, "STRUCTGEN_GEN_JSON", "gen_json"),
            gen_comment=resolve_bool(gen_comment, "STRUCTGEN_GEN_COMMENT", "gen_comment"),
        )

    @property
    def support_comment(self) -> bool:
        """Whether the configured dialect supports inline column comments."""
        return self.dialect in COMMENT_DIALECTS

    def generation_options(self) -> GenerationOptions:
        """Build the tag formatter switches for this configuration."""
        return GenerationOptions(
            gen_json=self.gen_json,
            gen_comment=self.gen_comment,
            support_comment=self.support_comment,
        )
