"""Tests for Config module."""

import pytest

from structgen.config import Config, GenerationOptions, load_config_file, parse_bool
from structgen.exceptions import ConfigError


def write_cfg(home, content: str):
    path = home / ".structgen.cfg"
    path.write_text(content)
    return path


class TestConfigDefaults:
    """Test Config default values."""

    def test_config_defaults(self):
        """Config should have sensible defaults."""
        config = Config()
        assert config.schema_path == "schema"
        assert config.package == "models"
        assert config.dialect == "mysql"
        assert config.gen_json is False
        assert config.gen_comment is False

    def test_generation_options_defaults(self):
        """All switches are off by default."""
        assert GenerationOptions() == GenerationOptions(False, False, False)


class TestConfigFromEnv:
    """Test Config.from_env() resolution order."""

    def test_defaults_without_sources(self):
        """Without file or env, from_env returns defaults."""
        assert Config.from_env() == Config()

    def test_config_loads_from_env(self, monkeypatch):
        """Config.from_env() should load values from environment variables."""
        monkeypatch.setenv("STRUCTGEN_SCHEMA_PATH", "db/schema")
        monkeypatch.setenv("STRUCTGEN_PACKAGE", "entities")
        monkeypatch.setenv("STRUCTGEN_DIALECT", "Postgres")
        monkeypatch.setenv("STRUCTGEN_GEN_JSON", "yes")
        monkeypatch.setenv("STRUCTGEN_GEN_COMMENT", "1")

        config = Config.from_env()

        assert config.schema_path == "db/schema"
        assert config.package == "entities"
        assert config.dialect == "postgres"
        assert config.gen_json is True
        assert config.gen_comment is True

    def test_explicit_overrides_env(self, monkeypatch):
        """Explicit arguments win over environment variables."""
        monkeypatch.setenv("STRUCTGEN_PACKAGE", "entities")
        monkeypatch.setenv("STRUCTGEN_GEN_JSON", "true")
        config = Config.from_env(package="models2", gen_json=False)
        assert config.package == "models2"
        assert config.gen_json is False

    def test_env_overrides_file(self, isolated_env, monkeypatch):
        """Environment variables win over the config file."""
        write_cfg(isolated_env, "[DEFAULT]\npackage = fromfile\ndialect = sqlite3\n")
        monkeypatch.setenv("STRUCTGEN_PACKAGE", "fromenv")
        config = Config.from_env()
        assert config.package == "fromenv"
        assert config.dialect == "sqlite3"

    def test_profile_selection(self, isolated_env, monkeypatch):
        """STRUCTGEN_PROFILE selects a section of the config file."""
        write_cfg(
            isolated_env,
            "[DEFAULT]\npackage = base\n\n[pg]\ndialect = postgres\ngen_comment = on\n",
        )
        monkeypatch.setenv("STRUCTGEN_PROFILE", "pg")
        config = Config.from_env()
        assert config.package == "base"
        assert config.dialect == "postgres"
        assert config.gen_comment is True

    def test_unknown_profile(self, isolated_env):
        """Asking for a missing profile is a configuration error."""
        write_cfg(isolated_env, "[dev]\npackage = x\n")
        with pytest.raises(ConfigError, match="Available profiles: dev"):
            Config.from_env(profile="prod")

    def test_invalid_boolean(self, monkeypatch):
        """Unparseable boolean settings are rejected."""
        monkeypatch.setenv("STRUCTGEN_GEN_JSON", "maybe")
        with pytest.raises(ConfigError, match="STRUCTGEN_GEN_JSON"):
            Config.from_env()


class TestConfigFile:
    """Tests for load_config_file."""

    def test_missing_file(self, tmp_path):
        """A missing config file yields no settings."""
        assert load_config_file(path=tmp_path / "none.cfg") == {}

    def test_reads_profile(self, tmp_path):
        """Values are read from the requested profile."""
        path = tmp_path / "x.cfg"
        path.write_text("[dev]\npackage = dev_models \n")
        assert load_config_file("dev", path)["package"] == "dev_models"

    @pytest.mark.parametrize("value", ["1", "TRUE", "yes", "On"])
    def test_parse_bool_true(self, value):
        assert parse_bool(value, "x") is True

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_parse_bool_false(self, value):
        assert parse_bool(value, "x") is False


class TestGenerationOptions:
    """Tests for deriving formatter switches from config."""

    @pytest.mark.parametrize(
        "dialect,supported",
        [("mysql", True), ("mymysql", True), ("postgres", False), ("sqlite3", False)],
    )
    def test_comment_support_by_dialect(self, dialect, supported):
        """Only MySQL dialects support inline comments."""
        assert Config(dialect=dialect).support_comment is supported

    def test_generation_options(self):
        """Switches are copied from the configuration."""
        options = Config(dialect="postgres", gen_json=True).generation_options()
        assert options == GenerationOptions(
            gen_json=True, gen_comment=False, support_comment=False
        )
