from pathlib import Path

import pytest

from mcpchecker_junit.core.config import CONFIG_ENV_VAR, Config
from mcpchecker_junit.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_defaults_without_config_file():
    config = Config()
    assert config.input_path is None
    assert config.verbosity == 0
    assert config.log_file is None
    assert config.config_file is None


def test_loads_defaults_from_cwd_file(tmp_path: Path):
    (tmp_path / "mcpchecker_junit.toml").write_text('[mcpchecker_junit]\nverbosity = 2\nlog_file = "run.log"\n')

    config = Config()
    assert config.verbosity == 2
    assert config.log_file == Path("run.log")


def test_explicit_values_win_over_file(tmp_path: Path):
    (tmp_path / "mcpchecker_junit.toml").write_text("[mcpchecker_junit]\nverbosity = 2\n")
    assert Config(verbosity=3).verbosity == 3


def test_tool_table_and_env_var(tmp_path: Path, monkeypatch):
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool.mcpchecker_junit]\nverbosity = 1\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    config = Config()
    assert config.verbosity == 1
    assert config.config_file == path


def test_missing_explicit_config_file_is_error(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="not found"):
        Config(config_file=tmp_path / "nope.toml")


def test_invalid_toml_is_error(tmp_path: Path):
    (tmp_path / "mcpchecker_junit.toml").write_text("[mcpchecker_junit\n")
    with pytest.raises(ConfigurationError, match="Failed to read"):
        Config()


@pytest.mark.parametrize("verbosity", [-1, 4])
def test_verbosity_out_of_range(verbosity):
    with pytest.raises(ConfigurationError):
        Config(verbosity=verbosity)


def test_round_trip_dict(tmp_path: Path):
    config = Config(input_path=tmp_path / "in.json", verbosity=1)
    restored = Config.from_dict(config.to_dict())
    assert restored.input_path == config.input_path
    assert restored.verbosity == 1


def test_input_path_is_not_taken_from_file(tmp_path: Path):
    (tmp_path / "mcpchecker_junit.toml").write_text('[mcpchecker_junit]\ninput_path = "results.json"\nverbosity = 1\n')

    config = Config()
    assert config.input_path is None
    assert config.verbosity == 1


def test_scalar_tool_key_is_ignored(tmp_path: Path):
    (tmp_path / "mcpchecker_junit.toml").write_text("tool = 1\n")

    config = Config()
    assert config.verbosity == 0
