from __future__ import annotations

import pytest

from cnfchart import Config, ConfigError

def test_defaults():
    config = Config()
    assert config.grammar is None
    assert config.start_symbol == "S"
    assert config.log_level == "error"
    assert not config.thread_safe

def test_from_toml(tmp_path):
    path = tmp_path / "cnfchart.toml"
    path.write_text('[cnfchart]\nstart_symbol = "X"\nthread_safe = true\nlog_level = "info"\n')
    config = Config.from_toml(str(path))
    assert config.start_symbol == "X"
    assert config.thread_safe
    assert config.log_level == "info"
    assert config.grammar is None

def test_toml_without_table_gives_defaults(tmp_path):
    path = tmp_path / "cnfchart.toml"
    path.write_text('[other]\nkey = 1\n')
    assert Config.from_toml(str(path)) == Config()

def test_unknown_key(tmp_path):
    path = tmp_path / "cnfchart.toml"
    path.write_text('[cnfchart]\nstart = "X"\n')
    with pytest.raises(ConfigError) as e:
        Config.from_toml(str(path))
    assert "start" in str(e.value)

def test_invalid_toml(tmp_path):
    path = tmp_path / "cnfchart.toml"
    path.write_text('[cnfchart\n')
    with pytest.raises(ConfigError):
        Config.from_toml(str(path))

def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        Config.from_toml(str(tmp_path / "missing.toml"))

def test_override_ignores_unset_values():
    config = Config(start_symbol="X").override(start_symbol=None, grammar="g.txt")
    assert config.start_symbol == "X"
    assert config.grammar == "g.txt"

def test_unknown_log_level(tmp_path):
    path = tmp_path / "cnfchart.toml"
    path.write_text('[cnfchart]\nlog_level = "warning"\n')
    with pytest.raises(ConfigError) as e:
        Config.from_toml(str(path))
    assert "warning" in str(e.value)

@pytest.mark.parametrize("key, value", [
    ("thread_safe", "no"),
    ("thread_safe", 1),
    ("start_symbol", 5),
    ("grammar", ["g.txt"]),
])
def test_values_must_match_field_types(key, value):
    with pytest.raises(ConfigError) as e:
        Config().override(**{key: value})
    assert key in str(e.value)

def test_silent_log_level_is_accepted():
    assert Config().override(log_level="silent").log_level == "silent"
