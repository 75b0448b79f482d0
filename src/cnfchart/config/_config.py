from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace

from cnfchart.exceptions import ConfigError

@dataclass(frozen=True)
class Config:
    # Path to a grammar file; None selects the bundled palindrome grammar
    grammar: str = None

    # The variable which must derive the whole word
    start_symbol: str = "S"

    # Directory receiving <name>.log and <name>_err.log
    log_dir: str = "./logs/"

    # One of "debug", "info", "error", "silent"
    log_level: str = "error"

    # Share one cache between threads with at-most-once computation per substring
    thread_safe: bool = False

    table = "cnfchart"

    field_types = {
        "grammar": str,
        "start_symbol": str,
        "log_dir": str,
        "log_level": str,
        "thread_safe": bool,
    }

    log_levels = ("debug", "info", "error", "silent")

    @classmethod
    def from_toml(cls, filename: str) -> Config:
        try:
            with open(filename, 'rb') as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read config file '{filename}': {e.strerror}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"config file '{filename}' is not valid TOML: {e}") from e

        return cls().override(**data.get(cls.table, {}))

    def override(self, **kwargs) -> Config:
        known = {f.name for f in fields(self)}
        unknown = sorted(k for k in kwargs if k not in known)
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

        for key, value in kwargs.items():
            if value is None:
                continue
            if not isinstance(value, Config.field_types[key]):
                raise ConfigError(
                    f"config key '{key}' must be a {Config.field_types[key].__name__}, got {value!r}")

        if kwargs.get("log_level") not in (None, *Config.log_levels):
            raise ConfigError(
                f"log_level must be one of {', '.join(Config.log_levels)}, got '{kwargs['log_level']}'")

        return replace(self, **{k: v for k, v in kwargs.items() if v is not None})
