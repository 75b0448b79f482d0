from __future__ import annotations

import pathlib
from datetime import datetime

class Logger():
    log_dir = "./logs/"

    def __init__(self, file: str, tag: str, log_level: str = "info", log_dir: str = None) -> None:
        if self._log_level_to_int(log_level) is None:
            raise ValueError(f"unknown log level '{log_level}'")

        self.log_level = log_level
        self.file = file
        self.tag = tag
        if log_dir is not None:
            self.log_dir = log_dir

    @property
    def log_path(self) -> pathlib.Path:
        return pathlib.Path(self.log_dir) / (self.file + ".log")

    @property
    def error_log_path(self) -> pathlib.Path:
        return pathlib.Path(self.log_dir) / (self.file + "_err.log")

    def _line_header(self, level: str) -> str:
        date = datetime.now().strftime(f"[%d/%m %H:%M:%S]")
        return f"{date}, {level}, {self.tag}: "

    def _append(self, path: pathlib.Path, line: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'a') as f:
            f.write(line + "\n")

    def _log(self, msg: str, level: str) -> None:
        self._append(self.log_path, self._line_header(level) + msg)

    def log(self, msg: str):
        if self.should_log_at_level("info"):
            self._log(msg, "INF")

    def log_error(self, msg: str):
        if self.should_log_at_level("error"):
            self._log(msg, "ERR")
            self._append(self.error_log_path, self._line_header("ERR") + msg)

    def log_debug(self, msg: str):
        if self.should_log_at_level("debug"):
            self._log(msg, "DEB")

    def raise_exception(self, exception: Exception):
        self.log_error(str(exception))
        raise exception

    def child(self, tag: str) -> Logger:
        return Logger(self.file, tag, self.log_level, self.log_dir)

    @classmethod
    def _log_level_to_int(cls, level: str):
        levels_mapping = {
            "debug": 0,
            "info": 1,
            "error": 2,
            "silent": 3
        }

        return levels_mapping.get(level)

    def should_log_at_level(self, level_of_message: str):
        return self._log_level_to_int(level_of_message) >= self._log_level_to_int(self.log_level)
