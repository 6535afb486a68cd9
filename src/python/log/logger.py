import json
import pathlib
import sys
from datetime import datetime, timezone
from typing import Any, BinaryIO, Optional


class Logger:
    """A simple class for logging. Each program writes to its own file in the log
    directory, named after the running script.
    """

    def __init__(self, log_directory: pathlib.Path) -> None:
        self._log_directory = log_directory
        self._log_file: Optional[BinaryIO] = None

    def _open_log_file(self) -> BinaryIO:
        filepath = pathlib.Path(sys.argv[0])
        # If sys.argv returns an empty string e.g. when in a python3 shell, we assign a
        # generic filename.
        filename = filepath.stem if filepath.stem else "unknown"
        self._log_directory.mkdir(parents=True, exist_ok=True)
        file_path = (self._log_directory / filename).with_suffix(".log")

        return open(file_path, "ab", buffering=0)

    def debug(self, msg: str) -> None:
        self._write_to_log("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._write_to_log("INFO", msg)

    def error(self, msg: str) -> None:
        self._write_to_log("ERROR", msg)

    def warning(self, msg: str) -> None:
        self._write_to_log("WARNING", msg)

    def data(self, **fields: Any) -> None:
        """Logs structured data as a single json line."""
        self._write_to_log("DATA", json.dumps(fields, default=str))

    def close(self) -> None:
        if self._log_file is not None:
            self._log_file.close()
            self._log_file = None

    def _write_to_log(self, level: str, msg: str) -> None:
        # Opened on first write so importing never touches the filesystem.
        if self._log_file is None:
            self._log_file = self._open_log_file()

        log_str = f"{_iso_time()} {level.upper()}: {msg}\n"
        self._log_file.write(log_str.encode("utf-8"))


def _iso_time() -> str:
    """Current timestamp as a string."""
    return datetime.now(tz=timezone.utc).isoformat()
