import sys
import time
import traceback

from core.utils import env_vars

DEBUG = env_vars("DEBUG", "false")


class Logger:
    SILENT = 0
    NORMAL = 1
    VERBOSE = 2

    def __init__(self, name: str, mode: int = NORMAL, start: float | None = None):
        self.name = name
        self.start = start if start is not None else time.time()
        self.mode = Logger.VERBOSE if DEBUG else mode

    def print(self, msg: str) -> None:
        # stdout is reserved for the parsed document
        print(
            f"{self.time_diff():.2f}: [{self.name}]: {msg}", file=sys.stderr, flush=True
        )

    def error(self, message: str) -> None:
        # errors are printed regardless of mode
        self.print(f"[ERROR]: {message}")

    def log(self, message: str) -> None:
        if self.mode >= Logger.NORMAL:
            self.print(message)

    def debug(self, message: str) -> None:
        if self.mode >= Logger.VERBOSE:
            self.print(f"[DEBUG]: {message}")

    def warn(self, message: str) -> None:
        if self.mode >= Logger.NORMAL:
            self.print(f"[WARN]: {message}")

    def is_verbose(self) -> bool:
        return self.mode >= Logger.VERBOSE

    def time_diff(self) -> float:
        return time.time() - self.start

    def exception(self) -> None:
        """In verbose mode, prints the exception being handled with its traceback"""
        exc_type, exc_value, exc_traceback = sys.exc_info()
        if exc_type is None or not self.is_verbose():
            return
        self.print(f"[DEBUG]: {exc_type.__name__}: {exc_value}")
        for line in traceback.format_tb(exc_traceback):
            self.print(line.rstrip())
