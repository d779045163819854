import argparse
from enum import Enum
from os import getenv

from core.logger import Logger
from core.utils import env_vars

logger = Logger("config")


class OutputFormat(Enum):
    JSON = "json"
    CONTROL = "control"
    SUMMARY = "summary"


DEBUG = env_vars("DEBUG", "false")
STRIP_INPUT = env_vars("STRIP_INPUT", "true")
OUTPUT_FORMAT = getenv("OUTPUT_FORMAT", OutputFormat.JSON.value).lower()


class BuildConfigError(Exception):
    """Raised when the configuration cannot be built from the command line"""


class NoFilePath(BuildConfigError):
    def __init__(self) -> None:
        super().__init__("no file path provided")


class InvalidOutputFormat(BuildConfigError):
    def __init__(self, value: str) -> None:
        choices = ", ".join(fmt.value for fmt in OutputFormat)
        super().__init__(f"invalid output format {value!r} (choose from {choices})")
        self.value = value


class ExecConf:
    debug: bool
    strip: bool

    def __init__(self) -> None:
        self.debug = DEBUG
        self.strip = STRIP_INPUT

    def __str__(self):
        return f"ExecConf(debug={self.debug},strip={self.strip})"


class Config:
    exec_config: ExecConf
    file_path: str
    output_format: OutputFormat

    def __init__(
        self, file_path: str, output_format: OutputFormat = OutputFormat.JSON
    ) -> None:
        self.exec_config = ExecConf()
        self.file_path = file_path
        self.output_format = output_format

    def __str__(self):
        return f"Config(file_path={self.file_path},output_format={self.output_format.value},exec_config={self.exec_config})"  # noqa

    @classmethod
    def build(cls, args: list[str]) -> "Config":
        """Builds the configuration from the command line (without the program name)"""
        try:
            default_format = OutputFormat(OUTPUT_FORMAT)
        except ValueError as e:
            raise InvalidOutputFormat(OUTPUT_FORMAT) from e

        parser = argparse.ArgumentParser(
            prog="dpkg-parser",
            description="Parse a dpkg status or Packages file into a document",
        )
        parser.add_argument(
            "file_path",
            nargs="?",
            help="Path or http(s) URL of the file to parse (.gz is decompressed)",
        )
        parser.add_argument(
            "--format",
            dest="output_format",
            type=lambda fmt: OutputFormat(fmt.lower()),
            choices=list(OutputFormat),
            default=default_format,
            help="How the parsed document is printed (json, control, summary)",
        )

        parsed = parser.parse_args(args)
        if not parsed.file_path:
            raise NoFilePath()

        config = cls(parsed.file_path, parsed.output_format)
        logger.debug(f"Built {config}")
        return config
