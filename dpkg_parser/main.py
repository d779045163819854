#!/usr/bin/env pkgx uv run

import sys

from core.config import BuildConfigError, Config
from core.fetcher import Fetcher, ReadFileError
from core.logger import Logger
from dpkg_parser.formatter import render
from dpkg_parser.parser import ParseError, parse
from dpkg_parser.structs import Document

logger = Logger("dpkg_parser")


def run(config: Config, logger: Logger) -> Document:
    """Reads, parses and prints the file described by config"""
    fetcher = Fetcher("dpkg", config.file_path)
    contents = fetcher.read()
    logger.debug(f"Read {len(contents)} characters from {config.file_path}")

    if config.exec_config.strip:
        contents = contents.strip()

    document = parse(contents)
    logger.debug(f"Parsed {len(document.packages)} packages")

    print(render(document, config.output_format))
    return document


def main(args: list[str] | None = None) -> int:
    if args is None:
        args = sys.argv[1:]

    try:
        config = Config.build(args)
    except BuildConfigError as e:
        logger.error(f"Problem parsing arguments: {e}")
        return 2

    mode = Logger.VERBOSE if config.exec_config.debug else Logger.NORMAL
    log = Logger("dpkg_parser", mode=mode)
    log.debug(f"Config: {config}")

    try:
        document = run(config, log)
    except ReadFileError as e:
        log.error(f"Could not read {config.file_path}: {e}")
        log.exception()
        return 1
    except ParseError as e:
        # the message carries the offending stanza
        log.error(f"Could not parse {config.file_path}: {e}")
        log.exception()
        return 1

    log.log(f"Parsed {len(document.packages)} packages from {config.file_path}")

    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
