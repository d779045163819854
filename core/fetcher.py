import gzip

from requests import get

from core.logger import Logger
from core.utils import is_gzipped, is_url


class ReadFileError(Exception):
    """Describes an error that may occur when reading the input"""


class PathDoesNotExist(ReadFileError):
    def __init__(self, path: str) -> None:
        super().__init__("path does not exist")
        self.path = path


class PermissionDenied(ReadFileError):
    def __init__(self, path: str) -> None:
        super().__init__("permission denied")
        self.path = path


class InvalidEncoding(ReadFileError):
    def __init__(self, path: str) -> None:
        super().__init__("stream did not contain valid UTF-8")
        self.path = path


class Fetcher:
    def __init__(self, name: str, source: str):
        self.name = name
        self.source = source
        self.logger = Logger(f"{name}_fetcher")

    def fetch(self) -> bytes:
        if not self.source:
            raise ValueError("source is not set")

        if is_url(self.source):
            content = self.fetch_remote()
        else:
            content = self.fetch_local()

        if is_gzipped(self.source):
            self.logger.debug(f"decompressing {self.source}")
            content = gzip.decompress(content)

        return content

    def fetch_remote(self) -> bytes:
        self.logger.debug(f"downloading {self.source}")
        response = get(self.source)
        try:
            response.raise_for_status()
        except Exception as e:
            self.logger.error(f"error fetching {self.source}: {e}")
            raise e
        return response.content

    def fetch_local(self) -> bytes:
        self.logger.debug(f"reading {self.source}")
        # only the two expected failures are mapped, any other OSError propagates
        try:
            with open(self.source, "rb") as f:
                return f.read()
        except FileNotFoundError as e:
            raise PathDoesNotExist(self.source) from e
        except PermissionError as e:
            raise PermissionDenied(self.source) from e

    def read(self) -> str:
        """Fetches the source and decodes it as text"""
        content = self.fetch()
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidEncoding(self.source) from e
