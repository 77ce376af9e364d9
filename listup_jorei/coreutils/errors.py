"""
Error taxonomy for the crawler.

Nothing in the pipeline recovers from these locally; they travel up to the
CLI, which logs them and exits non-zero.
"""


class JoreiError(Exception):
    """Base class for every crawler failure"""


class TransportError(JoreiError):
    """Connection, timeout, or HTTP status failure"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"HTTP request failed for {url}: {message}")


class DecodeError(JoreiError):
    """Response body is not JSON or does not match the expected shape"""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Invalid response from {source}: {message}")


class NotFoundError(DecodeError):
    """Detail query returned no record"""


class OutputError(JoreiError):
    """Filesystem failure while writing a record or the index"""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {message}")
