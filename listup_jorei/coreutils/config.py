"""
Crawl configuration.

Values come from the command line first, then from the environment
(optionally loaded from a ``.env`` file), then from the defaults below.
"""

from dataclasses import dataclass
from typing import Optional

from .env import env_float, env_get, env_int

DEFAULT_API_BASE = "https://jorei.slis.doshisha.ac.jp/api/reiki/select"
DEFAULT_ROWS = 50
DEFAULT_SLEEP_TIME_MS = 500
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class CrawlSettings:
    """Everything a crawl run needs besides the date range"""

    output_dir: str
    index_path: str
    rows: int = DEFAULT_ROWS
    sleep_time_ms: int = DEFAULT_SLEEP_TIME_MS
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT
    log_dir: Optional[str] = None

    def __post_init__(self):
        if self.rows <= 0:
            raise ValueError(f"rows must be positive, got {self.rows}")
        if self.sleep_time_ms < 0:
            raise ValueError(f"sleep time must not be negative, got {self.sleep_time_ms}")

    @classmethod
    def from_env(
        cls,
        output_dir: str,
        index_path: str,
        rows: Optional[int] = None,
        sleep_time_ms: Optional[int] = None,
    ) -> "CrawlSettings":
        """Build settings, falling back to JOREI_* environment variables"""
        return cls(
            output_dir=output_dir,
            index_path=index_path,
            rows=rows if rows is not None else env_int("JOREI_ROWS", DEFAULT_ROWS),
            sleep_time_ms=(
                sleep_time_ms
                if sleep_time_ms is not None
                else env_int("JOREI_SLEEP_TIME_MS", DEFAULT_SLEEP_TIME_MS)
            ),
            api_base=env_get("JOREI_API_BASE", DEFAULT_API_BASE),
            timeout=env_float("JOREI_TIMEOUT", DEFAULT_TIMEOUT),
            log_dir=env_get("JOREI_LOG_DIR"),
        )
