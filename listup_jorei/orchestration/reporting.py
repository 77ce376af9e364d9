"""
Progress reporting for crawl runs.

The pipeline never logs progress itself; it calls a reporter that is
passed in. The default one writes to the standard logging module.
"""

from typing import Optional
import logging

logger = logging.getLogger(__name__)


class ProgressReporter:
    """Interface for crawl progress events"""

    def total(self, count: int):
        pass

    def record_done(self, title: str, record_id: str, date_s: Optional[str]):
        pass

    def sleeping(self, page: int, duration_ms: int):
        pass

    def finished(self, records: int):
        pass


class LoggingProgressReporter(ProgressReporter):
    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def total(self, count: int):
        self.log.info(f"📊 number of all jorei: {count}")

    def record_done(self, title: str, record_id: str, date_s: Optional[str]):
        self.log.info(f"✅ done: {title}({record_id}) at ({date_s or 'None'})")

    def sleeping(self, page: int, duration_ms: int):
        self.log.info(f"💤 sleep {duration_ms}ms after page {page}")

    def finished(self, records: int):
        self.log.info(f"🎉 all done: {records} records")

