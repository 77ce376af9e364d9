"""
Crawl Pipeline - Sequential Discovery and Fetch

The run moves through three phases:
1. Bootstrap: fetch page 0 to learn the total hit count
2. Paging: for pages 0..=total//rows, fetch the page, then for each id on
   it fetch the detail, normalize it, write the record file and append
   an index entry; pause after every page
3. Done: flush the index

Records are handled strictly in API order, one at a time. The first error
of any kind aborts the run; the index is then never written, while record
files already on disk stay where they are.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ..coreutils.config import CrawlSettings
from ..extract.jorei_api import JoreiAPIClient
from ..extract.queries import DateRange, build_detail_query, build_list_query
from ..load.local_storage import IndexWriter, write_record
from ..transformation.normalizers import build_index_entry, normalize_detail
from .rate_limit import throttle
from .reporting import LoggingProgressReporter, ProgressReporter
import logging

logger = logging.getLogger(__name__)


def page_indices(total_count: int, page_size: int) -> range:
    """Pages to visit: 0 through total_count // page_size inclusive

    When total_count is an exact multiple of page_size the last page
    comes back empty.
    """
    return range(total_count // page_size + 1)


@dataclass
class CrawlResult:
    total_count: int
    pages: int
    records: int
    index_path: str


class CrawlPipeline:
    """Runs one crawl over the reiki API"""

    def __init__(
        self,
        settings: CrawlSettings,
        client: Optional[JoreiAPIClient] = None,
        reporter: Optional[ProgressReporter] = None,
        sleep: Optional[Callable[[int], None]] = None,
    ):
        self.settings = settings
        # A client created here is closed at the end of run(); a passed-in
        # client stays open and belongs to the caller
        self.owns_client = client is None
        self.client = client or JoreiAPIClient(timeout=settings.timeout)
        self.reporter = reporter or LoggingProgressReporter()
        self.sleep = sleep or throttle

    def _list_url(self, date_range: DateRange, page: int) -> str:
        return build_list_query(
            date_range, page, self.settings.rows, base_url=self.settings.api_base
        )

    def run(self, date_range: DateRange = DateRange()) -> CrawlResult:
        """
        Crawl every record in the date range

        Args:
            date_range: Announcement date bounds, open by default

        Returns:
            CrawlResult: Counts for the finished run
        """
        try:
            return self._run(date_range)
        finally:
            if self.owns_client:
                self.client.close()

    def _run(self, date_range: DateRange) -> CrawlResult:
        logger.info(
            f"🚀 Starting crawl (range={date_range.start}..{date_range.end}, "
            f"rows={self.settings.rows})"
        )

        # Bootstrap
        first_page = self.client.fetch_list(self._list_url(date_range, 0))
        total_count = first_page.total_count
        self.reporter.total(total_count)

        index = IndexWriter(self.settings.index_path)
        pages = page_indices(total_count, self.settings.rows)

        # Paging
        for page in pages:
            list_page = self.client.fetch_list(self._list_url(date_range, page))
            for record_id in list_page.record_ids:
                self._process_record(record_id, index)

            self.reporter.sleeping(page, self.settings.sleep_time_ms)
            self.sleep(self.settings.sleep_time_ms)

        # Done
        index.flush()
        self.reporter.finished(len(index))

        return CrawlResult(
            total_count=total_count,
            pages=len(pages),
            records=len(index),
            index_path=self.settings.index_path,
        )

    def _process_record(self, record_id: str, index: IndexWriter):
        url = build_detail_query(record_id, base_url=self.settings.api_base)
        doc = self.client.fetch_detail(url)

        record = normalize_detail(doc, source=url)
        write_record(self.settings.output_dir, record_id, record)
        index.append(build_index_entry(doc))

        self.reporter.record_done(doc.title, doc.id, doc.announcement_date_s)


def run_crawl(
    settings: CrawlSettings,
    date_range: DateRange = DateRange(),
    reporter: Optional[ProgressReporter] = None,
) -> CrawlResult:
    """Convenience function: run a crawl with a fresh API client"""
    pipeline = CrawlPipeline(settings, reporter=reporter)
    return pipeline.run(date_range)
