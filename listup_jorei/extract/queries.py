"""
Query Builder - URL construction for the reiki search API

Two query shapes are supported: a paginated search restricted to the latest
collection (optionally bounded by announcement year), and a single-record
lookup by identifier.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Tuple
from urllib.parse import quote, urlencode

from ..coreutils.config import DEFAULT_API_BASE

# Sentinel the search syntax uses for an open range bound
OPEN_BOUND = "*"

# Facet parameters the API expects on every search query
FACET_PARAMS: List[Tuple[str, str]] = [
    ("f.municipality_id.facet.limit", "1788"),
    ("facet.mincount", "1"),
    ("facet.range", "announcement_date"),
    ("facet.range.gap", "+1YEAR"),
    ("facet.range.start", "1883-01-01T00:00:00Z"),
    ("facet.range.end", "NOW"),
]

FACET_FIELDS = ["municipality_type", "city", "type", "h_type", "municipality_id"]


@dataclass(frozen=True)
class DateRange:
    """Optional announcement date bounds; None means open-ended"""

    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self):
        # Only the year reaches the query, so bounds within one year never conflict
        if self.start and self.end and self.start.year > self.end.year:
            raise ValueError(f"start year {self.start.year} is after end year {self.end.year}")

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None


def format_bound(bound: Optional[date]) -> str:
    """Render a bound as a zero-padded 4-digit year, or the open sentinel"""
    if bound is None:
        return OPEN_BOUND
    return f"{bound.year:04d}"


def page_offset(page: int, page_size: int) -> int:
    return page * page_size


def build_list_query(
    date_range: DateRange,
    page: int,
    page_size: int,
    base_url: str = DEFAULT_API_BASE,
) -> str:
    """
    Build the paginated search URL

    Args:
        date_range: Announcement date bounds
        page: Zero-based page index
        page_size: Records per page

    Returns:
        str: Full request URL
    """
    q = (
        "collection:latest AND announcement_date:"
        f"[{format_bound(date_range.start)} TO {format_bound(date_range.end)}]"
    )
    params = list(FACET_PARAMS)
    params += [
        ("q", q),
        ("start", str(page_offset(page, page_size))),
        ("rows", str(page_size)),
        ("fq", ""),
        ("facet", "true"),
    ]
    params += [("facet.field", field) for field in FACET_FIELDS]
    return f"{base_url}?{urlencode(params, quote_via=quote)}"


def build_detail_query(record_id: str, base_url: str = DEFAULT_API_BASE) -> str:
    """Build the URL selecting one record by id with all fields populated"""
    params = [("q", f"ids:{record_id}"), ("all", "true")]
    return f"{base_url}?{urlencode(params, quote_via=quote)}"
