"""
Shared fixtures: a fake requests session serving a small in-memory corpus.
"""

import os
import sys
from urllib.parse import parse_qs, urlparse

import pytest
import requests

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from listup_jorei.coreutils.config import CrawlSettings
from listup_jorei.orchestration.reporting import ProgressReporter


def make_doc(record_id: str, title: str, **overrides) -> dict:
    """Raw API document with every required field"""
    doc = {
        "collection": ["latest"],
        "collected_date": ["2023-04-01"],
        "updated_date": ["2022-01-01T15:30:00Z", "2022-06-30T10:00:00Z"],
        "municipality_id": "011002",
        "prefecture": "北海道",
        "city": "札幌市",
        "prefecture_kana": "ほっかいどう",
        "city_kana": "さっぽろし",
        "municipality_type": "市",
        "area": "北海道",
        "id": record_id,
        "reiki_id": f"reiki-{record_id}",
        "h1": None,
        "title": title,
        "announcement_date": "2022-01-01T15:30:00Z",
        "type": "条例",
        "last_updated_date": "2022-06-30T16:00:00Z",
        "reiki_dates": ["令和4年1月2日"],
        "reiki_numbers": ["条例第1号"],
        "original_url": f"https://example.jp/{record_id}.html",
        "has_version": False,
        "file_type": "html",
        "h_type": ["例規"],
        "content": "第1条 この条例は...",
        "announcement_date_s": "2022-01-02",
    }
    doc.update(overrides)
    return doc


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.text is not None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeJoreiSession:
    """Answers list and detail queries from a list of raw docs

    ``total_count`` overrides numFound so paging can be tested without a
    matching number of docs.
    """

    def __init__(self, docs, total_count=None, detail_overrides=None):
        self.docs = docs
        self.total_count = len(docs) if total_count is None else total_count
        self.detail_overrides = detail_overrides or {}
        self.verify = False
        self.requested = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.requested.append(url)
        query = parse_qs(urlparse(url).query, keep_blank_values=True)
        q = query["q"][0]

        if q.startswith("ids:"):
            record_id = q[len("ids:"):]
            if record_id in self.detail_overrides:
                return self.detail_overrides[record_id]
            docs = [d for d in self.docs if d["id"] == record_id]
            return FakeResponse(
                {"response": {"numFound": len(docs), "start": 0, "docs": docs}}
            )

        start = int(query["start"][0])
        rows = int(query["rows"][0])
        page_docs = [
            {"id": d["id"], "title": d["title"]} for d in self.docs[start:start + rows]
        ]
        return FakeResponse(
            {
                "response": {
                    "numFound": self.total_count,
                    "start": start,
                    "docs": page_docs,
                }
            }
        )

    def close(self):
        self.closed = True

    def list_requests(self):
        return [u for u in self.requested if "ids%3A" not in u]

    def detail_requests(self):
        return [u for u in self.requested if "ids%3A" in u]


class RecordingProgressReporter(ProgressReporter):
    """Keeps every progress event as a tuple, in order"""

    def __init__(self):
        self.events = []

    def total(self, count):
        self.events.append(("total", count))

    def record_done(self, title, record_id, date_s):
        self.events.append(("record_done", title, record_id, date_s))

    def sleeping(self, page, duration_ms):
        self.events.append(("sleeping", page, duration_ms))

    def finished(self, records):
        self.events.append(("finished", records))

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def corpus():
    return [
        make_doc("A001", "札幌市手数料条例"),
        make_doc("B002", "札幌市公園条例", prefecture="北海道", city="札幌市"),
        make_doc("C003", "青森市環境条例", prefecture="青森県", city="青森市"),
    ]


@pytest.fixture
def settings(tmp_path):
    return CrawlSettings(
        output_dir=str(tmp_path / "output"),
        index_path=str(tmp_path / "index.json"),
        rows=50,
        sleep_time_ms=500,
    )
